"""
Typed GraphQL errors surfaced by resolvers.

Every error carries a machine-readable ``code`` in its extensions and,
where the failure can be pinned to specific arguments, a list of
``issues`` of the form ``{"argumentPath": [...], "message": "..."}``.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar

from graphql import GraphQLError


class ErrorCode(str, Enum):
    UNAUTHENTICATED = "unauthenticated"
    INVALID_ARGUMENTS = "invalid_arguments"
    ARGUMENTS_ASSOCIATED_RESOURCES_NOT_FOUND = "arguments_associated_resources_not_found"
    FORBIDDEN_ACTION_ON_ARGUMENTS_ASSOCIATED_RESOURCES = (
        "forbidden_action_on_arguments_associated_resources"
    )
    UNAUTHORIZED_ACTION_ON_ARGUMENTS_ASSOCIATED_RESOURCES = (
        "unauthorized_action_on_arguments_associated_resources"
    )
    UNEXPECTED = "unexpected"


@dataclass(frozen=True)
class Issue:
    """A problem tied to one argument of the operation."""

    argument_path: tuple[str | int, ...]
    message: str | None = None

    def to_extension(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"argumentPath": list(self.argument_path)}
        if self.message is not None:
            payload["message"] = self.message
        return payload


class AgendaGraphQLError(GraphQLError):
    """Base class for every typed resolver error."""

    code: ClassVar[ErrorCode]
    default_message: ClassVar[str]

    def __init__(self, issues: Iterable[Issue] | None = None, message: str | None = None):
        self.issues: list[Issue] = list(issues or [])
        extensions: dict[str, Any] = {"code": self.code.value}
        if self.issues:
            extensions["issues"] = [issue.to_extension() for issue in self.issues]
        super().__init__(message or self.default_message, extensions=extensions)


class UnauthenticatedError(AgendaGraphQLError):
    code = ErrorCode.UNAUTHENTICATED
    default_message = "You must be authenticated to perform this action."


class InvalidArgumentsError(AgendaGraphQLError):
    code = ErrorCode.INVALID_ARGUMENTS
    default_message = "You have provided invalid arguments for this action."


class AssociatedResourceNotFoundError(AgendaGraphQLError):
    code = ErrorCode.ARGUMENTS_ASSOCIATED_RESOURCES_NOT_FOUND
    default_message = "No associated resources found for the provided arguments."


class ForbiddenActionOnAssociatedResourcesError(AgendaGraphQLError):
    code = ErrorCode.FORBIDDEN_ACTION_ON_ARGUMENTS_ASSOCIATED_RESOURCES
    default_message = "This action is forbidden on the resources associated to the provided arguments."


class UnauthorizedActionOnAssociatedResourcesError(AgendaGraphQLError):
    code = ErrorCode.UNAUTHORIZED_ACTION_ON_ARGUMENTS_ASSOCIATED_RESOURCES
    default_message = (
        "You are not authorized to perform this action on the resources "
        "associated to the provided arguments."
    )


class UnexpectedError(AgendaGraphQLError):
    code = ErrorCode.UNEXPECTED
    default_message = "Something went wrong. Please try again later."


def issue_at(*argument_path: str | int, message: str | None = None) -> Issue:
    return Issue(argument_path=tuple(argument_path), message=message)

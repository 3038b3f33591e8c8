"""
Argument schemas for agenda operations.

Resolvers validate raw GraphQL input against these Pydantic models before
touching the database. Validation failures are reported as
``invalid_arguments`` issues whose paths are rooted at ``input``.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any, TypeVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, ValidationError, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

from .errors import InvalidArgumentsError, Issue

ArgumentsT = TypeVar("ArgumentsT", bound=BaseModel)


class AgendaItemKind(str, Enum):
    GENERAL = "general"
    NOTE = "note"
    SCRIPTURE = "scripture"
    SONG = "song"


# Fields an agenda item of a given type may not carry
_DISALLOWED_FIELDS: dict[AgendaItemKind, frozenset[str]] = {
    AgendaItemKind.NOTE: frozenset({"duration", "key"}),
    AgendaItemKind.GENERAL: frozenset({"key"}),
    AgendaItemKind.SCRIPTURE: frozenset({"key"}),
    AgendaItemKind.SONG: frozenset(),
}


class CreateAgendaItemArguments(BaseModel):
    """Validated input of the createAgendaItem mutation."""

    # Surrounding whitespace never counts towards a value
    model_config = ConfigDict(populate_by_name=True, extra="forbid", str_strip_whitespace=True)

    folder_id: UUID = Field(alias="folderId")
    name: str = Field(min_length=1, max_length=256)
    type: AgendaItemKind
    description: str | None = Field(default=None, min_length=1, max_length=2048)
    duration: str | None = Field(default=None, min_length=1, max_length=1024)
    key: str | None = Field(default=None, min_length=1, max_length=256)

    @field_validator("duration", "key")
    @classmethod
    def _allowed_for_type(cls, value: str | None, info: ValidationInfo) -> str | None:
        if value is None:
            return value
        kind = info.data.get("type")
        if kind is not None and info.field_name in _DISALLOWED_FIELDS[kind]:
            raise PydanticCustomError(
                "agenda_item_type",
                'Cannot be provided for an agenda item of type "{kind}".',
                {"kind": kind.value},
            )
        return value


class QueryAgendaItemArguments(BaseModel):
    """Validated input of the agendaItem query."""

    model_config = ConfigDict(extra="forbid")

    id: UUID


def parse_arguments(
    schema: type[ArgumentsT], raw: Mapping[str, Any]
) -> ArgumentsT | InvalidArgumentsError:
    """Validate ``raw`` input against ``schema``.

    Returns the parsed model, or an InvalidArgumentsError listing every
    problem with its path under ``input``.
    """
    try:
        return schema.model_validate(dict(raw))
    except ValidationError as e:
        issues = [
            Issue(argument_path=("input", *error["loc"]), message=error["msg"])
            for error in e.errors()
        ]
        return InvalidArgumentsError(issues=issues)

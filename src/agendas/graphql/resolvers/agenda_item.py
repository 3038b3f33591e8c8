"""
Agenda item resolvers.

createAgendaItem runs as an ordered list of steps. Each step returns either the
state the next step needs or a typed error; the first error returned is raised
and nothing after it runs. The only write, a single insert, happens after
every check has passed.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any
from uuid import UUID

import strawberry

from ...agenda.repository import (
    AgendaItemAccess,
    FolderAccess,
    get_agenda_item_access,
    get_folder_access,
    get_user,
    insert_agenda_item,
)
from ...database.connection import get_async_session
from ...logging import bind_agenda_context, get_logger
from ..access_control import (
    can_manage_agenda_items,
    can_view_agenda_items,
    get_auth_context_from_info,
)
from ..arguments import (
    CreateAgendaItemArguments,
    QueryAgendaItemArguments,
    parse_arguments,
)
from ..errors import (
    AgendaGraphQLError,
    AssociatedResourceNotFoundError,
    ForbiddenActionOnAssociatedResourcesError,
    UnauthenticatedError,
    UnauthorizedActionOnAssociatedResourcesError,
    UnexpectedError,
    issue_at,
)

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from ...auth.context import AuthContext
    from ...dbmodels import AgendaItems, Users
    from ..mutations.root import MutationCreateAgendaItemInput
    from ..queries.root import QueryAgendaItemInput
    from ..types.agenda_item import AgendaItem

logger = get_logger(__name__)

FOLDER_CANNOT_HOST_ITEMS = "this resource cannot host agenda items."


def _raise_on_error(outcome):
    if isinstance(outcome, AgendaGraphQLError):
        raise outcome
    return outcome


# Steps
def require_authenticated(auth_context: AuthContext | None) -> UUID | UnauthenticatedError:
    if auth_context is None or not auth_context.is_authenticated or auth_context.user_id is None:
        return UnauthenticatedError()
    return auth_context.user_id


async def resolve_current_user(
    session: AsyncSession, user_id: UUID
) -> Users | UnauthenticatedError:
    # A token whose user no longer exists is reported as an invalid session.
    user = await get_user(session, user_id)
    if user is None:
        logger.info("Authenticated user not found", user_id=str(user_id))
        return UnauthenticatedError()
    return user


async def resolve_folder(
    session: AsyncSession, folder_id: UUID, user_id: UUID
) -> FolderAccess | AssociatedResourceNotFoundError:
    folder = await get_folder_access(session, folder_id, user_id)
    if folder is None:
        logger.info("Agenda folder not found", folder_id=str(folder_id))
        return AssociatedResourceNotFoundError(issues=[issue_at("input", "id")])
    bind_agenda_context(
        organization_id=folder.organization_id,
        agenda_folder_id=folder.folder_id,
        event_id=folder.event_id,
    )
    return folder


def check_folder_hosts_items(
    folder: FolderAccess,
) -> FolderAccess | ForbiddenActionOnAssociatedResourcesError:
    if not folder.is_agenda_item_folder:
        return ForbiddenActionOnAssociatedResourcesError(
            issues=[issue_at("input", "folderId", message=FOLDER_CANNOT_HOST_ITEMS)]
        )
    return folder


def check_can_manage_items(
    user: Users, folder: FolderAccess
) -> FolderAccess | UnauthorizedActionOnAssociatedResourcesError:
    if not can_manage_agenda_items(user.role, folder.membership_role):
        logger.info("Agenda item creation denied", membership_role=folder.membership_role)
        return UnauthorizedActionOnAssociatedResourcesError(issues=[issue_at("input", "id")])
    return folder


async def insert_item(
    session: AsyncSession, user_id: UUID, arguments: CreateAgendaItemArguments
) -> AgendaItems | UnexpectedError:
    created = await insert_agenda_item(
        session,
        folder_id=arguments.folder_id,
        creator_id=user_id,
        name=arguments.name,
        type=arguments.type.value,
        description=arguments.description,
        duration=arguments.duration,
        key=arguments.key,
    )
    if created is None:
        logger.error(
            "Database insert operation unexpectedly returned no agenda item",
            folder_id=str(arguments.folder_id),
            user_id=str(user_id),
        )
        return UnexpectedError()
    return created


# Pipelines
async def execute_create_agenda_item(
    auth_context: AuthContext | None, raw_input: Mapping[str, Any]
) -> AgendaItem:
    """
    Create an agenda item on behalf of the caller.

    Checks run in order and the first failure is raised:
    authentication, argument validation, caller lookup, folder lookup,
    folder shape, authorization. Only then is the item inserted.
    """
    from ..types.agenda_item import agenda_item_from_row

    user_id = _raise_on_error(require_authenticated(auth_context))
    arguments = _raise_on_error(parse_arguments(CreateAgendaItemArguments, raw_input))

    async with get_async_session() as session:
        user = _raise_on_error(await resolve_current_user(session, user_id))
        folder = _raise_on_error(await resolve_folder(session, arguments.folder_id, user_id))
        _raise_on_error(check_folder_hosts_items(folder))
        _raise_on_error(check_can_manage_items(user, folder))
        created = _raise_on_error(await insert_item(session, user_id, arguments))

        logger.info(
            "Agenda item created",
            agenda_item_id=str(created.id),
            folder_id=str(created.folder_id),
            user_id=str(user_id),
        )

        return agenda_item_from_row(created)


async def execute_agenda_item_query(
    auth_context: AuthContext | None, raw_input: Mapping[str, Any]
) -> AgendaItem:
    """Fetch one agenda item, visible to global administrators and organization members."""
    from ..types.agenda_item import agenda_item_from_row

    user_id = _raise_on_error(require_authenticated(auth_context))
    arguments = _raise_on_error(parse_arguments(QueryAgendaItemArguments, raw_input))

    async with get_async_session() as session:
        user = _raise_on_error(await resolve_current_user(session, user_id))

        access: AgendaItemAccess | None = await get_agenda_item_access(
            session, arguments.id, user_id
        )
        if access is None:
            raise AssociatedResourceNotFoundError(issues=[issue_at("input", "id")])
        bind_agenda_context(
            organization_id=access.organization_id, agenda_folder_id=access.item.folder_id
        )

        if not can_view_agenda_items(user.role, access.membership_role):
            logger.info(
                "Agenda item access denied",
                agenda_item_id=str(arguments.id),
                user_id=str(user_id),
            )
            raise UnauthorizedActionOnAssociatedResourcesError(issues=[issue_at("input", "id")])

        return agenda_item_from_row(access.item)


# GraphQL entry points
def _create_input_to_raw(input: MutationCreateAgendaItemInput) -> dict[str, Any]:
    raw: dict[str, Any] = {
        "folderId": input.folder_id,
        "name": input.name,
        "type": input.type,
    }
    for field in ("description", "duration", "key"):
        value = getattr(input, field)
        if value is not None:
            raw[field] = value
    return raw


async def create_agenda_item(
    info: strawberry.Info, input: MutationCreateAgendaItemInput
) -> AgendaItem:
    """Resolve the createAgendaItem mutation."""
    auth_context = await get_auth_context_from_info(info)
    return await execute_create_agenda_item(auth_context, _create_input_to_raw(input))


async def resolve_agenda_item(info: strawberry.Info, input: QueryAgendaItemInput) -> AgendaItem:
    """Resolve the agendaItem query."""
    auth_context = await get_auth_context_from_info(info)
    return await execute_agenda_item_query(auth_context, {"id": input.id})

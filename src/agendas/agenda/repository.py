"""Repository helpers for agenda folder and agenda item persistence."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from sqlalchemy import and_, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..dbmodels import (
    AgendaFolders,
    AgendaItems,
    Events,
    OrganizationMemberships,
    Organizations,
    Users,
)


@dataclass(frozen=True)
class FolderAccess:
    """An agenda folder joined with its event, organization and the caller's membership.

    ``membership_role`` is None when the caller has no membership in the
    organization that owns the folder's event.
    """

    folder_id: UUID
    is_agenda_item_folder: bool
    event_id: UUID
    event_start_at: datetime
    organization_id: UUID
    organization_country_code: str | None
    membership_role: str | None


@dataclass(frozen=True)
class AgendaItemAccess:
    """An agenda item together with the caller's membership role in its organization."""

    item: AgendaItems
    organization_id: UUID
    membership_role: str | None


async def get_user(session: AsyncSession, user_id: UUID) -> Users | None:
    stmt = select(Users).where(Users.id == user_id)
    result = await session.execute(stmt)
    return result.scalar_one_or_none()


async def get_folder_access(
    session: AsyncSession, folder_id: UUID, user_id: UUID
) -> FolderAccess | None:
    """Read an agenda folder through event and organization in one statement.

    The membership join is restricted to ``user_id`` so at most one
    membership row can match.
    """
    stmt = (
        select(
            AgendaFolders.id,
            AgendaFolders.is_agenda_item_folder,
            Events.id,
            Events.start_at,
            Organizations.id,
            Organizations.country_code,
            OrganizationMemberships.role,
        )
        .join(Events, Events.id == AgendaFolders.event_id)
        .join(Organizations, Organizations.id == Events.organization_id)
        .outerjoin(
            OrganizationMemberships,
            and_(
                OrganizationMemberships.organization_id == Organizations.id,
                OrganizationMemberships.member_id == user_id,
            ),
        )
        .where(AgendaFolders.id == folder_id)
    )
    result = await session.execute(stmt)
    row = result.first()
    if row is None:
        return None

    return FolderAccess(
        folder_id=row[0],
        is_agenda_item_folder=row[1],
        event_id=row[2],
        event_start_at=row[3],
        organization_id=row[4],
        organization_country_code=row[5],
        membership_role=row[6],
    )


async def get_agenda_item_access(
    session: AsyncSession, item_id: UUID, user_id: UUID
) -> AgendaItemAccess | None:
    stmt = (
        select(AgendaItems, Organizations.id, OrganizationMemberships.role)
        .join(AgendaFolders, AgendaFolders.id == AgendaItems.folder_id)
        .join(Events, Events.id == AgendaFolders.event_id)
        .join(Organizations, Organizations.id == Events.organization_id)
        .outerjoin(
            OrganizationMemberships,
            and_(
                OrganizationMemberships.organization_id == Organizations.id,
                OrganizationMemberships.member_id == user_id,
            ),
        )
        .where(AgendaItems.id == item_id)
    )
    result = await session.execute(stmt)
    row = result.first()
    if row is None:
        return None

    return AgendaItemAccess(item=row[0], organization_id=row[1], membership_role=row[2])


async def insert_agenda_item(
    session: AsyncSession,
    *,
    folder_id: UUID,
    creator_id: UUID,
    name: str,
    type: str,
    description: str | None = None,
    duration: str | None = None,
    key: str | None = None,
) -> AgendaItems | None:
    """Insert one agenda item and return the created row, or None if nothing came back."""
    stmt = (
        insert(AgendaItems)
        .values(
            folder_id=folder_id,
            creator_id=creator_id,
            name=name,
            type=type,
            description=description,
            duration=duration,
            key=key,
        )
        .returning(AgendaItems)
    )
    result = await session.scalars(stmt)
    return result.first()

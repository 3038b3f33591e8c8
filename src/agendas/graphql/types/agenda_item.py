"""
Agenda item GraphQL type definitions
"""

from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID

import strawberry

from ..arguments import AgendaItemKind

if TYPE_CHECKING:
    from ...dbmodels import AgendaItems

AgendaItemType = strawberry.enum(
    AgendaItemKind, name="AgendaItemType", description="Kind of an agenda item."
)


@strawberry.type
class AgendaItem:
    """Agenda item type for GraphQL API."""

    id: UUID
    folder_id: UUID
    name: str
    type: AgendaItemType  # type: ignore[valid-type]
    description: str | None
    duration: str | None
    key: str | None
    creator_id: UUID | None
    created_at: datetime
    updated_at: datetime | None


def agenda_item_from_row(row: "AgendaItems") -> AgendaItem:
    """Convert an AgendaItems ORM row into the GraphQL type."""
    return AgendaItem(
        id=row.id,
        folder_id=row.folder_id,
        name=row.name,
        type=AgendaItemKind(row.type),
        description=row.description,
        duration=row.duration,
        key=row.key,
        creator_id=row.creator_id,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )

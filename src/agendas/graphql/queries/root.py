"""
Root GraphQL query definitions
"""

import strawberry

from ..types.agenda_item import AgendaItem


@strawberry.input
class QueryAgendaItemInput:
    """Input for reading a single agenda item."""

    id: strawberry.ID


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field(name="agendaItem")
    async def agenda_item(self, info: strawberry.Info, input: QueryAgendaItemInput) -> AgendaItem:
        """Get an agenda item by ID."""
        from ..resolvers.agenda_item import resolve_agenda_item

        return await resolve_agenda_item(info, input)

"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types.agenda_item import AgendaItem, AgendaItemType


@strawberry.input
class MutationCreateAgendaItemInput:
    """Input for creating an agenda item inside an agenda folder."""

    # Kept as ID so malformed identifiers reach argument validation
    folder_id: strawberry.ID
    name: str
    type: AgendaItemType  # type: ignore[valid-type]
    description: str | None = None
    duration: str | None = None
    key: str | None = None


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation(name="createAgendaItem")
    async def create_agenda_item(
        self, info: strawberry.Info, input: MutationCreateAgendaItemInput
    ) -> AgendaItem:
        """Create an agenda item in an agenda item folder."""
        from ..resolvers.agenda_item import create_agenda_item

        return await create_agenda_item(info, input)

"""
Integration tests for the agenda repository against an in-memory SQLite database
"""

import uuid
from datetime import UTC, datetime, timedelta

import pytest
import pytest_asyncio

from agendas.agenda.repository import (
    get_agenda_item_access,
    get_folder_access,
    get_user,
    insert_agenda_item,
)
from agendas.dbmodels import (
    AgendaFolders,
    AgendaItems,
    Events,
    OrganizationMemberships,
    Organizations,
    Users,
)

pytestmark = pytest.mark.integration


@pytest_asyncio.fixture
async def seeded(db_session):
    """One organization with an event, two folders and two users, one of them a member."""
    member = Users(email_address="member@example.com", name="Member", role="regular")
    outsider = Users(email_address="outsider@example.com", name="Outsider", role="regular")
    organization = Organizations(name="Parish", country_code="us")
    db_session.add_all([member, outsider, organization])
    await db_session.flush()

    db_session.add(
        OrganizationMemberships(
            member_id=member.id, organization_id=organization.id, role="administrator"
        )
    )

    start_at = datetime(2030, 1, 1, 9, tzinfo=UTC)
    event = Events(
        organization_id=organization.id,
        name="Sunday service",
        start_at=start_at,
        end_at=start_at + timedelta(hours=2),
    )
    db_session.add(event)
    await db_session.flush()

    item_folder = AgendaFolders(event_id=event.id, name="Order of service", is_agenda_item_folder=True)
    container_folder = AgendaFolders(event_id=event.id, name="Sections", is_agenda_item_folder=False)
    db_session.add_all([item_folder, container_folder])
    await db_session.commit()

    return {
        "member": member,
        "outsider": outsider,
        "organization": organization,
        "event": event,
        "item_folder": item_folder,
        "container_folder": container_folder,
    }


@pytest.mark.asyncio
async def test_get_user(db_session, seeded):
    user = await get_user(db_session, seeded["member"].id)

    assert user is not None
    assert user.email_address == "member@example.com"
    assert await get_user(db_session, uuid.uuid4()) is None


@pytest.mark.asyncio
async def test_get_folder_access_for_member(db_session, seeded):
    access = await get_folder_access(db_session, seeded["item_folder"].id, seeded["member"].id)

    assert access is not None
    assert access.folder_id == seeded["item_folder"].id
    assert access.is_agenda_item_folder is True
    assert access.event_id == seeded["event"].id
    assert access.organization_id == seeded["organization"].id
    assert access.organization_country_code == "us"
    assert access.membership_role == "administrator"


@pytest.mark.asyncio
async def test_get_folder_access_membership_is_scoped_to_caller(db_session, seeded):
    access = await get_folder_access(
        db_session, seeded["container_folder"].id, seeded["outsider"].id
    )

    assert access is not None
    assert access.is_agenda_item_folder is False
    assert access.membership_role is None


@pytest.mark.asyncio
async def test_get_folder_access_unknown_folder(db_session, seeded):
    assert await get_folder_access(db_session, uuid.uuid4(), seeded["member"].id) is None


@pytest.mark.asyncio
async def test_insert_agenda_item_returns_row(db_session, seeded):
    created = await insert_agenda_item(
        db_session,
        folder_id=seeded["item_folder"].id,
        creator_id=seeded["member"].id,
        name="Opening hymn",
        type="song",
        duration="4m",
        key="G",
    )
    await db_session.commit()

    assert created is not None
    assert isinstance(created, AgendaItems)
    assert created.id is not None
    assert created.folder_id == seeded["item_folder"].id
    assert created.creator_id == seeded["member"].id
    assert created.type == "song"
    assert created.description is None
    assert created.key == "G"
    assert created.created_at is not None


@pytest.mark.asyncio
async def test_get_agenda_item_access(db_session, seeded):
    created = await insert_agenda_item(
        db_session,
        folder_id=seeded["item_folder"].id,
        creator_id=seeded["member"].id,
        name="Welcome",
        type="general",
    )
    await db_session.commit()

    as_member = await get_agenda_item_access(db_session, created.id, seeded["member"].id)
    as_outsider = await get_agenda_item_access(db_session, created.id, seeded["outsider"].id)

    assert as_member is not None
    assert as_member.item.id == created.id
    assert as_member.organization_id == seeded["organization"].id
    assert as_member.membership_role == "administrator"
    assert as_outsider is not None
    assert as_outsider.membership_role is None
    assert await get_agenda_item_access(db_session, uuid.uuid4(), seeded["member"].id) is None

"""
Database models for the Agenda API (authoritative ORM definitions).

This module defines the SQLAlchemy Base with a naming convention for stable
constraint names. Primary keys and timestamps carry Python-side defaults so
that INSERT ... RETURNING yields complete rows on every supported backend.
"""

from datetime import UTC, datetime
from uuid import UUID, uuid4

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    DateTime,
    ForeignKeyConstraint,
    Index,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Text,
    Uuid,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

USER_ROLES = ("regular", "administrator")
AGENDA_ITEM_TYPES = ("general", "note", "scripture", "song")


def _utcnow() -> datetime:
    return datetime.now(UTC)


def _in_clause(values: tuple[str, ...]) -> str:
    return ", ".join(f"'{v}'" for v in values)


class Base(DeclarativeBase):
    """Base class for all database models with type checking support."""

    metadata = MetaData(naming_convention=naming_convention)


class Users(Base):
    __tablename__ = "users"
    __table_args__ = (
        PrimaryKeyConstraint("id", name="users_pkey"),
        CheckConstraint(f"role IN ({_in_clause(USER_ROLES)})", name="role"),
        Index("idx_users_email_address", "email_address", unique=True),
    )

    id: Mapped[UUID] = mapped_column(Uuid, default=uuid4)
    email_address: Mapped[str] = mapped_column(String(320), nullable=False)
    name: Mapped[str] = mapped_column(String(256), nullable=False)
    role: Mapped[str] = mapped_column(String(32), nullable=False, default="regular")
    created_at: Mapped[datetime] = mapped_column(DateTime(True), default=_utcnow)
    updated_at: Mapped[datetime | None] = mapped_column(DateTime(True), onupdate=_utcnow)

    memberships: Mapped[list["OrganizationMemberships"]] = relationship(
        "OrganizationMemberships", uselist=True, back_populates="member"
    )


class Organizations(Base):
    __tablename__ = "organizations"
    __table_args__ = (PrimaryKeyConstraint("id", name="organizations_pkey"),)

    id: Mapped[UUID] = mapped_column(Uuid, default=uuid4)
    name: Mapped[str] = mapped_column(String(256), nullable=False)
    country_code: Mapped[str | None] = mapped_column(String(2))
    created_at: Mapped[datetime] = mapped_column(DateTime(True), default=_utcnow)
    updated_at: Mapped[datetime | None] = mapped_column(DateTime(True), onupdate=_utcnow)

    memberships: Mapped[list["OrganizationMemberships"]] = relationship(
        "OrganizationMemberships", uselist=True, back_populates="organization"
    )
    events: Mapped[list["Events"]] = relationship(
        "Events", uselist=True, back_populates="organization"
    )


class OrganizationMemberships(Base):
    __tablename__ = "organization_memberships"
    __table_args__ = (
        ForeignKeyConstraint(
            ["member_id"],
            ["users.id"],
            ondelete="CASCADE",
            name="organization_memberships_member_id_fkey",
        ),
        ForeignKeyConstraint(
            ["organization_id"],
            ["organizations.id"],
            ondelete="CASCADE",
            name="organization_memberships_organization_id_fkey",
        ),
        PrimaryKeyConstraint(
            "member_id", "organization_id", name="organization_memberships_pkey"
        ),
        CheckConstraint(f"role IN ({_in_clause(USER_ROLES)})", name="role"),
        Index("idx_organization_memberships_organization", "organization_id"),
    )

    member_id: Mapped[UUID] = mapped_column(Uuid)
    organization_id: Mapped[UUID] = mapped_column(Uuid)
    role: Mapped[str] = mapped_column(String(32), nullable=False, default="regular")
    created_at: Mapped[datetime] = mapped_column(DateTime(True), default=_utcnow)

    member: Mapped["Users"] = relationship("Users", back_populates="memberships")
    organization: Mapped["Organizations"] = relationship(
        "Organizations", back_populates="memberships"
    )


class Events(Base):
    __tablename__ = "events"
    __table_args__ = (
        ForeignKeyConstraint(
            ["organization_id"],
            ["organizations.id"],
            ondelete="CASCADE",
            name="events_organization_id_fkey",
        ),
        PrimaryKeyConstraint("id", name="events_pkey"),
        Index("idx_events_organization", "organization_id"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, default=uuid4)
    organization_id: Mapped[UUID] = mapped_column(Uuid, nullable=False)
    name: Mapped[str] = mapped_column(String(256), nullable=False)
    start_at: Mapped[datetime] = mapped_column(DateTime(True), nullable=False)
    end_at: Mapped[datetime] = mapped_column(DateTime(True), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(True), default=_utcnow)

    organization: Mapped["Organizations"] = relationship(
        "Organizations", back_populates="events"
    )
    agenda_folders: Mapped[list["AgendaFolders"]] = relationship(
        "AgendaFolders", uselist=True, back_populates="event"
    )


class AgendaFolders(Base):
    __tablename__ = "agenda_folders"
    __table_args__ = (
        ForeignKeyConstraint(
            ["event_id"],
            ["events.id"],
            ondelete="CASCADE",
            name="agenda_folders_event_id_fkey",
        ),
        ForeignKeyConstraint(
            ["parent_folder_id"],
            ["agenda_folders.id"],
            ondelete="CASCADE",
            name="agenda_folders_parent_folder_id_fkey",
        ),
        PrimaryKeyConstraint("id", name="agenda_folders_pkey"),
        Index("idx_agenda_folders_event", "event_id"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, default=uuid4)
    event_id: Mapped[UUID] = mapped_column(Uuid, nullable=False)
    parent_folder_id: Mapped[UUID | None] = mapped_column(Uuid)
    name: Mapped[str] = mapped_column(String(256), nullable=False)
    is_agenda_item_folder: Mapped[bool] = mapped_column(Boolean, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(True), default=_utcnow)

    event: Mapped["Events"] = relationship("Events", back_populates="agenda_folders")
    agenda_items: Mapped[list["AgendaItems"]] = relationship(
        "AgendaItems", uselist=True, back_populates="folder"
    )


class AgendaItems(Base):
    __tablename__ = "agenda_items"
    __table_args__ = (
        ForeignKeyConstraint(
            ["folder_id"],
            ["agenda_folders.id"],
            ondelete="CASCADE",
            name="agenda_items_folder_id_fkey",
        ),
        ForeignKeyConstraint(
            ["creator_id"],
            ["users.id"],
            ondelete="SET NULL",
            name="agenda_items_creator_id_fkey",
        ),
        PrimaryKeyConstraint("id", name="agenda_items_pkey"),
        CheckConstraint(f"type IN ({_in_clause(AGENDA_ITEM_TYPES)})", name="type"),
        Index("idx_agenda_items_folder", "folder_id"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, default=uuid4)
    folder_id: Mapped[UUID] = mapped_column(Uuid, nullable=False)
    name: Mapped[str] = mapped_column(String(256), nullable=False)
    type: Mapped[str] = mapped_column(String(32), nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    duration: Mapped[str | None] = mapped_column(String(1024))
    key: Mapped[str | None] = mapped_column(String(256))
    creator_id: Mapped[UUID | None] = mapped_column(Uuid)
    created_at: Mapped[datetime] = mapped_column(DateTime(True), default=_utcnow)
    updated_at: Mapped[datetime | None] = mapped_column(DateTime(True), onupdate=_utcnow)

    folder: Mapped["AgendaFolders"] = relationship("AgendaFolders", back_populates="agenda_items")


target_metadata = Base.metadata

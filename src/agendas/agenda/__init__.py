"""Agenda persistence helpers."""

from .repository import (
    AgendaItemAccess,
    FolderAccess,
    get_agenda_item_access,
    get_folder_access,
    get_user,
    insert_agenda_item,
)

__all__ = [
    "AgendaItemAccess",
    "FolderAccess",
    "get_agenda_item_access",
    "get_folder_access",
    "get_user",
    "insert_agenda_item",
]

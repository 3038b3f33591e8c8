"""
Shared access control logic for GraphQL resolvers
"""

from typing import TYPE_CHECKING

import strawberry

from ..auth.middleware import get_auth_context_optional
from ..logging import get_logger

if TYPE_CHECKING:
    from ..auth.context import AuthContext

logger = get_logger(__name__)

ADMINISTRATOR = "administrator"


async def get_auth_context_from_info(info: strawberry.Info) -> "AuthContext | None":
    """
    Extract auth context from GraphQL info object.

    Returns None if request is not available.
    """
    request = info.context.get("request")
    if not request:
        logger.error("Request not found in GraphQL context")
        return None

    return await get_auth_context_optional(authorization=request.headers.get("authorization"))


def is_administrator(role: str | None) -> bool:
    return role == ADMINISTRATOR


def can_manage_agenda_items(user_role: str, membership_role: str | None) -> bool:
    """
    Check if a user may create agenda items in an organization's events.

    Allowed if:
    1. The user is a global administrator
    2. The user is an administrator member of the organization

    A missing membership (``membership_role is None``) is treated the same as
    a regular membership.
    """
    return is_administrator(user_role) or is_administrator(membership_role)


def can_view_agenda_items(user_role: str, membership_role: str | None) -> bool:
    """Global administrators and members of any role may read agenda items."""
    return is_administrator(user_role) or membership_role is not None

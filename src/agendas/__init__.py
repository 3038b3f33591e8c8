"""
Agenda API
GraphQL backend for organization event agendas
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]

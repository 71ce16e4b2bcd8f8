"""Core app configuration, database and wiring."""

from app.core.config import Settings, get_settings
from app.core.context import AppContext, build_context, get_context

__all__ = ["AppContext", "Settings", "build_context", "get_context", "get_settings"]

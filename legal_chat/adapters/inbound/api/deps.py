"""Dependency access for the API routers.

The singletons themselves live in the composition container; routers import
them from here so tests can patch them per router module.
"""

from ....composition.container import get_library, get_session

__all__ = ["get_library", "get_session"]

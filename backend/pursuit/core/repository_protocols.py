"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: boundary methods are async because implementations do IO,
      but core pure functions never call them — the workspace service orchestrates
      the async calls around the pure logic
"""

from typing import Protocol

from pursuit.core.application import Application
from pursuit.core.domain_types import ApplicationId


class PreferenceStore(Protocol):
    """Durable key-value storage for criteria strings and view mode."""
    async def get(self, key: str) -> str | None: ...
    async def set(self, key: str, value: str) -> None: ...


class ApplicationRepository(Protocol):
    """Read access to the record set plus the one status transition the UI offers."""
    async def list_all(self) -> list[Application]: ...
    async def get_by_id(self, application_id: ApplicationId) -> Application | None: ...
    async def save(self, application: Application) -> None: ...

"""Shared state of the running bot."""

from __future__ import annotations

import threading
from typing import Any, Mapping, Optional

from borsbot.parser import CommandParser


class BorsContext:
    """Command parser, database handle and loaded repositories."""

    def __init__(
        self, parser: CommandParser, db: Any, repositories: Mapping[str, Any]
    ) -> None:
        self.parser = parser
        self.db = db
        self._lock = threading.RLock()
        self._repositories: dict[str, Any] = dict(repositories)

    @property
    def repositories(self) -> dict[str, Any]:
        """A snapshot of the loaded repositories by name."""
        with self._lock:
            return dict(self._repositories)

    def get_repository(self, name: str) -> Optional[Any]:
        """Return the state of the named repository, or None if not loaded."""
        with self._lock:
            return self._repositories.get(name)

    def set_repositories(self, repositories: Mapping[str, Any]) -> None:
        """Replace the loaded repositories."""
        with self._lock:
            self._repositories = dict(repositories)
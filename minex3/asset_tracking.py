"""Resources that become available once all the assets they need are loaded."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Hashable, Iterable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class _PendingResource:
    key: Hashable
    dependencies: tuple[str, ...]
    build: Callable[[], Any]


class ResourceHandles:
    """Tracks resources waiting for their asset dependencies to load."""

    def __init__(self) -> None:
        self._waiting: deque[_PendingResource] = deque()
        self._finished: list[Hashable] = []
        self._resources: dict[Hashable, Any] = {}

    def load_resource(
        self,
        key: Hashable,
        dependencies: Iterable[str],
        build: Callable[[], Any],
    ) -> ResourceHandles:
        """Queue a resource; ``build`` is called once every dependency has loaded."""
        self._waiting.append(_PendingResource(key, tuple(dependencies), build))
        return self

    def poll(self, is_loaded: Callable[[str], bool]) -> list[Hashable]:
        """Insert every waiting resource whose dependencies are loaded.

        Returns the keys of the resources inserted by this call, in queue order.
        """
        pending, self._waiting = self._waiting, deque()
        inserted = []
        for entry in pending:
            if all(is_loaded(path) for path in entry.dependencies):
                self._resources[entry.key] = entry.build()
                self._finished.append(entry.key)
                inserted.append(entry.key)
            else:
                self._waiting.append(entry)
        return inserted

    def is_all_done(self) -> bool:
        """True when no resource is waiting for its assets."""
        return not self._waiting

    def get(self, key: Hashable) -> Any:
        """The inserted resource for ``key``, or None if it is not ready."""
        return self._resources.get(key)

    @property
    def finished(self) -> tuple[Hashable, ...]:
        return tuple(self._finished)

    def __contains__(self, key: object) -> bool:
        return key in self._resources
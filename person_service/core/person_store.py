"""Person Store: concurrency-safe in-memory mapping from key to Person.

Invariants:
    - At most one Person per key at any observation point
    - put() is a total replace, never a partial merge
    - get() returns None for a missing key; it never raises
    - delete() is idempotent; deleting an absent key succeeds
    - get_all() returns a snapshot copy; it never exposes a torn mutation
    - Counters in PersonStoreStats change under the same lock as the mapping

Design Decisions:
    - Single threading.Lock around the whole mapping: critical sections are
      dict operations only, contention is expected to be low
    - In-memory only, lost on restart (no persistence layer)
    - One instance per process, constructed by create_app() and passed to
      handlers through app.state (no module-level singleton)
"""

import logging
import threading
from dataclasses import dataclass

from person_service.core.person import Person

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PersonStoreStats:
    """Point-in-time operation counters for a PersonStore."""
    fetched: int = 0
    added: int = 0
    updated: int = 0
    removed: int = 0


class PersonStore:
    """Thread-safe store of Person records keyed by name."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._persons: dict[str, Person] = {}
        self._fetched = 0
        self._added = 0
        self._updated = 0
        self._removed = 0

    def get(self, key: str) -> Person | None:
        """Return the person stored at key, or None if absent."""
        with self._lock:
            person = self._persons.get(key)
            if person is not None:
                self._fetched += 1
        return person

    def put(self, key: str, person: Person) -> bool:
        """Insert or replace the person at key.

        Returns True when the key was not present before (an add),
        False when an existing person was replaced (an update).
        """
        if not isinstance(person, Person):
            raise TypeError(f"expected Person, got {type(person).__name__}")
        with self._lock:
            added = key not in self._persons
            self._persons[key] = person
            if added:
                self._added += 1
            else:
                self._updated += 1
        logger.debug(
            "Person %s", "added" if added else "updated",
            extra={"person_id": key},
        )
        return added

    def delete(self, key: str) -> bool:
        """Remove the person at key if present. Returns whether one was removed."""
        with self._lock:
            removed = self._persons.pop(key, None) is not None
            if removed:
                self._removed += 1
        if removed:
            logger.debug("Person removed", extra={"person_id": key})
        return removed

    def get_all(self) -> dict[str, Person]:
        """Snapshot of every (key, person) pair. Order is unspecified."""
        with self._lock:
            return dict(self._persons)

    @property
    def size(self) -> int:
        with self._lock:
            return len(self._persons)

    @property
    def stats(self) -> PersonStoreStats:
        with self._lock:
            return PersonStoreStats(
                fetched=self._fetched,
                added=self._added,
                updated=self._updated,
                removed=self._removed,
            )

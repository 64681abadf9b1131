"""Person Entity: immutable value stored per key.

Invariants:
    - email and name are required; no validation beyond presence
    - Equality is structural (two persons are equal iff both fields are equal)
    - Frozen: updates replace the stored value wholesale, never mutate it
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Person:
    """A person record, keyed externally by name in PersonStore."""

    email: str
    name: str

    def __post_init__(self) -> None:
        if self.email is None:
            raise ValueError("email is required")
        if self.name is None:
            raise ValueError("name is required")

"""Person Schemas: wire representation of a Person for request and response bodies.

Invariants:
    - email and name are both required; missing either is a 400, never a partial Person
    - Values must be strings; no coercion from numbers or null
    - Unknown fields are ignored
"""

from pydantic import BaseModel, ConfigDict

from person_service.core.person import Person


class PersonRepresentation(BaseModel):
    """JSON shape of a person: {"email": ..., "name": ...}."""

    model_config = ConfigDict(extra="ignore", strict=True)

    email: str
    name: str

    @classmethod
    def from_person(cls, person: Person) -> "PersonRepresentation":
        return cls(email=person.email, name=person.name)

    def to_person(self) -> Person:
        return Person(email=self.email, name=self.name)

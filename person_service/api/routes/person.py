"""Person Resource: CRUD routes mapping HTTP verbs onto PersonStore calls.

Invariants:
    - GET collection always 200 with a JSON array ([] when empty)
    - GET single returns 404 when the key is absent
    - PUT replaces the stored person wholesale; a body that fails validation
      is rejected by FastAPI before this module runs, so the store is untouched
    - DELETE is 200 whether or not the key existed
    - POST (or any other verb) on a single person is 405 from the router;
      no handler here runs and the body is never read
    - Each handler performs exactly one store call

Design Decisions:
    - Sync handlers: FastAPI runs each on a worker thread, the store's lock
      serializes conflicting writes
    - Mounted under settings.resource_prefix by create_app()
"""

import logging

from fastapi import APIRouter, Depends, Response, status

from person_service.api.dependencies import get_person_store
from person_service.core.errors import ResourceNotFoundError
from person_service.core.person_store import PersonStore
from person_service.schemas.person import PersonRepresentation

logger = logging.getLogger(__name__)
router = APIRouter(tags=["person"])


@router.get("", response_model=list[PersonRepresentation])
def list_persons(store: PersonStore = Depends(get_person_store)):
    """List every stored person. Order is unspecified."""
    return [
        PersonRepresentation.from_person(person)
        for person in store.get_all().values()
    ]


@router.get("/{person_id}", response_model=PersonRepresentation)
def get_person(person_id: str, store: PersonStore = Depends(get_person_store)):
    """Get a single person or 404."""
    person = store.get(person_id)
    if person is None:
        raise ResourceNotFoundError("Person", person_id)
    return PersonRepresentation.from_person(person)


@router.put("/{person_id}", status_code=status.HTTP_200_OK)
def put_person(
    person_id: str,
    body: PersonRepresentation,
    store: PersonStore = Depends(get_person_store),
):
    """Create or replace the person stored at person_id."""
    added = store.put(person_id, body.to_person())
    logger.info(
        f"Person {'created' if added else 'replaced'}",
        extra={"person_id": person_id},
    )
    return Response(status_code=status.HTTP_200_OK)


@router.delete("/{person_id}", status_code=status.HTTP_200_OK)
def delete_person(person_id: str, store: PersonStore = Depends(get_person_store)):
    """Delete the person at person_id. Succeeds even if it was never stored."""
    if not store.delete(person_id):
        logger.debug("Delete of absent person", extra={"person_id": person_id})
    return Response(status_code=status.HTTP_200_OK)

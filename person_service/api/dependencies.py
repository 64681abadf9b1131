"""Route Dependencies: hand the process-wide PersonStore to route handlers.

Invariants:
    - The store is read from app.state, set once by create_app()
    - Handlers never construct or look up a store any other way
"""

from fastapi import Request

from person_service.core.person_store import PersonStore


def get_person_store(request: Request) -> PersonStore:
    """FastAPI dependency for the application's PersonStore."""
    store = getattr(request.app.state, "person_store", None)
    if store is None:
        raise RuntimeError("Person store not initialized")
    return store

"""Pydantic Schemas: request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (request bodies, API responses)
    - Conversion to core types happens in the schema, not in the route

Design Decisions:
    - Separate from core/person.py: schemas are API contracts, Person is the stored value
"""

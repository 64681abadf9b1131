"""API Layer: FastAPI routes, identity pass-through and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Routes translate HTTP to store calls; no business logic beyond that
"""

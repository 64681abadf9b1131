"""Core Layer: person entity, concurrent store, error hierarchy.

Invariants:
    - No module in core/ imports from api/, infrastructure/ or testing/
    - No IO beyond logging; store operations are short critical sections
"""

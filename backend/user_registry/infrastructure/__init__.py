"""Infrastructure Layer — database, persistence, hashing and logging adapters.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Storage failures are mapped onto core/errors.py before leaving this layer
"""

"""Services Layer — the user resource service and its entity mapper.

Invariants:
    - Services depend on core/ protocols, never on a concrete storage binding
"""

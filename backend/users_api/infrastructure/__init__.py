"""Infrastructure Layer — cross-cutting runtime concerns (logging).

Invariants:
    - Infrastructure never imports from core/ domain logic
"""

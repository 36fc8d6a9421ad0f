"""Core Layer — pure domain logic, no IO, no async, no web framework.

Invariants:
    - No module in core/ imports from api/, schemas/ or infrastructure/
    - Registry operations are synchronous and deterministic given an id factory

Design Decisions:
    - Functional core separated from imperative shell (routes own the HTTP concerns)
"""

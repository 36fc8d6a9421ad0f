"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (request bodies, response shapes)
    - Schemas never reach into core/ state — routes translate between the two

Design Decisions:
    - Separate from core records: schemas are API contracts, User is the domain record
"""

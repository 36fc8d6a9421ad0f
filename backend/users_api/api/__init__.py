"""API Layer — FastAPI routes, dependencies, rate limiting and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON bodies; failures always carry a "message"

Design Decisions:
    - Thin routes delegate to the registry in core/
"""

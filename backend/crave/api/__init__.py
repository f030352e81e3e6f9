"""API Layer: FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON; errors share one envelope shape

Design Decisions:
    - Thin routes delegate to the store and services
"""

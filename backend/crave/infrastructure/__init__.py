"""Infrastructure Layer: the store, external service clients and cross-cutting concerns.

Invariants:
    - External calls wrapped with timeout and error mapping to core/errors.py
    - Each collaborator exposes a FastAPI dependency reading it from app.state

Design Decisions:
    - Wrappers over raw clients so routes and tests never touch the SDKs directly
"""

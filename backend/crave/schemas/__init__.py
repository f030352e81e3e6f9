"""Pydantic Schemas: request/response validation for API endpoints.

Invariants:
    - Schemas validate at the system boundary (user input, API responses)
    - camelCase on the wire, snake_case in Python (alias generator)
    - Response schemas never expose password hashes

Design Decisions:
    - Separate from models: schemas are API contracts, models are stored records
    - Per-entity patch schemas list exactly the mutable fields
"""

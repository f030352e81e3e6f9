"""Core Layer: pure domain logic, no IO, no async, no store access.

Invariants:
    - No module in core/ imports from api/, infrastructure/, services/ or db/
    - All functions are pure and deterministic (hashing excepted: salted)

Design Decisions:
    - Functional core separated from the imperative shell (routes, store, clients)
"""

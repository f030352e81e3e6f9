"""Services Layer: multi-step flows that sit between routes and the store.

Invariants:
    - Services take the store as an argument (no hidden state)
    - Domain failures raised as CraveError subclasses; routes stay thin
"""

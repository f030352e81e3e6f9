"""Crave Application Package: restaurant discovery, reservations, in-restaurant ordering.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""

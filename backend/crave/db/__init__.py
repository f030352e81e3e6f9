"""Storage Primitives: the generic in-memory collection every entity lives in.

Invariants:
    - A Collection owns its id counter and its lock; nothing else mutates its map

Design Decisions:
    - In-memory by contract: no persistence layer, state is lost on restart
"""

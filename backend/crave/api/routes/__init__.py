"""Route Modules: one file per resource.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Missing records become ResourceNotFoundError, handled globally
"""

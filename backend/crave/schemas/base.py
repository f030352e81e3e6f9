"""Schema Bases: camelCase wire format and partial-update semantics.

Invariants:
    - Input accepts camelCase aliases and snake_case names
    - PatchModel.changes() contains only the fields the client actually sent
    - Explicit null is rejected for fields not listed in NULLABLE_FIELDS
"""

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True,
    )


class PatchModel(CamelModel):
    """Partial update body: unset fields are left untouched."""

    NULLABLE_FIELDS: ClassVar[frozenset[str]] = frozenset()

    @model_validator(mode="after")
    def reject_null_for_required(self):
        for name in sorted(self.model_fields_set - self.NULLABLE_FIELDS):
            if getattr(self, name) is None:
                raise ValueError(f"{to_camel(name)} cannot be null")
        return self

    def changes(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)

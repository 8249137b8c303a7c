"""Shared schema helpers."""

from typing import Annotated, ClassVar

from pydantic import BaseModel, StringConstraints, model_validator

ShortText = Annotated[
    str, StringConstraints(strip_whitespace=True, min_length=1, max_length=200),
]
LongText = Annotated[
    str, StringConstraints(strip_whitespace=True, min_length=1, max_length=5000),
]


class PartialUpdate(BaseModel):
    """Base for update bodies: every field optional, at least one required.

    An explicit null is only forwarded for columns listed in `nullable_fields`;
    for NOT NULL columns it is treated as "not sent".
    """

    nullable_fields: ClassVar[frozenset[str]] = frozenset()

    @model_validator(mode="after")
    def require_any_field(self):
        if not self.changes():
            raise ValueError("update requires at least one field")
        return self

    def changes(self) -> dict:
        """Only the fields the client actually sent."""
        return {
            name: value
            for name, value in self.model_dump(exclude_unset=True).items()
            if value is not None or name in self.nullable_fields
        }

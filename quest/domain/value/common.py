"""Value object bases shared by identifiers, names and the request actor."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, RootModel

T = TypeVar("T")


class ValueObject(BaseModel):
    """Immutable, compared field by field (see ``Actor``)."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)


class RootValueObject(RootModel[T], Generic[T]):
    """Wraps one primitive, e.g. ``TagName``.

    ``model_dump()`` yields the bare primitive, so these serialize straight
    into table rows and JSON responses.
    """

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.root)

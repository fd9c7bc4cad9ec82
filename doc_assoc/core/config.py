"""Declaration-time configuration models.

AssociationOptions is the typed form of the keyword options accepted by
``one()`` and ``many()``. InflectionConfig extends the naming rules used to
derive target type names from association names.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from doc_assoc.core.enums import StorageStrategy
from doc_assoc.core.exceptions import AssociationOptionsError


class AssociationOptions(BaseModel):
    """Options recognised on an association declaration.

    Unknown keys are rejected. ``class`` is accepted under its own name when
    passed through a mapping, or as ``class_`` when passed as a keyword.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )

    class_name: str | None = None
    class_: type[Any] | None = Field(default=None, alias="class")
    using: StorageStrategy | None = None
    extend: tuple[type[Any], ...] = ()

    @classmethod
    def parse(cls, association_name: str, raw: dict[str, Any]) -> AssociationOptions:
        """Validate raw declaration options.

        Raises:
            AssociationOptionsError: If an option is unknown or malformed.
        """
        try:
            return cls.model_validate(raw)
        except ValidationError as e:
            details = "; ".join(
                f"{'.'.join(str(p) for p in err['loc']) or '<root>'}: {err['msg']}"
                for err in e.errors()
            )
            raise AssociationOptionsError(association_name, details) from e


class InflectionConfig(BaseModel):
    """Additional naming rules layered over the built-in inflections."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    irregular: dict[str, str] = {}  # singular -> plural
    uncountable: list[str] = []

"""Unit tests for AssociationOptions."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from doc_assoc.core.config import AssociationOptions
from doc_assoc.core.enums import StorageStrategy
from doc_assoc.core.exceptions import AssociationOptionsError


class Target:
    pass


class Mixin:
    pass


class TestAssociationOptions:
    def test_defaults(self) -> None:
        options = AssociationOptions.parse("things", {})
        assert options.class_name is None
        assert options.class_ is None
        assert options.using is None
        assert options.extend == ()

    def test_using_accepts_strings(self) -> None:
        options = AssociationOptions.parse("things", {"using": "linked"})
        assert options.using is StorageStrategy.LINKED

    def test_class_accepted_by_alias_and_name(self) -> None:
        assert AssociationOptions.parse("things", {"class": Target}).class_ is Target
        assert AssociationOptions.parse("things", {"class_": Target}).class_ is Target

    def test_extend_normalized_to_tuple(self) -> None:
        options = AssociationOptions.parse("things", {"extend": [Mixin]})
        assert options.extend == (Mixin,)

    def test_unknown_key_rejected(self) -> None:
        with pytest.raises(AssociationOptionsError, match="things") as exc_info:
            AssociationOptions.parse("things", {"polymorphic": True})
        assert exc_info.value.name == "things"

    def test_invalid_using_rejected(self) -> None:
        with pytest.raises(AssociationOptionsError, match="using"):
            AssociationOptions.parse("things", {"using": "teleported"})

    def test_class_must_be_a_type(self) -> None:
        with pytest.raises(AssociationOptionsError):
            AssociationOptions.parse("things", {"class": "Target"})

    def test_frozen(self) -> None:
        options = AssociationOptions.parse("things", {})
        with pytest.raises(ValidationError):
            options.class_name = "Other"  # type: ignore[misc]

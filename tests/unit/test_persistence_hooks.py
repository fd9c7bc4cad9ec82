"""Unit tests for embedded serialization and the before-save cascade."""

from __future__ import annotations

from typing import ClassVar

import pytest

from doc_assoc.associations.declarations import many, one
from doc_assoc.core.exceptions import AssociationOptionsError
from doc_assoc.core.types import TypeRegistry
from doc_assoc.document.attributes import attribute
from doc_assoc.document.base import Document, EmbeddedDocument
from doc_assoc.store.memory import MemoryStore

types_ = TypeRegistry()


class Point(EmbeddedDocument, type_registry=types_):
    lat = attribute()
    lng = attribute()


class Address(EmbeddedDocument, type_registry=types_):
    street = attribute()
    point = one()


class Profile(EmbeddedDocument, type_registry=types_):
    bio = attribute()


class Pet(Document, type_registry=types_):
    name = attribute()


class Fragile(Document, type_registry=types_):
    fail: ClassVar[bool] = False

    def save(self) -> bool:
        if type(self).fail:
            raise RuntimeError("disk full")
        return super().save()


class Owner(Document, type_registry=types_):
    name = attribute()
    addresses = many()
    profile = one()
    pet = one()
    pets = many()
    fragile = one()
    friends = many(class_name="Owner")


class TestEmbeddedSerialization:
    def test_plain_attributes_only_when_untouched(self) -> None:
        owner = Owner(name="Ann")
        assert owner.attributes_for_persistence() == {"name": "Ann"}

    def test_one_embedded_serialized(self) -> None:
        owner = Owner(name="Ann", profile={"bio": "hi"})
        assert owner.attributes_for_persistence()["profile"] == {"bio": "hi"}

    def test_one_embedded_set_to_none_contributes_nothing(self) -> None:
        owner = Owner(name="Ann", profile={"bio": "hi"})
        owner.profile = None
        assert "profile" not in owner.attributes_for_persistence()

    def test_many_embedded_serialized_in_order(self) -> None:
        owner = Owner()
        owner.addresses.append({"street": "a"})
        owner.addresses.append({"street": "b"})
        assert owner.attributes_for_persistence()["addresses"] == [
            {"street": "a"},
            {"street": "b"},
        ]

    def test_nested_embedded(self) -> None:
        owner = Owner(addresses=[{"street": "a", "point": {"lat": 1, "lng": 2}}])
        assert owner.attributes_for_persistence()["addresses"] == [
            {"street": "a", "point": {"lat": 1, "lng": 2}}
        ]

    def test_linked_associations_not_serialized(self) -> None:
        owner = Owner(pet=Pet(name="Rex"))
        attrs = owner.attributes_for_persistence()
        assert "pet" not in attrs
        assert "pets" not in attrs

    def test_reset_associations_drops_embedded(self) -> None:
        owner = Owner(profile={"bio": "hi"})
        owner.reset_associations()
        assert "profile" not in owner.attributes_for_persistence()


class TestSaveCascade:
    def test_new_linked_document_saved(self, store: MemoryStore) -> None:
        pet = Pet(name="Rex")
        owner = Owner(pet=pet)
        owner.save()
        assert pet.is_new is False
        assert store.fetch("pets", pet.key) is not None

    def test_changed_linked_documents_saved_in_order(self, spy_store: MemoryStore) -> None:
        pets = [Pet(name="a"), Pet(name="b")]
        for pet in pets:
            pet.save()
        owner = Owner(pets=pets)
        pets[1].name = "bb"
        pets[0].name = "aa"
        spy_store.store.reset_mock()  # type: ignore[attr-defined]

        owner.save()
        stored = [call.args[0].key for call in spy_store.store.call_args_list]  # type: ignore[attr-defined]
        assert stored == [pets[0].key, pets[1].key, owner.key]

    def test_unchanged_linked_documents_not_saved(self, spy_store: MemoryStore) -> None:
        pet = Pet(name="Rex")
        pet.save()
        owner = Owner(pet=pet)
        spy_store.store.reset_mock()  # type: ignore[attr-defined]

        owner.save()
        stored = [call.args[0].key for call in spy_store.store.call_args_list]  # type: ignore[attr-defined]
        assert stored == [owner.key]

    def test_untouched_linked_associations_not_fetched(self, spy_store: MemoryStore) -> None:
        owner = Owner(name="Ann", pet=Pet(name="Rex"))
        owner.save()
        loaded = Owner.find(owner.key)
        loaded.name = "Anne"
        spy_store.store.reset_mock()  # type: ignore[attr-defined]

        loaded.save()
        spy_store.walk.assert_not_called()  # type: ignore[attr-defined]
        assert spy_store.store.call_count == 1  # type: ignore[attr-defined]

    def test_cyclic_references_terminate(self, store: MemoryStore) -> None:
        ann, bob = Owner(name="Ann"), Owner(name="Bob")
        ann.friends = [bob]
        bob.friends = [ann]

        ann.save()
        assert not ann.is_new and not bob.is_new
        stored_ann = store.fetch("owners", ann.key)
        stored_bob = store.fetch("owners", bob.key)
        assert stored_ann is not None and stored_bob is not None
        assert [link.key for link in stored_ann.links] == [bob.key]
        assert [link.key for link in stored_bob.links] == [ann.key]

    def test_guard_released_after_failure(self, store: MemoryStore) -> None:
        fragile = Fragile()
        owner = Owner(fragile=fragile)
        Fragile.fail = True
        try:
            with pytest.raises(RuntimeError, match="disk full"):
                owner.save()
            assert store.fetch("owners", owner.key) is None
        finally:
            Fragile.fail = False

        owner.save()
        assert store.fetch("fragiles", fragile.key) is not None
        assert store.fetch("owners", owner.key) is not None

    def test_nested_invocation_is_suppressed(self) -> None:
        owner = Owner()
        calls = []

        class Spy(Pet):
            def save(self) -> bool:
                calls.append("child")
                owner.save_loaded_documents()
                return super().save()

        owner.pet = Spy()
        owner.save_loaded_documents()
        assert calls == ["child"]


class TestClearChanges:
    def test_clears_loaded_embedded_documents(self) -> None:
        owner = Owner(addresses=[{"street": "Main", "point": {"lat": 1}}], profile={"bio": "hi"})
        address = owner.addresses[0]
        assert address.has_changes
        assert address.point.has_changes

        owner.clear_changes()

        assert owner.has_changes is False
        assert address.has_changes is False
        assert address.point.has_changes is False
        assert owner.profile.has_changes is False

    def test_untouched_associations_not_created(self) -> None:
        owner = Owner(name="Ann")
        owner.clear_changes()
        assert owner._association_proxies == {}


class TestEmbeddedOwners:
    def test_explicit_linked_rejected_at_declaration(self) -> None:
        with pytest.raises(AssociationOptionsError, match="cannot hold linked"):

            class Badge(EmbeddedDocument, type_registry=TypeRegistry()):
                issuer = one(class_=Pet, using="linked")

    def test_inferred_linked_rejected_on_use(self) -> None:
        class Collar(EmbeddedDocument, type_registry=TypeRegistry()):
            pet = one(class_=Pet)

        collar = Collar()
        with pytest.raises(AssociationOptionsError, match="'pet'"):
            collar.pet = Pet()
        with pytest.raises(AssociationOptionsError):
            _ = collar.pet

    def test_embedded_targets_allowed(self) -> None:
        address = Address(point={"lat": 1})
        assert address.point.lat == 1

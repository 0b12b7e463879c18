from __future__ import annotations

import re
from datetime import date

import pytest

from dataroute.core.address import ResourceAddress
from dataroute.core.keys import (
    CompositeKey,
    InvalidKeyNameError,
    InvalidKeyTypeError,
    KeyPredicateError,
    MissingKeyNameError,
    SingleKey,
    TextKey,
)

ROOT = "my-namespace"


@pytest.fixture
def address() -> ResourceAddress:
    return ResourceAddress(ROOT, "my-entity")


class TestModes:
    def test_plain(self, address):
        assert address.get_uri() == "my-namespace/my-entity"

    def test_metadata(self, address):
        address.set_metadata()
        assert address.get_uri() == "my-namespace/$metadata"

    def test_metadata_ignores_other_modifiers(self, address):
        address.set_metadata().set_key(1).set_property("ignore")
        assert address.get_uri() == "my-namespace/$metadata"

    def test_count(self, address):
        address.set_count()
        assert address.get_uri() == "my-namespace/my-entity/$count"

    def test_count_ignores_key_and_property(self, address):
        address.set_count().set_key(1).set_property("ignore")
        assert address.get_uri() == "my-namespace/my-entity/$count"

    def test_metadata_wins_over_count(self, address):
        address.set_count().set_metadata()
        assert address.get_uri() == "my-namespace/$metadata"

    def test_property(self, address):
        address.set_property("my-property")
        assert address.get_uri() == "my-namespace/my-entity/my-property"

    def test_property_last_write_wins(self, address):
        address.set_property("a").set_property("b")
        assert address.get_uri() == "my-namespace/my-entity/b"


class TestKeys:
    def test_single_string_key(self, address):
        address.set_key("0123")
        assert address.get_uri() == "my-namespace/my-entity('0123')"

    def test_single_integer_key(self, address):
        address.set_key(1234)
        assert address.get_uri() == "my-namespace/my-entity(1234)"

    def test_single_date_key(self, address):
        address.set_key(date(2020, 2, 22))
        assert address.get_uri() == "my-namespace/my-entity(2020-02-22)"

    def test_key_with_property(self, address):
        address.set_key(7).set_property("Name")
        assert address.get_uri() == "my-namespace/my-entity(7)/Name"

    def test_composite_key(self, address):
        address.set_key(
            {
                "ID": 123,
                "Name": "cheese",
                "Description": "something",
                "date": date(2020, 2, 22),
            }
        )
        uri = address.get_uri()

        assert re.search(r"^my-namespace/my-entity\(.*\)$", uri)
        entries = uri[len("my-namespace/my-entity("):-1].split(",")
        assert sorted(entries) == sorted(
            ["ID=123", "Name='cheese'", "Description='something'", "date=2020-02-22"]
        )

    def test_composite_key_missing_name_fails_on_render(self, address):
        address.set_key({"ID": 123, "": "cheese"})
        with pytest.raises(MissingKeyNameError) as exc_info:
            address.get_uri()
        assert str(exc_info.value) == "For multi-part keys the full key predicate is required."

    def test_composite_key_wrong_type_fails_on_set(self, address):
        with pytest.raises(InvalidKeyTypeError, match="received builtins.float"):
            address.set_key({"ID": 1.0})

    def test_failed_set_key_keeps_previous_key(self, address):
        address.set_key("kept")
        with pytest.raises(InvalidKeyTypeError):
            address.set_key({"ID": object()})
        assert address.key == SingleKey(TextKey("kept"))

    def test_prebuilt_single_key_is_formatted(self, address):
        address.set_key(SingleKey("abc"))
        assert address.get_uri() == "my-namespace/my-entity('abc')"

    def test_prebuilt_composite_key_wrong_type_fails_on_set(self, address):
        with pytest.raises(InvalidKeyTypeError):
            address.set_key(CompositeKey(entries=(("ID", 1.0),)))

    def test_empty_composite_key_rejected(self, address):
        address.set_key(5)
        with pytest.raises(KeyPredicateError):
            address.set_key({})
        assert address.get_uri() == "my-namespace/my-entity(5)"

    def test_non_string_key_name_rejected(self, address):
        with pytest.raises(InvalidKeyNameError):
            address.set_key({0: 1})

    def test_multiple_invocations_last_wins(self, address):
        address.set_key({"ID": 123}).set_key(123).set_key("surprise")
        assert address.get_uri() == "my-namespace/my-entity('surprise')"

    def test_render_is_repeatable(self, address):
        address.set_key({"ID": 1, "Name": "x"}).set_property("p")
        assert address.get_uri() == address.get_uri()
        assert str(address) == address.get_uri()


class TestForType:
    def test_splits_at_last_dot(self):
        address = ResourceAddress.for_type("io.sales.Orders")
        assert address.service_root == "io.sales"
        assert address.entity_name == "Orders"
        assert address.set_key(1).get_uri() == "io.sales/Orders(1)"

    @pytest.mark.parametrize("name", ["Orders", ".Orders", "sales."])
    def test_rejects_undotted_names(self, name):
        with pytest.raises(ValueError):
            ResourceAddress.for_type(name)

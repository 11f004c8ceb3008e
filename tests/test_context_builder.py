import pytest

from feather.logic_scripts.services import ContextBuilder
from feather.util.exceptions import ValidationException


def test_defaults():
    context = ContextBuilder().build("t1", "storefront_load")

    assert context == {
        "customer": {},
        "cart": {"items": [], "subtotal": 0, "total": 0},
        "products": [],
        "distributor_id": "t1",
    }


def test_inputs_are_copied():
    customer = {"id": 7, "tags": ["wholesale"]}
    cart = {"items": [{"sku": "A", "quantity": 1}], "subtotal": 10, "total": 10}

    context = ContextBuilder().build("t1", "submit", customer = customer, cart = cart)
    context["customer"]["tags"].append("changed")
    context["cart"]["items"][0]["quantity"] = 99

    assert customer["tags"] == ["wholesale"]
    assert cart["items"][0]["quantity"] == 1


def test_extension_fields_cannot_replace_core_keys():
    context = ContextBuilder().from_payload("t1", "quantity_change", {
        "customer": {"id": 1},
        "changedItem": {"sku": "A"},
        "newQuantity": 4,
        "distributor_id": "someone-else",
    })

    assert context["changedItem"] == {"sku": "A"}
    assert context["newQuantity"] == 4
    assert context["distributor_id"] == "t1"


def test_unknown_trigger_point():
    with pytest.raises(ValidationException):
        ContextBuilder().build("t1", "checkout")

from feather.logic_scripts.services import ExecuteScriptService, LogicHooks


def test_add_to_cart_hook_sees_the_added_item(make_script):
    make_script('deny "Frozen items ship separately" when addedItem.category == "frozen"')

    hooks = LogicHooks("t1", {"id": 1})

    assert hooks.on_add_to_cart({"sku": "A", "category": "frozen"})["allowed"] is False
    assert hooks.on_add_to_cart({"sku": "B", "category": "dry"})["allowed"] is True


def test_quantity_change_hook(make_script):
    make_script(
        'deny "Max 10 per line" when newQuantity > 10',
        trigger_point = "quantity_change"
    )

    hooks = LogicHooks("t1")

    decision = hooks.on_quantity_change({"sku": "A"}, 12)

    assert decision["allowed"] is False
    assert decision["message"] == "Max 10 per line"


def test_submit_hook_uses_the_current_cart(make_script):
    make_script("deny when cart.total > 5000", trigger_point = "submit")

    hooks = LogicHooks("t1", {"id": 1})
    hooks.set_products([{"sku": "A"}])
    hooks.set_cart({"items": [{"sku": "A", "quantity": 1}], "subtotal": 6000, "total": 6000})

    assert hooks.on_submit()["allowed"] is False
    assert hooks.cart["total"] == 6000


def test_storefront_load_without_scripts_allows(app):
    decision = LogicHooks("t1").on_storefront_load()

    assert decision == {"allowed": True, "message": None, "results": [], "modifications": {}}


def test_executor_fail_closed(make_script):
    make_script("deny when (", trigger_point = "submit")

    hooks = LogicHooks("t1", executor = ExecuteScriptService(fail_open = False))

    assert hooks.on_submit()["allowed"] is False

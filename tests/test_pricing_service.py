from feather.logic_scripts.services import ExecuteScriptService, LogicHooks, PricingService


def storefront(make_script, script_content, **fields):
    return make_script(script_content, trigger_point = "storefront_load", **fields)


def test_product_price_is_adjusted_with_original_kept(make_script):
    storefront(make_script, 'set product.unitPrice = 15 when product.sku == "A1"')
    product = {"sku": "A1", "unitPrice": 20, "name": "Flour"}

    priced = PricingService().apply_product_pricing("t1", product, {"id": 1})

    assert priced == {"sku": "A1", "unitPrice": 15, "name": "Flour", "originalPrice": 20}
    assert product == {"sku": "A1", "unitPrice": 20, "name": "Flour"}


def test_unchanged_price_has_no_original_price(make_script):
    storefront(make_script, 'set product.unitPrice = 15 when product.sku == "A1"')

    priced = PricingService().apply_product_pricing("t1", {"sku": "B2", "unitPrice": 8})

    assert priced == {"sku": "B2", "unitPrice": 8}


def test_customer_scoped_discount_over_a_product_list(make_script):
    storefront(
        make_script,
        'set product.unitPrice = round(product.unitPrice * 0.5, 2) when customer.tier == "gold"'
    )
    products = [{"sku": "A1", "unitPrice": 20}, {"sku": "B2", "unitPrice": 9}]
    service = PricingService()

    gold = service.apply_products_pricing("t1", products, {"tier": "gold"})
    plain = service.apply_products_pricing("t1", products, {"tier": "basic"})

    assert [item["unitPrice"] for item in gold] == [10, 4.5]
    assert [item["originalPrice"] for item in gold] == [20, 9]
    assert plain == products


def test_cart_lines_keep_their_quantity(make_script):
    storefront(make_script, 'set product.unitPrice = 3 when product.sku == "A1"')

    lines = PricingService().apply_cart_pricing("t1", [
        {"sku": "A1", "unitPrice": 5, "quantity": 4},
        {"sku": "C3", "unitPrice": 7, "quantity": 1},
    ])

    assert lines[0] == {"sku": "A1", "unitPrice": 3, "quantity": 4, "originalPrice": 5}
    assert lines[1] == {"sku": "C3", "unitPrice": 7, "quantity": 1}


def test_only_product_writes_are_applied(make_script):
    storefront(make_script, "set cart.flag = true\nset product.badge.label = \"Sale\"")

    priced = PricingService().apply_product_pricing("t1", {"sku": "A1", "unitPrice": 5})

    assert priced == {"sku": "A1", "unitPrice": 5, "badge": {"label": "Sale"}}


def test_other_tenants_scripts_do_not_price(make_script):
    storefront(make_script, "set product.unitPrice = 1", distributor_id = "t2")

    assert PricingService().apply_product_pricing("t1", {"unitPrice": 5}) == {"unitPrice": 5}


def test_broken_pricing_script_leaves_the_price_alone(make_script):
    storefront(make_script, "set product.unitPrice = product.unitPrice * 2")

    service = PricingService(ExecuteScriptService(fail_open = True))

    assert service.apply_product_pricing("t1", {"sku": "A1"}) == {"sku": "A1"}


def test_add_to_cart_validates_the_priced_item(make_script):
    storefront(make_script, 'set product.unitPrice = 40 when product.sku == "A1"')
    make_script('deny "Over the line limit" when addedItem.unitPrice > 45')

    hooks = LogicHooks("t1", {"id": 1})

    assert hooks.on_add_to_cart({"sku": "A1", "unitPrice": 50})["allowed"] is True
    assert hooks.on_add_to_cart({"sku": "B2", "unitPrice": 50})["message"] == "Over the line limit"


def test_hooks_price_products_and_cart(make_script):
    storefront(make_script, "set product.unitPrice = 2")

    hooks = LogicHooks("t1")
    hooks.set_products([{"sku": "A1", "unitPrice": 3}])
    hooks.set_cart({"items": [{"sku": "A1", "unitPrice": 3, "quantity": 2}]})

    assert hooks.priced_products() == [{"sku": "A1", "unitPrice": 2, "originalPrice": 3}]
    assert hooks.priced_cart_items()[0]["quantity"] == 2
    assert hooks.products == [{"sku": "A1", "unitPrice": 3}]

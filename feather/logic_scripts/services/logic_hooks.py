"""
Service: LogicHooks

Storefront-side entry points, one per trigger point. Holds the customer,
cart and product state of a session and asks the executor before each
customer action.

    hooks = LogicHooks("t1", customer)
    hooks.set_products(products)
    hooks.set_cart(cart)

    decision = hooks.on_add_to_cart(item)
    if not decision["allowed"]:
        return decision["message"]
"""

# Python Packages
from typing import Any, Dict, List, Optional

# Services
from .context_builder import ContextBuilder
from .execute_script_service import ExecuteScriptService
from .pricing_service import PricingService


class LogicHooks:

    def __init__(
        self,
        distributor_id: str,
        customer: Optional[Dict[str, Any]] = None,
        executor: Optional[ExecuteScriptService] = None
    ):
        self.distributor_id = distributor_id
        self.customer = customer or {}
        self.products: List[Any] = []
        self.cart: Dict[str, Any] = {"items": [], "total": 0, "subtotal": 0}
        self.executor = executor or ExecuteScriptService()
        self.context_builder = ContextBuilder()
        self.pricing = PricingService(self.executor)


    def set_products(self, products: List[Any]):
        self.products = products


    def set_cart(self, cart: Dict[str, Any]):
        self.cart = cart


    def priced_products(self) -> List[Dict[str, Any]]:
        return self.pricing.apply_products_pricing(self.distributor_id, self.products, self.customer)


    def priced_cart_items(self) -> List[Dict[str, Any]]:
        return self.pricing.apply_cart_pricing(
            self.distributor_id, self.cart.get("items") or [], self.customer
        )


    def execute_scripts(self, trigger_point: str, additional_context: Dict[str, Any] = None) -> dict:
        context = self.context_builder.build(
            distributor_id = self.distributor_id,
            trigger_point = trigger_point,
            customer = self.customer,
            cart = self.cart,
            products = self.products,
            extra = additional_context
        )
        return self.executor.execute_context(self.distributor_id, trigger_point, context)


    # ── Trigger points ─────────────────────────────────────────────────────────

    def on_storefront_load(self) -> dict:
        return self.execute_scripts("storefront_load")


    def on_quantity_change(self, item: Dict[str, Any], new_quantity: int) -> dict:
        return self.execute_scripts("quantity_change", {
            "changedItem": item,
            "newQuantity": new_quantity
        })


    def on_add_to_cart(self, item: Dict[str, Any]) -> dict:
        """ Validates against the item at its storefront price. """

        priced = self.pricing.apply_product_pricing(self.distributor_id, item, self.customer)
        return self.execute_scripts("add_to_cart", {"addedItem": priced})


    def on_submit(self) -> dict:
        return self.execute_scripts("submit")

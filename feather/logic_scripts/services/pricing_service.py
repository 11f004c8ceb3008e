"""
Service: PricingService

Runs the storefront_load scripts once per product (or cart line) with the
item exposed as `product`, and returns priced copies:

    set product.unitPrice = product.unitPrice * 0.9 when customer.tier == "gold"

Only `product.*` writes are applied to the copy. When unitPrice changes the
copy also carries the pre-script price as originalPrice. Inputs are never
mutated.
"""

# Python Packages
import copy
import logging
from typing import Any, Dict, List, Optional

# Services
from .context_builder import ContextBuilder
from .execute_script_service import ExecuteScriptService


logger = logging.getLogger(__name__)

TRIGGER_POINT = "storefront_load"
PRODUCT_PREFIX = "product."





class PricingService:

    def __init__(self, executor: Optional[ExecuteScriptService] = None):
        self.executor = executor or ExecuteScriptService()
        self.context_builder = ContextBuilder()


    def apply_product_pricing(
        self,
        distributor_id: str,
        product: Dict[str, Any],
        customer: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """
        Price one product for a customer

        Returns:
            dict: copy of the product with script adjustments and
                  originalPrice when unitPrice changed
        """

        priced = copy.deepcopy(product)
        priced.pop("originalPrice", None)

        context = self.context_builder.build(
            distributor_id = distributor_id,
            trigger_point = TRIGGER_POINT,
            customer = customer,
            extra = {"product": priced}
        )
        decision = self.executor.execute_context(distributor_id, TRIGGER_POINT, context)

        for path, value in decision["modifications"].items():
            if path.startswith(PRODUCT_PREFIX):
                _set_path(priced, path[len(PRODUCT_PREFIX):].split("."), copy.deepcopy(value))

        if priced.get("unitPrice") != product.get("unitPrice"):
            priced["originalPrice"] = product.get("unitPrice")
            logger.debug(
                "💲 %s: %s -> %s",
                product.get("sku") or product.get("id"), product.get("unitPrice"), priced["unitPrice"]
            )

        return priced


    def apply_products_pricing(
        self,
        distributor_id: str,
        products: List[Dict[str, Any]],
        customer: Optional[Dict[str, Any]] = None
    ) -> List[Dict[str, Any]]:
        return [
            self.apply_product_pricing(distributor_id, product, customer)
            for product in products or []
        ]


    def apply_cart_pricing(
        self,
        distributor_id: str,
        cart_items: List[Dict[str, Any]],
        customer: Optional[Dict[str, Any]] = None
    ) -> List[Dict[str, Any]]:
        """ Cart lines are priced like products; quantity and line fields ride along. """

        return self.apply_products_pricing(distributor_id, cart_items, customer)



def _set_path(target: Dict[str, Any], segments: List[str], value: Any):
    node = target
    for segment in segments[:-1]:
        child = node.get(segment)
        if not isinstance(child, dict):
            child = node[segment] = {}
        node = child
    node[segments[-1]] = value

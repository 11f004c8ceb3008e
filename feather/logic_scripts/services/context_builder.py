"""
Service: ContextBuilder
=======================
Assembles the ExecutionContext a logic script runs against.

Shape:
    {
        "customer":       {...profile fields, custom attributes...},
        "cart":           {"items": [...], "subtotal": 0, "total": 0},
        "products":       [...],
        "distributor_id": "t1",
        ...trigger extension fields...
    }

Extension fields per trigger point:
    quantity_change → changedItem, newQuantity
    add_to_cart     → addedItem

Every input is deep-copied so scripts never touch caller-owned data.
"""

# Python Packages
import copy
from typing import Any, Dict, List, Optional

# Constants
from ...base import constants

# Exceptions
from ...util.exceptions import ValidationException

# App Messages
from ...util import messages


RESERVED_KEYS = ("customer", "cart", "products", "distributor_id")


class ContextBuilder:
    """
    Stateless — safe to reuse across requests.
    """

    def build(
        self,
        distributor_id: str,
        trigger_point: str,
        customer: Optional[Dict[str, Any]] = None,
        cart: Optional[Dict[str, Any]] = None,
        products: Optional[List[Any]] = None,
        extra: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """
        Build a fresh context for one trigger invocation.

        Raises:
            ValidationException: Unknown trigger point.
        """

        if trigger_point not in constants.TRIGGER_POINTS:
            raise ValidationException(
                message = messages.ERROR["INVALID_TRIGGER_POINT"].format(
                    trigger_point, ", ".join(constants.TRIGGER_POINTS)
                )
            )

        context = {}

        # Extension fields first so they can never shadow the core keys
        for key, value in (extra or {}).items():
            if key not in RESERVED_KEYS:
                context[key] = copy.deepcopy(value)

        context["customer"] = copy.deepcopy(customer) if customer else {}
        context["cart"] = self._build_cart(cart)
        context["products"] = copy.deepcopy(products) if products else []
        context["distributor_id"] = distributor_id

        return context


    def from_payload(
        self,
        distributor_id: str,
        trigger_point: str,
        payload: Optional[Dict[str, Any]]
    ) -> Dict[str, Any]:
        """
        Build from the execute-logic-scripts request "context" object.
        """

        payload = payload or {}

        return self.build(
            distributor_id = distributor_id,
            trigger_point = trigger_point,
            customer = payload.get("customer"),
            cart = payload.get("cart"),
            products = payload.get("products"),
            extra = {k: v for k, v in payload.items() if k not in RESERVED_KEYS}
        )


    def _build_cart(self, cart: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        built = copy.deepcopy(cart) if isinstance(cart, dict) else {}
        built.setdefault("items", [])
        built.setdefault("subtotal", 0)
        built.setdefault("total", 0)
        return built

"""
Logic Script Controller

Handles:
    - Orchestration between handler and service layer
"""

# Flask Packages
from flask import current_app

# Services
from .services import (
    AddScriptService,
    ListScriptService,
    EditScriptService,
    DeleteScriptService,
    ReorderScriptService,
    ExecuteScriptService,
    PricingService,
    ScriptInterpreter,
    AuthoringService
)

# App Messages
from ..util import messages





class LogicScriptController:

    def create_script(self, distributor_id: str, args: dict) -> dict:
        """
        Create a logic script at the end of its trigger point group

        Args:
            distributor_id (str)
            args (dict): {"trigger_point", "script_content", "description", "active"}

        Returns:
            dict: stored script
        """

        return AddScriptService().create_script(distributor_id, args)



    def list_scripts(self, distributor_id: str, trigger_point: str = None) -> dict:
        return ListScriptService().list_scripts(distributor_id, trigger_point)



    def update_script(self, distributor_id: str, script_id: int, patch: dict) -> dict:
        return EditScriptService().edit_script(distributor_id, script_id, patch)



    def delete_script(self, distributor_id: str, script_id: int) -> dict:
        return DeleteScriptService().delete_script(distributor_id, script_id)



    def reorder_scripts(self, distributor_id: str, args: dict) -> dict:
        """
        Reorder one trigger point group

        Args:
            distributor_id (str)
            args (dict):
                {
                    "trigger_point": str (optional),
                    "scripts": [{"id": int, "sequence_order": int}, ...]
                }

        Returns:
            dict
        """

        service = ReorderScriptService()

        items = sorted(args["scripts"], key = lambda item: item["sequence_order"])
        ordered_ids = [item["id"] for item in items]

        trigger_point = args.get("trigger_point")
        if not trigger_point:
            trigger_point = service.resolve_trigger_point(distributor_id, ordered_ids)

        return service.reorder_scripts(distributor_id, trigger_point, ordered_ids)



    def execute(self, distributor_id: str, trigger_point: str, context: dict = None) -> dict:
        """
        Run every active script of the trigger point

        Returns:
            dict: {"allowed", "message", "results", "modifications"}
        """

        service = ExecuteScriptService(
            fail_open = current_app.config["LOGIC_SCRIPTS_FAIL_OPEN"]
        )
        return service.execute(distributor_id, trigger_point, context or {})



    def price(self, distributor_id: str, args: dict) -> dict:
        """
        Apply storefront_load price adjustments

        Args:
            distributor_id (str)
            args (dict): {"customer", "products"?, "cart_items"?}

        Returns:
            dict: priced copies under the keys that were sent
        """

        service = PricingService(ExecuteScriptService(
            fail_open = current_app.config["LOGIC_SCRIPTS_FAIL_OPEN"]
        ))
        customer = args.get("customer") or {}
        result = {}

        if args.get("products") is not None:
            result["products"] = service.apply_products_pricing(
                distributor_id, args["products"], customer
            )

        if args.get("cart_items") is not None:
            result["cart_items"] = service.apply_cart_pricing(
                distributor_id, args["cart_items"], customer
            )

        return result



    def validate_script(self, script_content: str) -> dict:
        result = ScriptInterpreter().validate(script_content)

        if result["valid"]:
            result["message"] = messages.SUCCESS["SCRIPT_VALID"]

        return result



    def chat(self, message: str, customer_attributes: list = None) -> dict:
        """
        Propose a script for an admin's chat message

        Returns:
            dict: {"intent", "message", "script", "validation"}
        """

        return AuthoringService().generate_script(
            message.strip(),
            customer_attributes = customer_attributes
        )

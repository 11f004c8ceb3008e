"""
File: Logic Script Routes

Handles:
    - Create / List / Update / Delete Logic Scripts
    - Reorder a trigger point group
    - Execute the scripts of a trigger point
    - Storefront pricing of products and cart lines
    - Validate script text
    - Chat based script authoring
"""

# Flask Packages
from flask import request
from flask_restx import Namespace, Resource

# Requests
from .requests import (
    get_distributor_id,
    CreateScriptRequest,
    UpdateScriptRequest,
    ReorderScriptsRequest,
    ExecuteScriptsRequest,
    ValidateScriptRequest,
    ChatRequest,
    PricingRequest
)

# Validations
from .validations import LogicScriptValidation

# Controller
from .controller import LogicScriptController

# Errors & Exceptions
from ..util.exceptions import AppException, InternalServerException

# Namespaces
logic_script_namespace = Namespace(
    'logic-scripts',
    path = '/logic-scripts',
    description = 'Distributor Logic Script APIs'
)
execute_namespace = Namespace(
    'execute-logic-scripts',
    path = '/execute-logic-scripts',
    description = 'Storefront trigger point evaluation'
)





# ── /logic-scripts ────────────────────────────────────────────────────────────
@logic_script_namespace.route('')
class LogicScripts(Resource):

    @logic_script_namespace.param('trigger_point', 'Filter by trigger point', _in = 'query')
    def get(self):
        """
        List the distributor's logic scripts
        """

        try:
            distributor_id = get_distributor_id()
            LogicScriptValidation.validate_distributor_id(distributor_id)

            trigger_point = request.args.get("trigger_point")
            if trigger_point:
                LogicScriptValidation.validate_trigger_point(trigger_point)

            result = LogicScriptController().list_scripts(distributor_id, trigger_point)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    @CreateScriptRequest.apply(logic_script_namespace)
    def post(self):
        """
        Create a Logic Script at the end of its trigger point group
        """

        try:
            # Args
            args = CreateScriptRequest.get_data()
            distributor_id = get_distributor_id(args)

            # Validations
            LogicScriptValidation.validate_create(distributor_id, args)

            # Controller
            result = LogicScriptController().create_script(distributor_id, args)

            return {
                "status": "success",
                "data": result
            }, 201

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



# ── /logic-scripts/<id> ───────────────────────────────────────────────────────
@logic_script_namespace.route('/<int:script_id>')
class LogicScriptItem(Resource):

    @UpdateScriptRequest.apply(logic_script_namespace)
    def put(self, script_id):
        """
        Update active / script_content / description
        """

        try:
            patch = UpdateScriptRequest.get_data()
            distributor_id = get_distributor_id(patch)

            LogicScriptValidation.validate_update(distributor_id, script_id, patch)

            result = LogicScriptController().update_script(distributor_id, script_id, patch)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    def delete(self, script_id):
        """
        Delete a Logic Script (siblings keep their order values)
        """

        try:
            distributor_id = get_distributor_id()

            LogicScriptValidation.validate_distributor_id(distributor_id)
            LogicScriptValidation.validate_script_id(script_id)

            result = LogicScriptController().delete_script(distributor_id, script_id)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



# ── PUT /logic-scripts/reorder ────────────────────────────────────────────────
@logic_script_namespace.route('/reorder')
class ReorderLogicScripts(Resource):

    @ReorderScriptsRequest.apply(logic_script_namespace)
    def put(self):
        """
        Renumber a trigger point group 1..n, all-or-nothing

        Request:
        {
            "trigger_point": "submit",
            "scripts": [{"id": 7, "sequence_order": 1}, {"id": 4, "sequence_order": 2}]
        }
        """

        try:
            args = ReorderScriptsRequest.get_data()
            distributor_id = get_distributor_id(args)

            LogicScriptValidation.validate_reorder(distributor_id, args)

            result = LogicScriptController().reorder_scripts(distributor_id, args)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



# ── POST /logic-scripts/validate ──────────────────────────────────────────────
@logic_script_namespace.route('/validate')
class ValidateLogicScript(Resource):

    @ValidateScriptRequest.apply(logic_script_namespace)
    def post(self):
        """
        Parse-check script text without saving or running it
        """

        try:
            args = ValidateScriptRequest.get_data()
            LogicScriptValidation.validate_body(args)

            result = LogicScriptController().validate_script(args.get("script_content"))

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



# ── POST /logic-scripts/chat ──────────────────────────────────────────────────
@logic_script_namespace.route('/chat')
class LogicScriptChat(Resource):

    @ChatRequest.apply(logic_script_namespace)
    def post(self):
        """
        Ask the assistant to draft a logic script.

        Request:
        {
            "distributor_id": "dist-1",
            "message": "Block orders over $5000 for customers on hold",
            "customer_attributes": ["on_hold", "state"]
        }

        The proposed script is not saved; POST /logic-scripts stores it.
        """

        try:
            args = ChatRequest.get_data()
            distributor_id = get_distributor_id(args)

            LogicScriptValidation.validate_chat(distributor_id, args)

            result = LogicScriptController().chat(
                message = args.get("message"),
                customer_attributes = args.get("customer_attributes")
            )

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



# ── POST /execute-logic-scripts ───────────────────────────────────────────────
@execute_namespace.route('')
class ExecuteLogicScripts(Resource):

    @ExecuteScriptsRequest.apply(execute_namespace)
    def post(self):
        """
        Evaluate the active scripts of a trigger point.

        Request:
        {
            "distributor_id": "dist-1",
            "trigger_point": "submit",
            "context": {"customer": {...}, "cart": {...}, "products": [...]}
        }

        Response data: {"allowed", "message", "results", "modifications"}
        """

        try:
            args = ExecuteScriptsRequest.get_data()
            distributor_id = get_distributor_id(args)

            LogicScriptValidation.validate_execute(distributor_id, args)

            result = LogicScriptController().execute(
                distributor_id,
                args.get("trigger_point"),
                args.get("context")
            )

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



# ── POST /execute-logic-scripts/pricing ───────────────────────────────────────
@execute_namespace.route('/pricing')
class LogicScriptPricing(Resource):

    @PricingRequest.apply(execute_namespace)
    def post(self):
        """
        Price products and / or cart lines with the storefront_load scripts.

        Request:
        {
            "distributor_id": "dist-1",
            "customer": {"tier": "gold"},
            "products": [{"sku": "A1", "unitPrice": 20}],
            "cart_items": [{"sku": "A1", "unitPrice": 20, "quantity": 3}]
        }

        Each returned item carries originalPrice when its unitPrice changed.
        """

        try:
            args = PricingRequest.get_data()
            distributor_id = get_distributor_id(args)

            LogicScriptValidation.validate_pricing(distributor_id, args)

            result = LogicScriptController().price(distributor_id, args)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code

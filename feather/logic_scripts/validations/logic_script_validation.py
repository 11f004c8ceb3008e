"""
Logic Script Validation

Checks:
    - distributor id is present
    - trigger_point is one of the four trigger points
    - script_content is a non-empty string within the size limit
    - update patches only touch active / script_content / description
    - reorder payload is a list of {id, sequence_order}
    - execute payload carries an object context
"""

# Constants
from ...base import constants

# Exceptions
from ...util.exceptions import ValidationException

# App Messages
from ...util import messages





class LogicScriptValidation:

    @staticmethod
    def validate_body(data):
        if not data or not isinstance(data, dict):
            raise ValidationException(
                message = messages.ERROR["INVALID_REQUEST"]
            )


    @staticmethod
    def validate_distributor_id(distributor_id):
        if distributor_id is None or not str(distributor_id).strip():
            raise ValidationException(
                message = messages.ERROR["DISTRIBUTOR_REQUIRED"]
            )


    @staticmethod
    def validate_script_id(script_id):
        if isinstance(script_id, bool) or not isinstance(script_id, int) or script_id <= 0:
            raise ValidationException(
                message = messages.ERROR["INVALID_SCRIPT_ID"]
            )


    @staticmethod
    def validate_trigger_point(trigger_point):
        if not trigger_point:
            raise ValidationException(
                message = messages.ERROR["TRIGGER_POINT_REQUIRED"]
            )

        if trigger_point not in constants.TRIGGER_POINTS:
            raise ValidationException(
                message = messages.ERROR["INVALID_TRIGGER_POINT"].format(
                    trigger_point, ", ".join(constants.TRIGGER_POINTS)
                )
            )


    @staticmethod
    def validate_script_content(script_content):
        if not isinstance(script_content, str) or not script_content.strip():
            raise ValidationException(
                message = messages.ERROR["SCRIPT_CONTENT_REQUIRED"]
            )

        if len(script_content) > constants.LOGIC_SCRIPT_MAX_LENGTH:
            raise ValidationException(
                message = messages.ERROR["SCRIPT_CONTENT_TOO_LONG"].format(
                    constants.LOGIC_SCRIPT_MAX_LENGTH
                )
            )


    @staticmethod
    def validate_description(description):
        if description is not None and not isinstance(description, str):
            raise ValidationException(
                message = messages.ERROR["INVALID_DESCRIPTION"]
            )


    @staticmethod
    def validate_active(active):
        if not isinstance(active, bool):
            raise ValidationException(
                message = messages.ERROR["INVALID_ACTIVE_FLAG"]
            )


    # -----------------------------------------
    # 🔹 Operation Validations
    # -----------------------------------------

    @classmethod
    def validate_create(cls, distributor_id, args: dict):
        cls.validate_distributor_id(distributor_id)
        cls.validate_body(args)
        cls.validate_trigger_point(args.get("trigger_point"))
        cls.validate_script_content(args.get("script_content"))
        cls.validate_description(args.get("description"))

        if "active" in args:
            cls.validate_active(args.get("active"))

        return True


    @classmethod
    def validate_update(cls, distributor_id, script_id, patch: dict):
        cls.validate_distributor_id(distributor_id)
        cls.validate_script_id(script_id)
        cls.validate_body(patch)

        if "trigger_point" in patch:
            raise ValidationException(
                message = messages.ERROR["TRIGGER_POINT_IMMUTABLE"]
            )

        if not any(field in patch for field in ("active", "script_content", "description")):
            raise ValidationException(
                message = messages.ERROR["EMPTY_UPDATE"]
            )

        if "active" in patch:
            cls.validate_active(patch.get("active"))

        if "script_content" in patch:
            cls.validate_script_content(patch.get("script_content"))

        if "description" in patch:
            cls.validate_description(patch.get("description"))

        return True


    @classmethod
    def validate_reorder(cls, distributor_id, args: dict):
        cls.validate_distributor_id(distributor_id)
        cls.validate_body(args)

        scripts = args.get("scripts")

        if not isinstance(scripts, list) or not scripts:
            raise ValidationException(
                message = messages.ERROR["REORDER_SCRIPTS_REQUIRED"]
            )

        for item in scripts:
            if not isinstance(item, dict):
                raise ValidationException(message = messages.ERROR["REORDER_INVALID_ITEM"])

            for key in ("id", "sequence_order"):
                value = item.get(key)
                if isinstance(value, bool) or not isinstance(value, int):
                    raise ValidationException(message = messages.ERROR["REORDER_INVALID_ITEM"])

        if args.get("trigger_point") is not None:
            cls.validate_trigger_point(args.get("trigger_point"))

        return True


    @classmethod
    def validate_execute(cls, distributor_id, args: dict):
        cls.validate_distributor_id(distributor_id)
        cls.validate_body(args)
        cls.validate_trigger_point(args.get("trigger_point"))

        context = args.get("context")
        if context is not None and not isinstance(context, dict):
            raise ValidationException(
                message = messages.ERROR["INVALID_CONTEXT"]
            )

        return True


    @classmethod
    def validate_pricing(cls, distributor_id, args: dict):
        cls.validate_distributor_id(distributor_id)
        cls.validate_body(args)

        if args.get("products") is None and args.get("cart_items") is None:
            raise ValidationException(
                message = messages.ERROR["PRICING_ITEMS_REQUIRED"]
            )

        for key in ("products", "cart_items"):
            items = args.get(key)
            if items is None:
                continue
            if not isinstance(items, list) or not all(isinstance(item, dict) for item in items):
                raise ValidationException(
                    message = messages.ERROR["INVALID_PRICING_ITEMS"].format(key)
                )

        customer = args.get("customer")
        if customer is not None and not isinstance(customer, dict):
            raise ValidationException(
                message = messages.ERROR["INVALID_CUSTOMER"]
            )

        return True


    @classmethod
    def validate_chat(cls, distributor_id, args: dict):
        cls.validate_distributor_id(distributor_id)
        cls.validate_body(args)

        message = args.get("message")

        if not message:
            raise ValidationException(message = messages.ERROR["MISSING_MESSAGE"])

        if not isinstance(message, str) or not message.strip():
            raise ValidationException(message = messages.ERROR["INVALID_MESSAGE"])

        return True

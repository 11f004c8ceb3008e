"""
Create Logic Script Request

Handles:
    - Swagger body model for Create Logic Script API
    - Extract JSON payload
"""

from flask_restx import fields
from flask import request

# Constants
from ...base import constants





class CreateScriptRequest:

    @staticmethod
    def apply(namespace):
        """
        Swagger Model for Create Logic Script
        """

        model = namespace.model("CreateLogicScriptRequest", {
            "distributor_id": fields.String(
                required = False,
                description = "Distributor ID (or send the X-Distributor-Id header)"
            ),
            "trigger_point": fields.String(
                required = True,
                enum = list(constants.TRIGGER_POINTS),
                description = "When the script runs"
            ),
            "script_content": fields.String(
                required = True,
                description = "Rule source"
            ),
            "description": fields.String(
                required = False,
                description = "What the rule does"
            ),
            "active": fields.Boolean(
                required = False,
                default = True
            )
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        """
        Extract JSON body
        """
        return request.get_json(silent = True)

"""
Execute Logic Scripts Request

Handles:
    - Swagger body model for the execute endpoint
    - Extract JSON payload
"""

from flask_restx import fields
from flask import request

# Constants
from ...base import constants





class ExecuteScriptsRequest:

    @staticmethod
    def apply(namespace):
        """
        Swagger Model for Execute Logic Scripts
        """

        model = namespace.model("ExecuteLogicScriptsRequest", {
            "distributor_id": fields.String(
                required = False,
                description = "Distributor ID (or send the X-Distributor-Id header)"
            ),
            "trigger_point": fields.String(
                required = True,
                enum = list(constants.TRIGGER_POINTS)
            ),
            "context": fields.Raw(
                required = False,
                description = "customer / cart / products and trigger specific fields"
            )
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        """
        Extract JSON body
        """
        return request.get_json(silent = True)

"""
Reorder Logic Scripts Request

Handles:
    - Swagger body model for Reorder API
    - Extract JSON payload

Body:
    {
        "trigger_point": "submit",          // optional
        "scripts": [{"id": 3, "sequence_order": 1}, ...]
    }
"""

from flask_restx import fields
from flask import request

# Constants
from ...base import constants





class ReorderScriptsRequest:

    @staticmethod
    def apply(namespace):
        """
        Swagger Model for Reorder Logic Scripts
        """

        item = namespace.model("ReorderLogicScriptItem", {
            "id": fields.Integer(required = True),
            "sequence_order": fields.Integer(required = True)
        })

        model = namespace.model("ReorderLogicScriptsRequest", {
            "trigger_point": fields.String(
                required = False,
                enum = list(constants.TRIGGER_POINTS),
                description = "Group being reordered; taken from the scripts when omitted"
            ),
            "scripts": fields.List(
                fields.Nested(item),
                required = True,
                description = "Every script of the group with its new position"
            )
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return request.get_json(silent = True)

"""
Logic Script Chat Request

Handles:
    - Swagger body model for the authoring chat
    - Extract JSON payload
"""

from flask_restx import fields
from flask import request





class ChatRequest:

    @staticmethod
    def apply(namespace):
        """
        Swagger Model for Logic Script Chat
        """

        model = namespace.model("LogicScriptChatRequest", {
            "distributor_id": fields.String(required = False),
            "message": fields.String(
                required = True,
                description = "What the rule should do, in plain language"
            ),
            "customer_attributes": fields.List(
                fields.String,
                required = False,
                description = "Customer fields the rule may use"
            )
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        """
        Extract JSON body
        """
        return request.get_json(silent = True)

"""
Validate Logic Script Request
"""

from flask_restx import fields
from flask import request





class ValidateScriptRequest:

    @staticmethod
    def apply(namespace):
        model = namespace.model("ValidateLogicScriptRequest", {
            "script_content": fields.String(required = True)
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return request.get_json(silent = True)

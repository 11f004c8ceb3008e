"""
Update Logic Script Request

Only active / script_content / description may change.
"""

from flask_restx import fields
from flask import request





class UpdateScriptRequest:

    @staticmethod
    def apply(namespace):
        model = namespace.model("UpdateLogicScriptRequest", {
            "script_content": fields.String(required = False),
            "description": fields.String(required = False),
            "active": fields.Boolean(required = False)
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return request.get_json(silent = True)

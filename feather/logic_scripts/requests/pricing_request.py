"""
Pricing Request

Handles:
    - Swagger body model for storefront pricing
    - Extract JSON payload
"""

from flask_restx import fields
from flask import request





class PricingRequest:

    @staticmethod
    def apply(namespace):
        """
        Swagger Model for Pricing
        """

        model = namespace.model("PricingRequest", {
            "distributor_id": fields.String(
                required = False,
                description = "Distributor ID (or send the X-Distributor-Id header)"
            ),
            "customer": fields.Raw(required = False, description = "Customer profile"),
            "products": fields.List(fields.Raw, required = False),
            "cart_items": fields.List(fields.Raw, required = False)
        })

        return namespace.expect(model)


    @staticmethod
    def get_data():
        return request.get_json(silent = True)

"""
Distributor (tenant) resolution for logic script requests.

Order:
    1. X-Distributor-Id header
    2. ?distributor_id= query param
    3. "distributor_id" in the JSON body
"""

# Python Packages
from flask import request


DISTRIBUTOR_HEADER = "X-Distributor-Id"


def get_distributor_id(body: dict = None):
    distributor_id = request.headers.get(DISTRIBUTOR_HEADER)

    if not distributor_id:
        distributor_id = request.args.get("distributor_id")

    if not distributor_id and isinstance(body, dict):
        distributor_id = body.get("distributor_id")

    if distributor_id is None:
        return None

    return str(distributor_id).strip() or None

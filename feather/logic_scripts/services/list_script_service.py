"""
List Script Service

Handles:
    - Fetch all logic scripts of a distributor
    - Optional trigger point filter
"""

# Models
from ...models.feather_logic_script import LogicScript





class ListScriptService:

    def list_scripts(self, distributor_id: str, trigger_point: str = None) -> dict:
        """
        Fetch the distributor's scripts, any trigger point unless filtered

        Args:
            distributor_id (str)
            trigger_point (str): Optional filter

        Returns:
            dict
        """

        query = LogicScript.query.filter_by(distributor_id = distributor_id)

        if trigger_point:
            query = query.filter_by(trigger_point = trigger_point)

        scripts = query.order_by(LogicScript.id).all()

        return {
            "total": len(scripts),
            "scripts": [script.to_dict() for script in scripts]
        }

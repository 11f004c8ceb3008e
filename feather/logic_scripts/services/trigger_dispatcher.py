"""
Trigger Dispatcher

Handles:
    - Active scripts of one distributor + trigger point, in sequence order
"""

# Python Packages
import logging
from typing import Dict, List

# Models
from ...models.feather_logic_script import LogicScript

# Services
from .script_cache import get_script_cache


logger = logging.getLogger(__name__)





class TriggerDispatcher:

    def active_scripts_for(self, distributor_id: str, trigger_point: str) -> List[dict]:
        """
        Active scripts for the trigger point, ascending sequence_order.

        Args:
            distributor_id (str)
            trigger_point (str)

        Returns:
            list[dict]: LogicScript.to_dict() snapshots
        """

        grouped = get_script_cache().get_or_load(
            distributor_id,
            lambda: self._load_active_scripts(distributor_id)
        )

        return list(grouped.get(trigger_point, []))


    def _load_active_scripts(self, distributor_id: str) -> Dict[str, List[dict]]:
        """ One query per distributor, grouped by trigger point... """

        scripts = (
            LogicScript.query
            .filter_by(distributor_id = distributor_id, active = True)
            .order_by(LogicScript.trigger_point, LogicScript.sequence_order)
            .all()
        )

        grouped = {}
        for script in scripts:
            grouped.setdefault(script.trigger_point, []).append(script.to_dict())

        logger.debug(
            "📥 Loaded %d active scripts for distributor %s", len(scripts), distributor_id
        )
        return grouped

"""
Execute Script Service

Handles:
    - Build the ExecutionContext
    - Fetch active scripts for the trigger point
    - Fold them into one allow/deny decision
"""

# Python Packages
import logging
from typing import Any, Dict, Optional

# Services
from .context_builder import ContextBuilder
from .trigger_dispatcher import TriggerDispatcher
from .decision_reducer import DecisionReducer, Evaluator

# Constants
from ...base import constants


logger = logging.getLogger(__name__)





class ExecuteScriptService:

    def __init__(
        self,
        fail_open: bool = constants.LOGIC_SCRIPTS_FAIL_OPEN,
        evaluator: Optional[Evaluator] = None
    ):
        self.context_builder = ContextBuilder()
        self.dispatcher = TriggerDispatcher()
        self.reducer = DecisionReducer(evaluator = evaluator, fail_open = fail_open)


    def execute(
        self,
        distributor_id: str,
        trigger_point: str,
        payload: Optional[Dict[str, Any]] = None
    ) -> dict:
        """
        Run the trigger point for a raw request context

        Args:
            distributor_id (str)
            trigger_point (str)
            payload (dict): {"customer", "cart", "products", ...extension fields}

        Returns:
            dict: {"allowed", "message", "results", "modifications"}
        """

        context = self.context_builder.from_payload(distributor_id, trigger_point, payload)
        return self.execute_context(distributor_id, trigger_point, context)


    def execute_context(
        self,
        distributor_id: str,
        trigger_point: str,
        context: Dict[str, Any]
    ) -> dict:
        """ Run the trigger point for an already built context... """

        scripts = self.dispatcher.active_scripts_for(distributor_id, trigger_point)

        decision = self.reducer.reduce(scripts, context)

        logger.debug(
            "⚙️  %s/%s: %d scripts, allowed=%s",
            distributor_id, trigger_point, len(decision["results"]), decision["allowed"]
        )
        return decision

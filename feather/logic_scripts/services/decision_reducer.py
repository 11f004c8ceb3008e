"""
Service: DecisionReducer

Folds the ordered script list of one trigger invocation into a decision.

Rules:
  - scripts run in the order given (the dispatcher sorts by sequence_order)
  - every evaluated script appends one entry to "results"
  - the first veto (allowed = False) stops the fold; its message wins
  - a script that fails to evaluate is recorded with an "error" marker;
    with fail_open the fold carries on as if it allowed, otherwise the
    failure is a veto
  - set-statements of a script become visible to later scripts only if
    that script finished without error
  - no state survives between calls
"""

# Python Packages
import copy
import logging
from typing import Any, Callable, Dict, List, Optional

# Constants
from ...base import constants

# Exceptions
from ...util.exceptions import EvaluationException

# Services
from .script_interpreter import ScriptInterpreter


logger = logging.getLogger(__name__)

# (script dict, context) -> {"allowed", "message", "modifications"}
Evaluator = Callable[[dict, Dict[str, Any]], Dict[str, Any]]





class DecisionReducer:

    def __init__(
        self,
        evaluator: Optional[Evaluator] = None,
        fail_open: bool = constants.LOGIC_SCRIPTS_FAIL_OPEN
    ):
        if evaluator is None:
            interpreter = ScriptInterpreter()
            evaluator = lambda script, context: interpreter.run(script["script_content"], context)

        self.evaluator = evaluator
        self.fail_open = fail_open


    def reduce(self, scripts: List[dict], context: Dict[str, Any]) -> dict:
        """
        Evaluate scripts against the context.

        Args:
            scripts: Active scripts in evaluation order.
            context: ExecutionContext (not mutated).

        Returns:
            {
                "allowed": bool,
                "message": str | None,
                "results": [...],
                "modifications": {path: value}
            }
        """

        decision = {"allowed": True, "message": None, "results": [], "modifications": {}}

        if not scripts:
            return decision

        working = context

        for script in scripts:
            attempt = copy.deepcopy(working)
            entry = {
                "script_id": script.get("id"),
                "sequence_order": script.get("sequence_order"),
                "description": script.get("description"),
            }

            try:
                outcome = self.evaluator(script, attempt)

            except Exception as error:
                if isinstance(error, EvaluationException):
                    reason = error.message
                else:
                    reason = f"{type(error).__name__}: {error}"

                self._record_failure(decision, entry, reason)
                if not self.fail_open:
                    return self._veto(decision, constants.LOGIC_SCRIPT_FAIL_CLOSED_MESSAGE)
                continue

            outcome = outcome or {}
            allowed = outcome.get("allowed", True) is not False
            modifications = outcome.get("modifications") or {}

            entry.update({
                "allowed": allowed,
                "message": outcome.get("message"),
                "modifications": modifications
            })
            decision["results"].append(entry)
            decision["modifications"].update(modifications)
            working = attempt

            if not allowed:
                logger.info(
                    "⛔ Script %s vetoed: %s", entry["script_id"], entry["message"]
                )
                return self._veto(
                    decision,
                    entry["message"] or constants.LOGIC_SCRIPT_DEFAULT_DENY_MESSAGE
                )

        return decision


    def _record_failure(self, decision: dict, entry: dict, reason: str):
        logger.warning("⚠️  Script %s failed: %s", entry["script_id"], reason)

        entry.update({
            "allowed": True if self.fail_open else False,
            "message": None,
            "modifications": {},
            "error": reason
        })
        decision["results"].append(entry)


    def _veto(self, decision: dict, message: str) -> dict:
        decision["allowed"] = False
        decision["message"] = message
        return decision

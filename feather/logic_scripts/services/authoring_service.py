"""
Service: AuthoringService

Turns an admin's chat message into a proposed logic script.

Flow:
  1. Keyword intent detection (no LLM call for pure styling requests)
  2. LLM call through the vendors factory (Anthropic or OpenAI)
  3. Parse the JSON reply
  4. Parse-check the proposed script; one corrective retry on failure

Nothing is saved here. The admin UI stores an accepted proposal with
POST /logic-scripts like any other script.
"""

# Python Packages
import json
import logging
import re
from typing import Dict, List, Optional

# Config
from ..config import prompts, llm_config

# Constants
from ...base import constants

# Services
from .intent_service import IntentService
from .script_interpreter import ScriptInterpreter

# Vendors
from ...vendors import ChatService

# Exceptions
from ...util.exceptions import ServiceException

# App Messages
from ...util import messages


logger = logging.getLogger(__name__)

_JSON_FENCE = re.compile(r"^```(?:json)?\s*|\s*```$")

UI_ONLY_REPLY = (
    "That sounds like a visual change to your storefront. Logic scripts "
    "handle rules such as holds, limits and surcharges."
)





class AuthoringService:

    def __init__(self, chat_service = None):
        self._chat_service = chat_service
        self.intent_service = IntentService()
        self.interpreter = ScriptInterpreter()


    @property
    def chat_service(self):
        # Built lazily so UI-only messages never need provider credentials
        if self._chat_service is None:
            self._chat_service = ChatService()
        return self._chat_service


    def generate_script(
        self,
        message: str,
        customer_attributes: Optional[List[str]] = None
    ) -> dict:
        """
        Propose a logic script for a chat message.

        Args:
            message: Admin's request in plain language.
            customer_attributes: Customer field names the rules may use.

        Returns:
            {"intent", "message", "script" | None, "validation" | None}
        """

        intent = self.intent_service.detect_intent(message)["intent"]

        if intent == "ui":
            return {"intent": intent, "message": UI_ONLY_REPLY, "script": None, "validation": None}

        conversation = self._build_messages(message, customer_attributes)
        reply = self._ask(conversation)

        script = reply.get("script")
        validation = None

        if script:
            validation = self._check_script(script)

            if not validation["valid"]:
                logger.info("🔁 Generated script rejected, retrying: %s", validation["error"])
                conversation.append({"role": "assistant", "content": json.dumps(reply)})
                conversation.append({
                    "role": "user",
                    "content": prompts.SCRIPT_RETRY_NOTE.format(error = validation["error"])
                })
                reply = self._ask(conversation)
                script = reply.get("script")
                validation = self._check_script(script) if script else None

        if validation and not validation["valid"]:
            script = None

        return {
            "intent": intent,
            "message": reply.get("message") or "",
            "script": script,
            "validation": validation
        }


    # ── Private ────────────────────────────────────────────────────────────────

    def _build_messages(self, message: str, customer_attributes: Optional[List[str]]) -> List[Dict[str, str]]:
        trigger_points = "\n".join(
            f"  {key} — {label}" for key, label in constants.TRIGGER_POINT_LABELS.items()
        )
        attributes = ", ".join(customer_attributes) if customer_attributes else "id, name, type, state, on_hold"

        return [
            {
                "role": "system",
                "content": prompts.SCRIPT_SYSTEM_PROMPT.format(
                    trigger_points = trigger_points,
                    customer_attributes = attributes
                )
            },
            {
                "role": "user",
                "content": prompts.SCRIPT_USER_TEMPLATE.format(message = message, retry_note = "")
            }
        ]


    def _ask(self, conversation: List[Dict[str, str]]) -> dict:
        try:
            raw = self.chat_service.generate_response(
                conversation,
                temperature = llm_config.LLM_SCRIPT_TEMPERATURE,
                max_tokens = llm_config.LLM_SCRIPT_MAX_TOKENS
            )
        except Exception as error:
            raise ServiceException(
                error_code = "CHAT_FAILED",
                message = messages.ERROR["CHAT_FAILED"],
                details = str(error)
            )

        try:
            reply = json.loads(_JSON_FENCE.sub("", raw.strip()))
        except (json.JSONDecodeError, AttributeError):
            # Not JSON: treat the text as a plain answer without a script
            return {"message": raw}

        return reply if isinstance(reply, dict) else {"message": str(reply)}


    def _check_script(self, script) -> dict:
        if not isinstance(script, dict):
            return {"valid": False, "statements": 0, "error": "script must be an object"}

        trigger_point = script.get("trigger_point")
        if trigger_point not in constants.TRIGGER_POINTS:
            return {
                "valid": False,
                "statements": 0,
                "error": messages.ERROR["INVALID_TRIGGER_POINT"].format(
                    trigger_point, ", ".join(constants.TRIGGER_POINTS)
                )
            }

        return self.interpreter.validate(script.get("script_content"))

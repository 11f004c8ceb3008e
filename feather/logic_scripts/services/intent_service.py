"""
Service: IntentService

Keyword classifier for admin chat messages:
  "logic" — a business rule, answered with a logic script
  "ui"    — a visual/styling request, not handled here
  "both"  — a form control that must also be enforced by a rule
"""

# Config
from ..config import keywords


class IntentService:

    def detect_intent(self, message: str) -> dict:
        """
        Classify a chat message.

        Returns:
            {"intent": str, "logic_matches": [...], "ui_matches": [...]}
        """

        lower_message = (message or "").lower()

        logic_matches = [word for word in keywords.LOGIC_KEYWORDS if word in lower_message]
        ui_matches = [word for word in keywords.UI_KEYWORDS if word in lower_message]

        requirement = any(word in lower_message for word in keywords.REQUIREMENT_WORDS)
        form_control = any(word in lower_message for word in keywords.FORM_CONTROL_WORDS)

        if requirement and form_control:
            intent = "both"
        elif len(logic_matches) > len(ui_matches):
            intent = "logic"
        else:
            intent = "ui"

        return {
            "intent": intent,
            "logic_matches": logic_matches,
            "ui_matches": ui_matches
        }

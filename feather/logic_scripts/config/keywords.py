"""
keywords.py — Chat Intent Keywords
==================================
Word lists used by IntentService to decide whether an admin chat message
asks for business logic (a logic script), a visual change, or both.

How to extend:
  - Add rule vocabulary to LOGIC_KEYWORDS
  - Add look-and-feel vocabulary to UI_KEYWORDS
"""

# ── Business Logic Keywords ────────────────────────────────────────────────────
# Messages dominated by these words are turned into logic scripts.
LOGIC_KEYWORDS = [
    "validation", "validate", "prevent", "block", "require", "mandatory",
    "minimum", "maximum", "surcharge", "discount", "pricing", "price",
    "rule", "restriction", "logic", "business", "customer type", "hold",
    "pennsylvania", "california", "state", "order value", "trigger",
    "script", "function", "ordertype", "shipping", "tax",
]

# ── UI / Visual Keywords ───────────────────────────────────────────────────────
# Messages dominated by these words are styling requests, not rules.
UI_KEYWORDS = [
    "color", "button", "style", "background", "font", "size", "layout",
    "appearance", "brown", "blue", "green", "red", "shadow", "border",
    "rounded", "header", "cart", "banner", "message", "content", "dropdown",
    "field", "form", "input",
]

# ── Mixed Requests ─────────────────────────────────────────────────────────────
# "Make the OrderType dropdown mandatory" needs a form change AND a rule.
REQUIREMENT_WORDS = ["mandatory", "required"]
FORM_CONTROL_WORDS = ["dropdown", "field"]

"""
prompts.py — Script Generation Prompts
======================================
System prompt and user template used by AuthoringService to turn an
admin's plain-language request into a logic script.

Sections
--------
1. Script Generation System Prompt
2. Script Generation User Template
"""


# ══════════════════════════════════════════════════════════════════════════════
# 1. Script Generation System Prompt
# ══════════════════════════════════════════════════════════════════════════════
# {trigger_points} and {customer_attributes} are filled per request.

SCRIPT_SYSTEM_PROMPT = """\
You help a distributor add business rules to their online storefront.

Rules run at one of these trigger points:
{trigger_points}

A rule is written in this line-based language:
  deny "<message shown to the customer>" when <condition>
  allow when <condition>
  set <path> = <value> [when <condition>]

Conditions use Python expression syntax over these objects:
  customer   — the logged-in customer ({customer_attributes})
  cart       — {{"items": [...], "subtotal": number, "total": number}}
  products   — list of catalog products
  changedItem, newQuantity  — only at quantity_change
  addedItem                 — only at add_to_cart
Use true / false / null. Allowed helpers: len, sum, min, max, abs, round,
number, lower, upper, pluck(list, key), sum_of(list, key),
count(list[, key, value]), any_item(list, key, value).

Respond ONLY with valid JSON, no markdown, no explanation:
{{"message": "<short reply to the admin>",
  "script": {{"trigger_point": "<one trigger point key>",
             "description": "<one sentence summary>",
             "script_content": "<the rule>"}}}}

If the request is unclear, ask one question and omit "script":
{{"message": "<your question>"}}\
"""


# ══════════════════════════════════════════════════════════════════════════════
# 2. Script Generation User Template
# ══════════════════════════════════════════════════════════════════════════════

SCRIPT_USER_TEMPLATE = """\
Request: {message}
{retry_note}\
"""

SCRIPT_RETRY_NOTE = """\
Your previous script was rejected by the parser: {error}
Return corrected JSON.\
"""

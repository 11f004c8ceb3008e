""" All Error and Success Message declare here... """


# SUCCESS MESSAGES
SUCCESS = {
    "SCRIPT_UPDATE_SUCCESS"     :   "Logic script updated successfully.",
    "SCRIPT_DELETE_SUCCESS"     :   "Logic script deleted successfully.",
    "SCRIPT_REORDER_SUCCESS"    :   "Logic scripts reordered successfully.",
    "SCRIPT_VALID"              :   "Script is valid.",
}


# ERROR MESSAGES
ERROR = {
    # Tenant Errors
    "DISTRIBUTOR_REQUIRED"      :   "Distributor ID is required.",

    # Script Errors
    "INVALID_SCRIPT_ID"         :   "Script ID must be a positive integer.",
    "SCRIPT_NOT_FOUND"          :   "Logic script with given ID does not exist.",
    "INVALID_TRIGGER_POINT"     :   "Invalid trigger point '{}'. Allowed values: {}.",
    "TRIGGER_POINT_REQUIRED"    :   "Trigger point is required.",
    "TRIGGER_POINT_IMMUTABLE"   :   "Trigger point cannot be changed. Create a new script instead.",
    "SCRIPT_CONTENT_REQUIRED"   :   "Script content is required.",
    "SCRIPT_CONTENT_TOO_LONG"   :   "Script content must not exceed {} characters.",
    "INVALID_DESCRIPTION"       :   "Description must be a string.",
    "INVALID_ACTIVE_FLAG"       :   "Active must be a boolean.",
    "EMPTY_UPDATE"              :   "Nothing to update. Allowed fields: active, script_content, description.",

    # Reorder Errors
    "REORDER_SCRIPTS_REQUIRED"  :   "A non-empty 'scripts' list is required.",
    "REORDER_INVALID_ITEM"      :   "Each script entry needs an integer 'id' and 'sequence_order'.",
    "REORDER_MIXED_TRIGGERS"    :   "All reordered scripts must belong to the same trigger point.",
    "REORDER_MEMBERSHIP_MISMATCH":  "Reorder must list every script of the trigger point exactly once.",

    # Storage Errors
    "SCRIPT_CREATE_FAILED"      :   "Unable to create logic script.",

    # Execution Errors
    "INVALID_CONTEXT"           :   "Context must be a JSON object.",
    "PRICING_ITEMS_REQUIRED"    :   "Send a 'products' or 'cart_items' list.",
    "INVALID_PRICING_ITEMS"     :   "'{}' must be a list of objects.",
    "INVALID_CUSTOMER"          :   "Customer must be a JSON object.",

    # Chat Errors
    "MISSING_MESSAGE"           :   "Message is required.",
    "INVALID_MESSAGE"           :   "Message must be a non-empty string.",
    "CHAT_FAILED"               :   "Unable to generate a logic script. Please try again.",

    # General Errors
    "INVALID_REQUEST"           :   "Request body is required.",
}

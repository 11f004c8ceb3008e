from .distributor import get_distributor_id
from .create_script_request import CreateScriptRequest
from .update_script_request import UpdateScriptRequest
from .reorder_scripts_request import ReorderScriptsRequest
from .execute_scripts_request import ExecuteScriptsRequest
from .validate_script_request import ValidateScriptRequest
from .chat_request import ChatRequest
from .pricing_request import PricingRequest

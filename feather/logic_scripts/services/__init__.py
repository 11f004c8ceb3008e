"""
Logic Script Services Package

Service responsibilities:
  AddScriptService / ListScriptService / EditScriptService /
  DeleteScriptService / ReorderScriptService — tenant-scoped storage
  TriggerDispatcher     — active scripts of a trigger point, in order
  ContextBuilder        — copy-on-read ExecutionContext assembly
  DecisionReducer       — veto fold over the ordered scripts
  ExecuteScriptService  — dispatcher + context + reducer for one invocation
  ScriptInterpreter     — the restricted rule language
  ScriptCache           — per-distributor TTL cache of active scripts
  PricingService        — storefront_load price adjustments per product
  LogicHooks            — in-process storefront trigger entry points
  IntentService         — keyword intent detection for admin chat
  AuthoringService      — LLM-backed script proposals
"""

from .add_script_service import AddScriptService
from .list_script_service import ListScriptService
from .edit_script_service import EditScriptService
from .delete_script_service import DeleteScriptService
from .reorder_script_service import ReorderScriptService
from .trigger_dispatcher import TriggerDispatcher
from .context_builder import ContextBuilder
from .decision_reducer import DecisionReducer
from .execute_script_service import ExecuteScriptService
from .script_interpreter import ScriptInterpreter
from .script_cache import ScriptCache
from .pricing_service import PricingService
from .logic_hooks import LogicHooks
from .intent_service import IntentService
from .authoring_service import AuthoringService

__all__ = [
    "AddScriptService",
    "ListScriptService",
    "EditScriptService",
    "DeleteScriptService",
    "ReorderScriptService",
    "TriggerDispatcher",
    "ContextBuilder",
    "DecisionReducer",
    "ExecuteScriptService",
    "ScriptInterpreter",
    "ScriptCache",
    "PricingService",
    "LogicHooks",
    "IntentService",
    "AuthoringService",
]

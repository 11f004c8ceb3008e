from .logic_script_validation import LogicScriptValidation

"""
Service: ScriptInterpreter
==========================
Parses and runs the rule language stored in LogicScript.script_content.

A script is a list of one-line statements, evaluated top to bottom:

    # Comments and blank lines are ignored
    deny "Customer on hold" when customer.on_hold == true
    set cart.surcharge = cart.subtotal * 0.2 when customer.state == "PA"
    allow when customer.type == "vip"
    deny when cart.total > 5000

  deny  [<message expr>] [when <expr>]  → veto, script stops
  allow [when <expr>]                   → explicit allow, script stops
  set <path> = <expr> [when <expr>]     → write into the context

Expressions use Python expression syntax, checked against a whitelist of
AST nodes and evaluated by a small tree walker (never eval()). Context
values are reached with dotted paths; a missing path yields null instead
of an error. The only callables are the helpers in FUNCTIONS.

Every parse or runtime failure is raised as EvaluationException.
"""

# Python Packages
import ast
import io
import re
import tokenize
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, Dict, List, Optional

# Constants
from ...base import constants

# Exceptions
from ...util.exceptions import EvaluationException


_PATH_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)*$")

_LITERAL_NAMES = {
    "true": True, "True": True,
    "false": False, "False": False,
    "null": None, "None": None,
}

_ALLOWED_NODES = (
    ast.Expression, ast.Constant, ast.Name, ast.Load,
    ast.Attribute, ast.Subscript,
    ast.BinOp, ast.Add, ast.Sub, ast.Mult, ast.Div, ast.FloorDiv, ast.Mod,
    ast.UnaryOp, ast.Not, ast.USub, ast.UAdd,
    ast.BoolOp, ast.And, ast.Or,
    ast.Compare, ast.Eq, ast.NotEq, ast.Lt, ast.LtE, ast.Gt, ast.GtE, ast.In, ast.NotIn,
    ast.IfExp, ast.List, ast.Tuple, ast.Call,
)


def _number(value):
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        try:
            return float(value) if "." in value else int(value)
        except ValueError:
            raise EvaluationException(f"number(): cannot convert '{value}'")
    if value is None:
        return 0
    raise EvaluationException(f"number(): unsupported type {type(value).__name__}")


def _pluck(items, key):
    if not isinstance(items, list):
        return []
    return [item.get(key) for item in items if isinstance(item, dict)]


def _sum_of(items, key):
    return sum(_number(value) for value in _pluck(items, key))


def _count(items, key = None, value = None):
    if not isinstance(items, list):
        return 0
    if key is None:
        return len(items)
    return sum(1 for item in items if isinstance(item, dict) and item.get(key) == value)


def _any_item(items, key, value):
    return _count(items, key, value) > 0


def _text(fn):
    def wrapper(value):
        return fn(value) if isinstance(value, str) else value
    return wrapper


FUNCTIONS = {
    "len": lambda value: len(value) if value is not None else 0,
    "sum": sum,
    "min": min,
    "max": max,
    "abs": abs,
    "round": round,
    "number": _number,
    "lower": _text(str.lower),
    "upper": _text(str.upper),
    "pluck": _pluck,
    "sum_of": _sum_of,
    "count": _count,
    "any_item": _any_item,
}


@dataclass
class Statement:
    kind: str                                   # deny | allow | set
    line: int
    condition: Optional[ast.Expression] = None
    value: Optional[ast.Expression] = None      # deny message / set value
    target: Optional[List[str]] = None          # set path segments


@dataclass
class CompiledScript:
    statements: List[Statement] = field(default_factory = list)





class ScriptInterpreter:
    """
    Compiles script text once (memoized by content) and runs it against a
    context dict. run() writes `set` results into the dict it is given, so
    callers pass a copy they are willing to discard.
    """

    def __init__(
        self,
        max_length: int = constants.LOGIC_SCRIPT_MAX_LENGTH,
        max_statements: int = constants.LOGIC_SCRIPT_MAX_STATEMENTS
    ):
        self.max_length = max_length
        self.max_statements = max_statements


    # ── Public ─────────────────────────────────────────────────────────────────

    def compile(self, script_content: str) -> CompiledScript:
        """
        Parse script text into statements.

        Raises:
            EvaluationException: On empty, oversized or malformed scripts.
        """

        if not isinstance(script_content, str) or not script_content.strip():
            raise EvaluationException("Script is empty")

        if len(script_content) > self.max_length:
            raise EvaluationException(
                f"Script exceeds {self.max_length} characters"
            )

        return _compile_cached(script_content, self.max_statements)


    def run(self, script_content: str, context: Dict[str, Any]) -> Dict[str, Any]:
        """
        Execute a script.

        Returns:
            {"allowed": bool, "message": str | None, "modifications": {path: value}}
        """

        compiled = self.compile(script_content)
        modifications = {}

        for statement in compiled.statements:
            try:
                if statement.condition is not None:
                    if not _evaluate(statement.condition.body, context):
                        continue

                if statement.kind == "deny":
                    message = None
                    if statement.value is not None:
                        message = _evaluate(statement.value.body, context)
                    return {
                        "allowed": False,
                        "message": str(message) if message is not None
                                   else constants.LOGIC_SCRIPT_DEFAULT_DENY_MESSAGE,
                        "modifications": modifications
                    }

                if statement.kind == "allow":
                    break

                value = _check_size(_evaluate(statement.value.body, context))
                _assign(context, statement.target, value)
                modifications[".".join(statement.target)] = value

            except EvaluationException as error:
                raise EvaluationException(
                    f"Line {statement.line}: {error.message}"
                ) from error

            except RecursionError:
                raise EvaluationException(
                    f"Line {statement.line}: expression nested too deeply"
                )

        return {"allowed": True, "message": None, "modifications": modifications}


    def validate(self, script_content: str) -> dict:
        """
        Parse-check without running. Used by the authoring flow.
        """

        try:
            compiled = self.compile(script_content)
            return {"valid": True, "statements": len(compiled.statements), "error": None}

        except EvaluationException as error:
            return {"valid": False, "statements": 0, "error": error.message}





# ── Compilation ────────────────────────────────────────────────────────────────

@lru_cache(maxsize = 512)
def _compile_cached(script_content: str, max_statements: int) -> CompiledScript:
    compiled = CompiledScript()

    for number, raw in enumerate(script_content.splitlines(), 1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue

        if len(compiled.statements) >= max_statements:
            raise EvaluationException(
                f"Script exceeds {max_statements} statements"
            )

        try:
            compiled.statements.append(_parse_statement(line, number))
        except RecursionError:
            raise EvaluationException(f"Line {number}: expression nested too deeply")

    if not compiled.statements:
        raise EvaluationException("Script has no statements")

    return compiled


def _parse_statement(line: str, number: int) -> Statement:
    keyword, _, rest = line.partition(" ")
    keyword = keyword.lower()
    rest = rest.strip()

    if keyword not in ("deny", "allow", "set"):
        raise EvaluationException(
            f"Line {number}: unknown statement '{keyword}' (expected deny, allow or set)"
        )

    head, condition = _split_on(rest, tokenize.NAME, "when", number)
    statement = Statement(kind = keyword, line = number)

    if condition is not None:
        if not condition:
            raise EvaluationException(f"Line {number}: 'when' needs a condition")
        statement.condition = _parse_expression(condition, number)

    if keyword == "deny":
        if head:
            statement.value = _parse_expression(head, number)

    elif keyword == "allow":
        if head:
            raise EvaluationException(
                f"Line {number}: allow takes no value, only 'when <condition>'"
            )

    else:
        target, value = _split_on(head, tokenize.OP, "=", number)
        if value is None or not value:
            raise EvaluationException(f"Line {number}: expected 'set <path> = <value>'")
        if not _PATH_PATTERN.match(target):
            raise EvaluationException(f"Line {number}: invalid set target '{target}'")
        statement.target = target.split(".")
        statement.value = _parse_expression(value, number)

    return statement


def _split_on(text: str, token_type: int, token_value: str, number: int):
    """
    Split at the first top-level token, ignoring matches inside strings
    and brackets. Returns (head, tail) with tail None when absent.
    """

    if not text:
        return "", None

    depth = 0
    try:
        for token in tokenize.generate_tokens(io.StringIO(text).readline):
            if token.type == tokenize.OP and token.string in ("(", "[", "{"):
                depth += 1
            elif token.type == tokenize.OP and token.string in (")", "]", "}"):
                depth -= 1
            elif depth == 0 and token.type == token_type and token.string == token_value:
                return text[:token.start[1]].strip(), text[token.end[1]:].strip()

    except (tokenize.TokenError, SyntaxError) as error:
        raise EvaluationException(f"Line {number}: {error}")

    return text.strip(), None


def _parse_expression(source: str, number: int) -> ast.Expression:
    try:
        tree = ast.parse(source, mode = "eval")
    except SyntaxError as error:
        raise EvaluationException(f"Line {number}: syntax error in '{source}' ({error.msg})")

    for node in ast.walk(tree):
        if not isinstance(node, _ALLOWED_NODES):
            raise EvaluationException(
                f"Line {number}: '{type(node).__name__}' is not allowed in scripts"
            )

        if isinstance(node, ast.Attribute) and node.attr.startswith("_"):
            raise EvaluationException(
                f"Line {number}: private attribute '{node.attr}' is not allowed"
            )

        if isinstance(node, ast.Call):
            if not isinstance(node.func, ast.Name) or node.func.id not in FUNCTIONS:
                raise EvaluationException(
                    f"Line {number}: only {', '.join(sorted(FUNCTIONS))} can be called"
                )
            if node.keywords:
                raise EvaluationException(f"Line {number}: keyword arguments are not allowed")

    return tree





# ── Evaluation ─────────────────────────────────────────────────────────────────

_BINARY = {
    ast.Add: lambda a, b: a + b,
    ast.Sub: lambda a, b: a - b,
    ast.Mult: lambda a, b: a * b,
    ast.Div: lambda a, b: a / b,
    ast.FloorDiv: lambda a, b: a // b,
    ast.Mod: lambda a, b: a % b,
}

_COMPARE = {
    ast.Eq: lambda a, b: a == b,
    ast.NotEq: lambda a, b: a != b,
    ast.Lt: lambda a, b: a < b,
    ast.LtE: lambda a, b: a <= b,
    ast.Gt: lambda a, b: a > b,
    ast.GtE: lambda a, b: a >= b,
    ast.In: lambda a, b: b is not None and a in b,
    ast.NotIn: lambda a, b: b is None or a not in b,
}


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _check_operands(op: ast.operator, left, right):
    """ Refuse operations whose result would pass the value limits... """

    if isinstance(op, ast.Add) and isinstance(left, (str, list)) and isinstance(right, (str, list)):
        if len(left) + len(right) > constants.LOGIC_SCRIPT_MAX_VALUE_SIZE:
            raise EvaluationException(
                f"value exceeds {constants.LOGIC_SCRIPT_MAX_VALUE_SIZE} items"
            )

    if isinstance(op, ast.Mult) and _is_int(left) and _is_int(right):
        if left.bit_length() + right.bit_length() > constants.LOGIC_SCRIPT_MAX_INT_BITS:
            raise EvaluationException(
                f"number exceeds {constants.LOGIC_SCRIPT_MAX_INT_BITS} bits"
            )


def _measure(value, limit: int) -> int:
    """
    Flattened size of a value (characters + elements), counted with shared
    references expanded. Stops as soon as it passes limit.
    """

    if isinstance(value, str):
        return len(value)

    if isinstance(value, dict):
        value = list(value.values())

    if not isinstance(value, (list, tuple)):
        return 1

    size = len(value)
    for item in value:
        if size > limit:
            break
        size += _measure(item, limit - size)
    return size


def _check_size(value):
    if _measure(value, constants.LOGIC_SCRIPT_MAX_VALUE_SIZE) > constants.LOGIC_SCRIPT_MAX_VALUE_SIZE:
        raise EvaluationException(
            f"value exceeds {constants.LOGIC_SCRIPT_MAX_VALUE_SIZE} items"
        )

    if _is_int(value) and value.bit_length() > constants.LOGIC_SCRIPT_MAX_INT_BITS:
        raise EvaluationException(
            f"number exceeds {constants.LOGIC_SCRIPT_MAX_INT_BITS} bits"
        )

    return value


def _evaluate(node: ast.AST, context: Dict[str, Any]) -> Any:
    if isinstance(node, ast.Constant):
        return node.value

    if isinstance(node, ast.Name):
        if node.id in _LITERAL_NAMES:
            return _LITERAL_NAMES[node.id]
        return context.get(node.id)

    if isinstance(node, ast.Attribute):
        base = _evaluate(node.value, context)
        return base.get(node.attr) if isinstance(base, dict) else None

    if isinstance(node, ast.Subscript):
        base = _evaluate(node.value, context)
        key = _evaluate(_subscript_key(node), context)
        if isinstance(base, dict):
            return base.get(key) if not isinstance(key, (list, dict)) else None
        if isinstance(base, (list, str)) and isinstance(key, int) and not isinstance(key, bool):
            return base[key] if -len(base) <= key < len(base) else None
        return None

    if isinstance(node, ast.BinOp):
        left = _evaluate(node.left, context)
        right = _evaluate(node.right, context)
        if isinstance(node.op, ast.Mult) and not (_is_number(left) and _is_number(right)):
            raise EvaluationException("'*' only works on numbers")
        _check_operands(node.op, left, right)
        try:
            return _check_size(_BINARY[type(node.op)](left, right))
        except ZeroDivisionError:
            raise EvaluationException("division by zero")
        except TypeError as error:
            raise EvaluationException(f"invalid operands: {error}")

    if isinstance(node, ast.UnaryOp):
        operand = _evaluate(node.operand, context)
        if isinstance(node.op, ast.Not):
            return not operand
        if not _is_number(operand):
            raise EvaluationException("unary +/- only works on numbers")
        return -operand if isinstance(node.op, ast.USub) else operand

    if isinstance(node, ast.BoolOp):
        result = None
        for value in node.values:
            result = _evaluate(value, context)
            if isinstance(node.op, ast.And) and not result:
                return result
            if isinstance(node.op, ast.Or) and result:
                return result
        return result

    if isinstance(node, ast.Compare):
        left = _evaluate(node.left, context)
        for operator, comparator in zip(node.ops, node.comparators):
            right = _evaluate(comparator, context)
            try:
                if not _COMPARE[type(operator)](left, right):
                    return False
            except TypeError as error:
                raise EvaluationException(f"cannot compare: {error}")
            left = right
        return True

    if isinstance(node, ast.IfExp):
        if _evaluate(node.test, context):
            return _evaluate(node.body, context)
        return _evaluate(node.orelse, context)

    if isinstance(node, (ast.List, ast.Tuple)):
        return [_evaluate(element, context) for element in node.elts]

    if isinstance(node, ast.Call):
        args = [_evaluate(arg, context) for arg in node.args]
        try:
            return _check_size(FUNCTIONS[node.func.id](*args))
        except EvaluationException:
            raise
        except (TypeError, ValueError) as error:
            raise EvaluationException(f"{node.func.id}(): {error}")

    raise EvaluationException(f"unsupported expression '{type(node).__name__}'")


def _subscript_key(node: ast.Subscript) -> ast.AST:
    if isinstance(node.slice, ast.Slice):
        raise EvaluationException("slices are not supported")
    return node.slice


def _assign(context: Dict[str, Any], target: List[str], value: Any):
    node = context
    for segment in target[:-1]:
        child = node.get(segment)
        if child is None:
            child = node[segment] = {}
        if not isinstance(child, dict):
            raise EvaluationException(
                f"cannot set '{'.'.join(target)}': '{segment}' is not an object"
            )
        node = child
    node[target[-1]] = value

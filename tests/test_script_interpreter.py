import pytest

from feather.logic_scripts.services import ScriptInterpreter
from feather.util.exceptions import EvaluationException


@pytest.fixture
def interpreter():
    return ScriptInterpreter()


def test_deny_with_message_when_condition_holds(interpreter):
    result = interpreter.run(
        'deny "Customer on hold" when customer.on_hold == true',
        {"customer": {"on_hold": True}}
    )

    assert result == {"allowed": False, "message": "Customer on hold", "modifications": {}}


def test_condition_false_allows(interpreter):
    result = interpreter.run(
        'deny "Customer on hold" when customer.on_hold == true',
        {"customer": {"on_hold": False}}
    )

    assert result["allowed"] is True
    assert result["message"] is None


def test_deny_without_message_uses_default(interpreter):
    result = interpreter.run("deny when cart.total > 5000", {"cart": {"total": 6000}})

    assert result["allowed"] is False
    assert result["message"] == "Action blocked by business rule"


def test_missing_path_is_null(interpreter):
    result = interpreter.run("deny when customer.profile.flags == null", {"customer": {}})

    assert result["allowed"] is False


def test_allow_stops_the_script(interpreter):
    script = "\n".join([
        "# VIPs skip every check below",
        'allow when customer.type == "vip"',
        "",
        "deny when cart.total > 100",
    ])

    vip = interpreter.run(script, {"customer": {"type": "vip"}, "cart": {"total": 500}})
    regular = interpreter.run(script, {"customer": {"type": "retail"}, "cart": {"total": 500}})

    assert vip["allowed"] is True
    assert regular["allowed"] is False


def test_set_writes_into_context_and_reports_modification(interpreter):
    context = {"customer": {"state": "PA"}, "cart": {"subtotal": 100}}

    result = interpreter.run(
        'set cart.surcharge = cart.subtotal * 0.2 when customer.state == "PA"',
        context
    )

    assert result["modifications"] == {"cart.surcharge": 20.0}
    assert context["cart"]["surcharge"] == 20.0


def test_set_creates_intermediate_objects(interpreter):
    context = {}

    interpreter.run("set flags.review.needed = true", context)

    assert context == {"flags": {"review": {"needed": True}}}


def test_helpers(interpreter):
    context = {
        "cart": {
            "items": [
                {"sku": "A", "quantity": 2, "category": "frozen"},
                {"sku": "B", "quantity": "3", "category": "dry"},
            ]
        }
    }

    script = "\n".join([
        "set cart.units = sum_of(cart.items, 'quantity')",
        "set cart.lines = count(cart.items)",
        "set cart.has_frozen = any_item(cart.items, 'category', 'frozen')",
        "set cart.skus = pluck(cart.items, 'sku')",
    ])

    result = interpreter.run(script, context)

    assert result["modifications"] == {
        "cart.units": 5,
        "cart.lines": 2,
        "cart.has_frozen": True,
        "cart.skus": ["A", "B"],
    }


def test_when_inside_string_is_not_a_keyword(interpreter):
    result = interpreter.run('deny "Call us when ready" when true', {})

    assert result["message"] == "Call us when ready"


def test_in_operator_and_list_literal(interpreter):
    script = 'deny "Not shipped to this state" when customer.state in ["AK", "HI"]'

    assert interpreter.run(script, {"customer": {"state": "HI"}})["allowed"] is False
    assert interpreter.run(script, {"customer": {"state": "TX"}})["allowed"] is True


@pytest.mark.parametrize("script", [
    "deny when __import__('os')",
    "deny when customer.__class__",
    "deny when (lambda: 1)()",
    "deny when open('x')",
    "deny when [x for x in cart.items]",
    "deny when len(cart.items, key=1)",
])
def test_rejects_code_outside_the_rule_language(interpreter, script):
    with pytest.raises(EvaluationException):
        interpreter.compile(script)


def test_unknown_statement(interpreter):
    with pytest.raises(EvaluationException) as error:
        interpreter.compile("return false")

    assert "unknown statement" in error.value.message


def test_runtime_error_names_the_line(interpreter):
    with pytest.raises(EvaluationException) as error:
        interpreter.run("# header\nset cart.x = cart.total / 0", {"cart": {"total": 10}})

    assert error.value.message == "Line 2: division by zero"


def test_limits():
    interpreter = ScriptInterpreter(max_length = 60, max_statements = 2)

    with pytest.raises(EvaluationException):
        interpreter.compile("deny when true\n" * 3)

    with pytest.raises(EvaluationException):
        interpreter.compile("deny when " + "1 + " * 20 + "1")

    with pytest.raises(EvaluationException):
        interpreter.compile("   \n# only a comment\n")


def test_validate_reports_instead_of_raising(interpreter):
    assert interpreter.validate("deny when true") == {"valid": True, "statements": 1, "error": None}

    result = interpreter.validate("deny when (")

    assert result["valid"] is False
    assert result["error"].startswith("Line 1:")


def test_doubling_a_string_hits_the_value_limit(interpreter):
    script = "\n".join(['set cart.s = "aaaaaaaaaa"'] + ["set cart.s = cart.s + cart.s"] * 22)

    with pytest.raises(EvaluationException) as error:
        interpreter.run(script, {"cart": {}})

    assert "exceeds" in error.value.message


def test_squaring_a_number_hits_the_bit_limit(interpreter):
    script = "\n".join(["set cart.n = 3"] + ["set cart.n = cart.n * cart.n"] * 22)

    with pytest.raises(EvaluationException) as error:
        interpreter.run(script, {"cart": {}})

    assert "bits" in error.value.message


def test_nested_list_growth_is_measured_flattened(interpreter):
    script = "\n".join(["set cart.l = [1, 1]"] + ["set cart.l = [cart.l, cart.l]"] * 30)

    with pytest.raises(EvaluationException):
        interpreter.run(script, {"cart": {}})


def test_ordinary_values_stay_within_limits(interpreter):
    result = interpreter.run(
        'set cart.note = "Order " + upper(customer.state)\nset cart.total = cart.subtotal * 1000000',
        {"customer": {"state": "pa"}, "cart": {"subtotal": 123456789}}
    )

    assert result["modifications"] == {"cart.note": "Order PA", "cart.total": 123456789000000}

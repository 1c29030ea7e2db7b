import pytest

from tinyinterp import (
    AndExpr, BooleanConstant, BooleanVariableRef, Environment, NotExpr, NumberLiteral, OrExpr,
    TypeMismatchError, UndefinedVariableError, interpret_boolean,
)


def env_of(**values):
    env = Environment()
    for name, value in values.items():
        env.set_variable(name, value)
    return env


def test_access_rule():
    expr = OrExpr(
        BooleanVariableRef("isLoggedIn"),
        AndExpr(BooleanVariableRef("hasPermission"), BooleanConstant(True)),
    )
    env = env_of(isLoggedIn=True, hasPermission=False)
    assert interpret_boolean(expr, env) is True


@pytest.mark.parametrize("left, right, expected_and, expected_or", [
    (True, True, True, True),
    (True, False, False, True),
    (False, True, False, True),
    (False, False, False, False),
])
def test_truth_tables(left, right, expected_and, expected_or):
    env = Environment()
    a, b = BooleanConstant(left), BooleanConstant(right)
    assert interpret_boolean(AndExpr(a, b), env) is expected_and
    assert interpret_boolean(OrExpr(a, b), env) is expected_or


def test_not():
    env = env_of(flag=False)
    assert interpret_boolean(NotExpr(BooleanVariableRef("flag")), env) is True


def test_or_does_not_short_circuit():
    expr = OrExpr(BooleanConstant(True), BooleanVariableRef("missing"))
    with pytest.raises(UndefinedVariableError):
        interpret_boolean(expr, Environment())


def test_and_does_not_short_circuit():
    expr = AndExpr(BooleanConstant(False), BooleanVariableRef("missing"))
    with pytest.raises(UndefinedVariableError):
        interpret_boolean(expr, Environment())


def test_boolean_variable_holding_a_number():
    with pytest.raises(TypeMismatchError):
        interpret_boolean(BooleanVariableRef("n"), env_of(n=1))


def test_and_on_a_number_operand():
    with pytest.raises(TypeMismatchError):
        interpret_boolean(AndExpr(NumberLiteral(1.0), BooleanConstant(True)), Environment())


def test_interpret_boolean_rejects_numeric_result():
    with pytest.raises(TypeMismatchError):
        interpret_boolean(NumberLiteral(0.0), Environment())


def test_deep_boolean_chain():
    expr = BooleanConstant(False)
    for _ in range(1500):
        expr = OrExpr(expr, NotExpr(BooleanConstant(True)))
    assert interpret_boolean(AndExpr(expr, BooleanConstant(True)), Environment()) is False

import pytest

from tinyinterp import Environment, TypeMismatchError, UndefinedVariableError


def test_set_and_get_round_trip():
    env = Environment()
    env.set_variable("x", 2.5)
    assert env.get_variable("x") == 2.5


def test_integers_are_stored_as_floats():
    env = Environment()
    env.set_variable("x", 10)
    value = env.get_variable("x")
    assert value == 10.0
    assert isinstance(value, float)


def test_booleans_are_not_turned_into_numbers():
    env = Environment()
    env.set_variable("flag", True)
    assert env.get_variable("flag") is True


def test_last_write_wins():
    env = Environment()
    env.set_variable("x", 1)
    env.set_variable("x", "one")
    assert env.get_variable("x") == "one"
    assert len(env) == 1


def test_names_are_case_sensitive():
    env = Environment()
    env.set_variable("x", 1)
    assert env.has_variable("x")
    assert not env.has_variable("X")
    with pytest.raises(UndefinedVariableError):
        env.get_variable("X")


def test_undefined_variable_carries_name():
    with pytest.raises(UndefinedVariableError) as info:
        Environment().get_variable("missing")
    assert info.value.name == "missing"


def test_empty_name_is_rejected():
    with pytest.raises(ValueError):
        Environment().set_variable("", 1)


def test_unsupported_value_type_is_rejected():
    with pytest.raises(TypeMismatchError):
        Environment().set_variable("x", None)


def test_reads_do_not_mutate():
    env = Environment()
    env.set_variable("a", 1)
    snapshot = env.variables()
    env.get_variable("a")
    env.has_variable("b")
    assert env.variables() == snapshot


def test_variables_is_a_copy_in_insertion_order():
    env = Environment()
    env.set_variable("b", 2)
    env.set_variable("a", 1)
    values = env.variables()
    assert list(values) == ["b", "a"]
    values["c"] = 3.0
    assert "c" not in env


def test_clear_empties_the_store():
    env = Environment()
    env.set_variable("a", 1)
    env.clear()
    assert len(env) == 0


def test_integer_too_large_for_a_float():
    with pytest.raises(TypeMismatchError):
        Environment().set_variable("x", 10 ** 400)

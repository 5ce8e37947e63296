import pytest

from scriptvars import MAX_KEY_SIZE, MAX_SCRIPT_VARS, MAX_VALUE_SIZE
from scriptvars.errors import InvalidArgumentError

from conftest import create_key, create_value


def test_no_script_vars_by_default(store):
    variables = store.get_script_vars("ScriptName")

    assert variables is not None
    assert len(variables) == 0


def test_unknown_script_var_is_none(store):
    assert store.get_script_var("ScriptName", create_key()) is None
    assert store.get_script_var(None, None) is None


def test_set_script_var(store):
    key, value = create_key(), create_value()

    store.set_script_var("ScriptName", key, value)

    assert store.get_script_vars("ScriptName")[key] == value
    assert store.get_script_var("ScriptName", key) == value


def test_none_value_removes_script_var(store):
    key = create_key()
    store.set_script_var("ScriptName", key, create_value())

    store.set_script_var("ScriptName", key, None)

    assert key not in store.get_script_vars("ScriptName")
    assert store.get_script_var("ScriptName", key) is None
    assert "ScriptName" not in store.get_script_names()


def test_removing_from_unknown_script_does_not_create_it(store):
    store.set_script_var("Ghost", create_key(), None)

    assert store.get_script_names() == frozenset()


@pytest.mark.parametrize("script_name", [None, "", 10])
def test_set_script_var_rejects_invalid_script_name(store, script_name):
    with pytest.raises(InvalidArgumentError):
        store.set_script_var(script_name, create_key(), create_value())


@pytest.mark.parametrize(
    ("key", "value"),
    [
        (None, "value"),
        ("", "value"),
        ("k" * (MAX_KEY_SIZE + 1), "value"),
        ("key", "v" * (MAX_VALUE_SIZE + 1)),
        ("key", 3.14),
    ],
)
def test_set_script_var_rejects_invalid_key_or_value(store, key, value):
    with pytest.raises(InvalidArgumentError):
        store.set_script_var("ScriptName", key, value)
    assert store.get_script_names() == frozenset()


def test_script_vars_capacity(store):
    for i in range(MAX_SCRIPT_VARS):
        store.set_script_var("ScriptName", f"key-{i}", create_value())

    with pytest.raises(InvalidArgumentError, match="ScriptName"):
        store.set_script_var("ScriptName", "one-too-many", create_value())

    # overwriting is still allowed, and other scripts have their own budget
    store.set_script_var("ScriptName", "key-0", "overwritten")
    store.set_script_var("OtherScript", "key-0", create_value())

    assert store.get_script_var("ScriptName", "key-0") == "overwritten"
    assert len(store.get_script_vars("ScriptName")) == MAX_SCRIPT_VARS


def test_script_vars_capacity_does_not_count_globals(small_store):
    for key in ("a", "b", "c"):
        small_store.set_global_var(key, "x")

    small_store.set_script_var("s", "a", "x")
    small_store.set_script_var("s", "b", "x")
    with pytest.raises(InvalidArgumentError):
        small_store.set_script_var("s", "c", "x")


def test_script_vars_not_visible_to_other_scripts(store):
    key = create_key()

    store.set_script_var("ScriptName1", key, create_value())

    assert store.get_script_var("ScriptName2", key) is None
    assert store.get_script_vars("ScriptName2") == {}


def test_script_vars_are_separate_from_globals(store):
    store.set_script_var("ScriptName", "shared", "script")
    store.set_global_var("shared", "global")

    assert store.get_script_var("ScriptName", "shared") == "script"
    assert store.get_global_var("shared") == "global"


def test_clear_script_vars(store):
    store.set_script_var("ScriptName1", create_key(), create_value())
    store.set_script_var("ScriptName2", create_key(), create_value())
    store.set_global_var(create_key(), create_value())

    store.clear_script_vars("ScriptName1")

    assert len(store.get_script_vars("ScriptName1")) == 0
    assert len(store.get_global_vars()) == 1
    assert len(store.get_script_vars("ScriptName2")) == 1


def test_clear_unknown_script_vars(store):
    store.clear_script_vars("NeverSeen")
    assert store.get_script_names() == frozenset()


def test_clear_removes_everything(store):
    store.set_script_var("ScriptName", create_key(), create_value())
    store.set_global_var(create_key(), create_value())

    store.clear()

    assert len(store.get_global_vars()) == 0
    assert len(store.get_script_vars("ScriptName")) == 0
    assert store.get_script_names() == frozenset()


def test_script_names(store):
    store.set_script_var("a", "k", "v")
    store.set_script_var("b", "k", "v")

    assert store.get_script_names() == {"a", "b"}


def test_snapshot(store):
    store.set_global_var("g", "1")
    store.set_script_var("a", "k", "v")

    snapshot = store.snapshot()
    store.set_global_var("g", "2")

    assert snapshot["global"] == {"g": "1"}
    assert snapshot["scripts"]["a"] == {"k": "v"}
    assert list(snapshot["scripts"]) == ["a"]


def test_script_var_size_boundaries(store):
    key, value = "k" * MAX_KEY_SIZE, "v" * MAX_VALUE_SIZE

    store.set_script_var("ScriptName", key, value)

    assert store.get_script_var("ScriptName", key) == value
    with pytest.raises(InvalidArgumentError):
        store.set_script_var("ScriptName", key + "k", create_value())
    with pytest.raises(InvalidArgumentError):
        store.set_script_var("ScriptName", create_key(), value + "v")
    assert store.get_script_vars("ScriptName") == {key: value}


@pytest.mark.parametrize("bad", [["list"], {"a": 1}, 10])
def test_get_script_var_with_non_string_arguments(store, bad):
    store.set_script_var("ScriptName", "key", "value")

    assert store.get_script_var("ScriptName", bad) is None
    assert store.get_script_var(bad, "key") is None
    assert store.get_script_vars(bad) == {}

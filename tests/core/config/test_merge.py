# tests/core/config/test_merge.py
"""
Testes da política de deep-merge de configuração.

Os testes asseguram que:
- valores escalares são sobrescritos corretamente
- dicionários são mesclados de forma recursiva
- listas são sobrescritas integralmente
- conflitos de tipo são detectados e rejeitados explicitamente
- objetos de entrada não são mutados durante o merge
"""

import pytest

try:
    from examplegen.core.config.merge import deep_merge
    from examplegen.core.config.errors import ConfigTypeConflictError
except Exception as e:  # noqa: BLE001
    deep_merge = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing config merge modules. Implement:\n"
            "- src/examplegen/core/config/merge.py (deep_merge)\n"
            "- src/examplegen/core/config/errors.py (ConfigTypeConflictError)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_merge_simple_override():
    _require_imports()
    base = {"a": 1, "b": 2}
    override = {"b": 99}
    out = deep_merge(base, override)
    assert out == {"a": 1, "b": 99}
    assert base == {"a": 1, "b": 2}
    assert override == {"b": 99}


def test_merge_nested_dict():
    _require_imports()
    base = {"output": {"dir_name": "examples-generated", "extension": "yaml"}}
    override = {"output": {"extension": "yml"}}
    out = deep_merge(base, override)
    assert out == {"output": {"dir_name": "examples-generated", "extension": "yml"}}


def test_merge_list_override_total():
    """
    Listas do override substituem totalmente a lista da base.
    """
    _require_imports()
    base = {"resolution": {"strip_fields": ["depends_on", "lifecycle"]}}
    override = {"resolution": {"strip_fields": ["depends_on"]}}
    out = deep_merge(base, override)
    assert out == {"resolution": {"strip_fields": ["depends_on"]}}


def test_merge_new_keys_are_added():
    _require_imports()
    out = deep_merge({"a": {"b": 1}}, {"a": {"c": 2}, "d": [1]})
    assert out == {"a": {"b": 1, "c": 2}, "d": [1]}


def test_merge_none_replaces_optional_value():
    _require_imports()
    out = deep_merge({"report": {"path": "x.json"}}, {"report": {"path": None}})
    assert out == {"report": {"path": None}}


def test_merge_numeric_kinds_are_compatible():
    _require_imports()
    assert deep_merge({"n": 1}, {"n": 1.5}) == {"n": 1.5}


def test_merge_type_conflict_raises():
    _require_imports()
    with pytest.raises(ConfigTypeConflictError):
        deep_merge({"output": {"dir_name": "x"}}, {"output": "DEBUG"})


def test_merge_bool_vs_int_conflict_raises():
    _require_imports()
    with pytest.raises(ConfigTypeConflictError):
        deep_merge({"report": {"enabled": True}}, {"report": {"enabled": 1}})


def test_merge_requires_dict_roots():
    _require_imports()
    with pytest.raises(ConfigTypeConflictError):
        deep_merge({"a": 1}, ["a"])

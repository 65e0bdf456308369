"""Tests for CallableRegistry name resolution."""

import os.path
import pathlib

import pytest
import yaml

from invocator.callable import CallableRegistry
from invocator.callable.registry import import_object
from invocator.config import ConfigError, load_config


def double(x):
    return x * 2


class TestImportObject:
    """Tests for import_object."""

    def test_colon_path(self):
        assert import_object("os.path:join") is os.path.join

    def test_dotted_path(self):
        assert import_object("os.path.join") is os.path.join

    def test_nested_attribute(self):
        assert import_object("pathlib:Path.cwd") == pathlib.Path.cwd

    def test_missing_module(self):
        with pytest.raises(ImportError):
            import_object("no_such_module_xyz:thing")

    def test_missing_attribute(self):
        with pytest.raises(AttributeError):
            import_object("os.path:no_such_function")

    def test_not_a_path(self):
        with pytest.raises(ImportError):
            import_object("plain")


class TestRegisterFunction:
    """Tests for explicit function registration."""

    def test_register_and_resolve(self):
        registry = CallableRegistry()
        registry.register_function("double", double)
        assert registry.resolve_function("double") is double
        assert registry.has_function("double")
        assert registry.list_functions() == ["double"]

    def test_registered_name_shadows_builtin(self):
        registry = CallableRegistry()
        registry.register_function("len", double)
        assert registry.resolve_function("len") is double

    def test_register_non_callable_raises(self):
        registry = CallableRegistry()
        with pytest.raises(TypeError):
            registry.register_function("x", 42)

    def test_register_empty_name_raises(self):
        registry = CallableRegistry()
        with pytest.raises(ValueError):
            registry.register_function("", double)


class TestResolveFunction:
    """Tests for builtin and import path fallbacks."""

    def test_builtin(self):
        assert CallableRegistry().resolve_function("len") is len

    def test_import_path(self):
        assert CallableRegistry().resolve_function("os.path.join") is os.path.join

    def test_import_path_disabled(self):
        registry = CallableRegistry(allow_imports=False)
        with pytest.raises(KeyError, match="Unknown function"):
            registry.resolve_function("os.path.join")

    def test_unknown_name(self):
        with pytest.raises(KeyError, match="Unknown function: no_such_fn"):
            CallableRegistry().resolve_function("no_such_fn")

    def test_class_is_not_a_function(self):
        with pytest.raises(KeyError):
            CallableRegistry().resolve_function("dict")


class TestImportFailures:
    """Any failure while importing surfaces as a chained KeyError."""

    def _module(self, tmp_path, monkeypatch, name, source):
        (tmp_path / f"{name}.py").write_text(source)
        monkeypatch.syspath_prepend(str(tmp_path))
        return name

    def test_module_init_error(self, tmp_path, monkeypatch):
        name = self._module(
            tmp_path, monkeypatch, "invocator_raises_on_import",
            "raise RuntimeError('module init failed')\n",
        )
        with pytest.raises(KeyError, match="Unknown function") as exc_info:
            CallableRegistry().resolve_function(f"{name}:fn")
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    def test_syntax_error(self, tmp_path, monkeypatch):
        name = self._module(tmp_path, monkeypatch, "invocator_bad_syntax", "def (:\n")
        with pytest.raises(KeyError) as exc_info:
            CallableRegistry().resolve_class(f"{name}:Thing")
        assert isinstance(exc_info.value.__cause__, SyntaxError)

    def test_missing_dependency(self, tmp_path, monkeypatch):
        name = self._module(
            tmp_path, monkeypatch, "invocator_needs_dep",
            "import no_such_dependency_xyz\n\ndef fn():\n    pass\n",
        )
        with pytest.raises(KeyError) as exc_info:
            CallableRegistry().resolve_function(f"{name}:fn")
        assert isinstance(exc_info.value.__cause__, ImportError)

    def test_missing_attribute(self):
        with pytest.raises(KeyError) as exc_info:
            CallableRegistry().resolve_function("os.path:no_such_function")
        assert isinstance(exc_info.value.__cause__, AttributeError)

    def test_module_getattr_error(self, tmp_path, monkeypatch):
        name = self._module(
            tmp_path, monkeypatch, "invocator_lazy_attrs",
            "def __getattr__(name):\n    raise ValueError(name)\n",
        )
        with pytest.raises(KeyError) as exc_info:
            CallableRegistry().resolve_function(f"{name}:fn")
        assert isinstance(exc_info.value.__cause__, ValueError)


class TestResolveClass:
    """Tests for class resolution."""

    def test_registered_class(self, some_class):
        registry = CallableRegistry()
        registry.register_class("SomeClass", some_class)
        assert registry.resolve_class("SomeClass") is some_class
        assert registry.has_class("SomeClass")
        assert registry.list_classes() == ["SomeClass"]

    def test_builtin_class(self):
        assert CallableRegistry().resolve_class("int") is int

    def test_import_path_class(self):
        assert CallableRegistry().resolve_class("pathlib:Path") is pathlib.Path

    def test_function_is_not_a_class(self):
        with pytest.raises(KeyError, match="Unknown class"):
            CallableRegistry().resolve_class("len")

    def test_register_non_class_raises(self):
        with pytest.raises(TypeError):
            CallableRegistry().register_class("len", len)


class TestFromConfig:
    """Tests for building a registry from configuration."""

    def _config(self, tmp_path, data):
        path = tmp_path / "invocator.yaml"
        path.write_text(yaml.dump(data))
        return load_config(path)

    def test_loads_functions_and_classes(self, tmp_path):
        config = self._config(tmp_path, {
            "registry": {
                "functions": {"strlen": "builtins:len"},
                "classes": {"Path": "pathlib:Path"},
            },
        })
        registry = CallableRegistry.from_config(config)
        assert registry.resolve_function("strlen") is len
        assert registry.resolve_class("Path") is pathlib.Path

    def test_allow_imports_flag(self, tmp_path):
        config = self._config(tmp_path, {"registry": {"allow_imports": False}})
        assert CallableRegistry.from_config(config).allow_imports is False

    def test_bad_function_path(self, tmp_path):
        config = self._config(tmp_path, {
            "registry": {"functions": {"broken": "no_such_module_xyz:fn"}},
        })
        with pytest.raises(ConfigError, match="broken") as exc_info:
            CallableRegistry.from_config(config)
        assert isinstance(exc_info.value.__cause__, ImportError)

    def test_class_configured_as_function(self, tmp_path):
        config = self._config(tmp_path, {
            "registry": {"functions": {"Path": "pathlib:Path"}},
        })
        with pytest.raises(ConfigError, match="not a function"):
            CallableRegistry.from_config(config)

    def test_function_configured_as_class(self, tmp_path):
        config = self._config(tmp_path, {
            "registry": {"classes": {"join": "os.path:join"}},
        })
        with pytest.raises(ConfigError, match="not a class"):
            CallableRegistry.from_config(config)

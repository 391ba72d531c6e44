"""Unit tests for infrastructure.i18n.registry."""

import pytest

from infrastructure.i18n.errors import ConfigurationError, LoaderNotFoundError
from infrastructure.i18n.loader import JsonFileLoader, YamlFileLoader
from infrastructure.i18n.registry import LoaderRegistry, create_default_registry


@pytest.mark.unit
class TestLoaderRegistry:
    def test_register_and_resolve(self):
        registry = LoaderRegistry()
        loader = YamlFileLoader()

        registry.register("yml", loader)

        assert registry.resolve("yml") is loader
        assert registry.supported_formats() == frozenset({"yml"})

    def test_leading_dot_is_ignored(self):
        registry = LoaderRegistry()
        loader = JsonFileLoader()

        registry.register(".json", loader)

        assert registry.resolve("json") is loader
        assert registry.resolve(".json") is loader

    def test_resolve_unknown_format_raises(self):
        with pytest.raises(LoaderNotFoundError) as exc_info:
            LoaderRegistry().resolve("xyz")

        assert exc_info.value.format == "xyz"
        assert str(exc_info.value) == "could not find loader for xyz files"

    def test_declared_format_without_loader(self):
        registry = LoaderRegistry()

        registry.declare("xyz")

        assert "xyz" in registry.supported_formats()
        with pytest.raises(ConfigurationError):
            registry.resolve("xyz")


@pytest.mark.unit
class TestCreateDefaultRegistry:
    def test_all_builtin_formats(self):
        registry = create_default_registry()

        assert registry.supported_formats() == frozenset(
            {"yml", "yaml", "json", "xlf", "xliff", "po", "mo", "ini", "csv"}
        )

    def test_yaml_extensions_share_loader(self):
        registry = create_default_registry()

        assert registry.resolve("yml") is registry.resolve("yaml")
        assert isinstance(registry.resolve("yml"), YamlFileLoader)

    def test_restricted_formats(self):
        registry = create_default_registry(["yml", ".json"])

        assert registry.supported_formats() == frozenset({"yml", "json"})
        with pytest.raises(LoaderNotFoundError):
            registry.resolve("po")

    def test_format_without_builtin_loader_is_declared(self):
        registry = create_default_registry(["yml", "xyz"])

        assert "xyz" in registry.supported_formats()
        with pytest.raises(LoaderNotFoundError):
            registry.resolve("xyz")

"""Tests for the jurisdiction registry and built-in registration."""
from __future__ import annotations

from jurisdictions.builtin import BUILTIN_MODULES, register_builtin_jurisdictions
from jurisdictions.contract import JurisdictionModule
from jurisdictions.registry import JurisdictionRegistry, Result, get_registry
from models.shared import BUILTIN_JURISDICTIONS


class TestResult:
    """Tests for the Result value."""

    def test_success(self):
        """Successful results carry a value and no error."""
        result = Result.success(42)
        assert result.ok
        assert result.value == 42
        assert result.error is None

    def test_failure(self):
        """Failed results carry an error and no value."""
        result = Result.failure("boom")
        assert not result.ok
        assert result.value is None
        assert result.error == "boom"


class TestJurisdictionRegistry:
    """Tests for register, lookup, list and clear."""

    def test_register_and_get(self, empty_registry):
        """A registered module is retrievable by id."""
        module = BUILTIN_MODULES[0][0]
        empty_registry.register("eu-ai-act", "EU AI Act", "Europe", "desc", module)

        found = empty_registry.get("eu-ai-act")
        assert found.ok
        assert found.value.name == "EU AI Act"
        assert empty_registry.get_module("eu-ai-act").value is module
        assert empty_registry.has("eu-ai-act")
        assert "eu-ai-act" in empty_registry

    def test_get_unknown_is_failure(self, empty_registry):
        """Unknown ids come back as failed results, never exceptions."""
        found = empty_registry.get("atlantis")
        assert not found.ok
        assert "atlantis" in found.error
        assert not empty_registry.get_module("atlantis").ok

    def test_register_replaces_existing(self, empty_registry):
        """Registering the same id twice keeps one entry, the latest."""
        first, second = BUILTIN_MODULES[0][0], BUILTIN_MODULES[1][0]
        empty_registry.register("x", "First", "r", "d", first)
        empty_registry.register("x", "Second", "r", "d", second)

        assert len(empty_registry) == 1
        assert empty_registry.get("x").value.name == "Second"

    def test_list_preserves_registration_order(self, empty_registry):
        """list() and list_ids() follow registration order."""
        for jid in ("b", "a", "c"):
            empty_registry.register(jid, jid.upper(), "r", "d", BUILTIN_MODULES[0][0])
        assert empty_registry.list_ids() == ["b", "a", "c"]
        assert [e.name for e in empty_registry.list()] == ["B", "A", "C"]

    def test_clear(self, registry):
        """clear() drops every registration."""
        assert len(registry) > 0
        registry.clear()
        assert len(registry) == 0
        assert registry.list() == []

    def test_default_registry_is_shared(self):
        """get_registry() always returns the same instance."""
        assert get_registry() is get_registry()


class TestBuiltinRegistration:
    """Tests for register_builtin_jurisdictions."""

    def test_registers_all_builtins(self, registry):
        """All twelve shipped jurisdictions are registered in the canonical order."""
        assert registry.list_ids() == list(BUILTIN_JURISDICTIONS)

    def test_registers_on_given_empty_registry(self):
        """An explicitly passed empty registry is populated, not the process default."""
        fresh = JurisdictionRegistry()
        default_before = len(get_registry())

        returned = register_builtin_jurisdictions(fresh)

        assert returned is fresh
        assert len(fresh) == len(BUILTIN_JURISDICTIONS)
        assert len(get_registry()) == default_before

    def test_idempotent(self, registry):
        """Calling registration twice does not duplicate entries."""
        register_builtin_jurisdictions(registry)
        assert len(registry) == len(BUILTIN_JURISDICTIONS)

    def test_modules_satisfy_protocol(self, registry):
        """Every registered module implements the module contract."""
        for entry in registry.list():
            assert isinstance(entry.module, JurisdictionModule)
            assert entry.module.id == entry.id

from __future__ import annotations

import os

from chat_gateway.config import reset_config_cache
from chat_gateway.config.credentials import EnvCredentialResolver, StaticCredentialResolver
from chat_gateway.config.env import (
    ENV_ALIASES,
    ENV_MAP,
    get_env_var_candidates,
    resolve_provider_key,
)


def test_env_map_contains_expected_keys():
    assert set(ENV_MAP) == {"openai", "anthropic", "gemini"}  # nosec B101
    for provider, canonical in ENV_MAP.items():
        assert ENV_ALIASES[provider][0] == canonical  # nosec B101


def test_env_var_candidates_canonical_first():
    assert list(get_env_var_candidates("gemini")) == [  # nosec B101
        "GEMINI_API_KEY",
        "GOOGLE_API_KEY",
        "VITE_GOOGLE_API_KEY",
        "VITE_GEMINI_API_KEY",
    ]
    assert list(get_env_var_candidates("unknown")) == []  # nosec B101


def test_resolve_prefers_canonical_then_aliases():
    env = {"GOOGLE_API_KEY": "g-alias", "VITE_GEMINI_API_KEY": "g-vite"}
    assert resolve_provider_key("gemini", env) == ("g-alias", "GOOGLE_API_KEY")  # nosec B101
    env["GEMINI_API_KEY"] = "g-canon"
    assert resolve_provider_key("gemini", env) == ("g-canon", "GEMINI_API_KEY")  # nosec B101


def test_resolve_skips_blank_values():
    env = {"OPENAI_API_KEY": "  ", "VITE_OPENAI_API_KEY": " sk-v "}
    assert resolve_provider_key("openai", env) == ("sk-v", "VITE_OPENAI_API_KEY")  # nosec B101
    assert resolve_provider_key("anthropic", {}) == (None, None)  # nosec B101


def test_env_resolver_snapshots_at_construction(monkeypatch):
    monkeypatch.setenv("VITE_ANTHROPIC_API_KEY", "ak-1")
    resolver = EnvCredentialResolver()
    monkeypatch.setenv("VITE_ANTHROPIC_API_KEY", "ak-2")
    monkeypatch.setenv("OPENAI_API_KEY", "sk-late")
    assert resolver.resolve("anthropic") == "ak-1"  # nosec B101
    assert resolver.resolve("openai") is None  # nosec B101
    assert resolver.configured() == {"openai": False, "anthropic": True, "gemini": False}  # nosec B101


def test_env_resolver_with_explicit_mapping():
    resolver = EnvCredentialResolver({"GOOGLE_API_KEY": "g"})
    assert resolver.resolve("GEMINI") == "g"  # nosec B101


def test_static_resolver_hides_values_in_repr():
    resolver = StaticCredentialResolver({"openai": "sk-secret", "gemini": ""})
    assert resolver.resolve("openai") == "sk-secret"  # nosec B101
    assert resolver.resolve("gemini") is None  # nosec B101
    assert "sk-secret" not in repr(resolver)  # nosec B101


def test_env_resolver_reads_keys_from_dotenv_file(monkeypatch, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("OPENAI_API_KEY=sk-from-dotenv\nexport GOOGLE_API_KEY=\"g-from-dotenv\"\n")
    monkeypatch.setenv("DOTENV_FILE", str(env_file))
    monkeypatch.setenv("ANTHROPIC_API_KEY", "ak-real")
    reset_config_cache()
    try:
        resolver = EnvCredentialResolver()
        assert resolver.resolve("openai") == "sk-from-dotenv"  # nosec B101
        assert resolver.resolve("gemini") == "g-from-dotenv"  # nosec B101
        assert resolver.resolve("anthropic") == "ak-real"  # nosec B101
    finally:
        os.environ.pop("OPENAI_API_KEY", None)
        os.environ.pop("GOOGLE_API_KEY", None)


def test_dotenv_never_clobbers_process_keys(monkeypatch, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("OPENAI_API_KEY=sk-from-dotenv\n")
    monkeypatch.setenv("DOTENV_FILE", str(env_file))
    monkeypatch.setenv("OPENAI_API_KEY", "sk-process")
    reset_config_cache()
    assert EnvCredentialResolver().resolve("openai") == "sk-process"  # nosec B101

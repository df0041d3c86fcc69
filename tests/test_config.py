"""Configuration boundary tests."""

from __future__ import annotations

import pytest

from geminiclient.config import Config
from geminiclient.errors import ConfigurationError

pytestmark = pytest.mark.unit


def test_config_creation_with_mock_mode(gemini_model: str) -> None:
    """Config can be created with mock mode (no API key needed)."""
    cfg = Config(model=gemini_model, use_mock=True)
    assert cfg.model == gemini_model
    assert cfg.api_key is None


def test_config_auto_resolves_api_key_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GEMINI_API_KEY", "env-key")

    cfg = Config()

    assert cfg.api_key == "env-key"


def test_explicit_api_key_takes_precedence(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GEMINI_API_KEY", "env-key")

    cfg = Config(api_key="explicit-key")

    assert cfg.api_key == "explicit-key"


def test_missing_api_key_raises_clear_error() -> None:
    with pytest.raises(ConfigurationError, match="API key required") as exc:
        Config()
    assert exc.value.hint is not None
    assert "GEMINI_API_KEY" in exc.value.hint


@pytest.mark.parametrize(
    ("kwargs", "match"),
    [
        ({"model": ""}, "model"),
        ({"model": "   "}, "model"),
        ({"base_url": ""}, "base_url"),
        ({"timeout_s": 0}, "timeout_s"),
        ({"timeout_s": -1.5}, "timeout_s"),
    ],
)
def test_invalid_fields_are_rejected(kwargs: dict[str, object], match: str) -> None:
    with pytest.raises(ConfigurationError, match=match) as exc:
        Config(api_key="k", **kwargs)  # type: ignore[arg-type]
    assert exc.value.hint is not None


def test_generate_content_uri_ends_with_key_query() -> None:
    cfg = Config(model="gemini-1.5-pro", api_key="k", base_url="https://proxy.local/v1/")
    assert cfg.generate_content_uri == (
        "https://proxy.local/v1/models/gemini-1.5-pro:generateContent?key="
    )


def test_config_is_frozen() -> None:
    cfg = Config(api_key="k")
    with pytest.raises(AttributeError):
        cfg.model = "other"  # type: ignore[misc]


def test_repr_redacts_api_key() -> None:
    cfg = Config(api_key="super-secret")
    assert "super-secret" not in repr(cfg)
    assert "[REDACTED]" in str(cfg)

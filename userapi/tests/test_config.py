from __future__ import annotations

import pytest

from userapi.application.services.tokens import TokenSettings
from userapi.shared.config import AppConfig


@pytest.fixture()
def env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> pytest.MonkeyPatch:
    monkeypatch.chdir(tmp_path)
    for name in ("secret", "APP_ENV", "ALLOWED_ORIGINS", "PORT"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_secret_is_read_from_environment(env: pytest.MonkeyPatch) -> None:
    env.setenv("secret", "from-env")

    config = AppConfig()

    assert config.secret == "from-env"
    assert TokenSettings.from_config(config).secret == "from-env"


def test_blank_secret_counts_as_missing(env: pytest.MonkeyPatch) -> None:
    env.setenv("secret", "   ")

    assert AppConfig().secret is None


def test_defaults(env: pytest.MonkeyPatch) -> None:
    config = AppConfig()

    assert config.port == 3000
    assert config.secret is None
    assert not config.is_production()


def test_allowed_origins_are_comma_separated(env: pytest.MonkeyPatch) -> None:
    env.setenv("ALLOWED_ORIGINS", "https://a.example, https://b.example")

    assert AppConfig().security.allowed_origins == ["https://a.example", "https://b.example"]


@pytest.mark.parametrize("secret", [None, "secret", "dev"])
def test_production_refuses_weak_secret(env: pytest.MonkeyPatch, secret: str | None) -> None:
    env.setenv("APP_ENV", "production")
    if secret is not None:
        env.setenv("secret", secret)

    with pytest.raises(SystemExit):
        AppConfig()


def test_production_accepts_strong_secret(env: pytest.MonkeyPatch) -> None:
    env.setenv("APP_ENV", "production")
    env.setenv("secret", "a-long-random-signing-value")
    env.setenv("ALLOWED_ORIGINS", "https://app.example")

    assert AppConfig().is_production()

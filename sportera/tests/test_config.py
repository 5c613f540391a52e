"""Settings 테스트"""

import logging
from datetime import timedelta

import pytest

from sportera.setup.config import Settings


class TestSettings:
    """환경변수 기반 설정 테스트"""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("JWT_SECRET", raising=False)
        monkeypatch.delenv("FRONTEND_URL", raising=False)

        settings = Settings()

        assert settings.jwt_algorithm == "HS256"
        assert settings.access_token_ttl == timedelta(days=7)
        assert settings.bcrypt_rounds == 12
        assert settings.max_search_radius_m == 50_000
        assert settings.default_search_radius_m == 5_000
        assert settings.database_url is None
        assert settings.cors_origins == ["http://localhost:3001"]

    def test_env_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SPORTERA_ACCESS_TOKEN_TTL_SECONDS", "3600")
        monkeypatch.setenv("SPORTERA_BCRYPT_ROUNDS", "4")

        settings = Settings()

        assert settings.access_token_ttl == timedelta(hours=1)
        assert settings.bcrypt_rounds == 4

    def test_secret_alias(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("SPORTERA_JWT_SECRET_KEY", raising=False)
        monkeypatch.setenv("JWT_SECRET", "legacy-secret")

        settings = Settings()

        assert settings.jwt_secret_key.get_secret_value() == "legacy-secret"
        assert "legacy-secret" not in repr(settings)

    def test_missing_secret_uses_random_key(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        """키 미설정 시 공개된 고정 키 대신 프로세스 전용 임의 키 사용"""
        monkeypatch.delenv("SPORTERA_JWT_SECRET_KEY", raising=False)
        monkeypatch.delenv("JWT_SECRET", raising=False)

        with caplog.at_level(logging.WARNING, logger="sportera.setup.config"):
            first = Settings().jwt_secret_key.get_secret_value()
            second = Settings().jwt_secret_key.get_secret_value()

        assert first != second
        assert len(first) >= 32
        assert first != "change-me-in-production"
        assert "JWT secret key is not configured" in caplog.text

    def test_configured_secret_does_not_warn(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        monkeypatch.setenv("SPORTERA_JWT_SECRET_KEY", "configured-secret")

        with caplog.at_level(logging.WARNING, logger="sportera.setup.config"):
            settings = Settings()

        assert settings.jwt_secret_key.get_secret_value() == "configured-secret"
        assert "not configured" not in caplog.text

    def test_blank_secret_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SPORTERA_JWT_SECRET_KEY", "   ")

        with pytest.raises(ValueError):
            Settings()

    @pytest.mark.parametrize(
        "raw",
        ["http://a.test, http://b.test", '["http://a.test", "http://b.test"]'],
    )
    def test_cors_origins_formats(self, monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
        monkeypatch.setenv("SPORTERA_CORS_ORIGINS", raw)
        assert Settings().cors_origins == ["http://a.test", "http://b.test"]

    def test_invalid_rounds_rejected(self) -> None:
        with pytest.raises(ValueError):
            Settings(bcrypt_rounds=2)

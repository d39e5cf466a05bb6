"""Tests for shared/config.py."""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError as PydanticValidationError

from shared.config import Settings, get_settings


class TestSettings:
    def test_default_values(self):
        """Settings should have sensible defaults."""
        settings = Settings(_env_file=None)
        assert settings.app_name == "Aimo Pulse API"
        assert settings.debug is False
        assert settings.port == 8000
        assert settings.app_version == "0.1.0"
        assert settings.storage_backend == "memory"
        assert settings.kv_table_name == "kv_store"
        assert settings.pairing_code_ttl_minutes == 15
        assert settings.min_password_length == 6
        assert settings.shark_mode_max_days == 7
        assert settings.enable_push is True

    def test_loads_from_env(self):
        """Settings should load from environment variables."""
        with patch.dict(os.environ, {"DEBUG": "true", "PORT": "9000"}):
            settings = Settings(_env_file=None)
            assert settings.debug is True
            assert settings.port == 9000

    def test_loads_storage_config_from_env(self):
        with patch.dict(os.environ, {
            "STORAGE_BACKEND": "supabase",
            "SUPABASE_URL": "https://test.supabase.co",
            "SUPABASE_SERVICE_ROLE_KEY": "test-service-key",
            "KV_TABLE_NAME": "kv_store_pulse",
        }):
            settings = Settings(_env_file=None)
            assert settings.storage_backend == "supabase"
            assert settings.supabase_url == "https://test.supabase.co"
            assert settings.supabase_service_role_key == "test-service-key"
            assert settings.kv_table_name == "kv_store_pulse"

    def test_rejects_unknown_storage_backend(self):
        with patch.dict(os.environ, {"STORAGE_BACKEND": "redis"}):
            with pytest.raises(PydanticValidationError):
                Settings(_env_file=None)

    def test_loads_vapid_keys_from_env(self):
        with patch.dict(os.environ, {
            "VAPID_PUBLIC_KEY": "public",
            "VAPID_PRIVATE_KEY": "private",
        }):
            settings = Settings(_env_file=None)
            assert settings.vapid_public_key == "public"
            assert settings.vapid_private_key == "private"


class TestGetSettings:
    def test_get_settings_returns_settings_instance(self):
        """get_settings should return a Settings instance."""
        get_settings.cache_clear()
        settings = get_settings()
        assert isinstance(settings, Settings)

    def test_get_settings_is_cached(self):
        get_settings.cache_clear()
        assert get_settings() is get_settings()

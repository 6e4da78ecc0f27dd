"""
Test suite for configuration module
"""

from asset_ledger import config as config_module
from asset_ledger.config import LedgerConfig, get_config, reload_config


class TestLedgerConfig:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("ASSET_LEDGER_DECIMALS", raising=False)
        config = LedgerConfig(_env_file=None)

        assert config.decimals == 18
        assert config.initial_supply_units == 100_000_000_000
        assert config.jwt_algorithm == "HS256"
        assert config.auth_enabled is True

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("ASSET_LEDGER_DECIMALS", "6")
        monkeypatch.setenv("ASSET_LEDGER_OWNER_IDENTITY", "treasury")

        config = LedgerConfig(_env_file=None)

        assert config.decimals == 6
        assert config.owner_identity == "treasury"

    def test_reload_config(self, monkeypatch):
        original = get_config()
        monkeypatch.setenv("ASSET_LEDGER_LOG_LEVEL", "DEBUG")
        try:
            reloaded = reload_config()
            assert reloaded.log_level == "DEBUG"
            assert get_config() is reloaded
        finally:
            config_module.config = original

"""
Test suite for configuration module
"""

from minibank.config import MinibankConfig, get_config, reload_config


class TestConfig:
    
    def test_defaults(self, monkeypatch):
        for name in ("MINIBANK_LOG_LEVEL", "MINIBANK_LOG_FORMAT", "MINIBANK_STATEMENT_DATE_FORMAT"):
            monkeypatch.delenv(name, raising=False)
        
        config = MinibankConfig(_env_file=None)
        
        assert config.log_level == "INFO"
        assert config.log_format == "json"
        assert config.log_file is None
        assert config.statement_date_format == "%d/%m/%Y"
        assert config.enable_audit_logging is True
    
    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("MINIBANK_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("MINIBANK_ENABLE_AUDIT_LOGGING", "false")
        
        config = MinibankConfig(_env_file=None)
        
        assert config.log_level == "DEBUG"
        assert config.enable_audit_logging is False
    
    def test_reload_config(self, monkeypatch):
        monkeypatch.setenv("MINIBANK_LOG_FORMAT", "text")
        try:
            reloaded = reload_config()
            assert reloaded.log_format == "text"
            assert get_config() is reloaded
        finally:
            monkeypatch.delenv("MINIBANK_LOG_FORMAT")
            reload_config()

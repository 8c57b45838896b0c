import json
import pytest
import yaml
from unittest.mock import Mock

from dom_queries.core import ConfigurationError, ElementNotFoundError, QueryConfig, SuggestionError
from dom_queries.core.config import ConfigManager, resolve_config


class TestQueryConfig:
    """Test the settings object threaded into queries"""

    def test_defaults(self):
        config = QueryConfig()
        assert config.test_id_attribute == "data-testid"
        assert config.async_util_timeout == 1000
        assert config.async_util_interval == 50
        assert config.default_ignore == "script, style"
        assert not config.throw_suggestions

    def test_update_returns_copy(self):
        config = QueryConfig()
        updated = config.update(test_id_attribute="data-qa")
        assert updated.test_id_attribute == "data-qa"
        assert config.test_id_attribute == "data-testid"

    def test_update_rejects_unknown_keys(self):
        with pytest.raises(ConfigurationError, match="testIdAttribute"):
            QueryConfig().update(testIdAttribute="data-qa")

    def test_resolve_config(self):
        config = QueryConfig()
        assert resolve_config(config) is config
        assert isinstance(resolve_config(None), QueryConfig)

    def test_element_error_appends_snapshot(self):
        from bs4 import BeautifulSoup

        soup = BeautifulSoup("<p>hello</p>", "html.parser")
        error = QueryConfig().element_error("missing", soup)

        assert isinstance(error, ElementNotFoundError)
        assert error.container is soup
        assert str(error).startswith("missing\n\n")
        assert "hello" in str(error)

    def test_element_error_class(self):
        error = QueryConfig(dom_snapshot_limit=0).element_error("better", None, SuggestionError)
        assert isinstance(error, SuggestionError)
        assert str(error) == "better"

    def test_custom_reporter(self):
        custom = ValueError("custom")
        config = QueryConfig(get_element_error=Mock(return_value=custom))
        assert config.element_error("missing", "container") is custom
        config.get_element_error.assert_called_once_with("missing", "container")


class TestConfigManager:
    """Test file-based configuration"""

    def test_defaults_when_file_missing(self, tmp_path):
        manager = ConfigManager(tmp_path / "missing.yaml")
        assert manager.get("general.log_level") == "INFO"
        assert manager.get("queries.test_id_attribute") == "data-testid"
        assert manager.get("queries.nope", "fallback") == "fallback"

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "dom-queries.yaml"
        path.write_text(yaml.dump({"queries": {"test_id_attribute": "data-qa"}}))

        manager = ConfigManager(path)
        assert manager.get("queries.test_id_attribute") == "data-qa"
        # untouched defaults survive the merge
        assert manager.get("queries.async_util_timeout") == 1000

    def test_load_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"general": {"log_level": "DEBUG"}}))
        assert ConfigManager(path).get("general.log_level") == "DEBUG"

    def test_unsupported_format(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text("x = 1")
        with pytest.raises(ConfigurationError, match=".toml"):
            ConfigManager(path)

    def test_env_var_path(self, tmp_path, monkeypatch):
        path = tmp_path / "env.yaml"
        path.write_text(yaml.dump({"queries": {"warn_suggestions": True}}))
        monkeypatch.setenv("DOM_QUERIES_CONFIG", str(path))

        manager = ConfigManager()
        assert manager.config_path == path
        assert manager.get("queries.warn_suggestions") is True

    def test_set_and_save(self, tmp_path):
        path = tmp_path / "nested" / "config.yaml"
        manager = ConfigManager(path)
        manager.set("queries.async_util_interval", 10)
        manager.save()

        assert ConfigManager(path).get("queries.async_util_interval") == 10

    def test_to_query_config(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(yaml.dump({"queries": {"default_ignore": "noscript"}}))

        config = ConfigManager(path).to_query_config(throw_suggestions=True)
        assert config.default_ignore == "noscript"
        assert config.throw_suggestions is True

    def test_to_query_config_unknown_key(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(yaml.dump({"queries": {"timeout": 5}}))
        with pytest.raises(ConfigurationError, match="timeout"):
            ConfigManager(path).to_query_config()

"""
Tests for configuration loading and validation.
"""

import pytest

from wildfly_monitor.common.errors import ConfigError, ErrorCode
from wildfly_monitor.interface.config.loader import ConfigLoader


class TestConfigLoader:
    """Tests for ConfigLoader.load_from_file()."""

    def test_valid_config(self, write_config, valid_config_text, deployments_dir):
        config = ConfigLoader().load_from_file(write_config(valid_config_text))

        assert config.slack.channel == "#deploy"
        assert config.wildfly.marker_directory == str(deployments_dir)
        assert config.app.duration == 3
        assert config.app.notify_marker == ["failed"]

    def test_defaults(self, write_config):
        path = write_config("""
slack:
  api_url: "https://hooks.slack.example/x"
  channel: "#deploy"
wildfly:
  war_path: "/opt/wildfly/standalone/deployments/app.war"
""")
        config = ConfigLoader().load_from_file(path)

        assert config.app.duration == 5
        assert config.app.notify_marker == []
        assert config.app.log_path == ""
        assert config.app.log_level is None
        assert config.app.log_format == "json"
        assert config.app.order_sensitive is False
        assert config.slack.username == "Wildfly State Monitor"
        assert config.wildfly.marker_directory == "/opt/wildfly/standalone/deployments"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError) as exc_info:
            ConfigLoader().load_from_file(tmp_path / "nope.yaml")

        assert exc_info.value.code is ErrorCode.CONFIG_NOT_FOUND

    def test_parse_error(self, write_config):
        with pytest.raises(ConfigError) as exc_info:
            ConfigLoader().load_from_file(write_config("slack: [unclosed"))

        assert exc_info.value.code is ErrorCode.CONFIG_PARSE_ERROR

    def test_non_utf8_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_bytes(b'slack:\n  channel: "\xff\xfe"\n')

        with pytest.raises(ConfigError) as exc_info:
            ConfigLoader().load_from_file(path)

        assert exc_info.value.code is ErrorCode.CONFIG_PARSE_ERROR
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    def test_unreadable_file(self, write_config, valid_config_text, monkeypatch):
        path = write_config(valid_config_text)

        def denied(self, *args, **kwargs):
            raise PermissionError("denied")

        monkeypatch.setattr(type(path), "read_text", denied)

        with pytest.raises(ConfigError) as exc_info:
            ConfigLoader().load_from_file(path)

        assert exc_info.value.code is ErrorCode.CONFIG_PARSE_ERROR
        assert "denied" in exc_info.value.details["error"]

    def test_top_level_must_be_mapping(self, write_config):
        with pytest.raises(ConfigError) as exc_info:
            ConfigLoader().load_from_file(write_config("- a\n- b\n"))

        assert exc_info.value.code is ErrorCode.CONFIG_PARSE_ERROR

    @pytest.mark.parametrize(
        "text,field",
        [
            ('slack: {api_url: "", channel: "#d"}\nwildfly: {war_path: "/a/b.war"}', "slack.api_url"),
            ('slack: {api_url: "u", channel: ""}\nwildfly: {war_path: "/a/b.war"}', "slack.channel"),
            ('slack: {api_url: "u", channel: "#d"}\nwildfly: {war_path: ""}', "wildfly.war_path"),
            ('slack: {api_url: "u", channel: "#d"}', "wildfly"),
            ('slack: {api_url: "u", channel: "#d"}\nwildfly: {war_path: "/a/b.war"}\napp: {duration: 0}', "app.duration"),
        ],
    )
    def test_invalid_required_fields(self, write_config, text, field):
        with pytest.raises(ConfigError) as exc_info:
            ConfigLoader().load_from_file(write_config(text))

        assert exc_info.value.code is ErrorCode.CONFIG_INVALID
        assert any(err.startswith(field) for err in exc_info.value.details["errors"])

    def test_null_notify_marker_is_empty(self, write_config, valid_config_text):
        text = valid_config_text.replace("  notify_marker:\n    - failed\n", "  notify_marker:\n")
        config = ConfigLoader().load_from_file(write_config(text))

        assert config.app.notify_marker == []


class TestNotifyFilter:
    """Tests for ConfigLoader.notify_filter()."""

    def test_resolves_names(self, write_config, valid_config_text):
        loader = ConfigLoader()
        config = loader.load_from_file(write_config(valid_config_text))

        assert loader.notify_filter(config) == {"Failed"}

    def test_unknown_marker_is_fatal(self, write_config, valid_config_text):
        loader = ConfigLoader()
        text = valid_config_text.replace("- failed", "- exploded")
        config = loader.load_from_file(write_config(text))

        with pytest.raises(ConfigError) as exc_info:
            loader.notify_filter(config)

        assert exc_info.value.code is ErrorCode.MARKER_UNKNOWN

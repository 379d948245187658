"""
Tests for proxy settings and settings loading.
"""

import pytest
from pydantic import ValidationError

from smsproxy.config import (
    DEFAULT_SECTION,
    ProxySettings,
    SettingsValidationError,
    is_valid_hostname,
    load_settings,
    validate_settings,
)

VALID = {
    "host": "gw.example.com",
    "port": 443,
    "path": "/send",
    "username": "u",
    "password": "p",
    "sender": "ACME",
}


# =============================================================================
# Host name validation
# =============================================================================


class TestHostname:
    @pytest.mark.parametrize(
        "host",
        ["gw.example.com", "localhost", "10.0.0.1", "::1", "[2001:db8::1]", "sms-gw_1.local"],
    )
    def test_valid_hosts(self, host):
        assert is_valid_hostname(host) is True

    @pytest.mark.parametrize(
        "host",
        ["", "bad host", "-leading.example.com", "gw..example.com", "http://gw.example.com"],
    )
    def test_invalid_hosts(self, host):
        assert is_valid_hostname(host) is False


# =============================================================================
# ProxySettings
# =============================================================================


class TestProxySettings:
    def test_defaults(self):
        settings = ProxySettings(host="gw.example.com", username="u", password="p", sender="S")

        assert settings.port == 443
        assert settings.path == "/"
        assert settings.use_ssl is True
        assert settings.messages_per_second == 0
        assert settings.max_transmit_retry_count is None
        assert settings.request_timeout == 30.0

    def test_endpoint_https(self):
        settings = ProxySettings(**VALID)
        assert settings.endpoint == "https://gw.example.com:443/send"

    def test_endpoint_http(self):
        settings = ProxySettings(**{**VALID, "use_ssl": False, "port": 8080})
        assert settings.endpoint == "http://gw.example.com:8080/send"

    def test_path_gets_leading_slash(self):
        settings = ProxySettings(**{**VALID, "path": "api/send"})
        assert settings.path == "/api/send"

    def test_ipv6_endpoint_is_bracketed(self):
        settings = ProxySettings(**{**VALID, "host": "2001:db8::1"})
        assert settings.endpoint == "https://[2001:db8::1]:443/send"

    def test_is_immutable(self):
        settings = ProxySettings(**VALID)
        with pytest.raises(ValidationError):
            settings.sender = "OTHER"

    @pytest.mark.parametrize("port", [0, 65536, -1])
    def test_port_out_of_range(self, port):
        with pytest.raises(ValidationError):
            ProxySettings(**{**VALID, "port": port})

    @pytest.mark.parametrize("field", ["username", "password", "sender"])
    def test_blank_required_fields(self, field):
        with pytest.raises(ValidationError):
            ProxySettings(**{**VALID, field: "   "})

    def test_invalid_host(self):
        with pytest.raises(ValidationError, match="invalid host name"):
            ProxySettings(**{**VALID, "host": "not a host"})

    def test_negative_messages_per_second(self):
        with pytest.raises(ValidationError):
            ProxySettings(**{**VALID, "messages_per_second": -1})

    def test_password_is_secret(self):
        settings = ProxySettings(**VALID)

        assert "p" not in repr(settings.password)
        assert settings.password.get_secret_value() == "p"

    def test_loggable_options_exclude_credentials(self):
        options = ProxySettings(**VALID).loggable_options()

        assert options["sender"] == "ACME"
        assert "password" not in options
        assert "username" not in options


# =============================================================================
# validate_settings / load_settings
# =============================================================================


class TestValidateSettings:
    def test_returns_settings(self):
        settings = validate_settings(VALID)
        assert isinstance(settings, ProxySettings)
        assert settings.host == "gw.example.com"

    def test_missing_configuration(self):
        with pytest.raises(SettingsValidationError) as exc_info:
            validate_settings(None)

        assert exc_info.value.section == DEFAULT_SECTION
        assert "must be provided" in str(exc_info.value)

    def test_reports_every_failing_field(self):
        with pytest.raises(SettingsValidationError) as exc_info:
            validate_settings({**VALID, "port": 0, "sender": ""}, section="Transport:Proxies:Test")

        error = exc_info.value
        assert error.section == "Transport:Proxies:Test"
        assert len(error.errors) == 2
        assert any(e.startswith("port:") for e in error.errors)
        assert any(e.startswith("sender:") for e in error.errors)
        assert "Transport:Proxies:Test" in str(error)


class TestLoadSettings:
    def test_reads_prefixed_variables(self):
        environ = {
            "SMSPROXY_HOST": "gw.example.com",
            "SMSPROXY_PORT": "8443",
            "SMSPROXY_PATH": "/send",
            "SMSPROXY_USE_SSL": "false",
            "SMSPROXY_USERNAME": "u",
            "SMSPROXY_PASSWORD": "p",
            "SMSPROXY_SENDER": "ACME",
            "SMSPROXY_MESSAGES_PER_SECOND": "5",
            "SMSPROXY_MAX_TRANSMIT_RETRY_COUNT": "2",
        }

        settings = load_settings(environ)

        assert settings.port == 8443
        assert settings.use_ssl is False
        assert settings.messages_per_second == 5
        assert settings.max_transmit_retry_count == 2
        assert settings.endpoint == "http://gw.example.com:8443/send"

    def test_empty_retry_count_means_unbounded(self):
        environ = {
            "SMSPROXY_HOST": "gw.example.com",
            "SMSPROXY_USERNAME": "u",
            "SMSPROXY_PASSWORD": "p",
            "SMSPROXY_SENDER": "ACME",
            "SMSPROXY_MAX_TRANSMIT_RETRY_COUNT": "",
        }

        assert load_settings(environ).max_transmit_retry_count is None

    def test_missing_required_variable(self):
        with pytest.raises(SettingsValidationError) as exc_info:
            load_settings({"SMSPROXY_HOST": "gw.example.com"})

        fields = {e.split(":")[0] for e in exc_info.value.errors}
        assert fields == {"username", "password", "sender"}

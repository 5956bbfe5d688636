"""
Tests for configuration parsing.
"""

import pytest

from prompt_enhancer.config import DEFAULT_PORT, Settings, parse_port


class TestParsePort:
    """Tests for parse_port"""

    def test_valid_port(self):
        assert parse_port("8080") == 8080

    @pytest.mark.parametrize("raw", ["abc", "", "3000.5"])
    def test_not_an_integer(self, raw):
        with pytest.raises(ValueError, match="integer"):
            parse_port(raw)

    @pytest.mark.parametrize("raw", ["0", "65536", "-1"])
    def test_out_of_range(self, raw):
        with pytest.raises(ValueError, match="between"):
            parse_port(raw)


class TestSettings:
    """Tests for Settings"""

    def test_default_port_is_3000(self):
        assert DEFAULT_PORT == 3000

    def test_port_property(self, monkeypatch):
        monkeypatch.setattr(Settings, "PORT_RAW", "4321")
        assert Settings().PORT == 4321

    def test_invalid_port_falls_back_to_default(self, monkeypatch):
        monkeypatch.setattr(Settings, "PORT_RAW", "not-a-port")
        assert Settings().PORT == DEFAULT_PORT

    def test_validate_rejects_invalid_port(self, monkeypatch):
        monkeypatch.setattr(Settings, "PORT_RAW", "99999")
        with pytest.raises(ValueError):
            Settings.validate()

    def test_environment_helpers(self, monkeypatch):
        monkeypatch.setattr(Settings, "ENVIRONMENT", "Production")
        assert Settings.is_production() is True
        assert Settings.is_development() is False

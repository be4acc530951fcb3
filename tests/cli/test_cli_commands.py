"""
Tests for the info and sdks commands.
"""

import json

import pytest

from dotnetkit.cli.parser import CLI
from dotnetkit.cli.utils import get_installation
from dotnetkit.core.config import CONFIG_ENV_VAR
from dotnetkit.core.exceptions import ConfigurationError
from dotnetkit.core.platform import detect_platform
from dotnetkit.core.platform_capabilities import get_executable_name
from dotnetkit.installation.locator import resolve_current

from tests.fixtures.installations import make_dotnet_root


@pytest.fixture
def host_dotnet_root(tmp_path):
    """Installation root valid for the platform running the tests."""
    return make_dotnet_root(
        tmp_path / "dotnet",
        sdks=["8.0.100", "notaversion", "7.0.203-preview.1"],
        executable=get_executable_name(detect_platform().os),
    )


@pytest.fixture
def config_for(tmp_path, monkeypatch):
    """Write a settings file pointing at a root and return its path."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)

    def _write(root):
        config_file = tmp_path / "dotnetkit.yaml"
        config_file.write_text(f"dotnet_root: '{root}'\n")
        return config_file

    return _write


class TestGetInstallation:
    """Tests for get_installation."""

    def test_configured_root_bypasses_discovery(self, host_dotnet_root, config_for):
        args = CLI().parse_args(["--config", str(config_for(host_dotnet_root)), "info"])

        installation = get_installation(args)

        assert installation.location == host_dotnet_root
        assert resolve_current() is installation

    def test_discovery_from_environment(self, host_dotnet_root, monkeypatch):
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        monkeypatch.setenv("DOTNET_ROOT", str(host_dotnet_root))
        args = CLI().parse_args(["info"])

        assert get_installation(args).location == host_dotnet_root

    def test_custom_root_variable(self, host_dotnet_root, tmp_path, monkeypatch):
        config_file = tmp_path / "dotnetkit.yaml"
        config_file.write_text("root_env_var: MY_DOTNET_ROOT\n")
        monkeypatch.setenv("MY_DOTNET_ROOT", str(host_dotnet_root))
        args = CLI().parse_args(["--config", str(config_file), "info"])

        assert get_installation(args).location == host_dotnet_root

    def test_missing_config_file(self, tmp_path):
        args = CLI().parse_args(["--config", str(tmp_path / "missing.yaml"), "info"])

        with pytest.raises(ConfigurationError):
            get_installation(args)


class TestInfoCommand:
    """Tests for the info command."""

    def test_valid_installation(self, host_dotnet_root, config_for, capsys):
        config_file = config_for(host_dotnet_root)

        assert CLI().run(["--config", str(config_file), "info"]) == 0

        out = capsys.readouterr().out
        assert str(host_dotnet_root) in out
        assert "Valid:        yes" in out

    def test_invalid_configured_root(self, tmp_path, config_for, capsys):
        config_file = config_for(tmp_path / "empty")

        assert CLI().run(["--config", str(config_file), "info"]) == 1
        assert "Valid:        no" in capsys.readouterr().out


class TestSdksCommand:
    """Tests for the sdks command."""

    def test_lists_version_directories(self, host_dotnet_root, config_for, capsys):
        config_file = config_for(host_dotnet_root)

        assert CLI().run(["--config", str(config_file), "sdks"]) == 0

        out = capsys.readouterr().out
        assert "8.0.100" in out
        assert "7.0.203-preview.1" in out
        assert "notaversion" not in out

    def test_json_output(self, host_dotnet_root, config_for, capsys):
        config_file = config_for(host_dotnet_root)

        assert CLI().run(["--config", str(config_file), "sdks", "--json"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert sorted(item["version"] for item in data) == [
            "7.0.203-preview.1",
            "8.0.100",
        ]
        assert all(item["path"].startswith(str(host_dotnet_root)) for item in data)

    def test_empty_sdk_directory(self, tmp_path, config_for, capsys):
        root = make_dotnet_root(tmp_path / "empty-dotnet")
        config_file = config_for(root)

        assert CLI().run(["--config", str(config_file), "sdks"]) == 0
        assert "No SDKs found" in capsys.readouterr().out

    def test_missing_sdk_directory(self, tmp_path, config_for, capsys):
        root = make_dotnet_root(tmp_path / "broken", with_sdk_dir=False)
        config_file = config_for(root)

        assert CLI().run(["--config", str(config_file), "sdks"]) == 1
        assert "SDK directory is unavailable" in capsys.readouterr().err

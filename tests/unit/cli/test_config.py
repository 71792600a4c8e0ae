"""Unit tests for config commands.

Tests for cyclewalk config show and cyclewalk config init.
"""

import tomllib
from pathlib import Path

from cyclewalk.cli.main import app
from typer.testing import CliRunner

runner = CliRunner()


class TestConfigShow:
    """Tests for cyclewalk config show."""

    def test_show_defaults(self, tmp_path: Path) -> None:
        """Without a config file the defaults are shown."""
        result = runner.invoke(app, ["config", "show", "--config", str(tmp_path / "absent.toml")])

        assert result.exit_code == 0
        assert "Walker Configuration" in result.stdout
        assert "max_hops" in result.stdout
        assert "40" in result.stdout
        assert "defaults" in result.stdout

    def test_show_file_values(self, tmp_path: Path) -> None:
        """Values from the config file are shown."""
        config_file = tmp_path / "config.toml"
        config_file.write_text('[walker]\nmax_hops = 12\nexclude = [".git"]\n')

        result = runner.invoke(app, ["config", "show", "-c", str(config_file)])

        assert result.exit_code == 0
        assert "12" in result.stdout
        assert ".git" in result.stdout
        assert "defaults" not in result.stdout

    def test_show_invalid_file(self, tmp_path: Path) -> None:
        """An invalid config file exits with code 1."""
        config_file = tmp_path / "config.toml"
        config_file.write_text("[walker\n")

        result = runner.invoke(app, ["config", "show", "-c", str(config_file)])
        assert result.exit_code == 1

    def test_show_uses_xdg_config_home(self, tmp_path: Path) -> None:
        """The default location honours XDG_CONFIG_HOME."""
        config_dir = tmp_path / "cyclewalk"
        config_dir.mkdir()
        (config_dir / "config.toml").write_text("[walker]\nmax_hops = 7\n")

        result = runner.invoke(
            app, ["config", "show"], env={"XDG_CONFIG_HOME": str(tmp_path)}
        )

        assert result.exit_code == 0
        assert "7" in result.stdout
        assert "defaults" not in result.stdout


class TestConfigInit:
    """Tests for cyclewalk config init."""

    def test_init_writes_defaults(self, tmp_path: Path) -> None:
        """init writes a default config file."""
        config_file = tmp_path / "nested" / "config.toml"

        result = runner.invoke(app, ["config", "init", "--config", str(config_file)])

        assert result.exit_code == 0
        assert "Config written" in result.stdout
        data = tomllib.loads(config_file.read_text())
        assert data["walker"]["max_hops"] == 40
        assert data["walker"]["follow_symlinks"] is True
        assert data["walker"]["exclude"] == []

    def test_init_keeps_existing_file(self, tmp_path: Path) -> None:
        """init does not overwrite an existing file without --force."""
        config_file = tmp_path / "config.toml"
        config_file.write_text("[walker]\nmax_hops = 3\n")

        result = runner.invoke(app, ["config", "init", "-c", str(config_file)])

        assert result.exit_code == 0
        assert "already exists" in result.stdout
        assert config_file.read_text() == "[walker]\nmax_hops = 3\n"

    def test_init_force_overwrites(self, tmp_path: Path) -> None:
        """init --force replaces an existing file."""
        config_file = tmp_path / "config.toml"
        config_file.write_text("[walker]\nmax_hops = 3\n")

        result = runner.invoke(app, ["config", "init", "-c", str(config_file), "--force"])

        assert result.exit_code == 0
        assert tomllib.loads(config_file.read_text())["walker"]["max_hops"] == 40


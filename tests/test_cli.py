"""Tests for the command-line interface."""

import json
import subprocess

import pytest

from seqgeom import cli, commands

SIMPLE = "1{b[16]u[12]x:}2{r:}"
COMPLEX = "1{b[9-10]f[ACCGT]u[12]b[10]}2{r:}"


class TestParseCommand:
    """Tests for the parse command."""

    def test_simple(self, capsys):
        """Test the canonical form and classification are printed."""
        assert cli.main(["parse", SIMPLE]) == 0

        out = capsys.readouterr().out
        assert SIMPLE in out
        assert "simple geometry" in out

    def test_json(self, capsys):
        """Test JSON output."""
        assert cli.main(["parse", COMPLEX, "--json"]) == 0

        result = json.loads(capsys.readouterr().out)
        assert result["geometry"] == COMPLEX
        assert result["complex"] is True

    def test_syntax_error(self, capsys):
        """Test invalid geometry exits with an error."""
        assert cli.main(["parse", "1{b[16]v[3]u[12]x:}2{r:}"]) == 1

        assert "Error:" in capsys.readouterr().err


class TestConvertCommand:
    """Tests for the convert command."""

    def test_all(self, capsys):
        """Test both descriptions are printed for a simple geometry."""
        assert cli.main(["convert", SIMPLE]) == 0

        lines = capsys.readouterr().out.splitlines()
        assert lines == [
            f"--geometry {SIMPLE}",
            "--read-geometry 2[1-end] --bc-geometry 1[1-16] --umi-geometry 1[17-28]",
        ]

    def test_all_complex(self, capsys):
        """Test salmon is skipped for a complex geometry."""
        assert cli.main(["convert", COMPLEX]) == 0

        captured = capsys.readouterr()
        assert captured.out.splitlines() == [f"--geometry {COMPLEX}"]
        assert "complex geometry" in captured.err

    def test_salmon_complex(self, capsys):
        """Test requesting salmon for a complex geometry is an error."""
        assert cli.main(["convert", COMPLEX, "--format", "salmon"]) == 1

        assert "Error:" in capsys.readouterr().err


class TestCommandCommand:
    """Tests for the command command."""

    def test_print_commands(self, capsys):
        """Test commands are printed, one per line."""
        assert cli.main(["command", SIMPLE]) == 0

        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == f"piscem --geometry {SIMPLE}"
        assert lines[1].startswith("salmon --read-geometry")

    def test_config_json(self, tmp_path, capsys):
        """Test a config file sets executables and output format."""
        config_path = tmp_path / "tools.yaml"
        config_path.write_text("piscem:\n  executable: /opt/piscem\noutput_format: json\n")

        assert cli.main(["command", SIMPLE, "--config", str(config_path), "--tool", "piscem"]) == 0

        result = json.loads(capsys.readouterr().out)
        assert result == {"piscem": ["/opt/piscem", "--geometry", SIMPLE]}

    def test_missing_config(self, tmp_path, capsys):
        """Test a missing config file exits with an error."""
        assert cli.main(["command", SIMPLE, "--config", str(tmp_path / "missing.yaml")]) == 1

        assert "not found" in capsys.readouterr().err

    def test_salmon_only_complex(self, capsys):
        """Test no command can be built for salmon with a complex geometry."""
        assert cli.main(["command", COMPLEX, "--tool", "salmon"]) == 1

    def test_run(self, monkeypatch):
        """Test --run executes commands and stops on failure."""
        calls = []

        def fake_run(cmd):
            calls.append(cmd)
            return subprocess.CompletedProcess(cmd, 2 if cmd[0] == "piscem" else 0)

        monkeypatch.setattr(commands.subprocess, "run", fake_run)

        assert cli.main(["command", SIMPLE, "--run"]) == 2
        assert calls == [["piscem", "--geometry", SIMPLE]]


class TestArgs:
    """Tests for argument parsing."""

    def test_command_required(self):
        """Test a subcommand is required."""
        with pytest.raises(SystemExit):
            cli.parse_args([])

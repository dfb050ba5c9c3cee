"""Tests for downstream command assembly and execution."""

import subprocess

from seqgeom import PiscemGeomDesc, parse_geometry
from seqgeom import commands
from seqgeom.commands import build_command, build_commands, run_command
from seqgeom.config import Config, ToolConfig


class TestBuildCommands:
    """Tests for command assembly."""

    def test_build_command(self):
        """Test executable and extra arguments come before the geometry flags."""
        config = Config(piscem=ToolConfig(executable="/usr/bin/piscem", extra_args=["map-sc"]))
        desc = PiscemGeomDesc.from_fragment_geom(parse_geometry("1{b[16]u[12]x:}2{r:}"))

        assert build_command("piscem", desc, config) == [
            "/usr/bin/piscem",
            "map-sc",
            "--geometry",
            "1{b[16]u[12]x:}2{r:}",
        ]

    def test_extra_args_not_modified(self):
        """Test building a command leaves the configuration untouched."""
        config = Config(piscem=ToolConfig(executable="piscem", extra_args=["map-sc"]))
        desc = PiscemGeomDesc.from_fragment_geom(parse_geometry("1{b[16]}2{r:}"))

        build_command("piscem", desc, config)

        assert config.piscem.extra_args == ["map-sc"]

    def test_simple_geometry_builds_both(self):
        """Test both tools get a command for a simple geometry."""
        result = build_commands(parse_geometry("1{b[16]u[12]x:}2{r:}"))

        assert result == {
            "piscem": ["piscem", "--geometry", "1{b[16]u[12]x:}2{r:}"],
            "salmon": [
                "salmon",
                "--read-geometry",
                "2[1-end]",
                "--bc-geometry",
                "1[1-16]",
                "--umi-geometry",
                "1[17-28]",
            ],
        }

    def test_complex_geometry_skips_salmon(self):
        """Test salmon is skipped for a complex geometry."""
        result = build_commands(parse_geometry("1{b[9-10]f[ACCGT]u[12]b[10]}2{r:}"))

        assert list(result) == ["piscem"]

    def test_selected_tools(self):
        """Test restricting the tools."""
        result = build_commands(parse_geometry("1{b[16]u[12]x:}2{r:}"), tools=["salmon"])

        assert list(result) == ["salmon"]


class TestRunCommand:
    """Tests for command execution."""

    def test_returns_exit_code(self, monkeypatch):
        """Test the command's exit status is returned."""
        calls = []

        def fake_run(cmd):
            calls.append(cmd)
            return subprocess.CompletedProcess(cmd, 3)

        monkeypatch.setattr(commands.subprocess, "run", fake_run)

        assert run_command(["piscem", "--geometry", "1{r:}2{r:}"]) == 3
        assert calls == [["piscem", "--geometry", "1{r:}2{r:}"]]

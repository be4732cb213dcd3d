"""
Tests for CLI functionality (end-to-end).

This module contains tests for the command-line interface, running actual
CLI commands and checking their output.
"""

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent


class TestCLI:
    """Test CLI functionality (end-to-end)."""

    @pytest.fixture(autouse=True)
    def definitions(self, tmp_path):
        """Create test definition files."""
        self.test_dir = tmp_path

        self.definitions_file = tmp_path / "packages.txt"
        self.definitions_file.write_text(
            """
        # app stack
        app: framework
        framework: runtime
        runtime
        plugin: framework
        """,
            encoding="utf-8",
        )

        self.json_file = tmp_path / "packages.json"
        self.json_file.write_text(
            json.dumps({"a": "b", "b": "c", "c": None, "d": "b"}),
            encoding="utf-8",
        )

    def run_cli(self, *args):
        """Run CLI command."""
        env = dict(os.environ)
        env["PYTHONIOENCODING"] = "utf-8"
        env["PYTHONPATH"] = os.pathsep.join(
            [str(PROJECT_ROOT), env.get("PYTHONPATH", "")]
        )
        cmd = [sys.executable, "-m", "chain_resolver.cli"] + list(args)
        return subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            env=env,
        )

    def test_resolve_all(self):
        """Test resolving every defined package."""
        result = self.run_cli(str(self.definitions_file), "--no-color")

        assert result.returncode == 0
        assert "Install order" in result.stdout
        assert "Resolved 4 package(s)" in result.stdout

    def test_list_format(self):
        """Test the plain list output."""
        result = self.run_cli(
            str(self.definitions_file), "-p", "app", "--format", "list"
        )

        assert result.returncode == 0
        assert result.stdout.strip() == "runtime, framework, app"

    def test_list_format_json_definitions(self):
        """Test JSON definitions and shared dependencies."""
        result = self.run_cli(
            str(self.json_file), "-p", "a", "-p", "d", "--format", "list"
        )

        assert result.returncode == 0
        assert result.stdout.strip() == "c, b, a, d"

    def test_separator(self):
        """Test a custom list separator."""
        result = self.run_cli(
            str(self.json_file), "-p", "a", "-f", "list", "--separator", " "
        )

        assert result.stdout.strip() == "c b a"

    def test_json_format(self):
        """Test JSON output."""
        result = self.run_cli(str(self.json_file), "-p", "a", "--format", "json")

        assert result.returncode == 0
        data = json.loads(result.stdout)
        assert data["order"] == ["c", "b", "a"]

    def test_table_format(self):
        """Test tabulated output."""
        result = self.run_cli(
            str(self.definitions_file), "-p", "plugin", "--format", "table"
        )

        assert result.returncode == 0
        assert "Depends on" in result.stdout
        assert "framework" in result.stdout

    def test_graph_format(self):
        """Test DOT output."""
        result = self.run_cli(str(self.json_file), "-p", "a", "--format", "graph")

        assert result.returncode == 0
        assert "digraph" in result.stdout
        assert "b -> a;" in result.stdout

    def test_chains(self):
        """Test --chains output."""
        result = self.run_cli(
            str(self.definitions_file), "-p", "app", "--chains", "--no-color"
        )

        assert result.returncode == 0
        assert "runtime -> framework -> app" in result.stdout

    def test_export_json(self):
        """Test --export command."""
        output_file = self.test_dir / "order.json"

        result = self.run_cli(
            str(self.json_file), "-p", "a", "--export", str(output_file)
        )

        assert result.returncode == 0
        assert output_file.exists()

        data = json.loads(output_file.read_text(encoding="utf-8"))
        assert data["order"] == ["c", "b", "a"]
        assert data["statistics"]["longest_chain"] == 2
        assert "edges" in data["graph"]

    def test_unknown_package(self):
        """Test an unknown requested package."""
        result = self.run_cli(str(self.json_file), "-p", "zzz", "--no-color")

        assert result.returncode == 1
        assert "not found" in result.stderr

    def test_cycle(self):
        """Test cyclic definitions fail cleanly."""
        cyclic = self.test_dir / "cyclic.txt"
        cyclic.write_text("a: b\nb: a\n", encoding="utf-8")

        result = self.run_cli(str(cyclic), "--no-color")

        assert result.returncode == 1
        assert "Cyclic dependency" in result.stderr

    def test_unknown_dependency_warns(self):
        """Test undefined dependencies warn by default."""
        defs = self.test_dir / "ghost.txt"
        defs.write_text("a: ghost\n", encoding="utf-8")

        result = self.run_cli(str(defs), "-f", "list", "--no-color")

        assert result.returncode == 0
        assert result.stdout.strip() == "ghost, a"
        assert "warning" in result.stderr

    def test_unknown_dependency_strict(self):
        """Test --strict fails on undefined dependencies."""
        defs = self.test_dir / "ghost.txt"
        defs.write_text("a: ghost\n", encoding="utf-8")

        result = self.run_cli(str(defs), "--strict", "--no-color")

        assert result.returncode == 1
        assert "ghost" in result.stderr

    def test_syntax_error(self):
        """Test malformed definitions."""
        defs = self.test_dir / "bad.txt"
        defs.write_text("a: b c\n", encoding="utf-8")

        result = self.run_cli(str(defs), "--no-color")

        assert result.returncode == 1
        assert "Line 1" in result.stderr

    def test_nonexistent_file(self):
        """Test non-existent file."""
        result = self.run_cli("nonexistent.txt")

        assert result.returncode != 0
        assert "File not found" in result.stderr

    def test_in_process(self, capsys):
        """Test calling main() directly."""
        from chain_resolver.cli import main

        main([str(self.json_file), "-p", "d", "-f", "list"])

        assert capsys.readouterr().out.strip() == "c, b, d"

"""Test the command-line interface."""

import subprocess
import sys

import pytest

import platypus
from platypus import cli


def run_cli(*args, stdin=None):
    return subprocess.run(
        [sys.executable, "-m", "platypus", *args],
        capture_output=True,
        text=True,
        input=stdin,
    )


@pytest.fixture
def program(tmp_path):
    def write(source, name="main.plat"):
        path = tmp_path / name
        path.write_text(source, encoding="utf-8")
        return str(path)
    return write


def test_run_file(program):
    path = program('func greet(n) { return "Hello, " + n }\nprint(greet("world"))\n')
    result = run_cli("run", path)
    assert result.returncode == 0, f"CLI failed: {result.stderr}"
    assert result.stdout == "Hello, world\n"


def test_run_error_exits_nonzero(program):
    path = program('print("before")\nprint(missing)\n')
    result = run_cli("run", path)
    assert result.returncode == 1
    assert result.stdout == "before\n"
    assert result.stderr.strip() == "Error: Undefined variable: missing"


def test_run_parse_error(program):
    path = program("x = 1\ny = )\n", name="broken.plat")
    result = run_cli("run", path)
    assert result.returncode == 1
    assert result.stderr.startswith("Error: ")
    assert "broken.plat" in result.stderr
    assert "line 2" in result.stderr


def test_run_missing_file(tmp_path):
    result = run_cli("run", str(tmp_path / "absent.plat"))
    assert result.returncode == 1
    assert "Cannot read file" in result.stderr


def test_max_depth_option(program):
    path = program("func down(n) { return down(n + 1) }\ndown(0)\n")
    result = run_cli("run", "--max-depth", "25", path)
    assert result.returncode == 1
    assert "Maximum call depth of 25" in result.stderr


def test_trace_logs_calls(program):
    path = program("func f() { return 1 }\nf()\n")
    result = run_cli("run", "--trace", path)
    assert result.returncode == 0
    assert "platypus._interp: call f at depth 1" in result.stderr


def test_parse_command(program):
    path = program("x = 1 + 2\n")
    result = run_cli("parse", path)
    assert result.returncode == 0
    assert "Program" in result.stdout
    assert "BinaryOp(op='+')" in result.stdout


def test_version():
    result = run_cli("--version")
    assert result.returncode == 0
    assert result.stdout.strip() == f"Platypus v{platypus.__version__}"


def test_help():
    result = run_cli("--help")
    assert result.returncode == 0
    assert "run" in result.stdout
    assert "repl" in result.stdout


def test_no_command():
    result = run_cli()
    assert result.returncode == 1
    assert "usage:" in result.stdout


def test_unknown_command():
    result = run_cli("compile", "x")
    assert result.returncode == 2


def test_main_in_process(program, capsys):
    path = program("print(6 * 7)\n")
    assert cli.main(["run", path]) == 0
    assert capsys.readouterr().out == "42\n"

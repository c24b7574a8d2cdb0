"""Tests for running external programs."""

import pytest

from tinysh.process import ProgramError, run_program


def make_script(tmp_path, name, body):
    script = tmp_path / name
    script.write_text(f"#!/bin/sh\n{body}\n")
    script.chmod(0o755)
    return str(script)


class TestRunProgram:
    def test_success(self, tmp_path):
        path = make_script(tmp_path, "ok", "exit 0")
        assert run_program(path, "ok", []) == 0

    def test_exit_status_returned(self, tmp_path):
        path = make_script(tmp_path, "fail", "exit 3")
        assert run_program(path, "fail", []) == 3

    def test_arguments_passed(self, tmp_path):
        out = tmp_path / "args.txt"
        path = make_script(tmp_path, "save", f'echo "$1|$2" > {out}')
        run_program(path, "save", ["x", "y"])
        assert out.read_text().strip() == "x|y"

    def test_output_not_captured(self, tmp_path, capfd):
        path = make_script(tmp_path, "hello", "echo hi from child")
        run_program(path, "hello", [])
        assert "hi from child" in capfd.readouterr().out

    def test_spawn_failure(self, tmp_path):
        bad = tmp_path / "bad"
        bad.write_text("not a program\n")
        bad.chmod(0o644)
        with pytest.raises(ProgramError):
            run_program(str(bad), "bad", [])

    def test_program_error_is_oserror(self, tmp_path):
        with pytest.raises(OSError):
            run_program(str(tmp_path / "missing"), "missing", [])

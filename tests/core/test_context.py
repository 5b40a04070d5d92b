"""
Unit tests for the runner execution context.
"""

import io
import os

import pytest

from funcsetup.core.context import RunnerContext, runner_inputs
from funcsetup.core.path import publish_path


class TestRunnerContext:
    """Test RunnerContext against a plain dict environment."""

    def test_getenv(self):
        context = RunnerContext({"RUNNER_OS": "Linux"})

        assert context.getenv("RUNNER_OS") == "Linux"
        assert context.getenv("MISSING", "x") == "x"

    def test_append_path_entry(self, tmp_path):
        path_file = tmp_path / "github_path"
        path_file.write_text("/existing")
        context = RunnerContext({"GITHUB_PATH": str(path_file)})

        assert context.append_path_entry("/tmp/out") is True
        assert context.append_path_entry("/tmp/out") is True

        lines = [line for line in path_file.read_text().splitlines() if line]
        assert lines == ["/existing", "/tmp/out", "/tmp/out"]

    def test_append_without_path_file(self):
        context = RunnerContext({})
        assert context.append_path_entry("/tmp/out") is False

    def test_append_to_missing_directory(self, tmp_path):
        context = RunnerContext({"GITHUB_PATH": str(tmp_path / "no" / "file")})

        with pytest.raises(OSError):
            context.append_path_entry("/tmp/out")

    def test_current_search_path_skips_empty_entries(self):
        env = {"PATH": os.pathsep.join(["/usr/bin", "", "/bin"])}

        assert RunnerContext(env).current_search_path() == ["/usr/bin", "/bin"]

    def test_append_search_path_keeps_existing_value(self):
        """Test empty entries (current directory) survive the append."""
        original = os.pathsep.join(["/usr/bin", "", "/bin"])
        env = {"PATH": original}

        RunnerContext(env).append_search_path("/tmp/out")

        assert env["PATH"] == original + os.pathsep + "/tmp/out"

    def test_append_search_path_when_unset(self):
        env = {}

        RunnerContext(env).append_search_path("/tmp/out")

        assert env["PATH"] == "/tmp/out"

    def test_publish_keeps_empty_path_entries(self, tmp_path):
        original = os.pathsep.join(["/usr/bin", "", "/bin"])
        env = {"PATH": original, "GITHUB_PATH": str(tmp_path / "github_path")}
        out = tmp_path / "out"

        publish_path(str(out / "func"), RunnerContext(env))

        assert env["PATH"] == original + os.pathsep + str(out)
        assert env["PATH"].split(os.pathsep).count("") == 1

    def test_publish_updates_environment(self, tmp_path):
        """Test publishing through the real context mutates PATH once."""
        path_file = tmp_path / "github_path"
        env = {"PATH": "/usr/bin", "GITHUB_PATH": str(path_file)}
        context = RunnerContext(env)

        publish_path(str(tmp_path / "out" / "func"), context)
        publish_path(str(tmp_path / "out" / "func"), context)

        entries = env["PATH"].split(os.pathsep)
        assert entries.count(str(tmp_path / "out")) == 1
        lines = [line for line in path_file.read_text().splitlines() if line]
        assert lines == [str(tmp_path / "out")] * 2

    def test_annotate(self):
        stream = io.StringIO()
        context = RunnerContext({}, stream=stream)

        context.annotate("warning", "50% done\nnext")

        assert stream.getvalue() == "::warning::50%25 done%0Anext\n"


class TestRunnerInputs:
    """Test runner_inputs function."""

    def test_collects_inputs(self):
        env = {
            "INPUT_VERSION": " 1.16 ",
            "INPUT_BINARYSOURCE": "https://mirror/func",
            "INPUT_NAME": "",
            "PATH": "/usr/bin",
        }

        assert runner_inputs(env) == {
            "version": "1.16",
            "binarysource": "https://mirror/func",
        }

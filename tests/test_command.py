"""Tests for loading commands from files."""

import pytest

from staplegun.command import Command, CommandErrorState, LoadState


def write(tmp_path, source, name="cmd.py"):
    path = tmp_path / name
    path.write_text(source, encoding="utf-8")
    return str(path)


class TestCommand:
    """Tests for Command basics."""

    def test_new_command(self):
        command = Command(name="hello", description="Says hello")

        assert command.name == "hello"
        assert command.description == "Says hello"
        assert command.function is None
        assert command.load_state is LoadState.NONE
        assert command.error_state is CommandErrorState.NONE
        assert not command.is_loaded

    def test_get_info(self, tmp_path):
        path = write(tmp_path, "def run():\n    pass\n")
        command = Command()
        command.load_from_file(path)

        info = command.get_info()

        assert info["name"] == "cmd"
        assert info["file"] == path
        assert info["function_name"] == "run"
        assert info["load_state"] == "ok"


class TestCommandLoading:
    """Tests for Command.load_from_file."""

    @pytest.mark.parametrize("path", [None, "", "  "])
    def test_blank_path(self, path):
        command = Command()
        command.load_from_file(path)

        assert command.load_state is LoadState.ERROR
        assert command.error_state is CommandErrorState.INPUT

    def test_missing_file(self, tmp_path):
        command = Command()
        command.load_from_file(str(tmp_path / "missing.py"))

        assert command.error_state is CommandErrorState.MISSINGFILE
        assert command.file is None

    def test_syntax_error(self, tmp_path):
        path = write(tmp_path, "def run(:\n")
        command = Command()
        command.load_from_file(path)

        assert command.error_state is CommandErrorState.BADFILE
        assert command.file == path

    def test_import_time_exception(self, tmp_path):
        path = write(tmp_path, "raise RuntimeError('nope')\n")
        command = Command()
        command.load_from_file(path)

        assert command.error_state is CommandErrorState.BADFILE

    def test_exit_at_import_time(self, tmp_path):
        path = write(tmp_path, "import sys\nsys.exit(3)\n")
        command = Command()
        command.load_from_file(path)

        assert command.load_state is LoadState.ERROR
        assert command.error_state is CommandErrorState.BADFILE
        assert command.function is None

    def test_explicit_function_name(self, tmp_path):
        path = write(tmp_path, "def run():\n    return 1\n\ndef other():\n    return 2\n")
        command = Command(name="x")
        command.load_from_file(path, "other")

        assert command.is_loaded
        assert command.function_name == "other"
        assert command.function() == 2
        assert command.name == "x"

    def test_explicit_function_name_missing(self, tmp_path):
        path = write(tmp_path, "def run():\n    pass\n")
        command = Command()
        command.load_from_file(path, "nope")

        assert command.error_state is CommandErrorState.MISSINGFUNCTION
        assert command.function is None

    def test_explicit_name_must_be_callable(self, tmp_path):
        path = write(tmp_path, "VALUE = 3\n")
        command = Command()
        command.load_from_file(path, "VALUE")

        assert command.error_state is CommandErrorState.MISSINGFUNCTION

    def test_auto_detects_run(self, tmp_path):
        path = write(
            tmp_path,
            "def helper():\n    pass\n\ndef run():\n    '''Run it.\n\n    More.\n    '''\n    return 'ran'\n",
        )
        command = Command()
        command.load_from_file(path)

        assert command.function_name == "run"
        assert command.function() == "ran"
        assert command.description == "Run it."

    def test_auto_detects_single_public_function(self, tmp_path):
        path = write(
            tmp_path,
            "from os.path import join\n\ndef _private():\n    pass\n\ndef deploy():\n    return 'ok'\n",
            name="deploy.py",
        )
        command = Command()
        command.load_from_file(path)

        assert command.is_loaded
        assert command.function_name == "deploy"
        assert command.name == "deploy"
        assert command.description is None

    def test_auto_detect_ambiguous(self, tmp_path):
        path = write(tmp_path, "def a():\n    pass\n\ndef b():\n    pass\n")
        command = Command()
        command.load_from_file(path)

        assert command.error_state is CommandErrorState.MISSINGFUNCTION

    def test_reload_resets_state(self, tmp_path):
        good = write(tmp_path, "def run():\n    pass\n", name="good.py")
        command = Command()
        command.load_from_file(good)
        assert command.is_loaded

        command.load_from_file(str(tmp_path / "missing.py"))

        assert command.load_state is LoadState.ERROR
        assert command.function is None
        assert command.function_name is None
        assert command.file is None

import pytest

from pngparse.debug import debug_out, set_debug


@pytest.fixture(autouse=True)
def _reset_debug():
    yield
    set_debug(False)


def test_enabled_writes_to_stdout(capsys):
    set_debug(True)
    debug_out().write("loading\n")
    assert capsys.readouterr().out == "loading\n"


def test_disabled_discards_output(capsys):
    set_debug(False)
    written = debug_out().write("hidden\n")
    assert written == len("hidden\n")
    assert capsys.readouterr().out == ""


def test_toggle_back_and_forth(capsys):
    set_debug(True)
    print("a", file=debug_out())
    set_debug(False)
    print("b", file=debug_out())
    set_debug(True)
    print("c", file=debug_out())
    assert capsys.readouterr().out == "a\nc\n"
import pytest

from tgv.mode import InputMode


@pytest.mark.parametrize(
    "mode, text",
    [(InputMode.NORMAL, "Normal"), (InputMode.COMMAND, "Command"), (InputMode.HELP, "Help")],
)
def test_display(mode, text):
    assert str(mode) == text
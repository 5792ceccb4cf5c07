import pytest

from calmshell.askdrop import DropAction, ask_drop, drop_prompt


def test_prompt_text():
    assert drop_prompt(3, "C:\\A", "D:\\B") == "Copy or Move 3 item(s) from C:\\A to D:\\B?"


def test_action_values():
    assert int(ask_drop(1, "a", "b", lambda prompt: True)) == 101
    assert int(ask_drop(1, "a", "b", lambda prompt: False)) == 102


@pytest.mark.parametrize(
    "answer, expected",
    [(True, DropAction.COPY), (False, DropAction.MOVE), (None, DropAction.CANCEL)],
)
def test_answers(answer, expected):
    assert ask_drop(1, "a", "b", lambda prompt: answer) is expected


def test_ask_receives_prompt():
    seen = []
    ask_drop(2, "src", "dst", lambda prompt: seen.append(prompt))
    assert seen == [drop_prompt(2, "src", "dst")]
import pytest

from calmshell.ddeshell import (
    MAX_CONVERSATIONS,
    PROGRAMS_SECTION,
    ROOT_SECTION,
    DdeShell,
    parse_arg,
    parse_args,
    split_commands,
)
from calmshell.inifile import IniFile


@pytest.fixture
def ini(tmp_path):
    return IniFile(tmp_path / "START.INI")


@pytest.fixture
def shell(ini):
    return DdeShell(ini)


def test_parse_arg_quoted_then_next():
    value, rest = parse_arg(' "a b" , c)')
    assert value == "a b"
    assert parse_arg(rest)[0] == "c"


def test_parse_arg_unquoted_trims_and_stops_at_paren():
    value, rest = parse_arg("abc  )")
    assert value == "abc"
    assert rest == ")"


def test_parse_args_pads_missing():
    assert parse_args("x, y", 4) == ["x", "y", "", ""]


def test_split_commands_basic_and_missing_paren():
    result = split_commands("[CreateGroup(Foo)][Bad][Reload(Foo)]")
    assert result == [("CreateGroup", "Foo)"), ("Bad", None), ("Reload", "Foo)")]


def test_initiate_matching(shell):
    assert shell.on_initiate(1, "progman", "PROGMAN") is True
    assert shell.on_initiate(2, None, None) is True
    assert shell.on_initiate(3, "OTHER", "PROGMAN") is False
    assert shell.current_group(3) is None
    assert shell.current_group(1) == ""


def test_create_group_writes_folder_entries(shell, ini):
    shell.on_initiate(1, "PROGMAN", "PROGMAN")
    assert shell.on_execute(1, "[CreateGroup(MyApp)]") is True
    assert ini.has_key(ROOT_SECTION, "Programs*")
    assert ini.has_key(PROGRAMS_SECTION, "MyApp*")
    assert shell.current_group(1) == "Start\\Programs\\MyApp"


def test_create_group_keeps_existing_entry(shell, ini):
    ini.set_str(PROGRAMS_SECTION, "MyApp*", "keep")
    shell.on_execute(1, "[CreateGroup(MyApp)]")
    assert ini.get_str(PROGRAMS_SECTION, "MyApp*", "") == "keep"


def test_add_item_derives_name(shell, ini):
    shell.on_execute(1, "[CreateGroup(Tools)][AddItem(C:\\WIN\\NOTEPAD.EXE)]")
    section = shell.current_group(1)
    assert ini.keys(section) == ["NOTEPAD"]
    assert ini.get_str(section, "NOTEPAD", "") == "C:\\WIN\\NOTEPAD.EXE;;1;;0"


def test_add_item_minimized_fields(shell, ini):
    shell.on_execute(
        1, '[CreateGroup(Tools)][AddItem(app.exe,"My App",icons.dll,3,,1,C:\\WORK)]'
    )
    fields = ini.get_str(shell.current_group(1), "My App", "").split(";")
    assert fields[0] == "app.exe"
    assert fields[1] == "C:\\WORK"
    assert fields[2] == "2"
    assert fields[3] == "icons.dll"
    assert fields[4] == "3"


def test_add_item_without_group_uses_programs(shell, ini):
    shell.on_execute(5, "[AddItem(edit.com,Editor)]")
    assert ini.has_key(PROGRAMS_SECTION, "Editor")


def test_delete_item(shell, ini):
    shell.on_execute(1, "[CreateGroup(G)][AddItem(a.exe,A)][AddItem(b.exe,B)]")
    shell.on_execute(1, "[DeleteItem(A)]")
    assert ini.keys(shell.current_group(1)) == ["B"]


def test_delete_group_clears_everything(shell, ini):
    shell.on_execute(1, "[CreateGroup(G)][AddItem(a.exe,A)]")
    section = shell.current_group(1)
    shell.on_execute(1, "[DeleteGroup(G)]")
    assert section not in ini.sections()
    assert not ini.has_key(PROGRAMS_SECTION, "G*")
    assert shell.current_group(1) == ""


def test_exit_calls_callback(ini):
    calls = []
    shell = DdeShell(ini, on_exit=lambda: calls.append(True))
    assert shell.on_execute(1, "[ExitProgman(1)]") is True
    assert calls == [True]


def test_unknown_accepted_missing_paren_rejected(shell):
    assert shell.on_execute(1, "[Reload(G)]") is True
    assert shell.on_execute(1, "[CreateGroup]") is False
    assert shell.on_execute(1, None) is False


def test_terminate_forgets_conversation(shell):
    shell.on_execute(1, "[ShowGroup(G,1)]")
    assert shell.current_group(1) == shell.current_group(1) and shell.current_group(1).endswith("\\G")
    shell.on_terminate(1)
    assert shell.current_group(1) is None


def test_conversation_limit(shell):
    for client in range(MAX_CONVERSATIONS + 1):
        assert shell.on_initiate(client, None, None) is True
    assert shell.current_group(MAX_CONVERSATIONS) is None
    assert shell.current_group(0) == ""


def test_bytes_command_string(shell, ini):
    assert shell.on_execute(1, b"[AddItem(x.exe,X)]\0junk") is True
    assert ini.has_key(PROGRAMS_SECTION, "X")
from calmshell.alias import AliasInfo, execute_alias, read_alias, write_alias
from calmshell.inifile import IniFile


def test_round_trip(tmp_path):
    path = tmp_path / "app.als"
    info = AliasInfo(
        target="C:\\APPS\\EDIT.EXE",
        params="-n",
        work_dir="C:\\WORK",
        icon_file="C:\\ICONS\\EDIT.ICO",
        icon_index=3,
        show_mode=2,
    )
    write_alias(path, info)
    assert read_alias(path) == info


def test_written_section_and_keys(tmp_path):
    path = tmp_path / "a.als"
    write_alias(path, AliasInfo(target="x"))
    ini = IniFile(path)
    assert ini.sections() == ["Alias"]
    assert ini.keys("Alias") == ["Target", "Params", "WorkDir", "IconFile", "IconIndex", "ShowMode"]


def test_defaults_when_keys_missing(tmp_path):
    path = tmp_path / "a.als"
    path.write_text("[Alias]\nTarget=notes.txt\n")
    info = read_alias(path)
    assert info == AliasInfo(target="notes.txt")


def test_no_target_means_none(tmp_path):
    path = tmp_path / "a.als"
    path.write_text("[Alias]\nParams=-x\n")
    assert read_alias(path) is None
    assert read_alias(tmp_path / "missing.als") is None


def test_execute_passes_none_for_empty_fields(tmp_path):
    path = tmp_path / "a.als"
    write_alias(path, AliasInfo(target="prog"))
    calls = []
    result = execute_alias(path, lambda *a: calls.append(a) or True)
    assert result is True
    assert calls == [("prog", None, None)]


def test_execute_passes_params(tmp_path):
    path = tmp_path / "a.als"
    write_alias(path, AliasInfo(target="prog", params="-v", work_dir="dir"))
    calls = []
    execute_alias(path, lambda *a: calls.append(a) or True)
    assert calls == [("prog", "-v", "dir")]


def test_execute_unreadable_alias(tmp_path):
    calls = []
    assert execute_alias(tmp_path / "none.als", lambda *a: calls.append(a)) is False
    assert calls == []
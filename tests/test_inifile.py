from calmshell.inifile import IniFile


def test_missing_file_gives_defaults(tmp_path):
    ini = IniFile(tmp_path / "none.ini")
    assert ini.get_str("Alias", "Target", "fallback") == "fallback"
    assert ini.get_int("Alias", "ShowMode", 7) == 7
    assert ini.sections() == []
    assert ini.keys("Alias") == []


def test_string_round_trip_persists(tmp_path):
    path = tmp_path / "a.ini"
    IniFile(path).set_str("Alias", "Target", "C:\\WINDOWS\\NOTEPAD.EXE")
    assert IniFile(path).get_str("Alias", "Target", "") == "C:\\WINDOWS\\NOTEPAD.EXE"


def test_int_round_trip(tmp_path):
    ini = IniFile(tmp_path / "a.ini")
    ini.set_int("Desktop", "NumShorts", -12)
    assert ini.get_int("Desktop", "NumShorts", 5) == -12


def test_int_reads_leading_digits(tmp_path):
    ini = IniFile(tmp_path / "a.ini")
    ini.set_str("S", "n", "42 apples")
    ini.set_str("S", "m", "abc")
    assert ini.get_int("S", "n", 1) == 42
    assert ini.get_int("S", "m", 1) == 0


def test_has_and_delete_key(tmp_path):
    ini = IniFile(tmp_path / "a.ini")
    ini.set_str("S", "one", "1")
    ini.set_str("S", "two", "2")
    assert ini.has_key("S", "one")
    ini.delete_key("S", "one")
    assert not ini.has_key("S", "one")
    assert ini.keys("S") == ["two"]
    ini.delete_key("S", "missing")
    assert ini.keys("S") == ["two"]


def test_empty_value_counts_as_present(tmp_path):
    ini = IniFile(tmp_path / "a.ini")
    ini.set_str("Start", "Programs*", "")
    assert ini.has_key("Start", "Programs*")
    assert ini.get_str("Start", "Programs*", "absent") == ""


def test_delete_section(tmp_path):
    ini = IniFile(tmp_path / "a.ini")
    ini.set_str("First", "k", "v")
    ini.set_str("Second", "k", "v")
    ini.delete_section("first")
    assert ini.sections() == ["Second"]
    assert ini.get_str("First", "k", "gone") == "gone"


def test_quoted_values_are_unquoted(tmp_path):
    path = tmp_path / "a.ini"
    path.write_text('[S]\nk="hello world"\n')
    assert IniFile(path).get_str("S", "k", "") == "hello world"


def test_comments_survive_rewrite(tmp_path):
    path = tmp_path / "a.ini"
    path.write_text("; keep me\n[S]\n; inner\nk=v\n")
    ini = IniFile(path)
    ini.set_str("S", "other", "w")
    text = path.read_text()
    assert "; keep me" in text
    assert "; inner" in text
    assert ini.keys("S") == ["k", "other"]
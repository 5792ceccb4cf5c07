# calmshell

The working core of a classic desktop shell as a plain Python library,
with a small start-up command. It keeps the shell's on-disk formats and
rules.

## Modules

- `calmshell.inifile.IniFile`: reads and writes Windows-style INI files.
  Section and key names match without regard to case. The file is read
  again on every query and rewritten on every change; comments and the
  order of entries are kept. Methods: `get_str`, `get_int`, `set_str`,
  `set_int`, `has_key`, `delete_key`, `delete_section`, `sections`,
  `keys`.
- `calmshell.fourdos`: `descript.ion` file descriptions. `parse_line`,
  `get_description`, `set_description` (an empty description removes the
  entry), `remove_description` and `load_all`.
- `calmshell.directory`: `enumerate_directory` lists a folder into
  `IconItem` records. Files matching a pattern come first, then
  sub-folders, and at most `max_items` are kept. `sort_items` orders them
  by `SortOrder.NAME`, `TYPE`, `SIZE` or `DATE`. Folders always sort
  first, and in date order the newest items come first. The module also
  has `directory_size`, `count_files`, `directory_exists`, `make_tree`,
  `load_descriptions` and the path helpers `join_path`, `get_drive`,
  `get_parent`, `get_name` and `get_ext`.
- `calmshell.fileman`: `FileManager` copies, moves, deletes, renames and
  creates files and folders. It returns a `FileOpResult`, which is `OK`,
  `ERROR`, `CANCEL` or `SKIP`. Callbacks handle the side work:
  - `confirm(message)` answers questions such as whether to overwrite a
    file or delete a protected one.
  - `report(message)` receives error messages.
  - `recycle(path)` takes a file into a bin.
  - `progress()` is called during long operations.

  When no `report` callback is given, failures raise `FileOpError`. A
  program that cannot be started raises `ExecError`. `execute` starts a
  program. `default_execute` first tries the system's "open" for a file,
  then starts it directly. The module also has `copy_file_raw`,
  `exec_error_message` and `is_program`.
- `calmshell.alias`: `.als` alias files through `AliasInfo`, `read_alias`,
  `write_alias` and `execute_alias`.
- `calmshell.askdrop`: `ask_drop` turns a yes, no or cancel answer into a
  `DropAction` of `COPY`, `MOVE` or `CANCEL`. `drop_prompt` gives the
  question that is asked.
- `calmshell.ddeshell`: `DdeShell` carries out Program Manager command
  strings and writes the results into a start-menu INI file. The commands
  are `CreateGroup`, `ShowGroup`, `AddItem`, `ReplaceItem`, `DeleteItem`,
  `DeleteGroup` and `ExitProgman`. Groups become sections under
  `Start\Programs`. The helpers `parse_arg`, `parse_args` and
  `split_commands` split the command text.
- `calmshell.desk`: `Desktop` loads and saves shortcuts (`ShortcutInfo`,
  `ShortcutKind`) in `[ShortcutN]` sections. It can add shortcuts,
  minimise them all (`clear`), switch them all between minimised and
  restored (`toggle_all`) and line them up on a grid (`line_up`). The
  functions `cascade_layout`, `arrange_icon_layout` and `line_up_layout`
  compute window positions.
- `calmshell.compsys`: `ComputerWindow` holds the state of the
  file-manager window: path, explorer mode, view mode, sort order, the
  listed items and the saved position. `handle_command` takes the menu
  commands `refresh`, `view_large`, `view_small`, `view_details`,
  `sort_name`, `sort_type`, `sort_size`, `sort_date`, `show_hidden` and
  `close`. `layout_children` computes the pane layout, and
  `parse_navigation` reads the `*` explorer prefix.
- `calmshell.calmira`: `Shell` routes `CalmiraMessage` requests to the
  Computer window, the desktop and the DDE server. The module also has
  `load_and_run`, `run_command_line` and the command's `main`.

## Installing

```
pip install .
```

## Example

```python
from calmshell.ddeshell import DdeShell
from calmshell.inifile import IniFile

start = IniFile("START.INI")
server = DdeShell(start, on_exit=lambda: None)
server.on_initiate("setup", "PROGMAN", "PROGMAN")
server.on_execute("setup", "[CreateGroup(Tools)][AddItem(C:\\TOOLS\\EDIT.EXE,Editor)]")
print(start.get_str("Start\\Programs\\Tools", "Editor", ""))
# C:\TOOLS\EDIT.EXE;;1;;0
```

The stored value holds five fields joined by semicolons:

1. the command
2. the working folder
3. the show mode
4. the icon file
5. the icon index

## Command line

```
calmshell [--ini FILE] [--start-ini FILE] [--win-ini FILE] [--shell] [command ...]
```

The command does the following in order:

1. It loads the desktop shortcuts and the Computer window position from
   `--ini` (default `calmira.ini`).
2. With `--shell` and `--win-ini`, it starts the programs listed in the
   `Load=` and `Run=` lines of the `[Windows]` section.
3. It starts the program named first in `command`.
4. It writes the shortcuts and the position back to `--ini`.

## What it does not do

The package draws no windows, so there is no desktop, taskbar, start
menu or file-manager screen. It runs no message loop, so `calmshell`
exits once its start-up steps are done. `DdeShell` takes its commands as
plain strings and does not listen for DDE conversations from other
programs.

## Tests

```
pip install .[test]
pytest
```
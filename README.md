# zerolaunch

Building blocks for a keyboard-driven application launcher: layered
settings objects that are updated from partial mappings, the computation
of the launcher window's size and position on screen, and the discovery
of program files in directory trees by wildcard or regular-expression
patterns. It has no dependencies outside the standard library.

## Settings

Every settings class is a dataclass with defaults. `update(partial)`
applies each key present in the mapping whose value is not `None`;
`to_partial()` returns all values as a plain dictionary. Updates are
guarded by a lock, so one object can be shared between threads.

- `zerolaunch.app_config.AppConfig` – placeholder text, tips, auto and
  silent start, number of search results (default 4), refresh interval,
  debug mode, window position and similar switches.
- `zerolaunch.ui_config.UiConfig` – colours, font sizes, bar and item
  heights, window width, background and corner radius.
- `zerolaunch.window_state.WindowState` – the screen's scale factor,
  width and height.
- `zerolaunch.shortcut_config.ShortcutConfig` – the shortcut that opens
  the search bar (Alt+Space) and the four navigation keys (Ctrl+h/j/k/l),
  each a `Shortcut` with `to_dict()` and `Shortcut.from_dict()`.
- `zerolaunch.image_loader_config.ImageLoaderConfig` – whether icons are
  cached and whether online lookups are allowed.
- `zerolaunch.program_launcher_config.ProgramLauncherConfig` – launch
  counts per day (most recent first), all-time counts and the date of the
  last update; `current_date()` and `is_date_current()` work with the
  `YYYY-MM-DD` dates it stores.
- `zerolaunch.program_loader_config.ProgramLoaderConfig` – directories to
  scan (`DirectoryConfig`), fixed score biases, web pages, custom
  commands and forbidden paths. `DirectoryConfig.with_defaults(root, depth)`
  looks for `*.url`, `*.exe` and `*.lnk` files and skips names containing
  "help", "uninstall" and their Chinese equivalents.
- `zerolaunch.program_manager_config.ProgramManagerConfig` – holds the
  three configurations above and forwards the `launcher`, `loader` and
  `image_loader` parts of a partial to them.

```python
from zerolaunch.app_config import AppConfig

config = AppConfig()
config.update({"search_result_count": 6, "tips": None})
config.to_partial()["search_result_count"]  # 6
```

## Window layout

```python
from zerolaunch.app_config import AppConfig
from zerolaunch.layout import window_render_origin, window_size
from zerolaunch.ui_config import UiConfig
from zerolaunch.window_state import WindowState

app, ui = AppConfig(), UiConfig()
screen = WindowState(sys_window_width=1920, sys_window_height=1080)

window_size(app, ui, screen)                 # (1000, 355)
window_render_origin(app, ui, screen, 0.4)   # (460, 290)
```

The window is centred horizontally; vertically, the given ratio of the
free space lies above it. `window_render_origin` raises `ValueError` when
the window does not fit on the screen.

## Finding program files

```python
from zerolaunch.path_checker import PathChecker
from zerolaunch.scanner import visit_dir

checker = PathChecker(["*.exe", "*.lnk"], "Wildcard", ["uninstall"])
checker.is_match("Code.EXE")        # True
checker.is_match("Uninstall.exe")   # False

files = visit_dir("/path/to/start/menu", 5, checker, forbidden_paths=[])
```

`PathChecker` compares lower-cased names. Wildcards (`*`, `?`, `[...]`,
`{a,b}`) must match the whole name; with `"Regex"` a pattern may match
anywhere. A bad pattern or unknown pattern type raises `PatternError`.

`zerolaunch.scanner` also provides `is_valid_path`, `is_target_file`,
`image_resolution` (width × height of a PNG, GIF, BMP or JPEG file) and
`validate_icon_path`, which picks the highest-resolution variant of an
icon among its `.scale-*` / `.targetsize-*` files or, failing that, among
the PNG files sharing its name.

## What this package does not do

It does not rank programs against a search query, convert Chinese names
to pinyin, start programs or count launches, read or write configuration
files, or check for new releases. It offers no command-line program and
no window: it supplies the settings, layout and file discovery that such
parts would build on.

## Running the tests

Install the `test` extra and run `pytest` from the project directory.
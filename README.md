# fuelup

A library for managing Fuel toolchains from Python. It keeps track of the
fuelup home directory (`~/.fuelup`), the settings file that records the
default toolchain, installed toolchains, the versioned component store, and
the `fuel-toolchain.toml` override file a project may carry.

## What it covers

- **Paths** (`fuelup.paths`): where fuelup keeps its binaries, toolchains,
  store, settings, logs, hashes and temporary files, all under
  `~/.fuelup`. Helpers include `ensure_dir_exists`, `is_executable`,
  `find_parent_dir_with_file` and `get_fuel_toolchain_toml`, which searches
  the current directory and its parents for a `fuel-toolchain.toml`.
  `canonical_fuelup_dir()` gives the home for display, as `$HOME/.fuelup`
  when it is the default location.
- **Settings** (`fuelup.settings`): `Settings` parses and renders
  `settings.toml`; `SettingsFile` reads it lazily, creates it with defaults
  when missing, and writes it back when an `edit()` block ends normally.
  `read()` returns a copy of the current settings.
- **Shells** (`fuelup.shell`): the `Shell` enum (POSIX, Bash, Zsh, Fish) and
  the startup files of each under the home directory.
- **Target triples** (`fuelup.target_triple`): `TargetTriple` validates
  strings such as `x86_64-unknown-linux-gnu` or `aarch64-apple-darwin`,
  raising `ValueError` otherwise, and `TargetTriple.from_host()` describes
  the running machine.
- **Toolchains** (`fuelup.toolchain`): `DistToolchainDescription.parse`
  understands `<channel>`, `<channel>-<target>`, `<channel>-<YYYY-MM-DD>`,
  `<channel>-<YYYY-MM-DD>-<target>` and `<channel>-<target>-<YYYY-MM-DD>`,
  raising `ToolchainError` for anything else. `Toolchain` locates installed
  toolchains (`all`, `from_path`, `for_host`) and the default one
  (`from_settings`), and tells whether a toolchain exists and whether its
  name is a reserved, distributed one.
- **Store** (`fuelup.store`): `Store` locates versioned components in
  directories named `<component>-<version>` and reports whether one is
  present.
- **Overrides** (`fuelup.toolchain_override`): `OverrideCfg.from_toml` reads
  and validates a `fuel-toolchain.toml`, raising `OverrideError` when it is
  invalid; `ToolchainOverride.from_project_root` finds one for the current
  project and logs a warning, returning `None`, if it cannot be read.
- **Operations** (`fuelup.ops`):
  - `fuelup.ops.default.default(toolchain)` shows the default and override
    toolchains when given `None`, otherwise makes an existing toolchain the
    default; it returns the message it logged.
  - `fuelup.ops.toolchain_new.new(name)` creates an empty custom toolchain
    and makes it the default.
  - `fuelup.ops.list_revisions.list_revisions()` fetches the published
    revisions of the `latest` channel over the network and returns them,
    newest first.
  - `fuelup.ops.self_uninstall.self_uninstall(force)` removes fuelup's
    directories after asking for confirmation (unless `force`), and cleans
    fuelup's `PATH` entries out of shell startup files.

Messages from the operations are reported through the standard `logging`
module, except those of `self_uninstall`, which are printed.

## Examples

Parse a toolchain description:

```python
from fuelup.toolchain import DistToolchainDescription

desc = DistToolchainDescription.parse("nightly-2022-08-29-x86_64-apple-darwin")
print(desc.name, desc.date, desc.target)
print(desc)  # the full toolchain name for this host
```

Read a project's override file:

```python
from fuelup.toolchain_override import OverrideCfg

cfg = OverrideCfg.from_toml('''[toolchain]
channel = "nightly-2023-01-09"

[components]
forc = "0.33.0"
''')
print(cfg.toolchain.channel)
print(cfg.to_string_pretty())
```

Change the default toolchain recorded in the settings file:

```python
from fuelup.paths import settings_file
from fuelup.settings import SettingsFile

settings = SettingsFile(settings_file())
with settings.edit() as s:
    s.default_toolchain = "my-custom-toolchain"
print(settings.read().default_toolchain)
```

Create a custom toolchain and make it the default:

```python
from fuelup.ops.toolchain_new import new

new("my-custom-toolchain")
```

Strip fuelup from a shell rc file's contents without touching the file:

```python
from fuelup.ops.self_uninstall import remove_path_from_content

changed, text = remove_path_from_content("test\nPATH=.fuelup:foo\nbar\n")
# changed is True, text is "test\nPATH=foo\nbar"
```

## What it does not do

- There is no command-line program; everything is called from Python.
- It does not download, install, update or remove components or
  distributed toolchains, and it does not check installed versions against
  published ones. The store can only be inspected.
- The fuelup home is always `~/.fuelup`; it cannot be moved elsewhere.

## Supported platforms

Linux and macOS on `x86_64` and `aarch64`. Python 3.10 or newer.
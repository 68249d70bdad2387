"""Removing fuelup itself and its entries in shell startup files."""

from __future__ import annotations

import shutil

from ..paths import FUELUP_DIR, canonical_fuelup_dir, fuelup_bin_dir, fuelup_dir
from ..shell import Shell


def remove_path_from_content(file_content: str) -> tuple[bool, str]:
    """Drop fuelup from PATH lines; return whether anything changed and the new text."""
    whole_definition = f"PATH={FUELUP_DIR}"
    separated = f"{FUELUP_DIR}:"
    text = file_content.rstrip("\n").rstrip("\r")
    lines = [line.removesuffix("\r") for line in text.split("\n")] if text else []

    modified = False
    new_lines = []
    for line in lines:
        if line.rstrip().endswith(whole_definition):
            continue
        if "PATH" in line and FUELUP_DIR in line:
            modified = True
            line = line.strip().replace(separated, "").replace(FUELUP_DIR, "")
        new_lines.append(line)

    return modified or len(lines) != len(new_lines), "\n".join(new_lines)


def remove_fuelup_from_path() -> None:
    """Rewrite every shell startup file that adds fuelup to PATH."""
    for shell in Shell:
        for rc in shell.rc_files():
            if not rc.is_file():
                continue
            was_modified, new_content = remove_path_from_content(rc.read_text(encoding="utf-8"))
            if was_modified:
                print(f"{rc} has been updated to remove fuelup from $PATH")
                rc.write_text(new_content, encoding="utf-8")


def _ask_yes_no(question: str) -> bool:
    try:
        answer = input(f"{question} ")
    except EOFError as exc:
        raise OSError("Console I/O") from exc
    return answer.strip().lower() in ("y", "yes")


def self_uninstall(force: bool) -> None:
    """Remove fuelup's directories and PATH entries, asking first unless ``force``."""
    print(
        "Thanks for hacking in Sway!\n"
        "This will uninstall all Sway toolchains and data, and remove, "
        f"{canonical_fuelup_dir()}/bin from your PATH environment variable."
    )
    if not (force or _ask_yes_no("Continue? (y/N)")):
        return

    remove = [
        ("removing fuelup binaries", fuelup_bin_dir()),
        ("removing fuelup home", fuelup_dir()),
    ]
    remove_fuelup_from_path()

    for message, path in remove:
        print(message)
        try:
            shutil.rmtree(path)
        except FileNotFoundError:
            continue
        except OSError as exc:
            raise OSError(f"Failed to remove {path}: {exc}") from exc
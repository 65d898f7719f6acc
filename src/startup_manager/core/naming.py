"""File name helpers for new startup entries."""

import re

# Offered by the "Browse" file picker when choosing a program.
PROGRAM_EXTENSIONS = ["exe", "lnk", "sh", "desktop", "AppImage", "bat", "cmd"]


def sanitize_filename(name: str, extension: str) -> str:
    """Turn a display name into a file name.

    Spaces and both kinds of slash become hyphens and the result is
    lower-cased. Distinct names can collapse to the same file name; the
    later write replaces the earlier file.
    """
    safe_name = name.replace(" ", "-").replace("/", "-").replace("\\", "-").lower()
    return f"{safe_name}{extension}"


def suggest_name(command: str) -> str:
    """Derive a display name from a program path.

    ``/usr/bin/firefox`` gives ``Firefox``; only the last extension is
    removed, so ``my.app.exe`` gives ``My.app``.
    """
    filename = re.split(r"[\\/]", command)[-1]
    stem, dot, _ext = filename.rpartition(".")
    name = stem if dot and stem else filename
    return name[:1].upper() + name[1:]

"""Reading and rewriting XDG ``.desktop`` autostart files.

Only the handful of keys that matter for autostart are interpreted. Lookups
are flat: the first ``Key=value`` line wins regardless of which group it is
in, and every other line is carried through a rewrite untouched.
"""

from typing import NamedTuple, Optional

DESKTOP_EXTENSION = ".desktop"
DESKTOP_GROUP = "[Desktop Entry]"

KEY_NAME = "Name"
KEY_EXEC = "Exec"
KEY_COMMENT = "Comment"
KEY_HIDDEN = "Hidden"
KEY_GNOME_ENABLED = "X-GNOME-Autostart-enabled"

# Launcher hints that only set up the environment; removed for display.
# Order matters: the specific prefix goes before the generic one.
ENV_PREFIXES = ("env GDK_BACKEND=x11 ", "env ")


class DesktopFields(NamedTuple):
    """The values a startup entry needs from a desktop file."""

    name: str
    command: str
    enabled: bool


def format_bool(value: bool) -> str:
    """Render a boolean the way desktop files spell it."""
    return "true" if value else "false"


def parse_bool(value: Optional[str], default: bool) -> bool:
    """Case-insensitive ``true`` check; anything else is false."""
    if value is None:
        return default
    return value.lower() == "true"


def extract_value(content: str, key: str) -> Optional[str]:
    """Return the trimmed value of the first ``key=`` line, or None."""
    prefix = f"{key}="
    for line in content.splitlines():
        if line.startswith(prefix):
            return line[len(prefix) :].strip()
    return None


def strip_env_prefix(command: str) -> str:
    """Drop a leading ``env`` wrapper from an Exec line."""
    for prefix in ENV_PREFIXES:
        if command.startswith(prefix):
            command = command[len(prefix) :]
    return command


def validate(content: str) -> None:
    """Raise ValueError if the content does not look like a desktop file."""
    for line in content.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        if stripped == DESKTOP_GROUP or "=" in stripped:
            return
    raise ValueError("no [Desktop Entry] group or key=value lines")


def decode(content: str, filename: str) -> DesktopFields:
    """Map desktop file content to entry fields.

    ``filename`` is the display name fallback when there is no ``Name`` key.
    """
    validate(content)

    name = extract_value(content, KEY_NAME) or filename
    command = strip_env_prefix(extract_value(content, KEY_EXEC) or "")
    hidden = parse_bool(extract_value(content, KEY_HIDDEN), default=False)
    gnome_enabled = parse_bool(extract_value(content, KEY_GNOME_ENABLED), default=True)

    return DesktopFields(name=name, command=command, enabled=not hidden and gnome_enabled)


def set_enabled(content: str, enabled: bool) -> str:
    """Rewrite the enable flags, keeping every other line in place.

    ``Hidden`` is appended when missing. ``X-GNOME-Autostart-enabled`` is
    only rewritten, never added.
    """
    new_lines = []
    hidden_found = False

    for line in content.splitlines():
        if line.startswith(f"{KEY_HIDDEN}="):
            new_lines.append(f"{KEY_HIDDEN}={format_bool(not enabled)}")
            hidden_found = True
        elif line.startswith(f"{KEY_GNOME_ENABLED}="):
            new_lines.append(f"{KEY_GNOME_ENABLED}={format_bool(enabled)}")
        else:
            new_lines.append(line)

    if not hidden_found:
        new_lines.append(f"{KEY_HIDDEN}={format_bool(not enabled)}")

    return "\n".join(new_lines)


def render(name: str, command: str, description: str) -> str:
    """Build the body of a new, enabled autostart file."""
    return (
        f"{DESKTOP_GROUP}\n"
        "Type=Application\n"
        f"{KEY_NAME}={name}\n"
        f"{KEY_EXEC}={command}\n"
        f"{KEY_COMMENT}={description}\n"
        f"{KEY_HIDDEN}=false\n"
        f"{KEY_GNOME_ENABLED}=true\n"
    )

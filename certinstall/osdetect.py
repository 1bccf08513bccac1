"""OS detection for the certificate installer.

Reads an os-release file and matches known distro names in its contents.
Only free-text substring matching is used; the key=value structure is ignored.
"""

from enum import Enum

DEFAULT_RELEASE_FILES = ("/etc/os-release", "/usr/lib/os-release")


class Distro(Enum):
    UNKNOWN = "unknown"
    ALPINE = "alpine"
    DEBIAN = "debian"
    FEDORA = "fedora"


# Checked in order, first match wins
_MATCH_ORDER = (Distro.DEBIAN, Distro.ALPINE, Distro.FEDORA)


def _read_release(path: str) -> str:
    try:
        with open(path, errors="replace") as f:
            return f.read()
    except OSError:
        return ""


def identify_distro(release_file: str) -> Distro:
    """Return the distro named in release_file, or Distro.UNKNOWN."""
    content = _read_release(release_file).lower()
    for distro in _MATCH_ORDER:
        if distro.value in content:
            return distro
    return Distro.UNKNOWN


def detect_distro(release_files=DEFAULT_RELEASE_FILES):
    """Detect the distro from the first usable release file.

    A candidate that is missing, unreadable or empty is skipped and the next
    one is tried. Returns None when no candidate is usable, so the caller can
    tell "no release info" apart from Distro.UNKNOWN.
    """
    for path in release_files:
        if _read_release(path):
            return identify_distro(path)
    return None

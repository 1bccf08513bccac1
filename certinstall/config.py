"""Run configuration for the certificate installer.

Values come from environment variables with typed accessors, so a Dockerfile
can tune a run with ENV lines and no shell.
"""

import os
from dataclasses import dataclass, field

from certinstall.osdetect import DEFAULT_RELEASE_FILES

DEFAULT_ROOT_CA_FILE = "/cacert.pem"
DEFAULT_LOG_FILE = "/tmp/install-certs.log"


def _current_dir() -> str:
    """Working directory at startup, or "/" if it no longer exists."""
    try:
        return os.getcwd()
    except OSError:
        return "/"


class _EnvReader:
    """Typed accessor over an environment mapping. Empty values count as unset."""

    def __init__(self, environ):
        self._data = environ

    def string(self, key: str, default: str = "") -> str:
        val = self._data.get(key)
        if not val:
            return default
        return str(val)

    def boolean(self, key: str, default: bool = False) -> bool:
        """Accepts true/1/yes (any case) as truthy."""
        val = self._data.get(key)
        if not val:
            return default
        return val.strip().lower() in ("true", "1", "yes")


@dataclass(frozen=True)
class InstallConfig:
    root_ca_file: str = DEFAULT_ROOT_CA_FILE
    os_release_files: tuple = DEFAULT_RELEASE_FILES
    workdir: str = field(default_factory=_current_dir)
    debug: bool = False
    log_file: str = DEFAULT_LOG_FILE

    @classmethod
    def from_env(cls, environ=None, argv=None) -> "InstallConfig":
        """Build a config from the environment and optional CLI arguments.

        Environment:
            INSTALL_CERTS_ROOT_CA   path of the PEM bundle to install
            INSTALL_CERTS_WORKDIR   working directory for child processes
            INSTALL_CERTS_DEBUG     true/1/yes to log to a file instead of stdout
            INSTALL_CERTS_LOG_FILE  debug log path

        A single positional argument in argv overrides the root CA path.
        """
        env = _EnvReader(os.environ if environ is None else environ)
        root_ca_file = env.string("INSTALL_CERTS_ROOT_CA", DEFAULT_ROOT_CA_FILE)
        if argv:
            root_ca_file = argv[0]
        return cls(
            root_ca_file=root_ca_file,
            workdir=env.string("INSTALL_CERTS_WORKDIR") or _current_dir(),
            debug=env.boolean("INSTALL_CERTS_DEBUG"),
            log_file=env.string("INSTALL_CERTS_LOG_FILE", DEFAULT_LOG_FILE),
        )

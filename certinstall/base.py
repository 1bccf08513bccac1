"""CertInstaller: OS helpers and distro dispatch for root CA installation.

Procedures in the platform_* modules receive the installer as their first
argument and go through its helpers for every file and process operation.
Helpers catch and log OS errors instead of raising, so a failed step never
stops the remaining ones.
"""

import importlib
import os
import subprocess

from certinstall.config import InstallConfig
from certinstall.logging import InstallLogger
from certinstall.osdetect import Distro

# Procedure module per distro. Imported lazily: the modules import this one.
_PLATFORM_MODULES = {
    Distro.ALPINE: "certinstall.platform_alpine",
    Distro.DEBIAN: "certinstall.platform_debian",
    Distro.FEDORA: "certinstall.platform_fedora",
}


class InstallAborted(Exception):
    """Raised when a procedure cannot continue, e.g. a required tool is missing.

    The run still ends with exit code 0.
    """
    pass


class CertInstaller:
    """Installs the configured root CA into the OS trust store."""

    def __init__(self, config: InstallConfig, log: InstallLogger = None):
        self.config = config
        self.log = log or InstallLogger()

    @property
    def root_ca_file(self) -> str:
        return self.config.root_ca_file

    def install_for_distro(self, distro: Distro) -> None:
        """Run the install procedure for distro. Distro.UNKNOWN is a no-op."""
        module_name = _PLATFORM_MODULES.get(distro)
        if module_name is None:
            self.log.info("Unrecognized distro, so did not install certs.")
            return
        importlib.import_module(module_name).install_certs(self)

    # --- OS helpers ---

    def _file_exists(self, path: str) -> bool:
        try:
            os.stat(path)
        except OSError:
            return False
        return True

    def _read_file(self, path: str):
        """Return the file's bytes, or None if it cannot be read."""
        try:
            with open(path, "rb") as f:
                return f.read()
        except OSError as e:
            self.log.error(f"Error reading file: {e}")
            return None

    def _append_file(self, path: str, data: bytes) -> None:
        """Append data to an existing file. Never creates the file."""
        try:
            fd = os.open(path, os.O_WRONLY | os.O_APPEND)
        except OSError as e:
            self.log.error(f"Error opening file: {e}")
            return
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(data)
        except OSError as e:
            self.log.error(f"Error appending to file: {e}")

    def _copy_file(self, src: str, dst: str) -> None:
        """Copy src to dst with mode 0644, replacing dst if present."""
        data = self._read_file(src)
        if data is None:
            return
        try:
            fd = os.open(dst, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o644)
            with os.fdopen(fd, "wb") as f:
                f.write(data)
        except OSError as e:
            self.log.error(f"Error copying file: {e}")

    def _run(self, cmd: list) -> int:
        """Run a command in the configured workdir, streaming output to the log.

        stderr is merged into stdout, so both end up in the log sink.

        Returns the exit code, or -1 if the command could not be started.
        A nonzero exit is logged and otherwise ignored.
        """
        try:
            proc = subprocess.Popen(
                cmd,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                errors="replace",
                bufsize=1,  # line-buffered
                cwd=self.config.workdir,
            )
        except OSError as e:
            self.log.error(f"Error executing command: {e}")
            return -1
        for line in proc.stdout:
            stripped = line.rstrip("\n")
            if stripped.strip():
                self.log.info(stripped)
        proc.wait()
        if proc.returncode != 0:
            self.log.warn(f"Command exited {proc.returncode} (non-fatal): {' '.join(cmd)}")
        return proc.returncode

"""install-certs — install a root CA into a container image's OS trust store."""

from certinstall.base import CertInstaller, InstallAborted
from certinstall.config import InstallConfig
from certinstall.osdetect import Distro, detect_distro, identify_distro

__all__ = [
    "CertInstaller",
    "InstallAborted",
    "InstallConfig",
    "Distro",
    "detect_distro",
    "identify_distro",
    "main",
]


def __getattr__(name):
    if name == "main":
        from certinstall.runner import main
        return main
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

"""Entry point for installing the root CA during an image build.

A Dockerfile invokes this via:
    RUN ["install-certs"]
or
    RUN ["python3", "-m", "certinstall.runner", "/cacert.pem"]

The exit code is always 0 so a failed install never fails the build.
"""

import sys
import traceback

from certinstall.base import CertInstaller, InstallAborted
from certinstall.config import InstallConfig
from certinstall.logging import InstallLogger
from certinstall.osdetect import detect_distro


def run(config: InstallConfig, log: InstallLogger) -> None:
    """Detect the distro and install the root CA. Never raises."""
    try:
        distro = detect_distro(config.os_release_files)
        if distro is None:
            log.info("Could not identify distro, so did not install certs.")
            return
        CertInstaller(config, log).install_for_distro(distro)
    except InstallAborted as e:
        log.info(str(e))
    except Exception as e:
        log.error(f"Certificate install failed: {e}")
        traceback.print_exc(file=sys.stderr)


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]
    try:
        config = InstallConfig.from_env(argv=argv)
        log = InstallLogger(config.log_file if config.debug else None)
        run(config, log)
    except Exception:
        traceback.print_exc(file=sys.stderr)
    finally:
        sys.exit(0)


if __name__ == "__main__":
    main()

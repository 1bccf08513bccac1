"""Debian/Ubuntu certificate install via update-ca-certificates.

Each function takes `app` (a CertInstaller instance) as its first argument
and uses app.log, app._run, app._copy_file, etc.
"""

from certinstall.base import InstallAborted

CERT_DIR = "/usr/local/share/ca-certificates/"
UPDATE_CA_CERTIFICATES = "/usr/sbin/update-ca-certificates"
APT = "/usr/bin/apt"


def anchor_path(root_ca_file):
    """Destination for the root CA.

    The full source path is appended to CERT_DIR, so "/cacert.pem" lands at
    "/usr/local/share/ca-certificates//cacert.pem".
    """
    return CERT_DIR + root_ca_file


def install_certs(app):
    """Copy the root CA into place and run update-ca-certificates.

    If update-ca-certificates is missing it is installed with apt first.
    Raises InstallAborted when neither tool is available.
    """
    app.log.info("Installing certs for Debian")
    app._copy_file(app.root_ca_file, anchor_path(app.root_ca_file))

    if not app._file_exists(UPDATE_CA_CERTIFICATES):
        if not app._file_exists(APT):
            raise InstallAborted(
                "update-ca-certificates missing, and can't install it because "
                "apt is missing. Not installing certs."
            )
        app._run([APT, "update"])
        app._run([APT, "install", "-y", "ca-certificates"])

    app._run([UPDATE_CA_CERTIFICATES])

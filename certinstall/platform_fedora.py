"""Fedora/RHEL certificate install via the p11-kit trust tools.

Each function takes `app` (a CertInstaller instance) as its first argument
and uses app.log, app._run, app._copy_file, etc.
"""

from certinstall.base import InstallAborted

ANCHORS_DIR = "/etc/pki/ca-trust/source/anchors"
TLS_CA_BUNDLE = "/etc/pki/ca-trust/extracted/pem/tls-ca-bundle.pem"
UPDATE_CA_TRUST = "/usr/bin/update-ca-trust"
TRUST = "/usr/bin/trust"
P11_KIT = "/usr/bin/p11-kit"


def _trust_commands(root_ca_file):
    """(name, argv) pairs in order of preference."""
    return [
        ("update-ca-trust", [UPDATE_CA_TRUST]),
        ("trust", [TRUST, "anchor", root_ca_file]),
        ("p11-kit", [
            P11_KIT, "extract", "--comment", "--format=pem-bundle",
            "--filter=certificates", "--overwrite", "--purpose", "server-auth",
            TLS_CA_BUNDLE,
        ]),
    ]


def install_certs(app):
    """Copy the root CA into the anchors dir and refresh the trust store.

    Only the first available tool is run. Raises InstallAborted when none of
    update-ca-trust, trust and p11-kit exist.
    """
    app.log.info("Installing certs for Fedora")

    # Destination is the directory itself; the write fails and is logged.
    app._copy_file(app.root_ca_file, ANCHORS_DIR)

    for name, cmd in _trust_commands(app.root_ca_file):
        if app._file_exists(cmd[0]):
            result = app._run(cmd)
            app.log.info(f"Installed certs using {name}: {result}")
            return

    raise InstallAborted(
        "Couldn't attempt Fedora install approach 3 because update-ca-trust, "
        "trust, and p11-kit were missing."
    )

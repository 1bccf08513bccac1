"""Alpine Linux certificate install.

Alpine's trust store is a flat concatenated PEM bundle, so the root CA is
appended to it directly.
"""

CA_BUNDLE = "/etc/ssl/certs/ca-certificates.crt"


def install_certs(app):
    """Append the root CA to the system bundle. The bundle must already exist."""
    app.log.info("Installing certs for Alpine")
    data = app._read_file(app.root_ca_file)
    if data is None:
        return
    app._append_file(CA_BUNDLE, data)

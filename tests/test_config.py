"""Tests for InstallConfig environment handling."""

import os
import sys
from unittest.mock import patch

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from certinstall.config import DEFAULT_LOG_FILE, DEFAULT_ROOT_CA_FILE, InstallConfig
from certinstall.osdetect import DEFAULT_RELEASE_FILES


class TestDefaults:
    def test_empty_env(self):
        config = InstallConfig.from_env({})
        assert config.root_ca_file == DEFAULT_ROOT_CA_FILE == "/cacert.pem"
        assert config.os_release_files == DEFAULT_RELEASE_FILES
        assert config.workdir == os.getcwd()
        assert config.debug is False
        assert config.log_file == DEFAULT_LOG_FILE == "/tmp/install-certs.log"

    def test_empty_values_count_as_unset(self):
        config = InstallConfig.from_env({"INSTALL_CERTS_ROOT_CA": "", "INSTALL_CERTS_DEBUG": ""})
        assert config.root_ca_file == "/cacert.pem"
        assert config.debug is False


class TestOverrides:
    def test_env_values(self, tmp_path):
        config = InstallConfig.from_env({
            "INSTALL_CERTS_ROOT_CA": "/certs/corp.pem",
            "INSTALL_CERTS_WORKDIR": str(tmp_path),
            "INSTALL_CERTS_LOG_FILE": "/var/log/certs.log",
        })
        assert config.root_ca_file == "/certs/corp.pem"
        assert config.workdir == str(tmp_path)
        assert config.log_file == "/var/log/certs.log"

    def test_debug_truthy_strings(self):
        for val in ("true", "1", "yes", "TRUE", "Yes"):
            assert InstallConfig.from_env({"INSTALL_CERTS_DEBUG": val}).debug is True

    def test_debug_falsy_strings(self):
        for val in ("false", "0", "no", "off"):
            assert InstallConfig.from_env({"INSTALL_CERTS_DEBUG": val}).debug is False

    def test_argv_overrides_env(self):
        config = InstallConfig.from_env(
            {"INSTALL_CERTS_ROOT_CA": "/certs/env.pem"}, argv=["/certs/argv.pem"]
        )
        assert config.root_ca_file == "/certs/argv.pem"

    def test_missing_cwd_falls_back_to_root(self):
        with patch("certinstall.config.os.getcwd", side_effect=FileNotFoundError(2, "No such file or directory")):
            assert InstallConfig.from_env({}).workdir == "/"
            assert InstallConfig().workdir == "/"

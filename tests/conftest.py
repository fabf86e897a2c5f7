"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import sys
from pathlib import Path

SRC_ROOT = Path(__file__).resolve().parents[1] / "src"

if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

import pytest
from cryptography.fernet import Fernet

from replica_settings.config.schema import EncryptionConfig, StorageConfig
from replica_settings.core.access import SettingsAccess


@pytest.fixture
def storage(tmp_path: Path) -> StorageConfig:
    """Return a storage config rooted in a temporary directory."""

    return StorageConfig(root_directory=tmp_path)


@pytest.fixture
def settings_file(tmp_path: Path) -> Path:
    """Return the path of a settings file that does not exist yet."""

    return tmp_path / "Settings.xml"


@pytest.fixture
def access(settings_file: Path) -> SettingsAccess:
    """Return an accessor over a fresh document anchored at <Main>."""

    return SettingsAccess.open(settings_file, "Main")


@pytest.fixture
def encryption() -> EncryptionConfig:
    """Return an encryption config with a random Fernet key."""

    return EncryptionConfig(key=Fernet.generate_key())

"""Pytest configuration and fixtures."""

import pytest
import sys
from pathlib import Path

# Add src to path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from hexadecoder.config import reset_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch, tmp_path):
    """Isolate each test from HEXADECODER_* variables and any local .env file."""
    for name in ("HEXADECODER_LOG_LEVEL", "HEXADECODER_LOG_FORMAT", "HEXADECODER_DEFAULT_CONTAINER"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture(scope="session")
def known_vectors():
    """Fixture providing hex strings and their decoded bytes."""
    return {
        "": b"",
        "00": b"\x00",
        "ff": b"\xff",
        "FF": b"\xff",
        "4a": b"\x4a",
        "4A": b"\x4a",
        "48656c6c6f": b"Hello",
        "deadBEEF": b"\xde\xad\xbe\xef",
        "000102fffefd": bytes([0, 1, 2, 255, 254, 253]),
    }

"""Pytest configuration and fixtures."""

import pytest
from ja3kit.ja3 import Ja3, Ja3S


@pytest.fixture
def chrome_ja3_text():
    """A Chrome-like JA3 string with GREASE removed."""
    return (
        "771,4865-4866-4867-49195-49199-49196-49200-52393-52392-49171-49172-156-157-47-53,"
        "0-23-65281-10-11-35-16-5-13-18-51-45-43-27-17513-21,29-23-24,0"
    )


@pytest.fixture
def sample_ja3():
    """Create a small JA3 record."""
    return Ja3(
        ssl_versions=[771],
        ciphers=[4865, 4866],
        ssl_extensions=[0, 23, 65281],
        elliptic_curves=[29, 23],
        elliptic_curve_point_formats=[0],
    )


@pytest.fixture
def sample_ja3s():
    """Create a small JA3S record."""
    return Ja3S(ssl_versions=[771], ciphers=[4865], ssl_extensions=[43, 51])

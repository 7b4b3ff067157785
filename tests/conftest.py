from pathlib import Path

import pytest

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def data_dir() -> Path:
    """Provides the directory holding captured sensors output."""
    return DATA_DIR


@pytest.fixture
def ubuntu_output() -> str:
    """Provides sensors output captured on an Ubuntu machine."""
    return (DATA_DIR / "sensors_ubuntu.txt").read_text(encoding="utf-8")


@pytest.fixture
def openeuler_output() -> str:
    """Provides sensors output captured on an openEuler machine."""
    return (DATA_DIR / "sensors_openeuler.txt").read_text(encoding="utf-8")


@pytest.fixture
def coretemp_output() -> str:
    """Provides a single coretemp block with inline thresholds."""
    return (
        "coretemp-isa-0000\n"
        "Adapter: ISA adapter\n"
        "Package id 0:  +45.0°C  (high = +80.0°C, crit = +90.0°C)\n"
        "\n"
    )


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )

import pytest

from liquidfan import StatusReport

from tests.unit.mocks import FakeBackend, make_report


@pytest.fixture
def sample_address() -> str:
    """Provides a consistent device address for testing."""
    return "/dev/hidraw1"


@pytest.fixture
def kraken_report(sample_address) -> StatusReport:
    """Provides a status report with pump, liquid probe and one fan."""
    return make_report(
        [
            ("Pump speed", "1790", ""),
            ("Liquid temperature", "28.5", "°C"),
            ("Fan 1 speed", "1200", "RPM"),
            ("Fan 1 duty", "45", "%"),
        ],
        address=sample_address,
    )


@pytest.fixture
def backend(kraken_report) -> FakeBackend:
    """Provides a fake backend serving the Kraken report."""
    return FakeBackend([kraken_report])


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "hardware: marks tests as hardware tests (may require physical hardware)")

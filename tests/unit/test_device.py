"""Tests for the Device aggregate."""

import json
import logging

import pytest
from pydantic import ValidationError

from liquidfan import (
    Device,
    DeviceNotRespondingError,
    FanControl,
    FanSpeed,
    LiquidTemperature,
    PumpDuty,
    PumpSpeed,
    parse_status_reports,
)

from .mocks import FakeBackend, make_report


@pytest.mark.unit
class TestDeviceConstruction:
    """Test building a Device from its first status report."""

    def test_end_to_end_kraken(self, kraken_report, backend):
        """Test a full cooler yields every entity with its first reading."""
        device = Device.from_report(kraken_report, backend)

        assert isinstance(device.temperature, LiquidTemperature)
        assert device.temperature.value == 28.5
        assert isinstance(device.pump_speed, PumpSpeed)
        assert device.pump_speed.value == 1790.0
        assert isinstance(device.pump_duty, PumpDuty)
        assert device.pump_duty.value == 60.0
        assert len(device.fan_speeds) == 1
        assert len(device.fan_controls) == 1
        assert device.fan_speeds[0].value == 1200.0
        assert device.fan_controls[0].value == 45.0

    def test_identity(self, kraken_report, backend, sample_address):
        """Test the device takes address and description from the report."""
        device = Device.from_report(kraken_report, backend)

        assert device.address == sample_address
        assert device.description == "NZXT Kraken X (X53, X63 or X73)"
        assert device.name == device.description

    def test_name_falls_back_to_address(self, backend):
        """Test a device without description is named by its address."""
        device = Device.from_report(make_report([], description=""), backend)

        assert device.name == "/dev/hidraw1"

    def test_fan_only_controller(self, backend):
        """Test a fan hub without pump or probe has only fan entities."""
        report = make_report(
            [
                ("Fan 1 speed", "1100", "rpm"),
                ("Fan 1 duty", "40", "%"),
                ("Fan 2 speed", "900", "rpm"),
                ("Fan 2 duty", "30", "%"),
                ("Firmware version", "1.0.7", ""),
            ],
            description="NZXT Smart Device V2",
        )

        device = Device.from_report(report, backend)

        assert device.temperature is None
        assert device.pump_speed is None
        assert device.pump_duty is None
        assert [fan.channel for fan in device.fan_speeds] == [1, 2]
        assert [fan.value for fan in device.fan_controls] == [40.0, 30.0]

    def test_entity_lists(self, kraken_report, backend):
        """Test sensors, controls and entities are grouped by role."""
        device = Device.from_report(kraken_report, backend)

        assert device.sensors() == [
            device.temperature,
            device.pump_speed,
            device.fan_speeds[0],
        ]
        assert device.controls() == [device.pump_duty, device.fan_controls[0]]
        assert [type(entity) for entity in device.entities()] == [
            LiquidTemperature,
            PumpSpeed,
            PumpDuty,
            FanSpeed,
            FanControl,
        ]

    def test_entity_ids_are_unique(self, kraken_report, backend):
        """Test every entity has its own host id."""
        device = Device.from_report(kraken_report, backend)
        ids = [entity.id for entity in device.entities()]

        assert len(ids) == len(set(ids))

    def test_construction_is_repeatable(self, kraken_report, backend):
        """Test the same report always yields the same capabilities."""
        first = Device.from_report(kraken_report, backend)
        second = Device.from_report(kraken_report, backend)

        assert first.capabilities == second.capabilities
        assert first.id == second.id == "/dev/hidraw1"
        assert [e.id for e in first.entities()] == [e.id for e in second.entities()]

    def test_capabilities_are_fixed(self, kraken_report, backend):
        """Test the capability set cannot be replaced."""
        device = Device.from_report(kraken_report, backend)

        with pytest.raises(ValidationError):
            device.capabilities = device.capabilities.model_copy()


@pytest.mark.unit
class TestDeviceRefresh:
    """Test refreshing a Device from new status reports."""

    def test_refresh_updates_entities(self, kraken_report, backend, sample_address):
        """Test refresh pushes the latest report into every entity."""
        device = Device.from_report(kraken_report, backend)
        backend.push(
            make_report(
                [
                    ("Pump speed", "2870", "rpm"),
                    ("Liquid temperature", "33.1", "°C"),
                    ("Fan 1 speed", "1500", "rpm"),
                    ("Fan 1 duty", "70", "%"),
                ]
            )
        )

        device.refresh()

        assert backend.queries[-1] == sample_address
        assert device.temperature.value == 33.1
        assert device.pump_speed.value == 2870.0
        assert device.pump_duty.value == 100.0
        assert device.fan_speeds[0].value == 1500.0
        assert device.fan_speeds[0].unit == "rpm"
        assert device.fan_controls[0].value == 70.0

    def test_refresh_missing_key_keeps_entity(self, kraken_report, backend):
        """Test a key that disappears leaves its entity stale."""
        device = Device.from_report(kraken_report, backend)
        backend.push(make_report([("Pump speed", "2000", "rpm")]))

        device.refresh()

        assert device.temperature is not None
        assert device.temperature.value == 28.5
        assert device.fan_speeds[0].value == 1200.0
        assert device.fan_controls[0].value == 45.0
        assert device.pump_speed.value == 2000.0

    def test_refresh_never_adds_capabilities(self, backend, sample_address):
        """Test new keys in later reports do not create entities."""
        device = Device.from_report(make_report([("Pump speed", "1790", "rpm")]), backend)
        backend.push(
            make_report([("Pump speed", "1790", "rpm"), ("Fan 1 speed", "900", "rpm")])
        )

        device.refresh()

        assert device.fan_speeds == []
        assert not device.capabilities.has_fans

    def test_refresh_takes_first_report(self, kraken_report, sample_address):
        """Test only the first of several reports is used."""
        backend = FakeBackend(
            [
                kraken_report,
                make_report([("Liquid temperature", "40", "°C")], address=sample_address),
            ]
        )
        device = Device.from_report(kraken_report, backend)
        device.temperature.value = None

        device.refresh()

        assert device.temperature.value == 28.5

    def test_refresh_unknown_address(self, kraken_report):
        """Test a device the source no longer reports raises an error."""
        device = Device.from_report(kraken_report, FakeBackend())

        with pytest.raises(DeviceNotRespondingError, match="/dev/hidraw1"):
            device.refresh()

    def test_refresh_backend_failure(self, kraken_report, backend, sample_address):
        """Test a backend failure is reported as a missing device."""
        device = Device.from_report(kraken_report, backend)
        backend.failing.add(sample_address)

        with pytest.raises(DeviceNotRespondingError, match="not showing up") as info:
            device.refresh()

        assert info.value.__cause__ is not None

    def test_refresh_non_scalar_value_stays_local(
        self, kraken_report, backend, sample_address, caplog
    ):
        """Test an odd value is a parse failure, not a missing device."""
        device = Device.from_report(kraken_report, backend)
        (report,) = parse_status_reports(
            json.dumps(
                [
                    {
                        "address": sample_address,
                        "status": [
                            {"key": "Liquid temperature", "value": 30.0, "unit": "°C"},
                            {"key": "Pump speed", "value": [1790], "unit": "rpm"},
                        ],
                    }
                ]
            )
        )
        backend.push(report)

        with caplog.at_level(logging.WARNING):
            device.refresh()

        assert device.temperature.value == 30.0
        assert device.pump_speed.value == 0.0
        assert "Could not parse '[1790]' as float" in caplog.text

    def test_load_from_status_order(self, kraken_report, backend, caplog):
        """Test entities are refreshed in fixed role order."""
        device = Device.from_report(kraken_report, backend)
        caplog.clear()

        with caplog.at_level(logging.WARNING):
            device.load_from_status(make_report([]))

        keys = [
            "Liquid temperature",
            "Pump speed",
            "Pump speed",
            "Fan 1 speed",
            "Fan 1 duty",
        ]
        messages = [record.getMessage() for record in caplog.records]
        assert len(messages) == len(keys)
        for key, message in zip(keys, messages):
            assert f"'{key}'" in message


@pytest.mark.unit
class TestDeviceInfo:
    """Test the human-readable device summary."""

    def test_full_summary(self, kraken_report, backend):
        """Test every present capability appears in the summary."""
        device = Device.from_report(kraken_report, backend)

        assert device.device_info() == (
            "Device @ /dev/hidraw1, Liquid @ 28.5, Pump @ 1790.0(60.0),\n"
            " Fans @ { Fan 1 - NZXT Kraken X (X53, X63 or X73) : 1200.0RPM, "
            "Duty: 45.0% }"
        )

    def test_several_fans(self, backend):
        """Test fans are listed one per line."""
        report = make_report(
            [
                ("Fan 1 speed", "1100", "rpm"),
                ("Fan 1 duty", "40", "%"),
                ("Fan 2 speed", "900", "rpm"),
                ("Fan 2 duty", "30", "%"),
            ],
            description="Hub",
        )

        info = Device.from_report(report, backend).device_info()

        assert info == (
            "Device @ /dev/hidraw1,\n"
            " Fans @ { Fan 1 - Hub : 1100.0rpm, Duty: 40.0% },\n"
            "{ Fan 2 - Hub : 900.0rpm, Duty: 30.0% }"
        )

    def test_bare_device(self, backend):
        """Test a device without capabilities only shows its address."""
        device = Device.from_report(make_report([]), backend)

        assert device.device_info() == "Device @ /dev/hidraw1"

"""Collaborator interfaces for talking to cooling devices."""

from abc import ABC, abstractmethod

from liquidfan.base.status import StatusReport


class StatusSource(ABC):
    """Produces status reports for devices."""

    @abstractmethod
    def read_status(self, address: str | None = None) -> list[StatusReport]:
        """Return current status reports.

        Args:
            address: Restrict the query to one device; None returns
                every device the source can see

        Returns:
            Reports in source order, empty when nothing answered
        """


class CommandSink(ABC):
    """Sends settings to devices. Commands are fire-and-forget."""

    @abstractmethod
    def set_pump_duty(self, address: str, percent: int) -> None:
        """Set the pump duty of a device."""

    @abstractmethod
    def set_fan_duty(
        self, address: str, percent: int, channel: int | None = None
    ) -> None:
        """Set the duty of one fan channel, or of the only fan."""


class Backend(StatusSource, CommandSink, ABC):
    """A source and sink backed by the same device-control utility."""

    def initialize_all(self) -> None:
        """Prepare every device for use; nothing to do by default."""

"""Backend that drives the liquidctl command-line utility."""

import logging
import subprocess

from pydantic import ValidationError

from liquidfan.base.errors import LiquidctlError
from liquidfan.base.status import StatusReport, parse_status_reports

from .base import Backend


class LiquidctlCLI(Backend):
    """Runs ``liquidctl`` as a subprocess for every query and command.

    Status is read with ``liquidctl --json status`` and decoded into
    StatusReport models. Any failure to run the utility, a non-zero exit
    status, a timeout or undecodable output is raised as LiquidctlError.
    Calls block until the utility exits; nothing is retried.
    """

    def __init__(
        self,
        executable: str = "liquidctl",
        timeout: float | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.executable = executable
        self.timeout = timeout
        self._logger = logger or logging.getLogger(
            f"{self.__class__.__module__}.{self.__class__.__name__}"
        )

    def read_status(self, address: str | None = None) -> list[StatusReport]:
        args = ["--json"]
        if address is not None:
            args += ["--address", address]
        args.append("status")

        output = self._run(args)
        try:
            return parse_status_reports(output)
        except ValidationError as err:
            msg = f"Could not decode liquidctl status output: {err}"
            raise LiquidctlError(msg) from err

    def set_pump_duty(self, address: str, percent: int) -> None:
        self._run(["--address", address, "set", "pump", "speed", str(percent)])

    def set_fan_duty(
        self, address: str, percent: int, channel: int | None = None
    ) -> None:
        fan = "fan" if channel is None else f"fan{channel}"
        self._run(["--address", address, "set", fan, "speed", str(percent)])

    def initialize_all(self) -> None:
        self._run(["initialize", "all"])

    def _run(self, args: list[str]) -> str:
        """Run liquidctl with args and return its standard output."""
        command = [self.executable, *args]
        self._logger.debug("Running %s", " ".join(command))
        try:
            result = subprocess.run(
                command,
                capture_output=True,
                text=True,
                check=True,
                timeout=self.timeout,
            )
        except FileNotFoundError as err:
            msg = f"liquidctl executable not found: {self.executable}"
            raise LiquidctlError(msg) from err
        except subprocess.TimeoutExpired as err:
            msg = f"liquidctl timed out after {self.timeout}s: {' '.join(args)}"
            raise LiquidctlError(msg) from err
        except subprocess.CalledProcessError as err:
            detail = (err.stderr or "").strip()
            msg = (
                f"liquidctl exited with status {err.returncode}: "
                f"{' '.join(args)}"
            )
            if detail:
                msg = f"{msg}: {detail}"
            raise LiquidctlError(msg) from err
        return result.stdout

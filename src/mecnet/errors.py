"""Exceptions raised by the network delay model."""

from __future__ import annotations


class NetworkModelError(Exception):
    """Base class for every error raised by :mod:`mecnet`."""


class ConfigurationError(NetworkModelError):
    """The task-type table cannot produce aggregate traffic statistics."""


class InvalidLinkParameterError(NetworkModelError, ValueError):
    """A non physical value was passed to the M/M/1 delay function."""


class LinkSaturatedError(NetworkModelError):
    """
    The offered load meets or exceeds the service rate of a link.

    The queue is unstable, so the expected delay is unbounded. Callers
    should treat the transfer as rejected due to bandwidth rather than
    scheduling it.

    Attributes:
        arrival_rate: total arrival rate on the link (tasks/s).
        service_rate: service rate of the link (tasks/s).
        device_count: number of devices sharing the access point.

    """

    def __init__(
        self,
        *,
        arrival_rate: float,
        service_rate: float,
        device_count: int,
    ) -> None:
        """Store the rates that caused the saturation."""
        self.arrival_rate = arrival_rate
        self.service_rate = service_rate
        self.device_count = device_count
        msg = (
            f"link saturated: arrival rate {arrival_rate:.6g} tasks/s from "
            f"{device_count} device(s) >= service rate {service_rate:.6g} tasks/s"
        )
        super().__init__(msg)

"""Count the devices sharing an access point at a given time"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from mecnet.config.constants import NetworkDefaults

if TYPE_CHECKING:
    from mecnet.runtime.types import Location, MobilityModel

logger = logging.getLogger(__name__)


class PeakLoadCounter:
    """
    Running maximum of the device counts observed by the load estimator.

    Diagnostic only: the delay computation never reads it back.
    """

    def __init__(self) -> None:
        """Start from an empty access point."""
        self._value = 0
        self._lock = threading.Lock()

    @property
    def value(self) -> int:
        """Largest device count observed so far."""
        return self._value

    def observe(self, device_count: int) -> bool:
        """
        Record *device_count* and return True if it raised the maximum.

        The compare-and-set runs under a lock so concurrent observers can
        never lower the recorded peak.
        """
        with self._lock:
            if device_count <= self._value:
                return False
            self._value = device_count
        logger.debug("new peak load: %d device(s) in one place", device_count)
        return True


class LoadEstimator:
    """Census of the mobile devices attached to a location"""

    def __init__(
        self,
        *,
        mobility: MobilityModel,
        number_of_mobile_devices: int,
        peak_counter: PeakLoadCounter | None = None,
    ) -> None:
        """
        Args:
            mobility (MobilityModel): source of device locations
            number_of_mobile_devices (int): devices ``0 .. N-1`` to scan
            peak_counter (PeakLoadCounter | None): counter updated after
                every census, a fresh one is created when omitted

        """
        if number_of_mobile_devices < NetworkDefaults.MIN_NUMBER_OF_MOBILE_DEVICES:
            msg = (
                "The number of mobile devices cannot be negative, "
                f"got {number_of_mobile_devices}"
            )
            raise ValueError(msg)
        self.mobility = mobility
        self.number_of_mobile_devices = number_of_mobile_devices
        self.peak_counter = peak_counter or PeakLoadCounter()

    def device_count(self, location: Location, time: float) -> int:
        """Number of devices whose location equals *location* at *time*."""
        count = sum(
            1
            for device_id in range(self.number_of_mobile_devices)
            if self.mobility.get_location(device_id, time) == location
        )
        self.peak_counter.observe(count)
        return count

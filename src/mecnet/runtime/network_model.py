"""
Network models used by the simulator to time task transfers.

The mobile device is always the source of an upload and the destination of
a download. The other end is either the cloud datacenter, reached through
the access point and the WAN, or an edge host, reached through the access
point and the internal edge network.
"""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from mecnet.config.constants import DeviceIds, LinkType, TransferDirection
from mecnet.config.settings import NetworkSettings
from mecnet.core.mm1 import mm1_delay
from mecnet.core.traffic_profile import AggregateTrafficStats, build_traffic_profile
from mecnet.runtime.load_estimator import LoadEstimator, PeakLoadCounter

if TYPE_CHECKING:
    from mecnet.runtime.types import (
        EdgeTopology,
        Location,
        MobilityModel,
        SimulationClock,
    )
    from mecnet.schemas.task_profile import TaskLookupTable

logger = logging.getLogger(__name__)


class NetworkModel(ABC):
    """Interface between the simulator and a network delay model"""

    def __init__(self, number_of_mobile_devices: int) -> None:
        """Store the size of the mobile device population"""
        self.number_of_mobile_devices = number_of_mobile_devices

    @abstractmethod
    def upload_delay(self, source_device_id: int, dest_device_id: int) -> float:
        """Seconds needed to move a task input from the device to its target."""

    @abstractmethod
    def download_delay(self, source_device_id: int, dest_device_id: int) -> float:
        """Seconds needed to move a task output back to the device."""


class MM1QueueModel(NetworkModel):
    """WLAN and WAN links modelled as M/M/1 queues loaded by co-located devices"""

    def __init__(  # noqa: PLR0913
        self,
        *,
        task_table: TaskLookupTable,
        clock: SimulationClock,
        mobility: MobilityModel,
        topology: EdgeTopology,
        settings: NetworkSettings | None = None,
    ) -> None:
        """
        Args:
            task_table (TaskLookupTable): workload mix of the scenario
            clock (SimulationClock): source of the current simulated time,
                e.g. a ``simpy.Environment``
            mobility (MobilityModel): maps devices to locations over time
            topology (EdgeTopology): serving access point of each edge host
            settings (NetworkSettings | None): link constants, read from the
                environment when omitted

        Raises:
            ConfigurationError: no task type has a nonzero weight.

        """
        self.settings = settings or NetworkSettings()
        super().__init__(self.settings.number_of_mobile_devices)
        self.clock = clock
        self.mobility = mobility
        self.topology = topology

        self._stats = build_traffic_profile(task_table)
        self._peak_counter = PeakLoadCounter()
        self._load_estimator = LoadEstimator(
            mobility=mobility,
            number_of_mobile_devices=self.number_of_mobile_devices,
            peak_counter=self._peak_counter,
        )

    # ------------------------------------------------------------------ #
    # Diagnostics                                                        #
    # ------------------------------------------------------------------ #

    @property
    def traffic_stats(self) -> AggregateTrafficStats:
        """Aggregate traffic statistics computed at construction"""
        return self._stats

    @property
    def max_clients_in_place(self) -> int:
        """Largest number of devices seen on one access point so far"""
        return self._peak_counter.value

    # ------------------------------------------------------------------ #
    # Single links                                                       #
    # ------------------------------------------------------------------ #

    def _link_delay(
        self,
        link: LinkType,
        direction: TransferDirection,
        location: Location,
        time: float,
    ) -> float:
        """Run the M/M/1 formula for one leg with the census taken at *time*"""
        if direction == TransferDirection.UPLOAD:
            task_size = self._stats.avg_task_input_size
        else:
            task_size = self._stats.avg_task_output_size

        if link == LinkType.WLAN:
            propagation = 0.0
            bandwidth = self.settings.wlan_bandwidth
            poisson_mean = self._stats.wlan_poisson_mean
        else:
            propagation = self.settings.wan_propagation_delay
            bandwidth = self.settings.wan_bandwidth
            poisson_mean = self._stats.wan_poisson_mean

        return mm1_delay(
            propagation,
            bandwidth,
            poisson_mean,
            task_size,
            self._load_estimator.device_count(location, time),
        )

    def wlan_upload_delay(self, location: Location, time: float) -> float:
        """Upload delay on the access point serving *location*"""
        return self._link_delay(LinkType.WLAN, TransferDirection.UPLOAD, location, time)

    def wlan_download_delay(self, location: Location, time: float) -> float:
        """Download delay on the access point serving *location*"""
        return self._link_delay(
            LinkType.WLAN, TransferDirection.DOWNLOAD, location, time,
        )

    def wan_upload_delay(self, location: Location, time: float) -> float:
        """Upload delay on the WAN segment behind *location*"""
        return self._link_delay(LinkType.WAN, TransferDirection.UPLOAD, location, time)

    def wan_download_delay(self, location: Location, time: float) -> float:
        """Download delay on the WAN segment behind *location*"""
        return self._link_delay(LinkType.WAN, TransferDirection.DOWNLOAD, location, time)

    # ------------------------------------------------------------------ #
    # Transfers                                                          #
    # ------------------------------------------------------------------ #

    def _cloud_delay(self, direction: TransferDirection, location: Location) -> float:
        """
        Two-hop delay: WLAN first, then WAN with the census taken at the
        time the task leaves the access point.

        The 0.0 fallback is unreachable with real M/M/1 legs: they are
        always positive and finite, and an overloaded leg raises
        LinkSaturatedError instead. It only guards ``_link_delay``
        overrides that return a non positive or infinite value.
        """
        now = self.clock.now
        wlan_delay = self._link_delay(LinkType.WLAN, direction, location, now)
        wan_delay = self._link_delay(LinkType.WAN, direction, location, now + wlan_delay)

        if (
            wlan_delay > 0 and wan_delay > 0
            and math.isfinite(wlan_delay) and math.isfinite(wan_delay)
        ):
            return wlan_delay + wan_delay

        logger.warning(
            "cloud %s at t=%.3f not modelled (wlan=%r, wan=%r), reporting 0",
            direction, now, wlan_delay, wan_delay,
        )
        return 0.0

    def upload_delay(self, source_device_id: int, dest_device_id: int) -> float:
        """
        Delay of a task input sent by mobile device *source_device_id*.

        Raises:
            LinkSaturatedError: one of the traversed links is overloaded.

        """
        now = self.clock.now
        access_point = self.mobility.get_location(source_device_id, now)

        if dest_device_id == DeviceIds.CLOUD_DATACENTER:
            return self._cloud_delay(TransferDirection.UPLOAD, access_point)

        # every request reaches the edge orchestrator first and is then
        # redirected to the selected host
        delay = self.wlan_upload_delay(access_point, now)
        return delay + self.settings.internal_lan_surcharge

    def download_delay(self, source_device_id: int, dest_device_id: int) -> float:
        """
        Delay of a task output returned to mobile device *dest_device_id*.

        Raises:
            LinkSaturatedError: one of the traversed links is overloaded.

        """
        now = self.clock.now
        access_point = self.mobility.get_location(dest_device_id, now)

        if source_device_id == DeviceIds.CLOUD_DATACENTER:
            return self._cloud_delay(TransferDirection.DOWNLOAD, access_point)

        delay = self.wlan_download_delay(access_point, now)

        # the output crosses the internal network only when the host sits
        # behind another access point than the one serving the device
        host_wlan_id = self.topology.serving_wlan_id(source_device_id)
        if host_wlan_id != access_point.serving_wlan_id:
            delay += self.settings.internal_lan_surcharge
        return delay

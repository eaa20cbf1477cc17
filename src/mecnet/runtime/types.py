"""
Value types and collaborator interfaces used at runtime.

The delay model never reaches for global simulation state: the clock, the
mobility model and the edge topology are injected as objects satisfying the
protocols below. A ``simpy.Environment`` is a valid :class:`SimulationClock`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class Location:
    """
    Logical position of a device.

    Two devices are co-located, and therefore share the same access point
    queue, when their locations compare equal.

    Attributes:
        serving_wlan_id: access point through which the device communicates.
        place_type: attractiveness class of the place (scenario defined).
        x_pos: x coordinate of the place.
        y_pos: y coordinate of the place.

    """

    serving_wlan_id: int
    place_type: int = 0
    x_pos: float = 0.0
    y_pos: float = 0.0


@runtime_checkable
class SimulationClock(Protocol):
    """Anything exposing the current simulated time as ``now``."""

    @property
    def now(self) -> float:
        """Current simulated time in seconds."""
        ...


@runtime_checkable
class MobilityModel(Protocol):
    """Maps a mobile device and a simulated time to a location."""

    def get_location(self, device_id: int, time: float) -> Location:
        """Return where *device_id* is at *time*."""
        ...


@runtime_checkable
class EdgeTopology(Protocol):
    """Read access to the edge datacenters of the scenario."""

    def serving_wlan_id(self, host_id: int) -> int:
        """Return the access point that serves edge host *host_id*."""
        ...

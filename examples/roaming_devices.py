"""
mecnet — roaming devices example: time uploads and downloads with SimPy.

Scenario
  20 mobile devices walking between 3 access points, one edge host behind
  each access point, plus the cloud datacenter.

Workload
  Two task types: augmented reality (heavy uploads, 20% cloud) and
  infotainment (heavy downloads, 50% cloud).

What this script does
  1) Builds the M/M/1 network model on a SimPy clock.
  2) Spawns one offloading process per device, alternating edge and cloud.
  3) Logs rejected transfers (saturated links) and prints the mean delays
     together with the peak number of devices seen on one access point.
"""

from __future__ import annotations

import logging
from collections.abc import Generator

import numpy as np
import simpy

from mecnet import (
    LinkSaturatedError,
    Location,
    MM1QueueModel,
    NetworkSettings,
    TaskLookupTable,
)
from mecnet.enums import DeviceIds

# --- Basic Logging Setup ---
logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
logger = logging.getLogger("roaming_devices")

NUM_DEVICES = 20
SIMULATION_TIME = 600.0
ACCESS_POINTS = [Location(serving_wlan_id=i, place_type=i) for i in range(3)]


class RandomWalkMobility:
    """Each device jumps to a random access point every *dwell* seconds."""

    def __init__(
        self,
        rng: np.random.Generator,
        horizon: float,
        dwell: float = 30.0,
    ) -> None:
        """Draw one access point per device and dwell slot up to *horizon*."""
        self._dwell = dwell
        slots = int(horizon // dwell) + 1
        self._plan = rng.integers(0, len(ACCESS_POINTS), size=(NUM_DEVICES, slots))

    def get_location(self, device_id: int, time: float) -> Location:
        """Return the access point of *device_id* during the slot of *time*."""
        # past the horizon the plan repeats
        slot = int(time // self._dwell) % self._plan.shape[1]
        return ACCESS_POINTS[self._plan[device_id, slot]]


class OneHostPerAccessPoint:
    """Edge host *i* sits behind access point *i*."""

    def serving_wlan_id(self, host_id: int) -> int:
        """Return the access point in front of *host_id*."""
        return host_id


def device(
    env: simpy.Environment,
    model: MM1QueueModel,
    device_id: int,
    delays: list[float],
    rng: np.random.Generator,
) -> Generator[simpy.Event, None, None]:
    """Offload a task, wait for the round trip, think, repeat."""
    while True:
        yield env.timeout(rng.exponential(5.0))
        if rng.random() < 0.3:
            target = int(DeviceIds.CLOUD_DATACENTER)
        else:
            target = int(rng.integers(0, len(ACCESS_POINTS)))
        try:
            up = model.upload_delay(device_id, target)
            yield env.timeout(up)
            down = model.download_delay(target, device_id)
            yield env.timeout(down)
        except LinkSaturatedError as err:
            logger.info("device %d rejected at t=%.2f: %s", device_id, env.now, err)
            continue
        delays.append(up + down)


def main() -> None:
    """Run 10 simulated minutes and print a short summary."""
    rng = np.random.default_rng(7)
    env = simpy.Environment()
    table = TaskLookupTable(
        task_types={
            "augmented_reality": {
                "usage_percentage": 60,
                "cloud_selection_percentage": 20,
                "poisson_interarrival": 2,
                "upload_size_kb": 1500,
                "download_size_kb": 25,
            },
            "infotainment": {
                "usage_percentage": 40,
                "cloud_selection_percentage": 50,
                "poisson_interarrival": 7,
                "upload_size_kb": 25,
                "download_size_kb": 1000,
            },
        },
    )
    model = MM1QueueModel(
        task_table=table,
        clock=env,
        mobility=RandomWalkMobility(rng, horizon=SIMULATION_TIME),
        topology=OneHostPerAccessPoint(),
        settings=NetworkSettings(number_of_mobile_devices=NUM_DEVICES),
    )

    delays: list[float] = []
    for device_id in range(NUM_DEVICES):
        env.process(device(env, model, device_id, delays, rng))
    env.run(until=SIMULATION_TIME)

    arr = np.array(delays)
    print(f"completed transfers : {arr.size}")
    print(f"mean round trip (s) : {arr.mean():.4f}")
    print(f"p95 round trip (s)  : {np.percentile(arr, 95):.4f}")
    print(f"peak devices per AP : {model.max_clients_in_place}")


if __name__ == "__main__":
    main()

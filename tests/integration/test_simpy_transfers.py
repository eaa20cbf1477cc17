"""
End-to-end check of the model inside a SimPy process.

The test plays the role of the simulator: a device process offloads tasks,
waits the upload delay with ``env.timeout`` and then waits the download
delay. Devices roam between two access points over time.
"""

from __future__ import annotations

from collections.abc import Generator

import pytest
import simpy

from mecnet.config.constants import DeviceIds
from mecnet.config.settings import NetworkSettings
from mecnet.errors import LinkSaturatedError
from mecnet.runtime.network_model import MM1QueueModel
from mecnet.runtime.types import Location
from mecnet.schemas.task_profile import TaskLookupTable
from tests.stubs import StubMobility, StubTopology

AP_0 = Location(serving_wlan_id=0)
AP_1 = Location(serving_wlan_id=1)


def _roaming(period: float) -> StubMobility:
    """Device population alternating between two access points."""

    def _where(device_id: int):  # noqa: ANN202
        def _at(time: float) -> Location:
            slot = int(time // period) + device_id
            return AP_0 if slot % 2 == 0 else AP_1
        return _at

    return StubMobility({i: _where(i) for i in range(6)})


@pytest.fixture
def roaming_model(
    env: simpy.Environment,
    mixed_task_table: TaskLookupTable,
) -> MM1QueueModel:
    """Six roaming devices, two edge hosts, one per access point."""
    return MM1QueueModel(
        task_table=mixed_task_table,
        clock=env,
        mobility=_roaming(period=3.0),
        topology=StubTopology({0: 0, 1: 1}),
        settings=NetworkSettings(number_of_mobile_devices=6),
    )


def _offload(
    env: simpy.Environment,
    model: MM1QueueModel,
    device_id: int,
    target: int,
    log: list[tuple[float, float, float]],
) -> Generator[simpy.Event, None, None]:
    """Upload, wait, download: record the three timestamps of each task."""
    for _ in range(5):
        start = env.now
        yield env.timeout(model.upload_delay(device_id, target))
        uploaded = env.now
        yield env.timeout(model.download_delay(target, device_id))
        log.append((start, uploaded, env.now))
        yield env.timeout(1.0)


def test_tasks_complete_with_positive_delays(
    env: simpy.Environment,
    roaming_model: MM1QueueModel,
) -> None:
    """Every transfer advances the clock by a strictly positive amount."""
    cloud_log: list[tuple[float, float, float]] = []
    edge_log: list[tuple[float, float, float]] = []
    env.process(
        _offload(env, roaming_model, 0, int(DeviceIds.CLOUD_DATACENTER), cloud_log),
    )
    env.process(_offload(env, roaming_model, 1, 0, edge_log))
    env.run()

    assert len(cloud_log) == 5
    assert len(edge_log) == 5
    for start, uploaded, done in cloud_log + edge_log:
        assert start < uploaded < done


def test_peak_load_bounded_by_population(
    env: simpy.Environment,
    roaming_model: MM1QueueModel,
) -> None:
    """The diagnostic never exceeds the number of devices."""
    log: list[tuple[float, float, float]] = []
    for device_id in range(6):
        env.process(_offload(env, roaming_model, device_id, device_id % 2, log))
    env.run()

    assert len(log) == 30
    assert 1 <= roaming_model.max_clients_in_place <= 6


def test_saturation_surfaces_inside_process(
    env: simpy.Environment,
    mixed_task_table: TaskLookupTable,
) -> None:
    """The simulator sees LinkSaturatedError and can reject the task."""
    model = MM1QueueModel(
        task_table=mixed_task_table,
        clock=env,
        mobility=StubMobility(dict.fromkeys(range(6), AP_0)),
        topology=StubTopology({0: 0}),
        # 1 Kbps cannot serve even a fraction of one task per second
        settings=NetworkSettings(wlan_bandwidth=1, number_of_mobile_devices=6),
    )
    rejected: list[float] = []

    def _task() -> Generator[simpy.Event, None, None]:
        yield env.timeout(2.0)
        try:
            yield env.timeout(model.upload_delay(0, 0))
        except LinkSaturatedError:
            rejected.append(env.now)

    env.process(_task())
    env.run()

    assert rejected == [2.0]

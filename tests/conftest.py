"""Pytest configuration file for setting up shared fixtures."""

from __future__ import annotations

import pytest
import simpy

from mecnet.config.settings import NetworkSettings
from mecnet.runtime.types import Location
from mecnet.schemas.task_profile import TaskLookupTable, TaskTypeProfile

# ============================================================================
# LOCATIONS
# ============================================================================


@pytest.fixture
def ap_0() -> Location:
    """Location served by access point 0."""
    return Location(serving_wlan_id=0, place_type=0, x_pos=0.0, y_pos=0.0)


@pytest.fixture
def ap_1() -> Location:
    """Location served by access point 1."""
    return Location(serving_wlan_id=1, place_type=1, x_pos=10.0, y_pos=0.0)


# ============================================================================
# TASK TABLES
# ============================================================================


@pytest.fixture
def single_task_table() -> TaskLookupTable:
    """One task type carrying the whole workload."""
    return TaskLookupTable(
        task_types={
            "augmented_reality": TaskTypeProfile(
                usage_percentage=100,
                cloud_selection_percentage=20,
                poisson_interarrival=2.0,
                upload_size_kb=1500,
                download_size_kb=25,
            ),
        },
    )


@pytest.fixture
def mixed_task_table() -> TaskLookupTable:
    """Two active task types plus an inactive one."""
    return TaskLookupTable(
        task_types={
            "augmented_reality": TaskTypeProfile(
                usage_percentage=60,
                cloud_selection_percentage=20,
                poisson_interarrival=2.0,
                upload_size_kb=1500,
                download_size_kb=25,
            ),
            "health_app": TaskTypeProfile(
                usage_percentage=0,
                cloud_selection_percentage=20,
                poisson_interarrival=3.0,
                upload_size_kb=20,
                download_size_kb=1250,
            ),
            "infotainment": TaskTypeProfile(
                usage_percentage=40,
                cloud_selection_percentage=50,
                poisson_interarrival=7.0,
                upload_size_kb=25,
                download_size_kb=1000,
            ),
        },
    )


# ============================================================================
# SETTINGS AND CLOCK
# ============================================================================


@pytest.fixture
def net_settings() -> NetworkSettings:
    """Link constants with round numbers and a small device population."""
    return NetworkSettings(
        wlan_bandwidth=300_000,
        wan_bandwidth=20_000,
        wan_propagation_delay=0.1,
        internal_lan_delay=0.005,
        number_of_mobile_devices=4,
    )


@pytest.fixture
def env() -> simpy.Environment:
    """Fresh SimPy environment used as the simulation clock."""
    return simpy.Environment()

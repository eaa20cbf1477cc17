"""Public Pydantic components and value types for scenario building."""
from mecnet.config.settings import NetworkSettings
from mecnet.runtime.types import (
    EdgeTopology,
    Location,
    MobilityModel,
    SimulationClock,
)
from mecnet.schemas.task_profile import TaskLookupTable, TaskTypeProfile

__all__ = [
    "EdgeTopology",
    "Location",
    "MobilityModel",
    "NetworkSettings",
    "SimulationClock",
    "TaskLookupTable",
    "TaskTypeProfile",
]

"""Public modules"""
from .config.settings import NetworkSettings
from .core.mm1 import mm1_delay
from .core.traffic_profile import AggregateTrafficStats, build_traffic_profile
from .errors import (
    ConfigurationError,
    InvalidLinkParameterError,
    LinkSaturatedError,
    NetworkModelError,
)
from .runtime.network_model import MM1QueueModel, NetworkModel
from .runtime.types import Location
from .schemas.task_profile import TaskLookupTable, TaskTypeProfile

__all__ = [
    "AggregateTrafficStats",
    "ConfigurationError",
    "InvalidLinkParameterError",
    "LinkSaturatedError",
    "Location",
    "MM1QueueModel",
    "NetworkModel",
    "NetworkModelError",
    "NetworkSettings",
    "TaskLookupTable",
    "TaskTypeProfile",
    "build_traffic_profile",
    "mm1_delay",
]

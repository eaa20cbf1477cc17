"""Public enums used in scenario definitions."""
from mecnet.config.constants import (
    DeviceIds,
    LinkType,
    TransferDirection,
)

__all__ = ["DeviceIds", "LinkType", "TransferDirection"]

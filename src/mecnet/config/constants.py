"""
Package-wide constants and default values.

This module groups all the *static* values used by the network delay model
so that:

* Settings and task tables can be strictly validated with Pydantic.
* The delay model and the simulator share a single source of truth for the
  reserved device identifiers and the unit conversions.

**IMPORTANT:** the reserved identifiers are part of the contract with the
simulator that dispatches tasks. Changing them is a breaking change for every
scenario that refers to the cloud datacenter by id.
"""

from enum import IntEnum, StrEnum

# ======================================================================
# RESERVED DEVICE IDENTIFIERS
# ======================================================================


class DeviceIds(IntEnum):
    """
    Identifiers that never belong to a mobile device.

    Mobile devices are numbered ``0 .. N-1`` and edge hosts use their own
    datacenter index, so the cloud is addressed through a value well above
    both ranges.
    """

    CLOUD_DATACENTER = 1000


# ======================================================================
# UNIT CONVERSIONS
# ======================================================================


class UnitConversion(IntEnum):
    """Multipliers used by the M/M/1 formula."""

    KB_TO_BYTE = 1_000       # task sizes are configured in KB
    KBPS_TO_BPS = 1_000      # bandwidth is configured in Kbps
    BITS_PER_BYTE = 8
    PERCENTAGE = 100         # usage / cloud shares are given as percentages


# ======================================================================
# NETWORK DEFAULTS
# ======================================================================


class NetworkDefaults:
    """
    Default link parameters applied when the scenario omits a value.

    Bandwidths are expressed in **Kbps**, delays in **seconds**.
    """

    WLAN_BANDWIDTH = 300_000          # 300 Mbps access point
    WAN_BANDWIDTH = 20_000            # 20 Mbps uplink to the cloud
    WAN_PROPAGATION_DELAY = 0.1
    INTERNAL_LAN_DELAY = 0.005
    NUMBER_OF_MOBILE_DEVICES = 100
    MIN_NUMBER_OF_MOBILE_DEVICES = 0

    # the internal network is crossed twice: device -> orchestrator -> host
    INTERNAL_LAN_HOPS = 2


# ======================================================================
# LINK AND DIRECTION NAMES
# ======================================================================


class LinkType(StrEnum):
    """Network segments modelled as independent M/M/1 queues."""

    WLAN = "wlan"
    WAN  = "wan"


class TransferDirection(StrEnum):
    """
    Direction of a transfer seen from the mobile device.

    Uploads carry the task input, downloads carry the task output.
    """

    UPLOAD   = "upload"
    DOWNLOAD = "download"

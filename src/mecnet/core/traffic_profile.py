"""
Aggregate traffic statistics derived from the task-type table.

The statistics are computed once, when the network model is built, and are
read-only afterwards.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from mecnet.config.constants import UnitConversion
from mecnet.errors import ConfigurationError

if TYPE_CHECKING:
    from mecnet.schemas.task_profile import TaskLookupTable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AggregateTrafficStats:
    """
    Workload-wide parameters fed to the M/M/1 formula.

    Attributes:
        wlan_poisson_mean: mean WLAN inter-arrival time (s).
        wan_poisson_mean: mean WAN inter-arrival time (s), not normalised.
        avg_task_input_size: average upload size (KB).
        avg_task_output_size: average download size (KB).
        task_type_count: number of task types with a nonzero weight.

    """

    wlan_poisson_mean: float
    wan_poisson_mean: float
    avg_task_input_size: float
    avg_task_output_size: float
    task_type_count: int


def build_traffic_profile(table: TaskLookupTable) -> AggregateTrafficStats:
    """
    Weight every active task type and average the results.

    Algorithm
    ---------
    For each task type with weight w != 0, in table order:
      1. wlan += interarrival * w
      2. wan  += wlan_running * (100 / cloud_pct) * w
      3. input += upload_kb * w ; output += download_kb * w
    Finally wlan, input and output are divided by the number of active
    types. wan keeps its raw accumulated value.

    Raises:
        ConfigurationError: no task type has a nonzero weight.

    """
    active = list(table.active_types().values())
    if not active:
        msg = "no task type has a nonzero usage percentage"
        raise ConfigurationError(msg)

    weights = np.array([p.weight for p in active])
    interarrivals = np.array([p.poisson_interarrival for p in active])
    cloud_shares = np.array([p.cloud_selection_percentage for p in active])
    uploads = np.array([p.upload_size_kb for p in active])
    downloads = np.array([p.download_size_kb for p in active])

    # NOTE: the WAN mean is built from the *running* WLAN accumulator (the
    # partial sum up to and including the current row), not from the row's
    # own inter-arrival. Numeric outputs depend on this, keep it as is.
    wlan_running = np.cumsum(interarrivals * weights)

    # a zero cloud share means no WAN traffic: infinite inter-arrival
    with np.errstate(divide="ignore"):
        cloud_factor = UnitConversion.PERCENTAGE / cloud_shares
    wan_mean = float(np.sum(wlan_running * cloud_factor * weights))

    count = len(active)
    stats = AggregateTrafficStats(
        wlan_poisson_mean=float(wlan_running[-1]) / count,
        wan_poisson_mean=wan_mean,
        avg_task_input_size=float(np.sum(uploads * weights)) / count,
        avg_task_output_size=float(np.sum(downloads * weights)) / count,
        task_type_count=count,
    )
    logger.debug("traffic profile built from %d task type(s): %s", count, stats)
    return stats

"""M/M/1 expected delay of a shared link."""

import math

from mecnet.config.constants import UnitConversion
from mecnet.errors import InvalidLinkParameterError, LinkSaturatedError


def service_rate(bandwidth_kbps: float, avg_task_size_kb: float) -> float:
    """Return mu, the tasks per second a link of *bandwidth_kbps* can serve."""
    if not math.isfinite(bandwidth_kbps) or bandwidth_kbps <= 0:
        msg = f"bandwidth must be positive and finite, got {bandwidth_kbps} Kbps"
        raise InvalidLinkParameterError(msg)
    if not math.isfinite(avg_task_size_kb) or avg_task_size_kb <= 0:
        msg = (
            "average task size must be positive and finite, "
            f"got {avg_task_size_kb} KB"
        )
        raise InvalidLinkParameterError(msg)

    bytes_per_second = (
        bandwidth_kbps * UnitConversion.KBPS_TO_BPS / UnitConversion.BITS_PER_BYTE
    )
    task_size_bytes = avg_task_size_kb * UnitConversion.KB_TO_BYTE
    return bytes_per_second / task_size_bytes


def arrival_rate(poisson_mean: float) -> float:
    """Return lambda, the tasks per second generated by a single device.

    An infinite mean is allowed and means the device never sends on the link.
    """
    if math.isnan(poisson_mean) or poisson_mean <= 0:
        msg = f"mean inter-arrival time must be positive, got {poisson_mean} s"
        raise InvalidLinkParameterError(msg)
    return 1.0 / poisson_mean


def mm1_delay(
    propagation_delay: float,
    bandwidth_kbps: float,
    poisson_mean: float,
    avg_task_size_kb: float,
    device_count: int,
) -> float:
    """
    Expected time a task spends on a link shared by *device_count* devices.

    Algorithm
    ---------
    1. mu       = (bandwidth * 1000 / 8) / (task_size * 1000)   [tasks/s]
    2. lambda   = 1 / poisson_mean                              [tasks/s]
    3. lambda_T = lambda * device_count
    4. delay    = propagation_delay + 1 / (mu - lambda_T)

    Raises:
        InvalidLinkParameterError: a parameter is out of its physical range.
        LinkSaturatedError: lambda_T >= mu, the queue has no steady state.

    """
    if not math.isfinite(propagation_delay) or propagation_delay < 0:
        msg = (
            "propagation delay must be finite and non negative, "
            f"got {propagation_delay} s"
        )
        raise InvalidLinkParameterError(msg)
    if device_count < 0:
        msg = f"device count cannot be negative, got {device_count}"
        raise InvalidLinkParameterError(msg)

    mu = service_rate(bandwidth_kbps, avg_task_size_kb)
    total_arrival_rate = arrival_rate(poisson_mean) * device_count

    if total_arrival_rate >= mu:
        raise LinkSaturatedError(
            arrival_rate=total_arrival_rate,
            service_rate=mu,
            device_count=device_count,
        )

    return propagation_delay + 1.0 / (mu - total_arrival_rate)

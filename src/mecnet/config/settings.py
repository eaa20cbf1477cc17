"""Scenario-wide network settings."""

from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field, NonNegativeFloat, PositiveFloat
from pydantic_settings import BaseSettings, SettingsConfigDict

from mecnet.config.constants import NetworkDefaults

env_path = Path.cwd() / ".env"
if env_path.exists():
    load_dotenv(dotenv_path=env_path)


class NetworkSettings(BaseSettings):
    """Link parameters shared by every access point, loaded from env variables."""

    model_config = SettingsConfigDict(
        env_file=None,
        extra="ignore",
        frozen=True,
        populate_by_name=True,
    )

    wlan_bandwidth: PositiveFloat = Field(
        default=NetworkDefaults.WLAN_BANDWIDTH,
        allow_inf_nan=False,
        description="WLAN bandwidth of an access point in Kbps.",
        alias="WLAN_BANDWIDTH",
    )
    wan_bandwidth: PositiveFloat = Field(
        default=NetworkDefaults.WAN_BANDWIDTH,
        allow_inf_nan=False,
        description="WAN bandwidth towards the cloud in Kbps.",
        alias="WAN_BANDWIDTH",
    )
    wan_propagation_delay: NonNegativeFloat = Field(
        default=NetworkDefaults.WAN_PROPAGATION_DELAY,
        allow_inf_nan=False,
        description="Propagation delay of the WAN segment in seconds.",
        alias="WAN_PROPAGATION_DELAY",
    )
    internal_lan_delay: NonNegativeFloat = Field(
        default=NetworkDefaults.INTERNAL_LAN_DELAY,
        allow_inf_nan=False,
        description="One-way delay of the internal edge network in seconds.",
        alias="LAN_INTERNAL_DELAY",
    )
    number_of_mobile_devices: int = Field(
        default=NetworkDefaults.NUMBER_OF_MOBILE_DEVICES,
        ge=NetworkDefaults.MIN_NUMBER_OF_MOBILE_DEVICES,
        description="Mobile devices scanned by the load estimator.",
        alias="NUM_OF_MOBILE_DEVICES",
    )

    @property
    def internal_lan_surcharge(self) -> float:
        """Delay added when a transfer crosses the internal edge network."""
        return self.internal_lan_delay * NetworkDefaults.INTERNAL_LAN_HOPS

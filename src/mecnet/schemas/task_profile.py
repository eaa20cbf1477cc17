"""
Define the task-type table consumed by the traffic profile builder.

Each row describes one application type of the workload mix. Only the
columns that influence network load are modelled here; the loader that
reads the scenario file is owned by the simulator.
"""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PositiveFloat,
    field_validator,
)

from mecnet.config.constants import UnitConversion


class TaskTypeProfile(BaseModel):
    """
    Network-relevant figures of a single task type.

    Attributes
    ----------
    usage_percentage : float
        Share of the workload mix generated by this task type (0-100).
    cloud_selection_percentage : float
        Share of this type's traffic that is offloaded to the cloud (0-100).
    poisson_interarrival : float
        Mean inter-arrival time of the type's tasks in seconds; it is the
        WLAN delay contribution of the type.
    upload_size_kb : float
        Average task input size in KB.
    download_size_kb : float
        Average task output size in KB.

    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    usage_percentage: float = Field(
        ge=0,
        le=UnitConversion.PERCENTAGE,
        description="Weight of the task type in the workload mix (%).",
    )
    cloud_selection_percentage: float = Field(
        ge=0,
        le=UnitConversion.PERCENTAGE,
        description="Share of the traffic destined to the cloud (%).",
    )
    poisson_interarrival: PositiveFloat = Field(
        description="Mean inter-arrival time in seconds.",
    )
    upload_size_kb: PositiveFloat = Field(
        description="Average input size in KB.",
    )
    download_size_kb: PositiveFloat = Field(
        description="Average output size in KB.",
    )

    @property
    def weight(self) -> float:
        """Usage percentage expressed as a fraction."""
        return self.usage_percentage / UnitConversion.PERCENTAGE


class TaskLookupTable(BaseModel):
    """
    Task-type table indexed by task-type identifier.

    Insertion order is preserved because the WAN inter-arrival figure is
    accumulated row by row.
    """

    model_config = ConfigDict(frozen=True)

    task_types: dict[str, TaskTypeProfile]

    @field_validator("task_types", mode="after")
    def ensure_not_empty(
        cls, # noqa: N805
        v: dict[str, TaskTypeProfile],
        ) -> dict[str, TaskTypeProfile]:
        """The table must describe at least one task type"""
        if not v:
            msg = "The task lookup table must contain at least one task type"
            raise ValueError(msg)
        return v

    def active_types(self) -> dict[str, TaskTypeProfile]:
        """Return the task types with a nonzero weight, in table order."""
        return {
            name: profile
            for name, profile in self.task_types.items()
            if profile.weight != 0
        }

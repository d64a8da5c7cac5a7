"""Observable registry configuration schema."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ObserverConfig(BaseModel):
    """Broadcast and subscription policy for an observable registry."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    allow_duplicate_subscribers: bool = Field(
        True, description="Permit more than one subscriber with the same identity"
    )
    notify_on_absent_value: bool = Field(
        False, description="Broadcast None values instead of skipping the broadcast"
    )
    subscriber_error_policy: Literal["propagate", "isolate"] = Field(
        "propagate",
        description="'propagate' aborts the broadcast on the first error, "
        "'isolate' logs the error and keeps notifying",
    )

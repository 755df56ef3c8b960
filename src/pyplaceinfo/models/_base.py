"""Base model for provider records.

Every record inherits from :class:`PlaceInfoBaseModel` which provides:

* frozen instances, so a record handed to the presenter cannot change.
* ``extra="ignore"`` so providers may add fields freely.
* A ``raw`` dict that captures the original payload when a model is
  validated from a provider dict.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class PlaceInfoBaseModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    raw: dict[str, Any] = Field(default_factory=dict, repr=False)
    """Original provider payload."""

    @model_validator(mode="before")
    @classmethod
    def _stash_raw(cls, values: Any) -> Any:
        # Only auto-stash raw when validating a provider dict; constructing
        # with an explicit raw= keeps the caller's value.
        if not isinstance(values, dict) or "raw" in values:
            return values
        stashed = dict(values)
        stashed["raw"] = dict(values)
        return stashed

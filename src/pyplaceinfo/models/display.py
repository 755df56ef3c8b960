"""Display record: the nine observable fields and their states."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from pyplaceinfo._constants import FAILED_TEXT, PENDING_TEXT


class DisplayField(StrEnum):
    LAT = "lat"
    LNG = "lng"
    COUNTRY = "country"
    REGION = "region"
    CURRENCY = "currency"
    LANGUAGE = "language"
    FLAG = "flag"
    WEATHER = "weather"
    TIME = "time"


#: Fields written by the location/country stage.
LOCATION_FIELDS: tuple[DisplayField, ...] = (
    DisplayField.COUNTRY,
    DisplayField.REGION,
    DisplayField.CURRENCY,
    DisplayField.LANGUAGE,
    DisplayField.FLAG,
)


class FieldState(StrEnum):
    PENDING = "pending"
    RESOLVED = "resolved"
    FAILED = "failed"


class FieldValue(BaseModel):
    """State of a single display slot. Only ``RESOLVED`` carries a value."""

    model_config = ConfigDict(frozen=True)

    state: FieldState
    value: str | None = None

    @model_validator(mode="after")
    def _value_only_when_resolved(self) -> FieldValue:
        if self.state != FieldState.RESOLVED and self.value is not None:
            raise ValueError(f"{self.state} field cannot carry a value")
        return self

    @classmethod
    def pending(cls) -> FieldValue:
        return cls(state=FieldState.PENDING)

    @classmethod
    def resolved(cls, value: str | None) -> FieldValue:
        return cls(state=FieldState.RESOLVED, value=value)

    @classmethod
    def failed(cls) -> FieldValue:
        return cls(state=FieldState.FAILED)

    def render(self, *, pending_text: str = PENDING_TEXT, failed_text: str = FAILED_TEXT) -> str:
        if self.state == FieldState.PENDING:
            return pending_text
        if self.state == FieldState.FAILED:
            return failed_text
        return self.value if self.value is not None else "-"


class DisplayRecord(BaseModel):
    """Snapshot of all nine slots."""

    model_config = ConfigDict(frozen=True)

    slots: dict[DisplayField, FieldValue] = Field(
        default_factory=lambda: {name: FieldValue.pending() for name in DisplayField}
    )

    def __getitem__(self, name: DisplayField | str) -> FieldValue:
        return self.slots[DisplayField(name)]

    def with_field(self, name: DisplayField, value: FieldValue) -> DisplayRecord:
        updated = dict(self.slots)
        updated[name] = value
        return DisplayRecord(slots=updated)

    def as_text(self) -> dict[str, str]:
        return {str(name): self.slots[name].render() for name in DisplayField}

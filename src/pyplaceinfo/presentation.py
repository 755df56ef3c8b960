"""Presentation capabilities used by the orchestrator.

The orchestrator never talks to a rendering technology directly. It
writes slot states through :class:`Presenter` and places its single pin
through :class:`MapWidget`. :class:`RecordingPresenter` is the in-memory
implementation used by the CLI script and the tests.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from pyplaceinfo.models.display import DisplayField, DisplayRecord, FieldValue


class Presenter(Protocol):
    def set_field(self, name: DisplayField, value: FieldValue) -> None:
        ...


class Marker(Protocol):
    def move(self, lat: float, lng: float) -> None:
        ...


class MapWidget(Protocol):
    def add_marker(self, lat: float, lng: float) -> Marker:
        ...

    def invalidate_size(self) -> None:
        ...


class RecordingPresenter:
    """Keeps the current :class:`DisplayRecord` and an optional change callback."""

    def __init__(self, on_change: Callable[[DisplayField, FieldValue], None] | None = None) -> None:
        self._record = DisplayRecord()
        self._on_change = on_change
        self.history: list[tuple[DisplayField, FieldValue]] = []

    @property
    def record(self) -> DisplayRecord:
        return self._record

    def set_field(self, name: DisplayField, value: FieldValue) -> None:
        self._record = self._record.with_field(name, value)
        self.history.append((name, value))
        if self._on_change is not None:
            self._on_change(name, value)

    def render(self) -> dict[str, str]:
        return self._record.as_text()

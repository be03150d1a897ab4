"""Sampling trace - an observation log kept apart from generated values.

A trace never influences what a generator produces. It records one span
per traced sample: where it began, how it ended, and how much entropy it
consumed. Spans opened while another is running become its children, so
the depth-first, left-to-right sampling order can be inspected afterwards.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from typing import Literal, TypeVar

from randkit.kernel.ports import EntropySource
from randkit.kernel.source import CountingSource

T = TypeVar("T")

SampleKind = Literal["begin", "end", "error"]


@dataclass(frozen=True)
class SampleEvent:
    """One recorded step of a traced sample.

    Attributes:
        kind: "begin" when sampling starts, then "end" or "error"
        label: Name given to the traced generator
        id: Sequential event id within the trace
        parent_id: Begin event of the enclosing span, if any
        value: repr of the produced value ("end" only)
        draws: Entropy draws consumed by the span ("end" and "error")
        error: Exception text ("error" only)
        duration_ms: Wall time spent in the span ("end" only)
        timestamp: When the event was recorded
    """

    kind: SampleKind
    label: str
    id: int = 0
    parent_id: int | None = None
    value: str | None = None
    draws: int | None = None
    error: str | None = None
    duration_ms: float | None = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))


class Trace:
    """Collects SampleEvents for generators wrapped with `traced`.

    Not thread-safe: give each thread its own Trace, like its own source.
    """

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled
        self._events: list[SampleEvent] = []
        self._open_spans: list[int] = []

    def observe(
        self,
        label: str,
        sample: Callable[[EntropySource], T],
        source: EntropySource,
    ) -> T:
        """Run sample against source inside a span named label.

        Records a "begin" event, then an "end" event carrying the value
        repr, draw count and duration. If sample raises, an "error" event
        is recorded and the exception propagates unchanged.
        """
        if not self.enabled:
            return sample(source)

        begin = self._append(SampleEvent(kind="begin", label=label))
        self._open_spans.append(begin.id)
        counting = CountingSource(source)
        start_time = time.perf_counter()
        try:
            value = sample(counting)
        except Exception as exc:
            self._append(
                SampleEvent(
                    kind="error",
                    label=label,
                    parent_id=begin.id,
                    draws=counting.draws,
                    error=f"{type(exc).__name__}: {exc}",
                )
            )
            raise
        finally:
            self._open_spans.pop()

        self._append(
            SampleEvent(
                kind="end",
                label=label,
                parent_id=begin.id,
                value=repr(value),
                draws=counting.draws,
                duration_ms=(time.perf_counter() - start_time) * 1000,
            )
        )
        return value

    def _append(self, event: SampleEvent) -> SampleEvent:
        parent_id = event.parent_id
        if parent_id is None and self._open_spans:
            parent_id = self._open_spans[-1]
        stored = replace(event, id=len(self._events), parent_id=parent_id)
        self._events.append(stored)
        return stored

    @property
    def events(self) -> list[SampleEvent]:
        return list(self._events)

    def find_all(self, kind: SampleKind | None = None, label: str | None = None) -> list[SampleEvent]:
        return [
            ev
            for ev in self._events
            if (kind is None or ev.kind == kind) and (label is None or ev.label == label)
        ]

    def values(self, label: str) -> list[str]:
        """Value reprs of every completed sample named label, in order."""
        return [ev.value for ev in self.find_all("end", label) if ev.value is not None]

    def children(self, event_id: int) -> list[SampleEvent]:
        """Begin events of the spans nested directly inside event_id's span."""
        return [ev for ev in self._events if ev.parent_id == event_id and ev.kind == "begin"]

    def __len__(self) -> int:
        return len(self._events)

    def clear(self) -> None:
        self._events.clear()
        self._open_spans.clear()

"""
Playback / Reveal Engine — turns "this step element is in view" signals into
a monotonic set of revealed step indices.

The engine never talks to a rendering surface directly. It is handed a
VisibilityNotifier (the browser's IntersectionObserver, relayed over HTTP,
or a fake in tests) and only reacts to the entries that notifier emits.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Sequence

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD = 0.3


@dataclass(frozen=True)
class StepElement:
    """A rendered step, tagged with its ordinal index."""
    key: str
    index: int


@dataclass(frozen=True)
class IntersectionEntry:
    target: StepElement
    intersection_ratio: float
    is_intersecting: bool


IntersectionCallback = Callable[[list[IntersectionEntry]], None]


class VisibilityNotifier(ABC):
    """Watches elements and reports when they cross the visibility threshold."""

    def __init__(self, callback: IntersectionCallback, threshold: float = DEFAULT_THRESHOLD):
        self.callback = callback
        self.threshold = threshold

    @abstractmethod
    def observe(self, element: StepElement) -> None: ...

    @abstractmethod
    def unobserve(self, element: StepElement) -> None: ...

    @abstractmethod
    def disconnect(self) -> None: ...


class ReportedVisibilityNotifier(VisibilityNotifier):
    """
    Notifier fed with raw intersection ratios from the outside world.

    Mirrors IntersectionObserver semantics: an entry is emitted on the first
    report for a watched element and afterwards only when its ratio crosses
    the threshold. Reports for elements that are not watched are dropped.
    """

    def __init__(self, callback: IntersectionCallback, threshold: float = DEFAULT_THRESHOLD):
        super().__init__(callback, threshold)
        self._watched: dict[str, StepElement] = {}
        self._above: dict[str, bool] = {}

    @property
    def watched(self) -> list[StepElement]:
        return list(self._watched.values())

    def observe(self, element: StepElement) -> None:
        self._watched[element.key] = element
        self._above.pop(element.key, None)

    def unobserve(self, element: StepElement) -> None:
        self._watched.pop(element.key, None)
        self._above.pop(element.key, None)

    def disconnect(self) -> None:
        self._watched.clear()
        self._above.clear()

    def report(self, key: str, ratio: float) -> Optional[IntersectionEntry]:
        entries = self.report_many([(key, ratio)])
        return entries[0] if entries else None

    def report_many(self, reports: Iterable[tuple[str, float]]) -> list[IntersectionEntry]:
        entries = []
        for key, ratio in reports:
            element = self._watched.get(key)
            if element is None:
                logger.debug("Dropping report for unobserved element %s", key)
                continue
            above = ratio >= self.threshold
            if self._above.get(key) == above:
                continue
            self._above[key] = above
            entries.append(IntersectionEntry(element, ratio, above))
        if entries:
            self.callback(entries)
        return entries


class PlaybackEngine:
    """Accumulates revealed step indices for the currently loaded example."""

    def __init__(self, notifier_factory: Callable[..., VisibilityNotifier] = ReportedVisibilityNotifier,
                 threshold: float = DEFAULT_THRESHOLD):
        self.notifier = notifier_factory(self._on_intersect, threshold)
        self._elements: list[StepElement] = []
        self._revealed: set[int] = set()

    @property
    def revealed(self) -> frozenset[int]:
        return frozenset(self._revealed)

    @property
    def elements(self) -> list[StepElement]:
        return list(self._elements)

    def is_revealed(self, index: int) -> bool:
        return index in self._revealed

    def load(self, elements: Sequence[StepElement]) -> None:
        """Start over with a new set of step elements (new example selected)."""
        for element in self._elements:
            self.notifier.unobserve(element)
        self._revealed = set()
        self._elements = list(elements)
        for element in self._elements:
            self.notifier.observe(element)

    def close(self) -> None:
        self.notifier.disconnect()
        self._elements = []

    def _on_intersect(self, entries: list[IntersectionEntry]) -> None:
        for entry in entries:
            if entry.is_intersecting and entry.target.index not in self._revealed:
                self._revealed.add(entry.target.index)
                logger.debug("Revealed step %d (%s)", entry.target.index, entry.target.key)

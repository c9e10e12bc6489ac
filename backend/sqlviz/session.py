"""
Topic/Example Selector — the current selection of one visualizer view and
the Playback Engine that tracks which of its steps have been revealed.
"""

import logging
from typing import Optional

from sqlviz.catalog import Catalog, Example, Step, Topic
from sqlviz.playback import PlaybackEngine, StepElement

logger = logging.getLogger(__name__)


class VisualizerSession:
    """
    Selecting a topic resets the example to 0; selecting an example (even
    the one already shown) re-initializes playback. Unknown topics raise
    KeyError and out-of-range examples IndexError.
    """

    def __init__(self, catalog: Catalog, engine: Optional[PlaybackEngine] = None):
        self.catalog = catalog
        self.engine = engine or PlaybackEngine()
        self.selected_topic: str = catalog.topic_names()[0]
        self.selected_example_index: int = 0
        self.step_elements: list[StepElement] = []
        self._reload()

    # ── Catalog views ──────────────────────────────────────────────────

    def topic_names(self) -> list[str]:
        return self.catalog.topic_names()

    def example_titles(self, topic: Optional[str] = None) -> list[str]:
        return self.catalog.example_titles(topic or self.selected_topic)

    @property
    def topic(self) -> Topic:
        return self.catalog.topic(self.selected_topic)

    @property
    def example(self) -> Example:
        return self.catalog.example(self.selected_topic, self.selected_example_index)

    @property
    def steps(self) -> tuple[Step, ...]:
        return self.example.steps

    # ── Selection ──────────────────────────────────────────────────────

    def select_topic(self, name: str) -> None:
        self.catalog.topic(name)  # KeyError for unknown topics
        self.selected_topic = name
        self.selected_example_index = 0
        self._reload()

    def select_example(self, index: int) -> None:
        self.catalog.example(self.selected_topic, index)  # IndexError when out of range
        self.selected_example_index = index
        self._reload()

    def select(self, topic: str, example: int = 0) -> None:
        # Validate the pair first so a failed selection leaves state untouched.
        self.catalog.example(topic, example)
        self.selected_topic = topic
        self.selected_example_index = example
        self._reload()

    # ── Playback ───────────────────────────────────────────────────────

    @property
    def revealed(self) -> frozenset[int]:
        return self.engine.revealed

    def is_revealed(self, index: int) -> bool:
        return self.engine.is_revealed(index)

    def close(self) -> None:
        self.engine.close()

    def _reload(self) -> None:
        self.step_elements = [
            StepElement(f"step-{self.selected_topic}-{self.selected_example_index}-{i}", i)
            for i in range(len(self.steps))
        ]
        self.engine.load(self.step_elements)
        logger.debug("Selected %s / example %d (%d steps)",
                     self.selected_topic, self.selected_example_index, len(self.step_elements))

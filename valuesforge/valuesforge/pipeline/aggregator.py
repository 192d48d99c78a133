"""Single-consumer collection of render outcomes."""

from __future__ import annotations

import logging
import queue
from dataclasses import dataclass, field

from ..core.models import RenderedFragment, RenderFailure, RenderOutcome

logger = logging.getLogger(__name__)


@dataclass
class CollectedOutput:
    fragments: list[RenderedFragment] = field(default_factory=list)
    failures: list[RenderFailure] = field(default_factory=list)

    def ordered_fragments(self) -> list[RenderedFragment]:
        return sorted(self.fragments, key=lambda f: f.path)

    def join(self, separator: str) -> str:
        return separator.join(f.text for f in self.ordered_fragments())


class FragmentCollector:
    """Inbox that render tasks send their outcome to.

    Any number of threads may call ``send``; only the thread calling
    ``collect`` touches the collected lists. ``collect`` returns once it has
    received exactly ``expected`` outcomes, which makes it the run's
    completion barrier: each render task must send one outcome, no more
    and no less.
    """

    def __init__(self) -> None:
        self._inbox: queue.SimpleQueue[RenderOutcome] = queue.SimpleQueue()

    def send(self, outcome: RenderOutcome) -> None:
        self._inbox.put(outcome)

    def collect(self, expected: int) -> CollectedOutput:
        collected = CollectedOutput()
        for _ in range(expected):
            outcome = self._inbox.get()
            if outcome.fragment is not None:
                collected.fragments.append(outcome.fragment)
            elif outcome.failure is not None:
                collected.failures.append(outcome.failure)
        logger.debug(
            f"Collected {len(collected.fragments)} fragment(s), "
            f"{len(collected.failures)} failure(s)"
        )
        return collected

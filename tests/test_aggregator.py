"""Tests for valuesforge.pipeline.aggregator."""

from __future__ import annotations

import threading
from pathlib import Path

from valuesforge.core.errors import TemplateParseError
from valuesforge.core.models import RenderedFragment, RenderFailure, RenderOutcome
from valuesforge.pipeline.aggregator import CollectedOutput, FragmentCollector


def _ok(name: str, text: str) -> RenderOutcome:
    path = Path(name)
    return RenderOutcome(path=path, fragment=RenderedFragment(path=path, text=text))


def _failed(name: str) -> RenderOutcome:
    path = Path(name)
    return RenderOutcome(
        path=path, failure=RenderFailure(path, TemplateParseError(path, "bad"))
    )


class TestFragmentCollector:
    def test_separates_fragments_and_failures(self):
        collector = FragmentCollector()
        collector.send(_ok("a.yaml", "a"))
        collector.send(_failed("b.yaml"))
        collector.send(_ok("c.yaml", "c"))

        collected = collector.collect(3)

        assert [f.text for f in collected.fragments] == ["a", "c"]
        assert [f.path for f in collected.failures] == [Path("b.yaml")]
        assert collected.failures[0].kind == "parse"

    def test_collect_zero_returns_immediately(self):
        collected = FragmentCollector().collect(0)
        assert collected.fragments == [] and collected.failures == []

    def test_concurrent_senders_lose_nothing(self):
        collector = FragmentCollector()
        senders = 16
        per_sender = 50
        start = threading.Barrier(senders)

        def _send(idx: int) -> None:
            start.wait()
            for n in range(per_sender):
                collector.send(_ok(f"{idx}-{n}.yaml", f"{idx}-{n}"))

        threads = [threading.Thread(target=_send, args=(i,)) for i in range(senders)]
        for thread in threads:
            thread.start()
        collected = collector.collect(senders * per_sender)
        for thread in threads:
            thread.join()

        texts = [f.text for f in collected.fragments]
        assert len(texts) == senders * per_sender
        assert len(set(texts)) == len(texts)

    def test_collect_waits_for_late_sender(self):
        collector = FragmentCollector()
        timer = threading.Timer(0.05, collector.send, args=(_ok("late.yaml", "late"),))
        timer.start()
        collected = collector.collect(1)
        timer.join()
        assert [f.text for f in collected.fragments] == ["late"]


class TestCollectedOutput:
    def test_join_orders_by_path(self):
        output = CollectedOutput(
            fragments=[
                RenderedFragment(path=Path("b.yaml"), text="b"),
                RenderedFragment(path=Path("a.yaml"), text="a"),
            ]
        )
        assert output.join("\n---\n") == "a\n---\nb"

    def test_join_single_fragment_has_no_separator(self):
        output = CollectedOutput(
            fragments=[RenderedFragment(path=Path("a.yaml"), text="only")]
        )
        assert output.join("\n---\n") == "only"

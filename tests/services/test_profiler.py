import io
from datetime import datetime, timezone

import pytest

from fakes import FakeParser
from wordcrawl.domain.crawl_configuration import CrawlConfiguration
from wordcrawl.services.crawl_engine import CrawlEngine
from wordcrawl.services.profiler import ProfiledCrawlEngine, ProfiledPageParser, Profiler, ProfilingState


class StepClock:
    """Advances by `step` seconds on every read."""

    def __init__(self, step):
        self.step = step
        self.now = 0.0

    def __call__(self):
        value = self.now
        self.now += self.step
        return value


def test_state_accumulates_per_method():
    state = ProfilingState()
    state.record(FakeParser, "parse", 0.5)
    state.record(FakeParser, "parse", 0.25)
    assert state.totals() == {"fakes.FakeParser#parse": 0.75}


def test_state_rejects_negative_duration():
    with pytest.raises(ValueError):
        ProfilingState().record(FakeParser, "parse", -1)


def test_profiled_parser_records_and_delegates():
    profiler = Profiler(clock=StepClock(0.2))
    delegate = FakeParser({"https://a": ({"x": 1}, [])})
    parser = ProfiledPageParser(delegate, profiler)

    result = parser.parse("https://a")
    parser.parse("https://a")

    assert result.word_counts == {"x": 1}
    assert profiler.state.totals() == {"fakes.FakeParser#parse": pytest.approx(0.4)}


def test_profiled_call_recorded_even_when_it_raises():
    profiler = Profiler(clock=StepClock(1.0))
    parser = ProfiledPageParser(FakeParser(failing=["https://a"]), profiler)

    with pytest.raises(RuntimeError):
        parser.parse("https://a")

    assert profiler.state.totals() == {"fakes.FakeParser#parse": pytest.approx(1.0)}


def test_profiled_engine_records_crawl():
    profiler = Profiler(clock=StepClock(0.001))
    engine = CrawlEngine(config=CrawlConfiguration(max_depth=1, deadline_seconds=60), parser=FakeParser())
    profiled = ProfiledCrawlEngine(engine, profiler)

    result = profiled.crawl(["https://a"])

    assert result.urls_visited == 1
    assert "wordcrawl.services.crawl_engine.CrawlEngine#crawl" in profiler.state.totals()
    assert profiled.max_parallelism() == engine.max_parallelism()


def test_write_to_formats_report():
    profiler = Profiler(started_at=datetime(2026, 10, 18, 10, 0, 0, tzinfo=timezone.utc))
    profiler.state.record(FakeParser, "parse", 61.25)

    out = io.StringIO()
    profiler.write_to(out)

    assert out.getvalue() == (
        "Run at Sun, 18 Oct 2026 10:00:00 GMT\n"
        "fakes.FakeParser#parse took 1m 1s 250ms\n"
        "\n"
    )


def test_write_data_appends(tmp_path):
    path = tmp_path / "profile.txt"
    profiler = Profiler()
    profiler.state.record(FakeParser, "parse", 0.001)

    profiler.write_data(str(path))
    profiler.write_data(str(path))

    assert path.read_text().count("Run at ") == 2

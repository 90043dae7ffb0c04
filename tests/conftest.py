"""
Shared fakes for the trading surface and notification sink
"""
import pytest

from core.capabilities import (
    AvailabilityResult, DurationConfigurator, InstrumentSelector,
    NotificationSink, TradeExecutor
)
from core.deduplicator import Deduplicator, DedupState
from core.orchestrator import ExecutionOrchestrator
from core.pipeline import SignalPipeline


class RecordingSurface(InstrumentSelector, DurationConfigurator, TradeExecutor):
    """Returns a canned availability and records every call in order"""

    def __init__(self, availability=None, fail_on=None):
        self.availability = availability or AvailabilityResult.ok()
        self.fail_on = fail_on or set()
        self.calls = []

    def select(self, pair, is_otc):
        self.calls.append(('select', pair, is_otc))
        if 'select' in self.fail_on:
            raise RuntimeError("search field not found")
        return self.availability

    def set_duration(self, hours, minutes, seconds):
        self.calls.append(('set_duration', hours, minutes, seconds))
        if 'set_duration' in self.fail_on:
            raise RuntimeError("time popup did not open")

    def execute(self, action):
        self.calls.append(('execute', action))
        if 'execute' in self.fail_on:
            raise RuntimeError("buy button not clickable")

    def call_names(self):
        return [call[0] for call in self.calls]


class RecordingSink(NotificationSink):

    def __init__(self, fail=False):
        self.outcomes = []
        self.fail = fail

    async def notify(self, outcome):
        if self.fail:
            raise RuntimeError("channel gone")
        self.outcomes.append(outcome)


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def make_pipeline():
    def _make(surface):
        orchestrator = ExecutionOrchestrator(surface, surface, surface)
        return SignalPipeline(Deduplicator(DedupState()), orchestrator)
    return _make

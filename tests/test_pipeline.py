"""
End-to-end tests for the signal pipeline
"""
from core.capabilities import AvailabilityResult
from core.parser.base import Action, Duration, RawMessage
from core.reporter import ACCEPTED, CANCELLED, MALFORMED
from trading_surface.paper import PaperTradingSurface

from conftest import RecordingSurface

STRICT_TEXT = (
    "Trade Signal!\n"
    "Currency Pair: EUR/USD OTC\n"
    "Trade Signal: OPEN BUY\n"
    "Timeframe: 5 minute"
)


def test_strict_signal_is_executed(make_pipeline, surface):
    pipeline = make_pipeline(surface)
    outcome = pipeline.process(RawMessage(STRICT_TEXT, "1"))

    assert outcome.kind == ACCEPTED
    assert outcome.source_id == "1"
    assert surface.calls == [
        ('select', "EUR/USD", True),
        ('set_duration', 0, 5, 0),
        ('execute', Action.BUY),
    ]
    assert pipeline.stats['executed'] == 1


def test_duplicate_message_is_dropped(make_pipeline, surface):
    pipeline = make_pipeline(surface)
    message = RawMessage(STRICT_TEXT, "1")

    assert pipeline.process(message) is not None
    assert pipeline.process(message) is None
    assert surface.call_names().count('execute') == 1
    assert pipeline.stats['duplicates'] == 1


def test_malformed_signal_never_reaches_surface(make_pipeline, surface):
    pipeline = make_pipeline(surface)
    outcome = pipeline.process(RawMessage("buy eur/usd otc", "2"))

    assert outcome.kind == MALFORMED
    assert outcome.missing == ["duration"]
    assert surface.calls == []
    # Still counts as seen
    assert pipeline.last_seen_message_id == "2"


def test_unavailable_pair_reports_cancellation(make_pipeline):
    surface = RecordingSurface(AvailabilityResult.unavailable())
    pipeline = make_pipeline(surface)
    outcome = pipeline.process(RawMessage("sell gbp/usd otc 1m", "3"))

    assert outcome.kind == CANCELLED
    assert outcome.pair == "GBP/USD"
    assert outcome.is_otc is True
    assert surface.call_names() == ['select']


def test_missing_instrument_reports_unavailable(make_pipeline):
    surface = RecordingSurface(AvailabilityResult.not_found())
    pipeline = make_pipeline(surface)
    outcome = pipeline.process(RawMessage("buy eur/usd otc 5m", "5"))

    assert outcome.kind == CANCELLED
    assert outcome.reason == "unavailable"
    assert surface.call_names() == ['select']


def test_plain_chat_is_ignored(make_pipeline, surface):
    pipeline = make_pipeline(surface)

    assert pipeline.process(RawMessage("gm, what a day", "4")) is None
    assert pipeline.stats['ignored'] == 1
    assert pipeline.last_seen_message_id == "4"


def test_paper_surface_end_to_end(make_pipeline):
    paper = PaperTradingSurface({
        "EUR/USD OTC": "92%",
        "GBP/USD OTC": "N/A",
    })
    pipeline = make_pipeline(paper)

    assert pipeline.process(RawMessage("buy eur/usd otc 1h 5m", "10")).kind == ACCEPTED
    assert pipeline.process(RawMessage("sell gbp/usd otc 5m", "11")).kind == CANCELLED
    assert pipeline.process(RawMessage("sell usd/chf 5m", "12")).kind == CANCELLED

    assert len(paper.trades) == 1
    trade = paper.trades[0]
    assert trade.instrument == "EUR/USD OTC"
    assert trade.action == Action.BUY
    assert trade.duration == Duration(1, 5, 0)
    assert paper.overlay_open is False

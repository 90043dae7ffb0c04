"""
Test suite for the dual-dialect signal parser
"""
import pytest

from core.parser import SignalParser, parse_signal
from core.parser.base import Action, Duration

STRICT_SIGNALS = [
    # Upstream template, OTC pair
    {
        "text": (
            "Trade Signal!\n"
            "Currency Pair: EUR/USD OTC\n"
            "Trade Signal: OPEN BUY\n"
            "Timeframe: 5 minute"
        ),
        "expected": {
            "pair": "EUR/USD",
            "is_otc": True,
            "action": Action.BUY,
            "duration": Duration(0, 5, 0),
        }
    },
    # Regular pair, sell, plural minutes
    {
        "text": (
            "🚨 Trade Signal! 🚨\n"
            "Currency Pair: GBP/JPY\n"
            "Trade Signal: OPEN SELL\n"
            "Timeframe: 15 minutes"
        ),
        "expected": {
            "pair": "GBP/JPY",
            "is_otc": False,
            "action": Action.SELL,
            "duration": Duration(0, 15, 0),
        }
    },
    # Lowercase, extra whitespace
    {
        "text": (
            "trade signal!\n"
            "currency pair:   aud/cad otc\n"
            "trade signal:  open    buy\n"
            "timeframe: 1 MINUTE"
        ),
        "expected": {
            "pair": "AUD/CAD",
            "is_otc": True,
            "action": Action.BUY,
            "duration": Duration(0, 1, 0),
        }
    },
]

LOOSE_SIGNALS = [
    {
        "text": "buy eur/usd otc 1h 5m",
        "expected": {
            "pair": "EUR/USD",
            "is_otc": True,
            "action": Action.BUY,
            "duration": Duration(1, 5, 0),
        }
    },
    {
        "text": "Open SELL gbp/usd 30s",
        "expected": {
            "pair": "GBP/USD",
            "is_otc": False,
            "action": Action.SELL,
            "duration": Duration(0, 0, 30),
        }
    },
    # OTC glued to the pair
    {
        "text": "usd/jpyotc sell 2m",
        "expected": {
            "pair": "USD/JPY",
            "is_otc": True,
            "action": Action.SELL,
            "duration": Duration(0, 2, 0),
        }
    },
    # Repeated unit, last one wins
    {
        "text": "buy eur/usd 1m 3m 10s",
        "expected": {
            "pair": "EUR/USD",
            "is_otc": False,
            "action": Action.BUY,
            "duration": Duration(0, 3, 10),
        }
    },
    # Letters glued to the pair, first xxx/yyy still taken
    {
        "text": "buy eur/usdt 5m",
        "expected": {
            "pair": "EUR/USD",
            "is_otc": False,
            "action": Action.BUY,
            "duration": Duration(0, 5, 0),
        }
    },
    {
        "text": "buyeur/usd 5m",
        "expected": {
            "pair": "EUR/USD",
            "is_otc": False,
            "duration": Duration(0, 5, 0),
        }
    },
]


def assert_parsed(partial, expected):
    for key, value in expected.items():
        assert getattr(partial, key) == value, f"{key}: {getattr(partial, key)!r} != {value!r}"


@pytest.mark.parametrize("case", STRICT_SIGNALS)
def test_strict_template(case):
    partial = parse_signal(case["text"])
    assert partial.parse_method == "strict"
    assert_parsed(partial, case["expected"])


@pytest.mark.parametrize("case", LOOSE_SIGNALS)
def test_loose_chat(case):
    partial = parse_signal(case["text"])
    assert partial.parse_method == "loose"
    assert_parsed(partial, case["expected"])


def test_loose_buy_takes_precedence_over_sell():
    partial = parse_signal("sell or buy? buy eur/usd 5m, not sell")
    assert partial.action == Action.BUY


def test_loose_bare_word_only():
    # "buyer" / "seller" are not actions
    partial = parse_signal("the seller met a buyer about eur/usd 5m")
    assert partial.action is None


def test_strict_missing_field_is_incomplete_not_error():
    text = "Trade Signal!\nCurrency Pair: EUR/USD\nTimeframe: 5 minutes"
    partial = parse_signal(text)

    assert partial.parse_method == "strict"
    assert partial.pair == "EUR/USD"
    assert partial.action is None
    assert partial.duration == Duration(0, 5, 0)


def test_strict_ignores_loose_phrasing():
    # Template marker present, so "buy" and "1h" in free text must not be picked up
    text = "Trade Signal! buy eur/usd 1h"
    partial = parse_signal(text)

    assert partial.parse_method == "strict"
    assert partial.pair is None
    assert partial.action is None
    assert partial.duration is None


def test_marker_is_case_insensitive():
    parser = SignalParser()
    assert parser.select_strategy("TRADE SIGNAL! ...").name == "strict"
    assert parser.select_strategy("trade signal: open buy").name == "loose"


def test_plain_chat_extracts_nothing():
    partial = parse_signal("good morning everyone")
    assert not partial.has_any_field()
    assert partial.is_otc is False


def test_strict_otc_must_follow_pair_on_same_line():
    text = (
        "Trade Signal!\n"
        "Currency Pair: EUR/USD\n"
        "OTC session notes\n"
        "Trade Signal: OPEN BUY\n"
        "Timeframe: 5 minute"
    )
    partial = parse_signal(text)

    assert partial.pair == "EUR/USD"
    assert partial.is_otc is False

"""
validators.py
Completeness checks that turn a PartialIntent into a TradeIntent
"""
from dataclasses import dataclass, field
from typing import List, Optional, Union
from .base import Action, Duration, PartialIntent, TradeIntent
from .constants import REQUIRED_FIELDS
from utils.logger import get_logger

logger = get_logger("parser.validators")


@dataclass
class MalformedSignal:
    """A signal that was recognised but could not be completed"""
    missing: List[str]
    pair: Optional[str] = None
    is_otc: bool = False
    action: Optional[Action] = None
    duration: Optional[Duration] = None
    parse_method: str = ""
    raw_text: str = ""
    extracted: List[str] = field(default_factory=list)


def missing_fields(partial: PartialIntent) -> List[str]:
    """
    List required fields the parser failed to fill, in a fixed order

    A duration that matched but came out as 0h 0m 0s counts as missing.
    """
    present = {
        'pair': bool(partial.pair),
        'action': partial.action is not None,
        'duration': partial.duration is not None and not partial.duration.is_zero(),
    }
    return [name for name in REQUIRED_FIELDS if not present[name]]


def validate_intent(partial: PartialIntent) -> Union[TradeIntent, MalformedSignal]:
    """
    Validate a parsed partial intent

    Args:
        partial: Output of a dialect parser

    Returns:
        TradeIntent when pair, action and duration are all present,
        otherwise a MalformedSignal describing what was missing
    """
    missing = missing_fields(partial)

    if missing:
        logger.debug(f"Malformed {partial.parse_method} signal, missing: {', '.join(missing)}")
        return MalformedSignal(
            missing=missing,
            pair=partial.pair,
            is_otc=partial.is_otc,
            action=partial.action,
            duration=partial.duration,
            parse_method=partial.parse_method,
            raw_text=partial.raw_text,
            extracted=[name for name in REQUIRED_FIELDS if name not in missing]
        )

    return TradeIntent(
        pair=partial.pair,
        is_otc=partial.is_otc,
        action=partial.action,
        duration=partial.duration,
        parse_method=partial.parse_method
    )


def is_trade_like(partial: PartialIntent) -> bool:
    """
    Decide whether a message should be reported at all

    Template messages always are. Free-form chat only counts once at least
    one trade field was recognised, so ordinary conversation stays quiet.
    """
    if partial.parse_method == "strict":
        return True
    return partial.has_any_field()

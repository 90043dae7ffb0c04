"""
Formatting utilities for trade signals and outcomes
"""
from typing import Optional


def format_pair(pair: Optional[str], is_otc: bool = False) -> str:
    """Pair as listed on the surface, e.g. 'EUR/USD OTC'"""
    if not pair:
        return "N/A"
    return f"{pair} OTC" if is_otc else pair


def format_action(action) -> str:
    """BUY/SELL from an Action, a plain string or None"""
    if action is None:
        return "N/A"
    return getattr(action, "value", str(action)).upper()


def get_action_emoji(action) -> str:
    """Arrow matching the trade direction"""
    return "📈" if format_action(action) == "BUY" else "📉"


def get_outcome_emoji(kind: str) -> str:
    """Get emoji for an outcome kind"""
    kind_lower = kind.lower()
    if kind_lower == 'accepted':
        return '✅'
    elif kind_lower == 'cancelled':
        return '❌'
    elif kind_lower == 'malformed':
        return '⚠️'
    return '⚪'


def truncate(text: str, limit: int = 100) -> str:
    """Shorten message text for log lines"""
    if text is None:
        return ""
    text = text.replace("\n", " ")
    return text if len(text) <= limit else text[:limit - 3] + "..."

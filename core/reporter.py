"""
Outcome Reporter - human readable summaries of what happened to a signal
"""
from dataclasses import dataclass, field
from typing import List, Optional

from core.orchestrator import ExecutionReport
from core.parser.base import Action, Duration, TradeIntent
from core.parser.utils import format_duration
from core.parser.validators import MalformedSignal
from utils.formatting import format_action, format_pair, get_action_emoji, get_outcome_emoji

ACCEPTED = "accepted"
CANCELLED = "cancelled"
MALFORMED = "malformed"


@dataclass
class OutcomeSummary:
    """Result of processing one message, ready for a notification sink"""
    kind: str
    pair: Optional[str] = None
    is_otc: bool = False
    action: Optional[Action] = None
    duration: Optional[Duration] = None
    reason: Optional[str] = None
    missing: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    source_id: Optional[str] = None

    @classmethod
    def accepted(cls, intent: TradeIntent, errors: List[str] = None,
                 source_id: str = None) -> "OutcomeSummary":
        return cls(
            kind=ACCEPTED,
            pair=intent.pair,
            is_otc=intent.is_otc,
            action=intent.action,
            duration=intent.duration,
            errors=list(errors or []),
            source_id=source_id
        )

    @classmethod
    def cancelled(cls, intent: TradeIntent, reason: str = "unavailable",
                  errors: List[str] = None, source_id: str = None) -> "OutcomeSummary":
        return cls(
            kind=CANCELLED,
            pair=intent.pair,
            is_otc=intent.is_otc,
            reason=reason,
            errors=list(errors or []),
            source_id=source_id
        )

    @classmethod
    def malformed(cls, signal: MalformedSignal, source_id: str = None) -> "OutcomeSummary":
        return cls(
            kind=MALFORMED,
            pair=signal.pair,
            is_otc=signal.is_otc,
            action=signal.action,
            duration=signal.duration,
            missing=list(signal.missing),
            source_id=source_id
        )

    @classmethod
    def from_report(cls, report: ExecutionReport, source_id: str = None) -> "OutcomeSummary":
        """Accepted or cancelled, depending on where the orchestrator stopped"""
        if report.cancelled:
            return cls.cancelled(report.intent, report.cancel_reason or "unavailable",
                                 report.errors, source_id)
        return cls.accepted(report.intent, report.errors, source_id)

    @property
    def title(self) -> str:
        if self.kind == ACCEPTED:
            return "Trade dispatched"
        if self.kind == CANCELLED:
            return "Trade cancelled"
        return "Invalid trade format"


def format_outcome(summary: OutcomeSummary) -> str:
    """
    Render an outcome as plain text

    Accepted:
        ✅ Trade dispatched
        🪙 Pair: EUR/USD OTC
        📈 Action: BUY
        ⏱️ Time: 0h 5m 0s

    Args:
        summary: Outcome to render

    Returns:
        Multi-line text, handed to the sink unchanged
    """
    pair = format_pair(summary.pair, summary.is_otc)
    lines = [f"{get_outcome_emoji(summary.kind)} {summary.title}"]

    if summary.kind == ACCEPTED:
        lines.append(f"🪙 Pair: {pair}")
        lines.append(f"{get_action_emoji(summary.action)} Action: {format_action(summary.action)}")
        lines.append(f"⏱️ Time: {format_duration(summary.duration)}")
    elif summary.kind == CANCELLED:
        lines.append(f"🪙 Pair: {pair}")
        lines.append(f"Reason: {summary.reason or 'unavailable'}")
    else:
        time = format_duration(summary.duration) if summary.duration else "N/A"
        lines.append(f"🪙 Pair: {pair}")
        lines.append(f"📈 Action: {format_action(summary.action)}")
        lines.append(f"⏱️ Time: {time}")
        lines.append(f"Missing: {', '.join(summary.missing)}")

    for error in summary.errors:
        lines.append(f"⚠️ {error}")

    return "\n".join(lines)

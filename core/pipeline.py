"""
Signal Pipeline - the single sequential path a message takes

RawMessage -> Deduplicator -> SignalParser -> validate_intent
           -> ExecutionOrchestrator -> OutcomeSummary
"""
from typing import Dict, Optional

from core.deduplicator import Deduplicator
from core.orchestrator import ExecutionOrchestrator
from core.parser import SignalParser, TradeIntent, validate_intent, is_trade_like
from core.parser.base import RawMessage
from core.parser.utils import format_duration
from core.reporter import OutcomeSummary
from utils.formatting import truncate
from utils.logger import get_logger

logger = get_logger("pipeline")


class SignalPipeline:
    """Processes one message at a time; callers must not overlap process() calls"""

    def __init__(self, deduplicator: Deduplicator, orchestrator: ExecutionOrchestrator,
                 parser: Optional[SignalParser] = None):
        self.deduplicator = deduplicator
        self.orchestrator = orchestrator
        self.parser = parser or SignalParser()
        self.stats: Dict[str, int] = {
            'received': 0,
            'duplicates': 0,
            'ignored': 0,
            'malformed': 0,
            'cancelled': 0,
            'executed': 0,
        }

    def process(self, message: RawMessage) -> Optional[OutcomeSummary]:
        """
        Run a message through the whole pipeline

        Args:
            message: Inbound chat message

        Returns:
            OutcomeSummary to report, or None when the message was dropped
            (duplicate, empty, or plain chat with nothing trade-like in it)
        """
        self.stats['received'] += 1

        if not self.deduplicator.admit(message):
            self.stats['duplicates'] += 1
            return None

        logger.info(f"✅ New message {message.source_id}: {truncate(message.text)}")

        partial = self.parser.parse(message.text)
        if not is_trade_like(partial):
            self.stats['ignored'] += 1
            logger.debug(f"Message {message.source_id} ignored: no trade fields found")
            return None

        result = validate_intent(partial)
        if not isinstance(result, TradeIntent):
            self.stats['malformed'] += 1
            logger.warning(
                f"⚠️ Invalid trade format ({partial.parse_method}), "
                f"missing {', '.join(result.missing)}: {truncate(message.text)}"
            )
            return OutcomeSummary.malformed(result, source_id=message.source_id)

        logger.info(
            f"🪙 Pair: {result.instrument_label} ⏱️ Time: {format_duration(result.duration)} "
            f"📈 Action: {result.action.value}"
        )

        report = self.orchestrator.run(result)
        if report.cancelled:
            self.stats['cancelled'] += 1
        else:
            self.stats['executed'] += 1

        return OutcomeSummary.from_report(report, source_id=message.source_id)

    @property
    def last_seen_message_id(self) -> Optional[str]:
        return self.deduplicator.last_seen_message_id

"""
Deduplicator - Drops repeats of the message that was processed last
"""
from dataclasses import dataclass
from typing import Optional
from core.parser.base import RawMessage
from utils.logger import get_logger

logger = get_logger("deduplicator")


@dataclass
class DedupState:
    """Id of the last message let through. Lives for the whole process."""
    last_seen_message_id: Optional[str] = None


class Deduplicator:
    """Gatekeeper in front of the parser"""

    def __init__(self, state: Optional[DedupState] = None):
        self.state = state if state is not None else DedupState()

    @property
    def last_seen_message_id(self) -> Optional[str]:
        return self.state.last_seen_message_id

    def admit(self, message: RawMessage) -> bool:
        """
        Decide whether a message should be parsed

        Empty text or id are discarded without touching the state. An id equal
        to the last admitted one is a repeat. Anything else is remembered and
        let through, whatever the parser later makes of it.

        Args:
            message: Inbound message

        Returns:
            True if the message should be processed
        """
        if message is None or not message.text or not message.text.strip():
            return False
        if not message.source_id or not message.source_id.strip():
            return False

        if message.source_id == self.state.last_seen_message_id:
            logger.debug(f"⏳ Same message ID ({message.source_id}). Skipping...")
            return False

        self.state.last_seen_message_id = message.source_id
        return True

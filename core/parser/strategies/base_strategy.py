"""
Base strategy class for dialect parsing strategies
"""
from abc import abstractmethod
from typing import Optional
from ..base import Action, PartialIntent, ParsingStrategy
from utils.logger import get_logger

logger = get_logger("parser.strategies.base")


class BaseParsingStrategy(ParsingStrategy):
    """Base implementation of parsing strategy with common functionality"""

    @abstractmethod
    def can_parse(self, message: str) -> bool:
        """Check if this strategy handles the message's dialect"""
        pass

    @abstractmethod
    def parse(self, message: str) -> PartialIntent:
        """Extract what can be extracted from the message"""
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this parsing strategy"""
        pass

    def new_intent(self, message: str) -> PartialIntent:
        """Empty partial intent stamped with this strategy's name"""
        return PartialIntent(parse_method=self.name, raw_text=message)

    @staticmethod
    def to_action(word: Optional[str]) -> Optional[Action]:
        """
        Map a matched direction word to an Action

        Args:
            word: 'buy'/'sell' in any case, or None

        Returns:
            Action or None
        """
        if not word:
            return None
        try:
            return Action(word.strip().upper())
        except ValueError:
            logger.debug(f"Unrecognised action word: {word}")
            return None

    def log_result(self, intent: PartialIntent):
        """Debug trace of what was extracted"""
        logger.debug(
            f"[{self.name}] pair={intent.pair} otc={intent.is_otc} "
            f"action={intent.action.value if intent.action else None} "
            f"duration={intent.duration}"
        )

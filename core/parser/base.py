"""
Base classes and data structures for the trade signal parser
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Action(str, Enum):
    """Trade direction understood by the execution surface"""
    BUY = "BUY"
    SELL = "SELL"


@dataclass(frozen=True)
class Duration:
    """Trade expiry split the way the surface's time popup takes it"""
    hours: int = 0
    minutes: int = 0
    seconds: int = 0

    @property
    def total_seconds(self) -> int:
        return self.hours * 3600 + self.minutes * 60 + self.seconds

    def is_zero(self) -> bool:
        return self.total_seconds == 0


@dataclass(frozen=True)
class RawMessage:
    """One inbound chat message as seen by the pipeline"""
    text: str
    source_id: str


@dataclass
class PartialIntent:
    """Whatever a dialect parser managed to pull out of a message"""
    pair: Optional[str] = None
    is_otc: bool = False
    action: Optional[Action] = None
    duration: Optional[Duration] = None  # None means no duration token matched
    parse_method: str = ""  # strict/loose
    raw_text: str = ""

    def has_any_field(self) -> bool:
        return any([self.pair, self.action, self.duration is not None])


@dataclass(frozen=True)
class TradeIntent:
    """A complete, validated request to trade"""
    pair: str
    is_otc: bool
    action: Action
    duration: Duration
    parse_method: str = ""

    @property
    def instrument_label(self) -> str:
        """Label the instrument is listed under on the trading surface"""
        return f"{self.pair} OTC" if self.is_otc else self.pair


class ParsingStrategy(ABC):
    """Abstract base class for dialect parsing strategies"""

    @abstractmethod
    def can_parse(self, message: str) -> bool:
        """Check if this strategy handles the message's dialect"""
        pass

    @abstractmethod
    def parse(self, message: str) -> PartialIntent:
        """Extract what can be extracted; never raises on missing fields"""
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this parsing strategy"""
        pass

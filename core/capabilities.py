"""
Capabilities the core needs from the outside world

Concrete implementations (paper surface, Discord sink, ...) live outside core.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from core.parser.base import Action


@dataclass(frozen=True)
class AvailabilityResult:
    """Outcome of trying to pick an instrument on the trading surface"""
    available: bool
    selected: bool
    detail: str = ""  # e.g. "payout N/A", "not found"

    @classmethod
    def ok(cls) -> "AvailabilityResult":
        return cls(available=True, selected=True)

    @classmethod
    def unavailable(cls, detail: str = "payout N/A") -> "AvailabilityResult":
        return cls(available=False, selected=False, detail=detail)

    @classmethod
    def not_found(cls) -> "AvailabilityResult":
        return cls(available=False, selected=False, detail="not found")


class InstrumentSelector(ABC):

    @abstractmethod
    def select(self, pair: str, is_otc: bool) -> AvailabilityResult:
        """
        Locate and choose the instrument labelled exactly `pair` (plus ' OTC')

        Must report available=False when its payout reads "N/A" and must
        leave no search overlay open when it returns.
        """
        pass


class DurationConfigurator(ABC):

    @abstractmethod
    def set_duration(self, hours: int, minutes: int, seconds: int) -> None:
        """Best-effort; implementations log their own failures"""
        pass


class TradeExecutor(ABC):

    @abstractmethod
    def execute(self, action: Action) -> None:
        """Press buy or sell once"""
        pass


class NotificationSink(ABC):

    @abstractmethod
    async def notify(self, outcome) -> None:
        """Deliver an OutcomeSummary; the pipeline does not wait on the result"""
        pass

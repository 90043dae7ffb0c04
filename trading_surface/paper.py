"""
Paper trading surface - console stand-in for the broker's web UI

Behaves like the real screen as far as the core can tell: a searchable
instrument list with payout labels, a time popup with three fields and
buy/sell buttons. Nothing is sent anywhere; every step is logged and
recorded for inspection.
"""
import threading
from dataclasses import dataclass
from typing import Dict, List, Optional

from core.capabilities import (
    AvailabilityResult, DurationConfigurator, InstrumentSelector, TradeExecutor
)
from core.parser.base import Action, Duration
from core.parser.utils import format_duration
from utils.logger import get_logger

logger = get_logger("surface.paper")

UNAVAILABLE_PAYOUT = "N/A"


@dataclass
class PaperTrade:
    instrument: str
    action: Action
    duration: Duration


class PaperTradingSurface(InstrumentSelector, DurationConfigurator, TradeExecutor):
    """One simulated session; all three capabilities share its screen state"""

    def __init__(self, instruments: Dict[str, str]):
        """
        Args:
            instruments: displayed label -> payout text ("92%", "N/A", ...)
        """
        self.instruments: Dict[str, str] = {}
        self.load_catalog(instruments)
        self.selected_instrument: Optional[str] = None
        self.duration = Duration()
        self.overlay_open = False
        self.trades: List[PaperTrade] = []
        self._lock = threading.Lock()

    def load_catalog(self, instruments: Dict[str, str]):
        """Replace the instrument list (labels are matched upper-cased)"""
        self.instruments = {label.upper().strip(): str(payout).strip()
                            for label, payout in instruments.items()}

    @classmethod
    def from_config(cls, config_loader) -> "PaperTradingSurface":
        instruments = config_loader.get("surface.json", "instruments", {}) or {}
        logger.info(f"Paper surface loaded with {len(instruments)} instruments")
        return cls(instruments)

    # ------------------------------------------------------------------
    # InstrumentSelector
    # ------------------------------------------------------------------

    def select(self, pair: str, is_otc: bool) -> AvailabilityResult:
        with self._lock:
            self.overlay_open = True
            try:
                return self._select_from_results(pair, is_otc)
            finally:
                self._dismiss_overlay()

    def _select_from_results(self, pair: str, is_otc: bool) -> AvailabilityResult:
        expected_label = f"{pair} OTC" if is_otc else pair
        expected_label = expected_label.upper().strip()

        for label, payout in self.search(pair):
            if label != expected_label:
                continue

            if payout == UNAVAILABLE_PAYOUT:
                logger.warning(f"⚠️ Pair '{expected_label}' is N/A, trade canceled.")
                return AvailabilityResult.unavailable()

            self.selected_instrument = label
            logger.info(f"Selected {label} (payout {payout})")
            return AvailabilityResult.ok()

        logger.warning(f"❌ Could not find matching pair: {expected_label}")
        return AvailabilityResult.not_found()

    def search(self, query: str):
        """Labels containing the query, like typing into the search box"""
        query = query.upper().strip()
        return [(label, payout) for label, payout in self.instruments.items() if query in label]

    def _dismiss_overlay(self):
        self.overlay_open = False

    # ------------------------------------------------------------------
    # DurationConfigurator
    # ------------------------------------------------------------------

    def set_duration(self, hours: int, minutes: int, seconds: int) -> None:
        values = (hours, minutes, seconds)
        if any(v is None or v < 0 for v in values):
            logger.error(f"❌ Failed to set trade time: invalid values {values}")
            return
        with self._lock:
            self.duration = Duration(hours=hours, minutes=minutes, seconds=seconds)
        logger.info(f"⏱️ Trade time set to {hours:02d}:{minutes:02d}:{seconds:02d}")

    # ------------------------------------------------------------------
    # TradeExecutor
    # ------------------------------------------------------------------

    def execute(self, action: Action) -> None:
        try:
            action = Action(getattr(action, "value", str(action)).upper())
        except ValueError:
            logger.warning(f"⚠️ Invalid trade action: {action}")
            return

        with self._lock:
            if not self.selected_instrument:
                logger.warning("⚠️ No instrument selected, trade not placed")
                return
            trade = PaperTrade(self.selected_instrument, action, self.duration)
            self.trades.append(trade)

        button = "call" if action == Action.BUY else "put"
        logger.info(f"🖱️ Paper {action.value} ({button}) on {trade.instrument} for {format_duration(trade.duration)}")

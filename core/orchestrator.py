"""
Execution Orchestrator - select instrument, set duration, place the trade

States:
    IDLE -> SELECTING_INSTRUMENT -> CANCELLED
                                 -> CONFIGURING_DURATION -> EXECUTING -> DONE
"""
import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from core.capabilities import (
    AvailabilityResult, DurationConfigurator, InstrumentSelector, TradeExecutor
)
from core.parser.base import TradeIntent
from utils.logger import get_logger

logger = get_logger("orchestrator")


class ExecutionState(str, Enum):
    IDLE = "IDLE"
    SELECTING_INSTRUMENT = "SELECTING_INSTRUMENT"
    CANCELLED = "CANCELLED"
    CONFIGURING_DURATION = "CONFIGURING_DURATION"
    EXECUTING = "EXECUTING"
    DONE = "DONE"


_TRANSITIONS: Dict[ExecutionState, List[ExecutionState]] = {
    ExecutionState.IDLE: [ExecutionState.SELECTING_INSTRUMENT],
    ExecutionState.SELECTING_INSTRUMENT: [
        ExecutionState.CANCELLED,
        ExecutionState.CONFIGURING_DURATION,
    ],
    ExecutionState.CONFIGURING_DURATION: [ExecutionState.EXECUTING],
    ExecutionState.EXECUTING: [ExecutionState.DONE],
    ExecutionState.CANCELLED: [],  # terminal
    ExecutionState.DONE: [],       # terminal
}

TERMINAL_STATES = frozenset({ExecutionState.CANCELLED, ExecutionState.DONE})

# Every cancellation path reports the same reason; detail stays on the availability result
CANCEL_REASON = "unavailable"


class InvalidTransitionError(Exception):
    """Raised when the orchestrator tries to skip or reorder a step"""
    def __init__(self, current: ExecutionState, attempted: ExecutionState):
        self.current = current
        self.attempted = attempted
        super().__init__(f"Invalid transition: {current.value} -> {attempted.value}")


def can_transition(current: ExecutionState, next_state: ExecutionState) -> bool:
    return next_state in _TRANSITIONS.get(current, [])


@dataclass
class ExecutionReport:
    """What happened to one intent"""
    intent: TradeIntent
    state: ExecutionState = ExecutionState.IDLE
    transitions: List[ExecutionState] = field(default_factory=lambda: [ExecutionState.IDLE])
    availability: Optional[AvailabilityResult] = None
    cancel_reason: Optional[str] = None
    errors: List[str] = field(default_factory=list)

    @property
    def cancelled(self) -> bool:
        return self.state == ExecutionState.CANCELLED

    @property
    def done(self) -> bool:
        return self.state == ExecutionState.DONE

    def advance(self, next_state: ExecutionState):
        if not can_transition(self.state, next_state):
            raise InvalidTransitionError(self.state, next_state)
        logger.debug(f"{self.intent.instrument_label}: {self.state.value} -> {next_state.value}")
        self.state = next_state
        self.transitions.append(next_state)


class ExecutionOrchestrator:
    """
    Drives one validated intent through the trading surface

    Each capability is called at most once per intent. Failures in the
    capabilities are recorded on the report and never raised to the caller.
    """

    def __init__(self, selector: InstrumentSelector, configurator: DurationConfigurator,
                 executor: TradeExecutor):
        self.selector = selector
        self.configurator = configurator
        self.executor = executor
        # The surface is a single shared session; one intent at a time
        self._lock = threading.Lock()

    def run(self, intent: TradeIntent) -> ExecutionReport:
        """
        Execute a trade intent

        Args:
            intent: Validated intent

        Returns:
            ExecutionReport in a terminal state (CANCELLED or DONE)
        """
        with self._lock:
            report = ExecutionReport(intent=intent)
            label = intent.instrument_label

            report.advance(ExecutionState.SELECTING_INSTRUMENT)
            availability = self._select(report)
            report.availability = availability

            if availability is None or not availability.available or not availability.selected:
                report.cancel_reason = CANCEL_REASON
                report.advance(ExecutionState.CANCELLED)
                detail = availability.detail if availability is not None else "selection failed"
                logger.info(f"❌ Trade cancelled: {label} is {report.cancel_reason} ({detail or 'not selected'})")
                return report

            report.advance(ExecutionState.CONFIGURING_DURATION)
            duration = intent.duration
            try:
                self.configurator.set_duration(duration.hours, duration.minutes, duration.seconds)
            except Exception as e:
                logger.error(f"❌ Failed to set trade time for {label}: {e}", exc_info=True)
                report.errors.append(f"set duration: {e}")

            report.advance(ExecutionState.EXECUTING)
            try:
                self.executor.execute(intent.action)
            except Exception as e:
                logger.error(f"❌ Failed to execute {intent.action.value} on {label}: {e}", exc_info=True)
                report.errors.append(f"execute: {e}")

            report.advance(ExecutionState.DONE)
            logger.info(f"📈 {intent.action.value} {label} dispatched")
            return report

    def _select(self, report: ExecutionReport) -> Optional[AvailabilityResult]:
        intent = report.intent
        try:
            return self.selector.select(intent.pair, intent.is_otc)
        except Exception as e:
            logger.error(f"❌ Error selecting pair {intent.instrument_label}: {e}", exc_info=True)
            report.errors.append(f"select: {e}")
            return None

"""
Dispatcher - serializes pipeline runs and feeds outcomes to the notification sink
"""
import asyncio
from contextlib import suppress
from typing import Optional

from discord.ext import tasks

from core.capabilities import NotificationSink
from core.parser.base import RawMessage
from core.pipeline import SignalPipeline
from core.reporter import OutcomeSummary
from core.sources import MessageSource
from utils.logger import get_logger

logger = get_logger("dispatcher")


class SignalDispatcher:
    """
    Single-worker queue in front of the pipeline

    Messages may be submitted from any event handler at any time; exactly
    one worker drains the queue, so the trading surface never sees two
    intents in flight.
    """

    def __init__(self, pipeline: SignalPipeline, sink: NotificationSink):
        self.pipeline = pipeline
        self.sink = sink
        self.queue: asyncio.Queue = asyncio.Queue()
        self._worker: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._worker is not None and not self._worker.done()

    def start(self):
        """Start the worker task (must be called from a running event loop)"""
        if self.running:
            return
        self._worker = asyncio.create_task(self._run(), name="signal-dispatcher")
        logger.info("Signal dispatcher started")

    async def submit(self, message: RawMessage):
        """Queue a message for processing"""
        await self.queue.put(message)

    async def drain(self):
        """Wait until every queued message has been handled"""
        await self.queue.join()

    async def stop(self):
        """Cancel the worker; queued messages are dropped"""
        if self._worker is None:
            return
        self._worker.cancel()
        with suppress(asyncio.CancelledError):
            await self._worker
        self._worker = None
        logger.info("Signal dispatcher stopped")

    async def _run(self):
        while True:
            message = await self.queue.get()
            try:
                await self.handle(message)
            finally:
                self.queue.task_done()

    async def handle(self, message: RawMessage) -> Optional[OutcomeSummary]:
        """
        Process one message and report the outcome

        The pipeline runs in a worker thread because surface capabilities
        may block (browser automation).
        """
        try:
            outcome = await asyncio.to_thread(self.pipeline.process, message)
        except Exception as e:
            logger.error(f"Pipeline failed on message {message.source_id}: {e}", exc_info=True)
            return None

        if outcome is not None:
            await self._notify(outcome)
        return outcome

    async def _notify(self, outcome: OutcomeSummary):
        try:
            await self.sink.notify(outcome)
        except Exception as e:
            logger.error(f"Notification sink failed: {e}", exc_info=True)


class PollingDriver:
    """Reads the newest message from a source every `interval` seconds"""

    def __init__(self, source: MessageSource, dispatcher: SignalDispatcher,
                 interval: float = 3.0):
        self.source = source
        self.dispatcher = dispatcher
        self.interval = interval
        self.poll_loop.change_interval(seconds=interval)

    def start(self):
        self.poll_loop.start()
        logger.info(f"Polling for new messages every {self.interval}s")

    def stop(self):
        self.poll_loop.cancel()

    async def poll_once(self) -> Optional[RawMessage]:
        """One poll; the dispatcher's deduplicator filters repeats of the same message"""
        message = await self.source.poll()
        if message is not None:
            await self.dispatcher.submit(message)
            # Next poll only after this message has been fully handled
            await self.dispatcher.drain()
        return message

    @tasks.loop(seconds=3)
    async def poll_loop(self):
        try:
            await self.poll_once()
        except Exception as e:
            logger.error(f"Error in polling loop: {e}", exc_info=True)

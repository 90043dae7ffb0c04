"""
Tests for Discord intake and notification delivery using stand-in objects
"""
import asyncio
import logging
from types import SimpleNamespace

from core.dispatcher import PollingDriver, SignalDispatcher
from core.parser.base import Action, Duration, TradeIntent
from core.reporter import OutcomeSummary
from core.sources import DiscordChannelPoller
from discord_handlers.message_handler import MessageHandler
from discord_handlers.notification_sink import DiscordNotificationSink

INTENT = TradeIntent(pair="EUR/USD", is_otc=False, action=Action.BUY, duration=Duration(0, 5, 0))


class FakeChannel:
    def __init__(self, channel_id):
        self.id = channel_id
        self.name = f"channel-{channel_id}"
        self.sent = []

    async def send(self, **kwargs):
        self.sent.append(kwargs)


class FakeBot:
    def __init__(self, monitored=(), channels=()):
        self.logger = logging.getLogger("signal_bot.test")
        self.monitored_channels = set(monitored)
        self.settings = {"bot_prefix": "!"}
        self._channels = {c.id: c for c in channels}

    def get_channel(self, channel_id):
        return self._channels.get(channel_id)


def discord_message(content, message_id, channel_id=1, bot=False):
    return SimpleNamespace(
        content=content,
        id=message_id,
        author=SimpleNamespace(bot=bot, name="trader"),
        channel=SimpleNamespace(id=channel_id, name="signals"),
    )


def collect(handler):
    received = []

    async def on_message(raw):
        received.append(raw)

    handler.on_message(on_message)
    return received


def test_handler_forwards_monitored_messages():
    handler = MessageHandler(FakeBot(monitored={1}))
    received = collect(handler)

    async def scenario():
        await handler.handle_new_message(discord_message(" buy eur/usd 5m ", 900))
        await handler.handle_new_message(discord_message("buy eur/usd 5m", 901, channel_id=2))
        await handler.handle_new_message(discord_message("buy eur/usd 5m", 902, bot=True))
        await handler.handle_new_message(discord_message("!status", 903))
        return await handler.poll()

    latest = asyncio.run(scenario())

    assert [r.source_id for r in received] == ["900"]
    assert received[0].text == "buy eur/usd 5m"
    assert latest.source_id == "900"


def test_handler_without_monitored_channels_accepts_all():
    handler = MessageHandler(FakeBot())
    received = collect(handler)

    asyncio.run(handler.handle_new_message(discord_message("sell gbp/usd 1m", 5, channel_id=99)))

    assert len(received) == 1


def test_discord_sink_posts_embed_to_alert_channel():
    channel = FakeChannel(42)
    sink = DiscordNotificationSink(FakeBot(channels=[channel]), channel_id=42)

    asyncio.run(sink.notify(OutcomeSummary.accepted(INTENT, source_id="900")))

    assert len(channel.sent) == 1
    embed = channel.sent[0]["embed"]
    assert "Time: 0h 5m 0s" in embed.description
    assert embed.footer.text == "Message 900"


def test_discord_sink_without_channel_only_logs(caplog):
    sink = DiscordNotificationSink(FakeBot(), channel_id=None)
    with caplog.at_level(logging.INFO, logger="signal_bot"):
        asyncio.run(sink.notify(OutcomeSummary.cancelled(INTENT)))

    assert "Trade cancelled" in caplog.text


class HistoryChannel(FakeChannel):
    def __init__(self, channel_id, messages):
        super().__init__(channel_id)
        self.messages = messages  # newest first

    async def history(self, limit=100):
        for message in self.messages[:limit]:
            yield message


def test_poller_returns_newest_human_message():
    channel = HistoryChannel(7, [
        discord_message("✅ Trade dispatched", 12, channel_id=7, bot=True),
        discord_message("buy eur/usd otc 1h 5m", 11, channel_id=7),
        discord_message("sell gbp/usd 1m", 10, channel_id=7),
    ])
    poller = DiscordChannelPoller(FakeBot(channels=[channel]), 7)

    raw = asyncio.run(poller.poll())

    assert raw.source_id == "11"
    assert raw.text == "buy eur/usd otc 1h 5m"


def test_poller_empty_channel_returns_none():
    channel = HistoryChannel(7, [])
    poller = DiscordChannelPoller(FakeBot(channels=[channel]), 7)

    assert asyncio.run(poller.poll()) is None


def test_polling_driver_reads_latest_gateway_message(make_pipeline, surface, sink):
    handler = MessageHandler(FakeBot(monitored={1}))

    async def scenario():
        dispatcher = SignalDispatcher(make_pipeline(surface), sink)
        dispatcher.start()
        driver = PollingDriver(handler, dispatcher, interval=0.01)
        assert await driver.poll_once() is None

        await handler.handle_new_message(discord_message("buy eur/usd otc 5m", 950))
        await driver.poll_once()
        await driver.poll_once()
        await dispatcher.stop()

    asyncio.run(scenario())

    assert surface.call_names() == ['select', 'set_duration', 'execute']
    assert [o.source_id for o in sink.outcomes] == ["950"]

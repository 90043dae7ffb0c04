"""
Constants and patterns for the trade signal parser
"""
import re

# Presence of this marker selects the strict template dialect
STRICT_MARKER = "trade signal!"

# ============================================================================
# STRICT DIALECT ("Trade Signal!" template)
# ============================================================================

STRICT_PAIR_PATTERN = re.compile(
    r'Currency Pair:\s*([A-Z]{3}/[A-Z]{3})([ \t]+OTC\b)?', re.IGNORECASE
)

STRICT_ACTION_PATTERN = re.compile(
    r'Trade Signal:\s*OPEN\s+(BUY|SELL)\b', re.IGNORECASE
)

STRICT_TIMEFRAME_PATTERN = re.compile(
    r'Timeframe:\s*(\d+)\s*minute', re.IGNORECASE
)

# ============================================================================
# LOOSE DIALECT (free-form chat)
# ============================================================================

OTC_TOKEN = "otc"

# First xxx/yyy anywhere in the text, even inside a longer token
LOOSE_PAIR_PATTERN = re.compile(r'([a-z]{3}/[a-z]{3})')

DURATION_TOKEN_PATTERN = re.compile(r'(\d+)([hms])', re.IGNORECASE)

LOOSE_BUY_PATTERN = re.compile(r'open\s+buy|\bbuy\b')
LOOSE_SELL_PATTERN = re.compile(r'open\s+sell|\bsell\b')

DURATION_UNITS = {
    'h': 'hours',
    'm': 'minutes',
    's': 'seconds',
}

REQUIRED_FIELDS = ('pair', 'action', 'duration')

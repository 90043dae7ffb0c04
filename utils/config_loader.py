"""
Configuration loader for the Trade Signal Bot
"""
import json
import logging
from pathlib import Path
from typing import Dict, Any

logger = logging.getLogger(__name__)

INTAKE_MODES = ("push", "poll")

DEFAULT_SETTINGS = {
    "bot_prefix": "!",
    # push: react to Discord message events, poll: read the newest message on a timer
    "intake_mode": "push",
    "poll_interval_seconds": 3,
    "debug_mode": False
}

DEFAULT_CHANNELS = {
    "monitored_channels": {},
    "signal_channel": None,
    "alert_channel": None,
    "command_channel": None
}

# Paper trading surface catalog: displayed label -> payout text
DEFAULT_SURFACE = {
    "instruments": {
        "EUR/USD": "92%",
        "EUR/USD OTC": "92%",
        "GBP/USD": "88%",
        "GBP/USD OTC": "N/A",
        "USD/JPY": "85%",
        "USD/JPY OTC": "90%",
        "AUD/CAD OTC": "N/A"
    }
}


class ConfigLoader:
    """Manages loading and accessing configuration files"""

    def __init__(self, config_dir: str = "config"):
        """
        Initialize configuration loader

        Args:
            config_dir: Directory containing configuration files
        """
        self.config_dir = Path(config_dir)
        self._configs = {}
        self._ensure_config_files()

    def _ensure_config_files(self):
        """Create default configuration files if they don't exist"""
        self.config_dir.mkdir(parents=True, exist_ok=True)

        defaults = {
            "settings.json": DEFAULT_SETTINGS,
            "channels.json": DEFAULT_CHANNELS,
            "surface.json": DEFAULT_SURFACE
        }

        for filename, default_content in defaults.items():
            filepath = self.config_dir / filename
            if not filepath.exists():
                with open(filepath, 'w', encoding='utf-8') as f:
                    json.dump(default_content, f, indent=2)
                logger.info(f"Created default {filename}")

    def load(self, filename: str, reload: bool = False) -> Dict[str, Any]:
        """
        Load a configuration file

        Args:
            filename: Name of the configuration file
            reload: Force reload from disk

        Returns:
            Configuration dictionary
        """
        if not reload and filename in self._configs:
            return self._configs[filename]

        filepath = self.config_dir / filename

        if not filepath.exists():
            raise FileNotFoundError(f"Configuration file not found: {filepath}")

        try:
            with open(filepath, 'r', encoding='utf-8') as f:
                config = json.load(f)
                self._configs[filename] = config
                return config
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {filename}: {e}")

    def get(self, filename: str, key: str, default: Any = None) -> Any:
        """
        Get a specific configuration value

        Args:
            filename: Configuration file name
            key: Configuration key (supports dot notation)
            default: Default value if key not found

        Returns:
            Configuration value
        """
        value = self.load(filename)

        for k in key.split('.'):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def save(self, filename: str, config: Dict[str, Any]):
        """
        Save configuration to file

        Args:
            filename: Configuration file name
            config: Configuration dictionary to save
        """
        filepath = self.config_dir / filename

        with open(filepath, 'w', encoding='utf-8') as f:
            json.dump(config, f, indent=2)

        self._configs[filename] = config

    def reload_all(self):
        """Reload all configuration files from disk"""
        self._configs.clear()
        for filepath in self.config_dir.glob("*.json"):
            self.load(filepath.name, reload=True)

    def intake_mode(self) -> str:
        """Configured message intake mode, falling back to push on unknown values"""
        mode = str(self.get("settings.json", "intake_mode", "push")).lower()
        if mode not in INTAKE_MODES:
            logger.warning(f"Unknown intake_mode '{mode}', using push")
            return "push"
        return mode

    def poll_interval(self) -> float:
        """Seconds between reads of the signal channel in poll mode"""
        try:
            interval = float(self.get("settings.json", "poll_interval_seconds", 3))
        except (TypeError, ValueError):
            logger.warning("Invalid poll_interval_seconds, using 3")
            return 3.0
        return interval if interval > 0 else 3.0


# Global configuration instance
config = ConfigLoader()

"""Locked parameters for STARFIND LIVE. DO NOT CHANGE."""

# Time (seconds)
MINUTE: int = 60
TICK_INTERVAL: int = 30  # Promotion/expiry check period
EXPIRY_WINDOW: int = 900  # Current waves drop 15 minutes after ETA

# Wave header bounds
MIN_WAVE_SIZE: int = 1
MAX_WAVE_SIZE: int = 10
MIN_WORLD: int = 1
MAX_WORLD: int = 999

# Display
MAX_FEED_LINES: int = 8  # Per list (upcoming / current)
MAX_EVENT_BUFFER_BYTES: int = 256_000  # 256 KB
EXPIRED_DISPLAY_MINUTES: int = 15  # format_time_window shows "Expired" beyond this

# Discord polling
DISCORD_API_BASE: str = "https://discord.com/api/v10"
DISCORD_POLL_INTERVAL: float = 10.0
DISCORD_MESSAGE_LIMIT: int = 50
DISCORD_TIMEOUT: int = 30

# Session Logging
LOG_LEVEL_DEFAULT: str = "INTELLIGENCE_ONLY"
LOG_FORMAT: str = "JSONL"
LOG_DIR: str = "logs/"

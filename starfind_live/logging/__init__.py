"""Session logging for STARFIND LIVE."""
from .session_logger import SessionLogger
from .log_replay import replay_session

__all__ = ["SessionLogger", "replay_session"]

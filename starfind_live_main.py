#!/usr/bin/env python3
"""STARFIND LIVE - Real-time shooting star wave tracker.

Entry point for the live monitoring system.

Usage:
    python starfind_live_main.py --channel-ids 123,456   # Watch Discord channels
    python starfind_live_main.py                          # Channels from env
    python starfind_live_main.py --demo                   # Demo mode (no Discord)

Environment:
    DISCORD_TOKEN        Required for live mode (not needed for --demo)
    DISCORD_CHANNEL_IDS  Comma-separated channel ids (if --channel-ids not given)
"""

import argparse
import os
import sys
import time
from typing import List

from starfind_live.cli.renderer import CLIRenderer
from starfind_live.config.thresholds import LOG_DIR, LOG_LEVEL_DEFAULT, TICK_INTERVAL
from starfind_live.integrations.discord_client import (
    DiscordClient,
    flatten_message,
    parse_channel_ids,
)
from starfind_live.logging.session_logger import SessionLogger
from starfind_live.orchestration.live_processor import LiveProcessor


def build_demo_texts() -> List[str]:
    """Generate demo announcements covering current, upcoming and soon-due waves."""
    plain = "\n".join([
        "Wave update",
        "Size 10 • World 75",
        "Asgarnia • 33 minutes ago (06:51)",
        "Size 8 • World 123",
        "Wilderness • 15 minutes in",
        "Size 6 • World 456",
        "Kandarin • 2 minutes ago",
    ])

    # Same shape as a Discord message with an embed
    embed_message = {
        "id": "1",
        "content": "",
        "embeds": [{
            "title": "Upcoming stars",
            "fields": [
                {"name": "Size 9 • World 44", "value": "Desert • 1 minute in"},
                {"name": "Size 4 • World 12", "value": "Varrock • 5 minutes in"},
                {"name": "Size 7 • World 302", "value": "Lunar Isle • 12 minutes ago"},
            ],
            "footer": {"text": "Times are estimates"},
        }],
    }

    return [plain + "\n" + flatten_message(embed_message)]


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="STARFIND LIVE - Real-time shooting star wave tracker",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="Environment: Set DISCORD_TOKEN (and DISCORD_CHANNEL_IDS) for live mode.",
    )
    parser.add_argument(
        "--channel-ids",
        type=str,
        default=None,
        help="Comma-separated Discord channel ids (default: $DISCORD_CHANNEL_IDS)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=LOG_LEVEL_DEFAULT,
        choices=["FULL", "INTELLIGENCE_ONLY"],
        help=f"Log level (default: {LOG_LEVEL_DEFAULT})",
    )
    parser.add_argument(
        "--refresh-rate",
        type=float,
        default=5.0,
        help="Poll and panel refresh rate in seconds (default: 5.0)",
    )
    parser.add_argument(
        "--tick-interval",
        type=int,
        default=TICK_INTERVAL,
        help=f"Promotion/expiry check interval in seconds (default: {TICK_INTERVAL})",
    )
    parser.add_argument(
        "--demo",
        action="store_true",
        help="Run with simulated announcements (no Discord connection needed)",
    )
    return parser.parse_args()


def main() -> None:
    """Main entry point."""
    args = parse_args()

    # Auto-create logs directory
    os.makedirs(LOG_DIR, exist_ok=True)

    # Initialize Discord client (if not demo mode)
    discord_client = None
    if not args.demo:
        token = os.environ.get("DISCORD_TOKEN", "")
        if not token:
            print("Error: DISCORD_TOKEN environment variable is required for live mode.")
            print("Set it with: export DISCORD_TOKEN='your-bot-token'")
            print("Or use --demo for simulated data.")
            sys.exit(1)
        channel_ids = parse_channel_ids(args.channel_ids or os.environ.get("DISCORD_CHANNEL_IDS"))
        if not channel_ids:
            print("Error: No channel ids. Use --channel-ids or set DISCORD_CHANNEL_IDS.")
            sys.exit(1)
        discord_client = DiscordClient(token=token, channel_ids=channel_ids)
        print(f"[STARFIND] Discord client initialized for {len(channel_ids)} channel(s).", flush=True)

    # Initialize session logger
    session_logger = SessionLogger(
        label="demo" if args.demo else "live",
        log_level=args.log_level,
        output_dir=LOG_DIR,
    )
    print(f"Session log: {session_logger.filepath}")

    renderer = CLIRenderer()

    processor = LiveProcessor(
        discord_client=discord_client,
        session_logger=session_logger,
        cli_renderer=renderer,
        refresh_rate=args.refresh_rate,
        tick_interval=args.tick_interval,
    )

    print("Starting STARFIND LIVE")
    print(f"Mode: {'DEMO' if args.demo else 'LIVE'} | Log level: {args.log_level}")
    print("Press Ctrl+C to exit.\n")

    time.sleep(1)  # Brief pause before clearing screen

    if args.demo:
        processor.run_demo(build_demo_texts())
    else:
        processor.run()


if __name__ == "__main__":
    main()

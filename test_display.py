"""Display and orchestration tests for STARFIND LIVE - CLI, clock, processor."""

import tempfile
import time
from unittest.mock import patch

from starfind_live.cli.layout import calculate_layout
from starfind_live.cli.panels import EventPanel, FeedPanel, RegionPanel, format_time_window, stage_label
from starfind_live.cli.renderer import CLIRenderer
from starfind_live.config.thresholds import EXPIRY_WINDOW, TICK_INTERVAL
from starfind_live.core.region_aggregator import RegionAggregator
from starfind_live.core.wave_clock import WaveClock
from starfind_live.logging.log_replay import replay_session
from starfind_live.logging.session_logger import SessionLogger
from starfind_live.models.board_state import WaveBoard
from starfind_live.models.events import WaveRecord, WaveTransitionEvent
from starfind_live.models.regions import STATUS_ACTIVE, STATUS_IDLE, STATUS_UPCOMING, Region
from starfind_live.orchestration.live_processor import LiveProcessor

NOW = 1_700_000_000


def test_layout_calculation():
    print("=== Layout Calculation ===")
    layout = calculate_layout(120, 50)
    assert layout["header"] == 4
    assert layout["region_panel"] == 10
    assert layout["feed_panel"] == 24
    assert layout["event_stream"] >= 5
    print(f"  120x50: feed={layout['feed_panel']}, event={layout['event_stream']}: OK")

    for rows in (40, 30, 24, 12):
        layout = calculate_layout(80, rows)
        assert layout["region_panel"] == 10
        assert layout["feed_panel"] >= 10
        assert layout["event_stream"] >= 5
    print("  smaller terminals keep all regions and a minimal stream: OK")


def test_stage_label_and_time_window():
    print("=== Stage Label / Time Window ===")
    assert [stage_label(s) for s in (10, 9, 8, 7, 6, 5, 4, 3, 2, 1)] == [
        "Enormous", "Enormous", "Large", "Large", "Medium", "Medium",
        "Small", "Small", "Tiny", "Tiny",
    ]
    print("  size tiers: OK")

    assert format_time_window(None, NOW) == "Unknown"
    assert format_time_window(NOW, NOW) == "Now"
    assert format_time_window(NOW + 20, NOW) == "Now"
    assert format_time_window(NOW + 300, NOW) == "in 5m"
    assert format_time_window(NOW - 120, NOW) == "2m ago"
    assert format_time_window(NOW - 15 * 60, NOW) == "15m ago"
    assert format_time_window(NOW - 16 * 60, NOW) == "Expired"
    print("  relative windows: OK")


def _sample_view():
    board = WaveBoard(
        upcoming=[WaveRecord(123, 8, Region.WILDERNESS, NOW + 900, "upcoming")],
        current=[WaveRecord(75, 10, Region.ASGARNIA, NOW - 120, "current")],
    )
    return RegionAggregator().build_view(board)


def test_panels():
    print("=== Panels ===")
    view = _sample_view()

    lines = RegionPanel().render(view, NOW, max_lines=10)
    assert len(lines) == 10
    asg = next(l for l in lines if "Asgarnia" in l)
    wild = next(l for l in lines if "Wilderness" in l)
    mist = next(l for l in lines if "Misthalin" in l)
    assert asg.startswith(" [*]") and "Top: 10" in asg and "2m ago" in asg
    assert wild.startswith(" [~]") and "in 15m" in wild
    assert mist.startswith(" [ ]") and "Top" not in mist
    print("  region markers and meta: OK")

    lines = FeedPanel().render(view, NOW, max_lines=20)
    text = "\n".join(lines)
    assert "Upcoming: 1 | Current: 1" in lines[0]
    assert "World 123 • Size 8 (Large)" in text
    assert "World 75 • Size 10 (Enormous)" in text
    assert "Active since" in text
    print("  feed lists: OK")

    empty = RegionAggregator().build_view(WaveBoard())
    assert any("No live star data yet." in l for l in FeedPanel().render(empty, NOW))
    print("  empty feed message: OK")


def test_event_panel_caps():
    print("=== Event Panel ===")
    panel = EventPanel(buffer_size=3)
    for i in range(5):
        panel.add_info(f"msg {i}", timestamp=NOW)
    assert len(panel.events) == 3
    assert panel.events[0].endswith("msg 2")

    w = WaveRecord(44, 9, Region.KHARIDIAN_DESERT, NOW, "current")
    panel.add_transition(WaveTransitionEvent(NOW, "WAVE_PROMOTED", w))
    assert "PROMOTED: W44 S9 Kharidian Desert" in panel.events[-1]
    lines = panel.render(max_lines=4)
    assert lines[0] == " EVENT STREAM"
    assert "PROMOTED" in lines[-1]
    print("  count cap and transition lines: OK")


def test_renderer_frame():
    print("=== Renderer Frame ===")
    renderer = CLIRenderer()
    renderer.add_info("hello")
    with patch("starfind_live.cli.renderer._get_terminal_size", return_value=(100, 40)):
        frame = renderer.render_frame(_sample_view(), NOW)
    lines = frame.split("\n")
    assert "STARFIND LIVE" in lines[1]
    assert "Regions active: 1 | upcoming: 1" in lines[1]
    assert all(len(l) == 100 for l in lines if l)
    assert "hello" in frame
    print(f"  {len(lines)} lines at 100 cols: OK")


def test_wave_clock():
    print("=== Wave Clock ===")
    clock = WaveClock(manual=True, start=NOW)
    assert clock.now() == NOW
    assert clock.advance(30) == NOW + 30
    clock.set(NOW + 100)
    assert clock.now() == NOW + 100
    print("  manual clock: OK")

    with patch("starfind_live.core.wave_clock.time") as mock_time:
        mock_time.time.return_value = 1700000100.7
        live = WaveClock()
        assert live.now() == 1700000100
        try:
            live.set(0)
            assert False, "Should have raised"
        except RuntimeError:
            pass
    print("  live clock follows wallclock: OK")


def test_live_processor_flow():
    print("=== Live Processor ===")
    clock = WaveClock(manual=True, start=NOW)
    with tempfile.TemporaryDirectory() as tmpdir:
        logger = SessionLogger(label="test", output_dir=tmpdir)
        proc = LiveProcessor(
            discord_client=None,
            session_logger=logger,
            cli_renderer=CLIRenderer(),
            clock=clock,
        )

        records = proc.process_text(
            "Size 10 • World 75\nAsgarnia • 3 minutes ago (06:51)\n"
            "Size 8 • World 123\nWilderness • 1 minute in"
        )
        assert len(records) == 2
        view = proc.view()
        assert view.status[Region.ASGARNIA] == STATUS_ACTIVE
        assert view.status[Region.WILDERNESS] == STATUS_UPCOMING
        print("  parse + ingest: OK")

        # Chatter without headers leaves the board alone
        assert proc.process_text("gz on the 99") == []
        assert len(proc.view().upcoming) == 1
        print("  no-header text ignored: OK")

        assert proc.maybe_tick() == []  # first tick, nothing due
        clock.advance(TICK_INTERVAL - 1)
        assert proc.maybe_tick() == []  # interval not reached
        clock.advance(1)
        events = proc.maybe_tick()
        assert events == []  # wilderness wave not due until +60
        clock.advance(TICK_INTERVAL)
        events = proc.maybe_tick()
        assert [e.event_type for e in events] == ["WAVE_PROMOTED"]
        assert proc.view().status[Region.WILDERNESS] == STATUS_ACTIVE
        print("  interval ticks promote on time: OK")

        clock.set(NOW + 60 + EXPIRY_WINDOW)
        events = proc.tick()
        assert sorted(e.wave.world for e in events) == [75, 123]
        view = proc.view()
        assert all(s == STATUS_IDLE for s in view.status.values())
        print("  all waves expired, regions idle: OK")

        proc.ingest_wave_set([
            {"world": 12, "size": 4, "region": "Misthalin", "eta": clock.now() + 300, "status": "upcoming"},
            {"world": 0, "size": 4, "region": "Misthalin", "eta": clock.now(), "status": "upcoming"},
        ])
        assert [w.world for w in proc.view().upcoming] == [12]
        stamp = time.strftime("%H:%M:%S", time.localtime(clock.now()))
        skipped = [e for e in proc.renderer.event_panel.events if "Skipped invalid wave" in e]
        assert skipped and skipped[0].startswith(f"[{stamp}]")
        print("  relay wave_set ingested, invalid item skipped at clock time: OK")

        # An empty relay payload still replaces the board
        assert proc.ingest_wave_set([]) == []
        assert proc.view().upcoming == [] and proc.view().current == []
        assert all(s == STATUS_IDLE for s in proc.view().status.values())
        print("  empty relay wave_set clears the board: OK")

        proc.shutdown()
        types = [e["event_type"] for e in replay_session(str(logger.filepath))]
        assert types.count("WAVE_SET") == 3
        assert types.count("WAVE_PROMOTED") == 1
        assert types.count("WAVE_EXPIRED") == 2
        assert types[-1] == "SESSION_END"
        print("  session log records the lifecycle: OK")


if __name__ == "__main__":
    test_layout_calculation()
    test_stage_label_and_time_window()
    test_panels()
    test_event_panel_caps()
    test_renderer_frame()
    test_wave_clock()
    test_live_processor_flow()
    print("\n*** ALL DISPLAY TESTS PASSED ***")

"""Announcement parsing tests for STARFIND LIVE - time resolver, regions, parser."""

from starfind_live.core.announcement_parser import (
    parse_announcement_text,
    parse_header,
    split_detail,
    split_lines,
)
from starfind_live.core.region_classifier import classify_region
from starfind_live.core.time_resolver import resolve_relative_minutes
from starfind_live.models.regions import Region

NOW = 1_700_000_000


def test_time_resolver():
    print("=== Relative Time Resolver ===")
    assert resolve_relative_minutes("33 minutes ago (06:51)") == -33
    assert resolve_relative_minutes("15 minutes in") == 15
    assert resolve_relative_minutes("1 minute ago") == -1
    assert resolve_relative_minutes("1 MINUTE IN") == 1
    print("  ago/in qualifiers: OK")

    # Qualifier before the count falls back to the whole fragment
    assert resolve_relative_minutes("in 12 minutes") == 12
    print("  leading 'in' resolved from fragment: OK")

    assert resolve_relative_minutes("") is None
    assert resolve_relative_minutes(None) is None
    assert resolve_relative_minutes("soon") is None
    assert resolve_relative_minutes("about 5 minutes") is None
    print("  missing count / ambiguous qualifier -> None: OK")

    # Words that merely start with a qualifier do not count
    assert resolve_relative_minutes("10 minutes inaccurate") is None
    assert resolve_relative_minutes("5 minutes into") is None
    assert resolve_relative_minutes("3 minutes agony") is None
    print("  qualifier prefixes ignored: OK")

    assert resolve_relative_minutes("0 minutes ago") == 0
    print("  zero offset: OK")


def test_region_classifier():
    print("=== Region Classifier ===")
    cases = {
        "Asgarnia": Region.ASGARNIA,
        "ASGARNIA (Falador)": Region.ASGARNIA,
        "Kandarin": Region.KANDARIN,
        "Wilderness": Region.WILDERNESS,
        "Kharidian Desert": Region.KHARIDIAN_DESERT,
        "Al Kharid": Region.KHARIDIAN_DESERT,
        "Menaphos": Region.KHARIDIAN_DESERT,
        "Misthalin": Region.MISTHALIN,
        "Varrock": Region.MISTHALIN,
        "Lumbridge Swamp": Region.MISTHALIN,
        "Piscatoris": Region.PISC_GNOME_TIRANNWN,
        "Gnome Stronghold": Region.PISC_GNOME_TIRANNWN,
        "Tirannwn": Region.PISC_GNOME_TIRANNWN,
        "Fremennik": Region.FREM_LUNAR,
        "Lunar Isle": Region.FREM_LUNAR,
        "Feldip Hills": Region.KANDARIN,
    }
    for label, expected in cases.items():
        got = classify_region(label)
        assert got == expected, f"{label!r}: expected {expected}, got {got}"
    print(f"  {len(cases)} labels classified: OK")

    # Priority: first rule wins
    assert classify_region("Asgarnia / Kandarin border") == Region.ASGARNIA
    print("  first matching rule wins: OK")

    for label in ("", None, "???", "Morytania"):
        assert classify_region(label) == Region.MISTHALIN
    print("  unmatched -> Misthalin fallback: OK")


def test_line_helpers():
    print("=== Line Helpers ===")
    assert split_lines("  a \n\n b\n   \n") == ["a", "b"]
    assert parse_header("Size 10 • World 75") == (10, 75)
    assert parse_header("size 3 - world 5") == (3, 5)
    assert parse_header("  Size 7   •   World 302  ") == (7, 302)
    assert parse_header("Asgarnia • 33 minutes ago") is None
    print("  header matching (bullet/hyphen, case, spacing): OK")

    assert parse_header("Size 0 • World 75") is None
    assert parse_header("Size 11 • World 75") is None
    assert parse_header("Size 5 • World 0") is None
    assert parse_header("Size 5 • World 1234") is None
    assert parse_announcement_text("Size 5 • World 1234\nAsgarnia • 2 minutes in", now=NOW) == []
    print("  out-of-range size/world rejected, not truncated: OK")

    assert split_detail("Asgarnia • 33 minutes ago") == ("Asgarnia", "33 minutes ago")
    assert split_detail("Asgarnia") == ("Asgarnia", "")
    assert split_detail("") == ("", "")
    print("  detail split with defaults: OK")


def test_parse_current_scenario():
    print("=== Parse: current wave ===")
    items = parse_announcement_text("Size 10 • World 75\nAsgarnia • 33 minutes ago (06:51)", now=NOW)
    assert len(items) == 1
    w = items[0]
    assert (w.world, w.size, w.region, w.status) == (75, 10, Region.ASGARNIA, "current")
    assert w.eta == NOW - 33 * 60
    print(f"  {w}: OK")


def test_parse_upcoming_scenario():
    print("=== Parse: upcoming wave ===")
    items = parse_announcement_text("Size 8 • World 123\nWilderness • 15 minutes in", now=NOW)
    assert len(items) == 1
    w = items[0]
    assert (w.world, w.size, w.region, w.status) == (123, 8, Region.WILDERNESS, "upcoming")
    assert w.eta == NOW + 15 * 60
    print(f"  {w}: OK")


def test_parse_no_headers():
    print("=== Parse: no headers ===")
    assert parse_announcement_text("hello\nno stars today", now=NOW) == []
    assert parse_announcement_text("", now=NOW) == []
    print("  empty result: OK")


def test_parse_multiple_and_interleaved():
    print("=== Parse: multiple + interleaved ===")
    text = "\n".join([
        "Star wave incoming!",
        "Size 10 • World 75",
        "Asgarnia • 33 minutes ago (06:51)",
        "unrelated chatter",
        "Size 6 • World 456",
        "Kandarin • 2 minutes ago",
        "Size 9 • World 44",
        "Desert • 4 minutes in",
        "footer text",
    ])
    items = parse_announcement_text(text, now=NOW)
    assert [w.world for w in items] == [75, 456, 44]
    assert [w.status for w in items] == ["current", "current", "upcoming"]
    assert items[2].region == Region.KHARIDIAN_DESERT
    print("  3 waves in header order: OK")


def test_parse_fallbacks():
    print("=== Parse: fallbacks ===")
    # Header on the last line: empty detail
    items = parse_announcement_text("Size 5 • World 10", now=NOW)
    assert len(items) == 1
    assert items[0].region == Region.MISTHALIN
    assert items[0].eta == NOW
    assert items[0].status == "upcoming"
    print("  trailing header -> Misthalin, now, upcoming: OK")

    # Count without qualifier is treated as no offset
    items = parse_announcement_text("Size 5 • World 10\nKandarin • 7 minutes", now=NOW)
    assert items[0].eta == NOW
    assert items[0].status == "upcoming"
    print("  ambiguous time -> zero offset, upcoming: OK")


def test_parse_consecutive_headers():
    print("=== Parse: consecutive headers ===")
    text = "Size 5 • World 10\nSize 7 • World 20\nWilderness • 3 minutes ago"
    items = parse_announcement_text(text, now=NOW)
    assert len(items) == 2
    first, second = items
    assert first.world == 10
    assert first.region == Region.MISTHALIN
    assert first.status == "upcoming"
    assert second.world == 20
    assert second.region == Region.WILDERNESS
    assert second.status == "current"
    print("  header not paired with following header: OK")


if __name__ == "__main__":
    test_time_resolver()
    test_region_classifier()
    test_line_helpers()
    test_parse_current_scenario()
    test_parse_upcoming_scenario()
    test_parse_no_headers()
    test_parse_multiple_and_interleaved()
    test_parse_fallbacks()
    test_parse_consecutive_headers()
    print("\n*** ALL PARSING TESTS PASSED ***")

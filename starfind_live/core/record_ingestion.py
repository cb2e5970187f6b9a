"""Wave record normalization and validation for STARFIND LIVE.

Rebuilds WaveRecords from the transport-neutral dict form produced by
WaveRecord.to_dict(), e.g. a wave_set payload received from a relay.
"""

from datetime import datetime
from typing import Any, Dict

from ..config.thresholds import MAX_WAVE_SIZE, MAX_WORLD, MIN_WAVE_SIZE, MIN_WORLD
from ..models.events import WaveRecord
from ..models.regions import Region


class RecordValidationError(ValueError):
    """Raised when a raw wave record fails validation."""


def _parse_iso(value: str) -> int:
    text = str(value).strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return int(datetime.fromisoformat(text).timestamp())
    except ValueError:
        raise RecordValidationError(f"Invalid etaISO: {value!r}")


def normalize_record(raw_data: Dict[str, Any]) -> WaveRecord:
    """Validate and normalize a raw record dict into a WaveRecord.

    Args:
        raw_data: Dict with keys: world, size, region, status and either
                  eta (epoch seconds) or etaISO.

    Returns:
        Validated WaveRecord.

    Raises:
        RecordValidationError: If any field is missing or invalid.
    """
    required_keys = {"world", "size", "region", "status"}
    missing = required_keys - set(raw_data.keys())
    if missing:
        raise RecordValidationError(f"Missing required fields: {missing}")

    try:
        world = int(raw_data["world"])
        size = int(raw_data["size"])
    except (TypeError, ValueError):
        raise RecordValidationError(
            f"Non-integer world/size: {raw_data['world']!r}/{raw_data['size']!r}"
        )
    if not (MIN_WORLD <= world <= MAX_WORLD):
        raise RecordValidationError(f"World out of range: {world}")
    if not (MIN_WAVE_SIZE <= size <= MAX_WAVE_SIZE):
        raise RecordValidationError(f"Size out of range: {size}")

    try:
        region = Region(str(raw_data["region"]))
    except ValueError:
        raise RecordValidationError(f"Unknown region: {raw_data['region']!r}")

    status = str(raw_data["status"]).lower()
    if status not in ("upcoming", "current"):
        raise RecordValidationError(
            f"Invalid status: {status!r} (expected 'upcoming' or 'current')"
        )

    if raw_data.get("eta") is not None:
        try:
            eta = int(raw_data["eta"])
        except (TypeError, ValueError):
            raise RecordValidationError(f"Invalid eta: {raw_data['eta']!r}")
    elif raw_data.get("etaISO"):
        eta = _parse_iso(raw_data["etaISO"])
    else:
        raise RecordValidationError("Missing eta or etaISO")

    return WaveRecord(
        world=world,
        size=size,
        region=region,
        eta=eta,
        status=status,
    )

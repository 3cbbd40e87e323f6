"""Criteria Codec — Criteria ⇄ transportable string for share links and storage.

Invariants:
    - encode_criteria is deterministic: sorted keys, sorted set members, compact separators
    - Integral numbers encode as integers (100 and 100.0 produce the same string)
    - Output is strict JSON: non-finite ceiling bounds encode as absent
    - decode_criteria never raises: structural garbage -> DecodeFailure, partial garbage -> normalized Criteria
    - Round-trip: decode_criteria(encode_criteria(c)) == c for every normally constructed c
    - A date range with both bounds absent survives decode as DateRangePeriod(None, None)

Design Decisions:
    - JSON payload (the share-link format the web client already emits)
    - Legacy keys (naics, setAsides, agencies, ceiling) accepted on decode so old
      share links keep working; canonical keys win when both are present
    - DecodeFailure is a value, not an exception: callers fall back to defaults
      with a plain isinstance check
"""

import json
import math
from dataclasses import dataclass
from datetime import date
from urllib.parse import parse_qs, urlencode

from pursuit.core.criteria import (
    CeilingRange, Criteria, DateRangePeriod, PeriodFilter, PresetPeriod,
    default_criteria, normalize_keywords,
)
from pursuit.core.domain_types import PeriodPreset
from pursuit.core.merge_criteria import clone_criteria

FILTER_QUERY_KEY = "filters"

# wire key -> legacy alias
_FIELD_ALIASES: dict[str, str] = {
    "category": "naics",
    "tags": "setAsides",
    "organizations": "agencies",
    "ceilingRange": "ceiling",
}
_WIRE_KEYS: tuple[str, ...] = (
    "category", "tags", "vehicle", "organizations",
    "period", "ceilingRange", "keywords",
)
_KNOWN_KEYS = frozenset(_WIRE_KEYS) | frozenset(_FIELD_ALIASES.values())


@dataclass(frozen=True)
class DecodeFailure:
    """Input had no usable criteria. Callers fall back to default criteria."""
    reason: str


# ─── Encode ──────────────────────────────────────────────────────

def _encode_number(value: float | None) -> int | float | None:
    if value is None or not math.isfinite(value):
        return None
    return int(value) if float(value).is_integer() else float(value)


def _encode_date(value: date | None) -> str | None:
    return value.isoformat() if value is not None else None


def _encode_period(period: PeriodFilter) -> dict | None:
    if isinstance(period, PresetPeriod):
        return {"preset": int(period.days)}
    if isinstance(period, DateRangePeriod):
        return {
            "range": {
                "start": _encode_date(period.start),
                "end": _encode_date(period.end),
            },
        }
    return None


def _encode_ceiling(ceiling: CeilingRange) -> dict:
    bounds = {"min": _encode_number(ceiling.min), "max": _encode_number(ceiling.max)}
    return {k: v for k, v in bounds.items() if v is not None}


def criteria_to_payload(criteria: Criteria) -> dict:
    """JSON-safe dict form of criteria. Sets become sorted lists."""
    return {
        "category": criteria.category,
        "tags": sorted(criteria.tags),
        "vehicle": criteria.vehicle,
        "organizations": sorted(criteria.organizations),
        "period": _encode_period(criteria.period),
        "ceilingRange": _encode_ceiling(criteria.ceiling_range),
        "keywords": sorted(criteria.keywords),
    }


def encode_criteria(criteria: Criteria) -> str:
    """Deterministic string form of criteria."""
    return json.dumps(
        criteria_to_payload(criteria),
        sort_keys=True, separators=(",", ":"), ensure_ascii=False, allow_nan=False,
    )


# ─── Decode ──────────────────────────────────────────────────────

def _pick(data: dict, key: str) -> object:
    if key in data:
        return data[key]
    alias = _FIELD_ALIASES.get(key)
    return data.get(alias) if alias else None


def _decode_code(value: object) -> str | None:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def _decode_strings(value: object) -> set[str]:
    if not isinstance(value, list):
        return set()
    return {item.strip() for item in value if isinstance(item, str) and item.strip()}


def _decode_number(value: object) -> float | None:
    """Finite numbers and numeric strings survive; everything else is absent."""
    if isinstance(value, bool) or value is None:
        return None
    if not isinstance(value, (int, float, str)) or value == "":
        return None
    try:
        number = float(value)
    except (ValueError, OverflowError):
        return None
    return number if math.isfinite(number) else None


def _decode_date(value: object) -> date | None:
    if not isinstance(value, str) or not value:
        return None
    try:
        return date.fromisoformat(value[:10])
    except ValueError:
        return None


def _decode_period(value: object) -> PeriodFilter:
    if not isinstance(value, dict):
        return None
    if "preset" in value:
        preset = value["preset"]
        if isinstance(preset, bool) or not isinstance(preset, (int, float)):
            return None
        if preset not in {p.value for p in PeriodPreset}:
            return None
        return PresetPeriod(days=PeriodPreset(int(preset)))
    if "range" in value:
        bounds = value["range"] if isinstance(value["range"], dict) else {}
        return DateRangePeriod(
            start=_decode_date(bounds.get("start")),
            end=_decode_date(bounds.get("end")),
        )
    return None


def _decode_ceiling(value: object) -> CeilingRange:
    if not isinstance(value, dict):
        return CeilingRange()
    return CeilingRange(
        min=_decode_number(value.get("min")),
        max=_decode_number(value.get("max")),
    )


def _decode_keywords(value: object) -> set[str]:
    if not isinstance(value, list):
        return set()
    return normalize_keywords([item for item in value if isinstance(item, str)])


def payload_to_criteria(data: dict) -> Criteria:
    """Best-effort criteria from an already-parsed payload dict."""
    return Criteria(
        category=_decode_code(_pick(data, "category")),
        tags=_decode_strings(_pick(data, "tags")),
        vehicle=_decode_code(_pick(data, "vehicle")),
        organizations=_decode_strings(_pick(data, "organizations")),
        period=_decode_period(_pick(data, "period")),
        ceiling_range=_decode_ceiling(_pick(data, "ceilingRange")),
        keywords=_decode_keywords(_pick(data, "keywords")),
    )


def decode_criteria(value: str | None) -> Criteria | DecodeFailure:
    """Parse a stored/query string. Never raises."""
    if not value:
        return DecodeFailure("empty input")
    try:
        data = json.loads(value)
    except (ValueError, TypeError, RecursionError):
        return DecodeFailure("not valid JSON")
    if not isinstance(data, dict):
        return DecodeFailure("not a JSON object")
    if not _KNOWN_KEYS.intersection(data):
        return DecodeFailure("no recognizable criteria fields")
    return payload_to_criteria(data)


# ─── Query string / comparisons ──────────────────────────────────

def build_filter_query(criteria: Criteria) -> str:
    """`filters=<urlencoded criteria>` for a share link."""
    return urlencode({FILTER_QUERY_KEY: encode_criteria(criteria)})


def share_query(criteria: Criteria) -> str:
    """Share-link query, or "" when the criteria are the defaults."""
    if encode_criteria(criteria) == encode_criteria(default_criteria()):
        return ""
    return build_filter_query(criteria)


def parse_filter_query(search: str | None) -> Criteria | DecodeFailure | None:
    """None when the `filters` parameter is absent, otherwise the decode result."""
    if not search:
        return None
    params = parse_qs(search.lstrip("?"), keep_blank_values=True)
    values = params.get(FILTER_QUERY_KEY)
    if not values:
        return None
    return decode_criteria(values[0])


def resolve_initial_criteria(search: str | None, stored: str | None) -> Criteria:
    """URL criteria first, then stored criteria, then defaults. Always a fresh value."""
    from_search = parse_filter_query(search)
    if isinstance(from_search, Criteria):
        return clone_criteria(from_search)
    from_storage = decode_criteria(stored)
    if isinstance(from_storage, Criteria):
        return clone_criteria(from_storage)
    return default_criteria()


def criteria_changed(draft: Criteria, applied: Criteria) -> bool:
    """True when the draft would filter differently from the applied criteria."""
    return encode_criteria(draft) != encode_criteria(applied)

"""Standards catalog: percentile ladders, DOTS coefficients and anchor DOTS.

The catalog is static configuration read from ``standards.yaml``. This module
loads it, validates it (every ladder has 11 monotonic points, age brackets of a
metric are contiguous per sex, DOTS coefficients are complete) and converts it
into frozen dataclasses that the scorers read without further checks.

Lookups never raise: asking for an age outside every bracket returns None so
callers can report "cannot score" instead of failing.
"""

from __future__ import annotations

import math
import threading
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Iterable, Mapping

import yaml

from powerscore.config.settings import get_settings
from powerscore.core.logging import get_logger

from .base import Orientation, Sex, is_positive_number, normalize_sex
from .constants import PERCENTILES
from .exceptions import (
    StandardsError,
    StandardsLoadError,
    StandardsNotFoundError,
    StandardsValidationError,
)

logger = get_logger(__name__)


class Metric(str, Enum):
    """Metrics backed by a percentile ladder."""

    COOPER = "cooper"
    SMM = "smm"
    SMM_PERCENT = "smm_percent"
    VERTICAL_JUMP = "vertical_jump"
    STANDING_LONG_JUMP = "standing_long_jump"
    SPRINT = "sprint"


@dataclass(frozen=True)
class StandardsRow:
    """Measured value at each percentile 0, 10, ..., 100.

    Index with the percentile itself: ``row[50]`` is the median value.
    """

    values: tuple[float, ...]

    def __post_init__(self) -> None:
        if len(self.values) != len(PERCENTILES):
            raise StandardsValidationError(
                f"Standards row needs {len(PERCENTILES)} values, got {len(self.values)}"
            )
        for value in self.values:
            if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
                raise StandardsValidationError(f"Standards row value {value!r} is not a finite number")

    @classmethod
    def from_values(cls, values: Iterable[float]) -> StandardsRow:
        try:
            return cls(tuple(float(v) for v in values))
        except (TypeError, ValueError) as e:
            raise StandardsValidationError(f"Standards row has a non-numeric value ({e})") from e

    @classmethod
    def from_mapping(cls, mapping: Mapping[int, float]) -> StandardsRow:
        """Build a row from a ``{percentile: value}`` mapping."""
        missing = [p for p in PERCENTILES if p not in mapping]
        if missing:
            raise StandardsValidationError(f"Standards row missing percentiles {missing}")
        return cls(tuple(float(mapping[p]) for p in PERCENTILES))

    def __getitem__(self, percentile: int) -> float:
        if percentile not in PERCENTILES:
            raise KeyError(percentile)
        return self.values[percentile // 10]

    def is_monotonic(self, orientation: Orientation) -> bool:
        pairs = zip(self.values, self.values[1:])
        if orientation is Orientation.INCREASING:
            return all(a <= b for a, b in pairs)
        return all(a >= b for a, b in pairs)

    def to_dict(self) -> dict[int, float]:
        return {p: self[p] for p in PERCENTILES}


@dataclass(frozen=True)
class AgeBracket:
    """Inclusive age range; ``max_age`` None means no upper bound."""

    min_age: int
    max_age: int | None

    @property
    def label(self) -> str:
        if self.max_age is None:
            return f"{self.min_age}+"
        return f"{self.min_age}-{self.max_age}"

    def contains(self, age: int) -> bool:
        return age >= self.min_age and (self.max_age is None or age <= self.max_age)


@dataclass(frozen=True)
class BracketRow:
    bracket: AgeBracket
    row: StandardsRow


@dataclass(frozen=True)
class StandardsTable:
    """Ladders of one metric for every (sex, age bracket) pair."""

    metric: str
    orientation: Orientation
    unit: str
    description: str
    rows: dict[Sex, tuple[BracketRow, ...]]

    def entry_for(self, sex: Sex | str | None, age: Any) -> BracketRow | None:
        """Find the bracket entry for a sex and age, None when not covered."""
        normalized = normalize_sex(sex)
        if normalized is None or not is_positive_number(age):
            return None
        whole_age = int(age)
        for entry in self.rows.get(normalized, ()):
            if entry.bracket.contains(whole_age):
                return entry
        return None

    def row_for(self, sex: Sex | str | None, age: Any) -> StandardsRow | None:
        entry = self.entry_for(sex, age)
        return entry.row if entry is not None else None


@dataclass(frozen=True)
class DotsCoefficients:
    """Quartic DOTS polynomial ``a*bw^4 + b*bw^3 + c*bw^2 + d*bw + e``.

    Bodyweight is clamped to ``[min_bodyweight, max_bodyweight]`` before the
    polynomial is evaluated.
    """

    a: float
    b: float
    c: float
    d: float
    e: float
    min_bodyweight: float
    max_bodyweight: float

    def denominator(self, bodyweight: float) -> float:
        bw = min(self.max_bodyweight, max(self.min_bodyweight, bodyweight))
        return (
            self.a * bw ** 4
            + self.b * bw ** 3
            + self.c * bw ** 2
            + self.d * bw
            + self.e
        )


@dataclass(frozen=True)
class StandardsCatalog:
    """Everything the scorers read from configuration."""

    tables: dict[str, StandardsTable]
    dots: dict[Sex, DotsCoefficients]
    anchor_dots: dict[str, float]
    version: str = "unversioned"
    description: str = ""

    def table(self, metric: Metric | str) -> StandardsTable | None:
        key = metric.value if isinstance(metric, Metric) else metric
        return self.tables.get(key)

    def row_for(self, metric: Metric | str, sex: Sex | str | None, age: Any) -> StandardsRow | None:
        """Row for a metric, sex and age; None when any part is unknown."""
        table = self.table(metric)
        if table is None:
            return None
        row = table.row_for(sex, age)
        if row is None:
            logger.debug("standards_row_missing", metric=table.metric, sex=str(sex), age=age)
        return row

    def dots_coefficients(self, sex: Sex | str | None) -> DotsCoefficients | None:
        normalized = normalize_sex(sex)
        if normalized is None:
            return None
        return self.dots.get(normalized)


# =============================================================================
# Loading
# =============================================================================

def _require(condition: bool, message: str, **details: Any) -> None:
    if not condition:
        raise StandardsValidationError(message, details=details)


def _parse_bracket(raw: Any, where: str) -> AgeBracket:
    _require(
        isinstance(raw, (list, tuple)) and len(raw) == 2,
        f"{where}: 'ages' must be a [min, max] pair",
    )
    low, high = raw
    _require(isinstance(low, int) and low >= 0, f"{where}: minimum age must be a non-negative integer")
    _require(
        high is None or (isinstance(high, int) and high >= low),
        f"{where}: maximum age must be null or an integer >= {low}",
    )
    return AgeBracket(min_age=low, max_age=high)


def _parse_table(metric: str, raw: Any) -> StandardsTable:
    _require(isinstance(raw, Mapping), f"{metric}: metric definition must be a mapping")
    try:
        orientation = Orientation(raw.get("orientation", Orientation.INCREASING.value))
    except ValueError as e:
        raise StandardsValidationError(f"{metric}: unknown orientation {raw.get('orientation')!r}") from e

    rows: dict[Sex, tuple[BracketRow, ...]] = {}
    for sex in Sex:
        entries = raw.get(sex.value)
        _require(isinstance(entries, list) and entries, f"{metric}: no rows for {sex.value}")
        parsed: list[BracketRow] = []
        for index, entry in enumerate(entries):
            where = f"{metric}.{sex.value}[{index}]"
            _require(isinstance(entry, Mapping), f"{where}: row must be a mapping")
            bracket = _parse_bracket(entry.get("ages"), where)
            values = entry.get("values")
            _require(isinstance(values, list), f"{where}: 'values' must be a list")
            row = StandardsRow.from_values(values)
            _require(
                row.is_monotonic(orientation),
                f"{where}: values are not {orientation.value}",
                metric=metric,
                sex=sex.value,
                bracket=bracket.label,
            )
            parsed.append(BracketRow(bracket=bracket, row=row))

        parsed.sort(key=lambda item: item.bracket.min_age)
        for previous, current in zip(parsed, parsed[1:]):
            _require(
                previous.bracket.max_age is not None
                and current.bracket.min_age == previous.bracket.max_age + 1,
                f"{metric}.{sex.value}: age brackets {previous.bracket.label} and "
                f"{current.bracket.label} are not contiguous",
                metric=metric,
                sex=sex.value,
            )
        rows[sex] = tuple(parsed)

    return StandardsTable(
        metric=metric,
        orientation=orientation,
        unit=str(raw.get("unit", "")),
        description=str(raw.get("description", "")),
        rows=rows,
    )


def _parse_dots(raw: Any) -> dict[Sex, DotsCoefficients]:
    _require(isinstance(raw, Mapping), "'dots' section must be a mapping")
    out: dict[Sex, DotsCoefficients] = {}
    for sex in Sex:
        coeffs = raw.get(sex.value)
        _require(isinstance(coeffs, Mapping), f"dots: missing coefficients for {sex.value}")
        try:
            out[sex] = DotsCoefficients(
                **{name: float(coeffs[name]) for name in ("a", "b", "c", "d", "e")},
                min_bodyweight=float(coeffs.get("min_bodyweight", 40.0)),
                max_bodyweight=float(coeffs.get("max_bodyweight", 200.0)),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise StandardsValidationError(f"dots.{sex.value}: invalid coefficients ({e})") from e
        _require(
            out[sex].min_bodyweight < out[sex].max_bodyweight,
            f"dots.{sex.value}: min_bodyweight must be below max_bodyweight",
        )
    return out


def _parse_anchor_dots(raw: Any) -> dict[str, float]:
    _require(isinstance(raw, Mapping) and raw, "'anchor_dots' section must be a non-empty mapping")
    anchors: dict[str, float] = {}
    for exercise, value in raw.items():
        _require(
            is_positive_number(value),
            f"anchor_dots.{exercise}: must be a positive number",
        )
        anchors[str(exercise)] = float(value)
    return anchors


def parse_standards(raw: Any) -> StandardsCatalog:
    """Validate a decoded standards document and build the catalog.

    Raises:
        StandardsValidationError: If the document violates the schema.
    """
    _require(isinstance(raw, Mapping), "Standards document must be a mapping")
    metrics = raw.get("metrics")
    _require(isinstance(metrics, Mapping) and metrics, "'metrics' section must be a non-empty mapping")

    tables = {str(name): _parse_table(str(name), body) for name, body in metrics.items()}
    metadata = raw.get("metadata") or {}
    return StandardsCatalog(
        tables=tables,
        dots=_parse_dots(raw.get("dots")),
        anchor_dots=_parse_anchor_dots(raw.get("anchor_dots")),
        version=str(metadata.get("version", "unversioned")),
        description=str(metadata.get("description", "")),
    )


class StandardsLoader:
    """Loads the standards catalog from YAML and reloads it on change.

    Example:
        >>> loader = StandardsLoader()
        >>> catalog = loader.get_catalog()
        >>> catalog.row_for("vertical_jump", "male", 25)[100]
        72.0
    """

    def __init__(self, path: Path | str | None = None) -> None:
        self._path = Path(path) if path else get_settings().standards_path
        self._catalog: StandardsCatalog | None = None
        self._last_modified: float = 0.0
        self._lock = threading.RLock()

        if not self._path.exists():
            raise StandardsNotFoundError("Standards file not found", path=str(self._path))

        self.load()

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> StandardsCatalog:
        """Read, validate and cache the catalog.

        Raises:
            StandardsLoadError: If the file cannot be read or parsed.
            StandardsValidationError: If validation fails.
        """
        with self._lock:
            raw = self._read_yaml()
            try:
                catalog = parse_standards(raw)
            except StandardsValidationError as e:
                raise StandardsValidationError(e.message, path=str(self._path), details=e.details) from e

            self._catalog = catalog
            self._last_modified = self._path.stat().st_mtime
            logger.info(
                "standards_loaded",
                path=str(self._path),
                version=catalog.version,
                metrics=sorted(catalog.tables),
            )
            return catalog

    def reload(self) -> StandardsCatalog:
        """Reload when the file changed since the last load."""
        with self._lock:
            if self._catalog is not None and self._path.stat().st_mtime == self._last_modified:
                logger.debug("standards_unchanged", path=str(self._path))
                return self._catalog
            return self.load()

    def get_catalog(self) -> StandardsCatalog:
        with self._lock:
            if self._catalog is None:
                raise StandardsLoadError("No standards loaded", path=str(self._path))
            return self._catalog

    def _read_yaml(self) -> Any:
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                return yaml.safe_load(f)
        except FileNotFoundError as e:
            raise StandardsNotFoundError("Standards file not found", path=str(self._path)) from e
        except yaml.YAMLError as e:
            raise StandardsLoadError(f"Failed to parse YAML: {e}", path=str(self._path)) from e
        except OSError as e:
            raise StandardsLoadError(f"Failed to read file: {e}", path=str(self._path)) from e


# Singleton instance for easy access
_default_loader: StandardsLoader | None = None
_default_lock = threading.Lock()


def get_standards_loader(path: Path | str | None = None) -> StandardsLoader:
    """Get or create the default loader. ``path`` is only used on first call."""
    global _default_loader
    with _default_lock:
        if _default_loader is None:
            _default_loader = StandardsLoader(path)
        return _default_loader


def get_standards() -> StandardsCatalog:
    """Current catalog from the default loader."""
    return get_standards_loader().get_catalog()


def reset_standards_loader() -> None:
    """Drop the default loader so the next access reloads from disk."""
    global _default_loader
    with _default_lock:
        _default_loader = None


__all__ = [
    "AgeBracket",
    "BracketRow",
    "DotsCoefficients",
    "Metric",
    "StandardsCatalog",
    "StandardsError",
    "StandardsLoader",
    "StandardsRow",
    "StandardsTable",
    "get_standards",
    "get_standards_loader",
    "parse_standards",
    "reset_standards_loader",
]

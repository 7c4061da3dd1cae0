"""Site locations and the grid points nearest to them."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from .textutils import WHITESPACE, fskim

_FIELD_SIZE = 32

_INT_RE = re.compile(r"[ \t\n\v\f\r]*[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"[ \t\n\v\f\r]*[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


class SiteFormatError(ValueError):
    """A line of a site location file cannot be parsed."""

    def __init__(self, path, lineno: int, text: str) -> None:
        super().__init__(f"{path}: Invalid line at {lineno} ({text})")
        self.path = path
        self.lineno = lineno
        self.text = text


@dataclass
class SiteLocations:
    """Requested site locations and the grid points nearest to them."""

    ids: List[int]
    lons: List[float]
    lats: List[float]
    grid_lons: List[float] = field(default_factory=list)
    grid_lats: List[float] = field(default_factory=list)
    indexes: List[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        count = len(self.ids)
        if len(self.lons) != count or len(self.lats) != count:
            raise ValueError("ids, lons and lats must have the same length")
        if not self.grid_lons:
            self.grid_lons = [0.0] * count
        if not self.grid_lats:
            self.grid_lats = [0.0] * count
        if not self.indexes:
            self.indexes = [0] * count

    def __len__(self) -> int:
        return len(self.ids)

    def update_indexes(self, lons: Sequence[float], lats: Sequence[float]) -> None:
        """Find the nearest grid point of each site on a lon/lat grid.

        Longitudes are compared modulo 360 degrees. The flat index of a
        point is ``jj * len(lons) + ii``.
        """
        nlons = len(lons)
        for i, (lon, lat) in enumerate(zip(self.lons, self.lats)):
            ii = nearest_index_modulo(lons, lon, 360.0)
            jj = nearest_index(lats, lat)
            self.grid_lons[i] = lons[ii]
            self.grid_lats[i] = lats[jj]
            self.indexes[i] = jj * nlons + ii


def _parse(pattern: re.Pattern, text: str, convert) -> Tuple[bool, object]:
    match = pattern.match(text)
    if match is None:
        return False, None
    end = match.end()
    if end >= len(text) or text[end] not in "," + WHITESPACE:
        return False, None
    return True, convert(match.group().strip(WHITESPACE))


def load_site_locations(path) -> SiteLocations:
    """Load ``id, longitude, latitude`` lines from the file at *path*.

    Every line, the last one included, must end with a newline. Raises
    OSError if the file cannot be read and SiteFormatError on a bad line.
    """
    with open(path, "r", encoding="utf-8") as stream:
        count = 0
        while fskim(stream, "\n", 1)[0] > 0:
            count += 1

        stream.seek(0)
        ids: List[int] = []
        lons: List[float] = []
        lats: List[float] = []
        for lineno in range(1, count + 1):
            _, text = fskim(stream, ",", _FIELD_SIZE)
            ok, site_id = _parse(_INT_RE, text, int)
            if not ok:
                raise SiteFormatError(path, lineno, text)

            _, text = fskim(stream, ",", _FIELD_SIZE)
            ok, lon = _parse(_FLOAT_RE, text, float)
            if not ok:
                raise SiteFormatError(path, lineno, text)

            _, text = fskim(stream, "\n", _FIELD_SIZE)
            ok, lat = _parse(_FLOAT_RE, text, float)
            if not ok:
                raise SiteFormatError(path, lineno, text)

            ids.append(site_id)
            lons.append(lon)
            lats.append(lat)

    return SiteLocations(ids, lons, lats)


def nearest_index(xs: Sequence[float], x: float) -> int:
    """Return the index of the value in *xs* closest to *x* (first on ties)."""
    best = 0
    minval = math.inf
    for i, value in enumerate(xs):
        d = abs(value - x)
        if d < minval:
            best, minval = i, d
    return best


def nearest_index_modulo(xs: Sequence[float], x: float, modulo: float) -> int:
    """Like nearest_index(), measuring distance around a cycle of *modulo*."""
    best = 0
    minval = math.inf
    for i, value in enumerate(xs):
        d = math.fmod(abs(x - value), modulo)
        d = min(d, modulo - d)
        if d < minval:
            best, minval = i, d
    return best
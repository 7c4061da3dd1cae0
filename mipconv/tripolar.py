"""Tripolar grid mapping: conversion from model (fake) to true coordinates.

Two grid poles A and B lie on the pole latitude, at 60E and 120W; north
of that latitude the grid is bipolar, south of it a plain lon/lat grid.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple

R_INF = 1e30
DEFAULT_POLE_LATITUDE = 63.0
_JOINT_EPS = 1e-7


def divmod2(x: float, y: float) -> float:
    """Return x modulo y with the sign of y."""
    return x - math.floor(x / y) * y


@dataclass(frozen=True)
class Polar:
    """A point of the complex plane in polar form; ``r == R_INF`` is infinity."""

    r: float
    th: float

    @classmethod
    def from_lonlat(cls, lon: float, lat: float) -> "Polar":
        """Stereographic projection of (lon, lat) in degrees."""
        if lat <= -90.0:
            r = R_INF
        elif lat >= 90.0:
            r = 0.0
        else:
            r = math.tan(0.5 * math.radians(90.0 - lat))
        return cls(r, math.radians(lon))

    def to_lonlat(self) -> Tuple[float, float]:
        """Inverse of from_lonlat(); returns (lon, lat) in degrees."""
        lat = -90.0 if self.r == R_INF else 90.0 - math.degrees(2.0 * math.atan(self.r))
        return math.degrees(self.th), lat

    def __sub__(self, other: "Polar") -> "Polar":
        if other.r == R_INF:
            raise ValueError("cannot subtract infinity")
        if self.r == other.r and self.th == other.th:
            return Polar(0.0, 0.0)
        if self.r == R_INF:
            return self
        x = self.r * math.cos(self.th) - other.r * math.cos(other.th)
        y = self.r * math.sin(self.th) - other.r * math.sin(other.th)
        return Polar(math.hypot(x, y), math.atan2(y, x))

    def __mul__(self, other: "Polar") -> "Polar":
        if self.r == 0.0 or other.r == 0.0:
            r = 0.0
        elif self.r == R_INF or other.r == R_INF:
            r = R_INF
        else:
            r = self.r * other.r
        return Polar(r, self.th + other.th)

    def reciprocal(self) -> "Polar":
        """Return 1 / self."""
        if self.r == R_INF:
            r = 0.0
        elif self.r == 0.0:
            r = R_INF
        else:
            r = 1.0 / self.r
        return Polar(r, -self.th)

    def __truediv__(self, other: "Polar") -> "Polar":
        return self * other.reciprocal()


class TripolarMapping:
    """Coordinate transformation for a tripolar grid with the given pole latitude."""

    a_longitude = 60.0
    b_longitude = 240.0
    c_longitude = 150.0
    c_latitude = 90.0

    def __init__(self, pole_latitude: float = DEFAULT_POLE_LATITUDE) -> None:
        self.pole_latitude = pole_latitude
        self.a_latitude = pole_latitude
        self.b_latitude = pole_latitude
        self._a = Polar.from_lonlat(self.a_longitude, self.a_latitude)
        self._b = Polar.from_lonlat(self.b_longitude, self.b_latitude)
        self._c = Polar.from_lonlat(self.c_longitude, self.c_latitude)

    def _backward_f(self, ws: Sequence[Polar]) -> List[Polar]:
        # z = (-b w (c - a) + a (c - b)) / (-w (c - a) + (c - b))
        a, b, c = self._a, self._b, self._c
        ca = c - a
        cb = c - b
        bca = b * ca
        acb = a * cb
        result = []
        for w in ws:
            if w.r == R_INF:
                result.append(b)
            else:
                result.append((w * bca - acb) / (w * ca - cb))
        return result

    def _rotated(self, xdeg: float, ydeg: float) -> Polar:
        xdeg = divmod2(xdeg, 360.0)
        if xdeg <= 180.0:
            rlat = 90.0 - xdeg
            rlon = -90.0 + (ydeg - self.pole_latitude)
        else:
            rlat = xdeg - 270.0
            rlon = 90.0 - (ydeg - self.pole_latitude)
        return Polar.from_lonlat(rlon, rlat)

    @staticmethod
    def _true_lonlat(z: Polar) -> Tuple[float, float]:
        lon, lat = z.to_lonlat()
        return divmod2(lon, 360.0), lat

    def bipolar(self, rlon: float, rlat: float) -> Tuple[float, float]:
        """Map bipolar coordinates (rlon, rlat) to true (lon, lat)."""
        (z,) = self._backward_f([Polar.from_lonlat(rlon, rlat)])
        return self._true_lonlat(z)

    def transpose(self, xdeg: float, ydeg: float) -> Tuple[float, float]:
        """Map a northern grid point (xdeg, ydeg) to true (lon, lat)."""
        (z,) = self._backward_f([self._rotated(xdeg, ydeg)])
        return self._true_lonlat(z)

    def backward_transform(
        self, x: Sequence[float], y: Sequence[float]
    ) -> Tuple[List[float], List[float]]:
        """Map the grid x by y to true coordinates.

        Returns flat lists of longitudes and latitudes in which point
        (i, j) is at ``i + len(x) * j``.
        """
        joint = next(
            (j for j, yj in enumerate(y) if yj >= self.pole_latitude - _JOINT_EPS), 0
        )
        lon: List[float] = []
        lat: List[float] = []
        for yj in y[:joint]:
            for xi in x:
                lon.append(divmod2(self.a_longitude + xi, 360.0))
                lat.append(yj)
        for yj in y[joint:]:
            for z in self._backward_f([self._rotated(xi, yj) for xi in x]):
                zlon, zlat = self._true_lonlat(z)
                lon.append(zlon)
                lat.append(zlat)
        return lon, lat

    def grid(
        self,
        x: Sequence[float],
        x_bnds: Sequence[float],
        y: Sequence[float],
        y_bnds: Sequence[float],
    ) -> Tuple[
        List[float],
        List[float],
        List[Tuple[float, float, float, float]],
        List[Tuple[float, float, float, float]],
    ]:
        """Return true longitudes, latitudes and cell vertices of a grid.

        The bounds hold one more value than the points. Vertices of each
        cell are given counter-clockwise from its lower-left corner.
        """
        if len(x_bnds) != len(x) + 1 or len(y_bnds) != len(y) + 1:
            raise ValueError("bounds must have one more element than points")
        lon, lat = self.backward_transform(x, y)
        lon_bnds, lat_bnds = self.backward_transform(x_bnds, y_bnds)

        xlen = len(x)
        lon_vertices = []
        lat_vertices = []
        for j in range(len(y)):
            for i in range(xlen):
                vp0 = i + (xlen + 1) * j
                corners = (vp0, vp0 + 1, vp0 + xlen + 2, vp0 + xlen + 1)
                lon_vertices.append(tuple(lon_bnds[k] for k in corners))
                lat_vertices.append(tuple(lat_bnds[k] for k in corners))
        return lon, lat, lon_vertices, lat_vertices
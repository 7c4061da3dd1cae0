"""Conversion settings: model parameters, writing mode, netCDF version."""

from __future__ import annotations

import re
import warnings
from dataclasses import dataclass
from enum import Enum
from typing import IO, Optional

from .textutils import read_logicline, split2

_KEY_SIZE = 32
_LINE_SIZE = 4096

_FLOAT_RE = re.compile(
    r"[ \t\n\v\f\r]*[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)
_DIGITS_RE = re.compile(r"\d+")


def _strtod(text: str) -> float:
    """Parse a leading floating-point number; 0.0 if there is none."""
    match = _FLOAT_RE.match(text)
    return float(match.group().strip()) if match else 0.0


class WritingMode(Enum):
    """How existing output files are treated."""

    PRESERVE = "preserve"
    APPEND = "append"
    REPLACE = "replace"


def parse_netcdf_version(libvers: str) -> int:
    """Return the major version from a netCDF library version string.

    Anything other than 3 or 4 gives a warning and falls back to 3.
    """
    match = _DIGITS_RE.search(libvers[:63])
    major = int(match.group()) if match else 0
    if major not in (3, 4):
        warnings.warn(f"{libvers}: unexpected netcdf version.")
        major = 3
    return major


@dataclass
class Settings:
    """Settings shared by a conversion run."""

    basetime: Optional[str] = None
    ocean_sigma_bottom: float = 50.0
    netcdf_version: int = 0
    writing_mode: WritingMode = WritingMode.REPLACE

    def set_parameter(self, key: str, value: str) -> None:
        """Set a model parameter by name; raises KeyError if unknown."""
        if key == "basetime":
            self.basetime = value
        elif key == "ocean_sigma_bottom":
            self.ocean_sigma_bottom = _strtod(value)
        else:
            raise KeyError(key)

    def read_config(self, stream: IO[str]) -> None:
        """Read ``key value`` lines from *stream*.

        Comment and blank lines are skipped. Every known parameter is
        applied; KeyError listing the unknown keys is raised afterwards.
        """
        unknown = []
        while True:
            line = read_logicline(stream, _LINE_SIZE)
            if line is None:
                break
            if not line or line.startswith("#"):
                continue
            key, value = split2(line, " \t", _KEY_SIZE)
            try:
                self.set_parameter(key, value)
            except KeyError:
                unknown.append(key)
        if unknown:
            raise KeyError(", ".join(unknown))

    def set_writing_mode(self, text: str) -> None:
        """Select the writing mode by name; raises ValueError if unknown."""
        self.writing_mode = WritingMode(text)

    def use_netcdf(self, version: int, linked_version: int) -> int:
        """Request a netCDF format version given the linked library version.

        Returns the version that is actually used.
        """
        if linked_version == 3:
            self.netcdf_version = 3
            if version != 3:
                warnings.warn("netcdf version must be 3.")
        elif linked_version == 4:
            if version not in (3, 4):
                warnings.warn("netcdf version must be 3 or 4.")
                version = 4
            self.netcdf_version = version
        return self.netcdf_version
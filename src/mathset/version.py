# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""mathset version declaration module"""

from __future__ import annotations

__all__ = ["VersionInfo", "version_info"]

import re
import typing

from typing_extensions import assert_never

from . import __version__

type _ReleaseLevel = typing.Literal["", "alpha", "beta", "candidate", "final"]

_VERSION_PATTERN: typing.Final[re.Pattern[str]] = re.compile(
    r"^(?P<major>\d+)\.(?P<minor>\d+)\.(?P<patch>\d+)(?:(?P<suffix>a|b|rc|\.dev)(?P<serial>\d+))?$"
)

_SUFFIX_TO_RELEASELEVEL: typing.Final[dict[str | None, _ReleaseLevel]] = {
    ".dev": "",
    "a": "alpha",
    "b": "beta",
    "rc": "candidate",
    None: "final",
}


class VersionInfo(typing.NamedTuple):
    major: int
    minor: int
    patch: int
    releaselevel: _ReleaseLevel = "final"  # Empty string means 'in development'
    serial: int = 0

    def __str__(self) -> str:
        base = f"{self.major}.{self.minor}.{self.patch}"
        suffix: str
        match self.releaselevel:
            case "final":
                return base
            case "":
                suffix = ".dev"
            case "alpha" | "beta":
                suffix = self.releaselevel[0]
            case "candidate":
                suffix = "rc"
            case _:
                assert_never(self.releaselevel)
        return f"{base}{suffix}{self.serial}"

    @staticmethod
    def from_string(version: str) -> VersionInfo:
        match = _VERSION_PATTERN.match(version)
        if match is None:
            raise ValueError(f"Invalid version: {version!r}")
        major, minor, patch = map(int, match.group("major", "minor", "patch"))
        releaselevel = _SUFFIX_TO_RELEASELEVEL[match["suffix"]]
        serial = int(match["serial"] or 0)
        return VersionInfo(major, minor, patch, releaselevel, serial)


version_info: typing.Final[VersionInfo] = VersionInfo.from_string(__version__)

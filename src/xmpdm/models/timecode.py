"""Frame rate and SMPTE timecode models.

Timecode arithmetic (frame counts, drop-frame counting, real time) is done
with OpenTimelineIO's ``opentime`` module; the models here add the XMP
vocabulary and per-component validation on top.
"""

from __future__ import annotations

import re
from enum import Enum
from fractions import Fraction

import opentimelineio as otio
from pydantic import BaseModel, ConfigDict, Field

RationalTime = otio.opentime.RationalTime


class FrameRate(str, Enum):
    """SMPTE timecode frame rates.

    ``d`` suffixed values are drop-frame variants of the NTSC rates.
    """

    FPS_23_976 = "23.976"
    FPS_24 = "24"
    FPS_25 = "25"
    FPS_29_97 = "29.97"
    FPS_29_97_DROP = "29.97d"
    FPS_30 = "30"
    FPS_48 = "48"
    FPS_50 = "50"
    FPS_59_94 = "59.94"
    FPS_59_94_DROP = "59.94d"
    FPS_60 = "60"

    @property
    def fps(self) -> Fraction:
        """Exact frames per second of real time."""
        return _RATES[self][0]

    @property
    def rate(self) -> float:
        """Frames per second as passed to ``opentime``."""
        return float(self.fps)

    @property
    def timebase(self) -> int:
        """Frames per timecode second (the frame component ceiling)."""
        return _RATES[self][1]

    @property
    def is_drop(self) -> bool:
        """Return True for drop-frame rates."""
        return self.value.endswith("d")

    @property
    def drop_frames(self) -> int:
        """Frame numbers skipped at the start of each dropped minute."""
        if not self.is_drop:
            return 0
        return self.timebase // 15

    @classmethod
    def from_fps(cls, fps: float, tolerance: float = 0.01) -> FrameRate | None:
        """Estimate a non-drop frame rate from a raw fps value.

        Args:
            fps: Frames per second, e.g. 29.970030
            tolerance: Maximum distance to the matched rate

        Returns:
            The closest non-drop rate, or None if none is within tolerance
        """
        best: FrameRate | None = None
        best_delta = tolerance
        for rate in cls:
            if rate.is_drop:
                continue
            delta = abs(rate.rate - fps)
            if delta <= best_delta:
                best, best_delta = rate, delta
        return best


_NTSC = Fraction(1000, 1001)

# rate -> (exact fps, timebase)
_RATES: dict[FrameRate, tuple[Fraction, int]] = {
    FrameRate.FPS_23_976: (24 * _NTSC, 24),
    FrameRate.FPS_24: (Fraction(24), 24),
    FrameRate.FPS_25: (Fraction(25), 25),
    FrameRate.FPS_29_97: (30 * _NTSC, 30),
    FrameRate.FPS_29_97_DROP: (30 * _NTSC, 30),
    FrameRate.FPS_30: (Fraction(30), 30),
    FrameRate.FPS_48: (Fraction(48), 48),
    FrameRate.FPS_50: (Fraction(50), 50),
    FrameRate.FPS_59_94: (60 * _NTSC, 60),
    FrameRate.FPS_59_94_DROP: (60 * _NTSC, 60),
    FrameRate.FPS_60: (Fraction(60), 60),
}


class TimeFormat(str, Enum):
    """Values of ``xmpDM:timeFormat``."""

    TC_23_976 = "23976Timecode"
    TC_24 = "24Timecode"
    TC_25 = "25Timecode"
    TC_29_97_DROP = "2997DropTimecode"
    TC_29_97_NON_DROP = "2997NonDropTimecode"
    TC_30 = "30Timecode"
    TC_50 = "50Timecode"
    TC_59_94_DROP = "5994DropTimecode"
    TC_59_94_NON_DROP = "5994NonDropTimecode"
    TC_60 = "60Timecode"

    @property
    def frame_rate(self) -> FrameRate:
        """Return the frame rate this format counts in."""
        return _TIME_FORMAT_RATES[self]

    @classmethod
    def parse(cls, value: str | None) -> TimeFormat | None:
        """Look up a time format string, returning None when unknown."""
        if value is None:
            return None
        try:
            return cls(value.strip())
        except ValueError:
            return None


_TIME_FORMAT_RATES: dict[TimeFormat, FrameRate] = {
    TimeFormat.TC_23_976: FrameRate.FPS_23_976,
    TimeFormat.TC_24: FrameRate.FPS_24,
    TimeFormat.TC_25: FrameRate.FPS_25,
    TimeFormat.TC_29_97_DROP: FrameRate.FPS_29_97_DROP,
    TimeFormat.TC_29_97_NON_DROP: FrameRate.FPS_29_97,
    TimeFormat.TC_30: FrameRate.FPS_30,
    TimeFormat.TC_50: FrameRate.FPS_50,
    TimeFormat.TC_59_94_DROP: FrameRate.FPS_59_94_DROP,
    TimeFormat.TC_59_94_NON_DROP: FrameRate.FPS_59_94,
    TimeFormat.TC_60: FrameRate.FPS_60,
}

# HH:MM:SS:FF; Adobe writes drop-frame values as HH;MM;SS;FF, other writers
# only put ';' (or '.' / ',') before the frames
TIMECODE_PATTERN = re.compile(r"^(\d{1,2})[:;](\d{1,2})[:;](\d{1,2})[:;.,](\d{1,3})$")


class Timecode(BaseModel):
    """SMPTE timecode at a given frame rate.

    Components are stored as written; a timecode whose components are out
    of range for its rate is representable but reports them through
    ``invalid_components``, and only a valid timecode converts to a
    ``RationalTime``.
    """

    model_config = ConfigDict(frozen=True)

    frame_rate: FrameRate
    hours: int = Field(default=0, ge=0)
    minutes: int = Field(default=0, ge=0)
    seconds: int = Field(default=0, ge=0)
    frames: int = Field(default=0, ge=0)

    @classmethod
    def from_string(cls, value: str, frame_rate: FrameRate) -> Timecode:
        """Parse a formatted timecode string.

        Args:
            value: Timecode such as "01:00:00:00", "00:59:59;29" or "00;59;59;29"
            frame_rate: Rate the timecode counts in

        Returns:
            Timecode (not necessarily valid, see ``invalid_components``)

        Raises:
            ValueError: If the string is not shaped like a timecode
        """
        match = TIMECODE_PATTERN.match(value.strip())
        if not match:
            raise ValueError(f"Invalid timecode string: {value!r}")
        hours, minutes, seconds, frames = (int(part) for part in match.groups())
        return cls(
            frame_rate=frame_rate,
            hours=hours,
            minutes=minutes,
            seconds=seconds,
            frames=frames,
        )

    @property
    def invalid_components(self) -> set[str]:
        """Names of components that are out of range for the frame rate."""
        invalid = set()
        if self.hours >= 24:
            invalid.add("hours")
        if self.minutes >= 60:
            invalid.add("minutes")
        if self.seconds >= 60:
            invalid.add("seconds")
        if self.frames >= self.frame_rate.timebase:
            invalid.add("frames")
        elif (
            self.frame_rate.is_drop
            and self.seconds == 0
            and self.minutes % 10 != 0
            and self.frames < self.frame_rate.drop_frames
        ):
            # drop-frame counting skips these frame numbers
            invalid.add("frames")
        return invalid

    @property
    def is_valid(self) -> bool:
        """Check that every component is in range."""
        return not self.invalid_components

    @property
    def rational_time(self) -> RationalTime:
        """Return the timecode as frames since 00:00:00:00 at its rate.

        Raises:
            ValueError: If the timecode is not valid
        """
        if not self.is_valid:
            invalid = ", ".join(sorted(self.invalid_components))
            raise ValueError(f"Timecode {self._format()} has invalid {invalid}")
        return otio.opentime.from_timecode(self._format(), self.frame_rate.rate)

    @property
    def frame_count(self) -> int:
        """Total frames elapsed since 00:00:00:00."""
        return round(self.rational_time.value)

    @property
    def real_seconds(self) -> float:
        """Elapsed real time in seconds."""
        return self.rational_time.to_seconds()

    def _format(self) -> str:
        separator = ";" if self.frame_rate.is_drop else ":"
        return (
            f"{self.hours:02d}:{self.minutes:02d}:{self.seconds:02d}"
            f"{separator}{self.frames:02d}"
        )

    def __str__(self) -> str:
        if not self.is_valid:
            return self._format()
        return otio.opentime.to_timecode(
            self.rational_time, self.frame_rate.rate, self.frame_rate.is_drop
        )

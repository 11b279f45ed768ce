from __future__ import annotations
from dataclasses import MISSING, dataclass, fields
from datetime import date, datetime
from typing import Any, Literal, Mapping, Optional, Tuple, TYPE_CHECKING

from .errors import RecordError

if TYPE_CHECKING:
    from ..engines.hijri import HijriDate

Phase = Literal["DAY", "NIGHT"]
MiqaatType = Literal[
    "URS",
    "MILAD",
    "WASHEQ",
    "PEHLI_RAAT",
    "SHAHADAT",
    "ASHARA",
    "IMPORTANT_NIGHT",
    "EID",
    "OTHER",
]


def _pick(cls, data: Mapping[str, Any]) -> dict:
    names = {f.name for f in fields(cls)}
    return {k: v for k, v in data.items() if k in names}


def _require(cls, kw: dict, data: Mapping[str, Any]) -> None:
    missing = [
        f.name for f in fields(cls)
        if f.default is MISSING and f.default_factory is MISSING and kw.get(f.name) is None
    ]
    if missing:
        raise RecordError(
            f"{cls.__name__} record id={data.get('id')!r} is missing {', '.join(missing)}"
        )


@dataclass(frozen=True)
class CivilDateTime:
    """
    Wall-clock civil date and time. Julian-calendar components before the
    1582 reform, so it can hold dates `datetime.date` rejects (1500-02-29).
    """
    year: int
    month: int  # 1..12
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    microsecond: int = 0

    @classmethod
    def from_datetime(cls, d: date | datetime) -> "CivilDateTime":
        if isinstance(d, datetime):
            return cls(d.year, d.month, d.day, d.hour, d.minute, d.second, d.microsecond)
        return cls(d.year, d.month, d.day)

    @property
    def is_julian(self) -> bool:
        from .time import is_julian
        return is_julian(self.year, self.month, self.day)

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)

    def to_datetime(self) -> datetime:
        return datetime(self.year, self.month, self.day, self.hour, self.minute, self.second, self.microsecond)

    def __str__(self) -> str:
        s = f"{self.year:04d}-{self.month:02d}-{self.day:02d}"
        if (self.hour, self.minute, self.second, self.microsecond) != (0, 0, 0, 0):
            s += f" {self.hour:02d}:{self.minute:02d}:{self.second:02d}"
        return s


@dataclass(frozen=True)
class Miqaat:
    """Yearly-recurring event. `month` is 1-based."""
    id: int
    name: str
    date: Optional[int] = None
    month: Optional[int] = None
    description: Optional[str] = None
    location: Optional[str] = None
    important: bool = False
    phase: Phase = "DAY"
    type: Optional[MiqaatType] = None
    date_night: Optional[int] = None
    month_night: Optional[int] = None
    priority: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Miqaat":
        kw = _pick(cls, data)
        kw["important"] = bool(kw.get("important") or False)
        kw["phase"] = kw.get("phase") or "DAY"
        _require(cls, kw, data)
        return cls(**kw)


@dataclass(frozen=True)
class LibraryItem:
    id: int
    name: str
    description: Optional[str] = None
    audio_url: Optional[str] = None
    pdf_url: Optional[str] = None
    youtube_url: Optional[str] = None
    album: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LibraryItem":
        kw = _pick(cls, data)
        _require(cls, kw, data)
        return cls(**kw)


@dataclass(frozen=True)
class DailyDua:
    """Devotional-text assignment. `month` is read as a 0-based index."""
    id: int
    library_id: int
    date: int
    month: int
    note: Optional[str] = None
    library: Optional[LibraryItem] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DailyDua":
        kw = _pick(cls, data)
        lib = kw.get("library")
        if isinstance(lib, Mapping):
            kw["library"] = LibraryItem.from_dict(lib)
        if "library_id" not in kw and kw.get("library") is not None:
            kw["library_id"] = kw["library"].id
        _require(cls, kw, data)
        return cls(**kw)


@dataclass(frozen=True)
class CalendarDay:
    date: "HijriDate"
    gregorian: CivilDateTime
    is_current_month: bool
    is_today: bool
    filler: bool = False
    miqaats: Tuple[Miqaat, ...] = ()
    daily_duas: Tuple[DailyDua, ...] = ()

    @property
    def has_miqaats(self) -> bool:
        return bool(self.miqaats)

    @property
    def has_daily_duas(self) -> bool:
        return bool(self.daily_duas)

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum
from typing import Tuple

from . import locale


class MoonPhase(IntEnum):
    WAXING = 0  # កើត
    WANING = 1  # រោច


class MonthIndex(IntEnum):
    MIKASAR = 0
    BOSS = 1
    MEAK = 2
    PHALGUN = 3
    CHETR = 4
    PISAKH = 5
    JESTH = 6
    ASADH = 7
    SRAP = 8
    PHOTROBOT = 9
    ASSOCH = 10
    KADEUK = 11
    # Exist only in leap-month years
    BOTHMAK_ASADH = 12
    TUTIYAK_ASADH = 13


class AnimalYear(IntEnum):
    CHHUT = 0   # Rat
    CHLOV = 1   # Ox
    KHAL = 2    # Tiger
    THOS = 3    # Rabbit
    RONG = 4    # Dragon
    MSANH = 5   # Snake
    MOMEE = 6   # Horse
    MOMAE = 7   # Goat
    VOK = 8     # Monkey
    ROKA = 9    # Rooster
    CHO = 10    # Dog
    KOR = 11    # Pig


class Sak(IntEnum):
    SAMRIDDHISAK = 0
    EKASAK = 1
    TOSAK = 2
    TREISAK = 3
    CHATVASAK = 4
    PANCHASAK = 5
    CHHASAK = 6
    SAPTASAK = 7
    ATTHASAK = 8
    NOPPASAK = 9


class DayOfWeek(IntEnum):
    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6


class LeapType(IntEnum):
    REGULAR = 0     # 354 days
    LEAP_MONTH = 1  # អធិកមាស, 384 days
    LEAP_DAY = 2    # ចន្ទ្រាធិមាស, 355 days


@dataclass(frozen=True)
class KhmerDate:
    """Immutable lunar date: day 1..15 of a moon phase in a month of a BE year."""
    day: int
    moon_phase: MoonPhase
    month_index: MonthIndex
    be_year: int

    @property
    def day_number(self) -> int:
        """0..29: waxing days map to 0..14, waning days to 15..29."""
        if self.moon_phase == MoonPhase.WAXING:
            return self.day - 1
        return 15 + self.day - 1

    @staticmethod
    def split_day_number(day_number: int) -> Tuple[int, MoonPhase]:
        if day_number < 15:
            return day_number + 1, MoonPhase.WAXING
        return day_number - 15 + 1, MoonPhase.WANING

    @classmethod
    def from_day_number(cls, day_number: int, month_index: int, be_year: int) -> "KhmerDate":
        day, phase = cls.split_day_number(day_number)
        return cls(day, phase, MonthIndex(month_index), be_year)

    def add_days(self, count: int) -> "KhmerDate":
        from ..engines.month import shift_days
        return shift_days(self, count)

    def subtract_days(self, count: int) -> "KhmerDate":
        from ..engines.month import shift_days
        return shift_days(self, -count)

    def __str__(self) -> str:
        return (
            f"{self.day}{locale.MOON_PHASE_NAMES[self.moon_phase]} "
            f"ខែ{locale.LUNAR_MONTH_NAMES[self.month_index]} ព.ស.{self.be_year}"
        )


@dataclass(frozen=True)
class GregorianInfo:
    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    day_of_week: DayOfWeek

    def to_datetime(self) -> datetime:
        return datetime(self.year, self.month, self.day, self.hour, self.minute, self.second)


@dataclass(frozen=True)
class KhmerDateInfo:
    day: int
    moon_phase: MoonPhase
    month_index: MonthIndex
    be_year: int
    js_year: int
    animal_year: AnimalYear
    sak: Sak
    day_of_week: DayOfWeek

    @property
    def moon_phase_name(self) -> str:
        return locale.MOON_PHASE_NAMES[self.moon_phase]

    @property
    def month_name(self) -> str:
        return locale.LUNAR_MONTH_NAMES[self.month_index]

    @property
    def animal_year_name(self) -> str:
        return locale.ANIMAL_YEAR_NAMES[self.animal_year]

    @property
    def sak_name(self) -> str:
        return locale.SAK_NAMES[self.sak]

    @property
    def day_of_week_name(self) -> str:
        return locale.WEEKDAY_NAMES[self.day_of_week]


@dataclass(frozen=True)
class ConversionResult:
    gregorian: GregorianInfo
    khmer: KhmerDateInfo

    @property
    def khmer_date(self) -> KhmerDate:
        k = self.khmer
        return KhmerDate(k.day, k.moon_phase, k.month_index, k.be_year)


@dataclass(frozen=True)
class SunInfo:
    """Sun inauguration position for one sotin, in reasey/angsar/libda."""
    sotin: int
    sun_inauguration_as_libda: int
    reasey: int
    angsar: int
    libda: int


@dataclass(frozen=True)
class NewYearMoment:
    year: int
    month: int
    day: int
    hour: int
    minute: int

    def to_datetime(self) -> datetime:
        return datetime(self.year, self.month, self.day, self.hour, self.minute)


@dataclass(frozen=True)
class LerngSakDate:
    """Lunar position of Lerng Sak: day number within Chetr or Pisakh."""
    day_number: int
    month_index: MonthIndex


@dataclass(frozen=True)
class NewYearInfo:
    moment: NewYearMoment
    new_year_moment: datetime
    lerng_sak_moment: datetime
    number_of_vanabat_days: int
    number_new_year_days: int
    lerng_sak_date: LerngSakDate
    lerng_sak_weekday: DayOfWeek
    sotins: Tuple[SunInfo, ...]
    overridden: bool = False

"""
khmercal.core.locale
--------------------
Khmer name tables, indexed by the enum values in khmercal.core.types.
"""

from __future__ import annotations

from typing import Dict, Tuple

LUNAR_MONTH_NAMES: Tuple[str, ...] = (
    "មិគសិរ", "បុស្ស", "មាឃ", "ផល្គុន", "ចេត្រ", "ពិសាខ",
    "ជេស្ឋ", "អាសាឍ", "ស្រាពណ៍", "ភទ្របទ", "អស្សុជ", "កត្ដិក",
    "បឋមាសាឍ", "ទុតិយាសាឍ",
)

LUNAR_MONTH_ABBREVIATIONS: Tuple[str, ...] = (
    "មិ", "បុ", "មា", "ផល", "ចេ", "ពិ",
    "ជេ", "អា", "ស្រ", "ភ", "អ", "ក",
    "បឋ", "ទុតិ",
)

LUNAR_MONTHS: Dict[str, int] = {name: i for i, name in enumerate(LUNAR_MONTH_NAMES)}

SOLAR_MONTH_NAMES: Tuple[str, ...] = (
    "មករា", "កុម្ភៈ", "មីនា", "មេសា", "ឧសភា", "មិថុនា",
    "កក្កដា", "សីហា", "កញ្ញា", "តុលា", "វិច្ឆិកា", "ធ្នូ",
)

SOLAR_MONTH_ABBREVIATIONS: Tuple[str, ...] = (
    "មក", "កម", "មន", "មស", "ឧស", "មថ",
    "កដ", "សហ", "កញ", "តល", "វក", "ធន",
)

ANIMAL_YEAR_NAMES: Tuple[str, ...] = (
    "ជូត", "ឆ្លូវ", "ខាល", "ថោះ", "រោង", "ម្សាញ់",
    "មមី", "មមែ", "វក", "រកា", "ច", "កុរ",
)

# Rat, Ox, Tiger, Rabbit, Dragon, Snake, Horse, Goat, Monkey, Rooster, Dog, Pig
ANIMAL_YEAR_EMOJIS: Tuple[str, ...] = (
    "\U0001F400", "\U0001F402", "\U0001F405", "\U0001F407", "\U0001F409", "\U0001F40D",
    "\U0001F40E", "\U0001F410", "\U0001F412", "\U0001F413", "\U0001F415", "\U0001F416",
)

SAK_NAMES: Tuple[str, ...] = (
    "សំរឹទ្ធិស័ក", "ឯកស័ក", "ទោស័ក", "ត្រីស័ក", "ចត្វាស័ក",
    "បញ្ចស័ក", "ឆស័ក", "សប្តស័ក", "អដ្ឋស័ក", "នព្វស័ក",
)

WEEKDAY_NAMES: Tuple[str, ...] = (
    "អាទិត្យ", "ចន្ទ", "អង្គារ", "ពុធ", "ព្រហស្បតិ៍", "សុក្រ", "សៅរ៍",
)

WEEKDAY_SHORT_NAMES: Tuple[str, ...] = ("អា", "ច", "អ", "ព", "ព្រ", "សុ", "ស")

MOON_PHASE_NAMES: Tuple[str, ...] = ("កើត", "រោច")
MOON_PHASE_SHORT_NAMES: Tuple[str, ...] = ("ក", "រ")

# One glyph per lunar day number 0..29 (U+19E0 block, skipping U+19F0).
MOON_DAY_SYMBOLS: Tuple[str, ...] = tuple(
    [chr(cp) for cp in range(0x19E1, 0x19F0)] + [chr(cp) for cp in range(0x19F1, 0x1A00)]
)

_KHMER_DIGITS = str.maketrans("0123456789", "០១២៣៤៥៦៧៨៩")


def to_khmer_numeral(value: object) -> str:
    """Replace every ASCII digit in str(value) with the Khmer digit."""
    return str(value).translate(_KHMER_DIGITS)

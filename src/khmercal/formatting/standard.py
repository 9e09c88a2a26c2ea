from __future__ import annotations

from ..core import locale
from ..core.locale import to_khmer_numeral
from .registry import register_token

def default_format(r) -> str:
    k = r.khmer
    return to_khmer_numeral(
        f"ថ្ងៃ{k.day_of_week_name} {k.day}{k.moon_phase_name} ខែ{k.month_name} "
        f"ឆ្នាំ{k.animal_year_name} {k.sak_name} ពុទ្ធសករាជ {k.be_year}"
    )

def padded_day(r) -> str:
    return f"{r.khmer.day:02d}"

def moon_day_symbol(r) -> str:
    return locale.MOON_DAY_SYMBOLS[r.khmer_date.day_number]

register_token("W", lambda r: r.khmer.day_of_week_name)
register_token("w", lambda r: locale.WEEKDAY_SHORT_NAMES[r.gregorian.day_of_week])
register_token("d", lambda r: r.khmer.day)
register_token("D", padded_day)
register_token("n", lambda r: locale.MOON_PHASE_SHORT_NAMES[r.khmer.moon_phase])
register_token("N", lambda r: r.khmer.moon_phase_name)
register_token("o", moon_day_symbol)
register_token("m", lambda r: r.khmer.month_name)
register_token("M", lambda r: locale.SOLAR_MONTH_NAMES[r.gregorian.month - 1])
register_token("ms", lambda r: locale.LUNAR_MONTH_ABBREVIATIONS[r.khmer.month_index])
register_token("Ms", lambda r: locale.SOLAR_MONTH_ABBREVIATIONS[r.gregorian.month - 1])
register_token("a", lambda r: r.khmer.animal_year_name)
register_token("as", lambda r: locale.ANIMAL_YEAR_EMOJIS[r.khmer.animal_year])
register_token("e", lambda r: r.khmer.sak_name)
register_token("b", lambda r: r.khmer.be_year)
register_token("c", lambda r: r.gregorian.year)
register_token("j", lambda r: r.khmer.js_year)

# Latin-digit variants
register_token("dr", lambda r: r.khmer.day, raw=True)
register_token("Dr", padded_day, raw=True)
register_token("br", lambda r: r.khmer.be_year, raw=True)
register_token("cr", lambda r: r.gregorian.year, raw=True)
register_token("jr", lambda r: r.khmer.js_year, raw=True)

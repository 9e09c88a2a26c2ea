"""
khmercal.engines.era
--------------------
Year-count conversions between the Gregorian (AD), Buddhist Era (BE) and
Jolak Sakaraj (JS) eras.

BE increments on 1st waning of Pisakh (around May), so a Gregorian year
overlaps two BE years: year + 543 before the transition, year + 544 after.
"""

from __future__ import annotations


def ad_to_js(ad_year: int) -> int:
    return ad_year - 638

def ad_to_be(ad_year: int) -> int:
    return ad_year + 544

def be_to_ad(be_year: int) -> int:
    return be_year - 544

def js_to_ad(js_year: int) -> int:
    return js_year + 638

def be_to_js(be_year: int) -> int:
    return be_year - 1182

def js_to_be(js_year: int) -> int:
    return js_year + 1182

def maybe_be_year(year: int, month: int) -> int:
    """Approximate BE year of a Gregorian (year, month): +543 through April, +544 after."""
    if month <= 4:
        return year + 543
    return year + 544

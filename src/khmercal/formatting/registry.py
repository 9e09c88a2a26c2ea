from __future__ import annotations
import re
from typing import Callable, Dict, List, Optional, Pattern, Tuple

from ..core.locale import to_khmer_numeral
from ..core.types import ConversionResult

TokenFunc = Callable[[ConversionResult], object]
# name -> (fn, raw); raw tokens keep Latin digits
_REGISTRY: Dict[str, Tuple[TokenFunc, bool]] = {}
_pattern: Optional[Pattern[str]] = None

def register_token(name: str, fn: TokenFunc, *, raw: bool = False) -> None:
    global _pattern
    _REGISTRY[name] = (fn, raw)
    _pattern = None

def token_names() -> List[str]:
    return sorted(_REGISTRY)

def _compiled() -> Pattern[str]:
    global _pattern
    if _pattern is None:
        # longest first so that "Ms" wins over "M" and "dr" over "d"
        names = sorted(_REGISTRY, key=len, reverse=True)
        _pattern = re.compile(r"\[([^\]]+)\]|(" + "|".join(re.escape(n) for n in names) + ")")
    return _pattern

def render(result: ConversionResult, pattern: str) -> str:
    """
    Expand tokens in `pattern`. Text inside [...] is copied verbatim;
    token values are localised to Khmer digits unless the token is raw.
    """
    def _sub(m: "re.Match[str]") -> str:
        escaped, token = m.group(1), m.group(2)
        if escaped is not None:
            return escaped
        fn, raw = _REGISTRY[token]
        value = str(fn(result))
        return value if raw else to_khmer_numeral(value)

    return _compiled().sub(_sub, pattern)

from __future__ import annotations
from types import MappingProxyType
from typing import Dict, Mapping

# Standard gematria: 1-9, 10-90, 100-400 in alphabet order.
_LETTERS: Dict[str, int] = {
    "א": 1, "ב": 2, "ג": 3, "ד": 4, "ה": 5,
    "ו": 6, "ז": 7, "ח": 8, "ט": 9,
    "י": 10, "כ": 20, "ל": 30, "מ": 40, "נ": 50,
    "ס": 60, "ע": 70, "פ": 80, "צ": 90,
    "ק": 100, "ר": 200, "ש": 300, "ת": 400,
}

FINAL_TO_BASE: Mapping[str, str] = MappingProxyType({
    "ך": "כ",  # kaf
    "ם": "מ",  # mem
    "ן": "נ",  # nun
    "ף": "פ",  # pe
    "ץ": "צ",  # tsadi
})

# Final forms weigh the same as the base letter.
_FINALS: Dict[str, int] = {
    "ך": 20,
    "ם": 40,
    "ן": 50,
    "ף": 80,
    "ץ": 90,
}

_HISTORICAL: Dict[str, int] = {
    "\u05C6": 50,  # Nun Hafukha
    "\u05EF": 30,  # Yod Triangle
    "\u05F0": 12,  # Double Vav
    "\u05F1": 16,  # Vav Yod
    "\u05F2": 20,  # Double Yod
}

# Alphabetic presentation forms (U+FB1D..U+FB4F), written as escapes since
# several of them do not survive canonical normalization. Values are the
# historical assignments, not sums of the component letters.
_PRESENTATION: Dict[str, int] = {
    "\uFB1D": 10,      # yod with hiriq
    "\uFB1F": 20,      # yiddish yod yod patah
    "\uFB20": 70,      # alternative ayin
    "\uFB21": 1,       # wide alef
    "\uFB22": 4,
    "\uFB23": 5,
    "\uFB24": 20,
    "\uFB25": 30,
    "\uFB26": 40,      # wide final mem
    "\uFB27": 200,
    "\uFB28": 400,
    "\uFB2A": 300,     # shin with shin dot
    "\uFB2B": 300,
    "\uFB2C": 300,
    "\uFB2D": 300,
    "\uFB2E": 1,       # alef with patah
    "\uFB2F": 1,
    "\uFB30": 1,
    "\uFB31": 2,       # bet with dagesh
    "\uFB32": 3,
    "\uFB33": 4,
    "\uFB34": 5,
    "\uFB35": 6,
    "\uFB36": 7,
    "\uFB38": 9,
    "\uFB39": 10,
    "\uFB3A": 20,      # final kaf with dagesh
    "\uFB3B": 20,
    "\uFB3C": 30,
    "\uFB3E": 40,
    "\uFB40": 50,
    "\uFB41": 60,
    "\uFB43": 80,      # final pe with dagesh
    "\uFB44": 80,
    "\uFB46": 90,
    "\uFB47": 100,
    "\uFB48": 200,
    "\uFB49": 300,
    "\uFB4A": 400,
    "\uFB4B": 6,       # vav with holam
    "\uFB4C": 2,       # bet with rafe
    "\uFB4D": 20,
    "\uFB4E": 80,
    "\uFB4F": 31,      # alef lamed ligature
}

WEIGHTS: Mapping[str, int] = MappingProxyType({
    **_LETTERS,
    **_FINALS,
    **_HISTORICAL,
    **_PRESENTATION,
})

def weight_of(ch: str) -> int:
    """Weight of a single character; 0 for anything not in the table."""
    return WEIGHTS.get(ch, 0)

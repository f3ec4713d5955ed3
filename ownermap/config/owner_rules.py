"""
Owner Resolution Rules.

Lookup tables used by the owner-identity resolution pipeline. These are
jurisdiction-tuned heuristics; a JurisdictionProfile can extend or override
the keyword and priority tables without touching this module.
"""

from enum import Enum
from pathlib import Path


class SuffixClass(str, Enum):
    """Suffix families, used to rank competing trailing suffixes."""

    GENERATIONAL = "generational"
    PROFESSIONAL = "professional"
    STATUS = "status"


# Bundled word lists (one entry per line, '#' comments allowed)
COMPANY_KEYWORDS_FILE = Path(__file__).parent / "company_keywords.txt"
FIRST_NAMES_FILE = Path(__file__).parent / "first_names.txt"

# Relationship / legal noise removed before splitting (regex, case-insensitive)
NOISE_PATTERNS = [
    r"\bET\s*AL\b\.?",
    r"\bETAL\b\.?",
    r"\bET\s+UXOR\b\.?",
    r"\bET\s*UX\b\.?",
    r"\bET\s*VIR\b\.?",
    r"\bCO-?\s*(?:TRUSTEES?|TTEES?)\b",
    r"\bSUCCESSOR\s+(?:TRUSTEES?|TTEES?)\b",
    r"\bTRUSTEES?\b",
    r"\bTTEES?\b",
    r"\b(?:DTD|DATED)\s+\d{1,2}[/-]\d{1,2}[/-]\d{2,4}\b",
    r"\bU/D/T\b",
    r"\bU/A\b",
    r"\bF/B/O\b",
    r"\bFBO\b",
    r"\bH\s*&\s*W\b",
    r"\bH/W\b",
    r"\bHUSBAND\b",
    r"\bWIFE\b",
    r"\bJTWROS\b",
    r"\bJT\s+TEN\b",
    r"\bTENANTS?\s+IN\s+COMMON\b",
    r"\bTENANTS?\s+BY\s+THE\s+ENTIRETY\b",
]

# Percentage-interest fragments ("50%", "25% INTEREST", "% INTEREST")
INTEREST_PATTERNS = [
    r"\b\d{1,3}(?:\.\d+)?\s*%\s*(?:INT(?:EREST)?\b)?",
    r"%\s*INTEREST\b",
]

# Alias markers: the marker and the alias after it are dropped
ALIAS_MARKERS = ["A/K/A", "AKA", "F/K/A", "FKA", "N/K/A", "NKA"]

# Care-of markers: the marker and everything after it are dropped
CARE_OF_MARKERS = ["C/O", "CARE OF"]

# Stray leading markers left by assessor exports
LEADING_MARKERS = "%#*@"

# Company suffixes after which a bare interest-share number is dropped
TRAILING_NUMBER_COMPANY_SUFFIXES = [
    "LLC", "L.L.C", "INC", "CORP", "CO", "COMPANY", "LTD", "TRUST",
    "LP", "LLP", "PLC", "PLLC",
]

# Multi-word company phrases, matched on word boundaries
COMPANY_PHRASES = [
    "ESTATE OF",
    "CITY OF",
    "COUNTY OF",
    "STATE OF",
    "TOWN OF",
    "BOARD OF",
    "UNITED STATES",
    "HOUSING AUTHORITY",
    "CREDIT UNION",
    "REAL ESTATE",
]

# Honorific prefixes: normalized token -> canonical value
PREFIXES = {
    "MR": "Mr.",
    "MRS": "Mrs.",
    "MS": "Ms.",
    "MISS": "Miss",
    "MX": "Mx.",
    "DR": "Dr.",
    "DOCTOR": "Dr.",
    "REV": "Rev.",
    "REVEREND": "Rev.",
    "FR": "Fr.",
    "FATHER": "Fr.",
    "PASTOR": "Pastor",
    "PROF": "Prof.",
    "PROFESSOR": "Prof.",
    "HON": "Hon.",
    "HONORABLE": "Hon.",
    "JUDGE": "Judge",
    "CAPT": "Capt.",
    "CAPTAIN": "Capt.",
    "COL": "Col.",
    "COLONEL": "Col.",
    "MAJ": "Maj.",
    "MAJOR": "Maj.",
    "LT": "Lt.",
    "LIEUTENANT": "Lt.",
    "SGT": "Sgt.",
    "SERGEANT": "Sgt.",
    "CMDR": "Cmdr.",
    "ATTY": "Atty.",
    "RABBI": "Rabbi",
    "SIR": "Sir",
    "DAME": "Dame",
}

# Suffixes: normalized token -> (canonical value, class)
SUFFIXES = {
    "JR": ("Jr.", SuffixClass.GENERATIONAL),
    "SR": ("Sr.", SuffixClass.GENERATIONAL),
    "II": ("II", SuffixClass.GENERATIONAL),
    "III": ("III", SuffixClass.GENERATIONAL),
    "IV": ("IV", SuffixClass.GENERATIONAL),
    "PHD": ("PhD", SuffixClass.PROFESSIONAL),
    "EDD": ("EdD", SuffixClass.PROFESSIONAL),
    "MD": ("MD", SuffixClass.PROFESSIONAL),
    "ESQ": ("Esq.", SuffixClass.PROFESSIONAL),
    "ESQUIRE": ("Esq.", SuffixClass.PROFESSIONAL),
    "JD": ("JD", SuffixClass.PROFESSIONAL),
    "LLM": ("LLM", SuffixClass.PROFESSIONAL),
    "MBA": ("MBA", SuffixClass.PROFESSIONAL),
    "RN": ("RN", SuffixClass.PROFESSIONAL),
    "DDS": ("DDS", SuffixClass.PROFESSIONAL),
    "DMD": ("DMD", SuffixClass.PROFESSIONAL),
    "DVM": ("DVM", SuffixClass.PROFESSIONAL),
    "CFA": ("CFA", SuffixClass.PROFESSIONAL),
    "CPA": ("CPA", SuffixClass.PROFESSIONAL),
    "PE": ("PE", SuffixClass.PROFESSIONAL),
    "PMP": ("PMP", SuffixClass.PROFESSIONAL),
    "EMERITUS": ("Emeritus", SuffixClass.STATUS),
    "RET": ("Ret.", SuffixClass.STATUS),
    "RETIRED": ("Ret.", SuffixClass.STATUS),
}

# Suffixes spelled over two tokens ("PH D")
MULTI_TOKEN_SUFFIXES = {
    ("PH", "D"): "PHD",
    ("ED", "D"): "EDD",
}

DEFAULT_SUFFIX_PRIORITY = [
    SuffixClass.GENERATIONAL,
    SuffixClass.PROFESSIONAL,
    SuffixClass.STATUS,
]

# Particles that belong to the surname that follows them
SURNAME_PARTICLES = {
    "DE", "DEL", "DELA", "DELLA", "DI", "DA", "DOS", "DAS", "DES", "DU",
    "LA", "LE", "LAS", "LOS", "VAN", "VON", "DER", "DEN", "TER", "TEN",
    "MC", "MAC", "ST", "SAINT", "SAN", "SANTA", "BIN", "BINT", "IBN", "AL",
}

# Tokens that never form a party on their own when they follow a separator
PERSON_NOISE_TOKENS = {
    "AS", "JT", "SPOUSE", "DECEASED", "DEC", "DESCENDANT", "SURVIVOR",
    "SURV", "SUCTR", "SUCTEE", "COTTEE", "COTTEES", "UND", "INT", "HEIRS",
}

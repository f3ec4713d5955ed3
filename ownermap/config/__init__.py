"""
Rule tables and jurisdiction profiles for owner resolution.
"""
from .profile import (
    DEFAULT_PROFILE,
    DigitPolicy,
    JurisdictionProfile,
    NameOrder,
    get_profile,
    load_profile,
)
from .owner_rules import SuffixClass

__all__ = [
    'DEFAULT_PROFILE',
    'DigitPolicy',
    'JurisdictionProfile',
    'NameOrder',
    'SuffixClass',
    'get_profile',
    'load_profile',
]

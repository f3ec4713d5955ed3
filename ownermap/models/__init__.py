"""
Owner data models.
"""
from .owner import (
    Company,
    InvalidFragment,
    MailingAddress,
    OwnerDocument,
    OwnerMappingResult,
    ParsedOwner,
    Person,
    ReasonCode,
    ResolvedString,
)

__all__ = [
    'Company',
    'InvalidFragment',
    'MailingAddress',
    'OwnerDocument',
    'OwnerMappingResult',
    'ParsedOwner',
    'Person',
    'ReasonCode',
    'ResolvedString',
]

import pytest

from ownermap.config.profile import DigitPolicy, JurisdictionProfile, get_profile
from ownermap.models.owner import ReasonCode
from ownermap.services.entity_classifier import EntityClassifier, EntityKind


@pytest.mark.parametrize(
    "fragment",
    [
        "SMITH FAMILY TRUST",
        "RIVERSIDE HOLDINGS LLC",
        "RIVERSIDE HOLDINGS L.L.C.",
        "Acme Properties Inc.",
        "CITY OF TAMPA",
        "FIRST BAPTIST CHURCH",
        "ESTATE OF JOHN SMITH",
        "HILLSBOROUGH COUNTY",
    ],
)
def test_company_keywords(fragment):
    assert EntityClassifier().classify(fragment).kind == EntityKind.COMPANY


@pytest.mark.parametrize("fragment", ["JOHN SMITH", "SMITH, JOHN", "TRUSTY JOHN", "COLLINS MARY"])
def test_person_fragments(fragment):
    assert EntityClassifier().classify(fragment).kind == EntityKind.PERSON


def test_keyword_found():
    assert EntityClassifier().company_keyword("SMITH FAMILY TRUST") == "TRUST"
    assert EntityClassifier().company_keyword("JOHN SMITH") is None


def test_digits_rejected_by_default():
    result = EntityClassifier().classify("12345")
    assert result.kind == EntityKind.REJECTED
    assert result.reason == ReasonCode.NAME_CONTAINS_DIGITS


def test_digits_become_company_when_profile_says_so():
    profile = JurisdictionProfile(digit_policy=DigitPolicy.COMPANY)
    result = EntityClassifier(profile).classify("PARCEL 12345")
    assert result.kind == EntityKind.COMPANY
    assert result.reason == ReasonCode.COMPANY_FALLBACK


def test_company_with_digits_is_plain_company():
    result = EntityClassifier().classify("1ST STREET HOLDINGS LLC")
    assert result.kind == EntityKind.COMPANY
    assert result.reason is None


def test_extra_and_exempt_keywords():
    profile = JurisdictionProfile(
        extra_company_keywords=frozenset({"RANCH"}),
        person_exempt_keywords=frozenset({"CO"}),
    )
    classifier = EntityClassifier(profile)
    assert classifier.classify("DOUBLE R RANCH").kind == EntityKind.COMPANY
    assert classifier.classify("SMITH CO").kind == EntityKind.PERSON
    assert EntityClassifier().classify("SMITH CO").kind == EntityKind.COMPANY


def test_custom_keyword_set_replaces_bundled_list():
    profile = JurisdictionProfile(company_keywords=frozenset({"LLC"}))
    classifier = EntityClassifier(profile)
    assert classifier.classify("SMITH FAMILY TRUST").kind == EntityKind.PERSON
    assert classifier.classify("ACME LLC").kind == EntityKind.COMPANY


def test_permissive_profile():
    result = EntityClassifier(get_profile("permissive")).classify("LOT 7")
    assert result.kind == EntityKind.COMPANY

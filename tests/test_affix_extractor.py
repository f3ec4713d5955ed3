import pytest

from ownermap.config.owner_rules import SuffixClass
from ownermap.config.profile import JurisdictionProfile
from ownermap.services.affix_extractor import AffixExtractor, is_affix_token


def test_prefix_and_suffix():
    result = AffixExtractor().extract(["DR.", "JAMES", "T", "O'BRIEN", "JR"])
    assert result.prefix == "Dr."
    assert result.suffix == "Jr."
    assert result.tokens == ("JAMES", "T", "O'BRIEN")
    assert result.starved is False


@pytest.mark.parametrize(
    "tokens, suffix",
    [
        (["JOHN", "SMITH", "JR", "MD"], "Jr."),
        (["JOHN", "SMITH", "MD", "JR"], "Jr."),
        (["JOHN", "SMITH", "ESQ", "III"], "III"),
        (["JOHN", "SMITH", "PH", "D"], "PhD"),
        (["JOHN", "SMITH", "Ph.D."], "PhD"),
        (["JOHN", "SMITH", "RET"], "Ret."),
    ],
)
def test_primary_suffix(tokens, suffix):
    result = AffixExtractor().extract(tokens)
    assert result.suffix == suffix
    assert result.tokens == ("JOHN", "SMITH")


def test_suffix_priority_comes_from_profile():
    profile = JurisdictionProfile(
        suffix_priority=(SuffixClass.PROFESSIONAL, SuffixClass.GENERATIONAL, SuffixClass.STATUS)
    )
    result = AffixExtractor(profile).extract(["JOHN", "SMITH", "JR", "MD"])
    assert result.suffix == "MD"


def test_prefix_only_from_first_token():
    result = AffixExtractor().extract(["JOHN", "DR", "SMITH"])
    assert result.prefix is None
    assert result.tokens == ("JOHN", "DR", "SMITH")


def test_starvation_leaves_affix_in_place():
    result = AffixExtractor().extract(["SMITH", "JR"])
    assert result.suffix is None
    assert result.tokens == ("SMITH", "JR")
    assert result.starved is True

    result = AffixExtractor().extract(["MR", "SMITH"])
    assert result.prefix is None
    assert result.starved is True


def test_single_remaining_token_allowed_when_asked():
    result = AffixExtractor().extract(["SMITH", "JR"], min_remaining=1)
    assert result.suffix == "Jr."
    assert result.tokens == ("SMITH",)
    assert result.starved is False


def test_inner_suffix():
    extractor = AffixExtractor()
    assert extractor.extract_inner_suffix(["SMITH", "JR", "JOHN"]) == ("Jr.", ("SMITH", "JOHN"))
    assert extractor.extract_inner_suffix(["SMITH", "MD", "JOHN"]) == (None, ("SMITH", "MD", "JOHN"))
    assert extractor.extract_inner_suffix(["SMITH", "JR"]) == (None, ("SMITH", "JR"))


def test_is_affix_token():
    assert is_affix_token("Mrs.")
    assert is_affix_token("iii")
    assert not is_affix_token("SMITH")

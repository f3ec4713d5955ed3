import pytest

from ownermap.config.profile import JurisdictionProfile
from ownermap.models.owner import Company, OwnerDocument, Person, ReasonCode
from ownermap.services.timeline_assembler import TimelineAssembler, iso_date_key, unknown_key_number


def assemble(profile=None, **fields):
    return TimelineAssembler(profile).assemble(OwnerDocument(**fields))


def test_key_order():
    result = assemble(
        sales_by_date={
            "2020-05-01": ["DOE JANE"],
            "1999-01-01": ["ROE RICHARD"],
        },
        prior_owners_raw=["OLD OWNER LLC"],
        current_owner_raw=["SMITH JOHN"],
    )
    assert list(result.owners_by_date) == ["1999-01-01", "2020-05-01", "unknown_date_1", "current"]
    assert result.owners_by_date["unknown_date_1"] == [Company(name="OLD OWNER LLC")]


def test_current_always_present():
    assert assemble().owners_by_date == {"current": []}


def test_empty_date_bucket_is_omitted():
    result = assemble(sales_by_date={"2020-01-01": ["ET AL"]})
    assert list(result.owners_by_date) == ["current"]
    assert [i.reason for i in result.invalid_owners] == [ReasonCode.EMPTY_AFTER_CLEAN]


def test_unparseable_dates_get_unknown_buckets_in_first_seen_order():
    result = assemble(
        sales_by_date={
            "2020-13-45": ["DOE JANE"],
            None: ["ROE RICHARD"],
            "2001-02-03": ["SMITH JOHN"],
        }
    )
    assert list(result.owners_by_date) == ["2001-02-03", "unknown_date_1", "unknown_date_2", "current"]
    assert result.owners_by_date["unknown_date_1"][0].last_name == "Doe"
    assert result.owners_by_date["unknown_date_2"][0].last_name == "Roe"


def test_existing_unknown_numbers_are_skipped():
    result = assemble(
        sales_by_date={
            None: ["DOE JANE"],
            "unknown_date_1": ["ROE RICHARD"],
        },
        prior_owners_raw=["OLD OWNER LLC"],
    )
    assert list(result.owners_by_date) == ["unknown_date_1", "unknown_date_2", "unknown_date_3", "current"]
    assert result.owners_by_date["unknown_date_1"][0].last_name == "Roe"
    assert result.owners_by_date["unknown_date_2"][0].last_name == "Doe"


def test_prior_owner_seen_as_grantee_is_not_repeated():
    result = assemble(
        sales_by_date={"2010-06-01": ["DOE JANE"]},
        prior_owners_raw=["DOE, JANE", "ROE RICHARD"],
        current_owner_raw=["SMITH JOHN"],
    )
    assert result.owners_by_date["unknown_date_1"] == [Person(first_name="Richard", last_name="Roe")]


def test_prior_owner_matching_current_is_not_repeated():
    result = assemble(prior_owners_raw=["SMITH JOHN"], current_owner_raw=["SMITH, JOHN"])
    assert list(result.owners_by_date) == ["current"]


def test_dedup_within_bucket():
    result = assemble(sales_by_date={"2015-03-03": ["SMITH JOHN", "SMITH, JOHN", "SMITH JOHN & MARY"]})
    owners = result.owners_by_date["2015-03-03"]
    assert [o.first_name for o in owners] == ["John", "Mary"]


def test_latest_sale_merged_into_current():
    profile = JurisdictionProfile(merge_latest_sale_into_current=True)
    result = assemble(
        profile,
        sales_by_date={"2001-01-01": ["ROE RICHARD"], "2019-01-01": ["DOE JANE"]},
        current_owner_raw=["SMITH JOHN"],
    )
    assert [o.last_name for o in result.owners_by_date["current"]] == ["Smith", "Doe"]


def test_mailing_addresses_from_current_owners():
    result = assemble(
        current_owner_raw=["SMITH JOHN & MARY"],
        current_owner_addresses={"SMITH JOHN & MARY": "123 MAIN ST TAMPA FL"},
    )
    assert len(result.mailing_addresses) == 2
    assert result.mailing_addresses[0].owner.first_name == "John"
    assert result.mailing_addresses[0].unnormalized_address == "123 MAIN ST TAMPA FL"


@pytest.mark.parametrize(
    "key, expected",
    [
        ("2020-05-01", "2020-05-01"),
        (" 2020-05-01 ", "2020-05-01"),
        ("2020-02-30", None),
        ("05/01/2020", None),
        (None, None),
    ],
)
def test_iso_date_key(key, expected):
    assert iso_date_key(key) == expected


def test_unknown_key_number():
    assert unknown_key_number("unknown_date_4") == 4
    assert unknown_key_number("unknown_date_") is None
    assert unknown_key_number(None) is None

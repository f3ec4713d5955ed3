from ownermap.models.owner import Company, InvalidFragment, Person, ReasonCode
from ownermap.services.deduplicator import canonical_key, dedupe_owners
from ownermap.services.invalid_collector import InvalidFragmentCollector


def test_canonical_keys():
    person = Person(first_name="John", last_name="Smith", middle_name="Robert", suffix_name="Jr.")
    assert canonical_key(person) == "person:|john|robert|smith|jr."
    assert canonical_key(Company(name="Acme  Holdings LLC")) == "company:acme holdings llc"


def test_company_dedup_is_name_only():
    owners = [Company(name="ACME LLC"), Company(name="Acme LLC")]
    assert dedupe_owners(owners) == [Company(name="ACME LLC")]


def test_person_dedup_keeps_first_occurrence():
    first = Person(first_name="John", last_name="Smith")
    owners = [first, Person(first_name="Mary", last_name="Smith"), Person(first_name="JOHN", last_name="SMITH")]
    result = dedupe_owners(owners)
    assert len(result) == 2
    assert result[0] is first


def test_different_suffix_is_a_different_person():
    owners = [
        Person(first_name="John", last_name="Smith", suffix_name="Jr."),
        Person(first_name="John", last_name="Smith", suffix_name="Sr."),
    ]
    assert len(dedupe_owners(owners)) == 2


def test_later_duplicate_backfills_mailing_address():
    owners = [
        Person(first_name="John", last_name="Smith"),
        Person(first_name="John", last_name="Smith", mailing_address="123 MAIN ST"),
    ]
    result = dedupe_owners(owners)
    assert len(result) == 1
    assert result[0].mailing_address == "123 MAIN ST"


def test_kept_mailing_address_is_not_overwritten():
    owners = [
        Company(name="ACME LLC", mailing_address="PO BOX 1"),
        Company(name="ACME LLC", mailing_address="PO BOX 2"),
    ]
    assert dedupe_owners(owners)[0].mailing_address == "PO BOX 1"


def test_collector_dedupes_by_normalized_raw_and_reason():
    collector = InvalidFragmentCollector()
    collector.add("Smith  John", ReasonCode.INSUFFICIENT_NAME_PARTS)
    collector.add("SMITH JOHN", ReasonCode.INSUFFICIENT_NAME_PARTS)
    collector.add("SMITH JOHN", ReasonCode.NAME_CONTAINS_DIGITS)
    collector.extend([InvalidFragment(raw="smith john", reason=ReasonCode.NAME_CONTAINS_DIGITS)])

    assert len(collector) == 4
    assert collector.results() == [
        InvalidFragment(raw="Smith  John", reason=ReasonCode.INSUFFICIENT_NAME_PARTS),
        InvalidFragment(raw="SMITH JOHN", reason=ReasonCode.NAME_CONTAINS_DIGITS),
    ]

from enum import Enum
from typing import Annotated, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field, StringConstraints


class ReasonCode(str, Enum):
    """Why a raw fragment did not become an owner."""

    EMPTY_AFTER_CLEAN = "empty_after_clean"
    UNPARSEABLE_OR_EMPTY = "unparseable_or_empty"
    PERSON_MISSING_LAST_NAME = "person_missing_last_name"
    PERSON_MISSING_FIRST_OR_LAST = "person_missing_first_or_last"
    INSUFFICIENT_NAME_PARTS = "insufficient_name_parts"
    AMBIGUOUS_OR_INCOMPLETE_PERSON_NAME = "ambiguous_or_incomplete_person_name"
    NAME_CONTAINS_DIGITS = "name_contains_digits"
    COMPANY_FALLBACK = "company_fallback"
    AFFIX_TOKEN_STARVATION = "affix_token_starvation"


NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class Person(BaseModel):
    type: Literal["person"] = "person"
    first_name: NonEmptyStr
    last_name: NonEmptyStr
    middle_name: Optional[str] = None
    prefix_name: Optional[str] = None
    suffix_name: Optional[str] = None
    # Carried for the mailing-address side output, never part of the owner JSON
    mailing_address: Optional[str] = Field(default=None, exclude=True)


class Company(BaseModel):
    type: Literal["company"] = "company"
    name: NonEmptyStr
    mailing_address: Optional[str] = Field(default=None, exclude=True)


ParsedOwner = Annotated[Union[Person, Company], Field(discriminator="type")]


class InvalidFragment(BaseModel):
    raw: str
    reason: ReasonCode


class MailingAddress(BaseModel):
    owner: ParsedOwner
    unnormalized_address: str


class OwnerDocument(BaseModel):
    """
    Raw owner strings for one property record, as handed over by a scraper.

    sales_by_date keys are ISO dates (YYYY-MM-DD); None or any other string
    marks a sale whose date could not be normalized upstream.
    """

    current_owner_raw: List[str] = Field(default_factory=list)
    sales_by_date: Dict[Optional[str], List[str]] = Field(default_factory=dict)
    prior_owners_raw: List[str] = Field(default_factory=list)
    current_owner_addresses: Dict[str, str] = Field(default_factory=dict)


class OwnerMappingResult(BaseModel):
    owners_by_date: Dict[str, List[ParsedOwner]] = Field(default_factory=dict)
    invalid_owners: List[InvalidFragment] = Field(default_factory=list)
    mailing_addresses: List[MailingAddress] = Field(default_factory=list)

    def to_output(self, property_id: Optional[str] = None) -> dict:
        """
        JSON-ready output.

        Without a property id this is the flat
        {"owners_by_date", "invalid_owners"} shape; with one, the timeline is
        nested under "property_<id>" the way the county owner files are laid out.
        """
        owners_by_date = {
            key: [owner.model_dump(mode="json") for owner in owners]
            for key, owners in self.owners_by_date.items()
        }
        invalid = [item.model_dump(mode="json") for item in self.invalid_owners]
        if property_id is None:
            output = {"owners_by_date": owners_by_date, "invalid_owners": invalid}
            if self.mailing_addresses:
                output["mailing_addresses"] = [
                    m.model_dump(mode="json") for m in self.mailing_addresses
                ]
            return output

        return {
            f"property_{property_id}": {
                "owners_by_date": owners_by_date,
                "mailing_addresses": [
                    m.model_dump(mode="json") for m in self.mailing_addresses
                ],
            },
            "invalid_owners": invalid,
        }


class ResolvedString(BaseModel):
    """Owners and rejected fragments produced by one raw owner string."""

    raw: str
    owners: List[ParsedOwner] = Field(default_factory=list)
    invalid: List[InvalidFragment] = Field(default_factory=list)

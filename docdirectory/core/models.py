"""
Domain models for the doctor directory.

These models represent the doctor profiles served by the directory and the
filter state used to narrow the listing. Field aliases follow the camelCase
keys of the directory data file, so records can be validated straight from
JSON.

All models use Pydantic for validation, serialization, and type safety.
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Facet(str, Enum):
    """Filterable facets of the directory listing."""

    SPECIALTY = "specialty"
    STATE = "state"


class Location(BaseModel):
    """
    Where a doctor practices.

    Only ``state`` takes part in filtering; the address fields are display data
    and are never searched.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    state: Optional[str] = None
    city: str = ""
    address: Optional[str] = None
    zip_code: Optional[str] = Field(default=None, alias="zipCode")


class Contact(BaseModel):
    """Contact details shown on a profile page."""

    model_config = ConfigDict(frozen=True)

    phone: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None


class Education(BaseModel):
    model_config = ConfigDict(frozen=True)

    degree: str
    institution: str
    year: Optional[int] = None


class Certification(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    issuing_organization: str = Field(alias="issuingOrganization")
    year: Optional[int] = None


class Doctor(BaseModel):
    """
    A doctor profile in the directory.

    Immutable once validated. ``specialty`` is the primary specialty shown on
    cards; ``specialties`` lists every specialty practiced and is the source of
    the specialty facet. ``conditions`` are condition/injury keywords that are
    searchable but never offered as a facet. ``bio`` is neither searched nor
    filtered.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    slug: str = ""
    name: str
    specialty: str
    specialties: List[str] = Field(default_factory=list)
    location: Optional[Location] = None
    conditions: List[str] = Field(default_factory=list)
    bio: str = ""
    image: Optional[str] = None
    contact: Optional[Contact] = None
    education: List[Education] = Field(default_factory=list)
    certifications: List[Certification] = Field(default_factory=list)
    brand_color: Optional[str] = Field(default=None, alias="brandColor")
    user_id: Optional[str] = Field(default=None, alias="userId")
    created_at: Optional[str] = Field(default=None, alias="createdAt")
    updated_at: Optional[str] = Field(default=None, alias="updatedAt")

    @field_validator("specialties", "conditions", "education", "certifications", mode="before")
    @classmethod
    def null_list_to_empty(cls, v: Any) -> Any:
        """Treat an explicit null like an absent list."""
        return [] if v is None else v

    @property
    def state(self) -> Optional[str]:
        """State of practice, or None when the profile has no location."""
        if self.location is None:
            return None
        return self.location.state

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with the camelCase keys used by the data file."""
        return self.model_dump(by_alias=True, exclude_none=True)


class FilterOptions(BaseModel):
    """
    Selectable facet values derived from a doctor collection.

    Both lists are sorted and free of duplicates.
    """

    specialties: List[str] = Field(default_factory=list)
    states: List[str] = Field(default_factory=list)


class ActiveFilters(BaseModel):
    """
    Facet values currently selected by the user.

    An empty list means the facet places no constraint on the listing.
    Toggle helpers return a new selection and leave this one untouched.
    """

    specialties: List[str] = Field(default_factory=list)
    states: List[str] = Field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.specialties and not self.states

    def toggle(self, facet: Facet, value: str) -> "ActiveFilters":
        """
        Select ``value`` on ``facet`` if it is not selected, otherwise deselect it.

        Parameters
        ----
        facet : Facet
            Facet the value belongs to
        value : str
            Specialty name or state code

        Returns
        ----
        ActiveFilters
            New selection with the value toggled
        """
        field = "specialties" if facet == Facet.SPECIALTY else "states"
        current: List[str] = getattr(self, field)
        if value in current:
            updated = [v for v in current if v != value]
        else:
            updated = current + [value]
        return self.model_copy(update={field: updated})

    def toggle_specialty(self, specialty: str) -> "ActiveFilters":
        return self.toggle(Facet.SPECIALTY, specialty)

    def toggle_state(self, state: str) -> "ActiveFilters":
        return self.toggle(Facet.STATE, state)

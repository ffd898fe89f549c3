"""Raw trainer profile schemas as returned by the trainer backend."""

from datetime import datetime
from typing import Optional

from pydantic import AliasChoices, Field

from services.trainer_profile_service.schemas.base import CamelModel


class ContactInfo(CamelModel):
    phone: Optional[str] = None
    address_line1: Optional[str] = None
    address_line2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    postal_code: Optional[str] = None


class SocialLink(CamelModel):
    name: str = ""
    url: str = Field(default="", validation_alias=AliasChoices("link", "url"))


class BankDetails(CamelModel):
    """Payout details. Never displayed."""

    account_holder_name: Optional[str] = None
    account_number: Optional[str] = None
    ifsc_code: Optional[str] = None
    bank_name: Optional[str] = None


class ProfessionalInfo(CamelModel):
    specialties: list[str] = Field(default_factory=list)
    certifications: list[str] = Field(default_factory=list)
    years_of_experience: int = Field(default=0, ge=0)
    bio: Optional[str] = None
    social_links: list[SocialLink] = Field(default_factory=list)
    business_type: Optional[str] = None
    languages: list[str] = Field(default_factory=list)
    profile_photo: Optional[str] = None
    gallery: list[str] = Field(default_factory=list)


class Availability(CamelModel):
    preferred_time: Optional[str] = None
    check_in: Optional[str] = None
    check_out: Optional[str] = None
    days_available: list[str] = Field(default_factory=list)
    timezone: Optional[str] = None


class Transformation(CamelModel):
    client_name: str = ""
    timeline: Optional[str] = None
    before_images: list[str] = Field(default_factory=list)
    after_images: list[str] = Field(default_factory=list)
    goal: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("transformationGoal", "goal")
    )
    results_and_achievements: list[str] = Field(default_factory=list)


class Testimonial(CamelModel):
    client_name: str = ""
    profile_image: Optional[str] = None
    note: str = ""


class TrainerProfile(CamelModel):
    """Public trainer profile snapshot."""

    id: Optional[str] = Field(default=None, alias="_id")
    user_id: Optional[str] = None
    public_slug: Optional[str] = None

    is_profile_completed: bool = False
    is_subscribed: bool = False

    gender: Optional[str] = None
    date_of_birth: Optional[datetime] = None
    contact: ContactInfo = Field(default_factory=ContactInfo)
    bank_details: Optional[BankDetails] = Field(default=None, exclude=True, repr=False)
    professional: ProfessionalInfo = Field(default_factory=ProfessionalInfo)
    availability: Availability = Field(default_factory=Availability)
    transformations: list[Transformation] = Field(default_factory=list)
    testimonials: list[Testimonial] = Field(default_factory=list)

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

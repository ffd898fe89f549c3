"""Render-ready trainer profile page.

Every label is already formatted and every optional section carries an
explicit visibility flag, so the display layer needs no branching of its own.
"""

from typing import Optional

from pydantic import BaseModel, Field


class StatItem(BaseModel):
    label: str
    value: str


class HeroSection(BaseModel):
    title: str
    subtitle: str
    tagline: str
    # None means the background layer is omitted.
    background_image: Optional[str] = None
    profile_photo: Optional[str] = None
    avatar_url: Optional[str] = None
    specialties: list[str] = Field(default_factory=list)
    stats: list[StatItem] = Field(default_factory=list)


class AboutSection(BaseModel):
    heading: str
    body: str
    certifications: list[str] = Field(default_factory=list)
    show_certifications: bool = False
    certifications_placeholder: Optional[str] = None


class ContactSection(BaseModel):
    phone: Optional[str] = None
    address: Optional[str] = None
    location: Optional[str] = None


class AvailabilitySection(BaseModel):
    preferred_time: str
    working_hours: Optional[str] = None
    days: list[str] = Field(default_factory=list)


class TransformationCard(BaseModel):
    client_name: str
    timeline: Optional[str] = None
    goal_label: Optional[str] = None
    before_image: Optional[str] = None
    after_image: Optional[str] = None
    results: list[str] = Field(default_factory=list)
    show_results: bool = False


class TestimonialCard(BaseModel):
    client_name: str
    profile_image: Optional[str] = None
    quote: str


class PlanCard(BaseModel):
    id: Optional[str] = None
    name: str
    category: Optional[str] = None
    price: str
    period_label: str
    meta_line: Optional[str] = None
    description: Optional[str] = None
    is_active: bool = True


class SocialLinkItem(BaseModel):
    name: str
    url: str


class ProfileViewModel(BaseModel):
    trainer_slug: Optional[str] = None
    hero: HeroSection
    gallery: list[str] = Field(default_factory=list)
    show_gallery: bool = False
    about: AboutSection
    contact: ContactSection
    availability: AvailabilitySection
    transformations: list[TransformationCard] = Field(default_factory=list)
    show_transformations: bool = False
    testimonials: list[TestimonialCard] = Field(default_factory=list)
    show_testimonials: bool = False
    plans: list[PlanCard] = Field(default_factory=list)
    plans_placeholder: Optional[str] = None
    social_links: list[SocialLinkItem] = Field(default_factory=list)
    show_social_links: bool = False
    invitation_title: str

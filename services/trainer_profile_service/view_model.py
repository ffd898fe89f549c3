"""Build the render-ready profile page from raw backend entities.

``build_profile_view_model`` is total: every field of the raw entities may be
missing and the result is still complete. Collections keep the order the
backend sent them in.
"""

from typing import Iterable, Optional, Sequence

from services.trainer_profile_service.labels import (
    format_currency,
    format_goal,
    format_period,
    format_specialty,
    format_time_preference,
    format_weekday,
    humanize,
)
from services.trainer_profile_service.schemas import (
    AboutSection,
    AvailabilitySection,
    ContactInfo,
    ContactSection,
    HeroSection,
    PlanCard,
    ProfileViewModel,
    SocialLinkItem,
    StatItem,
    SubscriptionPlan,
    TestimonialCard,
    TrainerProfile,
    TransformationCard,
    UserAccount,
)

DEFAULT_HERO_TITLE = "Trainer"

HERO_BIO_FALLBACK = (
    "Personalised coaching tailored to your goals, schedule, and lifestyle. "
    "Evidence-based training, habit-focused nutrition, and sustainable progress."
)
ABOUT_BIO_FALLBACK = (
    "This trainer is committed to helping you build sustainable fitness habits, "
    "balancing effective training with practical nutrition and recovery."
)
CERTIFICATIONS_PLACEHOLDER = "Certifications will be added soon."
PLANS_PLACEHOLDER = (
    "Pricing is tailored based on your goals and training frequency. "
    "Send a request to receive a personalised plan."
)


def join_present(parts: Iterable[Optional[str]], separator: str = ", ") -> str:
    """Join the non-empty parts, so missing segments leave no stray separators."""
    return separator.join(part for part in parts if part and part.strip())


def contact_location(contact: ContactInfo) -> str:
    return join_present([contact.city, contact.state, contact.country])


def detailed_location(contact: ContactInfo) -> str:
    return join_present(
        [contact.city, contact.state, contact.country, contact.postal_code]
    )


def resolve_hero_image(
    trainer: TrainerProfile, user: Optional[UserAccount]
) -> Optional[str]:
    """First gallery image, then the profile photo, then the user's avatar."""
    candidates = [
        trainer.professional.gallery[0] if trainer.professional.gallery else None,
        trainer.professional.profile_photo,
        user.avatar_url if user else None,
    ]
    for candidate in candidates:
        if candidate:
            return candidate
    return None


def _bio_or(bio: Optional[str], fallback: str) -> str:
    return bio if bio and bio.strip() else fallback


def _working_hours(trainer: TrainerProfile) -> Optional[str]:
    availability = trainer.availability
    hours = join_present([availability.check_in, availability.check_out], " – ")
    if availability.timezone:
        hours = f"{hours} ({availability.timezone})" if hours else availability.timezone
    return hours or None


def _plan_meta_line(plan: SubscriptionPlan) -> Optional[str]:
    meta = plan.meta
    if meta is None:
        return None
    parts = []
    if meta.sessions_included_per_month is not None:
        parts.append(f"{meta.sessions_included_per_month} sessions / month")
    if meta.free_trial_sessions:
        parts.append(f"{meta.free_trial_sessions} trial session(s)")
    return " • ".join(parts) or None


def build_plan_card(plan: SubscriptionPlan) -> PlanCard:
    return PlanCard(
        id=plan.id,
        name=plan.name,
        category=humanize(plan.category) if plan.category else None,
        price=format_currency(plan.amount, plan.currency),
        period_label=format_period(plan.period, plan.interval),
        meta_line=_plan_meta_line(plan),
        description=plan.description or None,
        is_active=plan.is_active,
    )


def build_profile_view_model(
    trainer: TrainerProfile,
    user: Optional[UserAccount],
    plans: Optional[Sequence[SubscriptionPlan]] = None,
) -> ProfileViewModel:
    professional = trainer.professional
    contact = trainer.contact
    title = (user.name if user and user.name else None) or DEFAULT_HERO_TITLE
    preferred_time = format_time_preference(trainer.availability.preferred_time)

    hero = HeroSection(
        title=title,
        subtitle=_bio_or(professional.bio, HERO_BIO_FALLBACK),
        tagline=(
            "Certified fitness professional · "
            f"{professional.years_of_experience}+ years experience"
        ),
        background_image=resolve_hero_image(trainer, user),
        profile_photo=professional.profile_photo,
        avatar_url=user.avatar_url if user else None,
        specialties=[format_specialty(spec) for spec in professional.specialties],
        stats=[
            StatItem(label="Preferred Time", value=preferred_time),
            StatItem(label="Based In", value=contact_location(contact)),
            StatItem(label="Languages", value=", ".join(professional.languages)),
        ],
    )

    certifications = list(professional.certifications)
    about = AboutSection(
        heading=f"About {title}",
        body=_bio_or(professional.bio, ABOUT_BIO_FALLBACK),
        certifications=certifications,
        show_certifications=bool(certifications),
        certifications_placeholder=(
            None if certifications else CERTIFICATIONS_PLACEHOLDER
        ),
    )

    address = join_present([contact.address_line1, contact.address_line2])
    location = detailed_location(contact)
    contact_section = ContactSection(
        phone=contact.phone or None,
        address=address or None,
        location=location or None,
    )

    availability = AvailabilitySection(
        preferred_time=preferred_time,
        working_hours=_working_hours(trainer),
        days=[format_weekday(day) for day in trainer.availability.days_available],
    )

    transformations = [
        TransformationCard(
            client_name=t.client_name,
            timeline=t.timeline,
            goal_label=format_goal(t.goal) if t.goal else None,
            before_image=t.before_images[0] if t.before_images else None,
            after_image=t.after_images[0] if t.after_images else None,
            results=list(t.results_and_achievements),
            show_results=bool(t.results_and_achievements),
        )
        for t in trainer.transformations
    ]

    testimonials = [
        TestimonialCard(
            client_name=t.client_name,
            profile_image=t.profile_image,
            quote=f"“{t.note}”",
        )
        for t in trainer.testimonials
    ]

    plan_cards = [build_plan_card(plan) for plan in plans or []]

    social_links = [
        SocialLinkItem(name=link.name, url=link.url)
        for link in professional.social_links
    ]

    return ProfileViewModel(
        trainer_slug=trainer.public_slug,
        hero=hero,
        gallery=list(professional.gallery),
        show_gallery=bool(professional.gallery),
        about=about,
        contact=contact_section,
        availability=availability,
        transformations=transformations,
        show_transformations=bool(transformations),
        testimonials=testimonials,
        show_testimonials=bool(testimonials),
        plans=plan_cards,
        plans_placeholder=None if plan_cards else PLANS_PLACEHOLDER,
        social_links=social_links,
        show_social_links=bool(social_links),
        invitation_title=f"Request coaching with {title}",
    )

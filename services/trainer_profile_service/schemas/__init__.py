"""Trainer profile service schemas package.

Re-exports all schemas so that
``from services.trainer_profile_service.schemas import TrainerProfile`` works.

Schema files:
  - schemas/trainer.py     — raw trainer profile
  - schemas/user.py        — user account
  - schemas/plan.py        — subscription plans
  - schemas/profile.py     — backend response envelope
  - schemas/view_model.py  — render-ready page
  - schemas/invitation.py  — invitation request bodies
"""

from services.trainer_profile_service.schemas.invitation import (  # noqa: F401
    InvitationRequestCreate,
    InvitationRequestPayload,
    InvitationRequestResponse,
)
from services.trainer_profile_service.schemas.plan import (  # noqa: F401
    SubscriptionPlan,
    SubscriptionPlanMeta,
)
from services.trainer_profile_service.schemas.profile import (  # noqa: F401
    TrainerProfileData,
    TrainerProfileResponse,
)
from services.trainer_profile_service.schemas.trainer import (  # noqa: F401
    Availability,
    BankDetails,
    ContactInfo,
    ProfessionalInfo,
    SocialLink,
    Testimonial,
    TrainerProfile,
    Transformation,
)
from services.trainer_profile_service.schemas.user import UserAccount  # noqa: F401
from services.trainer_profile_service.schemas.view_model import (  # noqa: F401
    AboutSection,
    AvailabilitySection,
    ContactSection,
    HeroSection,
    PlanCard,
    ProfileViewModel,
    SocialLinkItem,
    StatItem,
    TestimonialCard,
    TransformationCard,
)

"""
Payload factories for building trainer backend responses.

Every factory returns a camelCase dict shaped like the backend's JSON.
Override any top-level field via kwargs.

Usage:
    trainer = TrainerFactory.create(testimonials=[])
    body = profile_envelope(trainer, UserFactory.create(), [PlanFactory.create()])
"""

import uuid
from datetime import datetime, timezone

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _object_id() -> str:
    return uuid.uuid4().hex[:24]


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


# ---------------------------------------------------------------------------
# Backend entities
# ---------------------------------------------------------------------------


class UserFactory:
    @staticmethod
    def create(**overrides):
        defaults = {
            "_id": _object_id(),
            "role": "TRAINER",
            "provider": "GOOGLE",
            "providerId": "google-123",
            "email": "jane@example.com",
            "name": "Jane Doe",
            "avatarUrl": "https://cdn.example.com/avatars/jane.png",
            "isActive": True,
            "createdAt": _now(),
            "updatedAt": _now(),
        }
        defaults.update(overrides)
        return defaults


class TrainerFactory:
    @staticmethod
    def create(**overrides):
        defaults = {
            "_id": _object_id(),
            "userId": _object_id(),
            "publicSlug": "jane-doe",
            "isProfileCompleted": True,
            "isSubscribed": True,
            "gender": "FEMALE",
            "dateOfBirth": "1990-05-14T00:00:00Z",
            "contact": {
                "phone": "+91 98765 43210",
                "addressLine1": "12 MG Road",
                "addressLine2": "Suite 4",
                "city": "Pune",
                "state": "Maharashtra",
                "country": "India",
                "postalCode": "411001",
            },
            "bankDetails": {
                "accountHolderName": "Jane Doe",
                "accountNumber": "000111222333",
                "ifscCode": "HDFC0001234",
                "bankName": "HDFC",
            },
            "professional": {
                "specialties": ["WEIGHT_LOSS", "Muscle Gain"],
                "certifications": ["ACE CPT", "Precision Nutrition L1"],
                "yearsOfExperience": 7,
                "bio": "Strength coach for busy professionals.",
                "socialLinks": [
                    {"name": "Instagram", "link": "https://instagram.com/jane"},
                    {"name": "Website", "link": "https://jane.fit"},
                ],
                "businessType": "FREELANCER",
                "languages": ["English", "Hindi"],
                "profilePhoto": "https://cdn.example.com/photos/jane.jpg",
                "gallery": [
                    "https://cdn.example.com/gallery/1.jpg",
                    "https://cdn.example.com/gallery/2.jpg",
                ],
            },
            "availability": {
                "preferredTime": "MORNING",
                "checkIn": "06:00",
                "checkOut": "11:00",
                "daysAvailable": ["MONDAY", "WEDNESDAY", "FRIDAY"],
                "timezone": "Asia/Kolkata",
            },
            "transformations": [
                {
                    "clientName": "Ravi",
                    "timeline": "12 weeks",
                    "beforeImages": ["https://cdn.example.com/t/ravi-before.jpg"],
                    "afterImages": ["https://cdn.example.com/t/ravi-after.jpg"],
                    "transformationGoal": "WEIGHT_LOSS",
                    "resultsAndAchievements": ["Lost 8 kg", "Ran first 10k"],
                }
            ],
            "testimonials": [
                {
                    "clientName": "Priya",
                    "profileImage": "https://cdn.example.com/t/priya.jpg",
                    "note": "Best coach I have worked with.",
                }
            ],
            "createdAt": _now(),
            "updatedAt": _now(),
        }
        defaults.update(overrides)
        return defaults


class PlanFactory:
    @staticmethod
    def create(**overrides):
        defaults = {
            "_id": _object_id(),
            "category": "ONLINE",
            "name": "Monthly Coaching",
            "amount": 150000,
            "currency": "INR",
            "period": "MONTH",
            "interval": 1,
            "meta": {"sessionsIncludedPerMonth": 12, "freeTrialSessions": 1},
            "issuer": "trainer",
            "description": "Three sessions a week with check-ins.",
            "isActive": True,
            "createdAt": _now(),
            "updatedAt": _now(),
        }
        defaults.update(overrides)
        return defaults


def profile_envelope(trainer=None, user=None, plans=None):
    """Full ``GET /{slug}`` body."""
    return {
        "msg": "Trainer fetched successfully",
        "data": {
            "trainerDetails": trainer if trainer is not None else TrainerFactory.create(),
            "userDetails": user if user is not None else UserFactory.create(),
            "subscriptionPlans": plans if plans is not None else [PlanFactory.create()],
        },
    }

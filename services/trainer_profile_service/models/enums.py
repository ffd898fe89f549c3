"""Enum definitions for trainer profile entities.

The backend sends these as plain string codes. Schemas keep the raw string so
an unrecognised code still parses; the label tables key off these values.
"""

import enum


class TrainerSpecialty(str, enum.Enum):
    """Coaching specialties listed on a trainer profile."""

    STRENGTH = "Strength"
    WEIGHT_LOSS = "Weight Loss"
    MUSCLE_GAIN = "Muscle Gain"
    GENERAL_FITNESS = "General Fitness"


class BusinessType(str, enum.Enum):
    FREELANCER = "FREELANCER"
    STUDIO = "STUDIO"
    GYM = "GYM"


class Gender(str, enum.Enum):
    MALE = "MALE"
    FEMALE = "FEMALE"
    OTHER = "OTHER"


class Weekday(str, enum.Enum):
    MONDAY = "MONDAY"
    TUESDAY = "TUESDAY"
    WEDNESDAY = "WEDNESDAY"
    THURSDAY = "THURSDAY"
    FRIDAY = "FRIDAY"
    SATURDAY = "SATURDAY"
    SUNDAY = "SUNDAY"


class WorkoutTimePreference(str, enum.Enum):
    MORNING = "MORNING"
    AFTERNOON = "AFTERNOON"
    EVENING = "EVENING"
    FLEXIBLE = "FLEXIBLE"


class GoalType(str, enum.Enum):
    """Client goal recorded against a transformation."""

    WEIGHT_LOSS = "WEIGHT_LOSS"
    MUSCLE_GAIN = "MUSCLE_GAIN"
    GENERAL_FITNESS = "GENERAL_FITNESS"
    STRENGTH = "STRENGTH"
    ENDURANCE = "ENDURANCE"


class AuthProvider(str, enum.Enum):
    LOCAL = "LOCAL"
    GOOGLE = "GOOGLE"


class UserRole(str, enum.Enum):
    CLIENT = "CLIENT"
    TRAINER = "TRAINER"


class PlanPeriod(str, enum.Enum):
    """Billing period; combined with an integer interval on the plan."""

    DAY = "DAY"
    WEEK = "WEEK"
    MONTH = "MONTH"
    YEAR = "YEAR"


class PlanCategory(str, enum.Enum):
    ONLINE = "ONLINE"
    HYBRID = "HYBRID"
    OFFLINE = "OFFLINE"

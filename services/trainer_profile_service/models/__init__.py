"""Trainer profile service enums."""

from services.trainer_profile_service.models.enums import (  # noqa: F401
    AuthProvider,
    BusinessType,
    Gender,
    GoalType,
    PlanCategory,
    PlanPeriod,
    TrainerSpecialty,
    UserRole,
    Weekday,
    WorkoutTimePreference,
)

"""
Template Catalog

Built-in plan templates used when the caller supplies no catalog, plus a
reader that turns raw catalog records into PlanTemplate objects.

This is a pure READ + TRANSFORM layer:
- NO scoring logic
- NO ranking/classification
- NO storage
"""

from datetime import datetime, timezone
from typing import Any, Iterable, List, Mapping, Union

from pydantic import ValidationError

from .contracts import PlanTemplate
from .errors import InvalidTemplateError

_CATALOG_TIMESTAMP = datetime(2024, 12, 29, tzinfo=timezone.utc)

MOCK_TEMPLATE_RECORDS: List[dict] = [
    {
        "id": "1",
        "name": "Starting Strength",
        "name_de": "Starting Strength",
        "description": "Classic beginner strength program focusing on compound movements",
        "description_de": "Klassisches Anfänger-Kraftprogramm mit Fokus auf Grundübungen",
        "plan_type": "starting_strength",
        "fitness_level": "beginner",
        "primary_goal": "strength",
        "days_per_week": 3,
        "min_training_experience_months": 0,
        "estimated_duration_weeks": 12,
        "difficulty_rating": 2,
    },
    {
        "id": "2",
        "name": "StrongLifts 5x5",
        "name_de": "StrongLifts 5x5",
        "description": "Simple and effective 5x5 strength program",
        "description_de": "Einfaches und effektives 5x5 Kraftprogramm",
        "plan_type": "stronglifts_5x5",
        "fitness_level": "beginner",
        "primary_goal": "strength",
        "days_per_week": 3,
        "min_training_experience_months": 0,
        "estimated_duration_weeks": 12,
        "difficulty_rating": 2,
    },
    {
        "id": "3",
        "name": "Full Body 3x",
        "name_de": "Ganzkörper 3x",
        "description": "Full body workout 3 times per week for beginners",
        "description_de": "Ganzkörper-Training 3x pro Woche für Anfänger",
        "plan_type": "full_body_3x",
        "fitness_level": "beginner",
        "primary_goal": "general_fitness",
        "days_per_week": 3,
        "min_training_experience_months": 0,
        "estimated_duration_weeks": 8,
        "difficulty_rating": 1,
    },
    {
        "id": "4",
        "name": "PHUL",
        "name_de": "PHUL (Power Hypertrophy)",
        "description": "Power Hypertrophy Upper Lower - 4 days per week",
        "description_de": "Power Hypertrophy Upper Lower - 4 Tage pro Woche",
        "plan_type": "phul",
        "fitness_level": "intermediate",
        "primary_goal": "both",
        "days_per_week": 4,
        "min_training_experience_months": 12,
        "estimated_duration_weeks": 16,
        "difficulty_rating": 3,
    },
    {
        "id": "5",
        "name": "Upper/Lower Hypertrophy",
        "name_de": "Oberkörper/Unterkörper Hypertrophie",
        "description": "Upper/Lower split focused on muscle growth",
        "description_de": "Oberkörper/Unterkörper Split mit Fokus auf Muskelaufbau",
        "plan_type": "upper_lower_hypertrophy",
        "fitness_level": "intermediate",
        "primary_goal": "hypertrophy",
        "days_per_week": 4,
        "min_training_experience_months": 12,
        "estimated_duration_weeks": 12,
        "difficulty_rating": 3,
    },
    {
        "id": "6",
        "name": "PPL 6x Intermediate",
        "name_de": "Push/Pull/Legs 6x Intermediär",
        "description": "Push/Pull/Legs split 6 days per week",
        "description_de": "Push/Pull/Legs Split 6 Tage pro Woche",
        "plan_type": "ppl_6x_intermediate",
        "fitness_level": "intermediate",
        "primary_goal": "hypertrophy",
        "days_per_week": 6,
        "min_training_experience_months": 18,
        "estimated_duration_weeks": 12,
        "difficulty_rating": 4,
    },
    {
        "id": "7",
        "name": "5/3/1 Intermediate",
        "name_de": "5/3/1 Intermediär",
        "description": "Wendler 5/3/1 program for intermediate lifters",
        "description_de": "Wendler 5/3/1 Programm für Fortgeschrittene",
        "plan_type": "531_intermediate",
        "fitness_level": "intermediate",
        "primary_goal": "strength",
        "days_per_week": 4,
        "min_training_experience_months": 12,
        "estimated_duration_weeks": 16,
        "difficulty_rating": 3,
    },
    {
        "id": "8",
        "name": "5/3/1 Advanced",
        "name_de": "5/3/1 Fortgeschritten",
        "description": "Advanced 5/3/1 variation with accessories",
        "description_de": "Fortgeschrittene 5/3/1 Variante mit Zusatzübungen",
        "plan_type": "531_advanced",
        "fitness_level": "advanced",
        "primary_goal": "strength",
        "days_per_week": 4,
        "min_training_experience_months": 36,
        "estimated_duration_weeks": 16,
        "difficulty_rating": 5,
    },
]


def template_from_record(record: Union[PlanTemplate, Mapping[str, Any]]) -> PlanTemplate:
    """
    Read one catalog record.

    Raises:
        InvalidTemplateError: the record is not a valid plan template
    """
    if isinstance(record, PlanTemplate):
        return record
    if not isinstance(record, Mapping):
        raise InvalidTemplateError(
            f"Expected a plan template or mapping, got {type(record).__name__}"
        )
    try:
        return PlanTemplate(**record)
    except ValidationError as e:
        raise InvalidTemplateError(
            f"Invalid plan template {record.get('id', '<no id>')!r}: {e}"
        ) from e


def templates_from_records(
    records: Iterable[Union[PlanTemplate, Mapping[str, Any]]]
) -> List[PlanTemplate]:
    """Read a catalog, preserving its order."""
    return [template_from_record(record) for record in records]


def generate_mock_templates() -> List[PlanTemplate]:
    """
    Built-in catalog of eight well-known programs.

    Used as the default catalog of the HTTP API and as test data.
    """
    return templates_from_records(
        {**record, "created_at": _CATALOG_TIMESTAMP, "updated_at": _CATALOG_TIMESTAMP}
        for record in MOCK_TEMPLATE_RECORDS
    )

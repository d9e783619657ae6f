"""Unit test configuration.

Shared raw profile fixtures. Unit tests never touch external services.
"""

import pytest


@pytest.fixture
def male_profile() -> dict:
    """Male, 30y, 175cm, 70kg, maintaining, general persona."""
    return {
        "age": 30,
        "gender": "male",
        "height_cm": 175,
        "weight_kg": 70,
        "target_weight_kg": 70,
        "persona": "general",
    }


@pytest.fixture
def diabetes_profile() -> dict:
    """Female, 45y, 165cm, 80kg targeting 75kg, diabetes persona."""
    return {
        "age": 45,
        "gender": "female",
        "height_cm": 165,
        "weight_kg": 80,
        "target_weight_kg": 75,
        "persona": "diabetes",
    }


@pytest.fixture
def legacy_profile() -> dict:
    """Profile as stored by the profile-management collaborator."""
    return {
        "id": "3f1c0a52-5b8e-4a0e-9d6b-2f7c1b4f8e11",
        "full_name": "Test User",
        "age": 30,
        "gender": "Male",
        "height": 175,
        "weight": 70,
        "target_weight": 80,
        "user_type": "gym",
        "created_at": "2026-10-01T08:00:00Z",
    }

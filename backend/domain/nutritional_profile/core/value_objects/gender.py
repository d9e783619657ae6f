"""Gender value object used by the BMR equation."""

from enum import Enum


class Gender(str, Enum):
    """Gender as collected by the profile form."""

    MALE = "male"
    FEMALE = "female"
    OTHER = "other"

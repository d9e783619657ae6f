"""Result types for profile validation and goal auditing."""

from dataclasses import dataclass
from typing import Optional

from .user_profile import UserProfile


@dataclass(frozen=True)
class ProfileValidationResult:
    """Either a validated profile or the list of field messages.

    Exactly one of ``profile`` / ``errors`` is meaningful: a valid result
    has a profile and no errors.
    """

    profile: Optional[UserProfile] = None
    errors: tuple[str, ...] = ()

    @classmethod
    def ok(cls, profile: UserProfile) -> "ProfileValidationResult":
        return cls(profile=profile)

    @classmethod
    def err(cls, errors: list[str]) -> "ProfileValidationResult":
        return cls(errors=tuple(errors))

    @property
    def is_valid(self) -> bool:
        return self.profile is not None and not self.errors

    def unwrap(self) -> UserProfile:
        """Return the profile or raise the aggregated validation error.

        Raises:
            ProfileValidationError: If validation failed
        """
        from ..exceptions.domain_errors import ProfileValidationError

        if self.profile is None or self.errors:
            raise ProfileValidationError(self.errors)
        return self.profile


@dataclass(frozen=True)
class GoalValidationReport:
    """Soft findings about computed goals. Goals stay usable."""

    warnings: tuple[str, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.warnings

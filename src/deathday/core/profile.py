from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence, Tuple

from .date import CalendarDate
from .errors import LifespanExceededError, ProfileError
from .identity import IDENTITY_MAX, identity_from_name
from ..engines.distribution import get_distribution

MAX_LIFESPAN_YEARS = 95


@dataclass
class UserProfile:
    """
    Everything a prediction depends on besides the reference date.

    The identity is the only source of "randomness": with the same identity,
    age, causes and reference date every prediction is identical.
    """
    identity: int
    age: int
    causes: Tuple[str, ...]
    max_lifespan: int = field(default=MAX_LIFESPAN_YEARS)

    def __post_init__(self) -> None:
        if self.max_lifespan < 1:
            raise ProfileError(f"max lifespan must be positive, got {self.max_lifespan}")
        self.causes = tuple(self.causes)
        if not self.causes:
            raise ProfileError("death reasons list is empty")
        if any(not c.strip() for c in self.causes):
            raise ProfileError("death reasons must not be blank")
        self.set_identity(self.identity)
        self.set_age(self.age)

    def set_identity(self, identity: int) -> None:
        if not 0 <= identity <= IDENTITY_MAX:
            raise ProfileError(f"identity out of 64-bit range: {identity}")
        self.identity = identity

    def set_age(self, age: int) -> None:
        if age < 0:
            raise ProfileError(f"age must not be negative, got {age}")
        if age >= self.max_lifespan:
            raise LifespanExceededError(
                f"age {age} must be below the maximum lifespan of {self.max_lifespan} years"
            )
        self.age = age

    @property
    def span(self) -> int:
        """Upper bound of years_remaining()."""
        return self.max_lifespan - self.age

    def years_remaining(self, distribution: str = "linear") -> int:
        return get_distribution(distribution)(self.identity, self.span)

    def death_date(
        self,
        today: Optional[CalendarDate] = None,
        distribution: str = "linear",
    ) -> CalendarDate:
        if today is None:
            today = CalendarDate.today()
        year = today.year + self.years_remaining(distribution)
        month = self.identity % 12 + 1
        # Day 1 always exists; it tells us how long the month is.
        ceiling = CalendarDate.build(year, month, 1).max_day()
        day = self.identity % ceiling + 1
        return CalendarDate.build(year, month, day)

    def cause_of_death(self) -> str:
        return self.causes[self.identity % len(self.causes)]


def profile_from_name(
    name: str,
    age: int,
    causes: Sequence[str],
    *,
    max_lifespan: int = MAX_LIFESPAN_YEARS,
) -> UserProfile:
    return UserProfile(identity_from_name(name), age, tuple(causes), max_lifespan)

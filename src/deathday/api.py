from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence

from .causes import DEFAULT_CAUSES
from .core.date import CalendarDate
from .core.errors import FutureDateError, LifespanExceededError
from .core.profile import MAX_LIFESPAN_YEARS, UserProfile, profile_from_name
from .engines.distribution import DEFAULT_DISTRIBUTION


@dataclass(frozen=True)
class Prediction:
    date: CalendarDate
    cause: str
    years_remaining: int


def _today(today: Optional[CalendarDate]) -> CalendarDate:
    return CalendarDate.today() if today is None else today

def validate_birthday(text: str, today: Optional[CalendarDate] = None) -> CalendarDate:
    """Parses a birthday and rejects dates after ``today``."""
    birthday = CalendarDate.parse(text)
    if birthday > _today(today):
        raise FutureDateError()
    return birthday

def age_on(birthday: CalendarDate, today: Optional[CalendarDate] = None) -> int:
    return birthday.years_from(_today(today))

def check_age(
    birthday: CalendarDate,
    today: Optional[CalendarDate] = None,
    max_lifespan: int = MAX_LIFESPAN_YEARS,
) -> int:
    """Age on ``today``; raises LifespanExceededError unless below ``max_lifespan``."""
    age = age_on(birthday, today)
    if age >= max_lifespan:
        raise LifespanExceededError(
            f"you are {age} years old; predictions stop at {max_lifespan} years"
        )
    return age

def make_profile(
    name: str,
    birthday: CalendarDate,
    causes: Optional[Sequence[str]] = None,
    *,
    today: Optional[CalendarDate] = None,
    max_lifespan: int = MAX_LIFESPAN_YEARS,
) -> UserProfile:
    age = check_age(birthday, today, max_lifespan)
    return profile_from_name(
        name,
        age,
        DEFAULT_CAUSES if causes is None else causes,
        max_lifespan=max_lifespan,
    )

def predict(
    profile: UserProfile,
    *,
    today: Optional[CalendarDate] = None,
    distribution: str = DEFAULT_DISTRIBUTION,
) -> Prediction:
    today = _today(today)
    return Prediction(
        date=profile.death_date(today, distribution),
        cause=profile.cause_of_death(),
        years_remaining=profile.years_remaining(distribution),
    )

def explain(
    profile: UserProfile,
    *,
    today: Optional[CalendarDate] = None,
    distribution: str = DEFAULT_DISTRIBUTION,
) -> Dict[str, Any]:
    """Intermediate values of the prediction, for debugging."""
    today = _today(today)
    years = profile.years_remaining(distribution)
    d = profile.death_date(today, distribution)
    return {
        "identity": profile.identity,
        "age": profile.age,
        "max_lifespan": profile.max_lifespan,
        "span": profile.span,
        "distribution": distribution,
        "years_remaining": years,
        "today": str(today),
        "year": d.year,
        "month": d.month,
        "month_days": d.max_day(),
        "day": d.day,
        "cause_index": profile.identity % len(profile.causes),
        "cause": profile.cause_of_death(),
    }

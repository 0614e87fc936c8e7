"""deathday public API.

Keep this surface small: users should mostly interact with names re-exported here.
"""

from .api import (
    Prediction,
    validate_birthday,
    age_on,
    check_age,
    make_profile,
    predict,
    explain,
)
from .causes import DEFAULT_CAUSES, load_causes
from .core.date import CalendarDate, is_leap_year, max_day
from .core.identity import identity_from_name
from .core.profile import MAX_LIFESPAN_YEARS, UserProfile
from .engines.distribution import list_distributions, register_distribution

__all__ = [
    "Prediction",
    "validate_birthday",
    "age_on",
    "check_age",
    "make_profile",
    "predict",
    "explain",
    "DEFAULT_CAUSES",
    "load_causes",
    "CalendarDate",
    "is_leap_year",
    "max_day",
    "identity_from_name",
    "MAX_LIFESPAN_YEARS",
    "UserProfile",
    "list_distributions",
    "register_distribution",
]

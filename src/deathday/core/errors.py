from __future__ import annotations

class DeathdayError(Exception):
    """Base error."""

    message = "unexpected error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)

    def __str__(self) -> str:
        return self.args[0] if self.args else self.message


class DateParseError(DeathdayError, ValueError):
    """Raised when a date cannot be parsed or built."""

    message = "invalid date"

class SeparatorNotFoundError(DateParseError):
    message = "separator not found, use '.', '/', '-' or a space between day, month and year"

class InvalidPartsCountError(DateParseError):
    message = "date must have exactly three parts: day, month and year"

class NumberConversionError(DateParseError):
    message = "day, month and year must be non-negative whole numbers"

class InvalidYearError(DateParseError):
    message = "invalid year"

class InvalidMonthError(DateParseError):
    message = "invalid month"

class InvalidDayError(DateParseError):
    message = "invalid day"


class FutureDateError(DeathdayError, ValueError):
    """Raised when a birthday lies after the reference date."""

    message = "date is in the future"


class ProfileError(DeathdayError, ValueError):
    """Raised when a user profile would break its invariants."""

    message = "invalid profile"

class LifespanExceededError(ProfileError):
    message = "age must be below the maximum lifespan"


class UnknownDistributionError(DeathdayError, KeyError):
    message = "unknown distribution"

    def __str__(self) -> str:
        # KeyError quotes its argument otherwise
        return DeathdayError.__str__(self)


class CausesFileError(DeathdayError, OSError):
    """Raised when a causes file cannot be read."""

    message = "failed to read the death reasons file"

class EmptyCausesError(CausesFileError):
    message = "death reasons file is empty"

"""Log category enum."""

from enum import Enum


class LogCategory(str, Enum):
    PRODUCTION = "Production"
    AUDIT = "Audit"
    ERROR = "Error"
    DIAGNOSTICS = "Diagnostics"

    @classmethod
    def parse(cls, value: "str | LogCategory") -> "LogCategory":
        """Resolve a category from its value or name, case-insensitively."""
        if isinstance(value, LogCategory):
            return value
        lowered = str(value).strip().lower()
        for member in cls:
            if member.value.lower() == lowered or member.name.lower() == lowered:
                return member
        raise ValueError(f"Unknown log category: {value!r} (expected one of {[m.value for m in cls]})")

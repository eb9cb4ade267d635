"""Domain value objects: immutable option and constants payload types."""

from app.domain.value_objects.core import JobConstants, Option

__all__ = ["JobConstants", "Option"]

"""Closed set of photo categories."""

from dataclasses import dataclass

ALL_CATEGORIES = "all"
DEFAULT_CATEGORY = "general"


@dataclass(frozen=True)
class Category:
    """A selectable photo category."""

    value: str
    label: str
    icon: str


CATEGORIES: tuple[Category, ...] = (
    Category(value="general", label="General", icon="👻"),
    Category(value="supernatural", label="Supernatural", icon="🔮"),
    Category(value="gore", label="Gore", icon="🩸"),
    Category(value="psychological", label="Psychological", icon="🧠"),
    Category(value="creatures", label="Creatures", icon="👹"),
    Category(value="haunted", label="Haunted", icon="🏚️"),
    Category(value="apocalyptic", label="Apocalyptic", icon="☠️"),
    Category(value="occult", label="Occult", icon="🕯️"),
)

_BY_VALUE = {category.value: category for category in CATEGORIES}


def get_category(value: str | None) -> Category | None:
    """Return the category for a machine value, if it exists."""
    if value is None:
        return None
    return _BY_VALUE.get(value)


def is_known_category(value: str) -> bool:
    return value in _BY_VALUE

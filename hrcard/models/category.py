"""Visual category enum."""

from enum import Enum


class VisualCategory(str, Enum):
    """Style bucket a record is tinted with on the card."""

    # Badge categories
    DATABASE = "database"
    PYTHON = "python"
    JAVA = "java"
    WEB = "web"
    SYSTEMS = "systems"
    TOP = "top"
    BRONZE = "bronze"
    UNRATED = "unrated"

    # Certificate-only categories
    PROFESSIONAL = "professional"
    STANDARD = "standard"

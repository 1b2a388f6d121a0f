"""Pydantic models for hrcard."""

from hrcard.models.category import VisualCategory
from hrcard.models.badge import BadgeRecord
from hrcard.models.certificate import CertificateRecord
from hrcard.models.profile import ProfileData

__all__ = [
    "VisualCategory",
    "BadgeRecord",
    "CertificateRecord",
    "ProfileData",
]

"""Profile data model."""

from pydantic import BaseModel, ConfigDict

from hrcard.models.badge import BadgeRecord
from hrcard.models.certificate import CertificateRecord


class ProfileData(BaseModel):
    """Deduplicated badges and certificates from one extraction pass."""

    model_config = ConfigDict(frozen=True)

    username: str
    badges: tuple[BadgeRecord, ...] = ()
    certificates: tuple[CertificateRecord, ...] = ()
    skill_count: int = 0

"""Certificate record model."""

from pydantic import BaseModel, ConfigDict, Field

from hrcard.models.category import VisualCategory

DEFAULT_TYPE_LABEL = "SKILL"


class CertificateRecord(BaseModel):
    """A verified skill certificate earned on the profile."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(default="Certificate", min_length=1)
    link_url: str | None = None
    type_label: str = DEFAULT_TYPE_LABEL
    verified: bool = True
    visual_category: VisualCategory | None = None

"""Badge record model."""

from pydantic import BaseModel, ConfigDict, Field

from hrcard.models.category import VisualCategory

MAX_DISPLAY_STARS = 5


class BadgeRecord(BaseModel):
    """A skill badge earned on the profile."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(default="Badge", min_length=1)
    image_url: str | None = None
    star_count: int = Field(default=0, ge=0)
    skill_name: str = ""
    visual_category: VisualCategory | None = None

    @property
    def display_stars(self) -> int:
        """Star count clamped to what the card can show."""
        return max(0, min(self.star_count, MAX_DISPLAY_STARS))

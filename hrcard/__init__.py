"""hrcard - HackerRank achievement card renderer."""

from hrcard.models.category import VisualCategory
from hrcard.models.badge import BadgeRecord
from hrcard.models.certificate import CertificateRecord
from hrcard.models.profile import ProfileData
from hrcard.config import CardConfig
from hrcard.core.orchestrator import CardRenderer
from hrcard.core.renderer import escape_markup, render_error_card
from hrcard.core.exporter import to_json, to_dict, save_json, save_svg, load_json

__version__ = "0.1.0"

__all__ = [
    # Main interface
    "CardRenderer",
    "CardConfig",
    # Models
    "VisualCategory",
    "BadgeRecord",
    "CertificateRecord",
    "ProfileData",
    # Rendering helpers
    "escape_markup",
    "render_error_card",
    # Export utilities
    "to_json",
    "to_dict",
    "save_json",
    "save_svg",
    "load_json",
    "__version__",
]

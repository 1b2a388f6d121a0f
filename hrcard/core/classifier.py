"""Keyword-cascade classification of records into visual categories."""

from dataclasses import dataclass

from hrcard.models.badge import BadgeRecord
from hrcard.models.category import VisualCategory
from hrcard.models.certificate import CertificateRecord
from hrcard.models.profile import ProfileData


@dataclass(frozen=True)
class KeywordRule:
    """Matches a lowercased title containing any of ``any_of`` and none of ``none_of``."""

    any_of: tuple[str, ...]
    category: VisualCategory
    none_of: tuple[str, ...] = ()

    def matches(self, text: str) -> bool:
        return any(k in text for k in self.any_of) and not any(k in text for k in self.none_of)


# Order matters: the first matching rule wins
BADGE_RULES: tuple[KeywordRule, ...] = (
    KeywordRule(("sql", "database"), VisualCategory.DATABASE),
    KeywordRule(("python",), VisualCategory.PYTHON),
    KeywordRule(("java",), VisualCategory.JAVA, none_of=("javascript",)),
    KeywordRule(("javascript", "react"), VisualCategory.WEB),
    KeywordRule(("c++", "cpp"), VisualCategory.SYSTEMS),
    KeywordRule(("problem solving",), VisualCategory.TOP),
)

# (minimum stars, category), highest first
STAR_TIERS: tuple[tuple[int, VisualCategory], ...] = (
    (4, VisualCategory.TOP),
    (3, VisualCategory.SYSTEMS),
    (1, VisualCategory.BRONZE),
)

# No keyword and no stars
BADGE_FALLBACK = VisualCategory.UNRATED

CERTIFICATE_RULES: tuple[KeywordRule, ...] = (
    KeywordRule(("frontend", "react", "angular"), VisualCategory.WEB),
    KeywordRule(("software", "engineer"), VisualCategory.PROFESSIONAL),
    KeywordRule(("sql", "database"), VisualCategory.PROFESSIONAL),
    KeywordRule(("java",), VisualCategory.JAVA, none_of=("javascript",)),
)

CERTIFICATE_FALLBACK = VisualCategory.STANDARD


def match_rules(text: str, rules: tuple[KeywordRule, ...]) -> VisualCategory | None:
    """Category of the first rule matching ``text``, lowercased first."""
    text = text.lower()
    for rule in rules:
        if rule.matches(text):
            return rule.category
    return None


def star_tier(star_count: int) -> VisualCategory:
    for minimum, category in STAR_TIERS:
        if star_count >= minimum:
            return category
    return BADGE_FALLBACK


def classify_badge(badge: BadgeRecord) -> BadgeRecord:
    """Return a copy of the badge with its visual category set."""
    category = match_rules(badge.title, BADGE_RULES) or star_tier(badge.star_count)
    return badge.model_copy(update={"visual_category": category})


def classify_certificate(certificate: CertificateRecord) -> CertificateRecord:
    """Return a copy of the certificate with its visual category set."""
    category = match_rules(certificate.title, CERTIFICATE_RULES) or CERTIFICATE_FALLBACK
    return certificate.model_copy(update={"visual_category": category})


def classify_profile(profile: ProfileData) -> ProfileData:
    """Classify every record of a profile."""
    return profile.model_copy(
        update={
            "badges": tuple(classify_badge(b) for b in profile.badges),
            "certificates": tuple(classify_certificate(c) for c in profile.certificates),
        }
    )

"""SVG serialization of classified profile data."""

from xml.sax.saxutils import escape

from hrcard.core.layout import CardGeometry
from hrcard.models.badge import BadgeRecord
from hrcard.models.category import VisualCategory
from hrcard.models.certificate import CertificateRecord
from hrcard.models.profile import ProfileData

_EXTRA_ENTITIES = {'"': "&quot;", "'": "&#039;"}

FONT = "-apple-system,BlinkMacSystemFont,'Segoe UI',Helvetica,Arial,sans-serif"
STAR_GLYPH = "⭐"
HEXAGON_PATH = "M 60 5 L 112 35 L 112 95 L 60 125 L 8 95 L 8 35 Z"

BADGE_FILLS = {
    VisualCategory.TOP: "#FDB714",
    VisualCategory.SYSTEMS: "#C0C0D0",
    VisualCategory.BRONZE: "#E89B6E",
    VisualCategory.PYTHON: "#5B9BD5",
    VisualCategory.WEB: "#70AD47",
    VisualCategory.DATABASE: "#9B7EBD",
    VisualCategory.JAVA: "#FF8C42",
    VisualCategory.UNRATED: "#6C7A96",
}

CERTIFICATE_FILLS = {
    VisualCategory.STANDARD: "#39B54A",
    VisualCategory.WEB: "#2E5CB8",
    VisualCategory.PROFESSIONAL: "#7952B3",
    VisualCategory.JAVA: "#FF6B35",
}

# Check-mark stroke drawn on top of each certificate fill
CHECK_STROKES = {
    VisualCategory.STANDARD: "#0A5C2E",
    VisualCategory.WEB: "#1A3A6E",
}
DEFAULT_CHECK_STROKE = "#4A2870"

LABEL_WORDS_PER_LINE = 2
LABEL_CHARS = 15
CERT_TITLE_CHARS = 22


def escape_markup(text) -> str:
    """Escape ``& < > " '`` for use in SVG text and attribute values."""
    return escape(str(text), _EXTRA_ENTITIES)


def badge_class(category: VisualCategory | None) -> str:
    return f"hex-{(category or VisualCategory.UNRATED).value}"


def certificate_class(category: VisualCategory | None) -> str:
    return f"cert-{(category or VisualCategory.STANDARD).value}"


def badge_label_lines(badge: BadgeRecord) -> list[str]:
    """Up to two label lines of two words each, truncated."""
    words = (badge.skill_name or badge.title).split()
    lines = [
        " ".join(words[:LABEL_WORDS_PER_LINE]),
        " ".join(words[LABEL_WORDS_PER_LINE:2 * LABEL_WORDS_PER_LINE]),
    ]
    return [line[:LABEL_CHARS] for line in lines if line]


def certificate_title_lines(certificate: CertificateRecord) -> list[str]:
    """Title split into fixed-width chunks, first two kept."""
    title = certificate.title
    chunks = [title[i:i + CERT_TITLE_CHARS].strip() for i in range(0, len(title), CERT_TITLE_CHARS)]
    return [c for c in chunks if c][:2]


def _style_block() -> list[str]:
    rules = [
        ".bg{fill:url(#bgGrad)}",
        ".header-bar{fill:url(#headerGrad);filter:url(#shadow)}",
        f".main-title{{font:700 32px {FONT};fill:#FFFFFF;letter-spacing:-0.5px}}",
        f".username{{font:600 18px {FONT};fill:#FFFFFF;opacity:0.9}}",
        f".stats-text{{font:600 14px {FONT};fill:#FFFFFF;opacity:0.85}}",
        f".stats-num{{font:700 20px {FONT};fill:#39B54A}}",
        f".section-title{{font:700 24px {FONT};fill:#FFFFFF}}",
        f".section-count{{font:600 16px {FONT};fill:#8B92A7}}",
        f".badge-name{{font:600 11px {FONT};fill:#FFFFFF;text-anchor:middle}}",
        f".badge-stars{{font:700 10px {FONT};fill:#FFD700;text-anchor:middle}}",
        f".cert-title{{font:600 13px {FONT};fill:#FFFFFF}}",
        f".cert-type{{font:600 10px {FONT};fill:rgba(255,255,255,0.7);letter-spacing:0.5px}}",
        f".cert-verified{{font:500 11px {FONT};fill:rgba(255,255,255,0.85)}}",
        ".fold{fill:rgba(255,255,255,0.12)}",
        ".divider{stroke:#2D3B54;stroke-width:1;opacity:0.5}",
    ]
    rules += [f".{badge_class(c)}{{fill:{fill}}}" for c, fill in BADGE_FILLS.items()]
    rules += [f".{certificate_class(c)}{{fill:{fill}}}" for c, fill in CERTIFICATE_FILLS.items()]
    return ["  <style>"] + [f"    {r}" for r in rules] + ["  </style>"]


def _defs() -> list[str]:
    return [
        "  <defs>",
        '    <linearGradient id="bgGrad" x1="0%" y1="0%" x2="100%" y2="100%">',
        '      <stop offset="0%" style="stop-color:#0A0E27;stop-opacity:1"/>',
        '      <stop offset="100%" style="stop-color:#1A1F3A;stop-opacity:1"/>',
        "    </linearGradient>",
        '    <linearGradient id="headerGrad" x1="0%" y1="0%" x2="100%" y2="0%">',
        '      <stop offset="0%" style="stop-color:#39B54A;stop-opacity:1"/>',
        '      <stop offset="100%" style="stop-color:#2ECC71;stop-opacity:1"/>',
        "    </linearGradient>",
        '    <filter id="shadow">',
        '      <feDropShadow dx="0" dy="4" stdDeviation="6" flood-opacity="0.3"/>',
        "    </filter>",
        f'    <clipPath id="hexClip"><path d="{HEXAGON_PATH}"/></clipPath>',
        "  </defs>",
    ]


def _header(profile: ProfileData, geometry: CardGeometry) -> list[str]:
    pad = geometry.style.padding
    stat_x = geometry.width - pad - 320
    stats = [
        ("badges", "Total Badges", len(profile.badges)),
        ("certificates", "Certificates", len(profile.certificates)),
        ("skills", "Skills", profile.skill_count),
    ]

    parts = [
        '  <rect width="100%" height="100%" class="bg"/>',
        '  <rect y="0" width="100%" height="6" class="header-bar"/>',
        f'  <text x="{pad}" y="48" class="main-title">HackerRank Achievements</text>',
        f'  <text x="{pad}" y="75" class="username">@{escape_markup(profile.username)}</text>',
    ]
    for i, (key, label, value) in enumerate(stats):
        parts += [
            f'  <g transform="translate({stat_x + i * 120}, 35)">',
            f'    <text x="0" y="0" class="stats-text">{label}</text>',
            f'    <text id="stat-{key}" x="0" y="22" class="stats-num">{value}</text>',
            "  </g>",
        ]
    return parts


def _section_heading(geometry: CardGeometry, top: int, title: str, title_width: int, count_text: str) -> list[str]:
    pad = geometry.style.padding
    return [
        f'  <line x1="{pad}" y1="{top - 20}" x2="{geometry.width - pad}" y2="{top - 20}" class="divider"/>',
        f'  <text x="{pad}" y="{top + 10}" class="section-title">{title}</text>',
        f'  <text x="{pad + title_width}" y="{top + 10}" class="section-count">{count_text}</text>',
    ]


def _badge_item(badge: BadgeRecord, x: int, y: int) -> list[str]:
    center = x + 60
    parts = [
        f'  <g transform="translate({x}, {y})">',
        f'    <path d="{HEXAGON_PATH}" class="{badge_class(badge.visual_category)}" filter="url(#shadow)"/>',
    ]
    if badge.image_url:
        parts.append(
            f'    <image x="0" y="0" width="120" height="130" href="{escape_markup(badge.image_url)}"'
            ' clip-path="url(#hexClip)" preserveAspectRatio="xMidYMid slice"/>'
        )
    if badge.display_stars:
        parts.append(f'    <text x="60" y="145" class="badge-stars">{STAR_GLYPH * badge.display_stars}</text>')
    parts.append("  </g>")

    for i, line in enumerate(badge_label_lines(badge)):
        parts.append(f'  <text x="{center}" y="{y + 148 + i * 12}" class="badge-name">{escape_markup(line)}</text>')
    return parts


def _certificate_item(certificate: CertificateRecord, x: int, y: int, width: int) -> list[str]:
    category = certificate.visual_category or VisualCategory.STANDARD
    check = CHECK_STROKES.get(category, DEFAULT_CHECK_STROKE)

    parts = [
        '  <g filter="url(#shadow)">',
        f'    <rect x="{x}" y="{y}" width="{width}" height="140" rx="8" class="{certificate_class(category)}"/>',
        f'    <path d="M {x + width - 25} {y} L {x + width} {y} L {x + width} {y + 25} Z" class="fold"/>',
        f'    <circle cx="{x + 25}" cy="{y + 28}" r="16" fill="rgba(255,255,255,0.15)"/>',
        f'    <path d="M {x + 20} {y + 22} L {x + 20} {y + 34} M {x + 30} {y + 22} L {x + 30} {y + 34}"'
        ' stroke="white" stroke-width="2" stroke-linecap="round"/>',
        f'    <circle cx="{x + 25}" cy="{y + 20}" r="3" fill="white"/>',
        f'    <rect x="{x + 17}" y="{y + 36}" width="16" height="2" rx="1" fill="white"/>',
    ]
    for i, line in enumerate(certificate_title_lines(certificate)):
        parts.append(f'    <text x="{x + 15}" y="{y + 70 + i * 18}" class="cert-title">{escape_markup(line)}</text>')

    parts.append(f'    <text x="{x + 15}" y="{y + 112}" class="cert-type">{escape_markup(certificate.type_label)}</text>')

    if certificate.verified:
        parts += [
            f'    <circle cx="{x + 15}" cy="{y + 127}" r="3" fill="rgba(255,255,255,0.9)"/>',
            f'    <path d="M {x + 13} {y + 127} L {x + 14.5} {y + 128.5} L {x + 17} {y + 125.5}"'
            f' stroke="{check}" stroke-width="1.5" fill="none" stroke-linecap="round"/>',
            f'    <text x="{x + 23}" y="{y + 130}" class="cert-verified">Verified</text>',
        ]
    parts.append("  </g>")
    return parts


def render_card(profile: ProfileData, geometry: CardGeometry) -> str:
    """
    Serialize a classified profile into a standalone SVG document.

    Args:
        profile: Classified ProfileData
        geometry: Layout computed for the profile's record counts

    Returns:
        SVG markup
    """
    parts = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink"'
        f' width="{geometry.width}" height="{geometry.height}">',
    ]
    parts += _defs()
    parts += _style_block()
    parts += _header(profile, geometry)

    if geometry.badge_rows:
        parts += _section_heading(
            geometry, geometry.badge_section_top,
            "\U0001f3c6 Badges", 130, f"{geometry.badge_count} earned",
        )
        for i, badge in enumerate(profile.badges[:geometry.badge_count]):
            x, y = geometry.badge_origin(i)
            parts += _badge_item(badge, x, y)

    if geometry.certificate_rows:
        count_text = f"{geometry.certificate_count} verified"
        if geometry.hidden_certificates:
            count_text += f" · +{geometry.hidden_certificates} more"
        parts += _section_heading(
            geometry, geometry.certificate_section_top,
            "\U0001f4dc Certifications", 210, count_text,
        )
        width = geometry.style.certificate_width
        for i, certificate in enumerate(profile.certificates[:geometry.displayed_certificates]):
            x, y = geometry.certificate_origin(i)
            parts += _certificate_item(certificate, x, y, width)

    parts.append("</svg>")
    return "\n".join(parts)


def render_error_card(message: str) -> str:
    """Fallback card shown when a profile cannot be loaded."""
    return (
        '<svg xmlns="http://www.w3.org/2000/svg" width="700" height="200">'
        '<defs><linearGradient id="errBg" x1="0%" y1="0%" x2="100%" y2="100%">'
        '<stop offset="0%" style="stop-color:#1A1F3A"/><stop offset="100%" style="stop-color:#0A0E27"/>'
        "</linearGradient></defs>"
        '<rect width="100%" height="100%" fill="url(#errBg)"/>'
        '<rect y="0" width="100%" height="6" fill="#E74C3C"/>'
        f'<text x="30" y="70" style="font:700 28px {FONT};fill:#FFFFFF">⚠️ Unable to Load Profile</text>'
        f'<text x="30" y="110" style="font:600 16px {FONT};fill:#E74C3C">{escape_markup(message)}</text>'
        f'<text x="30" y="145" style="font:500 14px {FONT};fill:#8B92A7">'
        "Please verify the username and try again</text>"
        "</svg>"
    )

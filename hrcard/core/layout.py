"""Analytic card geometry as a function of record counts."""

import math
from dataclasses import dataclass, field


@dataclass(frozen=True)
class CardStyle:
    """Fixed style constants of the card, in pixels."""

    width: int = 900
    padding: int = 40
    header_height: int = 100

    # Room for divider, title and the gap after a section
    section_header: int = 100
    # Offset from a section's top to its first grid row
    grid_offset: int = 50

    badge_columns: int = 5
    badge_size: int = 120
    badge_gap: int = 25
    badge_label: int = 35

    certificate_columns: int = 4
    certificate_width: int = 200
    certificate_height: int = 140
    certificate_gap: int = 20
    max_certificates: int = 16

    @property
    def badge_row_height(self) -> int:
        return self.badge_size + self.badge_gap + self.badge_label

    @property
    def certificate_row_height(self) -> int:
        return self.certificate_height + self.certificate_gap


@dataclass(frozen=True)
class CardGeometry:
    """Section sizes and canvas dimensions for one render."""

    width: int
    height: int
    header_height: int
    badge_count: int
    badge_rows: int
    badge_section_top: int
    badge_section_height: int
    certificate_count: int
    displayed_certificates: int
    certificate_rows: int
    certificate_section_top: int
    certificate_section_height: int
    style: CardStyle = field(default_factory=CardStyle)

    @property
    def hidden_certificates(self) -> int:
        return self.certificate_count - self.displayed_certificates

    @property
    def badge_columns(self) -> int:
        return self.style.badge_columns

    @property
    def certificate_columns(self) -> int:
        return self.style.certificate_columns

    def badge_origin(self, index: int) -> tuple[int, int]:
        """Top-left corner of the badge cell at ``index``."""
        s = self.style
        row, col = divmod(index, s.badge_columns)
        x = s.padding + col * (s.badge_size + s.badge_gap)
        y = self.badge_section_top + s.grid_offset + row * s.badge_row_height
        return x, y

    def certificate_origin(self, index: int) -> tuple[int, int]:
        """Top-left corner of the certificate card at ``index``."""
        s = self.style
        row, col = divmod(index, s.certificate_columns)
        x = s.padding + col * (s.certificate_width + s.certificate_gap)
        y = self.certificate_section_top + s.grid_offset + row * s.certificate_row_height
        return x, y


def grid_rows(count: int, columns: int) -> int:
    """Rows needed for ``count`` items in ``columns`` columns."""
    if count <= 0:
        return 0
    return math.ceil(count / columns)


def compute_geometry(badge_count: int, certificate_count: int, style: CardStyle | None = None) -> CardGeometry:
    """
    Compute the card layout for the given record counts.

    Empty sections take no space at all. Certificates beyond
    ``style.max_certificates`` are not laid out.

    Args:
        badge_count: Number of badges to show
        certificate_count: Number of certificates earned
        style: Style constants, defaults to CardStyle()

    Returns:
        CardGeometry
    """
    style = style or CardStyle()
    badge_count = max(0, badge_count)
    certificate_count = max(0, certificate_count)

    badge_rows = grid_rows(badge_count, style.badge_columns)
    badge_height = badge_rows * style.badge_row_height + style.section_header if badge_rows else 0

    displayed = min(certificate_count, style.max_certificates)
    cert_rows = grid_rows(displayed, style.certificate_columns)
    cert_height = cert_rows * style.certificate_row_height + style.section_header if cert_rows else 0

    badge_top = style.header_height + style.padding
    cert_top = badge_top + badge_height

    return CardGeometry(
        width=style.width,
        height=style.header_height + badge_height + cert_height + 2 * style.padding,
        header_height=style.header_height,
        badge_count=badge_count,
        badge_rows=badge_rows,
        badge_section_top=badge_top,
        badge_section_height=badge_height,
        certificate_count=certificate_count,
        displayed_certificates=displayed,
        certificate_rows=cert_rows,
        certificate_section_top=cert_top,
        certificate_section_height=cert_height,
        style=style,
    )

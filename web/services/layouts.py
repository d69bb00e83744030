"""
Visual layouts for the CV document.

A layout only changes sizes, density and colours. The content and order
of the two pages are the same for every layout.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Palette:
    primary_dark: str = "#3D1A5C"
    primary: str = "#5B2D8E"
    primary_light: str = "#7B4FA2"
    accent: str = "#9B6FC2"
    navy: str = "#1A1A3E"
    gold: str = "#C9A84C"
    text_dark: str = "#2D2D2D"
    text_muted: str = "#666666"
    line: str = "#E0E0E8"
    background: str = "#F4F4F8"
    white: str = "#FFFFFF"
    positive: str = "#2E7D32"
    negative: str = "#C62828"
    pending: str = "#B7791F"


@dataclass(frozen=True)
class LayoutConfig:
    name: str
    palette: Palette = field(default_factory=Palette)
    profile_photo_width: int = 105
    profile_photo_height: int = 125
    side_panel_width: int = 205
    full_photo_height: int = 265
    passport_max_width: int = 540
    row_padding: str = "5px 10px"
    label_font_px: float = 9.5
    value_font_px: float = 10.0
    section_gap_px: int = 8
    skill_segments: int = 4
    # Fill a missing Arabic name from the English one
    transliterate_names: bool = True


CLASSIC = LayoutConfig(name="classic")

COMPACT = LayoutConfig(
    name="compact",
    profile_photo_width=90,
    profile_photo_height=108,
    side_panel_width=190,
    full_photo_height=220,
    passport_max_width=480,
    row_padding="3px 8px",
    label_font_px=8.5,
    value_font_px=9.0,
    section_gap_px=5,
)

LAYOUTS = {layout.name: layout for layout in (CLASSIC, COMPACT)}


def get_layout(name: str) -> LayoutConfig:
    """
    Look up a built-in layout by name.

    Raises:
        ValueError: If no layout has that name
    """
    try:
        return LAYOUTS[name]
    except KeyError:
        raise ValueError(
            f"Unknown layout '{name}'. Available: {', '.join(sorted(LAYOUTS))}"
        ) from None


@dataclass(frozen=True)
class Organization:
    """The agency whose branding appears in the header and footer."""

    name_ar: str = ""
    name_en: str = ""
    email: str = ""
    address_ar: str = ""
    phones: tuple = ()

    @classmethod
    def from_config(cls, config: dict) -> "Organization":
        return cls(
            name_ar=config.get("name_ar", ""),
            name_en=config.get("name_en", ""),
            email=config.get("email", ""),
            address_ar=config.get("address_ar", ""),
            phones=tuple(config.get("phones", [])),
        )

"""Theme colors and color utilities for the UI."""


class GameColors:
    """Light theme palette."""

    BG_TOP = "#e0f7fa"
    BG_BOTTOM = "#80deea"

    PRIMARY = "#00838f"
    PRIMARY_LIGHT = "#4fb3bf"
    PRIMARY_DARK = "#005662"

    CORAL = "#ff8a65"

    CARD_BG = "rgba(255, 255, 255, 0.85)"
    CARD_BORDER = "rgba(255, 255, 255, 0.6)"

    TEXT_PRIMARY = "#1a3a3a"
    TEXT_SECONDARY = "#4a6572"

    # Fragment tiles
    TILE_BG = "#ffffff"
    TILE_BORDER = "#b2ebf2"
    TILE_TEXT = "#005662"


def blend_hex(a: str, b: str, t: float) -> str:
    """Blend two #RRGGBB colors. t=0 -> a, t=1 -> b."""
    try:
        a = a.strip()
        b = b.strip()
        if not (a.startswith("#") and b.startswith("#") and len(a) == 7 and len(b) == 7):
            return a
        t = max(0.0, min(1.0, float(t)))
        ar, ag, ab = int(a[1:3], 16), int(a[3:5], 16), int(a[5:7], 16)
        br, bg, bb = int(b[1:3], 16), int(b[3:5], 16), int(b[5:7], 16)
        r = int(ar + (br - ar) * t)
        g = int(ag + (bg - ag) * t)
        bl = int(ab + (bb - ab) * t)
        return f"#{r:02X}{g:02X}{bl:02X}"
    except (TypeError, ValueError):
        return a


def tile_style(base: str = GameColors.TILE_BG, accent: str = GameColors.PRIMARY) -> str:
    """Stylesheet for a fragment tile; hover and pressed shades are blended from ``accent``."""
    hover = blend_hex(base, accent, 0.15)
    pressed = blend_hex(base, accent, 0.35)
    return f"""
        QPushButton {{
            background: {base};
            color: {GameColors.TILE_TEXT};
            border: 2px solid {GameColors.TILE_BORDER};
            border-radius: 12px;
            font-size: 20px;
            font-weight: 800;
            padding: 10px 6px;
        }}
        QPushButton:hover {{ background: {hover}; border-color: {accent}; }}
        QPushButton:pressed {{ background: {pressed}; }}
    """

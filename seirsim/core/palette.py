"""Chart colours for the light and dark Streamlit themes."""

from __future__ import annotations

LIGHT = {
    "infectious": "#C65D3B",
    "infectious_fill": "rgba(198, 93, 59, 0.1)",
    "recovered": "#1E1E1E",
    "recovered_fill": "rgba(30, 30, 30, 0.05)",
    "plateau": "#EDE6DA",
}

DARK = {
    "infectious": "rgb(255, 181, 158)",
    "infectious_fill": "rgba(255, 181, 158, 0.1)",
    "recovered": "rgb(224, 113, 77)",
    "recovered_fill": "rgba(224, 113, 77, 0.1)",
    "plateau": "rgb(250, 183, 162)",
}


def palette_for(theme_type: str | None) -> dict[str, str]:
    """Pick the palette for the viewer's active theme ("light", "dark" or unknown)."""
    return DARK if theme_type == "dark" else LIGHT

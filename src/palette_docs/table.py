from typing import Mapping

from .colors import hex_to_rgb, rgb_to_hsl
from .roles import Role, present_roles
from .swatches import swatch_filename

# ============================================================
# Presentation
# ============================================================

PALETTE_GLYPHS = {
    "dark": "🌑",
    "frost": "🧊",
    "ember": "🔥",
    "wraith": "👻",
}

SWATCH_BASE_URL = (
    "https://github.com/onedarktheme/onedark/blob/master/assets/palette/circles"
)

HEADER_CELLS = ["", "Role", "Hex", "RGB", "HSL"]


def display_name(palette_name: str) -> str:
    return palette_name[:1].upper() + palette_name[1:]


def swatch_url(palette_name: str, role: Role, base_url: str = SWATCH_BASE_URL) -> str:
    return f"{base_url}/{swatch_filename(palette_name, role)}"


# ============================================================
# Rendering
# ============================================================


def render_header() -> list[str]:
    return [
        "\t<tr>",
        *(f"\t\t<th>{cell}</th>" for cell in HEADER_CELLS),
        "\t</tr>",
    ]


def render_row(palette_name: str, role: Role, hex_color: str, base_url: str) -> list[str]:
    r, g, b = hex_to_rgb(hex_color)
    h, s, l = rgb_to_hsl(r, g, b)

    return [
        "\t<tr>",
        f'\t\t<td><img src="{swatch_url(palette_name, role, base_url)}" width="23"/></td>',
        f"\t\t<td>{role.label}</td>",
        f"\t\t<td><code>{hex_color}</code></td>",
        f"\t\t<td><code>rgb({r}, {g}, {b})</code></td>",
        f"\t\t<td><code>hsl({h}, {s}%, {l}%)</code></td>",
        "\t</tr>",
    ]


def render_table(
    palette_name: str,
    colors: Mapping[str, str],
    base_url: str = SWATCH_BASE_URL,
) -> str:
    """
    Render one palette as a collapsible HTML table.

    Any malformed hex aborts the whole table with ColorFormatError;
    nothing is returned for a partially rendered palette.
    """
    glyph = PALETTE_GLYPHS.get(palette_name, "")

    lines = [
        f"<details><summary>{glyph} {display_name(palette_name)}</summary>",
        "<table>",
        *render_header(),
    ]

    for role, hex_color in present_roles(colors):
        lines.extend(render_row(palette_name, role, hex_color, base_url))

    lines += ["</table>", "</details>"]
    return "\n".join(lines) + "\n"

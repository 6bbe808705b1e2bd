import json
import sys
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from .errors import DecodeError, InputError


@dataclass(frozen=True)
class Palette:
    name: str
    colors: Mapping[str, str]

    def __post_init__(self):
        object.__setattr__(self, "colors", MappingProxyType(dict(self.colors)))


# ------------------------------------------------------------
# Loading
# ------------------------------------------------------------


def read_input(path: Path | None = None) -> str:
    """
    Read the palette JSON from `path`, or from stdin when no path is given.
    """
    if path is None:
        try:
            return sys.stdin.read()
        except (OSError, UnicodeDecodeError) as e:
            raise InputError(f"failed to read input: {e}") from e

    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InputError(f"failed to open file: {e}") from e


def parse_palettes(text: str) -> list[Palette]:
    """
    Decode {palette_name: {key: hex}} JSON into palettes sorted by name.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise DecodeError(f"failed to parse JSON: {e}") from e

    if not isinstance(data, dict):
        raise DecodeError("failed to parse JSON: top level must be an object")

    palettes = []
    for name, colors in data.items():
        if not isinstance(colors, dict):
            raise DecodeError(f"failed to parse JSON: palette {name!r} must be an object")
        for key, value in colors.items():
            if not isinstance(value, str):
                raise DecodeError(
                    f"failed to parse JSON: {name}.{key} must be a string, "
                    f"got {type(value).__name__}"
                )
        palettes.append(Palette(name, colors))

    return sorted(palettes, key=lambda p: p.name)

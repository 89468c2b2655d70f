"""Default settings for pipesay.

There are no configuration files or environment variables; ``Config()``
holds the fixed values the CLI and the balloon renderer use.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class BorderGlyphs:
    """Border characters for each row position in a balloon"""

    top_left: str = "/"
    top_right: str = "\\"
    bottom_left: str = "\\"
    bottom_right: str = "/"
    side: str = "|"
    left_corner: str = "<"
    right_corner: str = ">"

    top_edge: str = "_"
    bottom_edge: str = "-"


@dataclass(frozen=True)
class Config:
    """pipesay settings"""

    tab_width: int = 4  # Each tab becomes this many spaces, regardless of column
    borders: BorderGlyphs = field(default_factory=BorderGlyphs)
    usage_lines: tuple[str, ...] = (
        "The command is intended to work with pipes.",
        "Usage: fortune | pipesay",
    )


DEFAULT_CONFIG = Config()

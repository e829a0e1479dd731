# Terminal escape sequences for the diagram.
#
# Every helper returns "\x1b[<code>m" + text + "\x1b[0m". Nothing here checks
# whether the terminal actually understands the codes.

import enum

RESET = "\x1b[0m"

# The xterm 256-colour palette ends with a 24-step grayscale ramp (232-255).
GRAYSCALE_BASE = 232
GRAYSCALE_LEVELS = 24


@enum.unique
class Style(enum.Enum):
    BLUE      = "34"
    BOLD      = "1"
    CYAN      = "36"
    GREEN     = "32"
    MAGENTA   = "35"
    RED       = "31"
    UNDERLINE = "4"
    YELLOW    = "33"

    @property
    def code(self):
        return self.value


class GrayScale:
    """A single step of the grayscale ramp, usable wherever a Style is."""

    def __init__(self, level):
        if not 0 <= level < GRAYSCALE_LEVELS:
            raise ValueError(f"grayscale level must be in 0..{GRAYSCALE_LEVELS - 1}, got {level}")
        self.level = level

    @property
    def code(self):
        return f"38;5;{GRAYSCALE_BASE + self.level}"

    def __eq__(self, other):
        return isinstance(other, GrayScale) and other.level == self.level

    def __hash__(self):
        return hash((GrayScale, self.level))

    def __repr__(self):
        return f"GrayScale({self.level})"


def colorize(style, text):
    return f"\x1b[{style.code}m{text}{RESET}"


def blue(text):
    return colorize(Style.BLUE, text)


def bold(text):
    return colorize(Style.BOLD, text)


def cyan(text):
    return colorize(Style.CYAN, text)


def green(text):
    return colorize(Style.GREEN, text)


def magenta(text):
    return colorize(Style.MAGENTA, text)


def red(text):
    return colorize(Style.RED, text)


def underline(text):
    return colorize(Style.UNDERLINE, text)


def yellow(text):
    return colorize(Style.YELLOW, text)


def grayscale(level, text):
    return colorize(GrayScale(level), text)

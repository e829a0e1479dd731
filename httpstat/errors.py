"""
Exceptions raised while turning curl output into a timing diagram.

Unparsable metric values and negative durations are not errors: the first is
recovered by the parser (value becomes 0.0), the second is rendered as-is.
"""


class HttpstatError(Exception):
    """Base class for every error this package raises on purpose."""


class MalformedMetricLine(HttpstatError, ValueError):
    """A metric line has no ':' separator or an empty label."""

    def __init__(self, line):
        self.line = line
        super().__init__(f"malformed metric line: {line!r} (expected 'label:value')")


class MissingRequiredPhase(HttpstatError, KeyError):
    """A timestamp was requested that curl never reported."""

    def __init__(self, name):
        self.name = name
        super().__init__(name)

    def __str__(self):
        return f"missing required metric: {self.name}"


class CurlError(HttpstatError):
    """curl could not be started or exited with a non-zero status."""

    def __init__(self, message, returncode=None, stderr=''):
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(message)


class ConflictingCurlOption(HttpstatError, ValueError):
    """A curl option passed by the user collides with one httpstat sets itself."""

    def __init__(self, option):
        self.option = option
        super().__init__(f"curl option {option} is managed by httpstat and cannot be passed")

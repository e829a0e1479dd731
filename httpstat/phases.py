# Fixed catalog of the diagram's phases.
#
# The top row holds the five durations, centered under their column titles.
# The bottom row holds the cumulative timestamps, left-justified after their
# "namelookup:"/"connect:"/... labels. The slot ids are the placeholder names
# used in template.py; changing one means changing the template text too.

import enum

# Column alignment of the template depends on this width.
SLOT_WIDTH = 7


@enum.unique
class Phase(enum.Enum):
    DNS_LOOKUP        = "a0000"
    TCP_CONNECTION    = "a0001"
    SSL_HANDSHAKE     = "a0002"
    SERVER_PROCESSING = "a0003"
    CONTENT_TRANSFER  = "a0004"
    NAME_LOOKUP       = "b0000"
    CONNECT           = "b0001"
    PRE_TRANSFER      = "b0002"
    START_TRANSFER    = "b0003"
    TOTAL             = "b0004"


TOP_ROW = (
    Phase.DNS_LOOKUP,
    Phase.TCP_CONNECTION,
    Phase.SSL_HANDSHAKE,
    Phase.SERVER_PROCESSING,
    Phase.CONTENT_TRANSFER,
)

BOTTOM_ROW = (
    Phase.NAME_LOOKUP,
    Phase.CONNECT,
    Phase.PRE_TRANSFER,
    Phase.START_TRANSFER,
    Phase.TOTAL,
)

# Phases that only exist in the HTTPS layout.
TLS_ONLY = frozenset((Phase.SSL_HANDSHAKE, Phase.PRE_TRANSFER))


def slot_id(phase):
    return phase.value


def is_top_row(phase):
    return phase in TOP_ROW


def align(phase, ms):
    """
    Format a millisecond count for the phase's slot.

    Args:
        phase (Phase): The slot the value is shown in
        ms (int): Milliseconds, negative values included

    Returns:
        str: "{ms}ms" padded to SLOT_WIDTH, centered for the top row and
        left-justified for the bottom row. Longer values are not cut.
    """
    elapsed = f"{ms}ms"
    if is_top_row(phase):
        return f"{elapsed:^{SLOT_WIDTH}}"
    return f"{elapsed:<{SLOT_WIDTH}}"

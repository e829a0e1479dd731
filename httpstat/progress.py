# Rendering of a single phase value into its colored diagram slot.

from collections import namedtuple

from .colors import colorize
from .phases import align, slot_id

RenderedSlot = namedtuple('RenderedSlot', ['slot_id', 'text'])


def render(phase, ms, style):
    """
    Render one phase value for the diagram.

    Negative values are shown as they are ("-5ms") so out-of-order timestamps
    stay visible in the output.
    """
    return RenderedSlot(slot_id(phase), colorize(style, align(phase, ms)))

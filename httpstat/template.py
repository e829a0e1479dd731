"""
Scheme-dependent text layout of the timing diagram.

Slots are filled one at a time with DiagramTemplate.insert() (the last value
written to a slot wins) and substituted once by format(). Slots that were
never filled render as empty strings; the column titles, labels and pipes
stay where they are.
"""
from .colors import Style
from .phases import BOTTOM_ROW, TLS_ONLY, TOP_ROW, Phase
from .progress import render

HTTP_TEMPLATE = """\
  DNS Lookup   TCP Connection   Server Processing   Content Transfer
[   {a0000}  |     {a0001}    |      {a0003}      |      {a0004}     ]
             |                |                   |                  |
    namelookup:{b0000}        |                   |                  |
                        connect:{b0001}           |                  |
                                      starttransfer:{b0003}          |
                                                                 total:{b0004}"""

HTTPS_TEMPLATE = """\
  DNS Lookup   TCP Connection   SSL Handshake   Server Processing   Content Transfer
[   {a0000}  |     {a0001}    |    {a0002}    |      {a0003}      |      {a0004}     ]
             |                |               |                   |                  |
    namelookup:{b0000}        |               |                   |                  |
                        connect:{b0001}       |                   |                  |
                                    pretransfer:{b0002}           |                  |
                                                      starttransfer:{b0003}          |
                                                                                 total:{b0004}"""


class _EmptyDefault(dict):
    def __missing__(self, key):
        return ''


class DiagramTemplate:
    def __init__(self, scheme):
        self.scheme = scheme
        self._slots = {}

    @property
    def is_https(self):
        return self.scheme == 'https'

    def insert(self, slot_id, text):
        self._slots[slot_id] = text

    def add(self, rendered):
        """Insert a RenderedSlot returned by progress.render()."""
        self.insert(rendered.slot_id, rendered.text)

    def format(self):
        template = HTTPS_TEMPLATE if self.is_https else HTTP_TEMPLATE
        return template.format_map(_EmptyDefault(self._slots))


def phase_values(record):
    """Map every Phase to its millisecond value in a TimingRecord."""
    return {
        Phase.DNS_LOOKUP: record.range_dns,
        Phase.TCP_CONNECTION: record.range_connection,
        Phase.SSL_HANDSHAKE: record.range_ssl,
        Phase.SERVER_PROCESSING: record.range_server,
        Phase.CONTENT_TRANSFER: record.range_transfer,
        Phase.NAME_LOOKUP: record.time_namelookup,
        Phase.CONNECT: record.time_connect,
        Phase.PRE_TRANSFER: record.time_pretransfer,
        Phase.START_TRANSFER: record.time_starttransfer,
        Phase.TOTAL: record.time_total,
    }


def build_diagram(record, scheme, style=Style.CYAN):
    """
    Render the full diagram for a TimingRecord.

    Args:
        record (TimingRecord): Parsed curl metrics
        scheme (str): URL scheme; 'https' adds the SSL Handshake column
        style: Color applied to every value (a Style or GrayScale)

    Returns:
        str: The multi-line diagram
    """
    template = DiagramTemplate(scheme)
    values = phase_values(record)
    for phase in TOP_ROW + BOTTOM_ROW:
        if phase in TLS_ONLY and not template.is_https:
            continue
        template.add(render(phase, values[phase], style))
    return template.format()

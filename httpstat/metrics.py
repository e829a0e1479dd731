"""
Parse curl's write-out metrics and derive per-phase durations.

curl reports cumulative timestamps in seconds, all measured from the start of
the request:

    time_namelookup -> time_connect -> time_appconnect -> time_pretransfer
        -> time_starttransfer -> time_total

Each timestamp is converted to whole milliseconds (truncated, never rounded)
before any subtraction, so the durations always add up to the timestamps the
diagram shows.
"""
import math
from collections.abc import Mapping
from decimal import Decimal
from types import MappingProxyType

from .errors import MalformedMetricLine, MissingRequiredPhase

REQUIRED_METRICS = (
    'time_namelookup',
    'time_connect',
    'time_appconnect',
    'time_pretransfer',
    'time_starttransfer',
    'time_total',
)
OPTIONAL_METRICS = ('speed_download', 'speed_upload')


def parse_value(raw):
    """Parse a metric value; anything that is not a finite number becomes 0.0."""
    try:
        value = float(raw)
    except ValueError:
        return 0.0
    if not math.isfinite(value):
        return 0.0
    return value


def parse_metrics(text):
    """
    Turn a block of 'label:value' lines into a TimingRecord.

    Args:
        text (str): curl's write-out output, one metric per line

    Returns:
        TimingRecord: The parsed metrics

    Raises:
        MalformedMetricLine: A line has no ':' or an empty label
    """
    values = {}
    for line in text.split('\n'):
        if not line.strip():
            continue
        label, sep, raw = line.partition(':')
        label = label.strip()
        if not sep or not label:
            raise MalformedMetricLine(line)
        values[label] = parse_value(raw.strip())
    return TimingRecord(values)


def to_ms(seconds):
    seconds = float(seconds)
    if not math.isfinite(seconds):
        return 0
    # Go through the shortest decimal repr so 2.512 becomes 2512, not 2511.
    return int(Decimal(repr(seconds)) * 1000)


class TimingRecord(Mapping):
    """Read-only mapping of metric name to seconds, with millisecond accessors."""

    def __init__(self, values):
        self._values = MappingProxyType(dict(values))

    def __getitem__(self, name):
        return self._values[name]

    def __iter__(self):
        return iter(self._values)

    def __len__(self):
        return len(self._values)

    def __repr__(self):
        return f"TimingRecord({dict(self._values)!r})"

    def ms(self, name):
        """Return metric `name` in whole milliseconds."""
        try:
            seconds = self._values[name]
        except KeyError:
            raise MissingRequiredPhase(name) from None
        return to_ms(seconds)

    # Cumulative timestamps (ms)

    @property
    def time_namelookup(self):
        return self.ms('time_namelookup')

    @property
    def time_connect(self):
        return self.ms('time_connect')

    @property
    def time_appconnect(self):
        return self.ms('time_appconnect')

    @property
    def time_pretransfer(self):
        return self.ms('time_pretransfer')

    @property
    def time_starttransfer(self):
        return self.ms('time_starttransfer')

    @property
    def time_total(self):
        return self.ms('time_total')

    # Durations (ms)

    @property
    def range_dns(self):
        return self.time_namelookup

    @property
    def range_connection(self):
        return self.time_connect - self.time_namelookup

    @property
    def range_ssl(self):
        return self.time_pretransfer - self.time_connect

    @property
    def range_server(self):
        return self.time_starttransfer - self.time_pretransfer

    @property
    def range_transfer(self):
        return self.time_total - self.time_starttransfer

    dns = range_dns
    tcp_connect = range_connection
    tls_handshake = range_ssl
    server_processing = range_server
    content_transfer = range_transfer

    def durations(self):
        return {
            'dns': self.range_dns,
            'tcp_connect': self.range_connection,
            'tls_handshake': self.range_ssl,
            'server_processing': self.range_server,
            'content_transfer': self.range_transfer,
        }

    def negative_ranges(self, include_tls=True):
        """Durations below zero, which means curl reported timestamps out of order."""
        found = {}
        for name, ms in self.durations().items():
            if name == 'tls_handshake' and not include_tls:
                continue
            if ms < 0:
                found[name] = ms
        return found

    # Transfer speed (bytes per second); curl only reports these on request.

    @property
    def speed_download(self):
        return self._values.get('speed_download', 0.0)

    @property
    def speed_upload(self):
        return self._values.get('speed_upload', 0.0)

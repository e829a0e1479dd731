"""Terminal diagram of the phase timings of one curl request."""

__version__ = '0.1.0'

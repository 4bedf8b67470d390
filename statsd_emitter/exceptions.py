"""
Statsd client exceptions
"""


class StatsdError(Exception):
    """Base exception class"""
    pass


class TransportConstructionError(StatsdError):
    """The UDP transport to the daemon could not be opened"""
    pass


class InvalidArgumentError(StatsdError, ValueError):
    """Malformed batch of metric names or sample rate"""
    pass

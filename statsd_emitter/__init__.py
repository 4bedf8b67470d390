"""Best-effort statsd client: counters and timers over UDP"""
from .client import StatsdClient
from .config import StatsdConfig, default_config
from .exceptions import InvalidArgumentError, StatsdError, TransportConstructionError
from .metrics import NameList, SendResult, SendStatus, SingleName
from .transport import Transport, UDPTransport

__version__ = "1.0.0"

__all__ = [
    'StatsdClient',
    'StatsdConfig',
    'default_config',
    'InvalidArgumentError',
    'StatsdError',
    'TransportConstructionError',
    'NameList',
    'SendResult',
    'SendStatus',
    'SingleName',
    'Transport',
    'UDPTransport',
]

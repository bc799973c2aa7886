"""
PingRunner - ping wrapper with a serialized async probe engine

Runs the system `ping` binary, scrapes its output into structured
responses, and streams repeated probes through a single worker thread.
"""

__version__ = "1.0.0"
__author__ = "PingRunner"

from .models import Option, PingResponse
from .options import OptionSet, build_command, count, deadline, interval, timeout
from .ping import Ping, PingBuilder, PingConfig

__all__ = [
    'Option', 'OptionSet', 'PingConfig', 'PingResponse',
    'Ping', 'PingBuilder', 'build_command',
    'interval', 'count', 'timeout', 'deadline',
]

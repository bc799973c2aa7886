"""
Probe execution for PingRunner
"""

from .base import BaseRunner
from .runner import ProcessRunner
from .engine import EngineState, ProbeEngine, ProbeWorker

__all__ = ['BaseRunner', 'ProcessRunner', 'EngineState', 'ProbeEngine', 'ProbeWorker']

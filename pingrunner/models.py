"""
Data models for PingRunner
"""

import time
from dataclasses import dataclass, field
from typing import Optional

from .parser import is_success, parse_reply


@dataclass(frozen=True)
class Option:
    """
    A single ping command-line flag.
    
    Identity is the flag alone: two options with the same flag are equal
    whatever their values, so adding one to an OptionSet replaces the other.
    """
    flag: str
    value: Optional[int] = field(default=None, compare=False)
    
    def __post_init__(self):
        if not self.flag:
            raise ValueError("option flag must not be empty")
    
    def render(self) -> str:
        """Render as it appears on the command line (`-c3`)"""
        if self.value is None:
            return self.flag
        return f"{self.flag}{self.value}"


def now_ms() -> int:
    """Milliseconds since the epoch"""
    return int(time.time() * 1000)


def target_of(command: Optional[str]) -> str:
    """Destination of a built command: everything after the last space"""
    if not command:
        return ''
    return command.rstrip().rsplit(' ', 1)[-1]


@dataclass(frozen=True)
class PingResponse:
    """Result of one ping invocation, successful or not"""
    target: str
    std_out: str
    err_out: str
    timestamp: int  # ms since epoch, taken when the request started
    success: bool = field(init=False)
    icmp_seq: int = field(init=False, default=0)
    ttl: int = field(init=False, default=0)
    duration: float = field(init=False, default=0.0)  # ms
    
    def __post_init__(self):
        object.__setattr__(self, 'success', is_success(self.std_out))
        
        fields = parse_reply(self.std_out)
        if fields:
            object.__setattr__(self, 'icmp_seq', fields.icmp_seq)
            object.__setattr__(self, 'ttl', fields.ttl)
            object.__setattr__(self, 'duration', fields.duration)
    
    def to_dict(self) -> dict:
        return {
            "target": self.target,
            "timestamp": self.timestamp,
            "success": self.success,
            "icmp_seq": self.icmp_seq,
            "ttl": self.ttl,
            "duration": self.duration,
            "stdout": self.std_out,
            "stderr": self.err_out,
        }
    
    def __str__(self) -> str:
        success = str(self.success).lower()
        return (
            '"PingResponse": { '
            f'"target": "{self.target}", '
            f'"timestamp": "{self.timestamp}", '
            f'"success": "{success}", '
            f'"icmp_seq": "{self.icmp_seq}", '
            f'"ttl": "{self.ttl}", '
            f'"duration": "{self.duration}" '
            '}'
        )

"""
Reply parsing for Linux iputils `ping` output
"""

import logging
from dataclasses import dataclass
from typing import Optional


logger = logging.getLogger(__name__)

# Only printed once the statistics block is reached with at least one reply
SUCCESS_MARKER = "rtt min/avg/max/mdev = "

ICMP_SEQ_MARKER = "icmp_seq="
TTL_MARKER = "ttl="
TIME_MARKER = "time="


@dataclass(frozen=True)
class ReplyFields:
    """Numeric fields scraped from the first echo reply line"""
    icmp_seq: int
    ttl: int
    duration: float  # milliseconds


def is_success(std_out: str) -> bool:
    """Check whether ping reported round-trip statistics"""
    return SUCCESS_MARKER in std_out


def _value_after(text: str, marker: str) -> Optional[str]:
    """Return the text between `marker` and the next space, or None"""
    start = text.find(marker)
    if start < 0:
        return None
    start += len(marker)
    end = text.find(' ', start)
    if end < 0:
        return None
    return text[start:end]


def parse_reply(std_out: str) -> Optional[ReplyFields]:
    """
    Extract icmp_seq, ttl and time from ping output.
    
    Extraction is all-or-nothing: a missing marker or a malformed value
    discards every field rather than keeping the ones parsed so far.
    
    Args:
        std_out: Captured standard output of ping
    
    Returns:
        ReplyFields, or None when the output is not a successful reply
    """
    if not is_success(std_out):
        return None
    
    raw_seq = _value_after(std_out, ICMP_SEQ_MARKER)
    raw_ttl = _value_after(std_out, TTL_MARKER)
    raw_time = _value_after(std_out, TIME_MARKER)
    
    if raw_seq is None or raw_ttl is None or raw_time is None:
        logger.debug("reply markers missing in ping output")
        return None
    
    try:
        return ReplyFields(
            icmp_seq=int(raw_seq),
            ttl=int(raw_ttl),
            duration=float(raw_time)
        )
    except ValueError as e:
        logger.debug("malformed reply fields: %s", e)
        return None

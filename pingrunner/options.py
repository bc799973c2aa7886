"""
Ping command-line options and command assembly
"""

from typing import Iterator, Optional, Union

from .models import Option


INTERVAL = '-i'  # seconds between packets
COUNT = '-c'     # packets to send
TIMEOUT = '-W'   # seconds to wait for each reply
DEADLINE = '-w'  # seconds before ping exits regardless


def interval(seconds: int) -> Option:
    return Option(INTERVAL, seconds)


def count(packets: int) -> Option:
    return Option(COUNT, packets)


def timeout(seconds: int) -> Option:
    return Option(TIMEOUT, seconds)


def deadline(seconds: int) -> Option:
    return Option(DEADLINE, seconds)


class OptionSet:
    """
    Options keyed by flag.
    
    Holds at most one Option per flag. Iteration follows insertion order;
    replacing an option keeps the position of the one it replaces.
    """
    
    def __init__(self, options=()):
        self._options: dict[str, Option] = {}
        for option in options:
            self.add(option)
    
    @classmethod
    def defaults(cls) -> 'OptionSet':
        """timeout=1 second, count=1"""
        return cls([timeout(1), count(1)])
    
    def add(self, option: Option):
        """Insert, or replace the option with the same flag"""
        self._options[option.flag] = option
    
    def remove(self, option: Union[Option, str]):
        """Remove by flag; missing flags are ignored"""
        flag = option.flag if isinstance(option, Option) else option
        self._options.pop(flag, None)
    
    def clear(self):
        self._options.clear()
    
    def get(self, flag: str) -> Optional[Option]:
        return self._options.get(flag)
    
    def copy(self) -> 'OptionSet':
        return OptionSet(self._options.values())
    
    def __contains__(self, option) -> bool:
        flag = option.flag if isinstance(option, Option) else option
        return flag in self._options
    
    def __iter__(self) -> Iterator[Option]:
        return iter(list(self._options.values()))
    
    def __len__(self) -> int:
        return len(self._options)
    
    def __repr__(self) -> str:
        return f"OptionSet({list(self._options.values())!r})"


def build_command(destination: str, options: OptionSet) -> str:
    """
    Assemble the argument string that follows the ping executable.
    
    Every option contributes a leading space and its rendered flag, the
    destination comes last: `" -W1 -c1 127.0.0.1"`.
    """
    parts = [f" {option.render()}" for option in options]
    parts.append(f" {destination}")
    return ''.join(parts)

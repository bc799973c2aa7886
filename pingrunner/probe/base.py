"""
Abstract base class for command runners
"""

from abc import ABC, abstractmethod
from typing import Optional

from ..models import PingResponse


EMPTY_COMMAND_ERROR = "arguments should not be empty"


class BaseRunner(ABC):
    """
    Executes one ping command line and returns its response.
    
    Implementations must never raise: every failure is reported through
    the returned PingResponse, which is what lets the probe worker loop
    without error handling of its own.
    """
    
    @abstractmethod
    def run(self, command: Optional[str]) -> PingResponse:
        """
        Run the command and wait for it to finish.
        
        Args:
            command: Argument string produced by build_command
        
        Returns:
            PingResponse describing the attempt
        """
        pass
    
    def close(self):
        """Clean up resources"""
        pass
    
    def __enter__(self):
        return self
    
    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

"""
Subprocess-backed runner for the system ping binary
"""

import logging
import shlex
import subprocess
from typing import Optional

from ..models import PingResponse, now_ms, target_of
from .base import BaseRunner, EMPTY_COMMAND_ERROR


logger = logging.getLogger(__name__)


class ProcessRunner(BaseRunner):
    """
    Runs `<executable><command>` as a child process.
    
    Standard output and standard error are read to completion before the
    response is built. Launch and I/O failures end up in `err_out`.
    """
    
    DEFAULT_EXECUTABLE = 'ping'
    
    def __init__(self, executable: str = DEFAULT_EXECUTABLE,
                 timeout: Optional[float] = None):
        self.executable = executable
        self.timeout = timeout
    
    def run(self, command: Optional[str]) -> PingResponse:
        timestamp = now_ms()
        
        if not command:
            return PingResponse(
                target='',
                std_out='',
                err_out=EMPTY_COMMAND_ERROR,
                timestamp=timestamp
            )
        
        std_out = ''
        err_out = ''
        
        try:
            args = shlex.split(self.executable + command)
            with subprocess.Popen(
                args,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True
            ) as proc:
                try:
                    std_out, err_out = proc.communicate(timeout=self.timeout)
                except subprocess.TimeoutExpired:
                    proc.kill()
                    std_out, err_out = proc.communicate()
                    err_out = err_out or ''
                    if err_out and not err_out.endswith('\n'):
                        err_out += '\n'
                    err_out += f"{self.executable} timed out after {self.timeout}s"
        except (OSError, ValueError, subprocess.SubprocessError) as e:
            err_out = str(e)
        finally:
            logger.debug("args: %s", command)
            if std_out:
                logger.debug("stdOut: %s", std_out)
            if err_out:
                logger.warning("errOut: %s", err_out)
        
        return PingResponse(
            target=target_of(command),
            std_out=std_out or '',
            err_out=err_out or '',
            timestamp=timestamp
        )

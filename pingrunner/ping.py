"""
Ping facade: configuration, synchronous and async probing
"""

from dataclasses import dataclass, field
from typing import Optional

from .models import Option, PingResponse
from .options import OptionSet, build_command
from .probe.base import BaseRunner
from .probe.engine import EngineState, ProbeEngine, ResponseCallback
from .probe.runner import ProcessRunner


DEFAULT_DESTINATION = '127.0.0.1'


@dataclass
class PingConfig:
    """Settings used to create a Ping"""
    destination: str = DEFAULT_DESTINATION
    options: OptionSet = field(default_factory=OptionSet.defaults)
    executable: str = ProcessRunner.DEFAULT_EXECUTABLE
    process_timeout: Optional[float] = None  # seconds, None waits for ping to exit


class Ping:
    """
    Probe one destination with the system ping.
    
    A Ping owns its options and its async engine; it is meant to be
    driven by one caller. Running run_sync() while async probes are
    queued is allowed but the two paths share the same runner state,
    check `busy` first if overlap matters.
    """
    
    def __init__(self, config: Optional[PingConfig] = None,
                 runner: Optional[BaseRunner] = None):
        config = config or PingConfig()
        self.destination = config.destination
        self.options = config.options.copy()
        self.runner = runner or ProcessRunner(
            executable=config.executable,
            timeout=config.process_timeout
        )
        self.state = EngineState()
        self.engine = ProbeEngine(self.runner, self.state)
    
    @classmethod
    def from_config(cls, config: PingConfig,
                    runner: Optional[BaseRunner] = None) -> 'Ping':
        return cls(config, runner=runner)
    
    @property
    def busy(self) -> bool:
        """True while a probe is executing"""
        return self.state.busy
    
    def add_option(self, option: Option):
        """Add or replace an option"""
        self.options.add(option)
    
    def remove_option(self, option):
        self.options.remove(option)
    
    def clear_options(self):
        self.options.clear()
    
    def build_request(self) -> str:
        """Argument string for the current destination and options"""
        return build_command(self.destination, self.options)
    
    def run_sync(self, command: Optional[str] = None) -> PingResponse:
        """
        Run one probe on the calling thread.
        
        Args:
            command: Argument string; built from the current configuration
                when omitted
        
        Returns:
            PingResponse, never raises for probe failures
        """
        if command is None:
            command = self.build_request()
        
        with self.state.running():
            return self.runner.run(command)
    
    def run_async(self, callback: ResponseCallback,
                  command: Optional[str] = None):
        """
        Queue one probe for the background worker.
        
        Blocks while two probes are already pending. The callback runs on
        the worker thread.
        """
        if command is None:
            command = self.build_request()
        
        self.engine.submit(command, callback)
    
    def destroy(self, graceful: bool = False, wait: bool = False,
                timeout: Optional[float] = None):
        """Stop async probing; a later run_async() starts a new worker"""
        self.engine.stop(graceful=graceful, wait=wait, timeout=timeout)
    
    def close(self):
        self.destroy()
        self.runner.close()
    
    def __enter__(self):
        return self
    
    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False


class PingBuilder:
    """
    Fluent construction of a Ping.
    
        ping = (PingBuilder()
                .destination('8.8.8.8')
                .add_option(count(3))
                .build())
    """
    
    def __init__(self):
        self._config = PingConfig()
        self._runner: Optional[BaseRunner] = None
    
    def destination(self, dest: str) -> 'PingBuilder':
        self._config.destination = dest
        return self
    
    def add_option(self, option: Option) -> 'PingBuilder':
        self._config.options.add(option)
        return self
    
    def executable(self, executable: str) -> 'PingBuilder':
        self._config.executable = executable
        return self
    
    def process_timeout(self, seconds: Optional[float]) -> 'PingBuilder':
        self._config.process_timeout = seconds
        return self
    
    def runner(self, runner: BaseRunner) -> 'PingBuilder':
        self._runner = runner
        return self
    
    def build(self) -> Ping:
        return Ping.from_config(self._config, runner=self._runner)

"""
Serialized async probe engine

One worker thread per engine pulls command lines from a bounded queue
and runs them one at a time. Submitters block once the queue is full,
so at most one probe is in flight and one is waiting.
"""

import itertools
import logging
import queue
import threading
import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Optional, Union

from ..models import PingResponse
from .base import BaseRunner


logger = logging.getLogger(__name__)

QUEUE_CAPACITY = 2

# how often a blocked submitter checks whether the worker was stopped
PUT_POLL_INTERVAL = 0.1

ResponseCallback = Callable[[PingResponse], None]


@dataclass(frozen=True)
class Command:
    """Queue item: a command line to run"""
    line: Optional[str]


@dataclass(frozen=True)
class Shutdown:
    """Queue item: ask the worker to exit"""
    generation: int


QueueItem = Union[Command, Shutdown]


class EngineState:
    """
    State shared between a Ping, its engine and the engine's workers.
    
    `busy` is advisory: it reports whether a probe is executing, through
    either the synchronous or the async path.
    """
    
    def __init__(self):
        self._idle = threading.Event()
        self._idle.set()
    
    @property
    def busy(self) -> bool:
        return not self._idle.is_set()
    
    @contextmanager
    def running(self):
        """Mark a probe as executing for the duration of the block"""
        self._idle.clear()
        try:
            yield
        finally:
            self._idle.set()
    
    def wait_idle(self, timeout: Optional[float] = None) -> bool:
        """Block until no probe is executing"""
        return self._idle.wait(timeout)


class ProbeWorker(threading.Thread):
    """
    Worker thread draining one engine's queue.
    
    The callback is fixed at construction. The worker only exits through
    stop() or drain(); a failing probe or a raising callback does not
    end the loop.
    """
    
    _ids = itertools.count(1)
    
    def __init__(self, runner: BaseRunner, state: EngineState,
                 callback: ResponseCallback,
                 capacity: int = QUEUE_CAPACITY):
        super().__init__(name=f"pingrunner-worker-{next(self._ids)}", daemon=True)
        self.runner = runner
        self.state = state
        self.callback = callback
        self._queue: queue.Queue[QueueItem] = queue.Queue(maxsize=capacity)
        self._stopped = threading.Event()
        self._generation = 0
    
    @property
    def stopped(self) -> bool:
        return self._stopped.is_set()
    
    @property
    def pending(self) -> int:
        """Items waiting in the queue"""
        return self._queue.qsize()
    
    def put(self, command: Optional[str], timeout: Optional[float] = None):
        """
        Enqueue a command, blocking while the queue is full.
        
        Returns without queueing if the worker is stopped while waiting.
        
        Raises:
            queue.Full: `timeout` elapsed with the queue still full
        """
        deadline = None if timeout is None else time.monotonic() + timeout
        
        while not self.stopped:
            wait = PUT_POLL_INTERVAL
            if deadline is not None:
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    raise queue.Full
                wait = min(wait, remaining)
            try:
                self._queue.put(Command(command), timeout=wait)
                return
            except queue.Full:
                continue
        
        logger.debug("%s stopped, dropped %r", self.name, command)
    
    def stop(self):
        """
        Stop immediately.
        
        The probe in flight runs to completion but its response is not
        delivered. Queued commands are discarded, which also releases
        submitters blocked on a full queue.
        """
        self._stopped.set()
        while True:
            self._discard_pending()
            try:
                self._queue.put_nowait(Shutdown(self._generation))
                return
            except queue.Full:
                # a released submitter refilled the queue
                continue
    
    def drain(self, timeout: Optional[float] = None):
        """
        Stop after every command already queued has been delivered.
        
        Falls back to stop() when the queue stays full past `timeout`.
        """
        try:
            self._queue.put(Shutdown(self._generation), timeout=timeout)
        except queue.Full:
            logger.warning("%s did not drain within %ss, stopping now", self.name, timeout)
            self.stop()
    
    def _discard_pending(self):
        while True:
            try:
                self._queue.get_nowait()
            except queue.Empty:
                return
    
    def resume(self):
        """Undo stop() on a worker that has not exited yet"""
        self._generation += 1
        self._stopped.clear()
    
    def run(self):
        logger.debug("%s started", self.name)
        
        while not self.stopped:
            item = self._queue.get()
            
            if isinstance(item, Shutdown):
                if item.generation == self._generation:
                    break
                # left over from a stop() that was later resumed
                continue
            
            if self.stopped:
                break
            
            self.state.wait_idle()
            with self.state.running():
                response = self.runner.run(item.line)
            
            if self.stopped:
                break
            
            self._deliver(response)
        
        logger.debug("%s exited", self.name)
    
    def _deliver(self, response: PingResponse):
        try:
            self.callback(response)
        except Exception:
            logger.exception("response callback failed for %s", response.target)


class ProbeEngine:
    """
    Async probe scheduler.
    
    Commands submitted from any thread are executed in order by a single
    worker. The first submit() starts the worker; stop() tears it down
    eagerly so the next submit() starts a fresh one.
    """
    
    def __init__(self, runner: BaseRunner, state: Optional[EngineState] = None,
                 capacity: int = QUEUE_CAPACITY):
        self.runner = runner
        self.state = state or EngineState()
        self.capacity = capacity
        self._worker: Optional[ProbeWorker] = None
        self._lock = threading.Lock()
    
    @property
    def worker(self) -> Optional[ProbeWorker]:
        return self._worker
    
    @property
    def running(self) -> bool:
        worker = self._worker
        return worker is not None and worker.is_alive() and not worker.stopped
    
    @property
    def busy(self) -> bool:
        return self.state.busy
    
    def submit(self, command: Optional[str], callback: ResponseCallback,
               timeout: Optional[float] = None):
        """
        Queue a command for the worker.
        
        Blocks while two commands are already pending. `callback` is only
        used when this call creates the worker; an existing worker keeps
        the callback it was started with.
        
        Raises:
            queue.Full: `timeout` elapsed with the queue still full
        """
        if not callable(callback):
            raise TypeError("callback must be callable")
        
        with self._lock:
            worker = self._worker
            if worker is None or not worker.is_alive():
                worker = ProbeWorker(self.runner, self.state, callback, self.capacity)
                self._worker = worker
                worker.put(command)
                worker.start()
                return
            
            if worker.stopped:
                worker.resume()
        
        worker.put(command, timeout=timeout)
    
    def stop(self, graceful: bool = False, wait: bool = False,
             timeout: Optional[float] = None):
        """
        Stop the worker and forget it.
        
        Args:
            graceful: Deliver the commands already queued before exiting;
                falls back to an immediate stop if the queue stays full
                past `timeout`
            wait: Join the worker thread before returning
            timeout: Upper bound for the graceful enqueue and the join
        """
        with self._lock:
            worker, self._worker = self._worker, None
        
        if worker is None:
            return
        
        if graceful:
            worker.drain(timeout=timeout)
        else:
            worker.stop()
        
        if wait and worker.is_alive() and worker is not threading.current_thread():
            worker.join(timeout)

import threading
import time
from collections import deque

import pytest

from pingrunner.models import PingResponse, now_ms, target_of
from pingrunner.probe.base import BaseRunner


REPLY_OUTPUT = (
    "PING 8.8.8.8 (8.8.8.8) 56(84) bytes of data.\n"
    "64 bytes from 8.8.8.8: icmp_seq=4 ttl=55 time=23.4 ms\n"
    "\n"
    "--- 8.8.8.8 ping statistics ---\n"
    "1 packets transmitted, 1 received, 0% packet loss, time 0ms\n"
    "rtt min/avg/max/mdev = 20/23/25/1 ms\n"
)

LOSS_OUTPUT = (
    "PING 10.255.255.1 (10.255.255.1) 56(84) bytes of data.\n"
    "\n"
    "--- 10.255.255.1 ping statistics ---\n"
    "1 packets transmitted, 0 received, 100% packet loss, time 0ms\n"
)


class FakeRunner(BaseRunner):
    """
    Scripted runner.
    
    Returns queued stdout strings in order (REPLY_OUTPUT once exhausted)
    and records every command it was given. When `gate` is set, each run
    blocks until the gate is released.
    """
    
    def __init__(self, outputs=(), delay: float = 0.002, gate: bool = False):
        self.outputs = deque(outputs)
        self.delay = delay
        self.commands = []
        self.started = threading.Semaphore(0)
        self.gate = threading.Event() if gate else None
        self.closed = False
    
    def run(self, command):
        timestamp = now_ms()
        self.commands.append(command)
        self.started.release()
        if self.gate is not None:
            self.gate.wait(5)
        time.sleep(self.delay)
        std_out = self.outputs.popleft() if self.outputs else REPLY_OUTPUT
        return PingResponse(
            target=target_of(command),
            std_out=std_out,
            err_out='',
            timestamp=timestamp
        )
    
    def close(self):
        self.closed = True


@pytest.fixture
def fake_runner():
    return FakeRunner()


@pytest.fixture
def gated_runner():
    runner = FakeRunner(gate=True)
    yield runner
    runner.gate.set()

import sys
import threading
from pathlib import Path
from typing import Optional

import click
from rich.console import Console

from . import __version__
from .log import setup_logging
from .models import PingResponse
from .options import OptionSet, count, deadline, interval, timeout
from .output import ConsoleOutput, JsonExporter
from .ping import Ping, PingConfig
from .resolver import TargetResolver


console = Console()


def build_options(count_: Optional[int], interval_: Optional[int],
                  timeout_: Optional[int], deadline_: Optional[int]) -> OptionSet:
    """Default options overridden by whatever was given on the command line"""
    options = OptionSet.defaults()
    if timeout_ is not None:
        options.add(timeout(timeout_))
    if count_ is not None:
        options.add(count(count_))
    if interval_ is not None:
        options.add(interval(interval_))
    if deadline_ is not None:
        options.add(deadline(deadline_))
    return options


def probe_repeatedly(ping: Ping, repeat: int, on_response) -> list[PingResponse]:
    """
    Push `repeat` probes through the async engine and wait for all of them.
    
    Submission blocks on the engine's bounded queue, so this thread never
    runs more than two probes ahead of the worker.
    """
    responses: list[PingResponse] = []
    done = threading.Event()
    
    def collect(response: PingResponse):
        responses.append(response)
        on_response(response)
        if len(responses) >= repeat:
            done.set()
    
    try:
        for _ in range(repeat):
            ping.run_async(collect)
        done.wait()
    finally:
        ping.destroy()
    
    return responses


@click.command()
@click.argument('target')
@click.option('-c', '--count', 'count_', type=click.IntRange(min=1),
              help='Echo requests per probe (default: 1)')
@click.option('-i', '--interval', 'interval_', type=click.IntRange(min=0),
              help='Seconds between echo requests')
@click.option('-W', '--timeout', 'timeout_', type=click.IntRange(min=1),
              help='Seconds to wait for each reply (default: 1)')
@click.option('-w', '--deadline', 'deadline_', type=click.IntRange(min=1),
              help='Seconds before ping exits regardless of replies')
@click.option('-r', '--repeat', default=1, type=click.IntRange(min=1),
              help='Number of probes; more than one streams them through '
                   'the async engine (default: 1)')
@click.option('--dns/--no-dns', default=False,
              help='Show resolved address and PTR name (default: disabled)')
@click.option('--json', 'json_path', type=click.Path(),
              help='Export responses to JSON file')
@click.option('-v', '--verbose', is_flag=True,
              help='Log commands and raw ping output')
@click.version_option(version=__version__)
def main(target: str, count_: Optional[int], interval_: Optional[int],
         timeout_: Optional[int], deadline_: Optional[int], repeat: int,
         dns: bool, json_path: Optional[str], verbose: bool):
    """
    PingRunner - system ping with structured results.
    
    Probe TARGET (IP address or hostname) with the system ping binary
    and report sequence number, TTL and round-trip time.
    
    Examples:
    
        pingrunner 8.8.8.8
        
        pingrunner example.com -c 3 -W 2
        
        pingrunner 1.1.1.1 --repeat 10 --json out.json
    """
    setup_logging(verbose)
    
    output = ConsoleOutput(console)
    config = PingConfig(
        destination=target,
        options=build_options(count_, interval_, timeout_, deadline_)
    )
    
    try:
        with Ping.from_config(config) as ping:
            command = ping.build_request()
            
            resolved_ip = ptr = None
            if dns:
                resolver = TargetResolver()
                resolved_ip = resolver.resolve(target)
                if resolved_ip is None:
                    output.print_warning(f"Cannot resolve '{target}'")
                else:
                    ptr = resolver.reverse(resolved_ip)
            
            output.print_header(
                target=target,
                command=command,
                resolved_ip=resolved_ip,
                ptr=ptr,
                probes=repeat
            )
            
            if repeat == 1:
                responses = [ping.run_sync()]
                output.print_response(responses[0])
            else:
                responses = probe_repeatedly(ping, repeat, output.print_response)
        
        output.print_separator()
        output.print_summary(responses)
        
        if json_path:
            json_file = Path(json_path)
            JsonExporter().export(target, command, responses, json_file)
            console.print(f"\n[dim]Results exported to:[/] {json_file.absolute()}")
        
        sys.exit(0 if any(r.success for r in responses) else 1)
    
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted[/]")
        sys.exit(130)
    except OSError as e:
        output.print_error(str(e))
        sys.exit(1)


if __name__ == '__main__':
    main()

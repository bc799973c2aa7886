import json

from rich.console import Console

from pingrunner.models import PingResponse
from pingrunner.output import ConsoleOutput, JsonExporter

from conftest import LOSS_OUTPUT, REPLY_OUTPUT


def responses():
    return [
        PingResponse('8.8.8.8', REPLY_OUTPUT, '', 1700000000000),
        PingResponse('8.8.8.8', LOSS_OUTPUT, 'unreachable', 1700000001000),
    ]


def test_json_export(tmp_path):
    path = tmp_path / 'out' / 'probes.json'
    data = JsonExporter().export('8.8.8.8', ' -W1 -c1 8.8.8.8', responses(), path)
    
    assert data['meta']['generator'] == 'PingRunner'
    assert data['summary'] == {'sent': 2, 'succeeded': 1, 'avg_time_ms': 23.4}
    assert data['probes'][0]['icmp_seq'] == 4
    assert json.loads(path.read_text(encoding='utf-8')) == data


def test_json_export_without_raw():
    data = JsonExporter(include_raw=False).export('x', ' x', responses())
    assert 'stdout' not in data['probes'][0]


def test_json_export_no_success():
    data = JsonExporter().export('x', ' x', responses()[1:])
    assert data['summary']['avg_time_ms'] is None


def test_console_output():
    console = Console(record=True, width=120)
    output = ConsoleOutput(console)
    output.print_header('example.com', ' -W1 -c1 example.com', resolved_ip='93.184.216.34', probes=2)
    for response in responses():
        output.print_response(response)
    output.print_summary(responses())
    
    text = console.export_text()
    assert 'ping -W1 -c1 example.com' in text
    assert '93.184.216.34' in text
    assert '23.400' in text
    assert 'unreachable' in text
    assert '1/2 probes answered' in text

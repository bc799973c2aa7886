import json

import pytest
from click.testing import CliRunner

from pingrunner import cli
from pingrunner.options import COUNT, DEADLINE, INTERVAL, TIMEOUT

from conftest import LOSS_OUTPUT, FakeRunner


@pytest.fixture
def runner_factory(monkeypatch):
    created = []
    
    def factory(outputs=()):
        def make(**kwargs):
            runner = FakeRunner(outputs)
            created.append(runner)
            return runner
        monkeypatch.setattr('pingrunner.ping.ProcessRunner', make)
        return created
    
    return factory


def test_build_options_overrides_defaults():
    options = cli.build_options(3, 2, None, 10)
    assert options.get(TIMEOUT).value == 1
    assert options.get(COUNT).value == 3
    assert options.get(INTERVAL).value == 2
    assert options.get(DEADLINE).value == 10


def test_single_probe(runner_factory):
    created = runner_factory()
    result = CliRunner().invoke(cli.main, ['8.8.8.8', '-c', '2'])
    
    assert result.exit_code == 0, result.output
    assert created[0].commands == [' -W1 -c2 8.8.8.8']
    assert '1/1 probes answered' in result.output


def test_unreachable_exits_one(runner_factory):
    runner_factory([LOSS_OUTPUT])
    result = CliRunner().invoke(cli.main, ['10.255.255.1'])
    assert result.exit_code == 1
    assert 'Unreachable' in result.output


def test_repeat_uses_async_engine(runner_factory, tmp_path):
    created = runner_factory()
    path = tmp_path / 'out.json'
    result = CliRunner().invoke(cli.main, ['1.1.1.1', '--repeat', '4', '--json', str(path)])
    
    assert result.exit_code == 0, result.output
    assert len(created[0].commands) == 4
    data = json.loads(path.read_text(encoding='utf-8'))
    assert data['summary']['sent'] == 4
    assert data['command'] == ' -W1 -c1 1.1.1.1'


def test_rejects_zero_count(runner_factory):
    runner_factory()
    result = CliRunner().invoke(cli.main, ['1.1.1.1', '-c', '0'])
    assert result.exit_code == 2


def test_version():
    result = CliRunner().invoke(cli.main, ['--version'])
    assert result.exit_code == 0
    assert '1.0.0' in result.output

import pytest

from pingrunner.models import Option
from pingrunner.options import (
    COUNT, DEADLINE, INTERVAL, TIMEOUT,
    OptionSet, build_command, count, deadline, interval, timeout,
)


def test_factories_use_iputils_flags():
    assert interval(2) == Option(INTERVAL) and INTERVAL == '-i'
    assert count(3).flag == COUNT == '-c'
    assert timeout(1).flag == TIMEOUT == '-W'
    assert deadline(5).flag == DEADLINE == '-w'


def test_option_identity_is_flag_only():
    assert count(1) == count(5)
    assert hash(count(1)) == hash(count(5))
    assert count(1) != timeout(1)


def test_empty_flag_rejected():
    with pytest.raises(ValueError):
        Option('')


def test_add_same_flag_replaces_value():
    options = OptionSet()
    options.add(count(1))
    options.add(count(7))
    assert len(options) == 1
    assert options.get(COUNT).value == 7


def test_replace_keeps_position():
    options = OptionSet.defaults()
    options.add(timeout(4))
    assert [o.flag for o in options] == [TIMEOUT, COUNT]
    assert options.get(TIMEOUT).value == 4


def test_remove_by_option_or_flag():
    options = OptionSet.defaults()
    options.remove(count(99))
    assert COUNT not in options
    options.remove(TIMEOUT)
    assert len(options) == 0


def test_remove_missing_is_noop():
    options = OptionSet.defaults()
    options.remove(deadline(1))
    assert len(options) == 2


def test_clear():
    options = OptionSet.defaults()
    options.clear()
    assert list(options) == []


def test_copy_is_independent():
    options = OptionSet.defaults()
    clone = options.copy()
    clone.add(interval(1))
    assert INTERVAL not in options
    assert INTERVAL in clone


def test_defaults():
    options = OptionSet.defaults()
    assert options.get(TIMEOUT).value == 1
    assert options.get(COUNT).value == 1


def test_build_command_defaults():
    assert build_command('127.0.0.1', OptionSet.defaults()) == ' -W1 -c1 127.0.0.1'


def test_build_command_empty_options():
    command = build_command('8.8.8.8', OptionSet())
    assert command == ' 8.8.8.8'
    assert command.strip() == '8.8.8.8'


def test_build_command_flag_without_value():
    options = OptionSet([Option('-n'), count(2)])
    assert build_command('host', options) == ' -n -c2 host'

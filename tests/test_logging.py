"""Tests for logging configuration, hooks and library log events."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

import pytest
import structlog
from propgen import frequency, init, one_of, pure, sequence_of_values
from propgen._logging import (
    add_log_hook,
    bind_seed,
    clear_log_hooks,
    configure_logging,
    get_logger,
    remove_log_hook,
)


@pytest.fixture(autouse=True)
def cleanup_logging() -> Iterator[None]:
    """Clear log hooks and handlers before and after each test."""
    clear_log_hooks()
    yield
    clear_log_hooks()
    logging.getLogger().handlers.clear()
    structlog.reset_defaults()


@pytest.fixture
def captured() -> list[dict[str, Any]]:
    """Configure debug logging and capture every event dict."""
    received: list[dict[str, Any]] = []
    configure_logging(level='DEBUG', json_output=True)
    add_log_hook(received.append)
    return received


class TestLogHooks:
    """Tests for logging hooks functionality."""

    def test_hook_receives_log_events(self, captured) -> None:
        get_logger('test').info('Test message', extra_field='extra_value')

        entries = [e for e in captured if e.get('event') == 'Test message']
        assert len(entries) == 1
        assert entries[0]['extra_field'] == 'extra_value'

    def test_remove_hook(self) -> None:
        calls: list[str] = []

        def hook(event_dict: dict[str, Any]) -> None:
            calls.append('called')

        configure_logging(level='DEBUG', json_output=True)
        add_log_hook(hook)

        logger = get_logger('test')
        logger.info('First')
        assert len(calls) == 1

        remove_log_hook(hook)
        logger.info('Second')
        assert len(calls) == 1

    def test_remove_unknown_hook_is_noop(self) -> None:
        remove_log_hook(lambda _: None)

    def test_failing_hook_does_not_break_logging(self, captured) -> None:
        def broken(event_dict: dict[str, Any]) -> None:
            raise ValueError('boom')

        add_log_hook(broken)
        get_logger('test').info('Still logged')
        assert any(e.get('event') == 'Still logged' for e in captured)

    def test_console_output(self) -> None:
        configure_logging(level='INFO', json_output=False)
        get_logger('test').info('console')


class TestLibraryEvents:
    """Events emitted by the combinators."""

    def test_degenerate_frequency_logged(self, captured) -> None:
        frequency((0, pure(1)), (-2, pure(2)))

        entries = [e for e in captured if e.get('event') == 'generator_degenerate']
        assert len(entries) == 1
        assert entries[0]['combinator'] == 'frequency'
        assert entries[0]['reason'] == 'no positive weight'

    @pytest.mark.parametrize(
        ('build', 'combinator'),
        [
            (one_of, 'one_of'),
            (sequence_of_values, 'sequence_of_values'),
            (frequency, 'frequency'),
        ],
    )
    def test_empty_input_logged(self, captured, build, combinator) -> None:
        build()
        entries = [e for e in captured if e.get('event') == 'generator_degenerate']
        assert [e['combinator'] for e in entries] == [combinator]

    def test_regular_generators_do_not_log(self, captured) -> None:
        gen = frequency((1, pure(1)), (1, pure(2)), sampler=lambda: 0.3)
        gen.generate()
        assert not [e for e in captured if e.get('event', '').startswith('generator_')]

    def test_fallback_logged(self, captured) -> None:
        gen = frequency((1, pure('a')), sampler=lambda: 1.0)
        assert gen.generate().get() == 'a'
        assert any(e.get('event') == 'frequency_fallback' for e in captured)


class TestSeedContext:
    """The active seed is attached to events for replaying a run."""

    def test_bind_seed(self, captured) -> None:
        bind_seed(11)
        get_logger('test').info('seeded')
        bind_seed(None)
        get_logger('test').info('unseeded')

        by_event = {e['event']: e for e in captured}
        assert by_event['seeded']['seed'] == 11
        assert 'seed' not in by_event['unseeded']

    def test_init_binds_seed(self, captured) -> None:
        init(seed=7)
        frequency()

        entries = [e for e in captured if e.get('event') == 'generator_degenerate']
        assert entries[0]['seed'] == 7


class TestUnconfigured:
    """Without configuration the library stays silent."""

    def test_no_stdout_before_init(self, capsys) -> None:
        structlog.reset_defaults()

        one_of()
        sequence_of_values()
        frequency((0, pure(1)))
        frequency((1, pure('a')), sampler=lambda: 1.0).generate()

        assert capsys.readouterr().out == ''

    def test_hooks_not_called_before_init(self) -> None:
        structlog.reset_defaults()
        received: list[dict[str, Any]] = []
        add_log_hook(received.append)

        one_of()

        assert received == []

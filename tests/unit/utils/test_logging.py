"""Unit tests for logging initialization in logging.py

Test coverage includes:

1. JsonFormatter
   - Ensures records render as JSON with timestamp, level, logger and message.
   - Ensures `extra` fields are attached and standard attributes are not.
   - Ensures exception info is rendered.

2. initialize_logging()
   - Ensures the root logger level is read from LOG_LEVEL (INFO by default).
   - Ensures the root handler writes JSON to stdout.
"""

import json
import logging
import sys
from datetime import datetime, UTC

import pytest

from memshortener.constants import ENV
from memshortener.utils.logging import JsonFormatter, initialize_logging


def make_record(msg='Shortened URL.', exc_info=None, **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name='memshortener.test',
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=exc_info,
    )
    record.__dict__.update(extra)
    return record


# -------------------------------
# 1. JsonFormatter
# -------------------------------


def test_json_formatter_standard_fields():
    record = make_record()
    record.created = datetime(2025, 12, 26, 12, 0, 0, tzinfo=UTC).timestamp()

    log = json.loads(JsonFormatter().format(record))

    assert log == {
        'timestamp': '2025-12-26T12:00:00.000Z',
        'level': 'INFO',
        'logger': 'memshortener.test',
        'message': 'Shortened URL.',
    }


def test_json_formatter_includes_extra_fields():
    log = json.loads(JsonFormatter().format(make_record(shortcode='aZ3kQ9', removed=2)))

    assert log['shortcode'] == 'aZ3kQ9'
    assert log['removed'] == 2
    assert 'pathname' not in log
    assert 'lineno' not in log


def test_json_formatter_includes_exception():
    try:
        raise RuntimeError('boom')
    except RuntimeError:
        record = make_record(msg='Expiry sweep failed.', exc_info=sys.exc_info())

    log = json.loads(JsonFormatter().format(record))

    assert log['message'] == 'Expiry sweep failed.'
    assert 'RuntimeError: boom' in log['exc_info']


# -------------------------------
# 2. initialize_logging()
# -------------------------------


@pytest.mark.parametrize(
    'level, expected',
    [
        (None, logging.INFO),
        ('debug', logging.DEBUG),
        ('WARNING', logging.WARNING),
    ],
)
def test_initialize_logging_level(monkeypatch, restore_logging, level, expected):
    if level is not None:
        monkeypatch.setenv(ENV.App.LOG_LEVEL, level)

    initialize_logging()

    assert logging.getLogger().level == expected


def test_initialize_logging_writes_json_to_stdout(restore_logging, capsys):
    initialize_logging()

    logging.getLogger('memshortener.test').info('Shortened URL.', extra={'shortcode': 'aZ3kQ9'})

    line = capsys.readouterr().out.strip().splitlines()[-1]
    log = json.loads(line)
    assert log['message'] == 'Shortened URL.'
    assert log['shortcode'] == 'aZ3kQ9'
    assert log['logger'] == 'memshortener.test'

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

import pytest
import io
import utils

def test_log_with_time(monkeypatch):
    utils.start_time = 0
    err = io.StringIO()
    monkeypatch.setattr('sys.stderr', err)
    utils.log_with_time('Test message', color='')
    assert 'Test message' in err.getvalue()

def test_log_with_time_timestamp_format(monkeypatch):
    utils.start_time = None
    err = io.StringIO()
    monkeypatch.setattr('sys.stderr', err)
    utils.log_with_time('first')
    assert utils.start_time is not None
    assert '[00:00.' in err.getvalue()

def test_log_goes_to_stderr_only(capsys):
    utils.start_time = 0
    utils.log_with_time('hello')
    captured = capsys.readouterr()
    assert captured.out == ''
    assert 'hello' in captured.err

def test_utils_vlog_verbose(monkeypatch):
    utils.VERBOSE = True
    utils.start_time = 0
    err = io.StringIO()
    monkeypatch.setattr('sys.stderr', err)
    utils.vlog('Verbose test')
    utils.vlog('Timed step', t0=utils.time.time())
    assert 'Verbose test' in err.getvalue()
    assert 'Timed step (took ' in err.getvalue()
    utils.VERBOSE = False

def test_utils_vlog_quiet(monkeypatch):
    utils.VERBOSE = False
    err = io.StringIO()
    monkeypatch.setattr('sys.stderr', err)
    utils.vlog('hidden')
    assert err.getvalue() == ''

@pytest.mark.parametrize("source, expected", [
    ("https://example.com/words.txt", True),
    ("http://example.com/words.txt", True),
    ("tests/words.txt", False),
    ("C:\\words.txt", False),
])
def test_is_url(source, expected):
    assert utils.is_url(source) is expected

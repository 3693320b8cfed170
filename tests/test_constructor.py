"""Test error constructors and the default factory."""
import inspect
import os

from ctxerr import DEBUG, JSON_CODEC, DebugConfig, Error, constructor, new, new_codec


def test_constructor_without_producers_keeps_info_empty():
    """Test that errors from a bare constructor have no info allocated."""
    make = constructor(JSON_CODEC)

    err = make("plain")

    assert isinstance(err, Error)
    assert err.message == "plain"
    assert err.info is None
    assert err.config is DEBUG


def test_constructor_runs_producers_per_error():
    """Test that each producer runs once per created error, in order."""
    calls = []

    def first():
        calls.append("first")
        return "first", len(calls)

    def second():
        calls.append("second")
        return "second", len(calls)

    make = constructor(JSON_CODEC, first, second)

    a = make("a")
    b = make("b")

    assert calls == ["first", "second", "first", "second"]
    assert a.info == {"first": 1, "second": 2}
    assert b.info == {"first": 3, "second": 4}


def test_constructed_errors_share_codec_not_info():
    """Test that errors share codec and config but not info dicts."""
    codec = new_codec(JSON_CODEC.encode, JSON_CODEC.decode)
    cfg = DebugConfig()
    make = constructor(codec, lambda: ("service", "billing"), config=cfg)

    a = make("a")
    b = make("b")
    a.add_info("only_a", True)

    assert a.codec is codec and b.codec is codec
    assert a.config is cfg and b.config is cfg
    assert a.info is not b.info
    assert b.info == {"service": "billing"}


def test_new_records_call_site():
    """Test that the default factory records the caller's file, function and line."""
    err, line = new("boom"), inspect.currentframe().f_lineno

    assert os.path.basename(err.info["file"]) == "test_constructor.py"
    assert err.info["fn"] == f"{__name__}.test_new_records_call_site"
    assert err.info["line"] == line
    assert err.codec is JSON_CODEC

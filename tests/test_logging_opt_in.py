import logging

from scribere._logging import NoopLogger, resolve_logger
from scribere.dispatch import MonoFile
from scribere.models import CodeBlock
from scribere.write_blocks import write_blocks


def test_resolve_logger_default_noop():
    lg = resolve_logger()
    assert isinstance(lg, NoopLogger)
    # Should not raise:
    lg.debug("hello")
    lg.info("world")


def test_resolve_logger_enabled_creates_logger(caplog):
    with caplog.at_level(logging.INFO):
        lg = resolve_logger(enabled=True, name="scribere.test")
        lg.info("test message")
    assert any("test message" in rec.message for rec in caplog.records)


def test_resolve_logger_uses_passed_logger():
    custom = logging.getLogger("x")
    assert resolve_logger(logger=custom) is custom


def test_write_is_silent_by_default(caplog, memdir):
    with caplog.at_level(logging.DEBUG):
        write_blocks([CodeBlock(content="x")], memdir, MonoFile("out"))
    assert not [r for r in caplog.records if r.name.startswith("scribere.write_blocks")]


def test_write_logs_when_enabled(caplog, memdir):
    with caplog.at_level(logging.INFO):
        write_blocks([CodeBlock(content="x")], memdir, MonoFile("out"), log=True)
    assert any("writing out" in rec.message for rec in caplog.records)


def test_enabled_logger_propagates_without_own_handlers():
    lg = resolve_logger(enabled=True, name="scribere.test.propagate")
    assert lg.propagate is True
    assert lg.handlers == []

"""Tests for the diagnostics logger."""
import logging

from ippdecode.logging import RingBufferHandler, create_logger, get_ring_buffer


def test_ring_buffer_keeps_last_events():
    handler = RingBufferHandler(max_entries=2)
    logger = logging.getLogger("ippdecode-test.ring")
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    try:
        for i in range(3):
            logger.info("event_%d", i, extra={"details": {"i": i}})
    finally:
        logger.removeHandler(handler)
    events = handler.get_events()
    assert [e["event"] for e in events] == ["event_1", "event_2"]
    assert events[-1]["details"] == {"i": 2}
    handler.clear()
    assert handler.get_events() == []


def test_create_logger_is_idempotent(capsys):
    first = create_logger("ippdecode-test.create", ring_size=5)
    second = create_logger("ippdecode-test.create", ring_size=5, level="DEBUG")
    assert first is second
    assert len(second.handlers) == 2
    assert second.level == logging.DEBUG
    assert not second.propagate

    second.warning("datetime_fallback", extra={"details": {"offset": 12}})
    assert "WARNING ippdecode-test.create datetime_fallback offset=12" in capsys.readouterr().err
    assert get_ring_buffer(second).get_events()[-1]["details"] == {"offset": 12}

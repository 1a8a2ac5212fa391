"""Tests for the data event bus."""


def test_event_bus_is_singleton():
    from event_bus import event_bus, DataEventBus
    assert isinstance(event_bus, DataEventBus)


def test_api_key_changed_signal(qt_app):
    from event_bus import event_bus
    received = []
    event_bus.api_key_changed.connect(lambda configured: received.append(configured))
    event_bus.api_key_changed.emit(True)
    assert received == [True]


def test_generation_finished_signal(qt_app):
    from event_bus import event_bus
    received = []
    event_bus.generation_finished.connect(lambda ok: received.append(ok))
    event_bus.generation_finished.emit(False)
    assert received == [False]

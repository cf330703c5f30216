import io

import pytest

from thrustpad.signals import Announcer, Printer, Signal


def test_emit_passes_arguments_to_slot():
    received = []
    signal = Signal()
    signal.connect(lambda *args: received.append(args))
    signal.emit(1, "a")
    assert received == [(1, "a")]


def test_slots_called_in_connection_order():
    calls = []
    signal = Signal()
    signal.connect(lambda: calls.append("first"))
    signal.connect(lambda: calls.append("second"))
    signal.emit()
    assert calls == ["first", "second"]


def test_duplicate_connection_calls_twice():
    calls = []

    def slot():
        calls.append(1)

    signal = Signal()
    signal.connect(slot)
    signal.connect(slot)
    signal.emit()
    assert len(calls) == 2
    assert len(signal) == 2


def test_disconnect_stops_delivery():
    calls = []

    def slot():
        calls.append(1)

    signal = Signal()
    signal.connect(slot)
    signal.disconnect(slot)
    signal.emit()
    assert calls == []
    assert len(signal) == 0


def test_disconnect_unknown_slot_raises():
    signal = Signal()
    with pytest.raises(ValueError):
        signal.disconnect(print)


def test_connect_non_callable_raises():
    signal = Signal()
    with pytest.raises(TypeError):
        signal.connect(42)


def test_announcer_drives_printer():
    stream = io.StringIO()
    announcer = Announcer()
    printer = Printer(stream)
    announcer.print_it.connect(printer.report)
    announcer.print_it.emit()
    assert stream.getvalue() == "I have printed\n"


def test_printer_defaults_to_stderr(capsys):
    Printer().report()
    captured = capsys.readouterr()
    assert captured.err == "I have printed\n"
    assert captured.out == ""
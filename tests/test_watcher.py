"""
Tests for data file watching.
"""
import os
import threading

from watchdog.events import FileModifiedEvent, FileMovedEvent

from docdirectory.services.watcher import DataFileHandler, DataFileWatcher, PollingWatcher


def test_handler_only_reacts_to_data_file(tmp_path):
    data_file = tmp_path / "doctors.json"
    data_file.write_text("[]")
    handler = DataFileHandler(data_file, lambda: None)

    assert handler._should_process(str(data_file))
    assert not handler._should_process(str(tmp_path / "other.json"))


def test_handler_debounces_reload(tmp_path):
    data_file = tmp_path / "doctors.json"
    data_file.write_text("[]")
    reloaded = threading.Event()
    calls = []

    def reload():
        calls.append(1)
        reloaded.set()

    handler = DataFileHandler(data_file, reload, debounce_seconds=0.05)
    for _ in range(3):
        handler.on_modified(FileModifiedEvent(str(data_file)))

    assert reloaded.wait(2.0)
    assert calls == [1]


def test_handler_reacts_to_rename_onto_data_file(tmp_path):
    data_file = tmp_path / "doctors.json"
    data_file.write_text("[]")
    reloaded = threading.Event()

    handler = DataFileHandler(data_file, reloaded.set, debounce_seconds=0.01)
    handler.on_moved(FileMovedEvent(str(tmp_path / "doctors.json.tmp"), str(data_file)))

    assert reloaded.wait(2.0)


def test_polling_watcher_reloads_on_mtime_change(tmp_path):
    data_file = tmp_path / "doctors.json"
    data_file.write_text("[]")
    calls = []
    watcher = PollingWatcher(data_file, lambda: calls.append(1), poll_interval=60)

    assert watcher.check_once() is False

    stat = data_file.stat()
    os.utime(data_file, (stat.st_atime, stat.st_mtime + 10))
    assert watcher.check_once() is True
    assert calls == [1]
    assert watcher.check_once() is False


def test_polling_watcher_survives_callback_errors(tmp_path):
    data_file = tmp_path / "doctors.json"

    def boom():
        raise ValueError("bad data")

    watcher = PollingWatcher(data_file, boom, poll_interval=60)
    data_file.write_text("[]")
    assert watcher.check_once() is True


def test_watcher_start_and_stop(tmp_path):
    data_file = tmp_path / "doctors.json"
    data_file.write_text("[]")
    watcher = DataFileWatcher(data_file, lambda: None)

    watcher.start()
    try:
        assert watcher.is_running()
    finally:
        watcher.stop()
    assert not watcher.is_running()


def test_watcher_skips_missing_directory(tmp_path):
    watcher = DataFileWatcher(tmp_path / "missing" / "doctors.json", lambda: None)
    watcher.start()
    assert not watcher.is_running()
    watcher.stop()


def test_polling_mode(tmp_path):
    data_file = tmp_path / "doctors.json"
    data_file.write_text("[]")
    watcher = DataFileWatcher(data_file, lambda: None, use_watchdog=False, poll_interval=60)

    watcher.start()
    assert watcher.is_running()
    watcher.stop()
    assert not watcher.is_running()

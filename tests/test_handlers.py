"""Tests for the Gradio event handlers."""
import pytest

from js_formula_extractor import handlers
from js_formula_extractor.preferences import load_preferences


class FakeProgress:
    def __init__(self):
        self.calls = []

    def __call__(self, fraction, desc=None):
        self.calls.append((fraction, desc))


@pytest.fixture
def opened(monkeypatch):
    paths = []
    monkeypatch.setattr(handlers, "open_in_file_manager", paths.append)
    return paths


def test_run_extraction_handler(tmp_path, input_file, opened):
    progress = FakeProgress()
    out = tmp_path / "out"
    status, log = handlers.run_extraction_handler(str(input_file), str(out), True, False, progress=progress)

    assert status == "Generated 4 of 4 files."
    assert "Input: transaction.json" in log
    assert "Generated: Header Fields/Net.js" in log
    assert "SUCCESS! Generated 4 files" in log
    assert progress.calls[-1] == (1.0, "Generated: Line Fields/No Label.js")
    assert opened == []
    assert "/**" in (out / "Header Fields" / "Net.js").read_text(encoding="utf-8")


def test_successful_run_saves_preferences_and_opens_folder(tmp_path, input_file, opened):
    out = tmp_path / "out"
    handlers.run_extraction_handler(str(input_file), str(out), False, True, progress=FakeProgress())

    prefs = load_preferences()
    assert prefs.last_input_file == str(input_file)
    assert prefs.last_output_dir == str(out)
    assert prefs.add_comments is False
    assert opened == [out.resolve()]


def test_missing_paths(opened):
    status, log = handlers.run_extraction_handler("", "  ", True, True, progress=FakeProgress())
    assert status == "Missing input or output."
    assert "ERROR: Select both files!" in log


def test_fatal_error_is_logged(tmp_path, opened):
    bad = tmp_path / "bad.json"
    bad.write_text("[]", encoding="utf-8")
    status, log = handlers.run_extraction_handler(str(bad), str(tmp_path / "out"), True, True, progress=FakeProgress())

    assert status == "Extraction failed."
    assert "FATAL: Expected a JSON object at the root, got list." in log
    assert opened == []
    assert load_preferences().last_input_file == ""


def test_input_not_found(tmp_path, opened):
    _, log = handlers.run_extraction_handler(str(tmp_path / "x.json"), str(tmp_path), True, False, progress=FakeProgress())
    assert "FATAL: Input file not found:" in log


def test_handle_input_change_suggests_output(tmp_path):
    update = handlers.handle_input_change(str(tmp_path / "order.json"), "")
    assert update["value"] == str(tmp_path / "order_extracted")


def test_handle_input_change_keeps_existing_output(tmp_path):
    update = handlers.handle_input_change(str(tmp_path / "order.json"), "/already/set")
    assert "value" not in update


def test_load_initial_state_defaults():
    assert handlers.load_initial_state() == ("", "", True, True, handlers.READY_MESSAGE)

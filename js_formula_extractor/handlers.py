from __future__ import annotations

import logging
import os
import subprocess
import sys

import gradio as gr

from .errors import FormulaExtractorError
from .io_utils import suggest_output_dir
from .pipeline import run_extraction
from .preferences import UserPreferences, load_preferences, save_preferences
from .progress import RecordingProgressSink

logger = logging.getLogger(__name__)

READY_MESSAGE = "Select JSON file and output folder."


class GradioProgressSink:
    """Forwards writer progress to a `gr.Progress` tracker.

    Gradio runs handlers in a worker thread and marshals tracker updates
    to the browser itself, so calling the tracker here is safe.
    """

    def __init__(self, progress):
        self._progress = progress

    def update(self, message: str, percent: int) -> None:
        self._progress(percent / 100, desc=message)

    def log(self, message: str) -> None:
        """No-op: the tracker only shows a status line, log text goes to the log box."""


def load_initial_state():
    prefs = load_preferences()
    return (
        prefs.last_input_file,
        prefs.last_output_dir,
        prefs.add_comments,
        prefs.open_folder,
        READY_MESSAGE,
    )


def handle_input_change(input_path, output_dir):
    """Suggest `<name>_extracted` next to the input when no output folder is set."""
    input_path = (input_path or '').strip()
    if not input_path or (output_dir or '').strip():
        return gr.update()
    return gr.update(value=suggest_output_dir(input_path))


def open_in_file_manager(path) -> None:
    path = os.fspath(path)
    if sys.platform.startswith('win'):
        os.startfile(path)
    elif sys.platform == 'darwin':
        subprocess.Popen(['open', path])
    else:
        subprocess.Popen(['xdg-open', path])


def persist_preferences(input_path, output_dir, add_comments, open_folder):
    prefs = UserPreferences(
        last_input_file=input_path,
        last_output_dir=output_dir,
        add_comments=bool(add_comments),
        open_folder=bool(open_folder),
    )
    try:
        save_preferences(prefs)
    except OSError as exc:
        logger.warning("Could not save preferences: %s", exc)


def run_extraction_handler(input_path, output_dir, add_comments, open_folder, progress=gr.Progress()):
    """Run one extraction and return (status, log text)."""
    input_path = (input_path or '').strip()
    output_dir = (output_dir or '').strip()
    sink = RecordingProgressSink(forward=GradioProgressSink(progress))
    sink.log("Ready.")

    if not input_path or not output_dir:
        sink.log("ERROR: Select both files!")
        return "Missing input or output.", sink.text()

    sink.log(f"Input: {os.path.basename(input_path)}")
    try:
        result = run_extraction(input_path, output_dir, bool(add_comments), sink)
    except (FormulaExtractorError, OSError) as exc:
        logger.error("Extraction failed: %s", exc)
        sink.log(f"FATAL: {exc}")
        return "Extraction failed.", sink.text()

    persist_preferences(input_path, output_dir, add_comments, open_folder)

    if open_folder:
        try:
            open_in_file_manager(result.output_root)
        except OSError as exc:
            sink.log(f"FATAL: {exc}")

    status = f"Generated {result.generated} of {result.summary.total} files."
    return status, sink.text()

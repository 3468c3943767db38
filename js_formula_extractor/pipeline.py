from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .extractor import parse_formula_fields
from .io_utils import read_json_text
from .progress import LoggingProgressSink, ProgressSink
from .writer import WriteSummary, write_formula_files

logger = logging.getLogger(__name__)


@dataclass
class ExtractionResult:
    output_root: Path
    summary: WriteSummary

    @property
    def generated(self) -> int:
        return len(self.summary.written)


def run_extraction(input_file, output_root, add_comments: bool, sink: ProgressSink = None) -> ExtractionResult:
    """Read, parse and write in one sequential pass.

    Meant to be run off the caller's interactive thread. ParseError and
    InputNotFoundError propagate before anything is written.
    """
    if sink is None:
        sink = LoggingProgressSink()

    json_text = read_json_text(input_file)
    fields = parse_formula_fields(json_text)

    root = Path(output_root).expanduser().resolve()
    logger.info("Writing %d formulas to %s", len(fields), root)
    summary = write_formula_files(fields, root, add_comments, sink)

    sink.log("")
    sink.log(f"SUCCESS! Generated {len(summary.written)} files")
    if summary.failures:
        sink.log(f"Failed: {len(summary.failures)}")
        logger.warning("%d of %d files could not be written", len(summary.failures), summary.total)
    sink.log(f"Folder: {root}")
    return ExtractionResult(output_root=root, summary=summary)

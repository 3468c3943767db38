from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Sequence

from .errors import FieldWriteError
from .io_utils import ensure_dir
from .progress import ProgressSink
from .records import ExtractedField, Section

logger = logging.getLogger(__name__)

NO_PARTICIPATING_FIELDS = 'No Participating Fields'


@dataclass
class WriteSummary:
    total: int = 0
    written: List[Path] = field(default_factory=list)
    failures: List[FieldWriteError] = field(default_factory=list)


def render_header_comment(fd: ExtractedField) -> str:
    lines = [
        "/**",
        f" * Section: {fd.section.title}",
        f" * FieldID: {fd.field_id}",
        f" * Label:   {fd.label}",
        f" * Type:    {fd.type}",
        f" * Trigger: {fd.trigger}",
    ]
    if fd.participating_fields:
        lines.append(" * Participating Fields:")
        lines.extend(f" * \t\t{name}" for name in fd.participating_fields)
    else:
        lines.append(f" * Participating Fields: {NO_PARTICIPATING_FIELDS}")
    lines.append(" */")
    return "\n".join(lines) + "\n \n"


def render_formula_file(fd: ExtractedField, add_comments: bool = False) -> str:
    body = fd.formula if fd.formula.endswith("\n") else fd.formula + "\n"
    if add_comments:
        return render_header_comment(fd) + body
    return body


def prepare_section_dirs(root_dir) -> Dict[Section, Path]:
    root = ensure_dir(root_dir)
    return {section: ensure_dir(root / section.title) for section in Section}


def resolve_target(section_dir: Path, fd: ExtractedField) -> Path:
    """Place `<label>.js` inside `section_dir`.

    A leading separator or drive in the label is dropped; a label that still
    resolves outside the folder (`..`) is rejected with ValueError.
    """
    name = Path(fd.file_name)
    if name.anchor:
        name = name.relative_to(name.anchor)
    target = section_dir / name
    if section_dir.resolve() not in target.resolve().parents:
        raise ValueError(f"label '{fd.label}' points outside {section_dir}")
    return target


def write_formula_files(
    fields: Sequence[ExtractedField],
    root_dir,
    add_comments: bool,
    sink: ProgressSink,
) -> WriteSummary:
    """Write each formula to `<root>/<section>/<label>.js`.

    A failed write is logged through the sink and skipped. Fields sharing
    a label within a section overwrite each other, last one wins.
    """
    dirs = prepare_section_dirs(root_dir)
    summary = WriteSummary(total=len(fields))
    processed = 0

    for fd in fields:
        target = dirs[fd.section] / fd.file_name
        try:
            target = resolve_target(dirs[fd.section], fd)
            with open(target, 'w', encoding='utf-8') as f:
                f.write(render_formula_file(fd, add_comments))
        except (OSError, ValueError) as exc:
            err = FieldWriteError(target, exc)
            summary.failures.append(err)
            logger.warning("Failed to write %s: %s", target, exc)
            sink.log(f"Failed: {err}")
            continue

        processed += 1
        summary.written.append(target)
        message = f"Generated: {fd.section.title}/{target.name}"
        logger.debug("%s", message)
        sink.log(message)
        sink.update(message, processed * 100 // summary.total)

    return summary


from __future__ import annotations

import os
from pathlib import Path

from .errors import InputNotFoundError, ParseError


def read_json_text(file_obj) -> str:
    """Read raw JSON text from an uploaded file or a file path."""
    if file_obj is None or file_obj == '':
        raise InputNotFoundError('(none)')

    if hasattr(file_obj, 'read'):
        if hasattr(file_obj, 'seek'):
            file_obj.seek(0)
        content = file_obj.read()
        if isinstance(content, bytes):
            content = _decode(content, getattr(file_obj, 'name', '(upload)'))
        return content

    if isinstance(file_obj, (str, os.PathLike)):
        path = Path(os.fspath(file_obj)).expanduser()
    else:
        # Upload wrappers expose the temp file location as `.name`.
        path = Path(file_obj.name).expanduser()
    if not path.is_file():
        raise InputNotFoundError(path)
    with open(path, 'rb') as f:
        return _decode(f.read(), path)


def _decode(content: bytes, source) -> str:
    # utf-8-sig: exports from the business application may carry a BOM.
    try:
        return content.decode('utf-8-sig')
    except UnicodeDecodeError as exc:
        raise ParseError(f"{source} is not valid UTF-8: {exc}") from exc


def ensure_dir(path) -> Path:
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def suggest_output_dir(input_path) -> str:
    """`<input dir>/<input stem>_extracted`, next to the input file."""
    path = Path(os.fspath(input_path)).expanduser()
    return str(path.with_name(f"{path.stem}_extracted"))

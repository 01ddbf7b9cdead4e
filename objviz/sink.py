"""
    Document sink — all-or-nothing writes of a rendered document.

    The text is written to a temporary file next to the target and moved
    into place with ``os.replace``; on failure the temporary file is removed,
    so a target path only ever holds a complete document.
"""
import contextlib
import logging
import os
import tempfile
from pathlib import Path
from typing import Optional, Union

from .emitters.dot import graph_name
from .exceptions import SinkError

logger = logging.getLogger(__name__)


def default_file_name(root_type_name: str, extension: str) -> str:
    """Conventional artifact name, e.g. ``vis_Person.dot``."""
    return f"vis_{graph_name(root_type_name)}.{extension}"


def _discard(temp_name: Optional[str]) -> None:
    if temp_name is not None:
        with contextlib.suppress(OSError):
            os.unlink(temp_name)


def write_document(text: str, path: Union[str, Path]) -> Path:
    """
    Atomically write ``text`` to ``path``.

    Raises:
        SinkError: If the directory or file cannot be created or written,
                   or the text cannot be encoded.  The temporary file is
                   removed on every failure path.
    """
    target = Path(path)
    temp_name = None
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            'w',
            encoding='utf-8',
            dir=str(target.parent),
            prefix=f".{target.name}.",
            suffix='.tmp',
            delete=False,
        ) as handle:
            temp_name = handle.name
            handle.write(text)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(temp_name, target)
    except (OSError, UnicodeError) as exc:
        _discard(temp_name)
        raise SinkError(f"Cannot write document to '{target}': {exc}") from exc
    except BaseException:
        _discard(temp_name)
        raise

    logger.info("Document written to %s (%d bytes)", target, len(text.encode('utf-8')))
    return target

import contextlib
import io
import logging
import pathlib
import sys
from typing import BinaryIO, Iterator, Optional, TextIO

from ..errors import InputError, OutputError

logger = logging.getLogger("parahash.io")

STDIO_PATH = "-"

def read_input(path: Optional[str] = None, stdin: Optional[BinaryIO] = None) -> str:
    """Read the whole document as UTF-8 from ``path``, or from stdin when no path is given."""
    if path and path != STDIO_PATH:
        try:
            data = pathlib.Path(path).read_bytes()
        except OSError as exc:
            raise InputError(f"cannot read {path}: {exc.strerror or exc}") from exc
        source = path
    else:
        stream = stdin if stdin is not None else sys.stdin.buffer
        try:
            data = stream.read()
        except OSError as exc:
            raise InputError(f"cannot read standard input: {exc}") from exc
        source = "<stdin>"
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InputError(f"{source} is not valid UTF-8: {exc}") from exc
    logger.debug("read %d bytes from %s", len(data), source)
    return text

@contextlib.contextmanager
def open_output(path: Optional[str] = None, stdout: Optional[TextIO] = None) -> Iterator[TextIO]:
    """Yield the destination stream; a file path is created exclusively and never overwritten.

    Standard output is re-wrapped as UTF-8 whatever the locale encoding is.
    """
    if not path or path == STDIO_PATH:
        if stdout is not None:
            yield stdout
            stdout.flush()
            return
        sys.stdout.flush()
        out = io.TextIOWrapper(sys.stdout.buffer, encoding="utf-8", newline="")
        try:
            yield out
            out.flush()
        finally:
            # leave sys.stdout's buffer open
            out.detach()
        return
    try:
        f = open(path, "x", encoding="utf-8", newline="")
    except FileExistsError as exc:
        raise OutputError(f"refusing to overwrite existing file {path}") from exc
    except OSError as exc:
        raise OutputError(f"cannot create {path}: {exc.strerror or exc}") from exc
    logger.debug("writing to %s", path)
    with f:
        yield f

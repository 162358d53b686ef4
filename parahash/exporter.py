import io
import logging
from typing import TextIO

from .encoding import format_title
from .hashing import HashedDocument

logger = logging.getLogger("parahash.exporter")

def write_document(out: TextIO, doc: HashedDocument, rep: str = "hex", ptlen: int = 4, dtlen: int = 8) -> None:
    """Write the document title, then each paragraph under its own digest heading."""
    out.write(f"# {format_title(doc.aggregate, rep, dtlen)}\n")
    for idx, (para, digest) in enumerate(doc.sections()):
        title = format_title(digest, rep, ptlen)
        logger.debug("paragraph %d title=%s", idx, title)
        out.write("\n")
        out.write(f"## {title}\n")
        out.write("\n")
        out.write(para + "\n")
    logger.debug("wrote %d paragraph sections (rep=%s)", len(doc), rep)

def render_document(doc: HashedDocument, rep: str = "hex", ptlen: int = 4, dtlen: int = 8) -> str:
    buf = io.StringIO()
    write_document(buf, doc, rep=rep, ptlen=ptlen, dtlen=dtlen)
    return buf.getvalue()

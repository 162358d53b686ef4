import argparse
import logging
import sys

from .config import ParahashConfig, load_config
from .encoding import REPRESENTATIONS
from .errors import ParahashError
from .exporter import write_document
from .hashing import hash_document
from .utils.io import open_output, read_input

logger = logging.getLogger("parahash.cli")

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    defaults = ParahashConfig()
    parser = argparse.ArgumentParser(
        prog="parahash",
        usage="parahash [OPTION] [FILE]",
        description="Read a file of paragraphs and write them out with crypto hash titles",
    )
    parser.add_argument("files", nargs="*", metavar="FILE", help="Input file (defaults to stdin)")
    parser.add_argument("--rep", default=None, choices=REPRESENTATIONS,
                        help=f"The representation for hashes (default: {defaults.rep})")
    parser.add_argument("--ptlen", type=int, default=None,
                        help=f"The length of a paragraph title (default: {defaults.ptlen})")
    parser.add_argument("--dtlen", type=int, default=None,
                        help=f"The length of the document title (default: {defaults.dtlen})")
    parser.add_argument("--outfile", default=None, help="The file to write to (defaults to stdout)")
    parser.add_argument("--config", default=None, help="YAML file with default settings")
    parser.add_argument("--log-level", dest="log_level", default=None,
                        help=f"Logging level (default: {defaults.log_level})")
    return parser


def run(cfg: ParahashConfig, infile=None) -> None:
    text = read_input(infile)
    doc = hash_document(text)
    logger.info("hashed %d paragraphs from %s", len(doc), infile or "<stdin>")
    with open_output(cfg.outfile) as out:
        write_document(out, doc, rep=cfg.rep, ptlen=cfg.ptlen, dtlen=cfg.dtlen)


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if len(args.files) > 1:
        parser.print_help(sys.stderr)
        return 1
    infile = args.files[0] if args.files else None

    try:
        cfg = load_config(
            {
                "rep": args.rep,
                "ptlen": args.ptlen,
                "dtlen": args.dtlen,
                "outfile": args.outfile,
                "log_level": args.log_level,
            },
            config_path=args.config,
        )
    except ParahashError as exc:
        print(f"parahash: {exc}", file=sys.stderr)
        return 1

    logging.basicConfig(level=cfg.log_level, format=LOG_FORMAT)
    logger.debug("config: %s", cfg)

    try:
        run(cfg, infile)
    except (ParahashError, OSError) as exc:
        logger.debug("run failed", exc_info=True)
        print(f"parahash: {exc}", file=sys.stderr)
        return 1
    return 0

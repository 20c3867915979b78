"""
CLI entry point for arxiv-cli

Usage:
    # Metadata for the 5 newest cs.CL papers
    arxiv-cli -c cs.CL

    # PDFs and summaries too, for a keyword search within a category
    arxiv-cli -c cs.AI -q graphrag -l 10 --pdf --summary

    # Fetch PDFs only
    python -m arxiv_cli -q "machine learning" --pdf --no-metadata
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .config import DEFAULT_LIMIT, OutputOptions
from .exceptions import ArxivCliError
from .pipeline import download_arxiv_papers
from .services.arxiv import build_search_query

logger = logging.getLogger(__name__)


def setup_logging(debug: bool = False) -> None:
    """Configure root logging to stdout"""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout)
        ],
        force=True,
    )


def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer: {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='arxiv-cli',
        description='Download papers from arXiv by category or search query',
        epilog='''
Examples:
  # Metadata for the newest cs.CL papers
  %(prog)s -c cs.CL

  # Keyword search within a category, with PDFs and summaries
  %(prog)s -c cs.AI -q graphrag -l 10 --pdf --summary
        ''',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument('-c', '--category',
                        help='Category of the papers (e.g., cs.AI, cs.CL)')
    parser.add_argument('-q', '--query',
                        help='Search query (e.g., "graphrag", "machine learning")')
    parser.add_argument('-l', '--limit', type=positive_int, default=DEFAULT_LIMIT,
                        help='Maximum number of papers to fetch')
    parser.add_argument('-p', '--pdf', action='store_true',
                        help='Fetch and save the PDF of each paper')
    parser.add_argument('-s', '--summary', action='store_true',
                        help='Save the summary of each paper to a txt file')
    parser.add_argument('--no-metadata', action='store_true',
                        help='Do not save paper metadata to a JSONL file')
    parser.add_argument('-o', '--output-dir', type=Path, default=Path('.'),
                        help='Directory for metadata.jsonl, pdfs/ and texts/')
    parser.add_argument('--debug', action='store_true',
                        help='Enable debug output')
    parser.add_argument('--version', action='version',
                        version=f'%(prog)s {__version__}')
    return parser


def cli(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point"""
    args = build_parser().parse_args(argv)
    setup_logging(args.debug)

    try:
        search_query = build_search_query(args.category, args.query)
        options = OutputOptions.under(
            args.output_dir,
            save_metadata=not args.no_metadata,
            save_pdf=args.pdf,
            save_summary=args.summary,
        )
        download_arxiv_papers(search_query, args.limit, options)
    except ArxivCliError as e:
        if e.paper_title:
            logger.error(f"{e.operation} failed for {e.paper_title!r}: {e}")
        else:
            logger.error(f"Error: {e}")
        logger.debug("Traceback:", exc_info=True)
        return 1

    return 0


def run() -> None:
    sys.exit(cli())


if __name__ == '__main__':
    run()

"""
Query -> fetch -> parse -> persist pipeline
"""

import logging
from enum import Enum
from typing import List, Optional

from .config import OutputOptions
from .core.downloader import PDFDownloader
from .core.metadata import MetadataManager
from .core.paper import Paper
from .core.utils import ensure_dir, sanitize_filename
from .exceptions import ArxivCliError
from .services.arxiv import ArxivClient, parse_feed

logger = logging.getLogger(__name__)

UNTITLED = 'untitled'


class PipelineState(Enum):
    IDLE = 'idle'
    QUERY_BUILT = 'query_built'
    FETCHED = 'fetched'
    PARSED = 'parsed'
    PER_PAPER_PROCESSING = 'per_paper_processing'
    METADATA_WRITTEN = 'metadata_written'
    DONE = 'done'
    FAILED = 'failed'


class Pipeline:
    """
    Single-pass download run

    Papers are processed strictly in feed order. The first error stops the
    run; files already written are left in place.
    """

    def __init__(
        self,
        options: OutputOptions = OutputOptions(),
        client: Optional[ArxivClient] = None,
        downloader: Optional[PDFDownloader] = None,
        metadata_manager: Optional[MetadataManager] = None,
    ):
        """
        Initialize pipeline

        Args:
            options: Output selection and locations
            client: arXiv API client (created and closed here if omitted)
            downloader: PDF downloader (created lazily if omitted)
            metadata_manager: Metadata writer (defaults to options.metadata_file)
        """
        self.options = options
        self._owns_client = client is None
        self.client = client or ArxivClient()
        self._owns_downloader = downloader is None
        self._downloader = downloader
        self.metadata_manager = metadata_manager or MetadataManager(options.metadata_file)
        self.state = PipelineState.IDLE

    @property
    def downloader(self) -> PDFDownloader:
        if self._downloader is None:
            self._downloader = PDFDownloader()
        return self._downloader

    def _transition(self, state: PipelineState) -> None:
        logger.debug(f"Pipeline state: {self.state.value} -> {state.value}")
        self.state = state

    def run(self, search_query: str, max_results: int) -> List[Paper]:
        """
        Run the pipeline once

        Args:
            search_query: Resolved query in the arXiv query language
            max_results: Maximum number of papers to fetch

        Returns:
            Papers in feed order

        Raises:
            ArxivCliError: On the first failure of any step
        """
        try:
            papers = self._run(search_query, max_results)
        except ArxivCliError:
            self._transition(PipelineState.FAILED)
            raise
        finally:
            self.close()
        self._transition(PipelineState.DONE)
        return papers

    def _run(self, search_query: str, max_results: int) -> List[Paper]:
        options = self.options
        self._transition(PipelineState.QUERY_BUILT)
        logger.info(f"Searching arXiv: {search_query} (limit {max_results})")

        raw = self.client.fetch_feed(search_query, max_results)
        self._transition(PipelineState.FETCHED)

        papers = parse_feed(raw)
        self._transition(PipelineState.PARSED)
        logger.info(f"Found {len(papers)} papers")

        self._transition(PipelineState.PER_PAPER_PROCESSING)
        metadata_lines: List[str] = []
        pdf_dir = None
        text_dir = None
        pdf_count = 0
        summary_count = 0

        for i, paper in enumerate(papers, 1):
            filename = sanitize_filename(paper.title) or UNTITLED

            if options.save_metadata:
                metadata_lines.append(paper.to_json())

            if options.save_pdf:
                if pdf_dir is None:
                    pdf_dir = ensure_dir(options.pdf_dir)
                logger.info(f"[{i}/{len(papers)}] Downloading: {paper.title[:60]}...")
                try:
                    self.downloader.fetch_pdf(paper, pdf_dir / filename)
                except ArxivCliError as e:
                    e.annotate(paper.title, 'fetch_pdf')
                    raise
                pdf_count += 1

            if options.save_summary:
                if text_dir is None:
                    text_dir = ensure_dir(options.text_dir)
                try:
                    self.metadata_manager.write_summary(paper, text_dir / filename)
                except ArxivCliError as e:
                    e.annotate(paper.title, 'write_summary')
                    raise
                summary_count += 1

        if metadata_lines:
            self.metadata_manager.save(metadata_lines)
            self._transition(PipelineState.METADATA_WRITTEN)

        logger.info(
            f"Complete: "
            f"metadata {len(metadata_lines)}, "
            f"pdfs {pdf_count}, "
            f"summaries {summary_count}, "
            f"total {len(papers)}"
        )
        return papers

    def close(self) -> None:
        if self._owns_client:
            self.client.close()
        if self._owns_downloader and self._downloader is not None:
            self._downloader.close()


def download_arxiv_papers(
    search_query: str,
    max_results: int,
    options: OutputOptions = OutputOptions(),
    client: Optional[ArxivClient] = None,
    downloader: Optional[PDFDownloader] = None,
    metadata_manager: Optional[MetadataManager] = None,
) -> List[Paper]:
    """
    Fetch papers for a query and write the selected outputs

    Args:
        search_query: Resolved query (see services.arxiv.build_search_query)
        max_results: Maximum number of papers to fetch
        options: Which outputs to write, and where
        client: Optional arXiv client
        downloader: Optional PDF downloader
        metadata_manager: Optional metadata writer

    Returns:
        Papers in feed order

    Raises:
        ArxivCliError: On the first failure
    """
    pipeline = Pipeline(
        options=options,
        client=client,
        downloader=downloader,
        metadata_manager=metadata_manager,
    )
    return pipeline.run(search_query, max_results)

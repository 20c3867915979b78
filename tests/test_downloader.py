import pytest
import requests

from arxiv_cli.core.downloader import PDFDownloader
from arxiv_cli.core.paper import Paper
from arxiv_cli.exceptions import NetworkError, StorageError, UpstreamError

from conftest import mock_response

PDF_BYTES = b"%PDF-1.7\nfake pdf body\n%%EOF"


def _paper(pdf_url: str = "https://arxiv.org/pdf/2410.01234v1") -> Paper:
    return Paper(id="2410.01234v1", title="A Paper", pdf_url=pdf_url)


def test_fetch_pdf_writes_body_and_appends_suffix(session, tmp_path) -> None:
    session.get.return_value = mock_response(200, PDF_BYTES)
    downloader = PDFDownloader(session=session)

    path = downloader.fetch_pdf(_paper(), tmp_path / "A Paper")

    assert path == tmp_path / "A Paper.pdf"
    assert path.read_bytes() == PDF_BYTES
    assert list(tmp_path.iterdir()) == [path]
    session.get.assert_called_once()
    assert session.get.call_args.args == ("https://arxiv.org/pdf/2410.01234v1",)
    assert session.get.call_args.kwargs['timeout'] == 30


def test_fetch_pdf_keeps_existing_suffix(session, tmp_path) -> None:
    session.get.return_value = mock_response(200, PDF_BYTES)
    path = PDFDownloader(session=session).fetch_pdf(_paper(), tmp_path / "x.pdf")
    assert path.name == "x.pdf"


def test_fetch_pdf_http_error(session, tmp_path) -> None:
    session.get.return_value = mock_response(404)

    with pytest.raises(UpstreamError) as excinfo:
        PDFDownloader(session=session).fetch_pdf(_paper(), tmp_path / "x")

    assert excinfo.value.status_code == 404
    assert list(tmp_path.iterdir()) == []


def test_fetch_pdf_connection_error(session, tmp_path) -> None:
    session.get.side_effect = requests.exceptions.ConnectionError("reset")

    with pytest.raises(NetworkError):
        PDFDownloader(session=session).fetch_pdf(_paper(), tmp_path / "x")


def test_fetch_pdf_connection_drop_mid_stream_cleans_up(session, tmp_path) -> None:
    response = mock_response(200)

    def broken_stream(chunk_size):
        yield b"%PDF"
        raise requests.exceptions.ChunkedEncodingError("dropped")

    response.iter_content.side_effect = broken_stream
    session.get.return_value = response

    with pytest.raises(NetworkError):
        PDFDownloader(session=session).fetch_pdf(_paper(), tmp_path / "x")

    assert list(tmp_path.iterdir()) == []
    response.close.assert_called_once()


def test_fetch_pdf_without_url_fails(session, tmp_path) -> None:
    with pytest.raises(NetworkError):
        PDFDownloader(session=session).fetch_pdf(_paper(pdf_url=""), tmp_path / "x")
    session.get.assert_not_called()


def test_fetch_pdf_unwritable_destination(session, tmp_path) -> None:
    session.get.return_value = mock_response(200, PDF_BYTES)

    with pytest.raises(StorageError):
        PDFDownloader(session=session).fetch_pdf(_paper(), tmp_path / "missing" / "x")


def test_fetch_pdf_timeout(session, tmp_path) -> None:
    exc = requests.exceptions.Timeout("slow")
    session.get.side_effect = exc

    with pytest.raises(NetworkError) as excinfo:
        PDFDownloader(session=session).fetch_pdf(_paper(), tmp_path / "x")

    assert excinfo.value.__cause__ is exc
    assert list(tmp_path.iterdir()) == []

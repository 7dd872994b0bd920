"""Utility functions for loading export documents.

This module reads the raw bytes of an export from a local file, a URL or
standard input with proper error handling. Parsing happens elsewhere.
"""

import sys
from pathlib import Path
from typing import BinaryIO
from urllib.parse import urlparse

import requests

from .codegen.core.errors import SourceError
from .logging_config import get_logger

logger = get_logger(__name__)


def read_file(file_path: str | Path) -> tuple[str, bytes]:
    """Read an export document from a local file.

    Args:
        file_path: Path to the export file.

    Returns:
        Tuple of (source description, raw bytes).

    Raises:
        SourceError: If the file is missing or cannot be read.
    """
    file_path = Path(file_path)
    logger.debug(f"Reading export from file: {file_path}")

    if not file_path.exists():
        logger.error(f"File not found: {file_path}")
        raise SourceError(f"File not found: {file_path}")

    if file_path.suffix.lower() != ".json":
        logger.warning(f"File does not have .json extension: {file_path}")

    try:
        data = file_path.read_bytes()
    except OSError as e:
        logger.error(f"Error reading file {file_path}: {e}", exc_info=True)
        raise SourceError(f"Error reading file {file_path}: {e}") from e

    logger.info(f"Read {len(data)} bytes from {file_path}")
    return str(file_path), data


def read_url(url: str, timeout: int = 30) -> tuple[str, bytes]:
    """Fetch an export document from a URL.

    Args:
        url: URL of the export (e.g. a YApi export endpoint).
        timeout: Request timeout in seconds.

    Returns:
        Tuple of (source description, raw bytes).

    Raises:
        SourceError: If the URL is invalid or the request fails.
    """
    logger.debug(f"Fetching export from URL: {url}")

    parsed_url = urlparse(url)
    if not all([parsed_url.scheme, parsed_url.netloc]):
        logger.error(f"Invalid URL format: {url}")
        raise SourceError(f"Invalid URL: {url}")

    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.exceptions.Timeout as e:
        logger.error(f"Request timeout for URL: {url}")
        raise SourceError(f"Request timeout for URL: {url}") from e
    except requests.exceptions.ConnectionError as e:
        logger.error(f"Connection error for URL {url}: {e}")
        raise SourceError(f"Connection error for URL: {url}") from e
    except requests.exceptions.HTTPError as e:
        logger.error(f"HTTP error {e.response.status_code} for URL: {url}")
        raise SourceError(
            f"HTTP error {e.response.status_code} for URL: {url}"
        ) from e
    except requests.exceptions.RequestException as e:
        logger.error(f"Request error for URL {url}: {e}", exc_info=True)
        raise SourceError(f"Request error for URL {url}: {e}") from e

    content_type = response.headers.get("content-type", "").lower()
    if "json" not in content_type:
        logger.warning(f"URL {url} does not have JSON content type: {content_type}")

    logger.info(f"Fetched {len(response.content)} bytes from {url}")
    return url, response.content


def read_stream(stream: BinaryIO | None = None) -> tuple[str, bytes]:
    """Read an export document from a binary stream (stdin by default).

    Raises:
        SourceError: If the stream is an interactive terminal or empty.
    """
    if stream is None:
        if sys.stdin.isatty():
            raise SourceError("No input file given and stdin is a terminal")
        stream = sys.stdin.buffer

    data = stream.read()
    if not data.strip():
        raise SourceError("No input file given and stdin is empty")

    logger.info(f"Read {len(data)} bytes from stdin")
    return "<stdin>", data


def read_source(
    file_path: str | Path | None = None,
    url: str | None = None,
    timeout: int = 30,
) -> tuple[str, bytes]:
    """Read an export document from a file, a URL or stdin.

    Args:
        file_path: Path to local export file (mutually exclusive with url).
        url: URL to fetch the export from (mutually exclusive with file_path).
        timeout: Request timeout in seconds (only used for URLs).

    Returns:
        Tuple of (source description, raw bytes).

    Raises:
        SourceError: If both sources are given or reading fails.
    """
    if file_path and url:
        logger.error("Both file_path and url provided")
        raise SourceError("Cannot specify both an input file and a url")

    if file_path:
        return read_file(file_path)
    if url:
        return read_url(url, timeout)
    return read_stream()

# pyconfig_resolver/http/client.py
from __future__ import annotations
import logging
from pathlib import Path
from urllib.parse import urljoin, urlparse
from urllib.request import url2pathname

import httpx

from pyconfig_resolver.core.errors import ErrorCode, UserError

logger = logging.getLogger(__name__)

__all__ = ["readTextFromPath"]

_HTTP_SCHEMES = ("http", "https")



def _isRemote(location: str) -> bool:
    return urlparse(location).scheme.lower() in _HTTP_SCHEMES



def _fetchRemote(url: str, *, timeoutMs: int) -> str:
    """
    Single GET with a total timeout. No retries: a failed fetch is the page
    author's problem and must surface right away.
    """
    if timeoutMs <= 0:
        timeoutMs = 1
    timeout = httpx.Timeout(timeoutMs / 1_000)

    try:
        with httpx.Client(timeout=timeout, follow_redirects=True) as cli:
            resp = cli.get(url)
    except httpx.HTTPError as err:
        raise UserError(
            ErrorCode.FETCH_ERROR,
            f"Fetching from URL {url} failed: {err.__class__.__name__}: {err}",
        ) from err

    status = resp.status_code
    if status == 404:
        raise UserError(
            ErrorCode.FETCH_NOT_FOUND_ERROR,
            f"Fetching from URL {url} failed with error 404 (Not Found). "
            "Are your filename and path correct?",
        )
    if status >= 400:
        raise UserError(
            ErrorCode.FETCH_ERROR,
            f"Fetching from URL {url} failed with error {status} ({resp.reason_phrase}).",
        )

    logger.debug("Fetched %d bytes from '%s' (status=%d)", len(resp.content), url, status)
    return resp.text



def _readLocal(location: str, *, baseDir: Path | str | None) -> str:
    parsed = urlparse(location)
    if parsed.scheme.lower() == "file":
        path = Path(url2pathname(parsed.path))
    else:
        path = Path(location)
        if not path.is_absolute() and baseDir is not None:
            path = Path(baseDir) / path

    if not path.is_file():
        raise UserError(
            ErrorCode.FETCH_NOT_FOUND_ERROR,
            f"Fetching from path {location} failed: '{path}' does not exist or is not a file.",
        )

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as err:
        raise UserError(
            ErrorCode.FETCH_ERROR,
            f"Reading from path {location} failed: {err}",
        ) from err

    logger.debug("Read %d characters from '%s'", len(text), path)
    return text



def readTextFromPath(
    location: str,
    *,
    baseDir: Path | str | None = None,
    baseUrl: str | None = None,
    timeoutMs: int = 30_000,
) -> str:
    """
    Return the raw text behind a `src` attribute.

      - http(s) URLs are fetched with httpx.
      - Relative locations are joined onto `baseUrl` when one is given,
        otherwise they are read from disk relative to `baseDir`.
      - file:// URLs and plain paths are read from disk as UTF-8.

    Raises:
        UserError(FETCH_NOT_FOUND_ERROR): 404 or missing file
        UserError(FETCH_ERROR): any other failure
    """
    if _isRemote(location):
        return _fetchRemote(location, timeoutMs=timeoutMs)

    if baseUrl and not urlparse(location).scheme:
        return _fetchRemote(urljoin(baseUrl, location), timeoutMs=timeoutMs)

    return _readLocal(location, baseDir=baseDir)

"""Download Figma file documents, with an optional on-disk cache."""

from __future__ import annotations

import json
import logging
import time
from http.client import HTTPException
from pathlib import Path
from typing import Any
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from stylegen import __version__
from stylegen.errors import ErrorCode, StyleGenError, classify_exception

logger = logging.getLogger(__name__)

FIGMA_API_URL = "https://api.figma.com/v1/files/{file_key}/"
_REQUEST_TIMEOUT = 60
_MAX_ATTEMPTS = 3


def fetch_catalog_document(
    file_key: str,
    token: str | None,
    cache_path: Path | None = None,
) -> dict[str, Any]:
    """Return the decoded file document for ``file_key``.

    An existing cache file is used as is; otherwise the document is
    downloaded and, when ``cache_path`` is given, written there.
    """
    if cache_path is not None and cache_path.exists():
        logger.info("using cached catalog %s", cache_path)
        return _read_cache(cache_path)

    payload = _download(FIGMA_API_URL.format(file_key=file_key), token)
    try:
        data = json.loads(payload)
    except json.JSONDecodeError as exc:
        raise classify_exception(exc) from exc
    if not isinstance(data, dict):
        raise StyleGenError(ErrorCode.CATALOG_INVALID, details={"file_key": file_key})

    if cache_path is not None:
        try:
            cache_path.parent.mkdir(parents=True, exist_ok=True)
            cache_path.write_bytes(payload)
        except OSError as exc:
            raise classify_exception(exc, path=cache_path) from exc
        logger.info("cached catalog at %s", cache_path)
    return data


def _read_cache(cache_path: Path) -> dict[str, Any]:
    try:
        data = json.loads(cache_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise classify_exception(exc, path=cache_path) from exc
    if not isinstance(data, dict):
        raise StyleGenError(ErrorCode.CATALOG_INVALID, path=cache_path)
    return data


def _download(url: str, token: str | None) -> bytes:
    headers = {
        "User-Agent": f"stylegen/{__version__}",
        "Accept": "application/json",
    }
    if token:
        headers["X-Figma-Token"] = token

    for attempt in range(_MAX_ATTEMPTS):
        try:
            with urlopen(Request(url, headers=headers), timeout=_REQUEST_TIMEOUT) as resp:
                return resp.read()
        except (OSError, HTTPException) as exc:
            if attempt >= _MAX_ATTEMPTS - 1 or not _is_transient_network_error(exc):
                raise _network_error(exc) from exc
            logger.warning("catalog download failed (attempt %d): %s", attempt + 1, exc)
            time.sleep(0.5 * (attempt + 1))
    raise StyleGenError(ErrorCode.NETWORK_UNAVAILABLE, details={"url": url})


def _network_error(exc: Exception) -> StyleGenError:
    if isinstance(exc, (HTTPError, URLError, TimeoutError)):
        return classify_exception(exc)
    return StyleGenError(ErrorCode.NETWORK_UNAVAILABLE, details={"original": str(exc)})


def _is_transient_network_error(exc: Exception) -> bool:
    if isinstance(exc, HTTPError):
        return exc.code == 429 or exc.code >= 500
    if isinstance(exc, (TimeoutError, ConnectionError, HTTPException)):
        return True
    text = str(exc).lower()
    markers = (
        "timed out",
        "timeout",
        "temporarily unavailable",
        "connection reset",
        "connection aborted",
        "remote end closed",
    )
    return any(marker in text for marker in markers)

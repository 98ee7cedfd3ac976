"""Shared HTTP helpers used by the resolver and the fetcher.

Encapsulates request/timeout error handling so callers avoid duplicating
try/except blocks. The reachability probe never raises; the download wraps
transport failures in ``DownloadError`` so they abort the install.
"""
from __future__ import annotations

import logging
import os
from typing import Any

import requests

from constants import Constants
from common.errors import DownloadError
from common.logging_utils import extra_context, is_debug_enabled, safe_url, Timer

logger = logging.getLogger(__name__)


def _headers() -> dict:
    return {"User-Agent": Constants.USER_AGENT}


def probe_url(url: str, **kwargs: Any) -> bool:
    """Return True when a HEAD request on ``url`` answers with a 2xx status.

    Redirects are followed, as the mirror serves ``latest`` through them.
    Any transport error counts as unreachable.
    """
    safe_target = safe_url(url)
    with Timer() as t:
        try:
            res = requests.head(
                url,
                timeout=Constants.REQUEST_TIMEOUT,
                allow_redirects=True,
                headers=_headers(),
                **kwargs,
            )
        except requests.RequestException as exc:
            logger.debug("HEAD %s failed: %s", safe_target, exc)
            return False
        if is_debug_enabled(logger):
            logger.debug(
                "HTTP probe",
                extra=extra_context(
                    event="http_response",
                    component="http_client",
                    action="HEAD",
                    outcome="success" if res.ok else "failure",
                    status_code=res.status_code,
                    duration_ms=t.duration_ms(),
                    target=safe_target,
                ),
            )
        return res.ok


def stream_download(url: str, destination: str) -> str:
    """Stream ``url`` into ``destination`` and return the written path.

    The body is written to ``<destination>.part`` and renamed on success so an
    interrupted transfer never leaves a complete-looking file behind.
    """
    safe_target = safe_url(url)
    partial = destination + ".part"
    with Timer() as t:
        if is_debug_enabled(logger):
            logger.debug(
                "HTTP request",
                extra=extra_context(
                    event="http_request",
                    component="http_client",
                    action="GET",
                    target=safe_target,
                ),
            )
        try:
            with requests.get(
                url,
                timeout=Constants.REQUEST_TIMEOUT,
                stream=True,
                headers=_headers(),
            ) as res:
                res.raise_for_status()
                with open(partial, "wb") as fh:
                    for chunk in res.iter_content(chunk_size=Constants.DOWNLOAD_CHUNK_SIZE):
                        if chunk:
                            fh.write(chunk)
        except requests.Timeout as exc:
            _discard(partial)
            logger.error(
                "download of %s timed out after %s seconds",
                safe_target,
                Constants.REQUEST_TIMEOUT,
            )
            raise DownloadError(f"timed out downloading {safe_target}") from exc
        except requests.RequestException as exc:  # includes HTTPError and ConnectionError
            _discard(partial)
            logger.error("download of %s failed: %s", safe_target, exc)
            raise DownloadError(f"failed to download {safe_target}: {exc}") from exc

        os.replace(partial, destination)
        if is_debug_enabled(logger):
            logger.debug(
                "HTTP download complete",
                extra=extra_context(
                    event="http_response",
                    component="http_client",
                    action="GET",
                    outcome="success",
                    duration_ms=t.duration_ms(),
                    target=safe_target,
                    path=destination,
                ),
            )
    return destination


def _discard(path: str) -> None:
    try:
        os.remove(path)
    except FileNotFoundError:
        pass

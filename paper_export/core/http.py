"""Minimal HTTP helpers for the Dropbox API.

The implementation uses :mod:`urllib` from the Python standard library.
Dropbox has two calling styles which map onto the two helpers here:

* RPC endpoints (``api.dropboxapi.com``) take a JSON body and return JSON,
  see :func:`http_json`.
* Content endpoints (``content.dropboxapi.com``) take their arguments as JSON
  in the ``Dropbox-API-Arg`` header and return the raw file body, see
  :func:`http_content`.

Errors are never handled here.  Every failure is raised as
:class:`~paper_export.core.errors.ApiError` and callers decide whether it is
fatal.
"""

from __future__ import annotations

import json
import logging
from http.client import HTTPException
from typing import Any, Dict
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from .errors import ApiError

logger = logging.getLogger(__name__)

TIMEOUT = 60


def http_json(
    url: str,
    token: str,
    payload: Dict[str, Any],
    *,
    debug: bool = False,
) -> Dict[str, Any]:
    """POST ``payload`` as JSON to an RPC endpoint and return the parsed reply."""

    headers = {
        "Accept": "application/json",
        "Authorization": f"Bearer {token}",
        "Content-Type": "application/json",
    }
    data = json.dumps(payload).encode("utf-8")
    req = Request(url=url, method="POST", headers=headers, data=data)
    if debug:
        logger.debug("POST %s body=%s", url, data.decode("utf-8"))
    raw = _send(req, debug=debug)
    try:
        result = json.loads(raw.decode("utf-8"))
    except ValueError as e:
        raise ApiError(f"Invalid JSON response: {e}", url=url) from e
    if not isinstance(result, dict):
        raise ApiError(f"Unexpected response type: {type(result).__name__}", url=url)
    return result


def http_content(
    url: str,
    token: str,
    arg: Dict[str, Any],
    *,
    debug: bool = False,
) -> bytes:
    """POST to a content endpoint with ``arg`` in ``Dropbox-API-Arg``.

    The request body is empty; the response body is returned as bytes.
    ``json.dumps`` escapes non-ASCII characters which keeps the header value
    valid HTTP.
    """

    arg_json = json.dumps(arg)
    headers = {
        "Authorization": f"Bearer {token}",
        "Dropbox-API-Arg": arg_json,
    }
    req = Request(url=url, method="POST", headers=headers)
    if debug:
        logger.debug("POST %s Dropbox-API-Arg: %s", url, arg_json)
    return _send(req, debug=debug)


def _send(req: Request, *, debug: bool) -> bytes:
    try:
        with urlopen(req, timeout=TIMEOUT) as resp:
            raw = resp.read()
            if debug:
                logger.debug(
                    "Received %s from %s (%d bytes)", resp.status, req.full_url, len(raw)
                )
                result = resp.headers.get("Dropbox-API-Result")
                if result:
                    logger.debug("Dropbox-API-Result: %s", result)
            return raw
    except HTTPError as e:
        raise _api_error(e, req.full_url) from e
    except (URLError, TimeoutError) as e:
        reason = getattr(e, "reason", e)
        raise ApiError(f"Network error: {reason}", url=req.full_url) from e
    except (OSError, HTTPException) as e:
        # Failures after the request was sent (dropped connection, short
        # read) are not wrapped in URLError by urllib.
        raise ApiError(f"Network error: {e!r}", url=req.full_url) from e


def _api_error(e: HTTPError, url: str) -> ApiError:
    body = e.read().decode("utf-8", errors="ignore") if e.fp is not None else ""
    message = body.strip() or str(e.reason)
    try:
        data = json.loads(body)
        if isinstance(data, dict):
            if data.get("error_summary"):
                message = data["error_summary"]
            elif isinstance(data.get("error"), str):
                message = data["error"]
    except ValueError:
        pass

    if e.code == 401:
        message = f"Authentication failed: {message}"
    elif e.code == 403:
        message = f"Forbidden: {message} (does the token have the files.content.read scope?)"
    else:
        message = f"[HTTP {e.code}] {message}"
    return ApiError(message, status=e.code, url=url)

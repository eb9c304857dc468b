"""Region discovery through the EC2 instance metadata service."""

from __future__ import annotations

import json
import logging
from http.client import HTTPException
from urllib import error, request

from aws_session_checks.checks.common.errors import NetworkError, ParseError
from aws_session_checks.core.runtime.config import DEFAULT_METADATA_TIMEOUT

logger = logging.getLogger(__name__)

METADATA_HOST = "http://169.254.169.254"
TOKEN_URL = f"{METADATA_HOST}/latest/api/token"
IDENTITY_DOCUMENT_URL = f"{METADATA_HOST}/latest/dynamic/instance-identity/document"
TOKEN_TTL_SECONDS = 60


def _fetch_token(timeout: float) -> str | None:
    """Request an IMDSv2 session token; None when the service only speaks IMDSv1."""
    req = request.Request(
        TOKEN_URL,
        headers={"X-aws-ec2-metadata-token-ttl-seconds": str(TOKEN_TTL_SECONDS)},
        method="PUT",
    )
    try:
        with request.urlopen(req, timeout=timeout) as resp:
            return resp.read().decode("utf-8").strip() or None
    except (error.URLError, HTTPException, OSError) as exc:
        logger.debug("IMDSv2 token request failed, falling back to IMDSv1: %s", exc)
        return None


def fetch_identity_document(timeout: float = DEFAULT_METADATA_TIMEOUT) -> dict:
    """Return the parsed instance identity document."""
    token = _fetch_token(timeout)
    headers = {"X-aws-ec2-metadata-token": token} if token else {}
    req = request.Request(IDENTITY_DOCUMENT_URL, headers=headers, method="GET")

    try:
        with request.urlopen(req, timeout=timeout) as resp:
            body = resp.read()
    except (error.URLError, HTTPException, OSError) as exc:
        raise NetworkError(f"instance metadata unreachable: {exc}") from exc

    try:
        document = json.loads(body)
    except (ValueError, UnicodeDecodeError) as exc:
        raise ParseError(f"instance identity document is not valid JSON: {exc}") from exc

    if not isinstance(document, dict):
        raise ParseError("instance identity document is not a JSON object")
    return document


def resolve_region(override: str | None = None, timeout: float = DEFAULT_METADATA_TIMEOUT) -> str:
    """Return *override* if given, otherwise the region of the running instance."""
    if override:
        logger.debug("Using region override %s", override)
        return override

    document = fetch_identity_document(timeout=timeout)
    region = document.get("region")
    if not isinstance(region, str) or not region:
        raise ParseError("instance identity document has no region")

    logger.debug("Resolved region %s from instance metadata", region)
    return region

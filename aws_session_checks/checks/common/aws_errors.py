"""AWS credential and API error classification.

Both fetcher backends report failures through here: boto3 raises botocore
exceptions, the AWS CLI exits non-zero with a message on stderr. Either way the
check ends up with an ``ExternalToolError`` or ``NetworkError`` whose message is
short enough to fit on a plugin status line.
"""

from __future__ import annotations

import logging
import re

from botocore.exceptions import (
    BotoCoreError,
    ClientError,
    ConnectTimeoutError,
    EndpointConnectionError,
    NoCredentialsError,
    NoRegionError,
    ProfileNotFound,
    ReadTimeoutError,
)

from aws_session_checks.checks.common.errors import (
    CheckError,
    ExternalToolError,
    NetworkError,
)

logger = logging.getLogger(__name__)

# Error codes returned by AWS STS / SSO / IAM when credentials are bad.
_CREDENTIAL_ERROR_CODES = frozenset(
    {
        "ExpiredTokenException",
        "ExpiredToken",
        "InvalidIdentityToken",
        "UnrecognizedClientException",
        "InvalidClientTokenId",
        "SignatureDoesNotMatch",
        "AuthFailure",
        "AccessDenied",
        "AccessDeniedException",
        "UnauthorizedOperation",
    }
)

# Substrings that appear in CLI / botocore messages for token and key issues.
_TOKEN_EXPIRED_HINTS = (
    "unable to locate credentials",
    "the sso session",
    "unable to load sso token",
    "error when retrieving token",
    "token has expired",
    "security token included in the request is expired",
)

# "An error occurred (AuthFailure) when calling the DescribeClientVpnEndpoints operation: ..."
_CLI_ERROR_CODE = re.compile(r"An error occurred \((?P<code>[A-Za-z0-9.]+)\)")


def error_code(exc: BaseException) -> str:
    """Return the AWS error code of a ClientError, or an empty string."""
    if isinstance(exc, ClientError):
        return exc.response.get("Error", {}).get("Code", "")
    return ""


def cli_error_code(stderr: str) -> str:
    match = _CLI_ERROR_CODE.search(stderr or "")
    return match.group("code") if match else ""


def is_credential_error(exc: BaseException) -> bool:
    """Return True if *exc* is an AWS credential / token related error."""
    if isinstance(exc, (NoCredentialsError, ProfileNotFound)):
        return True

    if error_code(exc) in _CREDENTIAL_ERROR_CODES:
        return True

    msg = str(exc).lower()
    return any(hint in msg for hint in _TOKEN_EXPIRED_HINTS)


def is_credential_stderr(stderr: str) -> bool:
    """Same test as is_credential_error, applied to AWS CLI stderr output."""
    if cli_error_code(stderr) in _CREDENTIAL_ERROR_CODES:
        return True
    msg = (stderr or "").lower()
    return any(hint in msg for hint in _TOKEN_EXPIRED_HINTS)


def friendly_credential_message(code: str, detail: str, profile: str | None = None) -> str:
    """Return an actionable message for credential/token errors."""
    label = f"profile '{profile}'" if profile else "the default credential chain"
    login_hint = f"aws sso login --profile {profile}" if profile else "aws sso login"

    if code in ("ExpiredTokenException", "ExpiredToken"):
        return f"AWS session token expired for {label}. Run: {login_hint}"
    if code == "InvalidClientTokenId":
        return f"Invalid AWS access key for {label}. Check your credentials configuration."
    if code == "SignatureDoesNotMatch":
        return f"AWS secret key mismatch for {label}. Verify your credentials are correct."
    if code in ("AccessDenied", "AccessDeniedException", "UnauthorizedOperation"):
        return f"Access denied for {label}. Check IAM permissions for this operation."

    detail_lower = detail.lower()
    if "unable to locate credentials" in detail_lower:
        return f"AWS credentials not found for {label}. Run: aws configure or {login_hint}"
    if "sso" in detail_lower and ("token" in detail_lower or "expired" in detail_lower):
        return f"AWS SSO token expired or invalid for {label}. Run: {login_hint}"

    return f"AWS authentication failed for {label}: {detail}"


def first_line(text: str) -> str:
    """Collapse multi-line tool output to its first non-empty line."""
    for line in (text or "").splitlines():
        line = line.strip()
        if line:
            return line
    return ""


def classify_aws_error(exc: BaseException, profile: str | None = None) -> dict:
    """Classify a botocore exception.

    Returns a dict with keys:
        error_type: 'credential' | 'network' | 'aws_api' | 'unexpected'
        error: human-readable message
        is_credential_error: bool
    """
    if is_credential_error(exc):
        if isinstance(exc, ProfileNotFound):
            message = f"AWS profile '{profile}' not found in ~/.aws/config or ~/.aws/credentials."
        else:
            message = friendly_credential_message(error_code(exc), str(exc), profile)
        return {
            "error_type": "credential",
            "error": message,
            "is_credential_error": True,
        }

    if isinstance(exc, (EndpointConnectionError, ConnectTimeoutError, ReadTimeoutError)):
        return {
            "error_type": "network",
            "error": str(exc),
            "is_credential_error": False,
        }

    if isinstance(exc, NoRegionError):
        return {
            "error_type": "aws_api",
            "error": "No AWS region resolved; pass --region",
            "is_credential_error": False,
        }

    if isinstance(exc, (BotoCoreError, ClientError)):
        return {
            "error_type": "aws_api",
            "error": str(exc),
            "is_credential_error": False,
        }

    return {
        "error_type": "unexpected",
        "error": str(exc),
        "is_credential_error": False,
    }


def to_check_error(exc: BaseException, profile: str | None = None) -> CheckError:
    """Wrap a botocore exception in the matching CheckError."""
    info = classify_aws_error(exc, profile)
    logger.debug("AWS API call failed (%s): %s", info["error_type"], exc)
    if info["error_type"] == "network":
        return NetworkError(info["error"])
    return ExternalToolError(info["error"], error_type=info["error_type"])


def cli_failure(command: str, returncode: int, stderr: str, profile: str | None = None) -> ExternalToolError:
    """Build the ExternalToolError for an AWS CLI invocation that exited non-zero."""
    detail = first_line(stderr) or f"exit status {returncode}"
    if is_credential_stderr(stderr):
        message = friendly_credential_message(cli_error_code(stderr), detail, profile)
        error_type = "credential"
    else:
        message = f"{command} failed: {detail}"
        error_type = "aws_api" if cli_error_code(stderr) else "tool"
    return ExternalToolError(message, returncode=returncode, stderr=stderr, error_type=error_type)

"""AWS CLI backend: runs ``aws`` in a subprocess and decodes its JSON output."""

from __future__ import annotations

import json
import logging
import re
import subprocess

from aws_session_checks.checks.common.aws_errors import cli_failure
from aws_session_checks.checks.common.errors import ExternalToolError, ParseError
from aws_session_checks.core.runtime.config import DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)

AWS_EXECUTABLE = "aws"

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def to_kebab(name: str) -> str:
    """describe_client_vpn_endpoints / ClientVpnEndpointId -> kebab-case CLI spelling."""
    return _CAMEL_BOUNDARY.sub("-", name).replace("_", "-").lower()


def _format_value(value) -> list[str]:
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value]
    return [str(value)]


class AwsCliFetcher:
    """Calls AWS operations through the ``aws`` command line tool.

    Operations and parameters use the boto3 spelling
    (``describe_client_vpn_connections``, ``ClientVpnEndpointId=...``) so the
    service helpers work unchanged against either backend.
    """

    def __init__(self, region, profile=None, timeout=DEFAULT_TIMEOUT, executable=AWS_EXECUTABLE):
        self.region = region
        self.profile = profile
        self.timeout = timeout
        self.executable = executable

    def build_command(self, service: str, operation: str, **params) -> list[str]:
        cmd = [self.executable, service, to_kebab(operation), "--region", self.region, "--output", "json"]
        if self.profile:
            cmd.extend(["--profile", self.profile])
        for key, value in params.items():
            cmd.append(f"--{to_kebab(key)}")
            cmd.extend(_format_value(value))
        return cmd

    def call(self, service: str, operation: str, **params) -> dict:
        cmd = self.build_command(service, operation, **params)
        label = " ".join(cmd[:3])
        logger.debug("Running %s", " ".join(cmd))

        try:
            completed = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=self.timeout,
                check=False,
            )
        except FileNotFoundError as exc:
            raise ExternalToolError(
                f"'{self.executable}' not found; install the AWS CLI or use --backend boto3"
            ) from exc
        except subprocess.TimeoutExpired as exc:
            raise ExternalToolError(f"{label} timed out after {self.timeout:g}s") from exc

        if completed.returncode != 0:
            raise cli_failure(label, completed.returncode, completed.stderr, self.profile)

        try:
            payload = json.loads(completed.stdout)
        except ValueError as exc:
            raise ParseError(f"{label} returned malformed JSON: {exc}") from exc

        if not isinstance(payload, dict):
            raise ParseError(f"{label} returned JSON that is not an object")
        return payload

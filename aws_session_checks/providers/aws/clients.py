"""AWS client factory helpers and the boto3 fetcher backend."""

import logging

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from aws_session_checks.checks.common.aws_errors import to_check_error
from aws_session_checks.core.runtime.config import DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)


def get_session(profile_name=None, region_name=None):
    if profile_name:
        return boto3.Session(profile_name=profile_name, region_name=region_name)
    return boto3.Session(region_name=region_name)


def get_client(service_name, profile_name=None, region_name=None, timeout=DEFAULT_TIMEOUT):
    session = get_session(profile_name=profile_name, region_name=region_name)
    config = Config(
        connect_timeout=timeout,
        read_timeout=timeout,
        retries={"total_max_attempts": 1},
    )
    return session.client(service_name, region_name=region_name, config=config)


class Boto3Fetcher:
    """Calls AWS operations through boto3 clients, one client per service."""

    def __init__(self, region, profile=None, timeout=DEFAULT_TIMEOUT):
        self.region = region
        self.profile = profile
        self.timeout = timeout
        self._clients = {}

    def _client(self, service):
        if service not in self._clients:
            self._clients[service] = get_client(
                service,
                profile_name=self.profile,
                region_name=self.region,
                timeout=self.timeout,
            )
        return self._clients[service]

    def call(self, service: str, operation: str, **params) -> dict:
        """Return the full result of *operation*, following page tokens like the AWS CLI."""
        logger.debug("Calling %s.%s in %s", service, operation, self.region)
        try:
            client = self._client(service)
            if client.can_paginate(operation):
                response = client.get_paginator(operation).paginate(**params).build_full_result()
            else:
                response = getattr(client, operation)(**params)
        except (BotoCoreError, ClientError) as exc:
            raise to_check_error(exc, self.profile) from exc
        response.pop("ResponseMetadata", None)
        return response

from aws_session_checks.core.runtime.config import CheckConfig
from aws_session_checks.providers.aws.cli import AwsCliFetcher
from aws_session_checks.providers.aws.clients import Boto3Fetcher
from aws_session_checks.providers.aws.metadata import resolve_region


def build_fetcher(config: CheckConfig, region: str):
    """Return the fetcher backend selected by *config* for *region*."""
    if config.backend == "boto3":
        return Boto3Fetcher(region, profile=config.profile, timeout=config.timeout)
    return AwsCliFetcher(region, profile=config.profile, timeout=config.timeout)


__all__ = ["AwsCliFetcher", "Boto3Fetcher", "build_fetcher", "resolve_region"]

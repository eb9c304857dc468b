import logging

from aws_session_checks.checks.common.errors import CheckError
from aws_session_checks.core.formatting.reports import build_unknown_line
from aws_session_checks.providers.aws import build_fetcher, resolve_region

logger = logging.getLogger(__name__)


def run_check(checker_class, config, region_resolver=None, fetcher_factory=None):
    """Resolve the region, run one check and return its SummaryResult.

    CheckError from any stage becomes an UNKNOWN result carrying the error
    message. Other exceptions are bugs and propagate.
    """
    region_resolver = region_resolver or resolve_region
    fetcher_factory = fetcher_factory or build_fetcher

    try:
        region = region_resolver(config.region, timeout=config.metadata_timeout)
        checker = checker_class(fetcher_factory(config, region))
        result = checker.check()
    except CheckError as exc:
        logger.error("%s failed: %s", checker_class.name, exc)
        return build_unknown_line(exc)

    logger.debug("%s finished with %s", checker_class.name, result.severity.name)
    return result

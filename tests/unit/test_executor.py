from aws_session_checks.checks.common.errors import (
    ExternalToolError,
    NetworkError,
    ParseError,
)
from aws_session_checks.checks.generic import (
    ClientVpnConnectedChecker,
    WorkspacesHealthChecker,
)
from aws_session_checks.core.engine import executor
from aws_session_checks.core.runtime.config import CheckConfig


class _FetcherStub:
    def __init__(self, responses=None, error=None):
        self.responses = responses or {}
        self.error = error

    def call(self, service, operation, **params):
        if self.error:
            raise self.error
        return self.responses[operation]


def test_run_check_passes_override_and_timeout_to_resolver():
    seen = {}

    def _resolver(override, timeout):
        seen["override"] = override
        seen["timeout"] = timeout
        return override

    def _factory(config, region):
        seen["region"] = region
        return _FetcherStub({"describe_workspaces": {"Workspaces": []}})

    config = CheckConfig(region="eu-west-1", metadata_timeout=0.5)
    result = executor.run_check(
        WorkspacesHealthChecker, config, region_resolver=_resolver, fetcher_factory=_factory
    )

    assert result.text == "OK: All Healthy"
    assert seen == {"override": "eu-west-1", "timeout": 0.5, "region": "eu-west-1"}


def test_run_check_maps_metadata_failure_to_unknown():
    def _resolver(override, timeout):
        raise NetworkError("instance metadata unreachable: timed out")

    result = executor.run_check(
        ClientVpnConnectedChecker,
        CheckConfig(),
        region_resolver=_resolver,
        fetcher_factory=lambda config, region: _FetcherStub(),
    )

    assert result.text == "UNKNOWN: instance metadata unreachable: timed out"
    assert result.exit_code == 3


def test_run_check_maps_tool_and_parse_failures_to_unknown():
    for error in (
        ExternalToolError("aws ec2 describe-client-vpn-endpoints failed: denied", returncode=254),
        ParseError("describe_client_vpn_endpoints response has no 'ClientVpnEndpoints' list"),
    ):
        result = executor.run_check(
            ClientVpnConnectedChecker,
            CheckConfig(region="us-east-1"),
            region_resolver=lambda override, timeout: override,
            fetcher_factory=lambda config, region: _FetcherStub(error=error),
        )

        assert result.exit_code == 3
        assert result.text == f"UNKNOWN: {error}"


def test_run_check_defaults_use_module_resolver_and_factory(monkeypatch):
    monkeypatch.setattr(executor, "resolve_region", lambda override, timeout: "ap-southeast-2")
    monkeypatch.setattr(
        executor,
        "build_fetcher",
        lambda config, region: _FetcherStub(
            {"describe_workspaces": {"Workspaces": [{"WorkspaceId": "ws-1", "UserName": "carol", "State": "UNHEALTHY"}]}}
        ),
    )

    result = executor.run_check(WorkspacesHealthChecker, CheckConfig())

    assert result.text == "CRITICAL: carol (UNHEALTHY)"

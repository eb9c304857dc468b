from pathlib import Path

import pytest

import aws_session_checks.app.cli.main as cli
from aws_session_checks.core.engine import executor


class _FetcherStub:
    def __init__(self, responses):
        self.responses = responses

    def call(self, service, operation, **params):
        return self.responses[operation]


@pytest.fixture
def frozen_aws(monkeypatch):
    """Route every check to canned payloads and record the resolved config."""
    seen = {}
    responses = {
        "describe_workspaces": {
            "Workspaces": [
                {"WorkspaceId": "ws-1", "UserName": "carol", "State": "UNHEALTHY"},
                {"WorkspaceId": "ws-2", "UserName": "dave", "State": "AVAILABLE"},
            ]
        },
        "describe_workspaces_connection_status": {
            "WorkspacesConnectionStatus": [
                {"WorkspaceId": "ws-2", "ConnectionState": "CONNECTED"},
            ]
        },
    }

    def _resolver(override, timeout):
        seen["override"] = override
        return override or "us-east-1"

    def _factory(config, region):
        seen["config"] = config
        seen["region"] = region
        return _FetcherStub(responses)

    monkeypatch.setattr(executor, "resolve_region", _resolver)
    monkeypatch.setattr(executor, "build_fetcher", _factory)
    return seen


def _run(entrypoint, argv):
    with pytest.raises(SystemExit) as excinfo:
        entrypoint(argv)
    return excinfo.value.code


def test_health_entrypoint_without_arguments(frozen_aws, capsys):
    code = _run(cli.workspaces_health, [])

    assert code == 2
    assert capsys.readouterr().out == "CRITICAL: carol (UNHEALTHY)\n"
    assert frozen_aws["override"] is None
    assert frozen_aws["region"] == "us-east-1"


def test_connected_entrypoint_passes_flags_to_config(frozen_aws, capsys):
    code = _run(
        cli.workspaces_connected,
        ["--region", "eu-west-1", "--backend", "boto3", "--profile", "ops", "--timeout", "15"],
    )

    assert code == 0
    assert capsys.readouterr().out == "Sessions: 1 - Users: dave\n"
    config = frozen_aws["config"]
    assert (config.region, config.backend, config.profile, config.timeout) == (
        "eu-west-1",
        "boto3",
        "ops",
        15.0,
    )
    assert frozen_aws["region"] == "eu-west-1"


def test_umbrella_command_runs_named_check(frozen_aws, capsys):
    code = _run(cli.main, ["workspaces-connected"])

    assert code == 0
    assert capsys.readouterr().out.strip() == "Sessions: 1 - Users: dave"


def test_output_is_identical_across_runs(frozen_aws, capsys):
    _run(cli.workspaces_health, [])
    first = capsys.readouterr().out
    _run(cli.workspaces_health, [])
    second = capsys.readouterr().out

    assert first == second


def test_infrastructure_failure_prints_unknown(monkeypatch, capsys):
    from aws_session_checks.checks.common.errors import NetworkError

    def _resolver(override, timeout):
        raise NetworkError("instance metadata unreachable: <urlopen error timed out>")

    monkeypatch.setattr(executor, "resolve_region", _resolver)

    code = _run(cli.client_vpn_connected, [])

    captured = capsys.readouterr()
    assert code == 3
    assert captured.out == "UNKNOWN: instance metadata unreachable: <urlopen error timed out>\n"


def test_usage_errors_exit_unknown(capsys):
    assert _run(cli.main, []) == 3
    assert _run(cli.workspaces_health, ["--backend", "sdk"]) == 3
    assert "error" in capsys.readouterr().err


def test_non_positive_timeout_exits_unknown(capsys):
    assert _run(cli.workspaces_health, ["--timeout", "0"]) == 3
    assert capsys.readouterr().out == "UNKNOWN: timeouts must be positive\n"


def test_version_flag(capsys):
    assert _run(cli.main, ["--version"]) == 0
    assert "AWS Session Checks" in capsys.readouterr().out


def test_pyproject_scripts_point_to_cli_entrypoints():
    pyproject = Path(__file__).resolve().parents[2].joinpath("pyproject.toml").read_text(encoding="utf-8")

    assert 'aws-session-checks = "aws_session_checks.app.cli.main:main"' in pyproject
    for name, func in (
        ("check_aws_client_vpn_connected", "client_vpn_connected"),
        ("check_aws_workspaces_connected", "workspaces_connected"),
        ("check_aws_workspaces_health", "workspaces_health"),
    ):
        assert f'{name} = "aws_session_checks.app.cli.main:{func}"' in pyproject
        assert callable(getattr(cli, func))

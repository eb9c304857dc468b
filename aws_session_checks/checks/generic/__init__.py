"""Check implementations exposed on the command line."""

from aws_session_checks.checks.generic.client_vpn_connected import ClientVpnConnectedChecker
from aws_session_checks.checks.generic.workspaces_connected import WorkspacesConnectedChecker
from aws_session_checks.checks.generic.workspaces_health import WorkspacesHealthChecker

AVAILABLE_CHECKS = {
    checker.name: checker
    for checker in (
        ClientVpnConnectedChecker,
        WorkspacesConnectedChecker,
        WorkspacesHealthChecker,
    )
}

__all__ = [
    "AVAILABLE_CHECKS",
    "ClientVpnConnectedChecker",
    "WorkspacesConnectedChecker",
    "WorkspacesHealthChecker",
]

"""WorkSpaces queries."""

from aws_session_checks.core.models.check_models import (
    WorkspaceConnectionStatus,
    WorkspaceRecord,
)
from aws_session_checks.providers.aws.services._payload import require_list, require_object

SERVICE = "workspaces"


def list_workspaces(fetcher):
    operation = "describe_workspaces"
    payload = fetcher.call(SERVICE, operation)
    records = []
    for ws in require_list(payload, "Workspaces", operation):
        ws = require_object(ws, operation)
        records.append(
            WorkspaceRecord(
                workspace_id=ws.get("WorkspaceId") or "",
                username=ws.get("UserName") or "",
                state=ws.get("State") or "",
            )
        )
    return records


def list_workspace_connection_status(fetcher):
    operation = "describe_workspaces_connection_status"
    payload = fetcher.call(SERVICE, operation)
    records = []
    for status in require_list(payload, "WorkspacesConnectionStatus", operation):
        status = require_object(status, operation)
        records.append(
            WorkspaceConnectionStatus(
                workspace_id=status.get("WorkspaceId") or "",
                connection_state=status.get("ConnectionState") or "",
            )
        )
    return records

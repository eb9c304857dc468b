"""WorkSpaces connected session checker"""

import logging

from aws_session_checks.checks.common.base import BaseChecker
from aws_session_checks.core.formatting.reports import build_sessions_line
from aws_session_checks.providers.aws.services.workspaces import (
    list_workspace_connection_status,
    list_workspaces,
)

logger = logging.getLogger(__name__)

CONNECTED_STATE = "CONNECTED"


class WorkspacesConnectedChecker(BaseChecker):
    name = "workspaces-connected"
    description = "Count WorkSpaces with a connected user"

    def fetch(self):
        statuses = list_workspace_connection_status(self.fetcher)
        workspaces = list_workspaces(self.fetcher)
        logger.debug("%d connection status record(s), %d workspace(s)", len(statuses), len(workspaces))
        return statuses, workspaces

    def classify(self, records):
        statuses, workspaces = records
        connected_ids = {
            status.workspace_id
            for status in statuses
            if status.connection_state == CONNECTED_STATE
        }
        return sorted(ws.username for ws in workspaces if ws.workspace_id in connected_ids)

    def summarize(self, entries):
        return build_sessions_line(entries)

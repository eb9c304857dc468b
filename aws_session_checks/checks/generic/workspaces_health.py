"""WorkSpaces health checker"""

import logging

from aws_session_checks.checks.common.base import BaseChecker
from aws_session_checks.core.formatting.reports import build_health_line
from aws_session_checks.core.models.check_models import UnhealthyWorkspace
from aws_session_checks.providers.aws.services.workspaces import list_workspaces

logger = logging.getLogger(__name__)

HEALTHY_STATES = frozenset({"AVAILABLE", "STARTING", "STOPPED"})


class WorkspacesHealthChecker(BaseChecker):
    name = "workspaces-health"
    description = "Report WorkSpaces outside the AVAILABLE, STARTING and STOPPED states"

    def fetch(self):
        return list_workspaces(self.fetcher)

    def classify(self, records):
        unhealthy = [
            UnhealthyWorkspace(name=ws.username, status=ws.state)
            for ws in records
            if ws.state not in HEALTHY_STATES
        ]
        for item in unhealthy:
            logger.info("Unhealthy workspace for %s: %s", item.name, item.status)
        return unhealthy

    def summarize(self, entries):
        return build_health_line(entries)

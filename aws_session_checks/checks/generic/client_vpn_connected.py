"""Client VPN session count checker"""

import logging

from aws_session_checks.checks.common.base import BaseChecker
from aws_session_checks.core.formatting.reports import build_sessions_line
from aws_session_checks.providers.aws.services.ec2 import (
    list_client_vpn_connections,
    list_client_vpn_endpoint_ids,
)

logger = logging.getLogger(__name__)

ACTIVE_CONNECTION_STATUS = "active"


class ClientVpnConnectedChecker(BaseChecker):
    name = "client-vpn-connected"
    description = "Count active Client VPN sessions across all endpoints"

    def fetch(self):
        """Return the connection records of every endpoint, endpoint order kept."""
        records = []
        for endpoint_id in list_client_vpn_endpoint_ids(self.fetcher):
            connections = list_client_vpn_connections(self.fetcher, endpoint_id)
            logger.debug("Endpoint %s: %d connection record(s)", endpoint_id, len(connections))
            records.extend(connections)
        return records

    def classify(self, records):
        # Duplicates stay: one user may hold several sessions.
        return [
            record.username
            for record in records
            if record.status_code == ACTIVE_CONNECTION_STATUS
        ]

    def summarize(self, entries):
        return build_sessions_line(entries)

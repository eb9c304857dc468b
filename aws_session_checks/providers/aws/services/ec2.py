"""Client VPN queries."""

from aws_session_checks.checks.common.errors import ParseError
from aws_session_checks.core.models.check_models import ConnectionRecord
from aws_session_checks.providers.aws.services._payload import require_list, require_object

SERVICE = "ec2"


def list_client_vpn_endpoint_ids(fetcher):
    """Return the Client VPN endpoint ids in API order."""
    operation = "describe_client_vpn_endpoints"
    payload = fetcher.call(SERVICE, operation)
    endpoint_ids = []
    for endpoint in require_list(payload, "ClientVpnEndpoints", operation):
        endpoint_id = require_object(endpoint, operation).get("ClientVpnEndpointId")
        if not endpoint_id:
            raise ParseError(f"{operation} returned an endpoint without ClientVpnEndpointId")
        endpoint_ids.append(endpoint_id)
    return endpoint_ids


def list_client_vpn_connections(fetcher, endpoint_id):
    """Return every connection record of one endpoint, whatever its status."""
    operation = "describe_client_vpn_connections"
    payload = fetcher.call(SERVICE, operation, ClientVpnEndpointId=endpoint_id)
    records = []
    for conn in require_list(payload, "Connections", operation):
        conn = require_object(conn, operation)
        records.append(
            ConnectionRecord(
                endpoint_id=conn.get("ClientVpnEndpointId") or endpoint_id,
                username=conn.get("Username") or "",
                status_code=(conn.get("Status") or {}).get("Code") or "",
            )
        )
    return records

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Tuple


class Severity(IntEnum):
    """Monitoring plugin states; the value is the process exit code."""

    OK = 0
    WARNING = 1
    CRITICAL = 2
    UNKNOWN = 3


@dataclass(frozen=True)
class ConnectionRecord:
    endpoint_id: str
    username: str
    status_code: str


@dataclass(frozen=True)
class WorkspaceConnectionStatus:
    workspace_id: str
    connection_state: str


@dataclass(frozen=True)
class WorkspaceRecord:
    workspace_id: str
    username: str
    state: str


@dataclass(frozen=True)
class UnhealthyWorkspace:
    name: str
    status: str


@dataclass(frozen=True)
class SummaryResult:
    count: int
    users: Tuple[str, ...]
    severity: Severity
    text: str = field(default="")

    def __post_init__(self):
        if self.count != len(self.users):
            raise ValueError(
                f"summary count {self.count} does not match {len(self.users)} users"
            )

    @property
    def exit_code(self) -> int:
        return int(self.severity)

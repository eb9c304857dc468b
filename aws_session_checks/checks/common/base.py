"""Base class for all session and health checks"""

from abc import ABC, abstractmethod
from typing import Any

from aws_session_checks.core.models.check_models import SummaryResult


class BaseChecker(ABC):
    """Base class for the check commands.

    A check is a straight pipeline: ``fetch()`` pulls records through the
    fetcher backend, ``classify()`` reduces them to the entries worth
    reporting, ``summarize()`` renders those entries as a SummaryResult.
    Subclasses implement all three; ``check()`` runs them in order and lets
    any CheckError propagate to the executor.
    """

    name: str = ""          # e.g. "workspaces-health" (CLI check name)
    description: str = ""   # one-line help text

    def __init__(self, fetcher):
        self.fetcher = fetcher

    @abstractmethod
    def fetch(self) -> Any:
        """Retrieve raw records from AWS"""

    @abstractmethod
    def classify(self, records) -> list:
        """Filter / correlate records into reportable entries"""

    @abstractmethod
    def summarize(self, entries) -> SummaryResult:
        """Render entries as the plugin status line"""

    def check(self) -> SummaryResult:
        return self.summarize(self.classify(self.fetch()))

"""
Runtime configuration for the check commands.
Built from command line flags; there is no config file.
"""

from dataclasses import dataclass
from typing import Optional

DEFAULT_BACKEND = "cli"
AVAILABLE_BACKENDS = ("cli", "boto3")

# Seconds per AWS CLI invocation / boto3 request.
DEFAULT_TIMEOUT = 60.0

# Seconds per instance metadata HTTP request.
DEFAULT_METADATA_TIMEOUT = 2.0


@dataclass(frozen=True)
class CheckConfig:
    region: Optional[str] = None
    backend: str = DEFAULT_BACKEND
    profile: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT
    metadata_timeout: float = DEFAULT_METADATA_TIMEOUT

    def __post_init__(self):
        if self.backend not in AVAILABLE_BACKENDS:
            raise ValueError(
                f"unknown backend '{self.backend}', expected one of: {', '.join(AVAILABLE_BACKENDS)}"
            )
        if self.timeout <= 0 or self.metadata_timeout <= 0:
            raise ValueError("timeouts must be positive")

    @classmethod
    def from_args(cls, args):
        """Build a config from an argparse namespace, keeping defaults for missing flags."""
        return cls(
            region=getattr(args, "region", None) or None,
            backend=getattr(args, "backend", None) or DEFAULT_BACKEND,
            profile=getattr(args, "profile", None) or None,
            timeout=getattr(args, "timeout", DEFAULT_TIMEOUT),
            metadata_timeout=getattr(args, "metadata_timeout", DEFAULT_METADATA_TIMEOUT),
        )

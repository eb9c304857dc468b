"""
AWS Session Checks
Monitoring plugins for Client VPN sessions and WorkSpaces
"""

__version__ = "1.0.0"

__all__ = ["__version__"]

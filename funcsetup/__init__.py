"""
funcsetup - install the Knative func CLI in CI workflows.
"""

from .config import InstallOptions
from .installer import FuncInstaller, InstallResult

__all__ = ["FuncInstaller", "InstallOptions", "InstallResult"]

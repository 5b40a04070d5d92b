"""
Install orchestration.

Runs the install pipeline one stage at a time:

    resolve-platform -> resolve-url -> resolve-destination -> fetch
        -> publish-path -> advise-staleness -> smoketest -> done

No stage is retried. The first error stops the run and is raised as a
FuncSetupError tagged with the stage it happened in. The staleness advice is
the only stage that cannot fail the run.
"""

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

import requests

from .config import InstallOptions
from .core.context import ExecutionContext
from .core.directory import resolve_destination
from .core.download import DEFAULT_TIMEOUT, fetch_binary
from .core.exceptions import FuncSetupError, SmoketestError, Stage
from .core.path import publish_path
from .core.platform import is_windows, resolve_asset_name
from .core.staleness import StalenessReport, check_staleness
from .core.urls import resolve_download_url
from .core.version import Pinned, ResolvedVersion, normalize_version

logger = logging.getLogger(__name__)

SMOKETEST_TIMEOUT = 60


@dataclass
class Resolution:
    """What would be downloaded, and from where."""

    asset_name: str
    version: ResolvedVersion
    url: str


@dataclass
class InstallResult:
    """Outcome of a successful install."""

    asset_name: str
    version: ResolvedVersion
    url: str
    binary_path: Path
    path_entry: str
    smoketest_output: str = ""
    staleness: Optional[StalenessReport] = None


def run_smoketest(binary_path: Path, timeout: int = SMOKETEST_TIMEOUT) -> str:
    """
    Run '<binary> version' to confirm the install works.

    Returns:
        Captured standard output

    Raises:
        SmoketestError: If the binary cannot be started or exits non-zero
    """
    try:
        result = subprocess.run(
            [str(binary_path), "version"],
            capture_output=True,
            text=True,
            timeout=timeout,
            check=True,
        )
    except subprocess.CalledProcessError as e:
        detail = (e.stderr or e.stdout or "").strip()
        raise SmoketestError(
            f"'{binary_path} version' exited with code {e.returncode}"
            + (f": {detail}" if detail else "")
        ) from e
    except (OSError, subprocess.TimeoutExpired) as e:
        raise SmoketestError(f"Failed to run '{binary_path} version'", cause=e) from e

    output = result.stdout.strip()
    if output:
        logger.info(output)
    return output


class FuncInstaller:
    """
    Installs the func binary into a workflow environment.

    Example:
        >>> installer = FuncInstaller(RunnerContext())
        >>> result = installer.install(InstallOptions(version="1.16"))
        >>> print(result.binary_path)
    """

    def __init__(
        self,
        context: ExecutionContext,
        session: Optional[requests.Session] = None,
        timeout: int = DEFAULT_TIMEOUT,
        check_staleness_enabled: bool = True,
        smoketest: Optional[Callable[[Path], str]] = None,
    ):
        """
        Initialize installer.

        Args:
            context: Execution context to read from and publish into
            session: Optional requests session for all HTTP calls
            timeout: Request timeout in seconds
            check_staleness_enabled: Whether to compare pinned versions
                against the latest release
            smoketest: Callable that runs the installed binary
                (default: run_smoketest)
        """
        self.context = context
        self.session = session
        self.timeout = timeout
        self.check_staleness_enabled = check_staleness_enabled
        self.smoketest = smoketest or run_smoketest
        self.stage = Stage.RESOLVE_PLATFORM

    def _enter(self, stage: Stage) -> None:
        self.stage = stage
        logger.debug(f"Stage: {stage.value}")

    def resolve(self, options: InstallOptions) -> Resolution:
        """
        Resolve the asset name and download URL without side effects.

        Raises:
            UnsupportedPlatformError: If no asset matches the platform
            InvalidVersionError: If the version cannot be parsed
        """
        self._enter(Stage.RESOLVE_PLATFORM)
        asset_name = resolve_asset_name(self.context, options.binary)

        self._enter(Stage.RESOLVE_URL)
        version = normalize_version(options.version or "")
        url = resolve_download_url(asset_name, version, options.binary_source)

        return Resolution(asset_name=asset_name, version=version, url=url)

    def install(self, options: InstallOptions) -> InstallResult:
        """
        Run the full install pipeline.

        Args:
            options: Install options

        Returns:
            InstallResult describing the installed binary

        Raises:
            FuncSetupError: On the first failing stage, tagged with that stage
        """
        try:
            return self._install(options)
        except FuncSetupError as e:
            if e.stage is None:
                e.stage = self.stage
            raise
        except Exception as e:
            raise FuncSetupError(
                f"Unexpected error during {self.stage.value}", cause=e, stage=self.stage
            ) from e

    def _install(self, options: InstallOptions) -> InstallResult:
        resolution = self.resolve(options)

        self._enter(Stage.RESOLVE_DESTINATION)
        # The .exe suffix and chmod follow the runner OS even with a binary override
        windows = is_windows(self.context)
        binary_path = resolve_destination(
            options.destination, options.name, windows, cwd=self.context.cwd()
        )

        self._enter(Stage.FETCH)
        fetch_binary(
            resolution.url,
            binary_path,
            windows=windows,
            timeout=self.timeout,
            session=self.session,
        )
        logger.info(f"Installed {resolution.asset_name} to {binary_path}")

        self._enter(Stage.PUBLISH_PATH)
        path_entry = publish_path(binary_path, self.context)

        staleness = None
        if self.check_staleness_enabled and isinstance(resolution.version, Pinned):
            self._enter(Stage.ADVISE_STALENESS)
            staleness = self._advise_staleness(resolution.version)

        self._enter(Stage.SMOKETEST)
        output = self.smoketest(binary_path)

        self._enter(Stage.DONE)
        return InstallResult(
            asset_name=resolution.asset_name,
            version=resolution.version,
            url=resolution.url,
            binary_path=binary_path,
            path_entry=path_entry,
            smoketest_output=output,
            staleness=staleness,
        )

    def _advise_staleness(self, version: Pinned) -> Optional[StalenessReport]:
        report = check_staleness(
            version.tag, timeout=self.timeout, session=self.session
        )
        if report is not None and report.is_stale:
            message = report.message()
            logger.warning(message)
            self.context.annotate("warning", message)
        return report


__all__ = [
    "FuncInstaller",
    "InstallResult",
    "Resolution",
    "run_smoketest",
]

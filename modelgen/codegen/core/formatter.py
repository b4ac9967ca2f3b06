"""
Best-effort source formatting of generated files.

The formatter runs as an external process over the staging directory.
A missing tool or a failed run is logged and never aborts generation.
"""

import shlex
import shutil
import subprocess
from pathlib import Path
from typing import List, Optional

from ...logging_config import get_logger

logger = get_logger(__name__)


class SourceFormatter:
    """Runs an external formatting command over a directory."""

    def __init__(self, command: str, probable_cause: Optional[str] = None, timeout: int = 120):
        """
        Args:
            command: Command line, e.g. ``"gofmt -w"``; the directory is appended
            probable_cause: Hint logged when the command fails
            timeout: Seconds before the run is abandoned
        """
        self.argv: List[str] = shlex.split(command) if command else []
        self.probable_cause = probable_cause or "generated sources may not be valid"
        self.timeout = timeout

    @property
    def enabled(self) -> bool:
        return bool(self.argv)

    def is_available(self) -> bool:
        """Check whether the formatting tool is on PATH."""
        return self.enabled and shutil.which(self.argv[0]) is not None

    def format_directory(self, directory: Path) -> bool:
        """
        Format every file under a directory in place.

        Returns:
            True if the formatter ran and succeeded
        """
        if not self.enabled:
            logger.info("Formatting disabled")
            return False

        if not self.is_available():
            logger.warning("%s is not installed, skipping formatting", self.argv[0])
            return False

        cmd = [*self.argv, str(directory)]
        logger.info("Running %s", " ".join(cmd))
        try:
            result = subprocess.run(cmd, capture_output=True, text=True, timeout=self.timeout)
        except (OSError, subprocess.SubprocessError) as e:
            logger.error(
                "Formatter failed: %s, in directory: %s, probable cause: %s",
                e,
                directory,
                self.probable_cause,
            )
            return False

        if result.returncode != 0:
            logger.error(
                "Formatter failed: exit %d (%s), in directory: %s, probable cause: %s",
                result.returncode,
                result.stderr.strip(),
                directory,
                self.probable_cause,
            )
            return False

        logger.info("Formatting succeeded")
        return True

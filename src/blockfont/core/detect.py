"""Format sniffing backends.

The validator cross-checks artifact formats against an external
opinion. A detector returns a free-text description of the data, or
None when it cannot give one; None always means "could not verify",
never "wrong format".
"""

import subprocess
from typing import Protocol

import structlog

logger = structlog.get_logger("blockfont.detect")


class FormatDetector(Protocol):
    """Anything that can describe the format of a byte string."""

    def detect_format(self, data: bytes) -> str | None: ...


class NullFormatDetector:
    """Detector that never has an opinion."""

    def detect_format(self, data: bytes) -> str | None:
        return None


class FileCommandDetector:
    """Detector backed by the `file` utility.

    Data is piped to `file -b -`. A missing or unrunnable binary, a
    non-zero exit or a timeout all yield None.
    """

    def __init__(self, timeout: float = 5.0, command: str = "file") -> None:
        self.timeout = timeout
        self.command = command

    def detect_format(self, data: bytes) -> str | None:
        try:
            result = subprocess.run(
                [self.command, "-b", "-"],
                input=data,
                capture_output=True,
                timeout=self.timeout,
                check=False,
            )
        except FileNotFoundError:
            logger.debug("Format sniffer not available", command=self.command)
            return None
        except subprocess.TimeoutExpired:
            logger.warning("Format sniffer timed out", command=self.command, timeout=self.timeout)
            return None
        except OSError as e:
            logger.warning("Format sniffer could not run", command=self.command, error=str(e))
            return None

        if result.returncode != 0:
            logger.debug(
                "Format sniffer failed",
                command=self.command,
                returncode=result.returncode,
            )
            return None

        description = result.stdout.decode("utf-8", errors="replace").strip()
        return description or None

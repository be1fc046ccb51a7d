"""Artifact validation.

Checks the three font artifacts on disk against size ceilings and
format expectations. Findings are returned as data; nothing here raises
for a bad artifact, and every artifact is checked even when an earlier
one fails.

Per-artifact state progresses MISSING -> EMPTY -> OVERSIZED -> VALID;
an artifact stops at the first state whose check it fails.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

import structlog

from blockfont.config import FontConfig, ValidationConfig
from blockfont.core.detect import FileCommandDetector, FormatDetector, NullFormatDetector

logger = structlog.get_logger("blockfont.validator")

WOFF2_MAGIC = b"wOF2"
WOFF_MAGIC = b"wOFF"


class ArtifactState(str, Enum):
    """Lifecycle state of one artifact."""

    MISSING = "missing"
    EMPTY = "empty"
    OVERSIZED = "oversized"
    VALID = "valid"


class CheckStatus(str, Enum):
    """Outcome of a single check."""

    PASS = "pass"
    WARN = "warn"
    FAIL = "fail"
    SKIP = "skip"


@dataclass(frozen=True)
class CheckResult:
    """One named check and its outcome."""

    name: str
    status: CheckStatus
    message: str = ""


@dataclass(frozen=True)
class ArtifactSpec:
    """Expectations for one artifact kind.

    Attributes:
        kind: Artifact kind, also the file extension (e.g., "woff2")
        filename: File name inside the output directory
        max_size: Size ceiling in bytes (inclusive)
        magic: Required leading bytes, if any
        sniff_keywords: Any of these in a sniffer description counts as a match
    """

    kind: str
    filename: str
    max_size: int
    magic: bytes | None = None
    sniff_keywords: tuple[str, ...] = ()


@dataclass
class ArtifactReport:
    """Validation outcome for one artifact."""

    spec: ArtifactSpec
    path: Path
    state: ArtifactState
    size: int = 0
    checks: list[CheckResult] = field(default_factory=list)

    @property
    def failed(self) -> bool:
        """Whether the artifact fails validation."""
        return self.state is not ArtifactState.VALID or any(
            check.status is CheckStatus.FAIL for check in self.checks
        )


@dataclass
class ValidationReport:
    """Validation outcome for all artifacts."""

    artifacts: list[ArtifactReport]

    @property
    def passed(self) -> bool:
        """True only if every artifact is valid and no check failed."""
        return all(not report.failed for report in self.artifacts)

    @property
    def total_size(self) -> int:
        """Combined size of the artifacts that exist."""
        return sum(report.size for report in self.artifacts)

    @property
    def warnings(self) -> list[CheckResult]:
        """All warning checks across artifacts."""
        return [
            check
            for report in self.artifacts
            for check in report.checks
            if check.status is CheckStatus.WARN
        ]


def default_artifact_specs(font_name: str, config: ValidationConfig) -> list[ArtifactSpec]:
    """Get the expectations for the TTF, WOFF2 and WOFF artifacts."""
    limits = config.limits
    return [
        ArtifactSpec(
            kind="woff2",
            filename=f"{font_name}.woff2",
            max_size=limits.woff2,
            magic=WOFF2_MAGIC,
            sniff_keywords=("WOFF2", "Web Open Font Format (Version 2)"),
        ),
        ArtifactSpec(
            kind="woff",
            filename=f"{font_name}.woff",
            max_size=limits.woff,
            magic=WOFF_MAGIC,
            sniff_keywords=("WOFF", "Web Open Font Format"),
        ),
        ArtifactSpec(
            kind="ttf",
            filename=f"{font_name}.ttf",
            max_size=limits.ttf,
            sniff_keywords=("TrueType", "OpenType"),
        ),
    ]


class ArtifactValidator:
    """Validates font artifacts in an output directory.

    Example:
        validator = ArtifactValidator(FontConfig(), ValidationConfig())
        report = validator.validate(Path("fonts"))
        if not report.passed:
            ...
    """

    def __init__(
        self,
        font_config: FontConfig,
        config: ValidationConfig,
        detector: FormatDetector | None = None,
    ) -> None:
        """Initialize the validator.

        Args:
            font_config: Supplies the artifact file stem
            config: Size limits, strictness and sniffing settings
            detector: Format sniffer (defaults to the `file` utility when
                enabled, otherwise no sniffing)
        """
        self.config = config
        self.specs = default_artifact_specs(font_config.font_name, config)
        if detector is None:
            detector = (
                FileCommandDetector(timeout=config.sniff_timeout)
                if config.use_file_command
                else NullFormatDetector()
            )
        self.detector = detector

    def validate(self, output_dir: Path) -> ValidationReport:
        """Validate every artifact in the output directory."""
        reports = [self.validate_artifact(output_dir / spec.filename, spec) for spec in self.specs]
        report = ValidationReport(artifacts=reports)
        logger.info(
            "Validation complete",
            passed=report.passed,
            total_size=report.total_size,
            warnings=len(report.warnings),
        )
        return report

    def validate_artifact(self, path: Path, spec: ArtifactSpec) -> ArtifactReport:
        """Validate one artifact file."""
        if not path.is_file():
            return ArtifactReport(
                spec=spec,
                path=path,
                state=ArtifactState.MISSING,
                checks=[CheckResult("exists", CheckStatus.FAIL, "file not found")],
            )

        size = path.stat().st_size
        checks = [CheckResult("exists", CheckStatus.PASS)]

        if size == 0:
            checks.append(CheckResult("non-empty", CheckStatus.FAIL, "file is empty"))
            return ArtifactReport(spec, path, ArtifactState.EMPTY, size, checks)
        checks.append(CheckResult("non-empty", CheckStatus.PASS))

        if size > spec.max_size:
            checks.append(
                CheckResult(
                    "size",
                    CheckStatus.FAIL,
                    f"{size} bytes exceeds limit of {spec.max_size} bytes",
                )
            )
            return ArtifactReport(spec, path, ArtifactState.OVERSIZED, size, checks)
        checks.append(CheckResult("size", CheckStatus.PASS, f"{size} / {spec.max_size} bytes"))

        data = path.read_bytes()
        checks.append(self._check_magic(data, spec))
        checks.append(self._check_sniff(data, spec))

        report = ArtifactReport(spec, path, ArtifactState.VALID, size, checks)
        logger.debug(
            "Artifact checked",
            kind=spec.kind,
            size=size,
            failed=report.failed,
        )
        return report

    def _check_magic(self, data: bytes, spec: ArtifactSpec) -> CheckResult:
        if spec.magic is None:
            return CheckResult("magic", CheckStatus.SKIP, "no magic bytes defined")
        actual = data[: len(spec.magic)]
        if actual == spec.magic:
            return CheckResult("magic", CheckStatus.PASS, spec.magic.hex())
        status = CheckStatus.FAIL if self.config.strict_magic else CheckStatus.WARN
        return CheckResult(
            "magic",
            status,
            f"expected {spec.magic.hex()}, found {actual.hex() or 'nothing'}",
        )

    def _check_sniff(self, data: bytes, spec: ArtifactSpec) -> CheckResult:
        if not spec.sniff_keywords:
            return CheckResult("format", CheckStatus.SKIP, "no format keywords defined")
        description = self.detector.detect_format(data)
        if description is None:
            return CheckResult("format", CheckStatus.SKIP, "could not verify format")
        if any(keyword.lower() in description.lower() for keyword in spec.sniff_keywords):
            return CheckResult("format", CheckStatus.PASS, description)
        status = CheckStatus.FAIL if self.config.strict_sniff else CheckStatus.WARN
        return CheckResult("format", status, f"unexpected format: {description}")

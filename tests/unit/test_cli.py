"""Tests for the command-line interface."""

from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from blockfont import __version__
from blockfont.cli.app import app
from blockfont.exceptions import AssemblyError, PipelineError
from blockfont.utils import BuildStats


@pytest.fixture
def runner() -> CliRunner:
    """Typer test runner."""
    return CliRunner()


class TestCli:
    """Tests for top-level options."""

    def test_version(self, runner):
        """Test --version prints the version and exits cleanly."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestGenerateCommand:
    """Tests for `blockfont generate`."""

    @patch("blockfont.cli.app.FontPipeline")
    def test_success(self, mock_pipeline, runner, tmp_path):
        """Test a successful build exits with code 0."""
        mock_pipeline.return_value.run.return_value = BuildStats(glyph_count=33)

        result = runner.invoke(app, ["generate", "--output-dir", str(tmp_path), "--quiet"])

        assert result.exit_code == 0
        settings = mock_pipeline.call_args.args[0]
        assert settings.build.output_dir == tmp_path
        assert settings.build.optimize is True

    @patch("blockfont.cli.app.FontPipeline")
    def test_options_reach_settings(self, mock_pipeline, runner, tmp_path):
        """Test CLI flags are translated into settings."""
        mock_pipeline.return_value.run.return_value = BuildStats()

        runner.invoke(
            app,
            [
                "generate",
                "-d",
                str(tmp_path),
                "--font-name",
                "Tiny",
                "--no-optimize",
                "--keep-temp",
                "--timestamp",
                "1700000000",
                "-q",
            ],
        )

        settings = mock_pipeline.call_args.args[0]
        assert settings.font.font_name == "Tiny"
        assert settings.font.build_timestamp == 1700000000
        assert settings.build.optimize is False
        assert settings.build.keep_temp is True

    @patch("blockfont.cli.app.FontPipeline")
    def test_stage_failure(self, mock_pipeline, runner, tmp_path):
        """Test a failed stage exits with code 1 and names the stage."""
        error = PipelineError("assemble", "no glyph icons to assemble")
        error.__cause__ = AssemblyError("no glyph icons to assemble")
        mock_pipeline.return_value.run.side_effect = error

        result = runner.invoke(app, ["generate", "-d", str(tmp_path), "-q"])

        assert result.exit_code == 1
        assert "assemble" in result.output

    def test_invalid_font_name(self, runner, tmp_path):
        """Test an invalid font name is reported before building."""
        result = runner.invoke(app, ["generate", "-d", str(tmp_path), "--font-name", "a b"])
        assert result.exit_code == 1
        assert "Invalid configuration" in result.output

    def test_invalid_log_level(self, runner, tmp_path):
        """Test an unknown log level is rejected."""
        result = runner.invoke(app, ["generate", "-d", str(tmp_path), "--log-level", "LOUD"])
        assert result.exit_code == 1
        assert "Invalid log level" in result.output


class TestValidateCommand:
    """Tests for `blockfont validate`."""

    def test_missing_artifacts(self, runner, tmp_path):
        """Test validating an empty directory fails."""
        result = runner.invoke(app, ["validate", "-d", str(tmp_path), "--no-sniff"])

        assert result.exit_code == 1
        assert "BlockFont.woff2" in result.output
        assert "missing" in result.output

    def test_valid_artifacts(self, runner, tmp_path):
        """Test small artifacts with correct signatures pass."""
        (tmp_path / "BlockFont.woff2").write_bytes(b"wOF2" + b"\x00" * 60)
        (tmp_path / "BlockFont.woff").write_bytes(b"wOFF" + b"\x00" * 60)
        (tmp_path / "BlockFont.ttf").write_bytes(b"\x00\x01\x00\x00" + b"\x00" * 60)

        result = runner.invoke(app, ["validate", "-d", str(tmp_path), "--no-sniff"])

        assert result.exit_code == 0
        assert "All artifacts valid" in result.output

    def test_strict_magic(self, runner, tmp_path):
        """Test --strict turns a signature mismatch into a failure."""
        (tmp_path / "BlockFont.woff2").write_bytes(b"XXXX" + b"\x00" * 60)
        (tmp_path / "BlockFont.woff").write_bytes(b"wOFF" + b"\x00" * 60)
        (tmp_path / "BlockFont.ttf").write_bytes(b"\x00\x01\x00\x00" + b"\x00" * 60)

        lenient = runner.invoke(app, ["validate", "-d", str(tmp_path), "--no-sniff"])
        strict = runner.invoke(app, ["validate", "-d", str(tmp_path), "--no-sniff", "--strict"])

        assert lenient.exit_code == 0
        assert strict.exit_code == 1


class TestRenderCommands:
    """Tests for `blockfont render` and `blockfont text-svg`."""

    def test_render_to_stdout(self, runner):
        """Test blocky SVG is printed to stdout."""
        result = runner.invoke(app, ["render", "HI", "--block-size", "2"])

        assert result.exit_code == 0
        assert result.output.startswith('<svg width="16" height="14"')

    def test_render_to_file(self, runner, tmp_path):
        """Test blocky SVG is written to --output."""
        output = tmp_path / "logo.svg"
        result = runner.invoke(app, ["render", "W", "--theme", "dark", "-o", str(output)])

        assert result.exit_code == 0
        assert output.read_text(encoding="utf-8").startswith("<svg")

    def test_render_missing_glyph(self, runner):
        """Test unsupported characters fail unless skipping is requested."""
        strict = runner.invoke(app, ["render", "H@"])
        skipped = runner.invoke(app, ["render", "H@", "--skip-missing"])

        assert strict.exit_code == 1
        assert "not found" in strict.output
        assert skipped.exit_code == 0

    def test_text_svg(self, runner):
        """Test font-based SVG escapes the text."""
        result = runner.invoke(app, ["text-svg", "A&B", "--font-size", "72"])

        assert result.exit_code == 0
        assert result.output.startswith("<svg")
        assert "A&amp;B" in result.output
        assert 'font-size="72"' in result.output

    def test_text_svg_aria_label(self, runner):
        """Test an aria label adds an img role."""
        result = runner.invoke(app, ["text-svg", "HI", "--aria-label", "Greeting"])
        assert 'role="img" aria-label="Greeting"' in result.output

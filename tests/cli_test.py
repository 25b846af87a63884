# Copyright (C) 2025 Gil Benezer
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published
# by the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.

"""
Tests for the command-line interface.
"""

import logging

import pytest
from click.testing import CliRunner
from PIL import Image

from lorenzanim.cli import cli
from lorenzanim.logging_config import LOGGER_NAME


@pytest.fixture
def runner():
    yield CliRunner()
    # Handlers hold the runner's captured stdout, which is closed afterwards
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


SMALL = ["-w", "80", "-H", "60", "--warmup", "10"]


class TestAnimate:
    """Test the animate command"""

    def test_writes_gif(self, runner, tmp_path):
        """Test a small animation is written and reported"""
        output = tmp_path / "out.gif"

        result = runner.invoke(cli, ["animate", "-o", str(output), "-f", "3", *SMALL])

        assert result.exit_code == 0, result.output
        assert f"Animation saved as {output}" in result.output
        assert "Progress: 1/3 frames" in result.output
        with Image.open(output) as image:
            assert image.n_frames == 3
            assert image.size == (80, 60)

    def test_zero_frames_is_usage_error(self, runner, tmp_path):
        """Test an empty animation is refused"""
        result = runner.invoke(cli, ["animate", "-o", str(tmp_path / "a.gif"), "-f", "0", *SMALL])

        assert result.exit_code == 2
        assert "--frames" in result.output

    def test_invalid_size_is_usage_error(self, runner, tmp_path):
        """Test configuration errors become usage errors"""
        result = runner.invoke(cli, ["animate", "-o", str(tmp_path / "a.gif"), "-w", "0"])

        assert result.exit_code == 2
        assert "width" in result.output

    def test_bad_background(self, runner, tmp_path):
        """Test malformed colors are rejected"""
        result = runner.invoke(
            cli, ["animate", "-o", str(tmp_path / "a.gif"), "--background", "red", *SMALL]
        )

        assert result.exit_code == 2
        assert "--background" in result.output

    def test_unwritable_output(self, runner, tmp_path):
        """Test output failures are reported without a traceback"""
        output = tmp_path / "missing" / "a.gif"

        result = runner.invoke(cli, ["animate", "-o", str(output), "-f", "1", *SMALL])

        assert result.exit_code == 1
        assert "Could not write" in result.output

    def test_diverging_step_size(self, runner, tmp_path):
        """Test an unstable step size still writes the animation"""
        output = tmp_path / "diverging.gif"

        result = runner.invoke(
            cli,
            ["animate", "-o", str(output), "-f", "20", "--dt", "0.1", "--warmup", "0",
             "-w", "80", "-H", "60"],
        )

        assert result.exit_code == 0, result.output
        with Image.open(output) as image:
            assert image.n_frames == 20


class TestImage:
    """Test the image command"""

    def test_writes_png(self, runner, tmp_path):
        """Test a small dense image is written"""
        output = tmp_path / "attractor.png"

        result = runner.invoke(cli, ["image", "-o", str(output), "-n", "2000", *SMALL])

        assert result.exit_code == 0, result.output
        assert f"Lorenz attractor saved as {output}" in result.output
        with Image.open(output) as image:
            assert image.size == (80, 60)
            assert image.getbbox() is not None


class TestSensitivity:
    """Test the sensitivity command"""

    def test_table(self, runner):
        """Test header, initial difference and one line per sample"""
        result = runner.invoke(cli, ["sensitivity", "--samples", "4", "--stride", "10"])

        assert result.exit_code == 0, result.output
        lines = result.output.splitlines()
        assert "Initial difference: 0.000100" in lines
        header = lines.index("Time\tSystem1_X\tSystem2_X\tDifference")
        rows = lines[header + 2:]
        assert len(rows) == 4
        assert rows[0].startswith("0.01\t")
        assert len(rows[0].split("\t")) == 4

    def test_negative_samples_rejected(self, runner):
        """Test counts are range-checked by click"""
        result = runner.invoke(cli, ["sensitivity", "--samples", "-1"])

        assert result.exit_code == 2


class TestPreview:
    """Test the preview command"""

    def test_prints_frames(self, runner):
        """Test frames are printed to stdout"""
        result = runner.invoke(
            cli,
            ["preview", "-f", "2", "--columns", "30", "--rows", "8", "--delay", "0"],
        )

        assert result.exit_code == 0, result.output
        assert "Frame: 0 | Lorenz" in result.output
        assert "Frame: 1 | Lorenz" in result.output


class TestGlobalOptions:
    """Test group-level options"""

    def test_log_file(self, runner, tmp_path):
        """Test logs are mirrored to a file"""
        log_file = tmp_path / "run.log"

        result = runner.invoke(
            cli,
            ["--log-file", str(log_file), "animate", "-o", str(tmp_path / "a.gif"), "-f", "1", *SMALL],
        )

        assert result.exit_code == 0, result.output
        logger = logging.getLogger(LOGGER_NAME)
        for handler in list(logger.handlers):
            handler.close()
        assert "Creating Lorenz attractor animation with 1 frames" in log_file.read_text(
            encoding="utf-8"
        )

    def test_help(self, runner):
        """Test every command is listed"""
        result = runner.invoke(cli, ["--help"])

        assert result.exit_code == 0
        for command in ("animate", "image", "sensitivity", "preview"):
            assert command in result.output

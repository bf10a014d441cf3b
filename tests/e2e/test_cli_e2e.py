from __future__ import annotations

"""
End-to-End (E2E) CLI Tests.

Invokes the entry point script via subprocess and validates exit codes,
stream output and filesystem side effects.
"""

import os
import subprocess
import sys
from pathlib import Path
from typing import List

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
SRC_DIR = PROJECT_ROOT / "src"
ENTRY_POINT = SRC_DIR / "ssinject" / "main.py"


def run_cli(args: List[str]) -> subprocess.CompletedProcess[str]:
    """
    Execute the CLI in a separate process with 'src' on PYTHONPATH.

    Args:
        args: Command line arguments (excluding 'python' and script path).

    Returns:
        subprocess.CompletedProcess: returncode, stdout and stderr.
    """
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_DIR) + os.pathsep + env.get("PYTHONPATH", "")

    cmd = [sys.executable, str(ENTRY_POINT)] + args

    return subprocess.run(
        cmd,
        env=env,
        capture_output=True,
        text=True,
        encoding="utf-8",
    )


@pytest.fixture
def sample_site(make_site) -> Path:
    """
    Structure:
    /site
      index.html
      /partials
        header.html  (includes nav.html)
        nav.html
        footer.html
    """
    return make_site({
        "index.html": (
            "<html>\n"
            '<!--#include virtual="/partials/header.html"-->\n'
            "<main>body</main>\n"
            '<!--#include virtual="partials/footer.html" -->\n'
            "</html>\n"
        ),
        "partials/header.html": '<header><!--#include virtual="/partials/nav.html"--></header>',
        "partials/nav.html": "<nav>home</nav>",
        "partials/footer.html": "<footer>(c)</footer>",
    })


def test_cli_happy_path_execution(tmp_path: Path, sample_site: Path) -> None:
    output_dir = tmp_path / "dist"

    result = run_cli([str(sample_site), str(output_dir)])

    assert result.returncode == 0, f"CLI failed with stderr: {result.stderr}"
    assert sorted(os.listdir(output_dir)) == ["index.html"]
    assert (output_dir / "index.html").read_text(encoding="utf-8") == (
        "<html>\n"
        "<header><nav>home</nav></header>\n"
        "<main>body</main>\n"
        "<footer>(c)</footer>\n"
        "</html>\n"
    )
    assert f"Processed and wrote to: {output_dir / 'index.html'}" in result.stdout
    assert "SSI injection completed successfully." in result.stdout


def test_cli_usage_on_missing_arguments() -> None:
    result = run_cli([])

    assert result.returncode == 1
    assert "Usage:" in result.stderr


def test_cli_handles_missing_input(tmp_path: Path) -> None:
    result = run_cli([str(tmp_path / "nowhere"), str(tmp_path / "out")])

    assert result.returncode == 1
    assert "not a valid directory" in result.stderr


def test_cli_cycle_exit_code(tmp_path: Path, make_site) -> None:
    site = make_site({"index.html": '<!--#include virtual="/index.html"-->'})
    output_dir = tmp_path / "dist"

    result = run_cli([str(site), str(output_dir)])

    assert result.returncode == 1
    assert "Circular include detected" in result.stderr
    assert not (output_dir / "index.html").exists()

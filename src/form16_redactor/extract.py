"""PDF text extraction via poppler's ``pdftotext``."""

from __future__ import annotations
import logging
import subprocess
from pathlib import Path

from .errors import ExtractionError

logger = logging.getLogger(__name__)

DEFAULT_PDFTOTEXT = "pdftotext"


def extract_text(pdf_path: str | Path, *, executable: str = DEFAULT_PDFTOTEXT) -> str:
    """Return the text of ``pdf_path`` with its original layout kept.

    Runs ``pdftotext -layout <pdf> -`` and captures stdout.
    """
    cmd = [executable, "-layout", str(pdf_path), "-"]
    logger.debug("Running %s", " ".join(cmd))
    try:
        proc = subprocess.run(cmd, capture_output=True, check=False)
    except OSError as exc:
        raise ExtractionError(f"cannot run {executable}: {exc}") from exc

    if proc.returncode != 0:
        stderr = proc.stderr.decode("utf-8", errors="replace").strip()
        raise ExtractionError(
            f"{executable} exited with status {proc.returncode}: {stderr or 'no output'}"
        )
    return proc.stdout.decode("utf-8", errors="replace")

"""Output files: the filtered report and the untouched raw text."""

from __future__ import annotations
import logging
from pathlib import Path

from .errors import OutputWriteError
from .types import FilterResult

logger = logging.getLogger(__name__)

RULE_WIDTH = 50


def _bracketed(items: list[str]) -> str:
    return "[" + ", ".join(items) + "]"


def format_filtered(data: FilterResult) -> str:
    """Render a FilterResult as the filtered-output report."""
    parts = [
        "=== FILTERED PDF DATA ===\n\n",
        "FILTERING SUMMARY:\n",
        f"- Removed PII Fields: {_bracketed(data.removed_categories)}\n",
        f"- Retained Business Fields: {_bracketed(list(data.retained_fields))}\n",
        "\n",
    ]
    if data.retained_fields:
        parts.append("RETAINED BUSINESS DATA:\n")
        for field_type, values in data.retained_fields.items():
            parts.append(f"{field_type}:\n")
            parts.extend(f"  - {value}\n" for value in values)
        parts.append("\n")
    parts.append("CLEANED TEXT CONTENT:\n")
    parts.append("=" * RULE_WIDTH + "\n")
    parts.append(data.cleaned_text)
    return "".join(parts)


def format_raw(text: str) -> str:
    return "=== RAW PDF TEXT (NO REDACTIONS) ===\n\n" + text


def _write(path: str | Path, content: str) -> None:
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise OutputWriteError(f"cannot write {path}: {exc}") from exc
    logger.debug("Wrote %d characters to %s", len(content), path)


def save_filtered_data(data: FilterResult, output_file: str | Path) -> None:
    """Write the filtered report to ``output_file``."""
    _write(output_file, format_filtered(data))


def save_raw_text(text: str, output_file: str | Path) -> None:
    """Write the unredacted extraction to ``output_file`` for comparison."""
    _write(output_file, format_raw(text))


def save_outputs(
    raw_text: str,
    data: FilterResult,
    raw_file: str | Path,
    filtered_file: str | Path,
) -> None:
    """Write the raw text and the filtered report as a pair.

    Both files are first written to ``.partial`` siblings and only moved
    into place once both writes succeeded, so a failed run leaves neither.
    """
    pending = [
        (Path(raw_file), format_raw(raw_text)),
        (Path(filtered_file), format_filtered(data)),
    ]
    staged: list[tuple[Path, Path]] = []
    try:
        for path, content in pending:
            tmp = path.with_name(path.name + ".partial")
            _write(tmp, content)
            staged.append((tmp, path))
        for tmp, path in staged:
            try:
                tmp.replace(path)
            except OSError as exc:
                raise OutputWriteError(f"cannot write {path}: {exc}") from exc
    except OutputWriteError:
        for tmp, _ in staged:
            tmp.unlink(missing_ok=True)
        raise

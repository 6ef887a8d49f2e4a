"""CLI interface for form16-redactor.

Usage:
    # Redact Form16.pdf into filtered_output.txt + extracted_text.txt
    form16-redact

    # Custom output paths (filtered first, raw second)
    form16-redact out/filtered.txt out/raw.txt --input Form16_2025-26.pdf

    # Everything from a YAML file, CLI flags still win
    python -m form16_redactor.cli --config redactor.yaml --log-level DEBUG

Exit status is 0 on success or when the PDF holds no text, 1 on any
fatal error (missing PDF, extraction failure, unreadable word list,
unwritable output).
"""

from __future__ import annotations
import argparse
import logging
import sys
from pathlib import Path
from typing import Any

from .config import load_config, load_from_yaml
from .dictionary import load_word_set
from .errors import EmptyInput, ExtractionError, RedactorError
from .extract import extract_text
from .logger import setup_logging
from .redactor import Redactor
from .types import FilterResult
from .writer import save_outputs

logger = logging.getLogger(__name__)


def process(cfg: dict[str, Any], redactor: Redactor | None = None) -> FilterResult:
    """Extract, redact and write one document as described by ``cfg``.

    Raises ``EmptyInput`` when the PDF has no text.  Every input (PDF text and
    word list) is read before the first output file is written.
    """
    pdf_file = Path(cfg["input"])
    if not pdf_file.is_file():
        raise ExtractionError(f"PDF file does not exist: {pdf_file}")

    logger.info("Reading PDF file: %s", pdf_file)
    pdf_text = extract_text(pdf_file, executable=cfg["pdftotext"])
    if not pdf_text.strip():
        raise EmptyInput(f"no text could be extracted from {pdf_file}")
    logger.info("Extracted %d characters from PDF", len(pdf_text))

    word_set = load_word_set(cfg["dictionary"])

    redactor = redactor or Redactor()
    logger.info("Filtering PII data...")
    result = redactor.filter_pii(pdf_text)

    logger.info("Redacting non-dictionary English words using offline list...")
    result = redactor.filter_words(result, word_set)

    save_outputs(pdf_text, result, cfg["raw_output"], cfg["filtered_output"])

    logger.info("=== PROCESSING COMPLETE ===")
    logger.info("Input file: %s", pdf_file)
    logger.info("Filtered output file: %s", cfg["filtered_output"])
    logger.info("Raw text file: %s", cfg["raw_output"])
    logger.info("Original text length: %d characters", len(pdf_text))
    logger.info("Filtered text length: %d characters", len(result.cleaned_text))
    if result.removed_categories:
        logger.info("Removed PII fields: %s", ", ".join(result.removed_categories))
    if result.retained_fields:
        logger.info("Retained business data: %s", ", ".join(result.retained_fields))
    return result


def _build_config(args: argparse.Namespace) -> dict[str, Any]:
    cfg = load_from_yaml(args.config) if args.config else load_config({})
    overrides = {
        "filtered_output": args.filtered_output,
        "raw_output": args.raw_output,
        "input": args.input,
        "dictionary": args.dictionary,
        "pdftotext": args.pdftotext,
        "log_level": args.log_level,
    }
    cfg.update({k: v for k, v in overrides.items() if v is not None})
    return cfg


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="form16-redact",
        description="Redact PII from the text of an Indian Form-16 PDF",
    )
    parser.add_argument("filtered_output", nargs="?", help="Filtered report path")
    parser.add_argument("raw_output", nargs="?", help="Raw extracted text path")
    parser.add_argument("--input", help="Form-16 PDF to process")
    parser.add_argument("--dictionary", help="Newline-separated English word list")
    parser.add_argument("--config", help="YAML config file")
    parser.add_argument("--pdftotext", help="pdftotext executable")
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING or ERROR")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        cfg = _build_config(args)
    except RedactorError as exc:
        setup_logging()
        logger.critical("%s", exc)
        return 1
    try:
        setup_logging(cfg["log_level"], cfg["log_file"])
    except OSError as exc:
        setup_logging()
        logger.critical("cannot open log file %s: %s", cfg["log_file"], exc)
        return 1

    try:
        process(cfg)
    except EmptyInput:
        logger.info("No text could be extracted from the PDF. Exiting.")
        return 0
    except RedactorError as exc:
        logger.critical("%s", exc)
        return 1

    logger.info("Filtered data has been saved successfully!")
    return 0


if __name__ == "__main__":
    sys.exit(main())

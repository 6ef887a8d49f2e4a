"""YAML/dict config loader for form16-redactor.

Supports loading from a YAML file or a plain dict (for embedding
in a larger config under a ``form16_redactor`` key).

Example YAML:

    form16_redactor:
      input: Form16_2025-26.pdf
      dictionary: /usr/share/dict/words
      filtered_output: out/filtered_output.txt
      raw_output: out/extracted_text.txt
      pdftotext: /usr/local/bin/pdftotext
      log_level: DEBUG
      log_file: logs/redactor.log
"""

from __future__ import annotations
import os
from pathlib import Path
from typing import Any

import yaml

from .errors import ConfigError
from .extract import DEFAULT_PDFTOTEXT

DEFAULT_INPUT = os.environ.get("FORM16_REDACTOR_INPUT", "Form16.pdf")
DEFAULT_DICTIONARY = os.environ.get("FORM16_REDACTOR_DICTIONARY", "english_words.txt")
DEFAULT_FILTERED_OUTPUT = "filtered_output.txt"
DEFAULT_RAW_OUTPUT = "extracted_text.txt"


def load_config(data: dict[str, Any] | None) -> dict[str, Any]:
    """Normalize a config dict (from YAML or inline)."""
    data = data or {}
    # Support nested under "form16_redactor" key or flat
    if "form16_redactor" in data:
        data = data["form16_redactor"] or {}
    if not isinstance(data, dict):
        raise ConfigError("form16_redactor config section must be a mapping")

    return {
        "input": data.get("input", DEFAULT_INPUT),
        "dictionary": data.get("dictionary", DEFAULT_DICTIONARY),
        "filtered_output": data.get("filtered_output", DEFAULT_FILTERED_OUTPUT),
        "raw_output": data.get("raw_output", DEFAULT_RAW_OUTPUT),
        "pdftotext": data.get("pdftotext", DEFAULT_PDFTOTEXT),
        "log_level": str(data.get("log_level", "INFO")),
        "log_file": data.get("log_file"),
    }


def load_from_yaml(path: str | Path) -> dict[str, Any]:
    """Load config from a YAML file."""
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"cannot load config {path}: {exc}") from exc
    if data is not None and not isinstance(data, dict):
        raise ConfigError(f"config {path} must be a mapping")
    return load_config(data)

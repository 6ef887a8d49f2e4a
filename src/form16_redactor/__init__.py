"""Form-16 redactor — layered PII and non-dictionary word redaction for tax documents."""

from .redactor import Redactor
from .patterns import PatternSet, build_pattern_set
from .scrubber import scrub_tokens
from .classifier import classify_lines
from .lexical import redact_unknown_words, filter_words
from .dictionary import load_word_set
from .extract import extract_text
from .writer import save_filtered_data, save_raw_text, save_outputs
from .config import load_config, load_from_yaml
from .errors import (
    RedactorError, ExtractionError, EmptyInput,
    DictionaryLoadError, OutputWriteError, ConfigError,
)
from .types import FilterResult, TokenRule, LineRule

__all__ = [
    "Redactor",
    "PatternSet", "build_pattern_set",
    "scrub_tokens", "classify_lines", "redact_unknown_words", "filter_words",
    "load_word_set", "extract_text", "save_filtered_data", "save_raw_text", "save_outputs",
    "load_config", "load_from_yaml",
    "RedactorError", "ExtractionError", "EmptyInput",
    "DictionaryLoadError", "OutputWriteError", "ConfigError",
    "FilterResult", "TokenRule", "LineRule",
]
__version__ = "0.1.0"

"""Exception hierarchy for the I/O collaborators around the redaction engine.

The engine itself (patterns, scrubber, classifier, lexical filter) never
raises; every failure below originates while reading or writing files or
running the external extractor.
"""


class RedactorError(Exception):
    """Base class for all form16-redactor failures."""


class ExtractionError(RedactorError):
    """Raised when the text extractor is missing or fails on a document."""


class EmptyInput(RedactorError):
    """Raised when extraction yields only whitespace.

    Not a failure: callers treat it as "nothing to process" and stop
    without writing output.
    """


class DictionaryLoadError(RedactorError):
    """Raised when the word list cannot be opened or read."""


class OutputWriteError(RedactorError):
    """Raised when an output file cannot be created or written."""


class ConfigError(RedactorError):
    """Raised when a config file cannot be read or parsed."""

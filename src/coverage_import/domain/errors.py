"""Errors raised while importing coverage data.

Every fatal condition of an import run is a ``CoverageImportError``. Recoverable
per-record problems are plain ``ValueError``s handled inside the parsers.
"""


class CoverageImportError(Exception):
    """Base class for errors that abort an import run."""


class InputError(CoverageImportError):
    """Input file missing, output path unusable, or output file already present."""


class DocumentParseError(CoverageImportError):
    """A source document could not be parsed as a whole."""


class MergeSourceError(CoverageImportError):
    """An existing configuration file could not be read for merging."""


class SerializationError(CoverageImportError):
    """A configuration could not be rendered or written."""

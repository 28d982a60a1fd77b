"""
Local file system adapter implementation for reading transcripts.
"""

import logging
import os

from typing_extensions import override

from nospace.exceptions import TranscriptSourceError
from nospace.ports.transcript.transcript_source_port import TranscriptSourcePort


class LocalTranscriptAdapter(TranscriptSourcePort):
    """Reads transcripts from files on the local disk."""

    def __init__(self, logger: logging.Logger | None = None, encoding: str = "utf-8"):
        """
        Initialize the adapter.

        Args:
            logger: Logger instance to use for logging. If None, a default logger will be created.
            encoding: Text encoding of transcript files
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)
        self._encoding = encoding

    def _validate_file(self, path: str) -> None:
        if not path:
            raise TranscriptSourceError("Path must be a non-empty string")

        if not os.path.exists(path):
            raise TranscriptSourceError(f"Transcript does not exist: {path}")

        if not os.path.isfile(path):
            raise TranscriptSourceError(f"Path is not a file: {path}")

    @override
    def read(self, path: str) -> str:
        """
        Read a transcript file.

        Args:
            path: Path to the transcript file

        Returns:
            The file contents

        Raises:
            TranscriptSourceError: If the file is missing, not a regular file or unreadable
        """
        try:
            self._validate_file(path)
            with open(path, encoding=self._encoding) as f:
                text = f.read()
            self._logger.debug(f"Read {len(text)} characters from {path}")
            return text

        except TranscriptSourceError:
            raise
        except (OSError, UnicodeDecodeError) as e:
            raise TranscriptSourceError(f"Failed to read transcript {path}: {str(e)}")

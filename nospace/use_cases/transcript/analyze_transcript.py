"""
Use case for analyzing a transcript file end to end.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from nospace.entities.filesystem import Filesystem
from nospace.exceptions import BaseAppError, FilesystemError
from nospace.ports.transcript.transcript_source_port import TranscriptSourcePort
from nospace.use_cases.filesystem.build_filesystem import BuildFilesystemUseCase
from nospace.use_cases.filesystem.size_report import SizeReport, SizeReportUseCase


@dataclass(frozen=True)
class TranscriptAnalysis:
    path: str
    filesystem: Filesystem
    report: SizeReport


class AnalyzeTranscriptUseCase:
    """Use case reading a transcript, building its tree and reporting sizes."""

    def __init__(
        self,
        transcript_source: TranscriptSourcePort,
        build_filesystem: BuildFilesystemUseCase,
        size_report: SizeReportUseCase,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            transcript_source: Source the transcript text is read from
            build_filesystem: Use case replaying the transcript
            size_report: Use case computing the size answers
            logger: Logger instance to use for logging
        """
        self._transcript_source = transcript_source
        self._build_filesystem = build_filesystem
        self._size_report = size_report
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, path: str) -> TranscriptAnalysis:
        """
        Analyze the transcript stored at ``path``.

        Args:
            path: Location of the transcript

        Returns:
            The built tree and its size report

        Raises:
            TranscriptSourceError: If the transcript cannot be read
            FilesystemError: If the transcript cannot be replayed or reported on
        """
        try:
            self._logger.info(f"Analyzing transcript: {path}")
            text = self._transcript_source.read(path)
            filesystem = self._build_filesystem.execute(text)
            report = self._size_report.execute(filesystem)
            return TranscriptAnalysis(path=path, filesystem=filesystem, report=report)
        except BaseAppError:
            raise
        except Exception as e:
            self._logger.error(f"Error analyzing transcript: {e}")
            raise FilesystemError(f"Failed to analyze transcript {path}: {str(e)}")

"""
Dependency injection container for managing application dependencies.
"""

import logging

from nospace.adapters.transcript.local_transcript_adapter import (
    LocalTranscriptAdapter,
)
from nospace.parsing.command_parser import CommandParser
from nospace.ports.transcript.transcript_source_port import TranscriptSourcePort
from nospace.use_cases.filesystem.build_filesystem import BuildFilesystemUseCase
from nospace.use_cases.filesystem.filter_directories import FilterDirectoriesUseCase
from nospace.use_cases.filesystem.size_report import SizeReportUseCase
from nospace.use_cases.transcript.analyze_transcript import AnalyzeTranscriptUseCase


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self):
        self._instances = {}
        self._logger = logging.getLogger(__name__)

    def get_transcript_source(self) -> TranscriptSourcePort:
        """
        Get transcript source adapter instance.

        Returns:
            TranscriptSourcePort implementation
        """
        if "transcript_source" not in self._instances:
            self._instances["transcript_source"] = LocalTranscriptAdapter(self._logger)
        return self._instances["transcript_source"]

    def get_command_parser(self) -> CommandParser:
        if "command_parser" not in self._instances:
            self._instances["command_parser"] = CommandParser(self._logger)
        return self._instances["command_parser"]

    def get_build_filesystem_use_case(self) -> BuildFilesystemUseCase:
        """
        Get build filesystem use case with injected dependencies.

        Returns:
            Configured BuildFilesystemUseCase
        """
        if "build_filesystem_use_case" not in self._instances:
            parser = self.get_command_parser()
            self._instances["build_filesystem_use_case"] = BuildFilesystemUseCase(
                parser, self._logger
            )
        return self._instances["build_filesystem_use_case"]

    def get_filter_directories_use_case(self) -> FilterDirectoriesUseCase:
        if "filter_directories_use_case" not in self._instances:
            self._instances["filter_directories_use_case"] = FilterDirectoriesUseCase(
                self._logger
            )
        return self._instances["filter_directories_use_case"]

    def get_size_report_use_case(self) -> SizeReportUseCase:
        """
        Get size report use case with injected dependencies.

        Returns:
            Configured SizeReportUseCase
        """
        if "size_report_use_case" not in self._instances:
            filter_uc = self.get_filter_directories_use_case()
            self._instances["size_report_use_case"] = SizeReportUseCase(
                filter_uc, self._logger
            )
        return self._instances["size_report_use_case"]

    def get_analyze_transcript_use_case(self) -> AnalyzeTranscriptUseCase:
        """
        Get analyze transcript use case with injected dependencies.

        Returns:
            Configured AnalyzeTranscriptUseCase
        """
        if "analyze_transcript_use_case" not in self._instances:
            self._instances["analyze_transcript_use_case"] = AnalyzeTranscriptUseCase(
                self.get_transcript_source(),
                self.get_build_filesystem_use_case(),
                self.get_size_report_use_case(),
                self._logger,
            )
        return self._instances["analyze_transcript_use_case"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()

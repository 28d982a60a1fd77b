"""
Transcript source port interface defining the contract for reading transcripts.
"""

from abc import ABC, abstractmethod


class TranscriptSourcePort(ABC):
    """Port interface for transcript sources."""

    @abstractmethod
    def read(self, path: str) -> str:
        """
        Read a whole transcript into memory.

        Args:
            path: Location of the transcript

        Returns:
            The transcript text

        Raises:
            TranscriptSourceError: If the transcript cannot be read
        """
        pass

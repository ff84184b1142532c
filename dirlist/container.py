"""
Dependency injection container for managing library dependencies.
"""

import logging

from dirlist.adapters.local_directory_reader import LocalDirectoryReader
from dirlist.config.settings import Settings, get_settings
from dirlist.ports.directory_reader_port import DirectoryReaderPort
from dirlist.use_cases.entries.filter_entries import FilterEntriesUseCase
from dirlist.use_cases.entries.read_directory import ReadDirectoryUseCase


class DependencyContainer:
    """
    Container for managing library dependencies using dependency injection.
    """

    def __init__(self, settings: Settings | None = None):
        self._instances = {}
        self._settings = settings
        self._logger = logging.getLogger(__name__)

    def get_settings(self) -> Settings:
        """
        Get the settings used to build adapters.

        Returns:
            Settings instance
        """
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    def get_directory_reader(self) -> DirectoryReaderPort:
        """
        Get directory reader adapter instance.

        Returns:
            DirectoryReaderPort implementation
        """
        if "directory_reader" not in self._instances:
            self._instances["directory_reader"] = LocalDirectoryReader(
                self._logger, self.get_settings()
            )
        return self._instances["directory_reader"]

    def get_read_directory_use_case(self) -> ReadDirectoryUseCase:
        """
        Get read directory use case with injected dependencies.

        Returns:
            ReadDirectoryUseCase instance
        """
        if "read_directory_use_case" not in self._instances:
            self._instances["read_directory_use_case"] = ReadDirectoryUseCase(
                self.get_directory_reader(), self._logger
            )
        return self._instances["read_directory_use_case"]

    def get_filter_entries_use_case(self) -> FilterEntriesUseCase:
        """
        Get filter entries use case with injected dependencies.

        Returns:
            FilterEntriesUseCase instance
        """
        if "filter_entries_use_case" not in self._instances:
            self._instances["filter_entries_use_case"] = FilterEntriesUseCase(
                self._logger
            )
        return self._instances["filter_entries_use_case"]

    def reset(self) -> None:
        """Drop cached instances so they are rebuilt on next access."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()

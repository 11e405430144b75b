"""
Tests for the SearchFilesUseCase.
"""

from unittest.mock import MagicMock

import pytest

from catserver.exceptions import EmptyInputError, FileRepositoryError, InvalidPathError
from catserver.ports.files.filesystem_repository_port import FileSystemRepositoryPort
from catserver.use_cases.files.search_files import SearchFilesUseCase


class TestSearchFilesUseCase:
    """Test cases for the SearchFilesUseCase."""

    def test_execute_exact_match(self, memory_repository, mock_logger):
        """Test matching one entry by name."""
        use_case = SearchFilesUseCase(memory_repository, mock_logger)

        result = use_case.execute(".", "b.log")

        assert [e.name for e in result] == ["b.log"]
        mock_logger.info.assert_any_call("Found 1 entries matching pattern 'b.log'")

    def test_execute_wildcard(self, memory_repository, mock_logger):
        """Test that '*' returns every visible entry."""
        use_case = SearchFilesUseCase(memory_repository, mock_logger)

        result = use_case.execute(".", "*")

        assert [e.name for e in result] == ["a.txt", "b.log", "docs"]

    def test_hidden_entries_need_opt_in(self, memory_repository, mock_logger):
        """Test that hidden entries only match when included."""
        use_case = SearchFilesUseCase(memory_repository, mock_logger)

        assert use_case.execute(".", ".env") == []
        assert [e.name for e in use_case.execute(".", ".env", include_hidden=True)] == [".env"]

    def test_glob_is_not_expanded(self, memory_repository, mock_logger):
        """Test that patterns other than '*' match literally."""
        use_case = SearchFilesUseCase(memory_repository, mock_logger)

        assert use_case.execute(".", "*.txt") == []

    def test_empty_pattern(self, memory_repository, mock_logger):
        """Test that an empty pattern is rejected."""
        use_case = SearchFilesUseCase(memory_repository, mock_logger)

        with pytest.raises(EmptyInputError):
            use_case.execute(".", "")

    def test_traversal(self, mock_logger):
        """Test that traversal attempts are rejected before listing."""
        repository = MagicMock(spec=FileSystemRepositoryPort)
        use_case = SearchFilesUseCase(repository, mock_logger)

        with pytest.raises(InvalidPathError):
            use_case.execute("../", "*")

        repository.list_directory.assert_not_called()

    def test_unexpected_error_is_wrapped(self, mock_logger):
        """Test that unexpected exceptions become FileRepositoryError."""
        repository = MagicMock(spec=FileSystemRepositoryPort)
        repository.list_directory.side_effect = RuntimeError("boom")
        use_case = SearchFilesUseCase(repository, mock_logger)

        with pytest.raises(FileRepositoryError, match="Failed to search files"):
            use_case.execute(".", "*")

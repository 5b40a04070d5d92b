"""
Unit tests for search path publishing.
"""

import pytest

from funcsetup.core.exceptions import PathPublishError, Stage
from funcsetup.core.path import publish_path
from tests.mocks.context import FakeContext


class TestPublishPath:
    """Test publish_path function."""

    def test_publishes_parent_directory(self, linux_context):
        directory = publish_path("/tmp/out/func", linux_context)

        assert directory == "/tmp/out"
        assert linux_context.path_file_entries == ["/tmp/out"]
        assert linux_context.search_path == ["/usr/bin", "/bin", "/tmp/out"]

    def test_twice_in_one_process(self, linux_context):
        """Test the in-process path gets the directory once, the file twice."""
        publish_path("/tmp/out/func", linux_context)
        publish_path("/tmp/out/func", linux_context)

        assert linux_context.search_path.count("/tmp/out") == 1
        assert linux_context.path_file_entries == ["/tmp/out", "/tmp/out"]

    def test_directory_already_on_path(self):
        context = FakeContext(search_path=["/opt/tools", "/usr/bin"])

        publish_path("/opt/tools/func", context)

        assert context.search_path == ["/opt/tools", "/usr/bin"]
        assert context.path_file_entries == ["/opt/tools"]

    def test_prefix_is_not_membership(self):
        """Test a directory that only prefixes an entry is still added."""
        context = FakeContext(search_path=["/tmp/output"])

        publish_path("/tmp/out/func", context)

        assert context.search_path == ["/tmp/output", "/tmp/out"]

    def test_path_file_failure(self):
        context = FakeContext(fail_path_file=True)

        with pytest.raises(PathPublishError, match="Read-only") as exc_info:
            publish_path("/tmp/out/func", context)

        assert exc_info.value.stage == Stage.PUBLISH_PATH

import pytest

from tgv.helpers import is_url


@pytest.mark.parametrize(
    "path",
    [
        "s3://bucket/file.bam",
        "http://example.com/file.bam",
        "https://example.com/file.bam",
        "gs://bucket/file.bam",
    ],
)
def test_remote_paths_are_urls(path):
    assert is_url(path) is True


@pytest.mark.parametrize(
    "path", ["file.bam", "/data/file.bam", "ftp://example.com/file.bam", ""]
)
def test_local_paths_are_not_urls(path):
    assert is_url(path) is False
"""Small shared helpers."""

_REMOTE_PREFIXES = ("s3://", "http://", "https://", "gs://")


def is_url(path: str) -> bool:
    """Whether ``path`` points to a remote resource."""
    return path.startswith(_REMOTE_PREFIXES)
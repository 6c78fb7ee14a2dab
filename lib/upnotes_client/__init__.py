from .changelog import VersionSection, extract_range, has_version, split_sections
from .client import ReleaseClient
from .errors import ApiError, NetworkError, NotFoundError, UpnotesClientError
from .semver import is_newer

__all__ = [
    "ReleaseClient",
    "ApiError",
    "NetworkError",
    "NotFoundError",
    "UpnotesClientError",
    "VersionSection",
    "extract_range",
    "has_version",
    "is_newer",
    "split_sections",
]

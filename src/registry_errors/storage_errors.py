"""
Registry storage error classes.

Backend conditions raised while operating on repositories, manifests,
blobs and uploads. They are independent of the ErrorCode vocabulary:
request handlers catch them and decide which coded Error to push onto the
response envelope.
"""
from __future__ import annotations


class RegistryStorageError(Exception):
    """
    Base class for all registry storage errors.

    Fields are passed positionally to Exception so that they live in
    ``args``; errors compare and pickle by value.
    """

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RegistryStorageError):
            return NotImplemented
        return type(self) is type(other) and self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))

    def __repr__(self) -> str:
        return f"{type(self).__name__}{self.args!r}"


class RepositoryNotFoundError(RegistryStorageError):
    """
    Operation against a repository that does not exist in the registry.
    """

    def __init__(self, name: str):
        super().__init__(name)

    @property
    def name(self) -> str:
        return self.args[0]

    def __str__(self) -> str:
        return f"No repository found with Name: {self.name}"


class ManifestNotFoundError(RegistryStorageError):
    """
    Operation against an image manifest that does not exist in the registry.
    """

    def __init__(self, name: str, tag: str):
        super().__init__(name, tag)

    @property
    def name(self) -> str:
        return self.args[0]

    @property
    def tag(self) -> str:
        return self.args[1]

    def __str__(self) -> str:
        return f"No manifest found with Name: {self.name}, Tag: {self.tag}"


class BlobNotFoundError(RegistryStorageError):
    """
    Operation against an image layer blob that does not exist in the registry.
    """

    def __init__(self, name: str, digest: str):
        super().__init__(name, digest)

    @property
    def name(self) -> str:
        return self.args[0]

    @property
    def digest(self) -> str:
        return self.args[1]

    def __str__(self) -> str:
        return f"No blob found with Name: {self.name}, Digest: {self.digest}"


class BlobUploadNotFoundError(RegistryStorageError):
    """
    Blob upload operation against an invalid upload location URL.

    This may be the result of using a cancelled, completed, or stale upload
    location.
    """

    def __init__(self, location: str):
        super().__init__(location)

    @property
    def location(self) -> str:
        return self.args[0]

    def __str__(self) -> str:
        return f"No blob upload found at Location: {self.location}"


class BlobUploadInvalidRangeError(RegistryStorageError):
    """
    Blob chunk uploaded out of order.

    Carries the known blob size and last valid range, which the client can
    use to resume the upload.
    """

    def __init__(self, location: str, last_valid_range: int, blob_size: int):
        super().__init__(location, last_valid_range, blob_size)

    @property
    def location(self) -> str:
        return self.args[0]

    @property
    def last_valid_range(self) -> int:
        return self.args[1]

    @property
    def blob_size(self) -> int:
        return self.args[2]

    def __str__(self) -> str:
        return (
            f"Invalid range provided for upload at Location: {self.location}. "
            f"Last Valid Range: {self.last_valid_range}, Blob Size: {self.blob_size}"
        )


class UnexpectedHTTPStatusError(RegistryStorageError):
    """Unexpected HTTP status returned by a registry API call."""

    def __init__(self, status: str):
        super().__init__(status)

    @property
    def status(self) -> str:
        return self.args[0]

    def __str__(self) -> str:
        return f"Received unexpected HTTP status: {self.status}"


__all__ = [
    "RegistryStorageError",
    "RepositoryNotFoundError",
    "ManifestNotFoundError",
    "BlobNotFoundError",
    "BlobUploadNotFoundError",
    "BlobUploadInvalidRangeError",
    "UnexpectedHTTPStatusError",
]

"""
Staging store for inbound catalog images.

An inbound image is validated against the allowed extensions and written to a
local staging directory under `<timestamp>_<original name>`. The returned
StagedFile is a scoped handle: leaving its `with` block always attempts to
delete the file, and a failed delete is only logged.
"""

# Standard library imports
import logging
import time
from pathlib import Path
from types import TracebackType
from typing import Awaitable, Callable, Optional, Type, Union

# Local application imports
from ...domain.constants import ALLOWED_IMAGE_EXTENSIONS, ALLOWED_IMAGE_FORMATS
from ...domain.exceptions import ImageValidationError

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 1024

ReadChunk = Callable[[int], Awaitable[bytes]]


class StagedFile:
    """Handle to a staged image on local disk."""

    def __init__(self, path: Path, original_filename: str, size: int) -> None:
        self.path = path
        self.original_filename = original_filename
        self.size = size

    @property
    def exists(self) -> bool:
        return self.path.exists()

    def discard(self) -> bool:
        """
        Delete the staged file.

        Returns:
            True if the file is gone afterwards, False if deletion failed
        """
        try:
            self.path.unlink(missing_ok=True)
            logger.debug(f"Deleted staged file {self.path}")
            return True
        except OSError as e:
            logger.error(f"Failed to delete staged file {self.path}: {e}")
            return False

    def __enter__(self) -> "StagedFile":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.discard()

    def __repr__(self) -> str:
        return f"StagedFile(path={str(self.path)!r}, size={self.size})"


class StagingStore:
    """Writes validated inbound images to a lazily created staging directory."""

    def __init__(self, staging_dir: Union[str, Path]) -> None:
        self.staging_dir = Path(staging_dir)

    @staticmethod
    def is_allowed(filename: str) -> bool:
        """Case-insensitive extension check against the image allow-list."""
        return Path(filename).suffix.lower() in ALLOWED_IMAGE_EXTENSIONS

    def _staged_name(self, filename: str) -> str:
        # Timestamp prefix avoids collisions between uploads sharing a name
        return f"{time.time_ns()}_{Path(filename).name}"

    async def stage(self, filename: str, read: ReadChunk) -> StagedFile:
        """
        Validate and persist an inbound image.

        Args:
            filename: Original client-side file name
            read: Async reader returning up to n bytes, b"" at end of stream

        Returns:
            StagedFile handle for the written file

        Raises:
            ImageValidationError: If the extension is not an allowed image type
            OSError: If the file could not be written
        """
        if not filename or not self.is_allowed(filename):
            logger.warning(f"Rejected image upload with disallowed type: {filename!r}")
            raise ImageValidationError(filename or "", ", ".join(ALLOWED_IMAGE_FORMATS))

        self.staging_dir.mkdir(parents=True, exist_ok=True)
        path = (self.staging_dir / self._staged_name(filename)).resolve()

        size = 0
        try:
            with open(path, "wb") as f:
                while True:
                    chunk = await read(CHUNK_SIZE)
                    if not chunk:
                        break
                    size += len(chunk)
                    f.write(chunk)
        except BaseException:
            path.unlink(missing_ok=True)
            raise

        logger.info(f"Staged image {filename!r} at {path} ({size} bytes)")
        return StagedFile(path=path, original_filename=filename, size=size)

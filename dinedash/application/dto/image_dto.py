# Standard library imports
from dataclasses import dataclass
from typing import Awaitable, Callable


@dataclass
class ImageUpload:
    """
    Inbound image as received from the client, not yet staged.
    
    `read` returns up to n bytes per call and b"" at end of stream, which is
    how FastAPI's UploadFile.read behaves.
    """
    filename: str
    read: Callable[[int], Awaitable[bytes]]

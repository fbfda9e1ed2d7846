# Standard library imports
import logging
import time
from typing import Any, Dict, Optional

# External package imports
import cloudinary.utils
import httpx

# Local application imports
from ...core.config import AssetStorageConfig
from ...domain.constants import (
    ALLOWED_IMAGE_FORMATS,
    AUTO_FETCH_FORMAT,
    AUTO_QUALITY,
    MAX_IMAGE_WIDTH,
    TARGET_FORMAT,
    WIDTH_CROP_MODE,
)
from ...domain.exceptions import RemoteUploadError
from ..http_client_factory import get_shared_http_client
from ..storage.staging_store import StagedFile

logger = logging.getLogger(__name__)


def build_incoming_transformation() -> str:
    """
    Render the incoming transformation applied to every catalog image:
    width limited to MAX_IMAGE_WIDTH, then automatic format and quality.
    """
    transformation, _ = cloudinary.utils.generate_transformation_string(
        transformation=[{"width": MAX_IMAGE_WIDTH, "crop": WIDTH_CROP_MODE}],
        fetch_format=AUTO_FETCH_FORMAT,
        quality=AUTO_QUALITY,
    )
    return transformation


INCOMING_TRANSFORMATION = build_incoming_transformation()


class CloudinaryGateway:
    """
    Transcoding gateway backed by the Cloudinary upload API.
    
    Uploads a staged image with the fixed catalog policy (webp output, automatic
    quality and format negotiation, width limited to 1600px) and returns the
    durable secure URL. The staged file is discarded whether or not the upload
    succeeds.
    
    Request fields and the signature are produced by the Cloudinary SDK
    helpers; the request itself goes through httpx.
    """
    
    def __init__(
        self,
        config: AssetStorageConfig,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.config = config
        self._http_client = http_client
    
    @property
    def http_client(self) -> httpx.AsyncClient:
        # Looked up per request: the shared client is replaced after a shutdown
        if self._http_client is not None:
            return self._http_client
        return get_shared_http_client()
    
    def build_upload_params(self, timestamp: Optional[int] = None) -> Dict[str, Any]:
        """
        Build the signed form fields for an upload request
        
        Args:
            timestamp: Unix timestamp to sign, defaults to now
            
        Returns:
            Dictionary of form fields including api_key and signature
        """
        params: Dict[str, Any] = {
            "allowed_formats": ",".join(ALLOWED_IMAGE_FORMATS),
            "folder": self.config.folder,
            "format": TARGET_FORMAT,
            "timestamp": str(timestamp if timestamp is not None else int(time.time())),
            "transformation": INCOMING_TRANSFORMATION,
        }
        params["signature"] = cloudinary.utils.api_sign_request(params, self.config.api_secret)
        params["api_key"] = self.config.api_key
        return params
    
    async def upload(self, staged: StagedFile) -> str:
        """
        Upload a staged image and return its durable URL
        
        Args:
            staged: Staged image handle; discarded on every exit path
            
        Returns:
            HTTPS URL of the transcoded asset
            
        Raises:
            RemoteUploadError: If the request fails or returns no URL
        """
        with staged:
            params = self.build_upload_params()
            files = {"file": (staged.path.name, staged.path.read_bytes())}
            
            logger.info(
                f"Uploading {staged.original_filename!r} to Cloudinary folder {self.config.folder!r}"
            )
            try:
                response = await self.http_client.post(
                    self.config.upload_url,
                    data=params,
                    files=files,
                )
                response.raise_for_status()
                payload = response.json()
            except httpx.HTTPStatusError as e:
                logger.error(
                    f"Cloudinary rejected upload of {staged.original_filename!r}: "
                    f"{e.response.status_code} - {e.response.text}"
                )
                raise RemoteUploadError(
                    f"Cloudinary upload failed with status {e.response.status_code}",
                    status_code=e.response.status_code,
                ) from e
            except httpx.HTTPError as e:
                logger.error(f"Cloudinary upload of {staged.original_filename!r} failed: {e}")
                raise RemoteUploadError(f"Cloudinary upload failed: {e}") from e
            except ValueError as e:
                raise RemoteUploadError(f"Cloudinary returned an invalid response: {e}") from e
            
            secure_url = payload.get("secure_url") if isinstance(payload, dict) else None
            if not secure_url:
                raise RemoteUploadError("Cloudinary response did not include a secure_url")
            
            logger.info(f"Uploaded {staged.original_filename!r} to {secure_url}")
            return secure_url

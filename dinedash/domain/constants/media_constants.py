"""
Shared constants for catalog image uploads.

Used by the staging store (inbound validation) and the Cloudinary gateway
(remote transformation policy). Single place for easier updates.
"""

# -----------------------------------------------------------------------------
# Inbound validation (including iPhone formats)
# -----------------------------------------------------------------------------
ALLOWED_IMAGE_FORMATS = ("jpg", "jpeg", "png", "gif", "webp", "heic", "heif", "avif")
ALLOWED_IMAGE_EXTENSIONS = frozenset(f".{fmt}" for fmt in ALLOWED_IMAGE_FORMATS)

# -----------------------------------------------------------------------------
# Remote asset policy
# -----------------------------------------------------------------------------
ASSET_FOLDER = "uploads"
TARGET_FORMAT = "webp"
AUTO_QUALITY = "auto"
AUTO_FETCH_FORMAT = "auto"
MAX_IMAGE_WIDTH = 1600
WIDTH_CROP_MODE = "limit"  # downscale only, keep aspect ratio

"""File handling service for scan image uploads."""
import logging
import uuid
from datetime import datetime
from pathlib import Path
from typing import Optional

from fastapi import UploadFile
from PIL import Image, UnidentifiedImageError

from app.config import settings

logger = logging.getLogger(__name__)

ALLOWED_CONTENT_TYPES = ["image/jpeg", "image/jpg", "image/png", "image/webp", "image/heic"]
ALLOWED_EXTENSIONS = [".jpg", ".jpeg", ".png", ".webp", ".heic"]


class FileService:
    """Service for handling file uploads and storage."""

    def __init__(self, upload_dir: Optional[str] = None):
        self.upload_dir = Path(upload_dir or settings.upload_dir)
        self.upload_dir.mkdir(parents=True, exist_ok=True)

    async def save_scan_image(self, file: UploadFile) -> str:
        """
        Save uploaded scan image to disk.

        Args:
            file: Uploaded file from FastAPI

        Returns:
            Relative path to saved file

        Raises:
            ValueError: If file type or size is invalid
        """
        if file.content_type not in ALLOWED_CONTENT_TYPES:
            raise ValueError(f"Invalid file type: {file.content_type}. Allowed: {ALLOWED_CONTENT_TYPES}")

        extension = Path(file.filename or "").suffix.lower()
        if extension not in ALLOWED_EXTENSIONS:
            raise ValueError("Invalid image format. Use JPG, PNG, WebP or HEIC.")

        contents = await file.read()
        if not contents:
            raise ValueError("Uploaded image is empty")
        if len(contents) > settings.max_upload_bytes:
            raise ValueError("Image is too large")

        timestamp = datetime.utcnow().strftime("%Y%m%d_%H%M%S")
        unique_id = str(uuid.uuid4())[:8]
        filename = f"{timestamp}_{unique_id}{extension}"

        file_path = self.upload_dir / filename
        with open(file_path, "wb") as f:
            f.write(contents)

        self._optimize_image(file_path)

        return str(file_path)

    def _optimize_image(self, file_path: Path, max_width: int = 1568):
        """
        Downscale large photos before they are sent to the vision model.

        Args:
            file_path: Path to image file
            max_width: Maximum width in pixels
        """
        try:
            with Image.open(file_path) as img:
                if img.mode == "RGBA":
                    rgb_img = Image.new("RGB", img.size, (255, 255, 255))
                    rgb_img.paste(img, mask=img.split()[3])
                    img = rgb_img

                if img.width > max_width:
                    ratio = max_width / img.width
                    new_height = round(img.height * ratio)
                    img = img.resize((max_width, new_height), Image.Resampling.LANCZOS)

                img.save(file_path, optimize=True, quality=85)

        except (UnidentifiedImageError, OSError) as e:
            # Keep the original; the vision model may still read it
            logger.warning("Could not optimize image %s: %s", file_path, e)

    def delete_file(self, file_path: Optional[str]) -> bool:
        """
        Delete a file from disk.

        Returns:
            True if deleted, False if file not found
        """
        if not file_path:
            return False
        path = Path(file_path)
        try:
            if path.exists():
                path.unlink()
                return True
            return False
        except OSError as e:
            logger.warning("Error deleting file %s: %s", file_path, e)
            return False

    def get_file_url(self, file_path: Optional[str]) -> Optional[str]:
        """Convert a stored file path to the URL it is served from."""
        if not file_path:
            return None
        return f"/{file_path}"


# Singleton instance
file_service = FileService()

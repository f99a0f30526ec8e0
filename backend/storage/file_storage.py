"""
File storage abstraction.

Provides a simple interface for storing uploaded files.
Currently uses local filesystem rooted at the configured upload directory.
"""
import base64
import shutil
from pathlib import Path
from typing import BinaryIO

COPY_CHUNK_SIZE = 1024


class FileStorage:
    """
    Local file storage implementation.

    Files are written directly under ``upload_root`` using the caller's name.
    Names that would land outside the root are refused.
    """

    def __init__(self, upload_root: str = "uploads"):
        self.upload_root = Path(upload_root)

    def ensure_root(self) -> Path:
        self.upload_root.mkdir(parents=True, exist_ok=True)
        return self.upload_root

    def resolve(self, filename: str) -> Path:
        """
        Map a caller supplied name to a path inside the upload root.

        Raises:
            ValueError: if the name is empty, absolute, or escapes the root
        """
        if not filename or not filename.strip():
            raise ValueError("File name is required")
        if Path(filename).is_absolute():
            raise ValueError(f"File name must be relative: {filename}")

        root = self.upload_root.resolve()
        target = (root / filename).resolve()
        if target == root or root not in target.parents:
            raise ValueError(f"File name escapes upload directory: {filename}")
        return target

    def save_file(self, file: BinaryIO, filename: str) -> str:
        """
        Write ``file`` to ``filename`` under the upload root.

        Args:
            file: File-like object to copy from
            filename: Name relative to the upload root

        Returns:
            Base64 text of the bytes read back from the written file
        """
        file_path = self.resolve(filename)
        file_path.parent.mkdir(parents=True, exist_ok=True)

        # A failed copy leaves the partial file in place
        with open(file_path, "wb") as f:
            shutil.copyfileobj(file, f, COPY_CHUNK_SIZE)

        with open(file_path, "rb") as f:
            return base64.b64encode(f.read()).decode("ascii")

    def delete_file(self, filename: str) -> bool:
        """Delete a file. Returns True if deleted."""
        path = self.resolve(filename)
        if path.exists():
            path.unlink()
            return True
        return False

"""
Upload handling on top of FileStorage.
"""
import logging
from typing import BinaryIO, Optional

from domain.outcome import Outcome
from storage.file_storage import FileStorage

logger = logging.getLogger(__name__)


class FileUploadService:
    def __init__(self, storage: FileStorage):
        self.storage = storage

    def upload(self, file: Optional[BinaryIO], filename: Optional[str]) -> Outcome:
        """
        Save an uploaded stream and return its Base64 content.

        Both the stream and the name must be present; nothing is written
        otherwise.
        """
        if file is None or not filename or not filename.strip():
            logger.warning("Upload rejected: file or fileName missing")
            return Outcome.bad_request("Bad Request")

        try:
            encoded = self.storage.save_file(file, filename)
        except ValueError as exc:
            logger.warning("Upload rejected: %s", exc)
            return Outcome.bad_request(str(exc))
        except OSError as exc:
            logger.exception("Failed to save upload %s", filename)
            return Outcome.failure(str(exc))

        logger.info("Saved upload %s", filename)
        return Outcome.ok(encoded)

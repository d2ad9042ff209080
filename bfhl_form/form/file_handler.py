import base64
import os
from typing import BinaryIO

from starlette.datastructures import UploadFile

from bfhl_form.config.settings import MAX_UPLOAD_BYTES
from bfhl_form.form.exceptions import FileMissingError, FileReadError, FileTooLargeError
from bfhl_form.form.models import FileContent, UploadedFile


def encode_base64(raw: bytes) -> str:
    """Standard base64 text of raw bytes, without any data-URI prefix."""
    return base64.b64encode(raw).decode("ascii")


class FileHandler:
    """Checks an uploaded file against the size ceiling and base64-encodes it."""

    def __init__(self, max_bytes: int = MAX_UPLOAD_BYTES) -> None:
        self._max_bytes = max_bytes

    def inspect(self, upload: UploadFile | None) -> UploadedFile:
        """Describe the upload without reading its content.

        Raises:
            FileMissingError: if no file was chosen.
            FileTooLargeError: if the file exceeds the size ceiling.
        """
        if upload is None or not upload.filename:
            raise FileMissingError()
        size = upload.size if upload.size is not None else self._measure(upload.file)
        if size > self._max_bytes:
            raise FileTooLargeError()
        return UploadedFile(
            filename=upload.filename,
            size_bytes=size,
            content_type=upload.content_type or "",
        )

    async def read(self, upload: UploadFile, described: UploadedFile) -> FileContent:
        """Read the whole upload and encode it.

        Raises:
            FileReadError: if the underlying file cannot be read.
        """
        try:
            await upload.seek(0)
            raw = await upload.read()
        except OSError as exc:
            raise FileReadError() from exc
        return FileContent(file=described, base64=encode_base64(raw), raw=raw)

    @staticmethod
    def _measure(file: BinaryIO) -> int:
        position = file.tell()
        file.seek(0, os.SEEK_END)
        size = file.tell()
        file.seek(position)
        return size

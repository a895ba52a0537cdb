from __future__ import annotations

from enum import IntEnum

from pydantic import BaseModel, ConfigDict


class UploadError(IntEnum):
    """Upload status codes carried in the `error` entry of a file descriptor."""

    OK = 0
    INI_SIZE = 1
    FORM_SIZE = 2
    PARTIAL = 3
    NO_FILE = 4
    NO_TMP_DIR = 6
    CANT_WRITE = 7
    EXTENSION = 8

    @property
    def message_key(self) -> str:
        return f"upload_error_{self.name.lower()}"


class UploadedFile(BaseModel):
    """
    Shape of an uploaded-file descriptor as found in a request payload.

    Strict, so `"12"` is not an acceptable `size` and `True` is not an
    acceptable `error`.
    """

    model_config = ConfigDict(strict=True, extra='allow', frozen=True)

    name: str
    type: str
    tmp_name: str
    error: int
    size: int

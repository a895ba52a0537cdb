import logging
from typing import Any

from fast_rules.contracts.validator_rule import ValidatorRule
from fast_rules.core.native_functions import is_uploaded_file, parse_uploaded_file
from fast_rules.core.uploaded_file import UploadError

logger = logging.getLogger(__name__)


class FileRule(ValidatorRule):
    """
    The value must describe a successfully uploaded file.

    A descriptor is a mapping with `name`, `type`, `tmp_name`, `error` and
    `size`. When the upload itself failed, the message names the upload
    error instead of the generic one.
    """

    name = 'file'

    def validate(self, field: str | int, value: Any, param: str | None) -> None:
        if is_uploaded_file(value):
            return

        uploaded = parse_uploaded_file(value)
        if uploaded is None or uploaded.error == UploadError.OK:
            self.fail(field, 'field_must_be_a_file')

        try:
            key = UploadError(uploaded.error).message_key
        except ValueError:
            logger.debug(f"Unknown upload error code {uploaded.error} for field '{field}'")
            self.fail(field, 'upload_error_unknown', uploaded.error)
        self.fail(field, key)

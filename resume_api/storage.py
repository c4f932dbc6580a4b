"""Flat on-disk store for uploaded resumes."""
from __future__ import annotations

import os
import uuid

from werkzeug.datastructures import FileStorage
from werkzeug.security import safe_join

from .errors import StoredFileNotFound


class UploadStore:
    def __init__(self, directory: str):
        self.directory = directory

    def ensure(self) -> None:
        os.makedirs(self.directory, exist_ok=True)

    def new_handle(self) -> str:
        return uuid.uuid4().hex

    def save(self, file: FileStorage) -> str:
        """Write the upload under a fresh name and return that name."""
        handle = self.new_handle()
        file.save(os.path.join(self.directory, handle))
        return handle

    def path_for(self, handle: str) -> str:
        if not handle or not isinstance(handle, str):
            raise StoredFileNotFound("Missing filename", handle=handle)
        path = safe_join(self.directory, handle)
        if path is None or os.path.dirname(os.path.abspath(path)) != os.path.abspath(self.directory):
            raise StoredFileNotFound(f"Unsafe filename {handle!r}", handle=handle)
        if not os.path.isfile(path):
            raise StoredFileNotFound(f"No stored file {handle!r}", handle=handle)
        return path

    def read(self, handle: str) -> bytes:
        path = self.path_for(handle)
        try:
            with open(path, "rb") as f:
                return f.read()
        except OSError as e:
            raise StoredFileNotFound(f"Could not read {handle!r}: {e}", handle=handle) from e

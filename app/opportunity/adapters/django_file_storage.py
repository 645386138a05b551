from __future__ import annotations

from typing import IO

from django.core.exceptions import SuspiciousFileOperation
from django.core.files.storage import Storage, default_storage
from django.utils.text import get_valid_filename
from opportunity.domain.errors import StorageError
from opportunity.ports.file_storage import FileStoragePort


class DjangoFileStorage(FileStoragePort):
    """
    Django storage backend(기본: MEDIA_ROOT 파일 시스템)에 업로드 파일을 저장합니다.

    동일 파일명이 이미 있으면 storage backend가 이름을 바꿔 저장합니다.
    """

    def __init__(self, storage: Storage | None = None):
        self._storage = storage or default_storage

    def store(self, file: IO, *, directory: str) -> str:
        original_name = getattr(file, "name", None) or "upload"
        try:
            filename = get_valid_filename(original_name.rsplit("/", 1)[-1])
            saved_name = self._storage.save(f"{directory.strip('/')}/{filename}", file)
            return self._storage.url(saved_name)
        except (OSError, SuspiciousFileOperation) as e:
            raise StorageError(f"failed to store file {original_name}: {e}") from e

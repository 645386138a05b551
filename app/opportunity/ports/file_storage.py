from __future__ import annotations

from typing import IO, Protocol


class FileStoragePort(Protocol):
    def store(self, file: IO, *, directory: str) -> str:
        """
        업로드 파일을 저장하고 공개 참조 경로(URL)를 반환합니다.

        Raises:
            StorageError: 저장 실패
        """
        ...

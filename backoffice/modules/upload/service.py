import mimetypes
from pathlib import Path
from typing import Any

from backoffice.core.config import settings
from backoffice.core.service import ResourceService, api_error, unwrap


MAX_FILES = 10

FileSpec = tuple[str, bytes]


def _part(filename: str, content: bytes) -> tuple[str, bytes, str]:
    content_type = mimetypes.guess_type(filename)[0] or "application/octet-stream"
    return (filename, content, content_type)


class UploadService(ResourceService):
    path = "/upload"

    async def upload_file(self, filename: str, content: bytes) -> Any:
        resp = await self.dispatcher.upload(self.path, files={"file": _part(filename, content)})
        return unwrap(resp)

    async def upload_files(self, files: list[FileSpec]) -> Any:
        if not files:
            raise ValueError("Nothing to upload")
        if len(files) > MAX_FILES:
            raise ValueError(f"At most {MAX_FILES} files per upload")
        parts = [("files", _part(name, content)) for name, content in files]
        resp = await self.dispatcher.upload(self._url("multiple"), files=parts)
        return unwrap(resp)

    async def replace(self, file_id: str, filename: str, content: bytes) -> Any:
        resp = await self.dispatcher.upload(
            self._url(file_id), files={"file": _part(filename, content)}, method="PUT"
        )
        return unwrap(resp)

    async def download(self, file_id: str, destination: Path | None = None) -> bytes:
        resp = await self.dispatcher.get(self._url("download", file_id))
        if not resp.is_success:
            raise api_error(resp)
        if destination is not None:
            destination.write_bytes(resp.content)
        return resp.content

    @staticmethod
    def preview_url(filename: str) -> str:
        return f"{settings.API_BASE_URL.rstrip('/')}/upload/preview/{filename}"

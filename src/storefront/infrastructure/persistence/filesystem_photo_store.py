"""PhotoStore that keeps each photo as a file next to a small metadata file."""

from __future__ import annotations

import json
from pathlib import Path

from storefront.domain.model.value_objects import Photo
from storefront.domain.repository.photo_store import PhotoStore


class FilesystemPhotoStore(PhotoStore):

    def __init__(self, directory: Path) -> None:
        self._directory = directory
        self._directory.mkdir(parents=True, exist_ok=True)

    def get(self, product_id: str) -> Photo | None:
        data_path, meta_path = self._paths(product_id)
        if not data_path.exists() or not meta_path.exists():
            return None
        meta = json.loads(meta_path.read_text(encoding="utf-8"))
        return Photo(data=data_path.read_bytes(), content_type=meta["content_type"])

    def put(self, product_id: str, photo: Photo) -> None:
        data_path, meta_path = self._paths(product_id)
        data_path.write_bytes(photo.data)
        meta_path.write_text(
            json.dumps({"content_type": photo.content_type}) + "\n", encoding="utf-8"
        )

    def delete(self, product_id: str) -> None:
        for path in self._paths(product_id):
            path.unlink(missing_ok=True)

    def _paths(self, product_id: str) -> tuple[Path, Path]:
        # IDs come from outside; keep them from escaping the directory.
        safe = Path(product_id).name
        return self._directory / f"{safe}.bin", self._directory / f"{safe}.json"

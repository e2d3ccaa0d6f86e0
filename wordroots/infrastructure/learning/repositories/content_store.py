"""Flat-file JSON store for the morpheme registry and lesson content."""

import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter
from pydantic import ValidationError as SchemaValidationError

from wordroots.domain.common.exceptions import DomainError
from wordroots.domain.learning.entities.morpheme import Morpheme, validate_morpheme_id
from wordroots.domain.learning.entities.morpheme_content import MorphemeContent
from wordroots.exceptions import (
    CorruptRecordError,
    MorphemeContentNotFoundError,
    MorphemeRegistryNotFoundError,
    StorageError,
)
from wordroots.infrastructure.learning import schemas
from wordroots.infrastructure.learning.mappers.content_mapper import MorphemeContentMapper
from wordroots.infrastructure.learning.mappers.morpheme_mapper import MorphemeMapper

logger = logging.getLogger(__name__)

REGISTRY_FILENAME = "morphemes.json"
CONTENT_DIRNAME = "content"

_registry_adapter = TypeAdapter(list[schemas.Morpheme])


class JsonContentStore:
    """
    Store backed by one registry file and one JSON file per morpheme.

    Layout:
        <data_dir>/morphemes.json        ordered list of registry entries
        <data_dir>/content/<id>.json     lesson content for one morpheme

    Every read goes to disk; nothing is cached between calls.
    """

    def __init__(self, data_dir: Path | str) -> None:
        self.data_dir = Path(data_dir)
        self.registry_path = self.data_dir / REGISTRY_FILENAME
        self.content_dir = self.data_dir / CONTENT_DIRNAME
        self.morpheme_mapper = MorphemeMapper()
        self.content_mapper = MorphemeContentMapper()
        self._registry_lock = threading.Lock()

    def ensure_layout(self) -> None:
        """Create the data directories and an empty registry if they are missing."""
        try:
            self.content_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(str(self.content_dir), str(e)) from e
        if not self.registry_path.exists():
            self._write_json(self.registry_path, [])
            logger.info(f"Created empty morpheme registry: {self.registry_path}")

    def list_morphemes(self) -> list[Morpheme]:
        """
        Read the registry in stored order.

        Returns:
            Registered morphemes

        Raises:
            MorphemeRegistryNotFoundError: If the registry is missing or not valid JSON
            CorruptRecordError: If an entry does not match the registry schema
        """
        raw = self._read_registry_json()
        try:
            entries = _registry_adapter.validate_python(raw)
        except SchemaValidationError as e:
            raise CorruptRecordError(REGISTRY_FILENAME, _describe(e)) from e

        try:
            return [self.morpheme_mapper.to_domain(entry) for entry in entries]
        except DomainError as e:
            raise CorruptRecordError(REGISTRY_FILENAME, e.message) from e

    def get_content(self, morpheme_id: str) -> MorphemeContent:
        """
        Read the lesson content of a morpheme.

        Args:
            morpheme_id: Registry id of the morpheme

        Returns:
            The content; its word list may be empty

        Raises:
            MorphemeContentNotFoundError: If no content file exists for the id
            CorruptRecordError: If the file does not match the content schema
        """
        path = self._content_path(morpheme_id)
        try:
            raw = path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise MorphemeContentNotFoundError(morpheme_id) from e
        except OSError as e:
            raise StorageError(str(path), str(e)) from e

        try:
            schema = schemas.MorphemeContent.model_validate_json(raw)
            content = self.content_mapper.to_domain(schema)
        except SchemaValidationError as e:
            raise CorruptRecordError(path.name, _describe(e)) from e
        except DomainError as e:
            raise CorruptRecordError(path.name, e.message) from e

        if not content.belongs_to(morpheme_id):
            raise CorruptRecordError(path.name, f"content id '{content.id}' does not match file")
        return content

    def put_content(self, content: MorphemeContent) -> None:
        """
        Create or replace the content file for content.id.

        The file is written to a temporary sibling and renamed into place, so
        readers see either the old record or the new one, never a partial file.
        """
        path = self._content_path(content.id)
        payload = self.content_mapper.to_schema(content).model_dump(mode="json", exclude_none=True)
        self._write_json(path, payload)
        logger.info(f"Saved content for morpheme {content.id}: {path}")

    def register_morpheme(self, morpheme: Morpheme) -> bool:
        """
        Append a morpheme to the registry unless its id is already there.

        A missing registry is treated as empty and created by the first insert.

        Returns:
            True if the morpheme was appended, False if the id was already registered
        """
        with self._registry_lock:
            try:
                raw = self._read_registry_json()
            except MorphemeRegistryNotFoundError as e:
                if e.reason != "missing":
                    raise
                raw = []

            if not isinstance(raw, list):
                raise CorruptRecordError(REGISTRY_FILENAME, "registry must be a JSON array")

            if any(isinstance(entry, dict) and entry.get("id") == morpheme.id for entry in raw):
                logger.debug(f"Morpheme {morpheme.id} already registered")
                return False

            raw.append(
                self.morpheme_mapper.to_schema(morpheme).model_dump(mode="json")
            )
            self._write_json(self.registry_path, raw)
            logger.info(f"Registered morpheme {morpheme.id} ({morpheme.type})")
            return True

    def _content_path(self, morpheme_id: str) -> Path:
        validate_morpheme_id(morpheme_id)
        return self.content_dir / f"{morpheme_id}.json"

    def _read_registry_json(self) -> Any:  # noqa: ANN401
        try:
            raw = self.registry_path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise MorphemeRegistryNotFoundError("missing") from e
        except OSError as e:
            raise StorageError(str(self.registry_path), str(e)) from e

        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            raise MorphemeRegistryNotFoundError("corrupt") from e

    def _write_json(self, path: Path, payload: Any) -> None:  # noqa: ANN401
        tmp_name: str | None = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                mode="w",
                encoding="utf-8",
                dir=path.parent,
                prefix=f".{path.name}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_name = tmp.name
                json.dump(payload, tmp, ensure_ascii=False, indent=2)
                tmp.write("\n")
                tmp.flush()
                os.fsync(tmp.fileno())
            os.replace(tmp_name, path)
        except OSError as e:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)
            logger.error(f"Failed to write {path}: {e!s}")
            raise StorageError(str(path), str(e)) from e


def _describe(error: SchemaValidationError) -> str:
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"]) or "<root>"
    return f"{location}: {first['msg']}"

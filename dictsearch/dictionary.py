from __future__ import annotations
import logging
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

from pydantic import TypeAdapter, ValidationError

from .schemas import DictionaryEntry, DictionaryStatus

# Bundled dictionary service backed by a static JSON document:
#   { "<any id>": { "word": ..., "meaning": ..., ... }, ... }
# Keys are ignored; entries keep document order so the first duplicate wins.

logger = logging.getLogger(__name__)

DEFAULT_RESOURCE_PATH = Path(__file__).resolve().parent / 'data' / 'dictionary_entries_cleaned.json'

_document = TypeAdapter(Dict[str, DictionaryEntry])

class LoadError(Exception):
    """Base class for failures while loading the dictionary resource."""

    def __init__(self, path: Path, message: str):
        super().__init__(f"{message}: {path}")
        self.path = path

class ResourceNotFound(LoadError):
    pass

class ReadError(LoadError):
    pass

class ParseError(LoadError):
    pass

class EntryStore:
    def __init__(self, resource_path: Union[str, Path] = DEFAULT_RESOURCE_PATH):
        self.resource_path = Path(resource_path)
        self._entries: Tuple[DictionaryEntry, ...] = ()
        self.loaded = False

    @property
    def entries(self) -> Tuple[DictionaryEntry, ...]:
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def status(self) -> DictionaryStatus:
        return DictionaryStatus(loaded=self.loaded, entryCount=len(self._entries), resourcePath=str(self.resource_path))

    def load(self, resource_path: Union[str, Path, None] = None) -> int:
        """Replace the collection with the entries stored at ``resource_path``.

        Raises a :class:`LoadError` subclass and leaves the current entries
        untouched when the document is missing, unreadable or malformed.
        Returns the number of entries now held.
        """
        path = Path(resource_path) if resource_path is not None else self.resource_path
        try:
            raw = path.read_bytes()
        except FileNotFoundError as exc:
            raise ResourceNotFound(path, 'Dictionary resource not found') from exc
        except OSError as exc:
            raise ReadError(path, 'Dictionary resource could not be read') from exc
        try:
            text = raw.decode('utf-8-sig')
        except UnicodeDecodeError as exc:
            raise ReadError(path, 'Dictionary resource is not valid UTF-8') from exc
        try:
            document = _document.validate_json(text, strict=True)
        except ValidationError as exc:
            raise ParseError(path, f'Dictionary resource is malformed ({exc.error_count()} errors)') from exc

        # single swap: readers see the old or the new tuple, never a mix
        self._entries = tuple(document.values())
        self.loaded = True
        logger.info("Loaded %d dictionary entries from %s", len(self._entries), path)
        return len(self._entries)

    def reload(self) -> bool:
        try:
            self.load()
        except LoadError as exc:
            logger.error("Error loading dictionary: %s", exc, exc_info=exc.__cause__)
            return False
        return True

    def lookup(self, word: str) -> Optional[DictionaryEntry]:
        needle = word.lower()
        return next((e for e in self._entries if e.word.lower() == needle), None)

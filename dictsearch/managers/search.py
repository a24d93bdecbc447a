from __future__ import annotations
import logging
from typing import Dict, Literal, Optional

from ..dictionary import EntryStore
from ..schemas import DictionaryEntry, SearchResult, display_fields

logger = logging.getLogger(__name__)

EMPTY_QUERY_MESSAGE = "Please enter a word."
NOT_FOUND_MESSAGE = "Word not found."

ViewState = Literal['idle', 'showing_error', 'showing_entry']

class SearchController:
    """Search box state for one screen.

    Only what the view needs is kept: the entry currently shown and the
    last error message.
    """

    def __init__(self, store: EntryStore):
        self.store = store
        self.entry: Optional[DictionaryEntry] = None
        self.error_message: str = ""

    @property
    def state(self) -> ViewState:
        if self.entry is not None:
            return 'showing_entry'
        if self.error_message:
            return 'showing_error'
        return 'idle'

    def search(self, raw_input: str) -> SearchResult:
        # no trimming: whitespace is a query like any other
        if raw_input == "":
            return self._show_error(raw_input, 'empty', EMPTY_QUERY_MESSAGE)

        entry = self.store.lookup(raw_input)
        if entry is None:
            logger.debug("No entry for %r", raw_input)
            return self._show_error(raw_input, 'not_found', NOT_FOUND_MESSAGE)

        self.entry = entry
        self.error_message = ""
        return SearchResult(
            query=raw_input,
            status='found',
            entry=entry,
            title=entry.word.title(),
            fields=display_fields(entry),
        )

    def _show_error(self, query: str, status: str, message: str) -> SearchResult:
        self.entry = None
        self.error_message = message
        return SearchResult(query=query, status=status, message=message)  # type: ignore

class SearchManager:
    def __init__(self, store: EntryStore):
        self.store = store
        # one controller per connected client
        self.controllers: Dict[str, SearchController] = {}

    def open(self, sid: str) -> SearchController:
        if sid not in self.controllers:
            self.controllers[sid] = SearchController(self.store)
        return self.controllers[sid]

    def get(self, sid: str) -> Optional[SearchController]:
        return self.controllers.get(sid)

    def close(self, sid: str):
        self.controllers.pop(sid, None)

    def search(self, sid: str, raw_input: str) -> SearchResult:
        return self.open(sid).search(raw_input)

    def __len__(self) -> int:
        return len(self.controllers)

from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Literal, Optional

class DictionaryEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    word: str
    meaning: str
    source: str
    bookName: str
    pageNo: str  # kept as text, some sources cite ranges
    time: str
    grammar: str
    derivation: str

class EntryField(BaseModel):
    label: str
    value: str

# Detail view order: (label, attribute)
DISPLAY_FIELDS = [
    ('Meaning', 'meaning'),
    ('Source', 'source'),
    ('Book Name', 'bookName'),
    ('Page No', 'pageNo'),
    ('Time', 'time'),
    ('Grammar', 'grammar'),
    ('Derivation', 'derivation'),
]

def display_fields(entry: DictionaryEntry) -> List[EntryField]:
    return [EntryField(label=label, value=getattr(entry, attr)) for label, attr in DISPLAY_FIELDS]

SearchStatus = Literal['empty', 'found', 'not_found']

class SearchResult(BaseModel):
    query: str
    status: SearchStatus
    entry: Optional[DictionaryEntry] = None
    message: Optional[str] = None
    title: Optional[str] = None
    fields: List[EntryField] = []

    @property
    def found(self) -> bool:
        return self.status == 'found'

class DictionaryStatus(BaseModel):
    loaded: bool
    entryCount: int = Field(0, ge=0)
    resourcePath: str

class ReloadResult(DictionaryStatus):
    ok: bool

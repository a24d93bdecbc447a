from fastapi import APIRouter, Depends, Query, Request

from dictsearch.dictionary import EntryStore
from dictsearch.managers.search import SearchController
from dictsearch.schemas import DictionaryStatus, ReloadResult, SearchResult

router = APIRouter()

def get_store(request: Request) -> EntryStore:
    return request.app.state.store

@router.get('/search', response_model=SearchResult)
async def search(word: str = Query(''), store: EntryStore = Depends(get_store)):
    # REST callers have no screen; a throwaway controller keeps the same rules
    return SearchController(store).search(word)

@router.get('/dictionary', response_model=DictionaryStatus)
async def dictionary_status(store: EntryStore = Depends(get_store)):
    return store.status()

@router.post('/dictionary/reload', response_model=ReloadResult)
async def reload_dictionary(store: EntryStore = Depends(get_store)):
    ok = store.reload()
    return ReloadResult(**store.status().model_dump(), ok=ok)

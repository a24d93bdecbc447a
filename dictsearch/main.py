from __future__ import annotations
import logging
import sys

import socketio
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import load_settings
from .dictionary import EntryStore
from .managers.search import SearchManager
from .routers.search import router as search_router

def configure_logging(level: int):
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter('%(asctime)s - %(levelname)s - %(message)s'))
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

settings = load_settings()
configure_logging(settings.log_level_value)
logger = logging.getLogger(__name__)

# The dictionary is loaded once here; later reloads are explicit
store = EntryStore(settings.resource_path)
store.reload()
searches = SearchManager(store)

# Socket.IO server (ASGI)
# engine.io only treats a bare '*' as a wildcard
sio_origins = '*' if '*' in settings.cors_origins else settings.cors_origins
sio = socketio.AsyncServer(async_mode='asgi', cors_allowed_origins=sio_origins)
app = FastAPI(title="Dictionary Search", version="0.1.0")
app.state.store = store

# Mount Socket.IO ASGI application
asgi_app = socketio.ASGIApp(sio, other_asgi_app=app)

# CORS for REST
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=['*'],
    allow_headers=['*'],
)

app.include_router(search_router)

# Socket.IO Events
@sio.event
async def connect(sid, environ, auth):
    searches.open(sid)
    await sio.emit('dictionary:status', searches.store.status().model_dump(), to=sid)

@sio.event
async def disconnect(sid):
    searches.close(sid)

@sio.on('search')
async def on_search(sid, raw_input):
    if not isinstance(raw_input, str):
        # treat anything that is not text as an empty field
        raw_input = ''
    result = searches.search(sid, raw_input)
    await sio.emit('search:result', result.model_dump(mode='json'), to=sid)

@sio.on('dictionary:reload')
async def on_reload(sid):
    ok = searches.store.reload()
    if not ok:
        logger.warning("Reload requested by %s failed, keeping %d entries", sid, len(searches.store))
    await sio.emit('dictionary:status', { **searches.store.status().model_dump(), 'ok': ok })

# Export ASGI app for uvicorn
application = asgi_app

# For local running: uvicorn dictsearch.main:application --reload --host 0.0.0.0 --port 8000

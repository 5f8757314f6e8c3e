from fastapi import FastAPI, Query
from typing import Optional
import logging

from packlist.api.routes import duplicates, items, lists
from packlist.events.web_observers import start as start_event_observers, get_events as get_web_events

# Logging
logger = logging.getLogger("packlist_app")

# Initialize FastAPI app
app = FastAPI(title="Pack List API")

# Include routers
app.include_router(lists.router)
app.include_router(items.router)
app.include_router(duplicates.router)


@app.on_event("startup")
def _startup_web_observers():
    """Register event bus subscribers for web notifications when the app starts."""
    start_event_observers()
    logger.info("Web observers for packing list events started")


@app.get('/api/health')
def api_health():
    return {"status": "ok"}


# -------------------- API: Events (polled by frontend) --------------------
@app.get('/api/events')
def api_events(
    since: Optional[int] = Query(default=None, description="Return events with id greater than this value")
):
    """
    Return recent packing list events (duplicate prompts, completed lists).

    Client polling strategy:
        1. First call without 'since' to load the current backlog.
        2. Store 'next_cursor' from the response.
        3. Subsequent polls: /api/events?since=<next_cursor>
    """
    return get_web_events(since)

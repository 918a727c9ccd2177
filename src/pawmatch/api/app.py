"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import asdict

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse

from pawmatch.adapters.catalog_client import CatalogError
from pawmatch.api.favorites import match_payload
from pawmatch.api.favorites import router as favorites_router
from pawmatch.api.models import FilterRequest, SortRequest
from pawmatch.app_logging import configure_logging
from pawmatch.config import parse_sort_direction
from pawmatch.containers import AppContainer
from pawmatch.domain.search import SearchPage


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        try:
            await app.state.container.catalog_service.list_breeds()
        except CatalogError:
            logger.exception("Failed to prefetch breeds")
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(favorites_router)

    @app.exception_handler(CatalogError)
    async def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
        state_container: AppContainer = request.app.state.container
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content={
                "detail": str(exc),
                "notices": state_container.notices.active(),
            },
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/breeds")
    async def breeds(request: Request) -> dict[str, object]:
        """Return the breed names available for filtering."""
        state_container: AppContainer = request.app.state.container
        return {"breeds": await state_container.catalog_service.list_breeds()}

    @app.get("/notices")
    async def notices(request: Request) -> dict[str, object]:
        """Return notices that have not expired yet."""
        state_container: AppContainer = request.app.state.container
        return {"notices": state_container.notices.active()}

    @app.get("/search")
    async def search(request: Request) -> dict[str, object]:
        """Fetch the page for the current filter, sort and offset."""
        state_container: AppContainer = request.app.state.container
        page = await state_container.search_service.refresh()
        return _search_payload(state_container, page)

    @app.post("/search/filter")
    async def search_filter(body: FilterRequest, request: Request) -> dict[str, object]:
        """Change the breed filter and return to the first page."""
        state_container: AppContainer = request.app.state.container
        page = await state_container.search_service.set_filter(body.breed)
        return _search_payload(state_container, page)

    @app.post("/search/sort")
    async def search_sort(body: SortRequest, request: Request) -> dict[str, object]:
        """Change the sort direction."""
        state_container: AppContainer = request.app.state.container
        direction = parse_sort_direction(body.direction)
        page = await state_container.search_service.set_sort(direction)
        return _search_payload(state_container, page)

    @app.post("/search/sort/toggle")
    async def search_sort_toggle(request: Request) -> dict[str, object]:
        """Flip the sort direction."""
        state_container: AppContainer = request.app.state.container
        page = await state_container.search_service.toggle_sort()
        return _search_payload(state_container, page)

    @app.post("/search/next")
    async def search_next(request: Request) -> dict[str, object]:
        """Advance one page while more results exist."""
        state_container: AppContainer = request.app.state.container
        if not state_container.search_service.has_next:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT, detail="No more results"
            )
        page = await state_container.search_service.next_page()
        return _search_payload(state_container, page)

    @app.post("/search/prev")
    async def search_prev(request: Request) -> dict[str, object]:
        """Go back one page."""
        state_container: AppContainer = request.app.state.container
        page = await state_container.search_service.prev_page()
        return _search_payload(state_container, page)

    @app.get("/match")
    async def get_match(request: Request) -> dict[str, object]:
        """Return the current match state."""
        state_container: AppContainer = request.app.state.container
        return match_payload(state_container)

    @app.post("/match", response_model=None)
    async def resolve_match(request: Request) -> dict[str, object] | JSONResponse:
        """Resolve a match from the current favorites."""
        state_container: AppContainer = request.app.state.container
        resolver = state_container.match_resolver
        await resolver.resolve(state_container.selection_store.snapshot())
        payload = match_payload(state_container)
        if payload["state"] == "failed":
            resolver.acknowledge()
            return JSONResponse(
                status_code=status.HTTP_502_BAD_GATEWAY, content=payload
            )
        return payload

    @app.delete("/match")
    async def dismiss_match(request: Request) -> dict[str, object]:
        """Hide the current match."""
        state_container: AppContainer = request.app.state.container
        state_container.match_resolver.dismiss()
        return match_payload(state_container)

    return app


def _search_payload(
    container: AppContainer, page: SearchPage | None
) -> dict[str, object]:
    """Serialize a search page, falling back to the last current page."""
    search_service = container.search_service
    store = container.selection_store
    shown = page or search_service.current_page
    records = shown.records if shown else ()
    return {
        "query": search_service.cursor.to_query(),
        "page": search_service.cursor.page_number,
        "records": [
            {**asdict(record), "favorite": record.id in store} for record in records
        ],
        "has_next": search_service.has_next,
        "has_prev": search_service.has_prev,
        "favorites_count": len(store),
        "notices": container.notices.active(),
    }

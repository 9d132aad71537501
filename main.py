from __future__ import annotations

import uvicorn
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from dotenv import load_dotenv
load_dotenv()
from cookbook.api.routes import router
from cookbook.core.config import APP_TITLE, HOST, LOGGER as log, PORT

from cookbook.application.recipe_resolver import RecipeResolver
from cookbook.application.usecases import AddEntry, GetEntry, GetRecipeSummary, ParseHandwriting
from cookbook.infrastructure.memory_store import InMemoryCookbookStore

app = FastAPI(title=APP_TITLE)
app.include_router(router)


@app.on_event("startup")
def on_startup() -> None:
    # one empty cookbook per process; lives until shutdown
    store = InMemoryCookbookStore()
    resolver = RecipeResolver(store)

    # DI for routes.py
    app.state.store = store
    app.state.parse_uc = ParseHandwriting()
    app.state.add_entry_uc = AddEntry(store)
    app.state.get_entry_uc = GetEntry(store)
    app.state.summary_uc = GetRecipeSummary(resolver)

    log.info("Startup complete")


@app.exception_handler(RequestValidationError)
async def on_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    # malformed entries are a plain client error, same as a rejected insert
    log.info("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})


if __name__ == "__main__":
    uvicorn.run("main:app", host=HOST, port=PORT, reload=False)

from fastapi import Depends, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .config import settings
from .routes.receipts import router as receipts_router
from .store import ScoreStore, get_store
from .utils.logging import logger

app = FastAPI(title=settings.APP_NAME,
              description="Scores purchase receipts and serves the points by id",
    version="0.1.0",
    docs_url="/docs",          # Swagger UI
    redoc_url="/redoc",        # ReDoc
    openapi_url="/openapi.json")

# One store per application; handlers get it through Depends(get_store)
app.state.store = ScoreStore()

app.include_router(receipts_router)

@app.exception_handler(RequestValidationError)
async def invalid_body(request: Request, exc: RequestValidationError):
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST,
                        content={"detail": "Invalid JSON"})

@app.get("/health")
def health(store: ScoreStore = Depends(get_store)):
    return {"ok": True, "receipts": len(store)}

# Recipe Lens API Main Entry Point
import logging
import sys
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .deps import get_gateway
from .errors import RecipeLensError
from .settings import settings
from .routers.ready import router as ready_router
from .routers.recipes import router as recipes_router

# Configure structured logging
logging.basicConfig(
    level=settings.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger("recipe_lens")

# Model gateway is built once at process start; an unknown AI_MODE stops startup
_gateway = get_gateway()
logger.info(f"AI mode={settings.ai_mode} provider={_gateway.provider} model={_gateway.model} configured={_gateway.is_configured()}")


async def _recipe_lens_error_handler(request: Request, exc: RecipeLensError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def _http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == 405:
        detail = "Method not allowed"
    else:
        detail = exc.detail if isinstance(exc.detail, str) else "Request failed"
    return JSONResponse(status_code=exc.status_code, content={"error": detail}, headers=exc.headers)


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info(f"Rejected request body on {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})


app = FastAPI(title="Recipe Lens API", version="0.1.0")
app.add_exception_handler(RecipeLensError, _recipe_lens_error_handler)
app.add_exception_handler(StarletteHTTPException, _http_error_handler)
app.add_exception_handler(RequestValidationError, _validation_error_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(ready_router, prefix="/api", tags=["ready"])
app.include_router(recipes_router, prefix="/api", tags=["recipes"])

"""
Lipsum Microservice
Main application entry point

Serves lorem ipsum text from a Markov chain trained on Cicero's De finibus,
plus ad-hoc chains trained on caller-supplied corpora.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from lipsum.config import settings
from lipsum.utils.logger import setup_logger

# Setup logging
logger = setup_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifecycle manager for service initialization"""
    logger.info("[BOOT] Starting lipsum service...")

    try:
        from lipsum.services.generator import get_lorem_chain

        app.state.lorem_chain = get_lorem_chain()
        logger.info(f"[BOOT] Reference chain warmed ({app.state.lorem_chain.size()} keys)")
        logger.info("[BOOT] Lipsum service ready!")
        yield

    except Exception as e:
        logger.error(f"[ERR] Failed to initialize: {e}", exc_info=True)
        raise
    finally:
        logger.info("[SHUTDOWN] Lipsum service stopped")


# Create FastAPI app
app = FastAPI(
    title="Lipsum Service",
    description="Lorem ipsum generator backed by a word-level Markov chain",
    version=settings.SERVICE_VERSION,
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"[ERR] Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={
            "ok": False,
            "error": {
                "code": "LIPSUM_SERVICE_ERROR",
                "message": "Internal server error occurred",
                "details": {"type": type(exc).__name__},
            },
        },
    )


# Health check
@app.get("/health")
async def health_check():
    """Health check endpoint"""
    from lipsum.services.markov import MarkovChain

    chain = getattr(app.state, "lorem_chain", None)
    return {
        "ok": True,
        "data": {
            "status": "healthy",
            "chain_order": settings.CHAIN_ORDER,
            "chain_ready": isinstance(chain, MarkovChain),
        },
    }


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "service": settings.SERVICE_NAME,
        "version": settings.SERVICE_VERSION,
        "endpoints": {
            "health": "/health",
            "docs": "/docs",
            "lipsum": "/lipsum/*",
            "markov": "/markov/*",
        },
    }


from lipsum.api.routers import lipsum_router, markov_router

app.include_router(lipsum_router.router)
app.include_router(markov_router.router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "lipsum.app:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )

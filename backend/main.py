"""
FastAPI main application
School admissions - backend server
"""
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from config import settings
from config.logging_config import setup_logger
from routers import admissions

logger = setup_logger('main')

# FastAPI app
app = FastAPI(
    title="School Admissions API",
    description="Admission status lookup, interview mark lists and call letters",
    version="1.0.0",
)

# CORS (public admission pages, any origin)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["POST", "OPTIONS"],
    allow_headers=["authorization", "x-client-info", "apikey", "content-type"],
    max_age=3600,
)


# routers
app.include_router(admissions.router, prefix="/api/admissions", tags=["Admissions"])


@app.on_event("startup")
async def startup_event():
    """Warm up the Supabase connection (the server keeps running on failure)"""
    print("🚀 Server warm-up...")

    try:
        from services.supabase_client import admission_store
        admission_store.ping()
        print("   ✅ Supabase warm-up done")
    except Exception as e:
        print(f"   ⚠️ Supabase warm-up failed (continuing): {e}")


@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """Return JSON for unhandled errors so the front end can show detail"""
    logger.error(f"❌ [global exception] {exc}", exc_info=exc)
    if isinstance(exc, HTTPException):
        detail = exc.detail if exc.detail is not None and str(exc.detail).strip() else "Error"
        return JSONResponse(status_code=exc.status_code, content={"detail": detail})
    detail = str(exc).strip() if str(exc) else "Server error (unknown cause)"
    return JSONResponse(status_code=500, content={"detail": detail})


@app.get("/api/health")
async def health_check():
    """Health check"""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=settings.BACKEND_PORT,
        reload=True,
    )

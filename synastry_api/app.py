import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from .routers import report as report_router
from .middleware.logging import LoggingMiddleware


app = FastAPI(title="synastry-api", version="0.1.0")

# CORS_ORIGIN is a comma-separated allow list; unset allows every origin
allowed = [o.strip() for o in os.getenv("CORS_ORIGIN", "").split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed or ["*"],
    allow_credentials=bool(allowed),
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Content-Length","Content-Type"],
    max_age=86400,
)
app.add_middleware(LoggingMiddleware)

app.include_router(report_router.router)


@app.get("/__health")
def health():
    return {"ok": True}


@app.get("/")
def root():
    return {"message": "synastry-api is running. See /__health and /docs."}

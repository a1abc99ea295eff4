"""Main FastAPI application."""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from program_importer.api.routes import router
from program_importer.api.import_routes import router as import_router
from program_importer.config import settings

app = FastAPI(title="Program Importer API")

# Configure CORS to allow requests from the coach dashboard
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)
app.include_router(import_router)

"""FastAPI application: workbook upload and generation"""

import asyncio
import traceback
import uuid
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, UploadFile, File
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import structlog

from config import settings
from core.exceptions import FileParseError, NoModelsFoundError

logger = structlog.get_logger(__name__)

app = FastAPI(
    title="PanelForge API",
    description="Generate a React admin front end from a model workbook",
    version="1.0.0"
)

# CORS middleware
cors_origins = [origin.strip() for origin in settings.CORS_ORIGINS.split(",") if origin.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.post("/generate")
async def generate(file: Optional[UploadFile] = File(None)):
    """Parse the uploaded workbook and write the generated front end"""
    # Lazy import keeps app startup light
    from orchestrator import Orchestrator
    from ui.progress import LoggingProgress

    if file is None or not file.filename:
        return JSONResponse(status_code=400, content={"message": "No file uploaded."})

    suffix = Path(file.filename).suffix.lower()
    upload_path = settings.get_upload_path() / f"{uuid.uuid4()}{suffix}"

    try:
        upload_path.write_bytes(await file.read())
        logger.info("Received upload", filename=file.filename, stored_as=upload_path.name)

        orchestrator = Orchestrator(progress=LoggingProgress())

        # stages are blocking; run them off the event loop
        def _run():
            return asyncio.run(orchestrator.run(str(upload_path)))

        ctx = await asyncio.to_thread(_run)

        return {
            "message": "Generation successful!",
            "modelsGenerated": list(ctx.models.keys()),
        }
    except (NoModelsFoundError, FileParseError) as e:
        logger.warning("Rejected upload", filename=file.filename, error=str(e))
        return JSONResponse(status_code=400, content={"message": str(e)})
    except Exception as e:
        logger.exception("Generation failed", filename=file.filename)
        return JSONResponse(
            status_code=500,
            content={
                "message": "Generation failed.",
                "error": str(e),
                "stack": traceback.format_exc(),
            },
        )
    finally:
        upload_path.unlink(missing_ok=True)

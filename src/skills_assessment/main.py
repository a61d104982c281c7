"""FastAPI application for CV skills assessment."""

import logging
from dataclasses import asdict
from typing import Annotated

from fastapi import FastAPI, File, HTTPException, UploadFile
from fastapi.concurrency import run_in_threadpool

from . import assessment
from .config import settings
from .errors import ConfigError, LLMError, ResponseParseError, ValidationError
from .extractors import is_pdf
from .roles import ROLE_CONFIGS, get_role_config
from .schemas import AssessmentResponse, HealthResponse, RoleConfigResponse, RoleIdentificationResponse

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="CV Skills Assessment Service",
    description="Assess CVs against target roles and return structured results",
    version="1.0.0",
)


async def read_cv_upload(file: UploadFile) -> bytes:
    """Read and validate an uploaded PDF CV."""
    if not file.filename:
        raise HTTPException(status_code=400, detail="No filename provided")

    if not file.filename.lower().endswith(".pdf"):
        raise HTTPException(status_code=400, detail="Unsupported file format. Supported: ['pdf']")

    try:
        content = await file.read()
    except Exception as e:
        logger.error(f"Failed to read file: {e}")
        raise HTTPException(status_code=400, detail="Failed to read file") from e

    max_size = settings.MAX_FILE_SIZE_MB * 1024 * 1024
    if len(content) > max_size:
        raise HTTPException(
            status_code=400,
            detail=f"File too large. Max size: {settings.MAX_FILE_SIZE_MB}MB",
        )

    if not is_pdf(content):
        raise HTTPException(status_code=400, detail="File is not a valid PDF")

    return content


@app.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    return HealthResponse(status="healthy", service=settings.SERVICE_NAME)


@app.get("/roles", response_model=list[RoleConfigResponse])
async def list_roles():
    """List the roles a CV can be assessed against."""
    return [RoleConfigResponse(**asdict(config)) for config in ROLE_CONFIGS.values()]


@app.post("/assess/{role}", response_model=AssessmentResponse)
async def assess_cv(role: str, file: Annotated[UploadFile, File(description="CV file (PDF)")]):
    """
    Assess a CV against a role.

    The CV is sent to the LLM, the JSON in its answer is recovered and
    decoded. An unrecoverable answer is reported with ``success=false``.
    """
    try:
        role_config = get_role_config(role)
    except ConfigError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e

    content = await read_cv_upload(file)

    try:
        result = await run_in_threadpool(assessment.assess_cv, role, content, filename=file.filename)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except ConfigError as e:
        logger.error(f"LLM provider misconfigured: {e}")
        raise HTTPException(status_code=500, detail=str(e)) from e
    except ResponseParseError as e:
        logger.error(f"Assessment response could not be parsed: {e}")
        return AssessmentResponse(
            success=False,
            role=role,
            title=role_config.title,
            cv_filename=file.filename,
            raw_response=e.raw_response,
            error=str(e),
        )
    except LLMError as e:
        logger.error(f"LLM analysis failed: {e}")
        return AssessmentResponse(
            success=False,
            role=role,
            title=role_config.title,
            cv_filename=file.filename,
            error=str(e),
        )

    summary = assessment.summarize_assessment(result)
    logger.info(f"Assessed {file.filename} for {role}: score {summary.score}/10")

    return AssessmentResponse(
        success=True,
        role=role,
        title=role_config.title,
        cv_filename=file.filename,
        assessment=result,
        summary=summary,
    )


@app.post("/identify-roles", response_model=RoleIdentificationResponse)
async def identify_roles(file: Annotated[UploadFile, File(description="CV file (PDF)")]):
    """Identify which assessable roles fit a CV."""
    content = await read_cv_upload(file)

    try:
        result = await run_in_threadpool(assessment.identify_roles, content, filename=file.filename)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except ConfigError as e:
        logger.error(f"LLM provider misconfigured: {e}")
        raise HTTPException(status_code=500, detail=str(e)) from e
    except ResponseParseError as e:
        logger.error(f"Role identification response could not be parsed: {e}")
        return RoleIdentificationResponse(
            success=False,
            cv_filename=file.filename,
            raw_response=e.raw_response,
            error=str(e),
        )
    except LLMError as e:
        logger.error(f"LLM analysis failed: {e}")
        return RoleIdentificationResponse(success=False, cv_filename=file.filename, error=str(e))

    identified = result.get("identified_roles")
    count = len(identified) if isinstance(identified, list) else 0
    logger.info(f"Identified {count} roles for {file.filename}")
    return RoleIdentificationResponse(success=True, cv_filename=file.filename, result=result)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8082)  # nosec B104 - Docker container

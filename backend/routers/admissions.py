"""
Admissions API router
- status: application status lookup (always HTTP 200, errors in the payload)
- mark-list: interview mark list
- interview-letter: interview call letter content
- application-form: submitted application form content

supabase-py is synchronous, so store work runs in the threadpool.
"""
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.concurrency import run_in_threadpool

from config import settings
from config.constants import ERROR_INPUT_REQUIRED, ERROR_MISCONFIGURED
from config.logging_config import status_logger as logger
from models.admission_models import (
    ApplicationFormResponse,
    ErrorResponse,
    InterviewLetterResponse,
    MarkListResponse,
)
from services.application_form import build_application_form
from services.application_status import (
    ApplicationLoadFailed,
    ApplicationNotFound,
    ApplicationRecord,
    ApplicationStatusResolver,
    InvalidLookupInput,
)
from services.interview_letter import InterviewLetterUnavailable, build_interview_letter
from services.mark_list import MarkListUnavailable, build_mark_list
from services.supabase_client import StoreConfigurationError, admission_store

router = APIRouter()


def get_resolver() -> ApplicationStatusResolver:
    return ApplicationStatusResolver(admission_store)


async def read_json_body(request: Request) -> Any:
    """Decoded JSON body, or None if the body is not JSON"""
    try:
        return await request.json()
    except ValueError:
        return None


async def load_record(request: Request, resolver: ApplicationStatusResolver) -> ApplicationRecord:
    """Locate the applicant for the document endpoints, mapping failures to HTTP errors"""
    body = await read_json_body(request)
    if not isinstance(body, dict):
        raise HTTPException(status_code=400, detail=ERROR_INPUT_REQUIRED)

    try:
        return await run_in_threadpool(resolver.load, body.get("applicationNumber"), body.get("mobileNumber"))
    except InvalidLookupInput as e:
        raise HTTPException(status_code=400, detail=e.message)
    except ApplicationNotFound as e:
        raise HTTPException(status_code=404, detail=e.message)
    except ApplicationLoadFailed as e:
        raise HTTPException(status_code=502, detail=e.message)
    except StoreConfigurationError:
        raise HTTPException(status_code=500, detail=ERROR_MISCONFIGURED)


@router.post("/status")
async def get_application_status(
    request: Request,
    resolver: ApplicationStatusResolver = Depends(get_resolver)
) -> Dict[str, Any]:
    """
    Application status lookup

    Request: {"applicationNumber": "...", "mobileNumber": "..."}
    Response (always 200):
      - {"application", "applicationType", "academicYear", "interviewMarks"}
      - {"error": "..."}
    """
    body = await read_json_body(request)
    if body is None:
        return ErrorResponse(error=ERROR_INPUT_REQUIRED).model_dump()

    result = await run_in_threadpool(resolver.resolve_body, body)
    return result.model_dump(mode="json")


@router.post("/mark-list", response_model=MarkListResponse)
async def generate_mark_list(
    request: Request,
    resolver: ApplicationStatusResolver = Depends(get_resolver)
):
    """
    Interview mark list (interview_complete / admitted / not_admitted only)
    """
    record = await load_record(request, resolver)

    try:
        mark_list = build_mark_list(record)
        logger.info(f"Mark list generated for {record.applicant.application_number}")
        return mark_list

    except MarkListUnavailable as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception(f"Error in mark list generation: {e}")
        raise HTTPException(status_code=500, detail=f"Mark list generation failed: {str(e)}")


@router.post("/interview-letter", response_model=InterviewLetterResponse)
async def generate_interview_letter(
    request: Request,
    resolver: ApplicationStatusResolver = Depends(get_resolver)
):
    """
    Interview call letter (shortlisted applicants with an interview date)
    """
    record = await load_record(request, resolver)

    try:
        letter = build_interview_letter(record, settings)
        logger.info(f"Interview letter generated for {record.applicant.application_number}")
        return letter

    except InterviewLetterUnavailable as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception(f"Error in interview letter generation: {e}")
        raise HTTPException(status_code=500, detail=f"Interview letter generation failed: {str(e)}")


@router.post("/application-form", response_model=ApplicationFormResponse)
async def generate_application_form(
    request: Request,
    resolver: ApplicationStatusResolver = Depends(get_resolver)
):
    """
    Submitted application form (any status)
    """
    record = await load_record(request, resolver)

    try:
        form = build_application_form(record, settings)
        logger.info(f"Application form generated for {record.applicant.application_number}")
        return form

    except Exception as e:
        logger.exception(f"Error in application form generation: {e}")
        raise HTTPException(status_code=500, detail=f"Application form generation failed: {str(e)}")

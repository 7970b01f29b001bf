"""
Interview call letter
"""
from datetime import date, datetime
from typing import Optional

from config import Settings
from config.constants import (
    CLASS_LABELS,
    INTERVIEW_DOCUMENTS,
    INTERVIEW_INSTRUCTIONS,
    INTERVIEW_TIME_PENDING,
    PLUS_ONE_EXTRA_DOCUMENTS,
    STATUS_SHORTLISTED,
)
from models.admission_models import ApplicationType, InterviewLetterResponse
from services.application_status import ApplicationRecord


class InterviewLetterUnavailable(Exception):
    """Applicant is not shortlisted or has no interview date"""


def format_long_date(value: date) -> str:
    # e.g. "Monday, 3 March 2025"
    return f"{value.strftime('%A')}, {value.day} {value.strftime('%B %Y')}"


def parse_iso_date(value: str) -> date:
    """ISO date or timestamp column (interview_date, created_at) as a date"""
    return datetime.fromisoformat(value.replace("Z", "+00:00")).date()


def build_interview_letter(
    record: ApplicationRecord,
    config: Settings,
    today: Optional[date] = None
) -> InterviewLetterResponse:
    """
    Call letter content for a shortlisted applicant

    Raises:
        InterviewLetterUnavailable: not shortlisted, or interview date not set
    """
    applicant = record.applicant
    if applicant.status != STATUS_SHORTLISTED:
        raise InterviewLetterUnavailable("Application is not shortlisted for interview")
    if not applicant.interview_date:
        raise InterviewLetterUnavailable("Interview date is not set")

    today = today or date.today()
    documents = list(INTERVIEW_DOCUMENTS)
    if record.application_type == ApplicationType.PLUS_ONE:
        documents.extend(PLUS_ONE_EXTRA_DOCUMENTS)

    return InterviewLetterResponse(
        reference=f"{config.LETTER_REFERENCE_PREFIX}/{today.year}/{applicant.application_number}",
        issuedOn=today.strftime("%d/%m/%Y"),
        schoolName=config.SCHOOL_NAME,
        applicationNumber=applicant.application_number,
        applicationType=record.application_type,
        className=CLASS_LABELS[record.application_type.value],
        studentName=applicant.full_name,
        fatherName=applicant.father_name,
        motherName=applicant.mother_name,
        mobileNumber=applicant.mobile_number,
        interviewDate=format_long_date(parse_iso_date(applicant.interview_date)),
        interviewTime=applicant.interview_time or INTERVIEW_TIME_PENDING,
        venue=config.SCHOOL_NAME,
        documentsRequired=documents,
        instructions=list(INTERVIEW_INSTRUCTIONS),
        filename=f"Interview_Call_Letter_{applicant.application_number}.pdf",
    )

"""
Interview mark list
Totals, percentage and per-subject grades for applicants past the interview
"""
from typing import List, Optional, Union

from config.constants import (
    DEFAULT_MAX_MARKS,
    FAIL_GRADE,
    GRADE_BANDS,
    MARK_LIST_STATUSES,
    STATUS_ADMITTED,
    STATUS_NOT_ADMITTED,
    UNGRADED,
)
from models.admission_models import InterviewMark, MarkListResponse, MarkListSubject
from services.application_status import ApplicationRecord

Number = Union[int, float]


class MarkListUnavailable(Exception):
    """Applicant status does not allow a mark list yet"""


def grade_for(marks: Optional[Number], max_marks: Number) -> str:
    """Letter grade from the percentage of a subject's max marks"""
    if marks is None:
        return UNGRADED

    percentage = (marks / max_marks) * 100 if max_marks > 0 else 0
    for threshold, grade in GRADE_BANDS:
        if percentage >= threshold:
            return grade
    return FAIL_GRADE


def result_status_for(status: Optional[str]) -> str:
    if status == STATUS_ADMITTED:
        return "ADMITTED"
    if status == STATUS_NOT_ADMITTED:
        return "NOT ADMITTED"
    return "PENDING"


def build_subjects(interview_marks: List[InterviewMark]) -> List[MarkListSubject]:
    subjects = []
    for serial_no, mark in enumerate(interview_marks, start=1):
        max_marks = mark.max_marks or DEFAULT_MAX_MARKS
        subjects.append(MarkListSubject(
            serial_no=serial_no,
            subject_name=mark.subject_name,
            marks_obtained=mark.marks_obtained,
            max_marks=max_marks,
            display_order=mark.display_order,
            grade=grade_for(mark.marks_obtained, max_marks),
        ))
    return subjects


def build_mark_list(record: ApplicationRecord) -> MarkListResponse:
    """
    Mark list for a located applicant

    Ungraded subjects count as zero towards the total.

    Raises:
        MarkListUnavailable: status is not interview_complete/admitted/not_admitted
    """
    applicant = record.applicant
    if applicant.status not in MARK_LIST_STATUSES:
        raise MarkListUnavailable("Mark list is not available for this application status")

    subjects = build_subjects(record.interview_marks)
    total_marks = sum(subject.marks_obtained or 0 for subject in subjects)
    max_marks = sum(subject.max_marks for subject in subjects)
    percentage = f"{(total_marks / max_marks) * 100:.2f}" if max_marks > 0 else "0.00"

    return MarkListResponse(
        applicationNumber=applicant.application_number,
        applicationType=record.application_type,
        academicYear=record.academic_year,
        studentName=applicant.full_name,
        subjects=subjects,
        totalMarks=total_marks,
        maxMarks=max_marks,
        percentage=percentage,
        resultStatus=result_status_for(applicant.status),
        filename=f"Mark_List_{applicant.application_number}.pdf",
    )

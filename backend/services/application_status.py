"""
Application status resolver
Finds an applicant across the intake tables and aligns interview marks
with the subject templates of that intake
"""
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence, Tuple, Type, Union

from config.constants import (
    DEFAULT_MAX_MARKS,
    ERROR_INPUT_REQUIRED,
    ERROR_LOAD_FAILED,
    ERROR_MISCONFIGURED,
    ERROR_NOT_FOUND,
    ERROR_UNEXPECTED,
    KG_STD_APPLICATIONS_TABLE,
    PLUS_ONE_APPLICATIONS_TABLE,
)
from config.logging_config import status_logger as logger
from models.admission_models import (
    Applicant,
    ApplicantBase,
    ApplicationStatusResponse,
    ApplicationType,
    ErrorResponse,
    InterviewMark,
    KgStdApplicant,
    PlusOneApplicant,
    SubjectMarkRow,
    SubjectTemplateRow,
)
from services.supabase_client import AdmissionStore, StoreConfigurationError, StoreQueryError


@dataclass(frozen=True)
class ApplicantSource:
    """One intake table and the variant it holds"""
    table: str
    application_type: ApplicationType
    model: Type[ApplicantBase]


# lookup order matters: first match wins
APPLICANT_SOURCES: Tuple[ApplicantSource, ...] = (
    ApplicantSource(KG_STD_APPLICATIONS_TABLE, ApplicationType.KG_STD, KgStdApplicant),
    ApplicantSource(PLUS_ONE_APPLICATIONS_TABLE, ApplicationType.PLUS_ONE, PlusOneApplicant),
)


class ApplicationLookupError(Exception):
    """Lookup failure carrying the message shown to the applicant"""
    message = ERROR_UNEXPECTED

    def __init__(self, detail: str = None):
        super().__init__(detail or self.message)


class InvalidLookupInput(ApplicationLookupError):
    message = ERROR_INPUT_REQUIRED


class ApplicationNotFound(ApplicationLookupError):
    message = ERROR_NOT_FOUND


class ApplicationLoadFailed(ApplicationLookupError):
    message = ERROR_LOAD_FAILED


@dataclass
class ApplicationRecord:
    """A located applicant with its enrichment"""
    applicant: Applicant
    application_type: ApplicationType
    academic_year: Optional[str]
    interview_marks: List[InterviewMark]


def normalize_lookup_input(application_number: Any, mobile_number: Any) -> Tuple[str, str]:
    """
    Trim and validate the lookup pair

    Raises:
        InvalidLookupInput: either value is not a string or is blank
    """
    if not isinstance(application_number, str) or not isinstance(mobile_number, str):
        raise InvalidLookupInput()

    application_number = application_number.strip()
    mobile_number = mobile_number.strip()
    if not application_number or not mobile_number:
        raise InvalidLookupInput()

    return application_number, mobile_number


def merge_interview_marks(
    templates: Sequence[SubjectTemplateRow],
    marks: Sequence[SubjectMarkRow]
) -> List[InterviewMark]:
    """
    Align recorded marks with the active subject templates

    - templates present: one line per template, in template order; marks
      matched by subject name, null when not yet recorded
    - no templates: recorded marks as retrieved, max DEFAULT_MAX_MARKS,
      display order 1..K
    - neither: empty list
    """
    if templates:
        marks_by_name = {mark.subject_name: mark.marks for mark in marks}
        return [
            InterviewMark(
                subject_name=template.subject_name,
                marks_obtained=marks_by_name.get(template.subject_name),
                max_marks=template.max_marks,
                display_order=template.display_order,
            )
            for template in templates
        ]

    return [
        InterviewMark(
            subject_name=mark.subject_name,
            marks_obtained=mark.marks,
            max_marks=DEFAULT_MAX_MARKS,
            display_order=index,
        )
        for index, mark in enumerate(marks, start=1)
    ]


class ApplicationStatusResolver:
    """Status lookup over an AdmissionStore"""

    def __init__(self, store: AdmissionStore, sources: Sequence[ApplicantSource] = APPLICANT_SOURCES):
        self.store = store
        self.sources = tuple(sources)

    def locate(self, application_number: str, mobile_number: str) -> Tuple[Applicant, ApplicantSource]:
        """
        Probe the intake tables in order and return the first match

        A query error on any table stops the lookup instead of falling
        through to the next one.
        """
        for source in self.sources:
            try:
                row = self.store.find_applicant(source.table, application_number, mobile_number)
            except StoreQueryError as e:
                logger.error(f"❌ Error querying {source.table}: {e}")
                raise ApplicationLoadFailed() from e

            if row:
                return source.model.model_validate(row), source

        raise ApplicationNotFound()

    def _academic_year(self, application_type: ApplicationType) -> Optional[str]:
        try:
            return self.store.get_academic_year(application_type.value)
        except StoreQueryError as e:
            logger.warning(f"Academic year unavailable for {application_type.value}: {e}")
            return None

    def _interview_marks(self, applicant: Applicant, application_type: ApplicationType) -> List[InterviewMark]:
        try:
            mark_rows = self.store.get_subject_marks(applicant.id, application_type.value)
        except StoreQueryError as e:
            logger.error(f"Error loading interview_subjects: {e}")
            mark_rows = []

        try:
            template_rows = self.store.get_subject_templates(application_type.value)
        except StoreQueryError as e:
            logger.error(f"Error loading interview_subject_templates: {e}")
            template_rows = []

        marks = [SubjectMarkRow.model_validate(row) for row in mark_rows]
        templates = [SubjectTemplateRow.model_validate(row) for row in template_rows]
        return merge_interview_marks(templates, marks)

    def load(self, application_number: Any, mobile_number: Any) -> ApplicationRecord:
        """
        Locate an applicant and attach academic year and interview marks

        Raises:
            ApplicationLookupError: input, not-found or load failure
            StoreConfigurationError: Supabase is not configured
        """
        application_number, mobile_number = normalize_lookup_input(application_number, mobile_number)
        applicant, source = self.locate(application_number, mobile_number)

        return ApplicationRecord(
            applicant=applicant,
            application_type=source.application_type,
            academic_year=self._academic_year(source.application_type),
            interview_marks=self._interview_marks(applicant, source.application_type),
        )

    def resolve(self, application_number: Any, mobile_number: Any) -> Union[ApplicationStatusResponse, ErrorResponse]:
        """Status lookup that never raises; failures become ErrorResponse"""
        try:
            record = self.load(application_number, mobile_number)
        except ApplicationLookupError as e:
            return ErrorResponse(error=e.message)
        except StoreConfigurationError as e:
            logger.error(f"❌ {e}")
            return ErrorResponse(error=ERROR_MISCONFIGURED)
        except Exception as e:
            logger.exception(f"get-application-status error: {e}")
            return ErrorResponse(error=ERROR_UNEXPECTED)

        return ApplicationStatusResponse(
            application=record.applicant.to_payload(),
            applicationType=record.application_type,
            academicYear=record.academic_year,
            interviewMarks=record.interview_marks,
        )

    def resolve_body(self, body: Any) -> Union[ApplicationStatusResponse, ErrorResponse]:
        """resolve() for a decoded JSON request body"""
        if not isinstance(body, dict):
            return ErrorResponse(error=ERROR_INPUT_REQUIRED)
        return self.resolve(body.get("applicationNumber"), body.get("mobileNumber"))

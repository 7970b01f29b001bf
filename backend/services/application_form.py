"""
Submitted application form
Summary of what the applicant entered, grouped as on the intake form
"""
from typing import Any, Callable, Dict, List

from config import Settings
from config.constants import CLASS_LABELS, NOT_AVAILABLE
from models.admission_models import (
    Applicant,
    ApplicationFormResponse,
    ApplicationType,
    FormField,
    FormSection,
)
from services.application_status import ApplicationRecord
from services.interview_letter import parse_iso_date


def field(label: str, value: Any) -> FormField:
    if value is None or value == "":
        return FormField(label=label, value=NOT_AVAILABLE)
    return FormField(label=label, value=str(value))


def applicant_section(applicant: Applicant) -> FormSection:
    fields = [
        field("Application Number", applicant.application_number),
        field("Student Name", applicant.full_name),
        field("Date of Birth", applicant.date_of_birth),
        field("Gender", applicant.gender),
        field("Mobile", applicant.mobile_number),
    ]
    if applicant.email:
        fields.append(field("Email", applicant.email))
    return FormSection(title="Application Summary", fields=fields)


def parent_section(applicant: Applicant) -> FormSection:
    return FormSection(title="Parent Information", fields=[
        field("Father's Name", applicant.father_name),
        field("Mother's Name", applicant.mother_name),
    ])


def address_section(applicant: Applicant) -> FormSection:
    return FormSection(title="Address Information", fields=[
        field("House Name", applicant.house_name),
        field("Panchayath", applicant.village),
        field("Post Office", applicant.post_office),
        field("District", applicant.district),
        field("Pincode", applicant.pincode),
    ])


def kg_std_education(applicant: Applicant) -> List[FormField]:
    # previous school and madrassa only when filled in
    fields = [field("Stage", applicant.stage)]
    if applicant.previous_school:
        fields.append(field("Previous School", applicant.previous_school))
    if applicant.need_madrassa:
        fields.append(field("Need Madrassa", "Yes"))
    return fields


def plus_one_education(applicant: Applicant) -> List[FormField]:
    return [
        field("Stream", applicant.stream),
        field("10th School", applicant.tenth_school),
        field("Board", applicant.board),
        field("Exam Year", applicant.exam_year),
        field("Roll Number", applicant.exam_roll_number),
    ]


EDUCATION_FIELDS: Dict[ApplicationType, Callable[[Applicant], List[FormField]]] = {
    ApplicationType.KG_STD: kg_std_education,
    ApplicationType.PLUS_ONE: plus_one_education,
}


def build_application_form(record: ApplicationRecord, config: Settings) -> ApplicationFormResponse:
    """
    Application form document for a located applicant

    Available at every status. Sections: summary, parents, address, then
    the education block of the applicant's intake variant.
    """
    applicant = record.applicant
    sections = [
        applicant_section(applicant),
        parent_section(applicant),
        address_section(applicant),
        FormSection(
            title="Educational Information",
            fields=EDUCATION_FIELDS[record.application_type](applicant),
        ),
    ]

    submitted_on = None
    if applicant.created_at:
        submitted_on = parse_iso_date(applicant.created_at).strftime("%d/%m/%Y")

    return ApplicationFormResponse(
        schoolName=config.SCHOOL_NAME,
        applicationNumber=applicant.application_number,
        applicationType=record.application_type,
        className=CLASS_LABELS[record.application_type.value],
        academicYear=record.academic_year,
        sections=sections,
        submittedOn=submitted_on,
        filename=f"Application_{applicant.application_number}.pdf",
    )

"""
Admission Pydantic models
Applicant variants, interview rows and response payloads
"""
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

Marks = Optional[Union[int, float]]


class ApplicationType(str, Enum):
    """Intake form variant"""
    KG_STD = "kg_std"
    PLUS_ONE = "plus_one"


class ApplicantBase(BaseModel):
    """Columns shared by both applicant tables"""
    model_config = ConfigDict(extra="allow")

    id: str
    application_number: str
    mobile_number: str
    full_name: Optional[str] = None
    father_name: Optional[str] = None
    mother_name: Optional[str] = None
    date_of_birth: Optional[str] = None
    gender: Optional[str] = None
    email: Optional[str] = None
    house_name: Optional[str] = None
    village: Optional[str] = None
    post_office: Optional[str] = None
    district: Optional[str] = None
    pincode: Optional[str] = None
    has_siblings: Optional[bool] = None
    siblings_names: Optional[str] = None
    status: Optional[str] = None
    interview_date: Optional[str] = None
    interview_time: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        """Serialize without null-valued keys (extra columns included)"""
        data = self.model_dump(mode="json")
        return {key: value for key, value in data.items() if value is not None}


class KgStdApplicant(ApplicantBase):
    """KG & STD intake form"""
    stage: Optional[str] = None
    previous_school: Optional[str] = None
    need_madrassa: Optional[bool] = None
    previous_madrassa: Optional[str] = None


class PlusOneApplicant(ApplicantBase):
    """Plus One (HSS) intake form"""
    stream: Optional[str] = None
    board: Optional[str] = None
    exam_roll_number: Optional[str] = None
    exam_year: Optional[str] = None
    tenth_school: Optional[str] = None
    landmark: Optional[str] = None


Applicant = Union[KgStdApplicant, PlusOneApplicant]


class SubjectMarkRow(BaseModel):
    """interview_subjects row"""
    subject_name: str
    marks: Marks = None


class SubjectTemplateRow(BaseModel):
    """interview_subject_templates row (active only)"""
    subject_name: str
    max_marks: Marks = None
    display_order: Optional[int] = None


class InterviewMark(BaseModel):
    """One subject line of the status payload"""
    subject_name: str
    marks_obtained: Marks = None
    max_marks: Marks = None
    display_order: Optional[int] = None


class ApplicationStatusResponse(BaseModel):
    """Successful status lookup"""
    application: Dict[str, Any]
    applicationType: ApplicationType
    academicYear: Optional[str] = None
    interviewMarks: List[InterviewMark] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    """Failed status lookup (still HTTP 200)"""
    error: str


class MarkListSubject(InterviewMark):
    """Mark list line with serial number and grade"""
    serial_no: int
    grade: str


class MarkListResponse(BaseModel):
    """Interview mark list"""
    success: bool = True
    applicationNumber: str
    applicationType: ApplicationType
    academicYear: Optional[str] = None
    studentName: Optional[str] = None
    subjects: List[MarkListSubject] = Field(default_factory=list)
    totalMarks: Union[int, float] = 0
    maxMarks: Union[int, float] = 0
    percentage: str = "0.00"
    resultStatus: str
    filename: str


class InterviewLetterResponse(BaseModel):
    """Interview call letter content"""
    success: bool = True
    reference: str
    issuedOn: str
    schoolName: str
    applicationNumber: str
    applicationType: ApplicationType
    className: str
    studentName: Optional[str] = None
    fatherName: Optional[str] = None
    motherName: Optional[str] = None
    mobileNumber: str
    interviewDate: str
    interviewTime: str
    venue: str
    documentsRequired: List[str] = Field(default_factory=list)
    instructions: List[str] = Field(default_factory=list)
    filename: str


class FormField(BaseModel):
    label: str
    value: str


class FormSection(BaseModel):
    title: str
    fields: List[FormField] = Field(default_factory=list)


class ApplicationFormResponse(BaseModel):
    """Submitted application summary, one section per block of the form"""
    success: bool = True
    schoolName: str
    applicationNumber: str
    applicationType: ApplicationType
    className: str
    academicYear: Optional[str] = None
    sections: List[FormSection] = Field(default_factory=list)
    submittedOn: Optional[str] = None
    filename: str

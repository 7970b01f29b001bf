"""
Constants
"""

# Tables
KG_STD_APPLICATIONS_TABLE = "kg_std_applications"
PLUS_ONE_APPLICATIONS_TABLE = "plus_one_applications"
ADMISSION_FORMS_TABLE = "admission_forms"
INTERVIEW_SUBJECTS_TABLE = "interview_subjects"
INTERVIEW_TEMPLATES_TABLE = "interview_subject_templates"

# PostgREST codes meaning "no match" for a maybe_single() query:
# PGRST116 zero or several rows (postgrest < 0.17), 204 empty body,
# 406 several rows (postgrest 2.x)
NO_ROWS_ERROR_CODES = {"PGRST116", "204", "406"}

# Interview marks
DEFAULT_MAX_MARKS = 25  # used when a variant has no active template

# Status lookup error messages (returned with HTTP 200)
ERROR_INPUT_REQUIRED = "Application number and mobile number are required"
ERROR_NOT_FOUND = "Application not found"
ERROR_LOAD_FAILED = "Failed to load application"
ERROR_MISCONFIGURED = "Server misconfiguration: missing Supabase URL or Key"
ERROR_UNEXPECTED = "Unexpected error while loading application status"

# Application workflow statuses
STATUS_SUBMITTED = "submitted"
STATUS_UNDER_REVIEW = "under_review"
STATUS_SHORTLISTED = "shortlisted_for_interview"
STATUS_INTERVIEW_COMPLETE = "interview_complete"
STATUS_ADMITTED = "admitted"
STATUS_NOT_ADMITTED = "not_admitted"

MARK_LIST_STATUSES = (STATUS_INTERVIEW_COMPLETE, STATUS_ADMITTED, STATUS_NOT_ADMITTED)

# Grade bands on percentage of a subject's max marks, highest first
GRADE_BANDS = [
    (80, "A+"),
    (70, "A"),
    (60, "B+"),
    (50, "B"),
    (40, "C"),
]
FAIL_GRADE = "F"
UNGRADED = "N/A"

# Class labels printed on letters
CLASS_LABELS = {
    "kg_std": "KG & STD",
    "plus_one": "+1 / HSS",
}

INTERVIEW_TIME_PENDING = "Will be communicated separately"

# Documents applicants bring to the interview, in letter order
INTERVIEW_DOCUMENTS = [
    "Original Birth Certificate and one photocopy",
    "Transfer Certificate (if applicable)",
    "Previous academic records/mark sheets",
    "Recent passport-size photographs (2 nos.)",
    "This interview call letter",
]
PLUS_ONE_EXTRA_DOCUMENTS = [
    "SSLC/10th standard certificate and mark sheet",
]

INTERVIEW_INSTRUCTIONS = [
    "Please report 15 minutes before the scheduled time",
    "Bring all original documents for verification",
    "Students must be accompanied by parents/guardians",
    "Mobile phones are not allowed in the interview hall",
    "For any queries, contact the school office",
]

# Application form document
NOT_AVAILABLE = "N/A"

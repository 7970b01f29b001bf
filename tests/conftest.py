"""
Shared fixtures: in-memory admission store and API client
"""
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient
from postgrest.exceptions import APIError

from main import app
from routers.admissions import get_resolver
from services.application_status import ApplicationStatusResolver
from services.supabase_client import StoreQueryError


def make_query_error(table: str, code: str = "XX000", message: str = "boom") -> StoreQueryError:
    return StoreQueryError(table, APIError({"code": code, "message": message, "details": None, "hint": None}))


class FakeQuery:
    """Chainable stand-in for a postgrest request builder"""

    def __init__(self, table, response=None, error=None):
        self.table = table
        self.response = response
        self.error = error
        self.ops = []

    def select(self, columns):
        self.ops.append(("select", columns))
        return self

    def eq(self, column, value):
        self.ops.append(("eq", column, value))
        return self

    def order(self, column, desc=False):
        self.ops.append(("order", column, desc))
        return self

    def limit(self, size):
        self.ops.append(("limit", size))
        return self

    def maybe_single(self):
        self.ops.append(("maybe_single",))
        return self

    def execute(self):
        if self.error is not None:
            raise self.error
        return self.response


class FakeClient:
    def __init__(self, results):
        self.results = results  # table -> (response, error)
        self.queries = []

    def table(self, name):
        response, error = self.results.get(name, (SimpleNamespace(data=[]), None))
        query = FakeQuery(name, response, error)
        self.queries.append(query)
        return query


def api_error(code, message="error"):
    return APIError({"code": code, "message": message, "details": None, "hint": None})


class FakeAdmissionStore:
    """AdmissionStore stand-in backed by plain lists"""

    def __init__(self, applicants=None, academic_years=None, marks=None, templates=None, failures=None):
        self.applicants = applicants or {}  # table -> rows
        self.academic_years = academic_years or {}  # form_type -> label
        self.marks = marks or []  # interview_subjects rows
        self.templates = templates or {}  # form_type -> active rows, already ordered
        self.failures = failures or {}  # table -> exception
        self.calls = []

    def _fail(self, table):
        if table in self.failures:
            raise self.failures[table]

    def find_applicant(self, table, application_number, mobile_number):
        self.calls.append(("find_applicant", table, application_number, mobile_number))
        self._fail(table)
        for row in self.applicants.get(table, []):
            if row["application_number"] == application_number and row["mobile_number"] == mobile_number:
                return dict(row)
        return None

    def get_academic_year(self, form_type):
        self.calls.append(("get_academic_year", form_type))
        self._fail("admission_forms")
        return self.academic_years.get(form_type)

    def get_subject_marks(self, application_id, application_type):
        self.calls.append(("get_subject_marks", application_id, application_type))
        self._fail("interview_subjects")
        return [
            {"subject_name": row["subject_name"], "marks": row["marks"]}
            for row in self.marks
            if row["application_id"] == application_id and row["application_type"] == application_type
        ]

    def get_subject_templates(self, form_type):
        self.calls.append(("get_subject_templates", form_type))
        self._fail("interview_subject_templates")
        return [dict(row) for row in self.templates.get(form_type, [])]


KG_APPLICANT = {
    "id": "kg-1",
    "application_number": "KG2024001",
    "mobile_number": "9876543210",
    "full_name": "Aisha Rahman",
    "father_name": "Abdul Rahman",
    "mother_name": "Fathima",
    "date_of_birth": "2019-06-12",
    "gender": "female",
    "email": None,
    "house_name": "Rose Villa",
    "village": "Pottur",
    "post_office": "Mudur",
    "district": "Malappuram",
    "pincode": "679578",
    "stage": "LKG",
    "previous_school": None,
    "need_madrassa": True,
    "previous_madrassa": None,
    "has_siblings": False,
    "siblings_names": None,
    "status": "interview_complete",
    "interview_date": "2025-03-03",
    "interview_time": None,
    "created_at": "2025-01-10T09:00:00+00:00",
    "updated_at": "2025-03-04T09:00:00+00:00",
}

PLUS_ONE_APPLICANT = {
    "id": "po-1",
    "application_number": "HSS2024007",
    "mobile_number": "9123456780",
    "full_name": "Rahul Menon",
    "father_name": "Suresh Menon",
    "mother_name": "Latha",
    "date_of_birth": "2009-02-20",
    "gender": "male",
    "email": "rahul@example.com",
    "house_name": "Menon House",
    "village": "Edappal",
    "post_office": "Edappal",
    "district": "Malappuram",
    "pincode": "679576",
    "stream": "Science",
    "board": "SSLC",
    "exam_roll_number": "123456",
    "exam_year": "2024",
    "tenth_school": "GHSS Edappal",
    "landmark": None,
    "has_siblings": None,
    "siblings_names": None,
    "status": "shortlisted_for_interview",
    "interview_date": "2025-03-03",
    "interview_time": "10:30 AM",
    "created_at": "2025-01-11T09:00:00+00:00",
    "updated_at": "2025-02-01T09:00:00+00:00",
}

KG_TEMPLATES = [
    {"subject_name": "English", "max_marks": 25, "display_order": 1},
    {"subject_name": "Mathematics", "max_marks": 25, "display_order": 2},
    {"subject_name": "Science", "max_marks": 25, "display_order": 3},
]

KG_MARKS = [
    {"application_id": "kg-1", "application_type": "kg_std", "subject_name": "English", "marks": 20},
    {"application_id": "kg-1", "application_type": "kg_std", "subject_name": "Mathematics", "marks": 22},
]


@pytest.fixture
def store():
    return FakeAdmissionStore(
        applicants={
            "kg_std_applications": [KG_APPLICANT],
            "plus_one_applications": [PLUS_ONE_APPLICANT],
        },
        academic_years={"kg_std": "2025-26", "plus_one": "2025-26"},
        marks=list(KG_MARKS),
        templates={"kg_std": list(KG_TEMPLATES)},
    )


@pytest.fixture
def resolver(store):
    return ApplicationStatusResolver(store)


@pytest.fixture
def client(resolver):
    app.dependency_overrides[get_resolver] = lambda: resolver
    yield TestClient(app)
    app.dependency_overrides.clear()

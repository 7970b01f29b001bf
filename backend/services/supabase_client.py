"""
Supabase client service
Read-only queries used by the admission status lookups
"""
from typing import Any, Dict, List, Optional, Union

import httpx
from postgrest.exceptions import APIError
from supabase import Client, create_client

from config import Settings, settings
from config.constants import (
    ADMISSION_FORMS_TABLE,
    INTERVIEW_SUBJECTS_TABLE,
    INTERVIEW_TEMPLATES_TABLE,
    NO_ROWS_ERROR_CODES,
)
from config.logging_config import store_logger as logger


class AdmissionStoreError(Exception):
    """Base error for the admission data store"""


class StoreConfigurationError(AdmissionStoreError):
    """Supabase URL or key missing"""


class StoreQueryError(AdmissionStoreError):
    """A PostgREST query failed, either rejected by the server or lost in transport"""

    def __init__(self, table: str, error: Union[APIError, httpx.HTTPError]):
        self.table = table
        self.error = error
        if isinstance(error, APIError):
            self.code = error.code
            message = error.message
        else:
            self.code = None
            message = f"{type(error).__name__}: {error}"
        super().__init__(f"{table}: [{self.code}] {message}")


class AdmissionStore:
    """
    Supabase access for applicant tables, form metadata and interview marks

    The client is created lazily on first use from the settings passed in,
    so a misconfigured deployment fails per request instead of at import.
    """

    def __init__(self, config: Settings, client: Optional[Client] = None):
        self.config = config
        self._client = client

    @property
    def client(self) -> Client:
        if self._client is None:
            if not self.config.SUPABASE_URL or not self.config.supabase_key:
                raise StoreConfigurationError("SUPABASE_URL and a Supabase key must be set")
            self._client = create_client(self.config.SUPABASE_URL, self.config.supabase_key)
        return self._client

    @staticmethod
    def _maybe_single(table: str, query) -> Optional[Dict[str, Any]]:
        """Run a maybe_single() query; "no rows" becomes None"""
        try:
            response = query.maybe_single().execute()
        except APIError as e:
            if e.code in NO_ROWS_ERROR_CODES:
                return None
            raise StoreQueryError(table, e) from e
        except httpx.HTTPError as e:
            raise StoreQueryError(table, e) from e

        # newer postgrest clients return None instead of an empty response
        if response is None:
            return None
        return response.data or None

    @staticmethod
    def _rows(table: str, query) -> List[Dict[str, Any]]:
        try:
            response = query.execute()
        except APIError as e:
            if e.code in NO_ROWS_ERROR_CODES:
                return []
            raise StoreQueryError(table, e) from e
        except httpx.HTTPError as e:
            raise StoreQueryError(table, e) from e
        return response.data or []

    def find_applicant(
        self,
        table: str,
        application_number: str,
        mobile_number: str
    ) -> Optional[Dict[str, Any]]:
        """
        Exact match on (application_number, mobile_number) in one applicant table

        Returns:
            the row as a dict, or None when the table has no match

        Raises:
            StoreQueryError: the query failed for a reason other than "no rows"
        """
        query = self.client.table(table)\
            .select("*")\
            .eq("application_number", application_number)\
            .eq("mobile_number", mobile_number)
        return self._maybe_single(table, query)

    def get_academic_year(self, form_type: str) -> Optional[str]:
        """academic_year label of the admission form for a variant"""
        query = self.client.table(ADMISSION_FORMS_TABLE)\
            .select("academic_year")\
            .eq("form_type", form_type)
        row = self._maybe_single(ADMISSION_FORMS_TABLE, query)
        if not row:
            return None
        return row.get("academic_year")

    def get_subject_marks(self, application_id: str, application_type: str) -> List[Dict[str, Any]]:
        """Recorded interview marks for one applicant, in retrieval order"""
        query = self.client.table(INTERVIEW_SUBJECTS_TABLE)\
            .select("subject_name, marks")\
            .eq("application_id", application_id)\
            .eq("application_type", application_type)
        return self._rows(INTERVIEW_SUBJECTS_TABLE, query)

    def get_subject_templates(self, form_type: str) -> List[Dict[str, Any]]:
        """Active subject templates for a variant, by display_order"""
        query = self.client.table(INTERVIEW_TEMPLATES_TABLE)\
            .select("subject_name, max_marks, display_order")\
            .eq("form_type", form_type)\
            .eq("is_active", True)\
            .order("display_order", desc=False)
        return self._rows(INTERVIEW_TEMPLATES_TABLE, query)

    def ping(self) -> None:
        """Cheap round trip used by the startup warm-up"""
        self.client.table(ADMISSION_FORMS_TABLE).select("id").limit(1).execute()
        logger.info("Supabase reachable")


# global store
admission_store = AdmissionStore(settings)

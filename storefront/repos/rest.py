# storefront/repos/rest.py
import requests

from storefront.utils.settings import SUPABASE_URL, SUPABASE_KEY, HTTP_TIMEOUT


class SupabaseRest:
    """
    Minimal PostgREST access shared by the remote table repos.
    Filters use the PostgREST syntax, e.g. {"user_id": "eq.42"}.
    """

    def __init__(
        self,
        base_url: str | None = None,
        api_key: str | None = None,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ):
        self.base_url = (base_url or SUPABASE_URL).rstrip("/") + "/rest/v1"
        self.api_key = SUPABASE_KEY if api_key is None else api_key
        self.timeout = timeout or HTTP_TIMEOUT
        self.http = session or requests.Session()

    def url(self, table: str) -> str:
        return f"{self.base_url}/{table}"

    def headers(self, prefer: str | None = None) -> dict:
        headers = {
            "apikey": self.api_key,
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        if prefer:
            headers["Prefer"] = prefer
        return headers

    def select(self, table: str, params: dict) -> list:
        resp = self.http.get(self.url(table), params=params, headers=self.headers(), timeout=self.timeout)
        resp.raise_for_status()
        return resp.json()

    def insert(self, table: str, rows, params: dict | None = None, prefer: str = "return=representation"):
        resp = self.http.post(
            self.url(table),
            params=params or {},
            json=rows,
            headers=self.headers(prefer),
            timeout=self.timeout,
        )
        resp.raise_for_status()
        return resp.json() if "return=representation" in prefer else None

    def delete(self, table: str, params: dict) -> None:
        resp = self.http.delete(self.url(table), params=params, headers=self.headers(), timeout=self.timeout)
        resp.raise_for_status()

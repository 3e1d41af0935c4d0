"""Meter API client.

This module defines a small client wrapper around the Meter REST API.
It uses the ``requests`` library internally to make HTTP calls.  Every
high‑level method returns a tuple ``(data, error)``: on success
``error`` is ``None``; on failure ``data`` is empty and ``error`` is a
dictionary with the keys ``status_code`` and ``message``.

The client exposes:

* :meth:`MeterAPI.list_meters` and :meth:`MeterAPI.search_meters`
* :meth:`MeterAPI.get_meter` and :meth:`MeterAPI.get_meter_by_slug`
* :meth:`MeterAPI.create_meter`, :meth:`MeterAPI.update_meter` and
  :meth:`MeterAPI.delete_meter`

Running the module performs a smoke run against a live server: it lists
the meters, deletes all of them, creates a few new ones (one with an
invalid duration, which must be rejected) and lists them again::

    python -m meter_api.client --base-url http://localhost:3333/api/v1
"""

from __future__ import annotations

import argparse
import json
import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class MeterAPI:
    """Client for the meter endpoints of the API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: URL the ``/meters`` routes are mounted under, e.g.
                ``http://localhost:3333/api/v1``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/meters``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.  The error message is taken from
            the ``error`` (or ``status``) field of the API's error body.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if not response.content:
                return None, None
            try:
                return response.json(), None
            except ValueError:
                return response.text, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("error") or err_json.get("status") or str(err_json)
                except (ValueError, AttributeError):
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _request_list(self, path: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", path)
        if error:
            return [], error
        if isinstance(data, list):
            return data, None
        return [], {"status_code": None, "message": f"Unexpected response for {path}: {data!r}"}

    # ------------------------------------------------------------------
    # Meter operations
    # ------------------------------------------------------------------
    def list_meters(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all meters in store order."""
        return self._request_list("/meters")

    def search_meters(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Call the search endpoint (currently returns every meter)."""
        return self._request_list("/meters/search")

    def get_meter(self, meter_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/meters/{meter_id}")

    def get_meter_by_slug(self, slug: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/meters/slug/{slug}")

    def create_meter(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a meter.

        Args:
            payload: Meter fields using their JSON names (``project``,
                ``ora_conn``, ``duration`` ...).  An ``id`` is ignored by
                the server.
        Returns:
            A tuple ``(meter, error)``.
        """
        return self._request("POST", "/meters", json_body=payload)

    def update_meter(
        self, meter_id: Any, payload: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("PUT", f"/meters/{meter_id}", json_body=payload)

    def delete_meter(self, meter_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Delete a meter; returns the removed record."""
        return self._request("DELETE", f"/meters/{meter_id}")


# Bodies posted by the smoke run.  The last one has an invalid duration.
SMOKE_PAYLOADS: List[Dict[str, Any]] = [
    {"id": "will-be-omitted", "project": "awesomeness"},
    {"project": "No-id-example"},
    {"project": "ora-example", "ora_conn": "user1", "ora_password": "Your-PassWd"},
    {"project": "duration-example", "ora_conn": "user1", "ora_password": "Your-PassWd", "duration": "1m"},
    {"project": "BAD-duration-example", "ora_conn": "user1", "ora_password": "Your-PassWd", "duration": "D1393"},
]


def smoke_run(api: MeterAPI) -> bool:
    """Exercise every endpoint once; return ``True`` if all steps behaved."""
    ok = True

    def show(label: str, data: Any, error: Optional[Error]) -> None:
        print(f"== {label}")
        print(json.dumps(error if error else data, indent=2))

    meters, error = api.list_meters()
    show("list", meters, error)
    ok &= error is None

    for meter in meters:
        data, error = api.delete_meter(meter["id"])
        show(f"delete {meter['id']}", data, error)
        ok &= error is None
    print("all deleted")

    created = []
    for payload in SMOKE_PAYLOADS:
        data, error = api.create_meter(payload)
        show(f"create {payload['project']}", data, error)
        expect_failure = payload.get("duration") == "D1393"
        ok &= (error is not None) == expect_failure
        if data:
            created.append(data)

    if created:
        first = created[0]
        data, error = api.get_meter(first["id"])
        show(f"get {first['id']}", data, error)
        ok &= error is None
        data, error = api.get_meter_by_slug(first["slug"])
        show(f"get slug {first['slug']}", data, error)
        ok &= error is None

    meters, error = api.list_meters()
    show("list", meters, error)
    ok &= error is None and len(meters) == len(created)
    return ok


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Smoke-test a running Meter API")
    parser.add_argument(
        "--base-url",
        default="http://localhost:3333/api/v1",
        help="URL the /meters routes are mounted under",
    )
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO)
    return 0 if smoke_run(MeterAPI(base_url=args.base_url)) else 1


if __name__ == "__main__":
    raise SystemExit(main())

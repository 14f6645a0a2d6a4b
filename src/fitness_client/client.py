"""HTTP client facade for the fitness REST API.

Implements every collaborator the program engine consumes (exercise
catalog, program store, result store). All methods go through
:meth:`FitnessClient._request`, which retries rate-limited calls with
exponential backoff and converts failures into ``fitness_client``
exceptions.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, Mapping

import httpx

from fitness_client.exceptions import (
    FitnessAPIError,
    FitnessNotFoundError,
    FitnessRateLimitError,
)
from program_engine.collaborators import ExerciseCatalog, ProgramStore, ResultStore
from program_engine.models.exercise import Exercise
from program_engine.models.program import Program
from program_engine.models.result import AdvancedWorkoutResult, ResultHandle
from program_engine.serialization.wire import (
    exercise_from_wire,
    from_wire_format,
    result_from_wire,
    to_wire_format,
)

logger = logging.getLogger(__name__)

_DEFAULT_TIMEOUT_S = 10.0
_MAX_RETRIES = 3
_BASE_BACKOFF_S = 2


class FitnessClient(ExerciseCatalog, ProgramStore, ResultStore):
    """Facade for exercise, program and workout-result endpoints.

    Args:
        base_url: API root, e.g. ``http://localhost:8080/api``.
        username: HTTP basic-auth user; no auth header when empty.
        password: HTTP basic-auth password.
        timeout_s: Per-request timeout in seconds.
        transport: Optional httpx transport (tests pass ``httpx.MockTransport``).
    """

    def __init__(
        self,
        base_url: str,
        username: str | None = None,
        password: str | None = None,
        timeout_s: float = _DEFAULT_TIMEOUT_S,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        auth = httpx.BasicAuth(username, password or "") if username else None
        self._http = httpx.Client(
            base_url=base_url.rstrip("/"),
            auth=auth,
            timeout=timeout_s,
            transport=transport,
            headers={"Accept": "application/json"},
        )

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "FitnessClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Exercise catalog
    # ------------------------------------------------------------------

    def fetch_exercise(self, exercise_id: str) -> Exercise:
        data = self._request("GET", f"/exercises/{exercise_id}")
        return _decode(exercise_from_wire, data, f"exercise {exercise_id}")

    def fetch_exercises_all(self) -> list[Exercise]:
        data = self._request("GET", "/exercises") or []
        return [_decode(exercise_from_wire, e, "exercise") for e in data]

    # ------------------------------------------------------------------
    # Programs
    # ------------------------------------------------------------------

    def fetch_program(self, program_id: str) -> Program:
        data = self._request("GET", f"/programs/{program_id}")
        return _decode(from_wire_format, data, f"program {program_id}")

    def create_program(self, program: Program) -> Program:
        data = self._request("POST", "/programs", json=to_wire_format(program))
        created = _decode(from_wire_format, data, "created program")
        logger.info("Created program id=%s", created.id)
        return created

    def update_program(self, program_id: str, program: Program) -> Program:
        data = self._request("PUT", f"/programs/{program_id}", json=to_wire_format(program))
        logger.info("Updated program id=%s", program_id)
        return _decode(from_wire_format, data, f"program {program_id}")

    def delete_program(self, program_id: str) -> None:
        self._request("DELETE", f"/programs/{program_id}")
        logger.info("Deleted program id=%s", program_id)

    # ------------------------------------------------------------------
    # Workout results
    # ------------------------------------------------------------------

    def start_session(self, session_id: str | None, user_id: str) -> ResultHandle:
        params = {"userId": user_id}
        if session_id is not None:
            params["sessionTemplateId"] = session_id
        data = self._request("POST", "/workout-results/start", params=params)
        if not isinstance(data, Mapping) or data.get("id") is None:
            raise FitnessAPIError(f"Unexpected start response: {data}")
        handle = ResultHandle(id=str(data["id"]))
        logger.info("Opened workout result id=%s for user %s", handle.id, user_id)
        return handle

    def update_result(self, result_id: str, partial_result: Mapping[str, Any]) -> None:
        self._request("PUT", f"/workout-results/{result_id}", json=dict(partial_result))

    def finish_result(self, result_id: str) -> None:
        self._request("POST", f"/workout-results/{result_id}/finish")
        logger.info("Finished workout result id=%s", result_id)

    def fetch_results_by_user(self, user_id: str) -> list[AdvancedWorkoutResult]:
        data = self._request("GET", f"/workout-results/user/{user_id}") or []
        return [_decode(result_from_wire, r, "workout result") for r in data]

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        """Send one request with retry + exponential backoff on 429.

        Returns the decoded JSON body, or None for empty responses.
        """
        for attempt in range(_MAX_RETRIES):
            try:
                resp = self._http.request(method, path, **kwargs)
            except httpx.HTTPError as exc:
                raise FitnessAPIError(f"{method} {path} failed: {exc}") from exc

            if resp.status_code == 429:
                wait = _BASE_BACKOFF_S * (2 ** attempt)
                logger.warning(
                    "Rate limited on %s %s (attempt %d/%d), retrying in %ds",
                    method, path, attempt + 1, _MAX_RETRIES, wait,
                )
                time.sleep(wait)
                continue
            if resp.status_code == 404:
                raise FitnessNotFoundError(f"{method} {path}: not found")
            if resp.status_code >= 400:
                raise FitnessAPIError(
                    f"{method} {path} returned {resp.status_code}: {resp.text[:200]}",
                    status_code=resp.status_code,
                )

            if not resp.content:
                return None
            try:
                return resp.json()
            except ValueError as exc:
                raise FitnessAPIError(
                    f"{method} {path}: invalid JSON body", status_code=resp.status_code
                ) from exc

        raise FitnessRateLimitError(f"{method} {path} rate limited after {_MAX_RETRIES} retries")


def _decode(converter: Callable[[Any], Any], data: Any, what: str) -> Any:
    """Apply a wire converter, reporting malformed payloads as API errors."""
    if not isinstance(data, Mapping):
        raise FitnessAPIError(f"Expected an object for {what}, got {type(data).__name__}")
    try:
        return converter(data)
    except (KeyError, TypeError, ValueError) as exc:
        raise FitnessAPIError(f"Malformed {what}: {exc}") from exc

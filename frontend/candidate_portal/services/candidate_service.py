import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, Mapping, Optional, Tuple, Type, Union

import httpx
from pydantic import BaseModel

from .. import config
from ..errors import CandidateServiceError, SubmissionError, UploadError
from ..schemas import CANDIDATE_FIELDS, CandidateRecord, CvFile

logger = logging.getLogger(__name__)

CandidateInput = Union[Mapping[str, Any], CandidateRecord]


@asynccontextmanager
async def _http_client(client: Optional[httpx.AsyncClient]) -> AsyncIterator[httpx.AsyncClient]:
    # An injected client belongs to the caller: never configure or close it here.
    if client is not None:
        yield client
        return
    async with httpx.AsyncClient(timeout=config.HTTP_TIMEOUT) as own:
        yield own


def _url(base_url: Optional[str], path: str) -> str:
    return f"{(base_url or config.API_BASE_URL).rstrip('/')}{path}"


def _backend_message(exc: httpx.HTTPError) -> Tuple[str, Optional[int]]:
    """Pull the human readable message out of a failed backend call."""
    if not isinstance(exc, httpx.HTTPStatusError):
        return str(exc), None

    response = exc.response
    try:
        body = response.json()
    except ValueError:
        return response.text, response.status_code

    if isinstance(body, str):
        return body, response.status_code
    if isinstance(body, dict):
        for key in ("detail", "message", "error"):
            if isinstance(body.get(key), str):
                return body[key], response.status_code
    return response.text, response.status_code


def _json_body(response: httpx.Response, error_cls: Type[CandidateServiceError]) -> Any:
    try:
        return response.json()
    except ValueError as e:
        raise error_cls(f"Invalid JSON returned by backend: {response.text[:200]!r}", response.status_code) from e


def purge_candidate_data(candidate_data: CandidateInput) -> Dict[str, Any]:
    """Project ``candidate_data`` onto the keys the candidates endpoint accepts.

    Unknown keys are dropped, missing keys stay missing and values are kept
    as-is. The caller's object is not modified.
    """
    if isinstance(candidate_data, BaseModel):
        candidate_data = candidate_data.model_dump(exclude_unset=True)
    return {key: candidate_data[key] for key in CANDIDATE_FIELDS if key in candidate_data}


async def upload_cv(
    file: CvFile,
    *,
    client: Optional[httpx.AsyncClient] = None,
    base_url: Optional[str] = None,
) -> Dict[str, Any]:
    """Upload a CV and return the storage descriptor (``filePath``, ``fileType``) sent back by the backend.

    File type and size limits are enforced by the backend; its rejection
    message is surfaced through :class:`UploadError`.
    """
    url = _url(base_url, config.UPLOAD_PATH)
    logger.debug(f"Uploading CV '{file.filename}' ({file.content_type}) to {url}")

    async with _http_client(client) as http:
        try:
            # httpx sets Content-Type to multipart/form-data with the generated boundary
            r = await http.post(url, files={config.UPLOAD_FIELD: file.as_multipart()})
            r.raise_for_status()
        except httpx.HTTPError as e:
            message, status_code = _backend_message(e)
            logger.warning(f"CV upload failed (status={status_code}): {message}")
            raise UploadError(message, status_code) from e

    descriptor = _json_body(r, UploadError)
    logger.info(f"CV '{file.filename}' uploaded")
    return descriptor


async def send_candidate_data(
    candidate_data: CandidateInput,
    *,
    client: Optional[httpx.AsyncClient] = None,
    base_url: Optional[str] = None,
) -> Dict[str, Any]:
    """Send the candidate to the backend and return the stored record it echoes back."""
    payload = purge_candidate_data(candidate_data)
    url = _url(base_url, config.CANDIDATES_PATH)
    logger.debug(f"Sending candidate data to {url} (fields: {', '.join(payload)})")

    async with _http_client(client) as http:
        try:
            r = await http.post(url, json=payload)
            r.raise_for_status()
        except httpx.HTTPError as e:
            message, status_code = _backend_message(e)
            logger.warning(f"Candidate submission failed (status={status_code}): {message}")
            raise SubmissionError(message, status_code) from e

    stored = _json_body(r, SubmissionError)
    stored_id = stored.get("id") if isinstance(stored, dict) else None
    logger.info(f"Candidate stored with id={stored_id}")
    return stored


async def submit_application(
    file: CvFile,
    candidate_data: CandidateInput,
    *,
    client: Optional[httpx.AsyncClient] = None,
    base_url: Optional[str] = None,
) -> Dict[str, Any]:
    """Upload the CV first, then submit the candidate pointing at the stored file."""
    async with _http_client(client) as http:
        descriptor = await upload_cv(file, client=http, base_url=base_url)
        payload = purge_candidate_data(candidate_data)
        payload["cv"] = descriptor
        return await send_candidate_data(payload, client=http, base_url=base_url)

import asyncio
import os
import sys
from pathlib import Path

os.environ.setdefault("CANDIDATE_API_URL", "http://testserver")
os.environ.setdefault("CANDIDATE_API_TIMEOUT", "5")

FRONTEND_DIR = Path(__file__).resolve().parents[1]
if str(FRONTEND_DIR) not in sys.path:
    sys.path.insert(0, str(FRONTEND_DIR))

import httpx
import pytest

from candidate_portal.schemas import CvFile
from fake_backend import create_app

BASE_URL = "http://testserver"


@pytest.fixture
def backend():
    return create_app()


@pytest.fixture
def call(backend):
    """Run a service coroutine against the stub backend and return its result."""
    def _call(operation, *args, **kwargs):
        async def _run():
            transport = httpx.ASGITransport(app=backend)
            async with httpx.AsyncClient(transport=transport, base_url=BASE_URL) as client:
                return await operation(*args, client=client, **kwargs)
        return asyncio.run(_run())
    return _call


@pytest.fixture
def call_with_handler():
    """Run a service coroutine against an ``httpx.MockTransport`` handler."""
    def _call(handler, operation, *args, **kwargs):
        async def _run():
            async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
                return await operation(*args, client=client, **kwargs)
        return asyncio.run(_run())
    return _call


@pytest.fixture
def pdf_file():
    return CvFile(filename="resume.pdf", content=b"%PDF-1.4\ndummy content\n%%EOF\n", content_type="application/pdf")


@pytest.fixture
def candidate():
    return {
        "firstName": "John",
        "lastName": "Doe",
        "email": "john.doe@example.com",
        "phone": "123456789",
        "address": "Calle Principal 123",
        "educations": [
            {
                "institution": "Universidad XYZ",
                "title": "Computer Science",
                "startDate": "2015-09-01",
                "endDate": "2019-06-30",
            }
        ],
        "workExperiences": [
            {
                "company": "Tech Corp",
                "position": "Software Developer",
                "description": "Developed web applications",
                "startDate": "2019-07-01",
                "endDate": "2022-12-31",
            }
        ],
        "cv": {"filePath": "uploads/1234567890-resume.pdf", "fileType": "application/pdf"},
    }

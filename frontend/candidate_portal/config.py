import os

API_BASE_URL = os.getenv("CANDIDATE_API_URL", "http://localhost:3010").rstrip("/")
HTTP_TIMEOUT = float(os.getenv("CANDIDATE_API_TIMEOUT", "30"))

UPLOAD_PATH = "/upload"
CANDIDATES_PATH = "/candidates"
UPLOAD_FIELD = "file"

from .errors import CandidateServiceError, SubmissionError, UploadError
from .schemas import CANDIDATE_FIELDS, CandidateRecord, CvDescriptor, CvFile, StoredCandidate
from .services import purge_candidate_data, send_candidate_data, submit_application, upload_cv

__all__ = [
    "CANDIDATE_FIELDS",
    "CandidateRecord",
    "CandidateServiceError",
    "CvDescriptor",
    "CvFile",
    "StoredCandidate",
    "SubmissionError",
    "UploadError",
    "purge_candidate_data",
    "send_candidate_data",
    "submit_application",
    "upload_cv",
]

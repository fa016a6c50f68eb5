from .candidate_service import purge_candidate_data, send_candidate_data, submit_application, upload_cv

__all__ = ["purge_candidate_data", "send_candidate_data", "submit_application", "upload_cv"]

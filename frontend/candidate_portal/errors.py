from typing import Optional


class CandidateServiceError(RuntimeError):
    """A backend call failed. ``str(exc)`` is the message shown to the user."""

    prefix = ""

    def __init__(self, backend_message: str, status_code: Optional[int] = None):
        self.backend_message = backend_message
        self.status_code = status_code
        super().__init__(f"{self.prefix}{backend_message}")


class UploadError(CandidateServiceError):
    prefix = "Error al subir el archivo: "


class SubmissionError(CandidateServiceError):
    prefix = "Error al enviar datos del candidato: "

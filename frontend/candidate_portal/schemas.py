import mimetypes
import pathlib
from typing import Any, List, Optional, Tuple, Union
from pydantic import BaseModel, ConfigDict

class CvDescriptor(BaseModel):
    filePath: str
    fileType: str

class EducationEntry(BaseModel):
    institution: Optional[str] = None
    title: Optional[str] = None
    startDate: Optional[str] = None
    endDate: Optional[str] = None

class WorkExperienceEntry(BaseModel):
    company: Optional[str] = None
    position: Optional[str] = None
    description: Optional[str] = None
    startDate: Optional[str] = None
    endDate: Optional[str] = None

class CandidateRecord(BaseModel):
    firstName: str | None = None
    lastName: str | None = None
    email: str | None = None
    phone: str | None = None
    address: str | None = None
    educations: List[EducationEntry] = []
    workExperiences: List[WorkExperienceEntry] = []
    cv: CvDescriptor | None = None

    model_config = ConfigDict(extra="ignore")

class StoredCandidate(CandidateRecord):
    id: str
    createdAt: str

    model_config = ConfigDict(extra="allow")


# Wire keys accepted by POST /candidates, in declaration order.
CANDIDATE_FIELDS: Tuple[str, ...] = tuple(CandidateRecord.model_fields)


class CvFile(BaseModel):
    """A CV document ready to be sent as the ``file`` part of a multipart upload.

    ``content`` is the raw bytes or a binary file object opened by the caller.
    """

    filename: str
    content: Any
    content_type: str = "application/octet-stream"

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_path(cls, path: Union[str, pathlib.Path]) -> "CvFile":
        path = pathlib.Path(path)
        guessed, _ = mimetypes.guess_type(path.name)
        return cls(
            filename=path.name,
            content=path.read_bytes(),
            content_type=guessed or "application/octet-stream",
        )

    def as_multipart(self) -> Tuple[str, Any, str]:
        return (self.filename, self.content, self.content_type)

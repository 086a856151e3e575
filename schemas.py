"""
Schemas for CredentialVault – Micro-Credential Aggregator

Each Pydantic model represents either a record held by the in-memory store or a
request/response body of the API.
"""
from datetime import date, datetime
from typing import Annotated, Optional, Literal, Union

from pydantic import BaseModel, Field, computed_field, field_validator

Role = Literal["learner", "employer"]
VerificationStatus = Literal["pending", "verified", "ai-scored", "needs-review"]
RequestStatus = Literal["pending", "approved", "rejected"]

PDF_FILE_TYPE = "PDF"


class User(BaseModel):
    id: str
    name: str = Field(..., description="Full name")
    email: str = Field(..., description="Email address")
    role: Role

    model_config = {"frozen": True}


class FileEvidence(BaseModel):
    kind: Literal["file"] = "file"
    url: str = Field(..., min_length=1, description="Location of the uploaded document")


class LinkEvidence(BaseModel):
    kind: Literal["link"] = "link"
    url: str = Field(..., min_length=1, description="Issuer verification link")


Evidence = Annotated[Union[FileEvidence, LinkEvidence], Field(discriminator="kind")]


class VerificationSteps(BaseModel):
    qr_check: bool = False
    blockchain_verification: bool = False
    api_verification: bool = False
    ai_scoring: bool = False


class CertificateMetadata(BaseModel):
    upload_date: datetime
    file_type: Optional[str] = None
    verification_steps: VerificationSteps = Field(default_factory=VerificationSteps)


class CertificateDraft(BaseModel):
    learner_id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    issuer: str = Field(..., min_length=1)
    date_issued: date
    nsqf_level: int = Field(..., ge=1, le=10, description="NSQF qualification level")
    expiry_date: Optional[date] = None
    evidence: Optional[Evidence] = None

    @field_validator("learner_id", "title", "issuer")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value


class Certificate(CertificateDraft):
    id: str
    verification_status: VerificationStatus = "pending"
    ai_score: Optional[int] = Field(None, ge=0, le=100)
    has_qr_code: bool = False
    blockchain_hash: Optional[str] = None
    metadata: CertificateMetadata

    @computed_field
    @property
    def file_url(self) -> Optional[str]:
        if isinstance(self.evidence, FileEvidence):
            return self.evidence.url
        return None

    @computed_field
    @property
    def link_url(self) -> Optional[str]:
        if isinstance(self.evidence, LinkEvidence):
            return self.evidence.url
        return None


class CertificateUpdate(BaseModel):
    """Editable fields. Anything else sent by a caller is ignored."""
    title: Optional[str] = Field(None, min_length=1)
    issuer: Optional[str] = Field(None, min_length=1)
    date_issued: Optional[date] = None
    expiry_date: Optional[date] = None
    nsqf_level: Optional[int] = Field(None, ge=1, le=10)

    @field_validator("title", "issuer")
    @classmethod
    def _not_blank(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value

    @field_validator("date_issued", "nsqf_level", "title", "issuer", mode="before")
    @classmethod
    def _not_null(cls, value):
        # only expiry_date may be cleared with an explicit null
        if value is None:
            raise ValueError("may not be null")
        return value

    def changes(self) -> dict:
        return {name: getattr(self, name) for name in self.model_fields_set}


class EvidenceSignals(BaseModel):
    qr_check: bool
    blockchain_verification: bool
    api_verification: bool
    ai_score: int = Field(..., ge=0, le=100)
    blockchain_hash: Optional[str] = None


class VerificationOutcome(BaseModel):
    verification_status: VerificationStatus
    ai_score: int = Field(..., ge=0, le=100)
    has_qr_code: bool
    blockchain_hash: Optional[str] = None
    verification_steps: VerificationSteps


class VerificationRequest(BaseModel):
    id: str
    certificate_id: str
    employer_id: str
    status: RequestStatus = "pending"
    request_date: datetime


class VerificationRequestIn(BaseModel):
    certificate_id: str
    employer_id: str


class ExpiryInfo(BaseModel):
    status: Literal["expired", "expiring"]
    days_until_expiry: Optional[int] = None


class CertificateStats(BaseModel):
    total: int = 0
    verified: int = 0
    ai_scored: int = 0
    needs_review: int = 0
    pending: int = 0
    expiring: int = 0
    expired: int = 0

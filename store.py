"""
In-memory certificate store and user directory.

Nothing here is persisted. Each store instance owns its records, so tests and
app instances never share state. Every public coroutine awaits a configurable
delay first, to behave like a remote call.
"""
import asyncio
from datetime import datetime, timezone
from typing import Callable, Dict, Iterable, List, Optional, Union

import structlog
from bson import ObjectId
from pydantic import ValidationError

from errors import CertificateNotFoundError, CertificateValidationError
from schemas import (
    PDF_FILE_TYPE,
    Certificate,
    CertificateDraft,
    CertificateMetadata,
    CertificateUpdate,
    FileEvidence,
    User,
    VerificationOutcome,
    VerificationRequest,
)
from verification import VerificationEngine

logger = structlog.get_logger()

MIN_SEARCH_LENGTH = 2


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_id() -> str:
    return str(ObjectId())


def _validate(model, data):
    if isinstance(data, model):
        return data
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise CertificateValidationError(f"Invalid {model.__name__}: {e.error_count()} error(s)", e.errors()) from e


class CertificateStore:
    def __init__(
        self,
        engine: Optional[VerificationEngine] = None,
        latency: float = 0.0,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.engine = engine or VerificationEngine()
        self.latency = latency
        self.clock = clock
        self._certificates: Dict[str, Certificate] = {}
        self._requests: List[VerificationRequest] = []

    async def _simulate_latency(self) -> None:
        if self.latency > 0:
            await asyncio.sleep(self.latency)

    def __len__(self) -> int:
        return len(self._certificates)

    def reset(self) -> None:
        self._certificates.clear()
        self._requests.clear()

    # -----------------
    # Certificates
    # -----------------

    async def create(self, draft: Union[CertificateDraft, dict]) -> Certificate:
        """
        Build a pending certificate from a draft, classify it, then insert it.

        Only classified records reach the store. If the evidence provider
        raises, nothing is inserted and the error propagates.
        """
        await self._simulate_latency()
        draft = _validate(CertificateDraft, draft)

        evidence_is_file = isinstance(draft.evidence, FileEvidence)
        certificate = Certificate(
            **draft.model_dump(),
            id=new_id(),
            verification_status="pending",
            metadata=CertificateMetadata(
                upload_date=self.clock(),
                file_type=PDF_FILE_TYPE if evidence_is_file else None,
            ),
        )

        outcome = self.engine.evaluate(certificate)
        certificate = self._apply_outcome(certificate, outcome)
        self._certificates[certificate.id] = certificate
        logger.info(
            "certificate_created",
            certificate_id=certificate.id,
            learner_id=certificate.learner_id,
            status=certificate.verification_status,
        )
        return certificate.model_copy(deep=True)

    @staticmethod
    def _apply_outcome(certificate: Certificate, outcome: VerificationOutcome) -> Certificate:
        metadata = certificate.metadata.model_copy(update={"verification_steps": outcome.verification_steps})
        return certificate.model_copy(update={
            "verification_status": outcome.verification_status,
            "ai_score": outcome.ai_score,
            "has_qr_code": outcome.has_qr_code,
            "blockchain_hash": outcome.blockchain_hash,
            "metadata": metadata,
        })

    async def get(self, certificate_id: str) -> Certificate:
        await self._simulate_latency()
        return self._find(certificate_id).model_copy(deep=True)

    def _find(self, certificate_id: str) -> Certificate:
        cert = self._certificates.get(certificate_id)
        if cert is None:
            raise CertificateNotFoundError(certificate_id)
        return cert

    async def list_by_learner(self, learner_id: str) -> List[Certificate]:
        await self._simulate_latency()
        return [c.model_copy(deep=True) for c in self._certificates.values() if c.learner_id == learner_id]

    async def list_all(self) -> List[Certificate]:
        await self._simulate_latency()
        return [c.model_copy(deep=True) for c in self._certificates.values()]

    async def update(self, certificate_id: str, fields: Union[CertificateUpdate, dict]) -> Certificate:
        """Edit descriptive fields only. Verification results are left as they are."""
        await self._simulate_latency()
        current = self._find(certificate_id)
        changes = _validate(CertificateUpdate, fields).changes()

        updated = current.model_copy(update=changes)
        self._certificates[certificate_id] = updated
        logger.info("certificate_updated", certificate_id=certificate_id, fields=sorted(changes))
        return updated.model_copy(deep=True)

    async def delete(self, certificate_id: str) -> None:
        await self._simulate_latency()
        removed = self._certificates.pop(certificate_id, None)
        if removed is None:
            logger.debug("certificate_delete_missing", certificate_id=certificate_id)
            return
        logger.info("certificate_deleted", certificate_id=certificate_id)

    # -----------------
    # Manual review
    # -----------------

    async def request_manual_verification(self, certificate_id: str, employer_id: str) -> VerificationRequest:
        await self._simulate_latency()
        self._find(certificate_id)
        request = VerificationRequest(
            id=new_id(),
            certificate_id=certificate_id,
            employer_id=employer_id,
            status="pending",
            request_date=self.clock(),
        )
        self._requests.append(request)
        logger.info("manual_verification_requested", certificate_id=certificate_id, employer_id=employer_id)
        return request.model_copy()

    async def list_verification_requests(self, certificate_id: Optional[str] = None) -> List[VerificationRequest]:
        await self._simulate_latency()
        return [
            r.model_copy() for r in self._requests
            if certificate_id is None or r.certificate_id == certificate_id
        ]


class UserDirectory:
    def __init__(self, users: Iterable[User] = (), latency: float = 0.0):
        self._users: Dict[str, User] = {u.id: u for u in users}
        self.latency = latency

    def get(self, user_id: str) -> Optional[User]:
        return self._users.get(user_id)

    async def search_learners(self, query: str) -> List[User]:
        """
        Learners whose name or email contains `query`, ignoring case.

        Queries shorter than MIN_SEARCH_LENGTH return nothing without searching.
        """
        query = (query or "").strip().lower()
        if len(query) < MIN_SEARCH_LENGTH:
            return []
        if self.latency > 0:
            await asyncio.sleep(self.latency)
        return [
            u for u in self._users.values()
            if u.role == "learner" and (query in u.name.lower() or query in u.email.lower())
        ]

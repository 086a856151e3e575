from contextlib import asynccontextmanager
from datetime import date
from typing import List, Optional

import structlog
from fastapi import FastAPI, HTTPException, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from config import Settings
from errors import CertificateNotFoundError, CertificateValidationError
from expiry import expiry_status
from filters import certificate_stats, filter_certificates
from i18n import translate
from logging_config import setup_logging
from schemas import (
    Certificate,
    CertificateDraft,
    CertificateStats,
    CertificateUpdate,
    EvidenceSignals,
    ExpiryInfo,
    FileEvidence,
    LinkEvidence,
    User,
    VerificationOutcome,
    VerificationRequest,
    VerificationRequestIn,
    VerificationStatus,
)
from store import CertificateStore, UserDirectory
from verification import VerificationEngine, classify

logger = structlog.get_logger()


# -----------------
# Seed data
# -----------------

SEED_USERS = [
    User(id="1", name="John Doe", email="john@example.com", role="learner"),
    User(id="2", name="Jane Smith", email="jane@example.com", role="learner"),
    User(id="3", name="Mike Johnson", email="mike@example.com", role="learner"),
    User(id="4", name="Tech Corp HR", email="hr@techcorp.com", role="employer"),
    User(id="5", name="Durvesh Patil", email="durveshpatil2005@gamol.com", role="learner"),
    User(id="6", name="Jay Kolate", email="jaykolate2005@gamol.com", role="learner"),
]

SEED_CERTIFICATES = [
    CertificateDraft(
        learner_id="1",
        title="Full Stack Development Certification",
        issuer="TechEd Institute",
        date_issued=date(2024, 8, 15),
        nsqf_level=6,
        evidence=FileEvidence(url="/certificates/cert1.pdf"),
    ),
    CertificateDraft(
        learner_id="1",
        title="React.js Professional Certificate",
        issuer="Meta",
        date_issued=date(2024, 7, 20),
        nsqf_level=5,
        evidence=LinkEvidence(url="https://coursera.org/verify/cert123"),
    ),
    CertificateDraft(
        learner_id="2",
        title="Data Science Fundamentals",
        issuer="DataCamp",
        date_issued=date(2024, 6, 10),
        nsqf_level=4,
        evidence=FileEvidence(url="/certificates/cert3.pdf"),
    ),
]


async def seed_data(store: CertificateStore):
    """Load the demo certificates if the store is empty"""
    if len(store) > 0:
        return
    for draft in SEED_CERTIFICATES:
        await store.create(draft)
    logger.info("seed_data_loaded", certificates=len(store))


# -----------------
# App
# -----------------

def create_app(settings: Optional[Settings] = None, engine: Optional[VerificationEngine] = None) -> FastAPI:
    settings = settings or Settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if settings.seed_data:
            await seed_data(app.state.store)
        yield

    app = FastAPI(title="CredentialVault – Micro-Credential Aggregator API", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.settings = settings
    app.state.store = CertificateStore(engine=engine, latency=settings.mock_latency_seconds)
    app.state.directory = UserDirectory(SEED_USERS, latency=settings.mock_latency_seconds)

    register_routes(app)
    return app


def certificate_store(request: Request) -> CertificateStore:
    return request.app.state.store


def user_directory(request: Request) -> UserDirectory:
    return request.app.state.directory


def register_routes(app: FastAPI):

    @app.get("/")
    def read_root():
        return {"message": "CredentialVault API Running"}

    # -----------------
    # Users
    # -----------------

    @app.get("/users/search", response_model=List[User])
    async def search_learners(request: Request, q: str = ""):
        return await user_directory(request).search_learners(q)

    @app.get("/users/{user_id}", response_model=User)
    def get_user(request: Request, user_id: str):
        user = user_directory(request).get(user_id)
        if not user:
            raise HTTPException(status_code=404, detail="User not found")
        return user

    @app.get("/learners/{learner_id}/stats", response_model=CertificateStats)
    async def learner_stats(request: Request, learner_id: str):
        certificates = await certificate_store(request).list_by_learner(learner_id)
        return certificate_stats(certificates)

    # -----------------
    # Certificates
    # -----------------

    @app.post("/certificates", response_model=Certificate, status_code=201)
    async def upload_certificate(request: Request, draft: CertificateDraft):
        try:
            return await certificate_store(request).create(draft)
        except CertificateValidationError as e:
            raise HTTPException(status_code=422, detail=str(e))

    @app.get("/certificates", response_model=List[Certificate])
    async def list_certificates(
        request: Request,
        learner_id: Optional[str] = None,
        search: Optional[str] = None,
        status: Optional[VerificationStatus] = None,
        nsqf_level: Optional[int] = None,
    ):
        store = certificate_store(request)
        if learner_id:
            certificates = await store.list_by_learner(learner_id)
        else:
            certificates = await store.list_all()
        return filter_certificates(certificates, search=search, status=status, nsqf_level=nsqf_level)

    @app.get("/certificates/{certificate_id}", response_model=Certificate)
    async def get_certificate(request: Request, certificate_id: str):
        try:
            return await certificate_store(request).get(certificate_id)
        except CertificateNotFoundError:
            raise HTTPException(status_code=404, detail="Certificate not found")

    @app.patch("/certificates/{certificate_id}", response_model=Certificate)
    async def update_certificate(request: Request, certificate_id: str, fields: CertificateUpdate):
        try:
            return await certificate_store(request).update(certificate_id, fields)
        except CertificateNotFoundError:
            raise HTTPException(status_code=404, detail="Certificate not found")
        except CertificateValidationError as e:
            raise HTTPException(status_code=422, detail=str(e))

    @app.delete("/certificates/{certificate_id}", status_code=204)
    async def delete_certificate(request: Request, certificate_id: str):
        await certificate_store(request).delete(certificate_id)
        return Response(status_code=204)

    @app.get("/certificates/{certificate_id}/expiry", response_model=Optional[ExpiryInfo])
    async def get_expiry(request: Request, certificate_id: str):
        try:
            cert = await certificate_store(request).get(certificate_id)
        except CertificateNotFoundError:
            raise HTTPException(status_code=404, detail="Certificate not found")
        return expiry_status(cert.expiry_date)

    # -----------------
    # Verification
    # -----------------

    @app.post("/verification/classify", response_model=VerificationOutcome)
    def classify_signals(signals: EvidenceSignals):
        return classify(signals)

    @app.post("/verification-requests", response_model=VerificationRequest, status_code=201)
    async def request_manual_verification(request: Request, payload: VerificationRequestIn):
        try:
            return await certificate_store(request).request_manual_verification(
                payload.certificate_id, payload.employer_id
            )
        except CertificateNotFoundError:
            raise HTTPException(status_code=404, detail="Certificate not found")

    @app.get("/verification-requests", response_model=List[VerificationRequest])
    async def list_verification_requests(request: Request, certificate_id: Optional[str] = None):
        return await certificate_store(request).list_verification_requests(certificate_id)

    # -----------------
    # Localization
    # -----------------

    @app.get("/translations/{key}")
    def get_translation(request: Request, key: str, language: Optional[str] = None):
        language = language or request.app.state.settings.default_language
        return {"key": key, "language": language, "text": translate(key, language)}


settings = Settings()
setup_logging(settings)
app = create_app(settings)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)

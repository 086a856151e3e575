from datetime import date

import pytest
from fastapi.testclient import TestClient

from config import Settings
from main import SEED_USERS, create_app
from schemas import CertificateDraft, FileEvidence, LinkEvidence
from store import CertificateStore, UserDirectory
from verification import FixedEvidenceProvider, VerificationEngine


def _make_draft(**overrides) -> CertificateDraft:
    defaults = {
        "learner_id": "1",
        "title": "X",
        "issuer": "Y",
        "date_issued": date(2024, 1, 1),
        "nsqf_level": 5,
        "evidence": FileEvidence(url="/certificates/x.pdf"),
    }
    defaults.update(overrides)
    return CertificateDraft(**defaults)


def verified_engine() -> VerificationEngine:
    return VerificationEngine(FixedEvidenceProvider(
        qr_check=True, blockchain_verification=True, api_verification=True, ai_score=95,
    ))


@pytest.fixture
def store() -> CertificateStore:
    return CertificateStore(engine=verified_engine())


@pytest.fixture
def directory() -> UserDirectory:
    return UserDirectory(SEED_USERS)


@pytest.fixture
def link_evidence() -> LinkEvidence:
    return LinkEvidence(url="https://coursera.org/verify/cert123")


@pytest.fixture
def client():
    app = create_app(Settings(seed_data=False), engine=verified_engine())
    with TestClient(app) as c:
        yield c


@pytest.fixture
def draft_factory():
    return _make_draft

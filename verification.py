"""
Verification engine.

Evidence acquisition (QR scan, blockchain lookup, issuer API, AI scoring) is
delegated to an EvidenceProvider. The decision rule that turns evidence into a
status lives in `derive_status` / `classify` and is a pure function.
"""
import random
from abc import ABC, abstractmethod
from typing import Optional

import structlog

from schemas import (
    Certificate,
    EvidenceSignals,
    VerificationOutcome,
    VerificationStatus,
    VerificationSteps,
)

logger = structlog.get_logger()

VERIFIED_MIN_SCORE = 90
AI_SCORED_MIN_SCORE = 75
AI_SCORE_RANGE = (60, 100)


def new_blockchain_hash(rng: Optional[random.Random] = None) -> str:
    rng = rng or random
    return f"0x{rng.getrandbits(64):016x}"


def derive_status(blockchain_verified: bool, api_verified: bool, ai_score: int) -> VerificationStatus:
    """First match wins. Never returns "pending"."""
    if blockchain_verified and api_verified and ai_score >= VERIFIED_MIN_SCORE:
        return "verified"
    if (api_verified or blockchain_verified) and ai_score >= AI_SCORED_MIN_SCORE:
        return "ai-scored"
    return "needs-review"


def classify(signals: EvidenceSignals) -> VerificationOutcome:
    # a blockchain record is only looked up through the QR marker
    blockchain = signals.blockchain_verification and signals.qr_check

    blockchain_hash = None
    if blockchain:
        blockchain_hash = signals.blockchain_hash or new_blockchain_hash()

    return VerificationOutcome(
        verification_status=derive_status(blockchain, signals.api_verification, signals.ai_score),
        ai_score=signals.ai_score,
        has_qr_code=signals.qr_check,
        blockchain_hash=blockchain_hash,
        verification_steps=VerificationSteps(
            qr_check=signals.qr_check,
            blockchain_verification=blockchain,
            api_verification=signals.api_verification,
            ai_scoring=True,
        ),
    )


class EvidenceProvider(ABC):
    @abstractmethod
    def collect(self, certificate: Certificate) -> EvidenceSignals:
        ...


class RandomEvidenceProvider(EvidenceProvider):
    """Synthetic evidence, standing in for the real checks."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def collect(self, certificate: Certificate) -> EvidenceSignals:
        has_qr = self.rng.random() > 0.5
        blockchain = has_qr and self.rng.random() > 0.3
        api = self.rng.random() > 0.4
        score = self.rng.randint(*AI_SCORE_RANGE)
        return EvidenceSignals(
            qr_check=has_qr,
            blockchain_verification=blockchain,
            api_verification=api,
            ai_score=score,
            blockchain_hash=new_blockchain_hash(self.rng) if blockchain else None,
        )


class FixedEvidenceProvider(EvidenceProvider):
    """Returns the same signals for every certificate."""

    def __init__(
        self,
        qr_check: bool = False,
        blockchain_verification: bool = False,
        api_verification: bool = False,
        ai_score: int = 60,
        blockchain_hash: Optional[str] = None,
    ):
        self.signals = EvidenceSignals(
            qr_check=qr_check,
            blockchain_verification=blockchain_verification,
            api_verification=api_verification,
            ai_score=ai_score,
            blockchain_hash=blockchain_hash,
        )
        self.calls = 0

    def collect(self, certificate: Certificate) -> EvidenceSignals:
        self.calls += 1
        return self.signals


class VerificationEngine:
    def __init__(self, provider: Optional[EvidenceProvider] = None):
        self.provider = provider or RandomEvidenceProvider()

    def evaluate(self, certificate: Certificate) -> VerificationOutcome:
        signals = self.provider.collect(certificate)
        outcome = classify(signals)
        logger.info(
            "certificate_classified",
            certificate_id=certificate.id,
            status=outcome.verification_status,
            ai_score=outcome.ai_score,
            qr_check=outcome.verification_steps.qr_check,
            blockchain=outcome.verification_steps.blockchain_verification,
            api=outcome.verification_steps.api_verification,
        )
        return outcome

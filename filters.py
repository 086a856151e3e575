from datetime import date
from typing import Iterable, List, Optional

from expiry import expiry_status
from schemas import Certificate, CertificateStats


def filter_certificates(
    certificates: Iterable[Certificate],
    search: Optional[str] = None,
    status: Optional[str] = None,
    nsqf_level: Optional[int] = None,
) -> List[Certificate]:
    """Search matches title or issuer, case-insensitively."""
    filtered = list(certificates)
    if search:
        term = search.lower()
        filtered = [c for c in filtered if term in c.title.lower() or term in c.issuer.lower()]
    if status:
        filtered = [c for c in filtered if c.verification_status == status]
    if nsqf_level is not None:
        filtered = [c for c in filtered if c.nsqf_level == nsqf_level]
    return filtered


def certificate_stats(certificates: Iterable[Certificate], today: Optional[date] = None) -> CertificateStats:
    stats = CertificateStats()
    for cert in certificates:
        stats.total += 1
        if cert.verification_status == "verified":
            stats.verified += 1
        elif cert.verification_status == "ai-scored":
            stats.ai_scored += 1
        elif cert.verification_status == "needs-review":
            stats.needs_review += 1
        else:
            stats.pending += 1

        expiry = expiry_status(cert.expiry_date, today)
        if expiry is not None:
            if expiry.status == "expired":
                stats.expired += 1
            else:
                stats.expiring += 1
    return stats

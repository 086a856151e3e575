"""Tests for the HTTP layer."""

from datetime import date, timedelta

from fastapi.testclient import TestClient

from config import Settings
from i18n import TRANSLATIONS, translate
from main import SEED_CERTIFICATES, create_app

DRAFT = {
    "learner_id": "1",
    "title": "X",
    "issuer": "Y",
    "date_issued": "2024-01-01",
    "nsqf_level": 5,
    "evidence": {"kind": "file", "url": "/certificates/x.pdf"},
}


def _upload(client, **overrides):
    body = {**DRAFT, **overrides}
    res = client.post("/certificates", json=body)
    assert res.status_code == 201, res.text
    return res.json()


class TestCertificates:
    def test_upload(self, client):
        cert = _upload(client)
        assert cert["verification_status"] == "verified"
        assert cert["ai_score"] == 95
        assert cert["metadata"]["file_type"] == "PDF"
        assert cert["metadata"]["verification_steps"]["ai_scoring"] is True
        assert cert["blockchain_hash"].startswith("0x")

    def test_evidence_urls_are_serialized(self, client):
        file_cert = _upload(client)
        assert file_cert["file_url"] == "/certificates/x.pdf"
        assert file_cert["link_url"] is None

        link_cert = _upload(client, evidence={"kind": "link", "url": "https://coursera.org/verify/cert123"})
        assert link_cert["file_url"] is None
        assert link_cert["link_url"] == "https://coursera.org/verify/cert123"
        assert client.get(f"/certificates/{link_cert['id']}").json()["link_url"] == link_cert["link_url"]

    def test_upload_missing_title(self, client):
        body = dict(DRAFT)
        del body["title"]
        assert client.post("/certificates", json=body).status_code == 422

    def test_upload_unknown_evidence_kind(self, client):
        body = {**DRAFT, "evidence": {"kind": "fax", "url": "x"}}
        assert client.post("/certificates", json=body).status_code == 422

    def test_list_and_filter(self, client):
        _upload(client, title="Python Basics")
        _upload(client, title="Go Basics", nsqf_level=3)
        _upload(client, learner_id="2", title="Python Advanced")

        assert len(client.get("/certificates").json()) == 3
        mine = client.get("/certificates", params={"learner_id": "1"}).json()
        assert [c["title"] for c in mine] == ["Python Basics", "Go Basics"]
        found = client.get("/certificates", params={"learner_id": "1", "search": "python"}).json()
        assert [c["title"] for c in found] == ["Python Basics"]
        by_level = client.get("/certificates", params={"nsqf_level": 3}).json()
        assert [c["title"] for c in by_level] == ["Go Basics"]
        assert client.get("/certificates", params={"status": "needs-review"}).json() == []

    def test_list_rejects_unknown_status(self, client):
        assert client.get("/certificates", params={"status": "bogus"}).status_code == 422

    def test_get_and_404(self, client):
        cert = _upload(client)
        assert client.get(f"/certificates/{cert['id']}").json()["id"] == cert["id"]
        assert client.get("/certificates/missing").status_code == 404

    def test_patch(self, client):
        cert = _upload(client)
        res = client.patch(f"/certificates/{cert['id']}", json={"title": "Renamed", "verification_status": "pending"})
        assert res.status_code == 200
        body = res.json()
        assert body["title"] == "Renamed"
        assert body["verification_status"] == "verified"

    def test_patch_invalid_and_missing(self, client):
        cert = _upload(client)
        assert client.patch(f"/certificates/{cert['id']}", json={"nsqf_level": 12}).status_code == 422
        assert client.patch("/certificates/missing", json={"title": "x"}).status_code == 404

    def test_delete_is_idempotent(self, client):
        cert = _upload(client)
        assert client.delete(f"/certificates/{cert['id']}").status_code == 204
        assert client.delete(f"/certificates/{cert['id']}").status_code == 204
        assert client.get(f"/certificates/{cert['id']}").status_code == 404

    def test_expiry(self, client):
        soon = (date.today() + timedelta(days=5)).isoformat()
        cert = _upload(client, expiry_date=soon)
        info = client.get(f"/certificates/{cert['id']}/expiry").json()
        assert info == {"status": "expiring", "days_until_expiry": 5}

        plain = _upload(client)
        assert client.get(f"/certificates/{plain['id']}/expiry").json() is None

    def test_learner_stats(self, client):
        _upload(client)
        _upload(client, expiry_date=(date.today() - timedelta(days=1)).isoformat())
        stats = client.get("/learners/1/stats").json()
        assert stats["total"] == 2
        assert stats["verified"] == 2
        assert stats["expired"] == 1


class TestUsers:
    def test_search_requires_two_characters(self, client):
        assert client.get("/users/search", params={"q": "j"}).json() == []

    def test_search_by_email(self, client):
        res = client.get("/users/search", params={"q": "Jane@"}).json()
        assert [u["id"] for u in res] == ["2"]

    def test_get_user(self, client):
        assert client.get("/users/4").json()["role"] == "employer"
        assert client.get("/users/99").status_code == 404


class TestVerification:
    def test_classify_endpoint(self, client):
        res = client.post("/verification/classify", json={
            "qr_check": False,
            "blockchain_verification": True,
            "api_verification": True,
            "ai_score": 92,
        })
        body = res.json()
        assert body["verification_status"] == "ai-scored"
        assert body["verification_steps"]["blockchain_verification"] is False
        assert body["blockchain_hash"] is None

    def test_manual_verification_request(self, client):
        cert = _upload(client)
        res = client.post("/verification-requests", json={"certificate_id": cert["id"], "employer_id": "4"})
        assert res.status_code == 201
        assert res.json()["status"] == "pending"

        listed = client.get("/verification-requests", params={"certificate_id": cert["id"]}).json()
        assert [r["id"] for r in listed] == [res.json()["id"]]

    def test_manual_verification_unknown_certificate(self, client):
        res = client.post("/verification-requests", json={"certificate_id": "missing", "employer_id": "4"})
        assert res.status_code == 404


class TestTranslations:
    def test_hindi(self, client):
        res = client.get("/translations/certificates.verified", params={"language": "hi"}).json()
        assert res["text"] == "सत्यापित"

    def test_default_language_and_fallback(self, client):
        assert client.get("/translations/certificates.pending").json()["text"] == "Pending"
        assert client.get("/translations/no.such.key").json()["text"] == "no.such.key"

    def test_unknown_language_falls_back_to_english(self):
        assert translate("certificates.expired", "fr") == "Expired"

    def test_dashboard_keys_are_translated(self):
        assert translate("common.loading") == "Loading..."
        assert translate("filter.level", "hi") == "स्तर"
        assert translate("employer.enterSearch").startswith("Enter at least 2 characters")

    def test_languages_share_keys(self):
        assert set(TRANSLATIONS["en"]) == set(TRANSLATIONS["hi"])
        assert len(TRANSLATIONS["en"]) == 148


def test_seed_data_loaded_on_startup():
    with TestClient(create_app(Settings(seed_data=True))) as client:
        certs = client.get("/certificates").json()
        assert len(certs) == len(SEED_CERTIFICATES)
        assert all(c["verification_status"] != "pending" for c in certs)
        assert client.get("/").json() == {"message": "CredentialVault API Running"}

from __future__ import annotations

import uuid

from fastapi.testclient import TestClient
from sqlalchemy import select
from sqlalchemy.orm import Session

from app.modules.admin_snapshots.models import AdminSnapshot
from app.modules.companies.models import PortfolioCompany
from app.modules.fundraising.models import FundraisingRound
from app.shared.enums import IndustryType

SNAPSHOT_TERMS = {
    "investmentUSD": 250000,
    "investmentYear": 2022,
    "valuationAtInvestmentUSD": 5000000,
    "equityPercent": 5,
}


def _patch(client: TestClient, company_id, payload: dict, headers: dict):
    return client.patch(f"/api/companies/{company_id}", json=payload, headers=headers)


def test_patch_updates_company_and_founder_together(client: TestClient, acme: dict, acme_headers: dict):
    r = _patch(
        client,
        acme["company_id"],
        {"aka": "ACME", "teamSize": 30, "founder": {"phone": "+1 555 0100"}},
        acme_headers,
    )
    assert r.status_code == 200, r.text
    view = r.json()
    assert view["aka"] == "ACME"
    assert view["teamSize"] == 30
    assert view["founder"]["id"] == str(acme["founder_id"])
    assert view["founder"]["phone"] == "+1 555 0100"
    assert view["founder"]["firstName"] == "Ada"


def test_patch_appends_rounds_without_id(client: TestClient, acme: dict, acme_headers: dict):
    payload = {"fundraising": [{"roundYear": 2023, "amountUSD": 1000000, "roundType": "SAFE"}]}

    first = _patch(client, acme["company_id"], payload, acme_headers).json()
    assert len(first["fundraising"]) == 1

    # Resending the same array appends again; rows are never matched by content.
    second = _patch(client, acme["company_id"], payload, acme_headers).json()
    assert len(second["fundraising"]) == 2
    assert {r["amountUSD"] for r in second["fundraising"]} == {1000000}


def test_patch_updates_round_in_place_by_id(client: TestClient, acme: dict, acme_headers: dict):
    created = _patch(
        client,
        acme["company_id"],
        {"fundraising": [{"roundYear": 2023, "amountUSD": 1000000, "roundType": "SAFE"}]},
        acme_headers,
    ).json()
    round_id = created["fundraising"][0]["id"]

    r = _patch(
        client,
        acme["company_id"],
        {"fundraising": [{"id": round_id, "amountUSD": 1500000, "coInvestors": "Seed Fund"}]},
        acme_headers,
    )
    assert r.status_code == 200, r.text
    rounds = r.json()["fundraising"]
    assert len(rounds) == 1
    assert rounds[0]["id"] == round_id
    assert rounds[0]["amountUSD"] == 1500000
    assert rounds[0]["coInvestors"] == "Seed Fund"
    assert rounds[0]["roundType"] == "SAFE"


def test_patch_revenue_append_and_update(client: TestClient, acme: dict, acme_headers: dict):
    created = _patch(
        client,
        acme["company_id"],
        {"revenue": [{"year": 2023, "arr": 120000}, {"year": 2024, "revenueQ1": 40000}]},
        acme_headers,
    ).json()
    assert [r["year"] for r in created["revenue"]] == [2023, 2024]

    target = created["revenue"][0]["id"]
    updated = _patch(
        client, acme["company_id"], {"revenue": [{"id": target, "actualRevenue": 118000}]}, acme_headers
    ).json()
    by_id = {r["id"]: r for r in updated["revenue"]}
    assert len(by_id) == 2
    assert by_id[target]["actualRevenue"] == 118000
    assert by_id[target]["arr"] == 120000


def test_patch_new_round_requires_terms(client: TestClient, acme: dict, acme_headers: dict):
    r = _patch(client, acme["company_id"], {"fundraising": [{"roundYear": 2023}]}, acme_headers)
    assert r.status_code == 400
    assert r.json()["message"] == "Invalid input"

    r = _patch(client, acme["company_id"], {"revenue": [{"arr": 10}]}, acme_headers)
    assert r.status_code == 400


def test_admin_snapshot_created_then_updated(client: TestClient, acme: dict, admin_headers: dict, db_session: Session):
    created = _patch(client, acme["company_id"], {"adminSnapshot": SNAPSHOT_TERMS}, admin_headers)
    assert created.status_code == 200, created.text
    snapshot = created.json()["adminSnapshot"]
    assert snapshot["status"] == "ACTIVE"
    assert snapshot["updateFrequency"] == "MONTHLY"
    assert snapshot["companyId"] == str(acme["company_id"])

    updated = _patch(
        client,
        acme["company_id"],
        {"adminSnapshot": {"status": "ON_HOLD", "observationScore": 7}},
        admin_headers,
    ).json()["adminSnapshot"]
    assert updated["id"] == snapshot["id"]
    assert updated["status"] == "ON_HOLD"
    assert updated["observationScore"] == 7
    assert updated["investmentUSD"] == 250000

    rows = db_session.execute(select(AdminSnapshot).where(AdminSnapshot.company_id == acme["company_id"])).all()
    assert len(rows) == 1


def test_admin_snapshot_create_requires_terms(client: TestClient, acme: dict, admin_headers: dict):
    r = _patch(client, acme["company_id"], {"adminSnapshot": {"investmentUSD": 100}}, admin_headers)
    assert r.status_code == 400
    fields = {e["field"] for e in r.json()["errors"]}
    assert fields == {
        "adminSnapshot.investmentYear",
        "adminSnapshot.valuationAtInvestmentUSD",
        "adminSnapshot.equityPercent",
    }


def test_portfolio_user_cannot_send_admin_snapshot(client: TestClient, acme: dict, acme_headers: dict):
    r = _patch(client, acme["company_id"], {"aka": "Sneaky", "adminSnapshot": SNAPSHOT_TERMS}, acme_headers)
    assert r.status_code == 403
    assert r.json()["message"] == "Insufficient permissions"

    view = client.get(f"/api/companies/{acme['company_id']}", headers=acme_headers).json()
    assert view["aka"] is None


def test_failed_part_rolls_back_whole_patch(
    client: TestClient, make_company, acme: dict, admin_headers: dict, db_session: Session
):
    other, _ = make_company("Globex Corp")
    foreign_round = client.post(
        f"/api/companies/{other.id}/fundraising",
        json={"roundYear": 2022, "amountUSD": 10, "roundType": "EQUITY"},
        headers=admin_headers,
    ).json()["id"]

    r = _patch(
        client,
        acme["company_id"],
        {
            "legalName": "Renamed Acme",
            "fundraising": [
                {"roundYear": 2024, "amountUSD": 99, "roundType": "SAFE"},
                {"id": foreign_round, "amountUSD": 1},
            ],
        },
        admin_headers,
    )
    assert r.status_code == 404
    assert r.json()["message"] == "Fundraising round not found"

    view = client.get(f"/api/companies/{acme['company_id']}", headers=admin_headers).json()
    assert view["legalName"] == "Acme Inc"
    assert view["fundraising"] == []

    untouched = db_session.get(FundraisingRound, uuid.UUID(foreign_round))
    assert untouched.amount_usd == 10


def test_patch_creates_founder_when_missing(client: TestClient, admin_headers: dict, db_session: Session):
    bare = PortfolioCompany(
        legal_name="Bare Co",
        country_reg="UK",
        county_ops="UK",
        industry_type=IndustryType.OTHER,
        vintage_year=2020,
    )
    db_session.add(bare)
    db_session.commit()

    r = _patch(client, bare.id, {"founder": {"phone": "123"}}, admin_headers)
    assert r.status_code == 400

    r = _patch(client, bare.id, {"founder": {"firstName": "New", "lastName": "Founder"}}, admin_headers)
    assert r.status_code == 200, r.text
    assert r.json()["founder"]["companyId"] == str(bare.id)


def test_empty_patch_is_a_no_op(client: TestClient, acme: dict, acme_headers: dict):
    r = _patch(client, acme["company_id"], {}, acme_headers)
    assert r.status_code == 200
    assert r.json()["legalName"] == "Acme Inc"

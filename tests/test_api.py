# tests/test_api.py
"""
End-to-end checks of the HTTP surface: status codes, camelCase bodies, auth.
"""
import pytest
from fastapi.testclient import TestClient

from models import Company, Owner
from repositories import CompanyRepository, PropertyRepository, UserRepository
from services.company_service import CompanyService

from .conftest import make_company, make_owner, make_property


OWNER_BODY = {
    "firstName": "Grace",
    "lastName": "Hopper",
    "email": "grace@example.com",
    "phone": "555-0100",
}


def _property_body(owner_id, **overrides):
    body = {
        "ownerId": owner_id,
        "propertyTypeId": 1,
        "propertyLength": 100,
        "propertyCost": 5000,
        "dateOfBuilding": "2001-02-03T04:05:06+02:00",
        "country": "Canada",
        "city": "Toronto",
    }
    body.update(overrides)
    return body


class TestAuthRequired:

    @pytest.mark.parametrize("path", ["/api/owners", "/api/companies", "/api/properties", "/api/propertytypes"])
    def test_missing_token(self, client, path):
        response = client.get(path)

        assert response.status_code == 401
        assert response.json()["detail"] == "Missing token"

    def test_invalid_token(self, client):
        response = client.get("/api/owners", headers={"Authorization": "Bearer not.a.token"})

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid token"


class TestOwnersApi:

    def test_create_and_get(self, client, auth_headers):
        response = client.post(
            "/api/owners", json={**OWNER_BODY, "isCompanyContact": True}, headers=auth_headers
        )

        assert response.status_code == 201
        body = response.json()
        assert body["firstName"] == "Grace"
        assert body["isCompanyContact"] is False
        assert body["address"] == ""

        fetched = client.get(f"/api/owners/{body['id']}", headers=auth_headers)
        assert fetched.status_code == 200
        assert fetched.json() == body

    def test_create_validation_error(self, client, auth_headers):
        response = client.post("/api/owners", json={**OWNER_BODY, "email": "bad"}, headers=auth_headers)

        assert response.status_code == 422

    def test_get_missing(self, client, auth_headers):
        response = client.get("/api/owners/999", headers=auth_headers)

        assert response.status_code == 404
        assert response.json()["detail"] == "Owner with ID 999 not found"

    def test_patch_merges(self, client, db, auth_headers):
        owner = make_owner(db)

        response = client.patch(
            f"/api/owners/{owner.id}",
            json={"firstName": "Augusta", "lastName": "", "address": ""},
            headers=auth_headers,
        )

        assert response.status_code == 200
        body = response.json()
        assert body["firstName"] == "Augusta"
        assert body["lastName"] == "Lovelace"
        assert body["address"] == ""

    def test_patch_missing(self, client, auth_headers):
        response = client.patch("/api/owners/999", json={"firstName": "X"}, headers=auth_headers)

        assert response.status_code == 404

    def test_delete_lifecycle(self, client, db, auth_headers):
        owner = make_owner(db)
        prop = make_property(db, owner)

        blocked = client.delete(f"/api/owners/{owner.id}", headers=auth_headers)
        assert blocked.status_code == 409
        assert blocked.json()["detail"] == "Cannot delete owner with associated companies or properties"

        assert client.delete(f"/api/properties/{prop.id}", headers=auth_headers).status_code == 204
        assert client.delete(f"/api/owners/{owner.id}", headers=auth_headers).status_code == 204
        assert client.get(f"/api/owners/{owner.id}", headers=auth_headers).status_code == 404
        assert client.delete(f"/api/owners/{owner.id}", headers=auth_headers).status_code == 404

    def test_list(self, client, db, auth_headers):
        make_owner(db, first_name="One")
        make_owner(db, first_name="Two")

        response = client.get("/api/owners", headers=auth_headers)

        assert response.status_code == 200
        assert [o["firstName"] for o in response.json()] == ["One", "Two"]

    def test_foreign_key_blocks_delete_when_dependent_appears(self, client, db, auth_headers, monkeypatch):
        owner = make_owner(db)
        make_property(db, owner)
        # the dependent row arrives after the dependency check has run
        monkeypatch.setattr(CompanyRepository, "get_by_owner_id", lambda self, owner_id: [])
        monkeypatch.setattr(PropertyRepository, "get_by_owner_id", lambda self, owner_id: [])

        response = client.delete(f"/api/owners/{owner.id}", headers=auth_headers)

        assert response.status_code == 409
        assert response.json()["detail"] == "The request conflicts with existing data"
        assert client.get(f"/api/owners/{owner.id}", headers=auth_headers).status_code == 200


class TestCompaniesApi:

    def test_create_flags_owner(self, client, db, auth_headers):
        owner = make_owner(db)

        response = client.post(
            "/api/companies",
            json={"ownerId": owner.id, "companyName": "Acme", "companySite": "https://acme.com"},
            headers=auth_headers,
        )

        assert response.status_code == 201
        body = response.json()
        assert body["ownerId"] == owner.id
        assert body["owner"]["isCompanyContact"] is True

        fetched = client.get(f"/api/owners/{owner.id}", headers=auth_headers).json()
        assert fetched["isCompanyContact"] is True

    def test_unknown_owner_is_bad_request(self, client, auth_headers):
        response = client.post(
            "/api/companies", json={"ownerId": 77, "companyName": "Ghost"}, headers=auth_headers
        )

        assert response.status_code == 400
        body = response.json()
        assert body["detail"] == "Owner with ID 77 not found"
        assert body["field"] == "ownerId"
        assert client.get("/api/companies", headers=auth_headers).json() == []

    def test_patch_and_delete(self, client, db, auth_headers):
        company = make_company(db, make_owner(db), company_site="https://old.example.com")

        response = client.patch(
            f"/api/companies/{company.id}",
            json={"companyName": "", "companySite": ""},
            headers=auth_headers,
        )
        assert response.status_code == 200
        assert response.json()["companyName"] == "Analytical Engines Ltd"
        assert response.json()["companySite"] == ""

        assert client.delete(f"/api/companies/{company.id}", headers=auth_headers).status_code == 204
        assert client.get(f"/api/companies/{company.id}", headers=auth_headers).status_code == 404
        assert client.delete(f"/api/companies/{company.id}", headers=auth_headers).status_code == 404

    def test_owner_with_company_cannot_be_deleted(self, client, db, auth_headers):
        owner = make_owner(db)
        make_company(db, owner)

        assert client.delete(f"/api/owners/{owner.id}", headers=auth_headers).status_code == 409

    def test_failed_flag_write_rolls_back_company(self, client, db, auth_headers, monkeypatch):
        owner = make_owner(db)

        def _fail(db, owner_id):
            raise RuntimeError("owner flag write failed")

        monkeypatch.setattr(CompanyService, "mark_owner_as_company_contact", staticmethod(_fail))
        unsafe_client = TestClient(client.app, raise_server_exceptions=False)

        response = unsafe_client.post(
            "/api/companies", json={"ownerId": owner.id, "companyName": "Acme"}, headers=auth_headers
        )

        assert response.status_code == 500
        db.expire_all()
        assert db.query(Company).count() == 0
        assert db.get(Owner, owner.id).is_company_contact is False


class TestPropertiesApi:

    def test_create_normalizes_date(self, client, db, auth_headers):
        owner = make_owner(db)

        response = client.post("/api/properties", json=_property_body(owner.id), headers=auth_headers)

        assert response.status_code == 201
        body = response.json()
        assert body["dateOfBuilding"].startswith("2001-02-03T02:05:06")
        assert body["propertyType"] == {"id": 1, "type": "residential"}
        assert body["owner"]["id"] == owner.id
        assert body["street"] == ""

    @pytest.mark.parametrize("field,value", [("ownerId", 500), ("propertyTypeId", 500)])
    def test_unknown_reference_is_bad_request(self, client, db, auth_headers, field, value):
        owner = make_owner(db)

        response = client.post(
            "/api/properties", json=_property_body(owner.id, **{field: value}), headers=auth_headers
        )

        assert response.status_code == 400
        assert response.json()["field"] == field
        assert client.get("/api/properties", headers=auth_headers).json() == []

    def test_zero_cost_rejected_at_the_edge(self, client, db, auth_headers):
        owner = make_owner(db)

        response = client.post(
            "/api/properties", json=_property_body(owner.id, propertyCost=0), headers=auth_headers
        )

        assert response.status_code == 422

    def test_patch_owner(self, client, db, auth_headers):
        first = make_owner(db, first_name="First")
        second = make_owner(db, first_name="Second")
        prop = make_property(db, first)

        response = client.patch(
            f"/api/properties/{prop.id}", json={"ownerId": second.id}, headers=auth_headers
        )

        assert response.status_code == 200
        assert response.json()["owner"]["firstName"] == "Second"

    def test_patch_bad_type(self, client, db, auth_headers):
        prop = make_property(db, make_owner(db))

        response = client.patch(
            f"/api/properties/{prop.id}",
            json={"city": "Paris", "propertyTypeId": 42},
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Property Type with ID 42 not found"
        fetched = client.get(f"/api/properties/{prop.id}", headers=auth_headers).json()
        assert fetched["city"] == "Toronto"

    def test_patch_unknown_owner(self, client, db, auth_headers):
        owner = make_owner(db)
        prop = make_property(db, owner)

        response = client.patch(
            f"/api/properties/{prop.id}",
            json={"city": "Paris", "ownerId": 999},
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert response.json()["field"] == "ownerId"
        assert response.json()["detail"] == "Owner with ID 999 not found"
        fetched = client.get(f"/api/properties/{prop.id}", headers=auth_headers).json()
        assert fetched["city"] == "Toronto"
        assert fetched["ownerId"] == owner.id

    def test_missing(self, client, auth_headers):
        assert client.get("/api/properties/1", headers=auth_headers).status_code == 404
        assert client.patch("/api/properties/1", json={"city": "X"}, headers=auth_headers).status_code == 404
        assert client.delete("/api/properties/1", headers=auth_headers).status_code == 404


def test_property_types(client, auth_headers):
    response = client.get("/api/propertytypes", headers=auth_headers)

    assert response.status_code == 200
    assert [t["type"] for t in response.json()] == [
        "residential",
        "commercial",
        "industrial",
        "raw land",
        "special purpose",
    ]


class TestAuthApi:

    def test_register_login_me_logout(self, client):
        registered = client.post(
            "/api/auth/register", json={"email": "New.User@Example.com", "password": "secret1"}
        )
        assert registered.status_code == 200
        assert registered.json()["email"] == "new.user@example.com"
        assert registered.json()["roles"] == ["User"]

        login = client.post(
            "/api/auth/login", json={"email": "new.user@example.com", "password": "secret1"}
        )
        assert login.status_code == 200
        headers = {"Authorization": f"Bearer {login.json()['token']}"}

        me = client.get("/api/auth/me", headers=headers)
        assert me.status_code == 200
        assert me.json()["email"] == "new.user@example.com"
        assert me.json()["lastLoginAt"] is not None

        logout = client.post("/api/auth/logout", headers=headers)
        assert logout.json() == {"message": "Logged out successfully"}

    def test_duplicate_register(self, client):
        body = {"email": "dup@example.com", "password": "secret1"}
        assert client.post("/api/auth/register", json=body).status_code == 200

        response = client.post("/api/auth/register", json=body)

        assert response.status_code == 400
        assert response.json()["detail"] == "Email already registered"

    def test_duplicate_register_past_lookup(self, client, db, monkeypatch):
        body = {"email": "race@example.com", "password": "secret1"}
        assert client.post("/api/auth/register", json=body).status_code == 200
        # the second request sees no user, as if both ran concurrently
        monkeypatch.setattr(UserRepository, "get_by_email", lambda self, email: None)

        response = client.post("/api/auth/register", json=body)

        assert response.status_code == 400
        assert response.json()["detail"] == "Email already registered"
        monkeypatch.undo()
        assert UserRepository(db).get_by_email("race@example.com") is not None

    def test_wrong_password(self, client):
        client.post("/api/auth/register", json={"email": "u@example.com", "password": "secret1"})

        response = client.post("/api/auth/login", json={"email": "u@example.com", "password": "wrong"})

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid email or password"


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "database": True}

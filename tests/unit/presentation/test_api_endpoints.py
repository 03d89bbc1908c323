"""Tests for the HTTP API."""

import pytest

from fintrack.domain.categorization.value_objects import Category
from fintrack.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
    TransactionRepositorySQLAlchemy,
)
from fintrack.presentation.api.dependencies import DBSession, get_repository_factory

IMPORT_PAYLOAD = {"source_id": "chase", "username": "jane", "password": "hunter2"}


def _create(test_client, prefix, **overrides):
    payload = {
        "amount": "12.50",
        "description": "Lunch at Subway",
        "date": "2024-12-05",
        "category": "Food & Dining",
        "type": "expense",
    }
    payload.update(overrides)
    return test_client.post(f"{prefix}/transactions", json=payload)


class FailingThirdInsertRepository(TransactionRepositorySQLAlchemy):
    def __init__(self, session):
        super().__init__(session)
        self.inserts = 0

    def _apply_to_model(self, model, transaction):
        super()._apply_to_model(model, transaction)
        self.inserts += 1
        if self.inserts == 3:
            model.description = None


class FailingThirdInsertFactory(SQLAlchemyRepositoryFactory):
    def transaction_repository(self):
        if self._transaction_repo is None:
            self._transaction_repo = FailingThirdInsertRepository(self.session)
        return self._transaction_repo


class TestMetadataEndpoints:
    def test_root(self, test_client, api_v1_prefix):
        response = test_client.get("/")

        assert response.status_code == 200
        assert response.json()["api_base"] == api_v1_prefix

    def test_health(self, test_client, api_v1_prefix):
        response = test_client.get(f"{api_v1_prefix}/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_list_banks(self, test_client, api_v1_prefix):
        response = test_client.get(f"{api_v1_prefix}/banks")

        assert response.status_code == 200
        assert [bank["id"] for bank in response.json()] == [
            "chase",
            "bofa",
            "wellsfargo",
            "citi",
            "pnc",
            "usbank",
        ]

    def test_list_categories(self, test_client, api_v1_prefix):
        response = test_client.get(f"{api_v1_prefix}/categories")

        data = response.json()
        assert response.status_code == 200
        assert [c["label"] for c in data] == [c.label for c in Category]
        assert data[0] == {
            "key": "FOOD_AND_DINING",
            "label": "Food & Dining",
            "icon": "Utensils",
            "color": "bg-orange-100 text-orange-600",
        }


class TestClassifyEndpoint:
    def test_first_rule_wins(self, test_client, api_v1_prefix):
        response = test_client.post(
            f"{api_v1_prefix}/categories/classify",
            json={"description": "Starbucks purchase at Amazon kiosk"},
        )

        assert response.status_code == 200
        assert response.json() == {
            "category": "Food & Dining",
            "type": "expense",
            "matched_keywords": ["starbucks"],
        }

    def test_fallback_for_income(self, test_client, api_v1_prefix):
        response = test_client.post(
            f"{api_v1_prefix}/categories/classify",
            json={"description": "Transfer from Bob", "amount": "50"},
        )

        assert response.json() == {
            "category": "Income",
            "type": "income",
            "matched_keywords": [],
        }

    def test_long_merchant(self, test_client, api_v1_prefix):
        response = test_client.post(
            f"{api_v1_prefix}/categories/classify",
            json={"description": "Coffee", "merchant": "Starbucks " + "x" * 300},
        )

        assert response.status_code == 200
        assert response.json()["category"] == "Food & Dining"


class TestImportEndpoint:
    def test_import_persists_classified_records(self, test_client, api_v1_prefix):
        # Act
        response = test_client.post(f"{api_v1_prefix}/imports", json=IMPORT_PAYLOAD)

        # Assert
        assert response.status_code == 201
        data = response.json()
        assert data["source_id"] == "chase"
        assert data["count"] == 4
        assert data["categories"] == [
            "Food & Dining",
            "Transportation",
            "Groceries",
            "Income",
        ]
        assert "hunter2" not in response.text

        stored = test_client.get(
            f"{api_v1_prefix}/transactions",
            params={"imported": "true"},
        ).json()
        assert len(stored) == 4
        assert {tx["source_id"] for tx in stored} == {"chase"}

    def test_repeated_import_appends(self, test_client, api_v1_prefix):
        test_client.post(f"{api_v1_prefix}/imports", json=IMPORT_PAYLOAD)
        test_client.post(f"{api_v1_prefix}/imports", json=IMPORT_PAYLOAD)

        stored = test_client.get(f"{api_v1_prefix}/transactions").json()
        assert len(stored) == 8

    def test_unknown_bank(self, test_client, api_v1_prefix):
        response = test_client.post(
            f"{api_v1_prefix}/imports",
            json={**IMPORT_PAYLOAD, "source_id": "monzo"},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "UNKNOWN_BANK_SOURCE"

    def test_missing_username(self, test_client, api_v1_prefix):
        response = test_client.post(
            f"{api_v1_prefix}/imports",
            json={"source_id": "chase", "password": "hunter2"},
        )

        assert response.status_code == 400
        assert response.json() == {
            "detail": "Invalid credentials: username is required",
            "code": "INVALID_CREDENTIALS_FORMAT",
        }


class TestImportStoreFailure:
    def test_rows_before_failure_are_kept_and_503_returned(
        self,
        app,
        test_client,
        api_v1_prefix,
    ):
        # Arrange
        async def failing_factory(session: DBSession):
            return FailingThirdInsertFactory(session)

        app.dependency_overrides[get_repository_factory] = failing_factory

        # Act
        response = test_client.post(f"{api_v1_prefix}/imports", json=IMPORT_PAYLOAD)

        # Assert
        assert response.status_code == 503
        data = response.json()
        assert data["code"] == "IMPORT_FAILED"
        assert data["detail"].startswith("Import failed after 2 transaction(s)")

        app.dependency_overrides.pop(get_repository_factory)
        stored = test_client.get(f"{api_v1_prefix}/transactions").json()
        assert sorted(tx["description"] for tx in stored) == [
            "Shell Gas Station",
            "Starbucks Coffee #1234",
        ]


class TestImportLoginRefused:
    @pytest.fixture
    def bank_failure_probability(self) -> float:
        return 1.0

    def test_refused_login_is_401_and_stores_nothing(
        self,
        test_client,
        api_v1_prefix,
    ):
        response = test_client.post(f"{api_v1_prefix}/imports", json=IMPORT_PAYLOAD)

        assert response.status_code == 401
        assert response.json()["code"] == "BANK_AUTHENTICATION_FAILED"
        assert test_client.get(f"{api_v1_prefix}/transactions").json() == []


class TestTransactionEndpoints:
    def test_create(self, test_client, api_v1_prefix):
        response = _create(test_client, api_v1_prefix)

        assert response.status_code == 201
        data = response.json()
        assert data["id"] == 1
        assert data["category"] == "Food & Dining"
        assert data["imported"] is False
        assert data["source_id"] == ""

    def test_create_auto_categorized(self, test_client, api_v1_prefix):
        response = _create(
            test_client,
            api_v1_prefix,
            category=None,
            description="Netflix subscription",
            auto_categorize=True,
        )

        assert response.status_code == 201
        assert response.json()["category"] == "Entertainment"

    def test_create_invalid(self, test_client, api_v1_prefix):
        response = _create(
            test_client,
            api_v1_prefix,
            amount="0",
            description="",
        )

        assert response.status_code == 400
        body = response.json()
        assert body["code"] == "VALIDATION_ERROR"
        assert "Amount must be greater than 0" in body["detail"]
        assert "Description is required" in body["detail"]
        assert test_client.get(f"{api_v1_prefix}/transactions").json() == []

    def test_list_filters(self, test_client, api_v1_prefix):
        _create(test_client, api_v1_prefix)
        _create(
            test_client,
            api_v1_prefix,
            description="Salary",
            category="Income",
            type="income",
            amount="100",
        )

        by_category = test_client.get(
            f"{api_v1_prefix}/transactions",
            params={"category": "income"},
        ).json()
        by_type = test_client.get(
            f"{api_v1_prefix}/transactions",
            params={"type": "expense"},
        ).json()

        assert [tx["description"] for tx in by_category] == ["Salary"]
        assert [tx["description"] for tx in by_type] == ["Lunch at Subway"]

    def test_list_unknown_category(self, test_client, api_v1_prefix):
        response = test_client.get(
            f"{api_v1_prefix}/transactions",
            params={"category": "Crypto"},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_CATEGORY"

    def test_delete(self, test_client, api_v1_prefix):
        created = _create(test_client, api_v1_prefix).json()

        response = test_client.delete(f"{api_v1_prefix}/transactions/{created['id']}")
        missing = test_client.delete(f"{api_v1_prefix}/transactions/{created['id']}")

        assert response.status_code == 204
        assert missing.status_code == 404
        assert missing.json()["code"] == "TRANSACTION_NOT_FOUND"

    def test_breakdown_after_import(self, test_client, api_v1_prefix):
        test_client.post(f"{api_v1_prefix}/imports", json=IMPORT_PAYLOAD)
        _create(test_client, api_v1_prefix)

        everything = test_client.get(f"{api_v1_prefix}/transactions/breakdown").json()
        imported = test_client.get(
            f"{api_v1_prefix}/transactions/breakdown",
            params={"imported_only": "true"},
        ).json()

        assert imported["total"] == "291.68"
        assert [c["category"] for c in imported["categories"]] == [
            "Groceries",
            "Transportation",
            "Food & Dining",
        ]
        assert [c["percentage"] for c in imported["categories"]] == [
            "53.75",
            "30.59",
            "15.66",
        ]
        assert everything["total"] == "304.18"

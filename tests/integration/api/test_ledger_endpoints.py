"""API tests for account, category and transaction CRUD."""

from uuid import uuid4

import pytest


def _create(client, prefix, resource, payload, headers):
    response = client.post(f"{prefix}/{resource}", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["data"]


@pytest.fixture
def account(test_client, api_v1_prefix, auth_headers) -> dict:
    return _create(
        test_client,
        api_v1_prefix,
        "account",
        {"name": "Checking", "type": "BANK", "balance": 1000},
        auth_headers,
    )


@pytest.fixture
def category(test_client, api_v1_prefix, auth_headers) -> dict:
    return _create(
        test_client,
        api_v1_prefix,
        "category",
        {"name": "Groceries", "type": "EXPENSE"},
        auth_headers,
    )


class TestAccountEndpoints:
    def test_requires_authentication(self, test_client, api_v1_prefix):
        response = test_client.get(f"{api_v1_prefix}/account")

        assert response.status_code == 401
        assert response.json()["status"] is False

    def test_create_and_get(self, test_client, api_v1_prefix, auth_headers):
        response = test_client.post(
            f"{api_v1_prefix}/account",
            json={"name": "Wallet", "type": "CASH", "balance": 42.5},
            headers=auth_headers,
        )

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "Account created successfully"
        created = body["data"]
        assert created["name"] == "Wallet"
        assert created["type"] == "CASH"
        assert created["balance"] == 42.5
        assert created["is_deleted"] is False

        fetched = test_client.get(
            f"{api_v1_prefix}/account/{created['id']}",
            headers=auth_headers,
        )
        assert fetched.status_code == 200
        assert fetched.json()["message"] == "Account fetched successfully"
        assert fetched.json()["data"] == created

    def test_create_reports_all_violations(
        self,
        test_client,
        api_v1_prefix,
        auth_headers,
    ):
        response = test_client.post(
            f"{api_v1_prefix}/account",
            json={"type": "SAVINGS"},
            headers=auth_headers,
        )

        assert response.status_code == 400
        fields = {e["field"] for e in response.json()["errors"]}
        assert fields == {"name", "type", "balance"}

    def test_non_numeric_balance(self, test_client, api_v1_prefix, auth_headers):
        response = test_client.post(
            f"{api_v1_prefix}/account",
            json={"name": "Checking", "type": "BANK", "balance": "lots"},
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert response.json()["status"] is False

    def test_list(self, test_client, api_v1_prefix, auth_headers, account):
        response = test_client.get(f"{api_v1_prefix}/account", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["message"] == "Accounts fetched successfully"
        assert [a["id"] for a in response.json()["data"]] == [account["id"]]

    def test_update_replaces_fields(
        self,
        test_client,
        api_v1_prefix,
        auth_headers,
        account,
    ):
        response = test_client.put(
            f"{api_v1_prefix}/account/{account['id']}",
            json={"name": "Visa", "type": "CREDIT-CARD", "balance": -200},
            headers=auth_headers,
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert response.json()["message"] == "Account updated successfully"
        assert (data["name"], data["type"], data["balance"]) == (
            "Visa",
            "CREDIT-CARD",
            -200,
        )
        assert data["id"] == account["id"]
        assert data["created_at"] == account["created_at"]

    def test_update_with_partial_body_is_rejected(
        self,
        test_client,
        api_v1_prefix,
        auth_headers,
        account,
    ):
        response = test_client.put(
            f"{api_v1_prefix}/account/{account['id']}",
            json={"name": "Only a name"},
            headers=auth_headers,
        )

        assert response.status_code == 400

    def test_delete_hides_account(
        self,
        test_client,
        api_v1_prefix,
        auth_headers,
        account,
    ):
        url = f"{api_v1_prefix}/account/{account['id']}"

        first = test_client.delete(url, headers=auth_headers)
        second = test_client.delete(url, headers=auth_headers)

        assert first.status_code == 200
        assert first.json() == {
            "status": True,
            "message": "Account deleted successfully",
        }
        assert second.status_code == 200
        assert test_client.get(url, headers=auth_headers).status_code == 404
        listed = test_client.get(f"{api_v1_prefix}/account", headers=auth_headers)
        assert listed.json()["data"] == []

    def test_update_deleted_account_is_not_found(
        self,
        test_client,
        api_v1_prefix,
        auth_headers,
        account,
    ):
        url = f"{api_v1_prefix}/account/{account['id']}"
        test_client.delete(url, headers=auth_headers)

        response = test_client.put(
            url,
            json={"name": "Back", "type": "BANK", "balance": 0},
            headers=auth_headers,
        )

        assert response.status_code == 404
        assert response.json()["message"] == "Account not found"

    def test_unknown_id(self, test_client, api_v1_prefix, auth_headers):
        response = test_client.get(
            f"{api_v1_prefix}/account/{uuid4()}",
            headers=auth_headers,
        )

        assert response.status_code == 404
        assert response.json() == {"status": False, "message": "Account not found"}

    def test_malformed_id(self, test_client, api_v1_prefix, auth_headers):
        response = test_client.get(
            f"{api_v1_prefix}/account/not-a-uuid",
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert response.json()["status"] is False


class TestCrossUserIsolation:
    @pytest.mark.parametrize(
        ("resource", "payload"),
        [
            ("account", {"name": "Checking", "type": "BANK", "balance": 10}),
            ("category", {"name": "Rent", "type": "EXPENSE"}),
        ],
    )
    def test_other_user_sees_not_found(
        self,
        test_client,
        api_v1_prefix,
        auth_headers,
        other_auth_headers,
        resource,
        payload,
    ):
        created = _create(test_client, api_v1_prefix, resource, payload, auth_headers)
        url = f"{api_v1_prefix}/{resource}/{created['id']}"

        assert test_client.get(url, headers=other_auth_headers).status_code == 404
        assert (
            test_client.put(url, json=payload, headers=other_auth_headers).status_code
            == 404
        )
        assert test_client.delete(url, headers=other_auth_headers).status_code == 404
        listed = test_client.get(
            f"{api_v1_prefix}/{resource}",
            headers=other_auth_headers,
        )
        assert listed.json()["data"] == []
        assert test_client.get(url, headers=auth_headers).status_code == 200

    def test_transaction_of_other_user(
        self,
        test_client,
        api_v1_prefix,
        auth_headers,
        other_auth_headers,
        account,
        category,
    ):
        payload = {
            "amount": 5,
            "date": "2024-01-15",
            "account": account["id"],
            "category": category["id"],
        }
        txn = _create(test_client, api_v1_prefix, "transaction", payload, auth_headers)
        url = f"{api_v1_prefix}/transaction/{txn['id']}"

        assert test_client.get(url, headers=other_auth_headers).status_code == 404
        assert (
            test_client.put(url, json=payload, headers=other_auth_headers).status_code
            == 404
        )
        assert test_client.delete(url, headers=other_auth_headers).status_code == 404
        listed = test_client.get(
            f"{api_v1_prefix}/transaction",
            headers=other_auth_headers,
        )
        assert listed.json()["data"] == []
        fetched = test_client.get(url, headers=auth_headers)
        assert fetched.status_code == 200
        assert fetched.json()["data"]["amount"] == 5

    def test_transaction_cannot_reference_foreign_account(
        self,
        test_client,
        api_v1_prefix,
        auth_headers,
        other_auth_headers,
        account,
    ):
        bob_category = _create(
            test_client,
            api_v1_prefix,
            "category",
            {"name": "Food", "type": "EXPENSE"},
            other_auth_headers,
        )

        response = test_client.post(
            f"{api_v1_prefix}/transaction",
            json={
                "amount": 5,
                "date": "2024-01-15",
                "account": account["id"],
                "category": bob_category["id"],
            },
            headers=other_auth_headers,
        )

        assert response.status_code == 400
        assert response.json()["errors"] == [
            {"field": "account", "message": "Account not found"},
        ]


class TestCategoryEndpoints:
    def test_list_sorted_by_type_then_name(
        self,
        test_client,
        api_v1_prefix,
        auth_headers,
    ):
        for name, kind in [
            ("Salary", "INCOME"),
            ("Rent", "EXPENSE"),
            ("Groceries", "EXPENSE"),
        ]:
            _create(
                test_client,
                api_v1_prefix,
                "category",
                {"name": name, "type": kind},
                auth_headers,
            )

        response = test_client.get(f"{api_v1_prefix}/category", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["message"] == "Categories fetched successfully"
        assert [c["name"] for c in response.json()["data"]] == [
            "Groceries",
            "Rent",
            "Salary",
        ]

    def test_invalid_type(self, test_client, api_v1_prefix, auth_headers):
        response = test_client.post(
            f"{api_v1_prefix}/category",
            json={"name": "Misc", "type": "TRANSFER"},
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "type"


class TestTransactionEndpoints:
    def _payload(self, account, category, **overrides) -> dict:
        payload = {
            "amount": 50,
            "date": "2024-01-15T10:30:00Z",
            "account": account["id"],
            "category": category["id"],
            "description": "Weekly shopping",
        }
        payload.update(overrides)
        return payload

    def test_create_and_get(
        self,
        test_client,
        api_v1_prefix,
        auth_headers,
        account,
        category,
    ):
        created = _create(
            test_client,
            api_v1_prefix,
            "transaction",
            self._payload(account, category),
            auth_headers,
        )

        assert created["amount"] == 50
        assert created["account"] == account["id"]
        assert created["category"] == category["id"]
        assert created["description"] == "Weekly shopping"
        assert created["date"].startswith("2024-01-15T10:30:00")

        fetched = test_client.get(
            f"{api_v1_prefix}/transaction/{created['id']}",
            headers=auth_headers,
        )
        assert fetched.json()["message"] == "Transaction fetched successfully"
        assert fetched.json()["data"] == created

    def test_account_balance_is_untouched(
        self,
        test_client,
        api_v1_prefix,
        auth_headers,
        account,
        category,
    ):
        _create(
            test_client,
            api_v1_prefix,
            "transaction",
            self._payload(account, category, amount=300),
            auth_headers,
        )

        fetched = test_client.get(
            f"{api_v1_prefix}/account/{account['id']}",
            headers=auth_headers,
        )
        assert fetched.json()["data"]["balance"] == 1000

    def test_unknown_references(self, test_client, api_v1_prefix, auth_headers):
        response = test_client.post(
            f"{api_v1_prefix}/transaction",
            json={
                "amount": 5,
                "date": "2024-01-15",
                "account": str(uuid4()),
                "category": str(uuid4()),
            },
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert {e["field"] for e in response.json()["errors"]} == {
            "account",
            "category",
        }

    def test_deleted_account_cannot_be_referenced(
        self,
        test_client,
        api_v1_prefix,
        auth_headers,
        account,
        category,
    ):
        test_client.delete(
            f"{api_v1_prefix}/account/{account['id']}",
            headers=auth_headers,
        )

        response = test_client.post(
            f"{api_v1_prefix}/transaction",
            json=self._payload(account, category),
            headers=auth_headers,
        )

        assert response.status_code == 400

    def test_invalid_fields(self, test_client, api_v1_prefix, auth_headers):
        response = test_client.post(
            f"{api_v1_prefix}/transaction",
            json={"date": "yesterday", "account": "x", "category": "y"},
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert {e["field"] for e in response.json()["errors"]} == {
            "amount",
            "date",
            "account",
            "category",
        }

    def test_update_clears_omitted_description(
        self,
        test_client,
        api_v1_prefix,
        auth_headers,
        account,
        category,
    ):
        created = _create(
            test_client,
            api_v1_prefix,
            "transaction",
            self._payload(account, category),
            auth_headers,
        )
        payload = self._payload(account, category, amount=75)
        del payload["description"]

        response = test_client.put(
            f"{api_v1_prefix}/transaction/{created['id']}",
            json=payload,
            headers=auth_headers,
        )

        assert response.status_code == 200
        assert response.json()["data"]["amount"] == 75
        assert response.json()["data"]["description"] is None

    def test_list_newest_first_and_filters(
        self,
        test_client,
        api_v1_prefix,
        auth_headers,
        account,
        category,
    ):
        savings = _create(
            test_client,
            api_v1_prefix,
            "account",
            {"name": "Savings", "type": "BANK", "balance": 0},
            auth_headers,
        )
        for day, acc in [
            ("2024-01-10", account),
            ("2024-01-20", account),
            ("2024-01-15", savings),
        ]:
            _create(
                test_client,
                api_v1_prefix,
                "transaction",
                self._payload(acc, category, date=f"{day}T12:00:00Z"),
                auth_headers,
            )
        url = f"{api_v1_prefix}/transaction"

        everything = test_client.get(url, headers=auth_headers).json()["data"]
        by_account = test_client.get(
            url,
            params={"account": account["id"]},
            headers=auth_headers,
        ).json()["data"]
        by_range = test_client.get(
            url,
            params={"fromDate": "2024-01-15", "toDate": "2024-01-20"},
            headers=auth_headers,
        ).json()["data"]

        assert [t["date"][:10] for t in everything] == [
            "2024-01-20",
            "2024-01-15",
            "2024-01-10",
        ]
        assert [t["date"][:10] for t in by_account] == ["2024-01-20", "2024-01-10"]
        assert [t["date"][:10] for t in by_range] == ["2024-01-20", "2024-01-15"]

    def test_delete_twice(
        self,
        test_client,
        api_v1_prefix,
        auth_headers,
        account,
        category,
    ):
        created = _create(
            test_client,
            api_v1_prefix,
            "transaction",
            self._payload(account, category),
            auth_headers,
        )
        url = f"{api_v1_prefix}/transaction/{created['id']}"

        assert test_client.delete(url, headers=auth_headers).status_code == 200
        assert test_client.delete(url, headers=auth_headers).status_code == 200
        assert test_client.get(url, headers=auth_headers).status_code == 404

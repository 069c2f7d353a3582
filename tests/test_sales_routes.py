"""HTTP contract tests for sale endpoints."""

from unittest.mock import AsyncMock, patch

import pytest
from fastapi import status

from core.result import Err

SALE = {"product_id": 1, "discount": 10, "start_date": "2024-01-01", "end_date": "2024-01-31"}


def _add_widget(client):
    client.post("/add-product", json={"name": "Widget", "price": 9.99, "in_stock": True})


class TestAddSale:
    def test_existing_product(self, client):
        _add_widget(client)

        response = client.post("/add-sale", json=SALE)

        assert response.status_code == status.HTTP_200_OK
        assert response.text == "Sale added successfully"
        assert client.get("/sales").json() == [{"id": 1, **SALE}]

    def test_unknown_product_is_400_and_creates_nothing(self, client):
        before = client.get("/sales").json()

        response = client.post("/add-sale", json={**SALE, "product_id": 999})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.text == "Product does not exist"
        assert client.get("/sales").json() == before

    def test_dates_are_not_parsed(self, client):
        _add_widget(client)
        payload = {**SALE, "start_date": "next tuesday", "end_date": ""}

        client.post("/add-sale", json=payload)

        (row,) = client.get("/sales").json()
        assert row["start_date"] == "next tuesday"
        assert row["end_date"] == ""

    def test_missing_field_rejected(self, client):
        response = client.post("/add-sale", json={"product_id": 1, "discount": 10})
        assert response.status_code == 422

    @pytest.mark.parametrize(
        "overrides",
        [
            {"product_id": 2**31},
            {"product_id": -(2**31) - 1},
            {"discount": 2**31},
            {"discount": -(2**31) - 1},
        ],
    )
    def test_integer_outside_int4_rejected_before_store(self, client, fake_pool, overrides):
        response = client.post("/add-sale", json={**SALE, **overrides})

        assert response.status_code == 422
        assert fake_pool.statements == []

    def test_existence_check_failure_is_500_with_message(self, client):
        with patch(
            "products.repository.product_exists",
            AsyncMock(return_value=Err(OSError("connection refused"))),
        ):
            response = client.post("/add-sale", json=SALE)

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.text == "Error checking product existence"

    def test_insert_failure_is_500_with_message(self, client):
        _add_widget(client)
        with patch(
            "sales.repository.insert_sale",
            AsyncMock(return_value=Err(OSError("connection reset"))),
        ):
            response = client.post("/add-sale", json=SALE)

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.text == "Error adding sale"


class TestListSales:
    def test_empty_table(self, client):
        assert client.get("/sales").json() == []

    def test_store_error_is_bare_500(self, client, fake_pool):
        fake_pool.fetch = AsyncMock(side_effect=ConnectionResetError("gone"))

        response = client.get("/sales")

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.text == ""


class TestDeleteSale:
    def test_delete_existing(self, client):
        _add_widget(client)
        client.post("/add-sale", json=SALE)

        response = client.delete("/delete-sale/1")

        assert response.status_code == status.HTTP_200_OK
        assert response.text == "Sale deleted successfully"
        assert client.get("/sales").json() == []

    def test_delete_missing_id_still_succeeds(self, client):
        response = client.delete("/delete-sale/77")
        assert response.status_code == status.HTTP_200_OK

    @pytest.mark.parametrize("sale_id", [2**31, -(2**31) - 1])
    def test_id_outside_int4_rejected(self, client, fake_pool, sale_id):
        response = client.delete(f"/delete-sale/{sale_id}")

        assert response.status_code == 422
        assert fake_pool.statements == []

    def test_store_error_is_bare_500(self, client, fake_pool):
        fake_pool.execute = AsyncMock(side_effect=ConnectionResetError("gone"))

        response = client.delete("/delete-sale/1")

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.text == ""

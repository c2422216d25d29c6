from decimal import Decimal

import pytest
from sqlalchemy.exc import OperationalError


@pytest.fixture
def acme(client):
    response = client.post("/parties/", json={"name": "Acme", "mobile": "9000000001", "type": "Customer",
                                              "opening_balance": "1000"})
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def acme_supplies(client):
    response = client.post("/parties/", json={"name": "Acme Supplies", "mobile": "9000000002", "type": "Supplier"})
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def items(client):
    widget = client.post("/items/", json={"name": "Widget", "purchase_rate": "60", "sale_rate": "100",
                                          "tax_percent": "18", "stock": "10"}).json()
    gadget = client.post("/items/", json={"name": "Gadget", "purchase_rate": "30", "sale_rate": "50",
                                          "tax_percent": "5", "stock": "4"}).json()
    return widget, gadget


def sale_payload(party, widget, gadget, payment_mode="credit"):
    return {
        "party_id": party["id"],
        "date": "2026-04-01",
        "type": "SALES",
        "payment_mode": payment_mode,
        "lines": [
            {"item_id": widget["id"], "qty": 2, "rate": 100, "discount_percent": 10, "tax_percent": 18},
            {"item_id": gadget["id"], "qty": 1, "rate": 50, "discount_percent": 0, "tax_percent": 5},
        ],
    }


def test_create_and_fetch_invoice(client, acme, items):
    widget, gadget = items
    response = client.post("/invoices/", json=sale_payload(acme, widget, gadget))
    assert response.status_code == 201
    created = response.json()
    assert created["invoice_no"] == "INV-00001"
    assert created["party_name"] == "Acme"
    assert Decimal(created["subtotal"]) == Decimal("230")
    assert Decimal(created["tax_amount"]) == Decimal("34.9")
    assert Decimal(created["grand_total"]) == Decimal("264.9")
    assert created["due_date"] == "2026-04-16"
    assert [Decimal(line["amount"]) for line in created["lines"]] == [Decimal("180"), Decimal("50")]

    fetched = client.get(f"/invoices/{created['id']}").json()
    assert fetched["grand_total"] == created["grand_total"]
    assert fetched["lines"] == created["lines"]

    stock = {row["name"]: Decimal(row["stock"]) for row in client.get("/reports/stock").json()}
    assert stock == {"Gadget": Decimal("3"), "Widget": Decimal("8")}


def test_missing_invoice_is_404(client):
    response = client.get("/invoices/999")
    assert response.status_code == 404
    assert response.json() == {"detail": "Invoice not found"}


def test_list_invoices_newest_first(client, acme, items):
    widget, gadget = items
    first = client.post("/invoices/", json=sale_payload(acme, widget, gadget)).json()
    second = client.post("/invoices/", json=sale_payload(acme, widget, gadget, "cash")).json()
    assert [inv["id"] for inv in client.get("/invoices/").json()] == [second["id"], first["id"]]


def test_invalid_invoice_is_400_and_nothing_is_written(client, acme, items):
    widget, gadget = items
    payload = sale_payload(acme, widget, gadget)
    payload["lines"][1]["qty"] = 0
    response = client.post("/invoices/", json=payload)
    assert response.status_code == 400
    assert "quantity" in response.json()["detail"]
    assert client.get("/invoices/").json() == []
    assert Decimal(client.get(f"/items/{widget['id']}").json()["stock"]) == Decimal("10")


def test_empty_cart_is_rejected(client, acme):
    response = client.post("/invoices/", json={"party_id": acme["id"], "date": "2026-04-01", "type": "SALES",
                                               "lines": []})
    assert response.status_code == 400


def test_ledger_and_outstanding_agree(client, acme, items):
    widget, gadget = items
    invoice = client.post("/invoices/", json=sale_payload(acme, widget, gadget)).json()
    client.post("/invoices/", json=sale_payload(acme, widget, gadget, "cash"))
    payment = client.post("/payments/", json={"party_id": acme["id"], "amount": "64.90", "date": "2026-04-02",
                                              "mode": "online", "reference": "UTR-1"})
    assert payment.status_code == 201

    ledger = client.get(f"/reports/ledger/{acme['id']}").json()
    assert [row["type"] for row in ledger] == ["SALE", "SALE", "SETTLEMENT", "PAYMENT"]
    assert ledger[0]["ref"] == invoice["invoice_no"]
    assert Decimal(ledger[-1]["balance"]) == Decimal("1200.00")

    outstanding = {row["id"]: row for row in client.get("/reports/outstanding").json()}
    assert Decimal(outstanding[acme["id"]]["current_balance"]) == Decimal("1200.00")
    assert Decimal(outstanding[acme["id"]]["total_credit_sales"]) == Decimal("264.90")
    assert Decimal(outstanding[acme["id"]]["total_received"]) == Decimal("64.90")


def test_ledger_date_range(client, acme):
    client.post("/payments/", json={"party_id": acme["id"], "amount": "10", "date": "2026-03-01", "mode": "cash"})
    client.post("/payments/", json={"party_id": acme["id"], "amount": "20", "date": "2026-04-01", "mode": "cash"})
    ledger = client.get(f"/reports/ledger/{acme['id']}",
                        params={"start_date": "2026-03-15", "end_date": "2026-04-30"}).json()
    assert [Decimal(row["credit"]) for row in ledger] == [Decimal("20")]
    assert Decimal(ledger[0]["balance"]) == Decimal("980.00")


def test_ledger_for_unknown_party_is_404(client):
    assert client.get("/reports/ledger/4040").status_code == 404


def test_payment_validation(client, acme):
    response = client.post("/payments/", json={"party_id": acme["id"], "amount": "0", "date": "2026-04-01",
                                               "mode": "cash"})
    assert response.status_code == 400
    # Rounds to 0.00 at two places
    response = client.post("/payments/", json={"party_id": acme["id"], "amount": "0.004", "date": "2026-04-01",
                                               "mode": "cash"})
    assert response.status_code == 400
    assert client.get("/payments/").json() == []
    response = client.post("/payments/", json={"party_id": 31337, "amount": "5", "date": "2026-04-01",
                                               "mode": "cash"})
    assert response.status_code == 400
    response = client.post("/payments/", json={"party_id": acme["id"], "amount": "5", "date": "2026-04-01",
                                               "mode": "credit"})
    assert response.status_code == 422


def test_payments_listed_newest_first_per_party(client, acme, acme_supplies):
    client.post("/payments/", json={"party_id": acme["id"], "amount": "1", "date": "2026-04-01", "mode": "cash"})
    client.post("/payments/", json={"party_id": acme["id"], "amount": "2", "date": "2026-04-03", "mode": "cash"})
    client.post("/payments/", json={"party_id": acme_supplies["id"], "amount": "3", "date": "2026-04-02",
                                    "mode": "cheque"})
    payments = client.get("/payments/", params={"party_id": acme["id"]}).json()
    assert [Decimal(p["amount"]) for p in payments] == [Decimal("2"), Decimal("1")]


def test_party_type_is_locked_once_used(client, acme):
    assert client.patch(f"/parties/{acme['id']}", json={"mobile": "9111111111"}).status_code == 200
    client.post("/payments/", json={"party_id": acme["id"], "amount": "5", "date": "2026-04-01", "mode": "cash"})

    response = client.patch(f"/parties/{acme['id']}", json={"type": "Supplier"})
    assert response.status_code == 400
    assert client.get(f"/parties/{acme['id']}").json()["type"] == "Customer"


def test_unused_party_can_change_type(client, acme):
    response = client.patch(f"/parties/{acme['id']}", json={"type": "Supplier"})
    assert response.status_code == 200
    assert response.json()["type"] == "Supplier"


def test_stock_is_not_editable_through_item_update(client, items):
    widget, _ = items
    response = client.patch(f"/items/{widget['id']}", json={"sale_rate": "110", "stock": "999"})
    assert response.status_code == 200
    assert Decimal(response.json()["stock"]) == Decimal("10")
    assert Decimal(response.json()["sale_rate"]) == Decimal("110")


def test_stock_movements_report(client, acme, acme_supplies, items):
    widget, gadget = items
    sale = client.post("/invoices/", json=sale_payload(acme, widget, gadget)).json()
    purchase = client.post("/invoices/", json={
        "party_id": acme_supplies["id"], "date": "2026-04-02", "type": "PURCHASE",
        "lines": [{"item_id": widget["id"], "qty": 5, "rate": 60}],
    }).json()

    movements = client.get("/reports/stock-movements", params={"item_id": widget["id"]}).json()
    assert [(m["reference_id"], m["direction"], Decimal(m["qty"])) for m in movements] == [
        (purchase["invoice_no"], "IN", Decimal("5")),
        (sale["invoice_no"], "OUT", Decimal("-2")),
    ]


def test_dashboard(client, acme, acme_supplies, items):
    widget, gadget = items
    client.post("/invoices/", json=sale_payload(acme, widget, gadget))
    client.post("/invoices/", json={
        "party_id": acme_supplies["id"], "date": "2026-04-02", "type": "PURCHASE", "payment_mode": "credit",
        "lines": [{"item_id": gadget["id"], "qty": 10, "rate": 30, "tax_percent": 0}],
    })

    dashboard = client.get("/reports/dashboard").json()
    assert Decimal(dashboard["total_sales"]) == Decimal("264.90")
    assert Decimal(dashboard["total_purchase"]) == Decimal("300.00")
    assert Decimal(dashboard["receivables"]) == Decimal("1264.90")
    assert Decimal(dashboard["payables"]) == Decimal("300.00")
    # Widget 8 is under the threshold, Gadget 13 is not
    assert dashboard["low_stock"] == 1
    assert [t["type"] for t in dashboard["recent_transactions"]] == ["Purchase", "Sale"]


def test_storage_failure_is_503_not_an_empty_report(client, monkeypatch):
    from crud import outstanding

    def broken(db, party_id=None):
        raise OperationalError("SELECT parties", {}, Exception("connection refused"))

    monkeypatch.setattr(outstanding, "get_outstanding", broken)
    response = client.get("/reports/outstanding")
    assert response.status_code == 503
    assert response.json()["retryable"] is True

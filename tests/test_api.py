"""HTTP tests for the members / expenses / settlement routers."""


def _seed(client, members, expenses=()):
    for name in members:
        assert client.post("/api/members/", json={"name": name}).status_code == 201
    for paid_by, amount in expenses:
        resp = client.post(
            "/api/expenses/",
            json={"paid_by": paid_by, "description": "shared", "amount": amount},
        )
        assert resp.status_code == 201


def test_healthcheck(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.json()["docs"] == "/docs"


def test_members_listing_reports_positions(client):
    _seed(client, ["Alice", "Bob"])
    assert client.get("/api/members/").json() == [
        {"name": "Alice", "position": 0},
        {"name": "Bob", "position": 1},
    ]


def test_duplicate_member_is_conflict(client):
    _seed(client, ["Alice"])
    resp = client.post("/api/members/", json={"name": " Alice "})
    assert resp.status_code == 409
    assert resp.json()["detail"]["code"] == "duplicate_member"


def test_blank_member_is_unprocessable(client):
    resp = client.post("/api/members/", json={"name": "  "})
    assert resp.status_code == 422
    assert resp.json()["detail"]["code"] == "empty_member_name"


def test_add_and_list_expenses(client):
    _seed(client, ["Alice"])
    resp = client.post("/api/expenses/", json={"paid_by": "Alice", "description": " taxi ", "amount": 500})
    assert resp.status_code == 201
    assert resp.json() == {"paid_by": "Alice", "description": "taxi", "amount": 500, "index": 0}
    assert len(client.get("/api/expenses/").json()) == 1


def test_expense_for_unknown_payer_is_rejected(client):
    _seed(client, ["Alice"])
    resp = client.post("/api/expenses/", json={"paid_by": "Bob", "description": "taxi", "amount": 500})
    assert resp.status_code == 422
    assert resp.json()["detail"]["code"] == "unknown_payer"


def test_fractional_amount_fails_request_validation(client):
    _seed(client, ["Alice"])
    resp = client.post("/api/expenses/", json={"paid_by": "Alice", "description": "taxi", "amount": 10.5})
    assert resp.status_code == 422


def test_delete_expense(client):
    _seed(client, ["Alice", "Bob"], [("Alice", 1000)])
    assert client.delete("/api/expenses/0").status_code == 204
    assert client.get("/api/expenses/").json() == []
    assert client.delete("/api/expenses/0").status_code == 404


def test_settle_up_from_current_snapshot(client, ledger):
    _seed(client, ["A", "B", "C"], [("A", 100)])
    resp = client.get("/api/settlement/settle-up")
    assert resp.status_code == 200
    assert resp.json() == {
        "version": ledger.snapshot().version,
        "transfers": [
            {"from_member": "B", "to_member": "A", "amount": 33},
            {"from_member": "C", "to_member": "A", "amount": 33},
        ],
    }


def test_settle_up_for_empty_ledger(client):
    assert client.get("/api/settlement/settle-up").json() == {"version": 0, "transfers": []}


def test_balances_report(client):
    _seed(client, ["A", "B"], [("A", 1000)])
    body = client.get("/api/settlement/balances").json()
    assert body["total"] == 1000
    assert body["members"] == [
        {"member": "A", "paid": 1000, "fair_share": 500, "balance": 500},
        {"member": "B", "paid": 0, "fair_share": 500, "balance": -500},
    ]


def test_stateless_compute(client):
    resp = client.post(
        "/api/settlement/compute",
        json={
            "members": ["A", "B"],
            "expenses": [{"paid_by": "A", "description": "hotel", "amount": 1000}],
        },
    )
    assert resp.status_code == 200
    assert resp.json() == [{"from_member": "B", "to_member": "A", "amount": 500}]


def test_stateless_compute_with_no_members_and_expenses(client):
    resp = client.post(
        "/api/settlement/compute",
        json={"members": [], "expenses": [{"paid_by": "A", "description": "hotel", "amount": 1000}]},
    )
    assert resp.status_code == 422
    assert resp.json()["detail"]["code"] == "empty_member_set"


def test_stateless_compute_rejects_negative_amount(client):
    resp = client.post(
        "/api/settlement/compute",
        json={"members": ["A", "B"], "expenses": [{"paid_by": "A", "description": "refund", "amount": -10}]},
    )
    assert resp.status_code == 422
    assert resp.json()["detail"]["code"] == "negative_amount"


def test_stateless_compute_rejects_unknown_payer(client):
    resp = client.post(
        "/api/settlement/compute",
        json={"members": ["A"], "expenses": [{"paid_by": "Z", "description": "x", "amount": 1}]},
    )
    assert resp.status_code == 422
    assert resp.json()["detail"]["code"] == "invalid_member"


def test_stateless_compute_with_empty_body(client):
    resp = client.post("/api/settlement/compute", json={})
    assert resp.status_code == 200
    assert resp.json() == []


def test_stateless_compute_rejects_untrimmed_member_names(client):
    resp = client.post(
        "/api/settlement/compute",
        json={"members": ["A", "A "], "expenses": [{"paid_by": "A", "description": "x", "amount": 100}]},
    )
    assert resp.status_code == 422
    assert resp.json()["detail"]["code"] == "invalid_member"

import pytest

from feather.logic_scripts.services import authoring_service


def create(client, headers, script_content, trigger_point = "add_to_cart", **fields):
    body = {"trigger_point": trigger_point, "script_content": script_content}
    body.update(fields)
    response = client.post("/logic-scripts", json = body, headers = headers)
    assert response.status_code == 201, response.get_json()
    return response.get_json()["data"]


def execute(client, trigger_point, context = None, distributor_id = "t1"):
    return client.post("/execute-logic-scripts", json = {
        "distributor_id": distributor_id,
        "trigger_point": trigger_point,
        "context": context or {},
    })


# ── Storefront evaluation ─────────────────────────────────────────────────────

def test_veto_short_circuits_the_group(client, tenant_headers):
    create(client, tenant_headers, "set cart.checked = true", description = "first")
    create(client, tenant_headers, 'deny "Customer on hold" when customer.on_hold == true')
    create(client, tenant_headers, "set cart.third = true")

    response = execute(client, "add_to_cart", {"customer": {"on_hold": True}})
    data = response.get_json()["data"]

    assert response.status_code == 200
    assert data["allowed"] is False
    assert data["message"] == "Customer on hold"
    assert len(data["results"]) == 2
    assert data["results"][0]["description"] == "first"


def test_inactive_script_is_skipped(client, tenant_headers):
    create(client, tenant_headers, "set cart.checked = true")
    vetoing = create(client, tenant_headers, 'deny "Customer on hold" when customer.on_hold == true')
    create(client, tenant_headers, "set cart.third = true")

    client.put(f"/logic-scripts/{vetoing['id']}", json = {"active": False}, headers = tenant_headers)

    data = execute(client, "add_to_cart", {"customer": {"on_hold": True}}).get_json()["data"]

    assert data["allowed"] is True
    assert len(data["results"]) == 2
    assert data["modifications"] == {"cart.checked": True, "cart.third": True}


def test_broken_script_fails_open(client, tenant_headers):
    create(client, tenant_headers, "set cart.x = cart.total / 0", trigger_point = "submit")

    data = execute(client, "submit", {"cart": {"total": 10}}).get_json()["data"]

    assert data["allowed"] is True
    assert data["results"][0]["error"] == "Line 1: division by zero"


def test_fail_closed_configuration(app, client, tenant_headers):
    app.config["LOGIC_SCRIPTS_FAIL_OPEN"] = False
    create(client, tenant_headers, "deny when (", trigger_point = "submit")

    data = execute(client, "submit").get_json()["data"]

    assert data["allowed"] is False


def test_execute_requires_a_known_trigger_point(client):
    response = execute(client, "checkout")

    assert response.status_code == 400
    assert response.get_json()["error_code"] == "VALIDATION_ERROR"


def test_execute_rejects_non_object_context(client):
    response = client.post("/execute-logic-scripts", json = {
        "distributor_id": "t1", "trigger_point": "submit", "context": [1, 2]
    })

    assert response.status_code == 400


# ── Script management ─────────────────────────────────────────────────────────

def test_create_and_list(client, tenant_headers):
    create(client, tenant_headers, "deny when false", trigger_point = "submit")
    create(client, tenant_headers, "deny when false", trigger_point = "storefront_load")

    response = client.get("/logic-scripts", headers = tenant_headers)
    data = response.get_json()["data"]

    assert response.status_code == 200
    assert data["total"] == 2

    filtered = client.get("/logic-scripts?trigger_point=submit", headers = tenant_headers)
    assert filtered.get_json()["data"]["total"] == 1


def test_distributor_from_body_or_query(client):
    response = client.post("/logic-scripts", json = {
        "distributor_id": "t9",
        "trigger_point": "submit",
        "script_content": "deny when false",
    })

    assert response.status_code == 201
    assert response.get_json()["data"]["distributor_id"] == "t9"
    assert client.get("/logic-scripts?distributor_id=t9").get_json()["data"]["total"] == 1


@pytest.mark.parametrize("body", [
    {"trigger_point": "checkout", "script_content": "deny when false"},
    {"trigger_point": "submit", "script_content": "   "},
    {"trigger_point": "submit"},
    {"trigger_point": "submit", "script_content": "deny when false", "active": "yes"},
])
def test_create_validation(client, tenant_headers, body):
    response = client.post("/logic-scripts", json = body, headers = tenant_headers)

    assert response.status_code == 400
    assert response.get_json()["status"] == "error"


def test_missing_distributor(client):
    response = client.get("/logic-scripts")

    assert response.status_code == 400
    assert response.get_json()["message"] == "Distributor ID is required."


@pytest.mark.parametrize("patch", [
    {"trigger_point": "submit"},
    {"script_content": ""},
    {"active": "false"},
    {"unknown": 1},
])
def test_update_validation(client, tenant_headers, patch):
    script = create(client, tenant_headers, "deny when false")

    response = client.put(f"/logic-scripts/{script['id']}", json = patch, headers = tenant_headers)

    assert response.status_code == 400


def test_update_and_delete_are_tenant_scoped(client, tenant_headers):
    script = create(client, {"X-Distributor-Id": "t2"}, "deny when false")

    update = client.put(f"/logic-scripts/{script['id']}", json = {"active": False}, headers = tenant_headers)
    delete = client.delete(f"/logic-scripts/{script['id']}", headers = tenant_headers)

    assert update.status_code == 404
    assert delete.status_code == 404

    owner = client.delete(f"/logic-scripts/{script['id']}", headers = {"X-Distributor-Id": "t2"})
    assert owner.status_code == 200
    assert owner.get_json()["data"]["id"] == script["id"]


def test_reorder(client, tenant_headers):
    a = create(client, tenant_headers, "set cart.trail = [1]")
    b = create(client, tenant_headers, "set cart.trail = [2]")

    response = client.put("/logic-scripts/reorder", json = {
        "scripts": [{"id": a["id"], "sequence_order": 2}, {"id": b["id"], "sequence_order": 1}]
    }, headers = tenant_headers)

    assert response.status_code == 200
    assert response.get_json()["data"]["trigger_point"] == "add_to_cart"

    data = execute(client, "add_to_cart").get_json()["data"]
    assert [result["script_id"] for result in data["results"]] == [b["id"], a["id"]]
    assert data["modifications"] == {"cart.trail": [1]}


def test_reorder_with_missing_member_changes_nothing(client, tenant_headers):
    a = create(client, tenant_headers, "deny when false")
    b = create(client, tenant_headers, "deny when false")

    response = client.put("/logic-scripts/reorder", json = {
        "trigger_point": "add_to_cart",
        "scripts": [{"id": b["id"], "sequence_order": 1}]
    }, headers = tenant_headers)

    assert response.status_code == 400

    scripts = client.get("/logic-scripts", headers = tenant_headers).get_json()["data"]["scripts"]
    assert {s["id"]: s["sequence_order"] for s in scripts} == {a["id"]: 1, b["id"]: 2}


def test_reorder_across_trigger_points_is_rejected(client, tenant_headers):
    a = create(client, tenant_headers, "deny when false", trigger_point = "submit")
    b = create(client, tenant_headers, "deny when false", trigger_point = "add_to_cart")

    response = client.put("/logic-scripts/reorder", json = {
        "scripts": [{"id": a["id"], "sequence_order": 1}, {"id": b["id"], "sequence_order": 2}]
    }, headers = tenant_headers)

    assert response.status_code == 400
    assert "same trigger point" in response.get_json()["message"]


# ── Authoring helpers ─────────────────────────────────────────────────────────

def test_validate_endpoint(client):
    ok = client.post("/logic-scripts/validate", json = {"script_content": "deny when cart.total > 1"})
    bad = client.post("/logic-scripts/validate", json = {"script_content": "deny when import os"})

    assert ok.get_json()["data"]["valid"] is True
    assert bad.status_code == 200
    assert bad.get_json()["data"]["valid"] is False


def test_chat_endpoint(client, tenant_headers, monkeypatch):
    class Chat:
        def generate_response(self, messages, **kwargs):
            return '{"message": "Done.", "script": {"trigger_point": "submit", ' \
                   '"description": "Limit", "script_content": "deny when cart.total > 5000"}}'

    monkeypatch.setattr(authoring_service, "ChatService", Chat)

    response = client.post("/logic-scripts/chat", json = {
        "message": "Block orders with order value over 5000"
    }, headers = tenant_headers)
    data = response.get_json()["data"]

    assert response.status_code == 200
    assert data["intent"] == "logic"
    assert data["script"]["trigger_point"] == "submit"


def test_chat_requires_a_message(client, tenant_headers):
    response = client.post("/logic-scripts/chat", json = {"message": "  "}, headers = tenant_headers)

    assert response.status_code == 400


# ── Storefront pricing ────────────────────────────────────────────────────────

def test_pricing_endpoint(client, tenant_headers):
    create(
        client, tenant_headers,
        'set product.unitPrice = 12 when customer.tier == "gold" and product.sku == "A1"',
        trigger_point = "storefront_load"
    )

    response = client.post("/execute-logic-scripts/pricing", json = {
        "customer": {"tier": "gold"},
        "products": [{"sku": "A1", "unitPrice": 20}, {"sku": "B2", "unitPrice": 5}],
        "cart_items": [{"sku": "A1", "unitPrice": 20, "quantity": 2}],
    }, headers = tenant_headers)

    assert response.status_code == 200
    data = response.get_json()["data"]
    assert data["products"] == [
        {"sku": "A1", "unitPrice": 12, "originalPrice": 20},
        {"sku": "B2", "unitPrice": 5},
    ]
    assert data["cart_items"] == [{"sku": "A1", "unitPrice": 12, "quantity": 2, "originalPrice": 20}]


@pytest.mark.parametrize("body", [
    {},
    {"products": "A1"},
    {"cart_items": [1, 2]},
    {"products": [], "customer": "gold"},
])
def test_pricing_validation(client, tenant_headers, body):
    response = client.post("/execute-logic-scripts/pricing", json = body, headers = tenant_headers)

    assert response.status_code == 400

"""Access Routes — role gate on admin and user endpoints, plus health probes.

Tests cover:
    - Admin action: anonymous → 403, manager → 403, admin → 200
    - User provisioning requires the register permission and USER_CREATE rules
    - Created users never expose the password
    - Liveness and readiness probes
"""

from uuid import uuid4

from taskforge.core.domain_types import CallerIdentity


# ─── admin ───────────────────────────────────────────────────────

async def test_admin_action_anonymous_is_forbidden(client):
    res = await client.post("/api/v1/admin/admin-action")
    assert res.status_code == 403
    assert res.json() == {"message": "Forbidden"}


async def test_admin_action_manager_is_forbidden(client, login):
    login(CallerIdentity(id=uuid4(), role="manager"))
    res = await client.post("/api/v1/admin/admin-action")
    assert res.status_code == 403


async def test_admin_action_admin_passes(client, login, seed_admin):
    login(seed_admin)
    res = await client.post("/api/v1/admin/admin-action")
    assert res.status_code == 200
    assert res.json() == {"message": "Admin action performed."}


# ─── users ───────────────────────────────────────────────────────

async def test_plain_user_cannot_register_users(client, login, seed_user):
    login(seed_user)
    res = await client.post("/api/v1/users", json={
        "email": "new@example.com", "username": "new", "password": "password123",
    })
    assert res.status_code == 403


async def test_register_reports_invalid_email(client, login, seed_admin):
    login(seed_admin)
    res = await client.post("/api/v1/users", json={
        "email": "not-an-email", "username": "new", "password": "short",
    })
    assert res.status_code == 400
    assert res.json() == {"message": "Email is invalid"}


async def test_register_reports_short_password(client, login, seed_admin):
    login(seed_admin)
    res = await client.post("/api/v1/users", json={
        "email": "new@example.com", "username": "new", "password": "short",
    })
    assert res.status_code == 400
    assert res.json() == {"message": "Password must be at least 8 characters"}


async def test_register_rejects_unknown_role(client, login, seed_admin):
    login(seed_admin)
    res = await client.post("/api/v1/users", json={
        "email": "new@example.com", "username": "new",
        "password": "password123", "role": "root",
    })
    assert res.status_code == 400
    assert res.json()["message"].startswith("role")


async def test_register_and_fetch_user(client, login, seed_admin):
    login(seed_admin)
    res = await client.post("/api/v1/users", json={
        "email": "new@example.com", "username": "new",
        "password": "password123", "role": "viewer",
    })
    assert res.status_code == 201
    created = res.json()
    assert created["role"] == "viewer"
    assert "password" not in created

    res = await client.get(f"/api/v1/users/{created['id']}")
    assert res.status_code == 200
    assert res.json()["email"] == "new@example.com"


async def test_fetch_unknown_user_is_404(client, login, seed_admin):
    login(seed_admin)
    res = await client.get(f"/api/v1/users/{uuid4()}")
    assert res.status_code == 404


# ─── health ──────────────────────────────────────────────────────

async def test_liveness(client):
    res = await client.get("/api/v1/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_with_database(client):
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 200
    assert res.json() == {"status": "ready", "checks": {"database": "healthy"}}

def test_full_student_lifecycle_with_tokens(client, login):
    """Register, log in, create as a user, then manage the record as an admin"""
    assert client.post("/auth/register", json={"username": "ta", "password": "ta-pass"}).status_code == 201
    user_headers = {"Authorization": f"Bearer {login('ta', 'ta-pass')}"}
    admin_headers = {"Authorization": f"Bearer {login('teacher', 'teacher123')}"}

    created = client.post(
        "/students",
        json={"name": "Dana White", "email": "dana@example.com", "course": "History"},
        headers=user_headers,
    )
    assert created.status_code == 201
    student_id = created.json()["data"]["id"]

    assert client.patch(f"/students/{student_id}", json={"grade": "B"}, headers=user_headers).status_code == 403

    patched = client.patch(f"/students/{student_id}", json={"grade": "B"}, headers=admin_headers)
    assert patched.json()["data"]["grade"] == "B"

    replaced = client.put(
        f"/students/{student_id}",
        json={"name": "Dana W.", "email": "dana.w@example.com", "course": "History", "grade": "A"},
        headers=admin_headers,
    )
    assert replaced.status_code == 200

    found = client.get("/students/search", params={"name": "dana"}).json()
    assert found["count"] == 1
    assert found["data"][0]["email"] == "dana.w@example.com"

    assert client.delete(f"/students/{student_id}", headers=admin_headers).status_code == 200
    assert client.get(f"/students/{student_id}").status_code == 404
    assert client.get("/students").json()["count"] == 3


def test_open_mode_needs_no_token(open_client):
    """With auth disabled every student endpoint is open"""
    created = open_client.post(
        "/students", json={"name": "Eve", "email": "eve@example.com", "course": "Art"}
    )
    assert created.status_code == 201
    student_id = created.json()["data"]["id"]

    assert open_client.patch(f"/students/{student_id}", json={"grade": "C"}).status_code == 200
    assert open_client.put(
        f"/students/{student_id}",
        json={"name": "Eve", "email": "eve@example.com", "course": "Art", "grade": "B"},
    ).status_code == 200
    assert open_client.delete(f"/students/{student_id}").status_code == 200


def test_open_mode_has_no_auth_routes(open_client):
    response = open_client.post("/auth/login", json={"username": "teacher", "password": "teacher123"})
    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Endpoint not found"}


def test_stores_are_isolated_per_app(client, open_client):
    open_client.delete("/students/1")
    assert client.get("/students/1").status_code == 200

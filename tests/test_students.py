"""
Tests for the /student routes: insert, list, update title, update class, delete.
"""


def _by_rollid(client):
    response = client.get("/student")
    assert response.status_code == 200
    return {row["ROLLID"]: row for row in response.json()}


def test_empty_student_table_returns_empty_list(client):
    response = client.get("/student")
    assert response.status_code == 200
    assert response.json() == []


def test_insert_then_list_contains_student(client, student):
    response = client.post("/student", json=student)
    assert response.status_code == 200
    body = response.json()
    assert body == {"affectedRows": 1, "insertId": 1, "warningStatus": 0}

    rows = _by_rollid(client)
    assert rows[47] == student


def test_put_updates_only_title_and_section(client, student):
    client.post("/student", json=student)

    response = client.put("/student", json={"TITLE": "Chiran", "SECTION": "A", "ROLLID": 47})
    assert response.status_code == 200
    assert response.json()["affectedRows"] == 1

    row = _by_rollid(client)[47]
    assert row["TITLE"] == "Chiran"
    assert row["SECTION"] == "A"
    assert row["NAME"] == "Chiranjeevi"
    assert row["CLASS"] == "V"


def test_patch_updates_only_class_and_section(client, student):
    client.post("/student", json=student)

    response = client.patch("/student", json={"CLASS": "X", "SECTION": "D", "ROLLID": 47})
    assert response.status_code == 200
    assert response.json()["affectedRows"] == 1

    row = _by_rollid(client)[47]
    assert row["CLASS"] == "X"
    assert row["SECTION"] == "D"
    assert row["NAME"] == "Chiranjeevi"
    assert row["TITLE"] == "Gorantla"


def test_update_unknown_rollid_affects_nothing(client):
    response = client.put("/student", json={"TITLE": "Nobody", "SECTION": "Z", "ROLLID": 999})
    assert response.status_code == 200
    assert response.json()["affectedRows"] == 0


def test_delete_removes_only_that_student(client, student):
    client.post("/student", json=student)
    client.post("/student", json={**student, "NAME": "Ravi", "ROLLID": 48})

    response = client.delete("/student/47")
    assert response.status_code == 200
    assert response.json()["affectedRows"] == 1

    rows = _by_rollid(client)
    assert list(rows) == [48]
    assert rows[48]["NAME"] == "Ravi"


def test_delete_missing_student_is_still_ok(client):
    response = client.delete("/student/47")
    assert response.status_code == 200
    assert response.json()["affectedRows"] == 0


def test_insert_missing_field_is_rejected(client, student):
    del student["ROLLID"]
    response = client.post("/student", json=student)
    assert response.status_code == 422
    assert _by_rollid(client) == {}


def test_put_requires_rollid(client):
    response = client.put("/student", json={"TITLE": "Chiran", "SECTION": "A"})
    assert response.status_code == 422


def test_delete_non_numeric_id_is_rejected(client):
    response = client.delete("/student/abc")
    assert response.status_code == 422


def test_insert_id_only_reported_for_inserts(client, student):
    response = client.post("/student", json=student)
    assert response.json() == {"affectedRows": 1, "insertId": 1, "warningStatus": 0}

    # same pooled connection serves the next requests
    response = client.put("/student", json={"TITLE": "Chiran", "SECTION": "A", "ROLLID": 47})
    assert response.json() == {"affectedRows": 1, "insertId": 0, "warningStatus": 0}

    response = client.patch("/student", json={"CLASS": "X", "SECTION": "D", "ROLLID": 47})
    assert response.json() == {"affectedRows": 1, "insertId": 0, "warningStatus": 0}

    response = client.delete("/student/47")
    assert response.json() == {"affectedRows": 1, "insertId": 0, "warningStatus": 0}

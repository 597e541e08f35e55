from __future__ import annotations

from support import login_as


def _seat_map(fake_http, seats):
    fake_http.ok("GET", "/seats/42/map", {"rows": 5, "columns": 6, "seats": seats})


def test_invalid_scan_makes_no_api_call(web, fake_http):
    login_as(web)

    response = web.post("/attendance/scan", json={"text": "invalid"})

    assert response.status_code == 400
    body = response.get_json()
    assert body["state"] == {"status": "error", "message": "Invalid QR code"}
    assert body["scanner_active"] is True
    assert fake_http.calls_to("POST", "/attendance/log") == []


def test_valid_scan_logs_attendance(web, fake_http):
    login_as(web)
    fake_http.ok(
        "POST",
        "/attendance/log",
        {"id": 1, "student": {"id": 7, "firstName": "Ana", "lastName": "Cruz"}, "section": {"id": 42}, "date": "2024-03-04"},
    )

    response = web.post("/attendance/scan", json={"text": "attend:42"})

    assert response.status_code == 200
    body = response.get_json()
    assert body["state"]["status"] == "success"
    assert body["scanner_active"] is False
    [call] = fake_http.calls_to("POST", "/attendance/log")
    assert call.json == {"sectionId": 42}
    assert call.headers["Authorization"] == "Bearer jwt-token"


def test_duplicate_scan_rearms_scanner(web, fake_http):
    login_as(web)
    fake_http.fail("POST", "/attendance/log", 400, "Attendance already recorded for today")

    response = web.post("/attendance/scan", json={"text": "attend:42"})

    assert response.status_code == 400
    assert response.get_json()["scanner_active"] is True


def test_seat_plan_marks_own_seat(web, fake_http):
    login_as(web)
    _seat_map(
        fake_http,
        [
            {"id": 1, "row": 2, "column": 3, "student": {"id": 7, "firstName": "Ana", "lastName": "Cruz"}},
            {"id": 2, "row": 0, "column": 0, "student": {"id": 8, "firstName": "Ben", "lastName": "Uy"}},
        ],
    )
    fake_http.ok("GET", "/seats/student", {"id": 1, "row": 2, "column": 3, "studentId": 7})

    response = web.get("/sections/42/seats")

    assert response.status_code == 200
    body = response.get_json()
    cells = body["state"]["data"]["cells"]
    assert cells[2][3]["state"] == "MINE"
    assert cells[0][0]["state"] == "TAKEN"
    assert cells[0][0]["selectable"] is False
    assert cells[1][1]["state"] == "AVAILABLE"
    assert body["my_seat_label"] == "A3"


def test_seat_plan_without_picked_seat(web, fake_http):
    login_as(web)
    _seat_map(fake_http, [])
    fake_http.fail("GET", "/seats/student", 404)

    body = web.get("/sections/42/seats").get_json()

    assert body["my_seat"] is None


def test_picking_a_taken_seat_is_refused_locally(web, fake_http):
    login_as(web)
    _seat_map(fake_http, [{"id": 2, "row": 0, "column": 0, "student": {"id": 8, "firstName": "Ben", "lastName": "Uy"}}])

    response = web.post("/sections/42/seats/pick", json={"row": 0, "column": 0})

    assert response.status_code == 400
    assert fake_http.calls_to("POST", "/seats/pick") == []


def test_pick_shows_server_message_when_seat_map_fails(web, fake_http):
    login_as(web)
    fake_http.fail("GET", "/seats/42/map", 500)

    response = web.post("/sections/42/seats/pick", json={"row": 1, "column": 2})

    assert response.status_code == 400
    assert response.get_json()["state"] == {"status": "error", "message": "Server error: Please try again later"}
    assert fake_http.calls_to("POST", "/seats/pick") == []


def test_select_shows_server_message_when_seat_map_fails(web, fake_http):
    login_as(web)
    fake_http.fail("GET", "/seats/42/map", 400, "Section has no seat plan")

    response = web.post("/sections/42/seats/select", json={"row": 0, "column": 0})

    assert response.status_code == 400
    assert response.get_json()["state"]["message"] == "Section has no seat plan"


def test_pick_seat(web, fake_http):
    login_as(web)
    _seat_map(fake_http, [])
    fake_http.ok("GET", "/sections/42", {"id": 42, "sectionName": "G01"})
    fake_http.ok("POST", "/seats/pick", {"id": 9, "row": 1, "column": 2, "studentId": 7})

    response = web.post("/sections/42/seats/pick", json={"row": 1, "column": 2})

    assert response.status_code == 200
    assert response.get_json()["state"] == {"status": "success", "data": "Seat selected successfully"}
    [call] = fake_http.calls_to("POST", "/seats/pick")
    assert call.json == {"studentId": 7, "sectionId": 42, "row": 1, "column": 2}


def test_calendar_month(web, fake_http):
    login_as(web)
    fake_http.ok(
        "GET",
        "/analytics/42/students/7",
        {"studentId": 7, "attendanceByDate": {"2024-03-04": True, "2024-03-06": False}},
    )
    fake_http.ok("GET", "/schedules", [])
    fake_http.ok("GET", "/attendance/student/7", [])

    response = web.get("/sections/42/calendar?month=2024-03")

    assert response.status_code == 200
    body = response.get_json()
    assert len(body["state"]["data"]) == 42
    assert body["counts"]["PRESENT"] == 1
    assert body["counts"]["ABSENT"] == 1
    assert body["month"] == "2024-03"


def test_bad_month_is_400(web):
    login_as(web)

    assert web.get("/sections/42/calendar?month=March").status_code == 400

"""Tests for the HTTP endpoints, against a temporary SQLite database."""


class TestCheckDate:
    def test_holiday(self, client):
        resp = client.get("/festivos/verificar/2025/1/1")
        assert resp.status_code == 200
        data = resp.get_json()
        assert data["success"] is True
        assert data["date"] == "2025-01-01"
        assert data["is_holiday"] is True
        assert data["name"] == "Año Nuevo"
        assert data["message"] == "Es festivo"

    def test_zero_padded_input(self, client):
        resp = client.get("/festivos/verificar/2025/04/17")
        assert resp.get_json()["name"] == "Jueves Santo"

    def test_monday_shifted_holiday(self, client):
        resp = client.get("/festivos/verificar/2025/7/21")
        assert resp.get_json()["is_holiday"] is False

        resp = client.get("/festivos/verificar/2025/3/24")
        assert resp.get_json()["name"] == "San José"

    def test_regular_day(self, client):
        resp = client.get("/festivos/verificar/2025/3/12")
        assert resp.status_code == 200
        data = resp.get_json()
        assert data["is_holiday"] is False
        assert data["name"] is None
        assert data["message"] == "No es festivo"

    def test_not_a_number(self, client):
        resp = client.get("/festivos/verificar/2025/abc/1")
        assert resp.status_code == 400
        assert resp.get_json() == {
            "success": False,
            "error": "Año, mes o día no son números válidos.",
        }

        resp = client.get("/festivos/verificar/dosmil/1/1")
        assert resp.status_code == 400

    def test_impossible_date(self, client):
        resp = client.get("/festivos/verificar/2025/2/30")
        assert resp.status_code == 400
        assert resp.get_json()["error"] == "Fecha no válida"

    def test_digit_separators_are_not_numbers(self, client):
        for path in ("/festivos/verificar/2025/1_2/2_5", "/festivos/verificar/2_025/1/1"):
            resp = client.get(path)
            assert resp.status_code == 400
            assert resp.get_json()["error"] == "Año, mes o día no son números válidos."

    def test_short_year_is_rejected(self, client):
        resp = client.get("/festivos/verificar/25/1/1")
        assert resp.status_code == 400
        assert resp.get_json()["error"] == "Fecha no válida"

    def test_broken_rule_is_a_server_error(self, client, broken_rule):
        resp = client.get("/festivos/verificar/2025/1/1")
        assert resp.status_code == 500
        assert resp.get_json()["error"] == "Error interno del servidor"


class TestListHolidays:
    def test_lists_seeded_rules_in_order(self, client, default_rules):
        resp = client.get("/festivos/listar/2025")
        assert resp.status_code == 200
        data = resp.get_json()
        assert [h["name"] for h in data] == [r.name for r in default_rules]
        assert data[0]["date"] == "2025-01-01"

    def test_resolved_fields(self, client):
        data = client.get("/festivos/listar/2025").get_json()
        by_name = {h["name"]: h for h in data}

        jueves = by_name["Jueves Santo"]
        assert jueves["date"] == "2025-04-17"
        assert (jueves["day"], jueves["month"]) == (17, 4)
        assert jueves["easter_offset_days"] == -3
        assert jueves["rule_type"] == 3
        assert isinstance(jueves["id"], int)

        assert by_name["Corpus Christi"]["date"] == "2025-06-23"

    def test_year_out_of_range(self, client):
        for year in (0, 10000):
            resp = client.get(f"/festivos/listar/{year}")
            assert resp.status_code == 400
            assert resp.get_json() == {"success": False, "error": "Año no válido"}

    def test_non_numeric_year(self, client):
        resp = client.get("/festivos/listar/abc")
        assert resp.status_code == 404
        assert resp.get_json()["success"] is False

    def test_broken_rule_is_a_server_error(self, client, broken_rule):
        resp = client.get("/festivos/listar/2025")
        assert resp.status_code == 500
        assert resp.get_json()["error"] == "Error interno del servidor"


class TestInitDb:
    def test_disabled_by_default(self, client, monkeypatch):
        monkeypatch.delenv("ENABLE_INITDB", raising=False)
        assert client.get("/initdb").status_code == 404

    def test_enabled_does_not_duplicate_rules(self, client, monkeypatch, default_rules):
        monkeypatch.setenv("ENABLE_INITDB", "true")
        assert client.get("/initdb").status_code == 200
        assert len(client.get("/festivos/listar/2025").get_json()) == len(default_rules)

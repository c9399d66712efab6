from keysmith.generator import SamplingMode
from spweb.api import app


def _client():
    app.config["TESTING"] = True
    return app.test_client()


def test_home():
    r = _client().get("/")
    assert r.status_code == 200
    assert "running" in r.get_json()["message"]


def test_classes():
    data = _client().get("/classes").get_json()
    assert data["digit"] == "1234567890"
    assert data["symbol"] == "@#$&.!"


def test_generate_ok():
    r = _client().post("/generate", json={"length": "12", "hasLowerCase": True, "hasDigit": True})
    assert r.status_code == 200
    data = r.get_json()
    assert data["length"] == 12
    assert len(data["password"]) == 12
    assert all(c.islower() or c.isdigit() for c in data["password"])


def test_generate_snake_case_flags():
    r = _client().post("/generate", json={"length": 6, "has_symbol": True})
    assert r.status_code == 200
    assert all(c in "@#$&.!" for c in r.get_json()["password"])


def test_generate_bad_length():
    r = _client().post("/generate", json={"length": 2, "hasLowerCase": True})
    assert r.status_code == 400
    data = r.get_json()
    assert data["field"] == "passwordLength"
    assert data["error"] == "Should be of min 4 characters"

    r = _client().post("/generate", json={})
    assert r.status_code == 400
    assert r.get_json()["error"] == "Password Length is required."


def test_generate_no_classes():
    r = _client().post("/generate", json={"length": 8})
    assert r.status_code == 200
    assert r.get_json()["password"] == ""

    r = _client().post("/generate", json={"length": 8, "strict": True})
    assert r.status_code == 400


def test_flags_must_be_booleans():
    r = _client().post("/generate", json={"length": 8, "hasLowerCase": "false", "hasDigit": True})
    assert r.status_code == 400
    assert r.get_json()["field"] == "hasLowerCase"

    r = _client().post("/generate", json={"length": 8, "hasDigit": True, "legacy": "no"})
    assert r.status_code == 400


def test_false_flag_disables_class():
    r = _client().post("/generate", json={"length": 8, "hasLowerCase": False, "hasDigit": True})
    assert r.status_code == 200
    assert r.get_json()["password"].isdigit()


def test_body_must_be_an_object():
    r = _client().post("/generate", json=[8])
    assert r.status_code == 400
    assert r.get_json()["field"] == "body"


def test_legacy_switch(monkeypatch):
    calls = []

    def fake_generate(req, **options):
        calls.append(options)
        return "a" * req.length

    monkeypatch.setattr("spweb.api.generate", fake_generate)
    _client().post("/generate", json={"length": 8, "hasLowerCase": True, "legacy": True})
    _client().post("/generate", json={"length": 8, "hasLowerCase": True})
    assert calls[0]["sampling"] is SamplingMode.LEGACY
    assert calls[1]["sampling"] is SamplingMode.UNIFORM

from src.services.health import health_payload


def test_health_payload():
    assert health_payload() == {"status": "OK", "message": "KhataSathi API running"}

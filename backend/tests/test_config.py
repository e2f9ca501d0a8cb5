from fourpillars.config import Settings


def test_cors_origins_split_and_trimmed():
    s = Settings(cors_origins_raw=" https://a.example , ,https://b.example")
    assert s.cors_origins() == ["https://a.example", "https://b.example"]


def test_cors_origins_empty_by_default():
    assert Settings(cors_origins_raw="").cors_origins() == []


def test_birth_year_range_from_env(monkeypatch):
    monkeypatch.setenv("MIN_BIRTH_YEAR", "1900")
    assert Settings().min_birth_year == 1900

import pytest

from core import config, db


def test_store_backend_defaults_to_postgres(monkeypatch):
    monkeypatch.delenv("CUSTOMER_STORE", raising=False)
    assert config.store_backend() == "postgres"


def test_store_backend_is_case_insensitive(monkeypatch):
    monkeypatch.setenv("CUSTOMER_STORE", " Memory ")
    assert config.store_backend() == "memory"


def test_unknown_store_backend_raises(monkeypatch):
    monkeypatch.setenv("CUSTOMER_STORE", "redis")
    with pytest.raises(RuntimeError):
        config.store_backend()


def test_cors_origins_split(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test,")
    assert config.cors_origins() == ["http://a.test", "http://b.test"]


def test_invalid_int_falls_back_to_default(monkeypatch):
    monkeypatch.setenv("DB_POOL_MAX_SIZE", "lots")
    assert config.db_pool_max_size() == 5


def test_database_url_strips_sslmode(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@db:5432/app?sslmode=require&application_name=cs")
    assert db.database_url() == "postgresql://u:p@db:5432/app?application_name=cs"


def test_database_url_required(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    with pytest.raises(RuntimeError):
        db.database_url()

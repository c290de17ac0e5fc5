import pytest

from src.platform.config.core_setting import Settings


pytestmark = pytest.mark.unit


class TestBackendCorsOrigins:
    def test_comma_separated_env_value(self, monkeypatch):
        monkeypatch.setenv('BACKEND_CORS_ORIGINS', 'http://localhost:3000, http://example.com')

        assert Settings().BACKEND_CORS_ORIGINS == ['http://localhost:3000', 'http://example.com']

    def test_json_list_env_value(self, monkeypatch):
        monkeypatch.setenv('BACKEND_CORS_ORIGINS', '["http://localhost:3000"]')

        assert Settings().BACKEND_CORS_ORIGINS == ['http://localhost:3000']

    def test_single_origin_from_env_file(self, monkeypatch, tmp_path):
        # Same shape as .env.example
        monkeypatch.delenv('BACKEND_CORS_ORIGINS', raising=False)
        env_file = tmp_path / '.env'
        env_file.write_text('BACKEND_CORS_ORIGINS=http://localhost:3000\n')

        settings = Settings(_env_file=str(env_file))

        assert settings.BACKEND_CORS_ORIGINS == ['http://localhost:3000']

    def test_list_value_kept(self):
        assert Settings(BACKEND_CORS_ORIGINS=['http://a.test']).BACKEND_CORS_ORIGINS == [
            'http://a.test'
        ]


def test_database_url_uses_asyncpg(monkeypatch):
    monkeypatch.setenv('POSTGRES_SERVER', 'db.internal')
    monkeypatch.setenv('POSTGRES_DB', 'calendar')

    url = Settings().DATABASE_URL_ASYNC

    assert url.startswith('postgresql+asyncpg://')
    assert url.endswith('@db.internal:5432/calendar')

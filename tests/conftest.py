import pytest
from fastapi.testclient import TestClient

from tv_api.core.config import Settings
from tv_api.core.database import Database
from tv_api.main import create_app
from tv_api.repositories.channel_store import ChannelStore
from tv_api.services.channel_service import ChannelService


@pytest.fixture
def settings(tmp_path):
    s = Settings()
    s.DATABASE_URL = f"sqlite:///{tmp_path / 'tv_test.db'}"
    s.ENABLE_DOCS = False
    s.API_BASE_URL = "http://testserver"
    return s


@pytest.fixture
def database(settings):
    db = Database(settings.DATABASE_URL)
    db.create_all()
    yield db
    db.dispose()


@pytest.fixture
def session(database):
    db = database.session()
    yield db
    db.close()


@pytest.fixture
def service(session):
    return ChannelService(ChannelStore(session))


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    # Context manager runs startup (table creation) and shutdown
    with TestClient(app) as c:
        yield c


def channel_payload(channel_id=1, **overrides):
    payload = {
        "id": channel_id,
        "name": f"Channel {channel_id}",
        "url": f"http://streams.test/{channel_id}.m3u8",
        "enabled": True,
        "category": ["news"],
    }
    payload.update(overrides)
    return payload

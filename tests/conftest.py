import pytest

from hello_host import Config, create_app


@pytest.fixture
def app():
    """HOSTNAME=server-1 로 설정된 테스트 앱"""
    flask_app = create_app(Config(hostname='server-1'))
    flask_app.config['TESTING'] = True
    return flask_app


@pytest.fixture
def client(app):
    with app.test_client() as client:
        yield client

import pytest

from imagebyname.config import Config
from imagebyname.main import create_app
from imagebyname.resolver import ImageResolver

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 16
JPEG_BYTES = b"\xff\xd8\xff\xe0" + b"\x00" * 16


@pytest.fixture
def data_path(tmp_path):
    return tmp_path / "images"


@pytest.fixture
def config(data_path):
    return Config({
        "IMAGES_DATA_PATH": str(data_path),
        "IMAGES_EXTENSIONS": ".png,.jpg",
    })


@pytest.fixture
def resolver(config):
    return ImageResolver(config)


@pytest.fixture
def make_image():
    def write(path, data=PNG_BYTES):
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        return path

    return write


@pytest.fixture
def app(config):
    return create_app(config)


@pytest.fixture
def client(app):
    return app.test_client()

import json

import pytest

from indent_rainbow.color import Color
from indent_rainbow.config import ConfigService, IrConfig
from indent_rainbow.scheme import ColorScheme, SchemeStore

DARK_BACKGROUND = Color(30, 30, 30, 255)
LIGHT_BACKGROUND = Color(240, 240, 240, 255)


@pytest.fixture
def dark_scheme():
    return ColorScheme("Darcula", DARK_BACKGROUND)


@pytest.fixture
def light_scheme():
    return ColorScheme("IntelliJ Light", LIGHT_BACKGROUND)


@pytest.fixture
def store(dark_scheme, light_scheme):
    return SchemeStore([dark_scheme, light_scheme])


@pytest.fixture
def config():
    return IrConfig()


@pytest.fixture
def config_service(config):
    return ConfigService(config)


@pytest.fixture
def schemes_file(tmp_path):
    data = {
        "_note": "test schemes",
        "Darcula": {"background": "#1e1e1e"},
        "IntelliJ Light": {
            "background": "#f0f0f0",
            "attributes": {"OTHER_KEY": "#112233"},
        },
        "_current": "Darcula",
    }
    path = tmp_path / "schemes.json"
    path.write_text(json.dumps(data))
    return path

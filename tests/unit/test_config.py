from pathlib import Path

import pytest

from eventboard.config import Settings


def test_settings_defaults() -> None:
    settings = Settings.from_env({})

    assert settings.events_path == Path("data/events.json")
    assert settings.images_path == Path("data/images.json")
    assert settings.public_dir == Path("public")
    assert settings.port == 3000
    assert settings.log_level == "INFO"


def test_settings_read_prefixed_environment() -> None:
    settings = Settings.from_env(
        {
            "EVENTBOARD_DATA_DIR": "/srv/events",
            "EVENTBOARD_EVENTS_FILE": "listing.json",
            "EVENTBOARD_PORT": "8080",
            "EVENTBOARD_LOG_LEVEL": "debug",
            "EVENTBOARD_HOST": " ",
        }
    )

    assert settings.events_path == Path("/srv/events/listing.json")
    assert settings.port == 8080
    assert settings.log_level == "DEBUG"
    assert settings.host == "0.0.0.0"


@pytest.mark.parametrize("port", ["http", "0", "70000"])
def test_settings_reject_bad_port(port: str) -> None:
    with pytest.raises(ValueError, match="EVENTBOARD_PORT"):
        Settings.from_env({"EVENTBOARD_PORT": port})

import pytest

from common import config


@pytest.fixture(autouse=True)
def _no_local_settings(monkeypatch, tmp_path):
    # Keep a developer's local secrets.toml and .env out of the tests
    monkeypatch.setattr(config, "_secret", lambda section, key: None)
    monkeypatch.setattr(config, "DOTENV_PATH", str(tmp_path / "missing.env"))


@pytest.fixture
def sample_rows():
    return [
        {"id": "1", "player": "Ann", "opponent": "Bo", "format": "Modern",
         "playerDeck": "Burn", "opponentDeck": "Control", "games": "2-1",
         "playDraw": "Play", "sideboardStatus": "", "date": "2024-05-01"},
        {"id": "2", "player": "Cy", "opponent": "Ann", "format": "Modern",
         "playerDeck": "Tron", "opponentDeck": "Burn", "games": "0-2",
         "date": "2024-05-02"},
    ]

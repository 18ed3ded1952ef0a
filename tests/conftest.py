import pytest

import caesar_cipher


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    monkeypatch.setattr(caesar_cipher, "VERBOSE", False)


@pytest.fixture
def run_cli(capsys):
    def run(*argv):
        caesar_cipher.main(list(argv))
        return capsys.readouterr()

    return run

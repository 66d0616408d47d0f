from shortly.core.config import Settings
from shortly.main import main
from shortly.utils.encoding import DEFAULT_ALPHABET


def test_settings_defaults(monkeypatch):
    for name in ("ALPHABET", "PROTOCOL", "START_ID"):
        monkeypatch.delenv(name, raising=False)
    s = Settings()
    assert s.ALPHABET == DEFAULT_ALPHABET
    assert s.PROTOCOL == "http://short.ly/"
    assert s.START_ID == 4097


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("PROTOCOL", "https://sho.rt/")
    monkeypatch.setenv("START_ID", "10")
    s = Settings()
    assert s.PROTOCOL == "https://sho.rt/"
    assert s.START_ID == 10


def test_main_shortens_arguments(capsys):
    assert main(["http://www.google.com", "https://www.cics.umass.edu"]) == 0
    out = capsys.readouterr().out
    assert "http://www.google.com -> http://short.ly/bef" in out
    assert "https://www.cics.umass.edu -> http://short.ly/beg" in out


def test_main_without_arguments(capsys):
    assert main([]) == 2
    assert "usage" in capsys.readouterr().err

from entry_tracker.config import DEFAULT_CONFIG, load_config
from entry_tracker.core.models import DisplayOption
from entry_tracker.settings import SettingsStore


def test_display_option_defaults_when_missing(tmp_path):
    store = SettingsStore(tmp_path / "settings.yaml")
    assert store.get_display_option() is DisplayOption.SECTION_LIST_BY_DATE


def test_display_option_round_trip(tmp_path):
    path = tmp_path / "nested" / "settings.yaml"
    SettingsStore(path).set_display_option(DisplayOption.SPREADSHEET)
    assert SettingsStore(path).get_display_option() is DisplayOption.SPREADSHEET
    assert "displayOption: 3" in path.read_text()


def test_unknown_display_option_falls_back(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("displayOption: 9\n")
    assert SettingsStore(path).get_display_option() is DisplayOption.SECTION_LIST_BY_DATE
    path.write_text("displayOption: nonsense\n")
    assert SettingsStore(path).get_display_option() is DisplayOption.SECTION_LIST_BY_DATE


def test_generic_keys_preserved(tmp_path):
    store = SettingsStore(tmp_path / "settings.yaml")
    store.set("currency", "EUR")
    store.set_display_option(DisplayOption.FLAT_LIST)
    assert store.get("currency") == "EUR"
    assert store.get("missing", "fallback") == "fallback"


def test_load_config_defaults_when_missing(tmp_path, monkeypatch):
    monkeypatch.delenv("DAYBOOK_DB", raising=False)
    monkeypatch.delenv("DAYBOOK_SETTINGS", raising=False)
    cfg = load_config(tmp_path / "nope.yaml")
    assert cfg == DEFAULT_CONFIG


def test_load_config_merges_defaults(tmp_path, monkeypatch):
    monkeypatch.delenv("DAYBOOK_DB", raising=False)
    monkeypatch.delenv("DAYBOOK_SETTINGS", raising=False)
    path = tmp_path / "config.yaml"
    path.write_text(
        "db_path: custom.db\n"
        "output_modules:\n"
        "  csv: my.module.Output\n"
    )
    cfg = load_config(path)
    assert cfg["db_path"] == "custom.db"
    assert cfg["output_modules"]["csv"] == "my.module.Output"
    assert cfg["output_modules"]["excel"] == DEFAULT_CONFIG["output_modules"]["excel"]
    assert cfg["storage_backend"] == "sqlite"


def test_load_config_env_overrides(tmp_path, monkeypatch):
    monkeypatch.setenv("DAYBOOK_DB", str(tmp_path / "env.db"))
    cfg = load_config(None)
    assert cfg["db_path"] == str(tmp_path / "env.db")

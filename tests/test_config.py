import pytest

from config import MockSettings, SEED_ENV_VAR, load_settings


@pytest.fixture(autouse=True)
def _no_seed_env(monkeypatch):
    monkeypatch.delenv(SEED_ENV_VAR, raising=False)


def test_missing_file_gives_defaults(tmp_path):
    settings = load_settings(str(tmp_path / "absent.ini"))
    assert settings == MockSettings()
    assert (settings.today_job_count, settings.week_job_count, settings.month_job_count) == (50, 200, 500)


def test_values_read_from_ini(tmp_path):
    ini = tmp_path / "mock.ini"
    ini.write_text("[mockdata]\nweek_job_count = 12\nseed = 5\n", encoding="utf-8")

    settings = load_settings(str(ini))
    assert settings.week_job_count == 12
    assert settings.today_job_count == 50
    assert settings.seed == 5


def test_blank_seed_means_random(tmp_path):
    ini = tmp_path / "mock.ini"
    ini.write_text("[mockdata]\nseed =\n", encoding="utf-8")
    assert load_settings(str(ini)).seed is None


def test_env_seed_overrides_file(tmp_path, monkeypatch):
    ini = tmp_path / "mock.ini"
    ini.write_text("[mockdata]\nseed = 5\n", encoding="utf-8")
    monkeypatch.setenv(SEED_ENV_VAR, "77")
    assert load_settings(str(ini)).seed == 77


@pytest.mark.parametrize("body", [
    "[mockdata]\nmonth_job_count = lots\n",
    "[mockdata]\ntoday_window_days = -1\n",
])
def test_invalid_values_raise(tmp_path, body):
    ini = tmp_path / "mock.ini"
    ini.write_text(body, encoding="utf-8")
    with pytest.raises(ValueError):
        load_settings(str(ini))


def test_missing_section_header_raises_value_error(tmp_path):
    ini = tmp_path / "mock.ini"
    ini.write_text("week_job_count = 12\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_settings(str(ini))

import os

import pytest

import main
from config import CalendarConfig, ConfigError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("CALENDAR_SEED", "CALENDAR_PLOT_DIR", "CALENDAR_LOG_LEVEL", "CALENDAR_ACTOR_BASE"):
        monkeypatch.delenv(name, raising=False)


def test_config_defaults():
    config = CalendarConfig.from_env({})
    assert config.seed is None
    assert config.plot_dir == "plots"
    assert config.log_level == "INFO"
    assert config.actor_base == "simpleSystemBase"


def test_config_from_env():
    config = CalendarConfig.from_env({
        "CALENDAR_SEED": "12",
        "CALENDAR_PLOT_DIR": "/tmp/charts",
        "CALENDAR_LOG_LEVEL": "debug",
    })
    assert config.seed == 12
    assert config.plot_dir == "/tmp/charts"
    assert config.log_level == "DEBUG"


def test_build_requests_for_day():
    args = main.build_parser().parse_args(["March", "3", "--plot"])
    assert [r["type"] for r in main.build_requests(args)] == ["get_day", "plot_day"]


def test_build_requests_for_month():
    args = main.build_parser().parse_args(["March"])
    assert [r["type"] for r in main.build_requests(args)] == ["get_month_summary"]
    args = main.build_parser().parse_args(["March", "--plot"])
    assert [r["type"] for r in main.build_requests(args)] == ["get_month_summary", "plot_month"]
    args = main.build_parser().parse_args(["March", "3", "--summary"])
    assert [r["type"] for r in main.build_requests(args)] == ["get_day", "get_month_summary"]


def test_main_lists_months(capsys):
    assert main.main([]) == 0
    out = capsys.readouterr().out
    assert "February   28 days" in out
    assert out.count("days") == 12


def test_main_prints_day_and_summary(capsys, tmp_path):
    code = main.main(["January", "5", "--summary", "--seed", "3", "--plot-dir", str(tmp_path)])
    assert code == 0
    out = capsys.readouterr().out
    assert "Day 5 of January" in out
    assert "Summary for January:" in out


def test_main_seed_is_reproducible(capsys, tmp_path):
    main.main(["August", "--seed", "8", "--plot-dir", str(tmp_path)])
    first = capsys.readouterr().out
    main.main(["August", "--seed", "8", "--plot-dir", str(tmp_path)])
    assert capsys.readouterr().out == first


def test_main_rejects_invalid_day(capsys, tmp_path):
    assert main.main(["February", "30", "--plot-dir", str(tmp_path)]) == 2
    assert "February has no day 30" in capsys.readouterr().err


def test_main_plots_month(capsys, tmp_path):
    assert main.main(["October", "--plot", "--seed", "1", "--plot-dir", str(tmp_path)]) == 0
    assert len(os.listdir(tmp_path)) == 2


def test_config_rejects_bad_seed():
    with pytest.raises(ConfigError, match="CALENDAR_SEED"):
        CalendarConfig.from_env({"CALENDAR_SEED": "abc"})


def test_main_exits_on_bad_seed_env(monkeypatch, capsys):
    monkeypatch.setenv("CALENDAR_SEED", "abc")
    assert main.main(["January"]) == 2
    assert "CALENDAR_SEED" in capsys.readouterr().err


class UndeliverableSystem:
    """Actor system stand-in whose replies are never dicts"""

    def __init__(self, base):
        self.stopped = False

    def createActor(self, actor_class):
        return "calendar"

    def ask(self, actor, message, timeout):
        return object()

    def tell(self, actor, message):
        pass

    def shutdown(self):
        self.stopped = True


def test_main_fails_on_non_dict_reply(monkeypatch, capsys, tmp_path):
    monkeypatch.setattr(main, "ActorSystem", UndeliverableSystem)
    assert main.main(["June", "--plot-dir", str(tmp_path)]) == 1
    assert capsys.readouterr().out == ""

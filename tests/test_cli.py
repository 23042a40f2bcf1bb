"""timedlog command-line tool."""

import io
import json

from timedlog.tools import replay as cli


def run(argv, capsys, stdin_text=None, monkeypatch=None):
    if stdin_text is not None:
        monkeypatch.setattr("sys.stdin", io.StringIO(stdin_text))
    code = cli.main(argv)
    return code, capsys.readouterr().out


class TestRecord:
    def test_record_from_stdin_saves_to_home(self, config_dir, tmp_path, capsys, monkeypatch):
        code, out = run(["record", "autoMove1"], capsys, "0.1,0.2\n\nbogus\n0.3,0.4\n", monkeypatch)
        assert code == 0
        saved = list((tmp_path / "home").glob("autoMove1_*.csv"))
        assert len(saved) == 1
        assert "wrote 2 entries" in out

    def test_line_with_empty_field_is_rejected(self, config_dir, tmp_path, capsys, monkeypatch):
        code, out = run(["record", "gaps"], capsys, "1,,2\n3,4,5\n", monkeypatch)
        assert code == 0
        assert "wrote 1 entries" in out
        saved = next((tmp_path / "home").glob("gaps_*.csv"))
        assert saved.read_text().splitlines()[0].split(",")[1:] == ["3.0", "4.0", "5.0"]


class TestShowAndReplay:
    def _write(self, tmp_path):
        home = tmp_path / "home"
        home.mkdir()
        (home / "demo_2023_06_01_00_00_00.csv").write_text("0,1,2\n0,3,4\n0,0,0\n")
        return home

    def test_show_prints_summary(self, config_dir, tmp_path, capsys):
        self._write(tmp_path)
        code, out = run(["show", "demo"], capsys)
        summary = json.loads(out.strip().splitlines()[-1])
        assert code == 0
        assert summary["name"] == "demo"
        assert summary["entries"] == 3
        assert summary["replayable"] == 2
        assert summary["arity"] == [2]

    def test_replay_runs_to_finished(self, config_dir, tmp_path, capsys):
        self._write(tmp_path)
        code, out = run(["replay", "--file", "demo_2023_06_01_00_00_00.csv"], capsys)
        lines = [json.loads(line) for line in out.strip().splitlines()]
        assert code == 0
        assert lines[-1] == {"cursor": 2, "finished": True}

    def test_dir_accepts_a_plain_path(self, config_dir, tmp_path, capsys):
        elsewhere = tmp_path / "elsewhere"
        elsewhere.mkdir()
        (elsewhere / "demo_2023_06_01_00_00_00.csv").write_text("0,1\n1,2\n")
        code, out = run(["show", "demo", "--dir", str(elsewhere)], capsys)
        assert code == 0
        assert json.loads(out.strip().splitlines()[-1])["entries"] == 2

    def test_missing_log_exits_with_error(self, config_dir, capsys):
        code, _ = run(["show", "nothing"], capsys)
        assert code == 2

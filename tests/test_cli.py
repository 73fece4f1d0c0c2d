import json

from main import main


def test_cli_prints_stats_and_ascii(capsys):
    assert main(["--seed", "11", "--rooms", "6", "--ascii"]) == 0
    out = capsys.readouterr().out
    assert "room_count" in out
    assert "E" in out


def test_cli_saves_and_loads_settings(tmp_path, capsys):
    path = tmp_path / "train.json"
    assert main(["--setting", "train", "--save-settings", str(path)]) == 0
    assert json.loads(path.read_text(encoding='utf-8'))['setting'] == 'train'

    assert main(["--settings", str(path), "--check"]) == 0
    assert "Validation" in capsys.readouterr().out


def test_cli_reports_unreadable_settings(tmp_path):
    assert main(["--settings", str(tmp_path / "missing.json")]) == 1


def test_cli_check_accepts_train_layout_with_wide_padding(tmp_path, capsys):
    path = tmp_path / "train.json"
    assert main(["--setting", "train", "--save-settings", str(path)]) == 0
    data = json.loads(path.read_text(encoding='utf-8'))
    data['padding_units'] = 2
    path.write_text(json.dumps(data), encoding='utf-8')

    assert main(["--settings", str(path), "--seed", "3", "--check"]) == 0
    assert "ROOM-001" not in capsys.readouterr().out

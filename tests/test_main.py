"""
End-to-end tests for the command line entry point with scripted stdin.
"""

import builtins
import itertools

import pytest

import main


def _feed(monkeypatch, answers):
    """Answer prompts from a list, then keep shooting."""
    replies = itertools.chain(answers, itertools.repeat("2"))
    monkeypatch.setattr(builtins, "input", lambda prompt="": next(replies))


def _args(*extra):
    return main.build_parser().parse_args(["--seed", "3", *extra])


class TestRun:

    def test_full_match_to_completion(self, monkeypatch, capsys):
        # mode Unrated, name, agent 1, then buy a Rifle and keep shooting
        _feed(monkeypatch, ["1", "Alice", "1", "3", "2"])

        assert main.run(_args()) == 0

        out = capsys.readouterr().out
        assert "Welcome to Text-Based Valorant!" in out
        assert "=== Turn: Alice ===" in out
        assert "Alice purchased a Rifle." in out
        assert ("Congratulations! Alice wins!" in out) or ("You lost! Better luck next time." in out)

    def test_invalid_mode_exits(self, monkeypatch, capsys):
        _feed(monkeypatch, ["9"])
        assert main.run(_args()) == 1
        assert "Invalid choice!" in capsys.readouterr().out

    def test_competitive_purchase_is_unaffordable(self, monkeypatch, capsys):
        _feed(monkeypatch, ["2", "Bob", "1", "3", "2"])
        main.run(_args())
        assert "Bob does not have enough credits to purchase the weapon." in capsys.readouterr().out

    def test_missing_agents_file_is_fatal(self, monkeypatch, tmp_path):
        _feed(monkeypatch, [])
        with pytest.raises(SystemExit) as exc:
            monkeypatch.setattr("sys.argv", ["main.py", "--agents", str(tmp_path / "none.txt")])
            main.main()
        assert exc.value.code == 1

    def test_debug_prints_log(self, monkeypatch, capsys):
        _feed(monkeypatch, ["1", "Alice", "1"])
        main.run(_args("--debug"))
        assert "--- Match log ---" in capsys.readouterr().out

    def test_save_log(self, monkeypatch, tmp_path):
        _feed(monkeypatch, ["1", "Alice", "1"])
        main.run(_args("--save-log", str(tmp_path)))
        assert list(tmp_path.glob("match_*.log"))

    def test_relative_paths_resolve_against_cwd(self, monkeypatch, capsys, tmp_path):
        (tmp_path / "mine.txt").write_text("Killjoy\n")
        (tmp_path / "guns.txt").write_text("Pistol\nShotgun\n")
        (tmp_path / "local.yaml").write_text("game:\n  opponent_name: Bot\n")
        monkeypatch.chdir(tmp_path)
        _feed(monkeypatch, ["1", "Alice", "1"])

        assert main.run(_args("--config", "local.yaml", "--agents", "mine.txt", "--weapons", "guns.txt")) == 0

        out = capsys.readouterr().out
        assert "1. Killjoy" in out
        assert "=== Turn: Bot ===" in out


class TestMain:

    def test_unknown_policy_exits_cleanly(self, monkeypatch, capsys, tmp_path):
        config_path = tmp_path / "bad.yaml"
        config_path.write_text("game:\n  opponent_policy: GENIUS\n")
        _feed(monkeypatch, [])
        monkeypatch.setattr("sys.argv", ["main.py", "--config", str(config_path)])

        with pytest.raises(SystemExit) as exc:
            main.main()

        assert exc.value.code == 1
        err = capsys.readouterr().err
        assert "opponent_policy" in err
        assert "Traceback" not in err

from datetime import datetime

import pytest

from broadside.game.persistence.repository import SaveRepository


def test_repository_save_load_delete(tmp_path) -> None:
    repo = SaveRepository(tmp_path / "saves")
    assert not repo.has_game()
    repo.save_payload({"version": 1})
    assert repo.has_game()
    assert repo.load_payload() == {"version": 1}
    assert not list((tmp_path / "saves").glob("*.tmp"))
    repo.delete_game()
    assert not repo.has_game()
    repo.delete_game()


def test_repository_load_missing_raises(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        SaveRepository(tmp_path).load_payload()


def test_repository_rejects_non_object(tmp_path) -> None:
    repo = SaveRepository(tmp_path)
    repo.game_path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ValueError):
        repo.load_payload()


def test_score_sheet_lines(tmp_path) -> None:
    repo = SaveRepository(tmp_path)
    repo.save_score("Nelson", 7, when=datetime(2024, 5, 1, 12, 30))
    assert repo.score_path.read_text(encoding="utf-8").splitlines() == [
        "Nickname: Nelson",
        "Sunk ships: 7",
        "Date: 2024-05-01T12:30:00",
    ]
    assert repo.load_score() == {
        "Nickname": "Nelson",
        "Sunk ships": "7",
        "Date": "2024-05-01T12:30:00",
    }

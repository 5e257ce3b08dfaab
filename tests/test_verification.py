import verification
from board import Square


def test_all_checks_pass():
    assert verification.run_checks() == []


def test_every_failure_is_reported(monkeypatch):
    calls = []

    def failing(name):
        def check():
            calls.append(name)
            return [f"[check] {name}"]
        return check

    monkeypatch.setattr(verification, "CHECKS", [failing("a"), lambda: [], failing("b")])
    assert verification.run_checks() == ["[check] a", "[check] b"]
    assert calls == ["a", "b"]


def test_mismatch_message_names_both_values():
    assert verification._expect("x", 3, 4) == ["[check] x: should be 3, but got 4"]
    assert verification._expect("x", 3, 3) == []


def test_lone_queen_has_no_attack_marks():
    board = verification._lone_queen(4, 4)
    assert board.pieces(Square.QUEEN) == [(4, 4)]
    assert len(list(board.open_squares())) == 63


def test_can_place_knight_check_passes():
    assert verification.check_can_place_knight() == []

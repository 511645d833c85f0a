"""
游戏会话测试
Game Session Tests
"""
import pytest

from fair_rps.game.commitment import HmacCommitment
from fair_rps.game.game_logic import GameSession, MoveSet, OutcomeResolver, Verdict, build_verdict_matrix
from fair_rps.game.game_logic import game_session
from fair_rps.utils.exceptions import (
    GameException, InvalidInputException, RandomnessSourceException
)


@pytest.fixture
def classic_moves():
    return MoveSet.from_arguments(["Rock", "Paper", "Scissors"])


class CountingCommitment(HmacCommitment):
    """记录调用次数的承诺方案"""

    def __init__(self):
        self.commits = []
        self.reveals = 0

    def commit(self, key, move):
        self.commits.append(move)
        return super().commit(key, move)

    def reveal(self, key):
        self.reveals += 1
        return super().reveal(key)


def test_digest_binds_computer_move(classic_moves):
    commitment = CountingCommitment()
    session = GameSession(classic_moves, commitment=commitment, computer_index=2)

    assert commitment.commits == ["Paper"]
    assert commitment.reveals == 0
    assert len(session.digest) == 32
    assert session.digest_hex == session.digest.hex()


def test_play_reveals_key_once(classic_moves):
    commitment = CountingCommitment()
    session = GameSession(classic_moves, commitment=commitment, computer_index=1)

    result = session.play(2)

    assert commitment.reveals == 1
    assert commitment.commits == ["Rock"]
    assert result.verdict == Verdict.WIN
    assert result.human_move == "Paper"
    assert result.computer_move == "Rock"
    assert commitment.verify(bytes.fromhex(result.key_hex), result.computer_move, session.digest)


def test_verdict_matches_resolver(classic_moves):
    for computer in range(1, 4):
        for human in range(1, 4):
            session = GameSession(classic_moves, computer_index=computer)
            result = session.play(human)
            assert result.verdict == OutcomeResolver.determine(human, computer, 3)


def test_second_play_rejected(classic_moves):
    session = GameSession(classic_moves, computer_index=3)
    session.play(1)
    assert session.is_resolved()
    with pytest.raises(GameException):
        session.play(2)


@pytest.mark.parametrize("index", [0, 4, -1])
def test_out_of_range_human_move_rejected(classic_moves, index):
    session = GameSession(classic_moves, computer_index=1)
    with pytest.raises(InvalidInputException):
        session.play(index)
    assert not session.is_resolved()


def test_out_of_range_computer_move_rejected(classic_moves):
    with pytest.raises(InvalidInputException):
        GameSession(classic_moves, computer_index=4)


def test_random_computer_move_in_range(classic_moves):
    for _ in range(30):
        session = GameSession(classic_moves)
        result = session.play(1)
        assert 1 <= result.computer_index <= 3


def test_sessions_use_fresh_keys(classic_moves):
    first = GameSession(classic_moves, computer_index=1)
    second = GameSession(classic_moves, computer_index=1)
    assert first.digest != second.digest


def test_randomness_failure_before_digest(classic_moves, monkeypatch):
    def broken_randbelow(n):
        raise OSError("entropy source unavailable")

    monkeypatch.setattr(game_session.secrets, "randbelow", broken_randbelow)
    with pytest.raises(RandomnessSourceException):
        GameSession(classic_moves)


def test_verdict_matrix_is_human_perspective(classic_moves):
    """行=电脑招式，列=玩家招式，单元格为玩家结果"""
    session = GameSession(classic_moves, computer_index=1)
    table = build_verdict_matrix(classic_moves)

    assert len(table) == 3
    assert all(len(row) == 3 for row in table)
    # 电脑出 Rock，玩家出 Paper
    assert table[0][1] == Verdict.WIN
    # 电脑出 Paper，玩家出 Rock
    assert table[1][0] == Verdict.LOSE
    assert [table[i][i] for i in range(3)] == [Verdict.DRAW] * 3
    assert not session.is_resolved()


def test_round_result_to_dict(classic_moves):
    session = GameSession(classic_moves, computer_index=3)
    data = session.play(1).to_dict()

    assert data['human_move'] == "Rock"
    assert data['computer_move'] == "Scissors"
    assert data['verdict'] == "Win"
    assert data['digest'] == session.digest_hex
    assert len(data['key']) == 64
    assert 'timestamp' in data

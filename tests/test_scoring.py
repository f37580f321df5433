import pytest

from wordguess.scoring import RewardTable, ScoreKeeper


@pytest.mark.parametrize("guesses,points", [(1, 6), (2, 6), (3, 3), (6, 3)])
def test_tiered_rewards(guesses, points):
    assert RewardTable.tiered().award(guesses) == points


def test_flat_rewards():
    table = RewardTable.flat()
    assert {table.award(n) for n in range(1, 7)} == {10}


def test_named_table():
    assert RewardTable.named("flat") == RewardTable.flat()
    with pytest.raises(ValueError):
        RewardTable.named("bogus")


def test_missing_keys_start_at_zero(score):
    assert score.points == 0
    assert score.streak == 0


def test_win_adds_points_and_streak(score, store):
    assert score.record_win(1) == 6
    assert score.record_win(4) == 3
    assert score.points == 9
    assert score.streak == 2
    assert store.get_int("points") == 9
    assert store.get_int("streak") == 2


def test_loss_resets_streak_only(score):
    score.record_win(2)
    score.record_loss()
    assert score.points == 6
    assert score.streak == 0


def test_spend_hint(store):
    store.set_int("points", 7)
    keeper = ScoreKeeper(store)
    assert keeper.spend_hint()
    assert keeper.points == 2
    assert not keeper.spend_hint()
    assert keeper.points == 2
    assert store.get_int("points") == 2


def test_values_survive_a_new_keeper(score, store):
    score.record_win(1)
    score.record_win(1)
    again = ScoreKeeper(store)
    assert again.snapshot().model_dump() == {"points": 12, "streak": 2}


def test_negative_stored_points_are_clamped(store):
    store.set_int("points", -4)
    assert ScoreKeeper(store).points == 0


def test_flat_table_keeper(store):
    keeper = ScoreKeeper(store, RewardTable.flat())
    assert keeper.record_win(5) == 10


def test_reset(score, store):
    score.record_win(1)
    score.reset()
    assert score.points == 0
    assert store.get_int("points") is None
    assert store.get_int("streak") is None
    assert ScoreKeeper(store).snapshot().model_dump() == {"points": 0, "streak": 0}

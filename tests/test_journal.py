import pytest

from humorlog.journal import EmptyJournalError, MoodJournal, RecordNotFoundError
from humorlog.record import Date, Mood, RecordFactory


def _journal(*entries):
    factory = RecordFactory()
    journal = MoodJournal()
    for day, (mood, score) in enumerate(entries, start=1):
        journal.append(factory.create(Date(day, 1, 2025), mood, f"motivo {day}", score))
    return journal


def test_new_journal_is_empty():
    journal = MoodJournal()
    assert journal.is_empty()
    assert len(journal) == 0


def test_iteration_orders():
    journal = _journal((0, 1), (1, 2), (2, 3))
    assert [r.id for r in journal] == [1, 2, 3]
    assert [r.id for r in reversed(journal)] == [3, 2, 1]


def test_last_and_empty_last():
    journal = _journal((0, 1), (1, 2))
    assert journal.last().id == 2
    with pytest.raises(EmptyJournalError):
        MoodJournal().last()


def test_find_by_id():
    journal = _journal((0, 1), (4, 9))
    assert journal.find_by_id(2).mood is Mood.MOTIVATED
    with pytest.raises(RecordNotFoundError):
        journal.find_by_id(5)


@pytest.mark.parametrize("record_id, remaining", [(1, [2, 3]), (2, [1, 3]), (3, [1, 2])])
def test_remove_keeps_order(record_id, remaining):
    journal = _journal((0, 1), (1, 2), (2, 3))
    removed = journal.remove(record_id)
    assert removed.id == record_id
    assert [r.id for r in journal] == remaining
    assert [r.id for r in reversed(journal)] == remaining[::-1]


def test_remove_errors():
    with pytest.raises(EmptyJournalError):
        MoodJournal().remove(1)
    journal = _journal((0, 1))
    with pytest.raises(RecordNotFoundError):
        journal.remove(7)
    assert len(journal) == 1


def test_find_by_mood():
    journal = _journal((1, 1), (0, 2), (1, 3))
    assert [r.id for r in journal.find_by_mood(Mood.SAD)] == [1, 3]
    assert journal.find_by_mood(Mood.NEUTRAL) == []
    with pytest.raises(EmptyJournalError):
        MoodJournal().find_by_mood(Mood.SAD)


def test_average_score_windows():
    journal = _journal((0, 4), (0, 6), (0, 8))
    assert journal.average_score(1) == journal.last().score
    assert journal.average_score(2) == 7.0
    assert journal.average_score(100) == journal.average_score(3)


def test_average_score_errors():
    journal = _journal((0, 4))
    with pytest.raises(ValueError):
        journal.average_score(0)
    with pytest.raises(EmptyJournalError):
        MoodJournal().average_score(3)


def test_most_frequent_mood_window_and_ties():
    journal = _journal((2, 1), (2, 1), (5, 1), (3, 1))
    assert journal.most_frequent_mood(4) is Mood.ANXIOUS
    assert journal.most_frequent_mood(2) is Mood.TIRED
    assert journal.most_frequent_mood(1) is Mood.TIRED


def test_most_frequent_mood_errors():
    with pytest.raises(ValueError):
        _journal((0, 1)).most_frequent_mood(-1)
    with pytest.raises(EmptyJournalError):
        MoodJournal().most_frequent_mood(2)


def test_reasons_for():
    journal = _journal((1, 1), (0, 2), (1, 3))
    reasons = journal.reasons_for(Mood.SAD)
    assert reasons == [(Date(1, 1, 2025), "motivo 1"), (Date(3, 1, 2025), "motivo 3")]
    assert journal.reasons_for(Mood.HAPPY)[0][1] == "motivo 2"
    assert MoodJournal().reasons_for(Mood.HAPPY) == []


def test_clear():
    journal = _journal((0, 1), (1, 2))
    journal.clear()
    assert journal.is_empty()
"""An ordered journal of mood records with summaries over recent days."""

from collections import Counter

from humorlog.record import Mood, MoodRecord

EMPTY_MESSAGE = "A Lista está vazia!"
BAD_DAYS_MESSAGE = "O número de dias deve ser maior que zero."


class EmptyJournalError(LookupError):
    """Raised when an operation needs records but the journal has none."""


class RecordNotFoundError(LookupError):
    """Raised when no record carries the requested id."""


class MoodJournal:
    """Records kept in insertion order, oldest first."""

    def __init__(self):
        self._records: list[MoodRecord] = []

    def __len__(self):
        return len(self._records)

    def __iter__(self):
        return iter(self._records)

    def __reversed__(self):
        return reversed(self._records)

    def is_empty(self) -> bool:
        return not self._records

    def _require_records(self) -> None:
        if not self._records:
            raise EmptyJournalError(EMPTY_MESSAGE)

    def append(self, record: MoodRecord) -> None:
        self._records.append(record)

    def last(self) -> MoodRecord:
        """The most recently added record."""
        self._require_records()
        return self._records[-1]

    def find_by_id(self, record_id) -> MoodRecord:
        for record in self._records:
            if record.id == record_id:
                return record
        raise RecordNotFoundError(record_id)

    def find_by_mood(self, mood) -> list[MoodRecord]:
        self._require_records()
        return [record for record in self._records if record.mood == mood]

    def remove(self, record_id) -> MoodRecord:
        """Remove and return the record with the given id."""
        self._require_records()
        for index, record in enumerate(self._records):
            if record.id == record_id:
                return self._records.pop(index)
        raise RecordNotFoundError(record_id)

    def clear(self) -> None:
        self._records.clear()

    def _recent(self, days) -> list[MoodRecord]:
        if days <= 0:
            raise ValueError(BAD_DAYS_MESSAGE)
        self._require_records()
        return self._records[-days:]

    def average_score(self, days) -> float:
        """Mean score of the last `days` records."""
        recent = self._recent(days)
        return sum(record.score for record in recent) / len(recent)

    def most_frequent_mood(self, days) -> Mood:
        """Most common mood among the last `days` records; ties go to the lowest mood."""
        counts = Counter(record.mood for record in self._recent(days))
        return max(Mood, key=lambda mood: (counts[mood], -mood))

    def reasons_for(self, mood) -> list[tuple]:
        """(date, reason) pairs of every record with the given mood."""
        return [(record.date, record.reason) for record in self._records if record.mood == mood]
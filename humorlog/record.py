"""Mood records, their validation and the factory that numbers them."""

from dataclasses import dataclass
from enum import IntEnum

MIN_YEAR = 2025
MAX_REASON_LENGTH = 100
MIN_SCORE = 0
MAX_SCORE = 10

INVALID_DATE = "Data inválida! Por favor, insira uma data válida."
INVALID_MOOD = "Humor inválido! Por favor, escolha um número entre 0 e 6."
REASON_TOO_LONG = "Motivo muito longo! Por favor, limite-se a 100 caracteres."
INVALID_SCORE = "Nota inválida! Por favor, insira um número entre 0 e 10."


class InvalidRecordError(ValueError):
    """Raised when a field of a mood record is out of range."""


class Mood(IntEnum):
    """The moods a day can be recorded with."""

    HAPPY = 0
    SAD = 1
    ANXIOUS = 2
    TIRED = 3
    MOTIVATED = 4
    STRESSED = 5
    NEUTRAL = 6

    def label(self) -> str:
        """The display name of the mood."""
        return _LABELS[self]


_LABELS = {
    Mood.HAPPY: "Feliz",
    Mood.SAD: "Triste",
    Mood.ANXIOUS: "Ansioso",
    Mood.TIRED: "Cansado",
    Mood.MOTIVATED: "Motivado",
    Mood.STRESSED: "Estressado",
    Mood.NEUTRAL: "Neutro",
}


@dataclass(frozen=True)
class Date:
    """A calendar day as entered by the user."""

    day: int
    month: int
    year: int

    def format(self) -> str:
        """Render as dd/mm/yyyy."""
        return f"{self.day:02d}/{self.month:02d}/{self.year}"


@dataclass(frozen=True)
class MoodRecord:
    """One day's mood entry."""

    id: int
    date: Date
    mood: Mood
    reason: str
    score: int

    def format(self) -> str:
        """Render the record as a printable block."""
        return (
            "\n------------Registro------------\n"
            f"ID: {self.id}\n"
            f"Data: {self.date.format()}\n"
            f"Humor: {self.mood.label()}!\n"
            f"Motivo: {self.reason}\n"
            f"Nota do dia: {self.score}\n"
        )


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_date(day, month, year) -> Date:
    """Return a Date for the given parts or raise InvalidRecordError."""
    if not all(_is_int(part) for part in (day, month, year)):
        raise InvalidRecordError(INVALID_DATE)
    if not (1 <= day <= 31 and 1 <= month <= 12 and year >= MIN_YEAR):
        raise InvalidRecordError(INVALID_DATE)
    return Date(day, month, year)


def parse_mood(value) -> Mood:
    """Turn a number from 0 to 6 into a Mood or raise InvalidRecordError."""
    if not _is_int(value):
        raise InvalidRecordError(INVALID_MOOD)
    try:
        return Mood(value)
    except ValueError:
        raise InvalidRecordError(INVALID_MOOD) from None


class RecordFactory:
    """Validates record fields and hands out consecutive ids."""

    def __init__(self, start=0):
        self._last_id = start

    def create(self, date, mood, reason, score) -> MoodRecord:
        """Build a validated record; the id is consumed only on success."""
        if not isinstance(date, Date):
            raise InvalidRecordError(INVALID_DATE)
        checked_date = validate_date(date.day, date.month, date.year)
        checked_mood = parse_mood(mood)
        if len(reason) > MAX_REASON_LENGTH:
            raise InvalidRecordError(REASON_TOO_LONG)
        if not _is_int(score) or not MIN_SCORE <= score <= MAX_SCORE:
            raise InvalidRecordError(INVALID_SCORE)
        self._last_id += 1
        return MoodRecord(self._last_id, checked_date, checked_mood, reason, score)
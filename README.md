# humorlog

A small interactive mood journal for the terminal. Each entry records a
date, a mood, a short reason (up to 100 characters) and a score for the
day from 0 to 10. Entries are numbered automatically, starting at 1, and
kept in the order they were added.

## Installing

    pip install .

To run the tests as well:

    pip install ".[test]"
    pytest

## Running

    humorlog

The program reads from standard input and shows a menu (in Portuguese)
with these options:

1. Add a new entry: asks for the date (`dia mês ano`, e.g. `27 06 2025`),
   the mood, the reason and the score. The day must be 1–31, the month
   1–12 and the year 2025 or later; the mood 0–6; the score 0–10. An
   invalid field is reported and the entry is not added.
2. Remove an entry by its id.
3. List all entries with a given mood.
4. Print every entry.
5. Show the average score over the last *n* entries.
6. Show the most frequent mood over the last *n* entries (ties go to the
   lowest mood number).
7. Show the date and reason of every entry with a given mood.
8. Quit.

The session also ends when the input runs out.

Moods are chosen by number:

| Number | Mood       | `Mood` member |
|--------|------------|---------------|
| 0      | Feliz      | `HAPPY`       |
| 1      | Triste     | `SAD`         |
| 2      | Ansioso    | `ANXIOUS`     |
| 3      | Cansado    | `TIRED`       |
| 4      | Motivado   | `MOTIVATED`   |
| 5      | Estressado | `STRESSED`    |
| 6      | Neutro     | `NEUTRAL`     |

## Using it as a library

```python
from humorlog.record import Date, Mood, RecordFactory
from humorlog.journal import MoodJournal

factory = RecordFactory(start=0)
journal = MoodJournal()
journal.append(factory.create(Date(27, 6, 2025), Mood.HAPPY, "Sunny day", 9))
journal.append(factory.create(Date(28, 6, 2025), Mood.TIRED, "Long week", 5))

print(journal.average_score(2))                 # 7.0
print(journal.most_frequent_mood(2).label())    # Feliz
for record in journal.find_by_mood(Mood.HAPPY):
    print(record.format())
```

`humorlog.record` provides `Mood`, `Date`, `MoodRecord`, `RecordFactory`
and the helpers `validate_date(day, month, year)` and `parse_mood(value)`.
Any invalid field raises `InvalidRecordError` (a `ValueError`), and a
factory only uses up an id when a record is created successfully.

`humorlog.journal.MoodJournal` supports `len()`, iteration (oldest first)
and `reversed()`, plus `append`, `last`, `find_by_id`, `find_by_mood`,
`remove`, `clear`, `average_score`, `most_frequent_mood` and
`reasons_for`. Asking an empty journal for `last`, `find_by_mood`,
`remove`, `average_score` or `most_frequent_mood` raises
`EmptyJournalError`; an unknown id in `find_by_id` or `remove` raises
`RecordNotFoundError`; a number of days of zero or less raises
`ValueError`.

A whole session can be driven from any text streams with
`humorlog.cli.run_session(input_stream, output_stream)`, which returns the
resulting `MoodJournal`.

## What it does not do

Entries live only in memory for the length of a session: nothing is saved
to disk, and every run starts with an empty journal.
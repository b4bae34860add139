import random

from boojo.model.entry import Layout
from boojo.parse.grammar import parse_line, parse_text
from boojo.query.sort import sort_entries, sort_key

LEDGER = """. plain open
x (A) done important
. (A) open important
- (A) note important
. (A) due soon due:2030-01-01
. (A) due later due:2030-06-01
/ (A) cancelled important
"""


def ids(entries):
    return [entry["sequence_id"] for entry in entries]


def test_five_level_order(stats):
    entries = parse_text(LEDGER, stats)

    assert ids(sort_entries(entries)) == [6, 5, 3, 2, 7, 4, 1]


def test_later_due_date_first():
    sooner = parse_line(". pay due:2030-05-01", 1)
    later = parse_line(". pay due:2030-06-01", 2)

    assert ids(sort_entries([sooner, later])) == [2, 1]


def test_dated_before_undated_regardless_of_line():
    undated = parse_line(". pay", 1)
    dated = parse_line(". pay due:2001-01-01", 2)

    assert ids(sort_entries([undated, dated])) == [2, 1]


def test_event_ranks_between_task_and_note():
    task = parse_line(". a", 3)
    note = parse_line("- a", 1)
    event = dict(parse_line(". a", 2), layout=Layout.EVENT)

    assert ids(sort_entries([note, event, task])) == [3, 2, 1]


def test_sort_is_idempotent(stats):
    entries = sort_entries(parse_text(LEDGER, stats))

    assert sort_entries(entries) == entries


def test_sort_returns_new_list(stats):
    entries = parse_text(LEDGER, stats)
    original = list(entries)

    sort_entries(entries)

    assert entries == original


def test_any_permutation_sorts_the_same(stats):
    entries = parse_text(LEDGER, stats)
    expected = sort_entries(entries)
    rng = random.Random(42)

    for _ in range(20):
        shuffled = list(entries)
        rng.shuffle(shuffled)
        assert sort_entries(shuffled) == expected


def test_keys_are_strict(stats):
    entries = parse_text(LEDGER, stats)

    for a in entries:
        for b in entries:
            if a is b:
                continue
            assert sort_key(a) != sort_key(b)
            assert not (sort_key(a) < sort_key(b) and sort_key(b) < sort_key(a))

import pytest

from plagcheck.checker import PlagiarismChecker
from plagcheck.structures import Professor, Student, Submission


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def make_tokenizer(table):
    return lambda path: table[path]


def block(k):
    return list(range(1000 * (k + 1), 1000 * (k + 1) + 15))


def blocks(ids, separator):
    tokens = []
    for k in ids:
        tokens += block(k) + [separator]
    return tokens


def sub(ident, name, path):
    return Submission(ident, Student(name), Professor("Snape"), path)


def test_copy_of_original_is_flagged_original_is_not():
    original = sub(1, "Tom", "h/orig.cpp")
    copy = sub(2, "Harry", "h/copy.cpp")
    table = {"h/orig.cpp": list(range(100)), "h/copy.cpp": list(range(100))}
    checker = PlagiarismChecker(make_tokenizer(table), [original])
    checker.add_submission(copy)
    checker.close()
    assert checker.flagged == (copy,)


def test_flag_messages_printed(capsys):
    original = sub(1, "Tom", "h/orig.cpp")
    copy = sub(2, "Harry", "h/copy.cpp")
    table = {"h/orig.cpp": list(range(100)), "h/copy.cpp": list(range(100))}
    with PlagiarismChecker(make_tokenizer(table), [original]) as checker:
        checker.add_submission(copy)
    out = capsys.readouterr().out
    assert "I was flagged in copy.cpp and must defend myself in front of Prof. Snape." in out
    assert "Student Harry has plagiarized in copy.cpp and will be receiving an FR grade." in out
    assert "Tom" not in out


def test_recent_earlier_submission_is_flagged_too():
    clock = FakeClock()
    first = sub(1, "Fred", "h/a.cpp")
    second = sub(2, "George", "h/b.cpp")
    table = {"h/a.cpp": list(range(100)), "h/b.cpp": list(range(100))}
    checker = PlagiarismChecker(make_tokenizer(table), clock=clock)
    checker.add_submission(first)
    clock.now = 0.5
    checker.add_submission(second)
    checker.close()
    assert checker.flagged == (second, first)


def test_old_earlier_submission_is_not_flagged():
    clock = FakeClock()
    first = sub(1, "Fred", "h/a.cpp")
    second = sub(2, "George", "h/b.cpp")
    table = {"h/a.cpp": list(range(100)), "h/b.cpp": list(range(100))}
    checker = PlagiarismChecker(make_tokenizer(table), clock=clock)
    checker.add_submission(first)
    clock.now = 5.0
    checker.add_submission(second)
    checker.close()
    assert checker.flagged == (second,)


@pytest.mark.parametrize("count, flagged", [(10, True), (9, False)])
def test_pair_threshold_of_short_blocks(count, flagged):
    original = sub(1, "Tom", "h/orig.cpp")
    new = sub(2, "Ron", "h/new.cpp")
    table = {
        "h/orig.cpp": blocks(range(count), 5),
        "h/new.cpp": blocks(range(count), 6),
    }
    checker = PlagiarismChecker(make_tokenizer(table), [original])
    checker.add_submission(new)
    checker.close()
    assert checker.flagged == ((new,) if flagged else ())


@pytest.mark.parametrize("per_original, flagged", [(7, True), (6, False)])
def test_total_threshold_across_sources(per_original, flagged):
    originals = [sub(i, f"S{i}", f"h/o{i}.cpp") for i in range(3)]
    table = {
        f"h/o{i}.cpp": blocks(range(i * per_original, (i + 1) * per_original), 5)
        for i in range(3)
    }
    new = sub(9, "Ron", "h/new.cpp")
    table["h/new.cpp"] = blocks(range(3 * per_original), 6)
    checker = PlagiarismChecker(make_tokenizer(table), originals)
    checker.add_submission(new)
    checker.close()
    assert checker.flagged == ((new,) if flagged else ())


def test_unrelated_and_short_submissions_not_flagged():
    original = sub(1, "Tom", "h/orig.cpp")
    other = sub(2, "Luna", "h/other.cpp")
    tiny = sub(3, "Neville", "h/tiny.cpp")
    table = {
        "h/orig.cpp": list(range(100)),
        "h/other.cpp": list(range(500, 600)),
        "h/tiny.cpp": list(range(14)),
    }
    checker = PlagiarismChecker(make_tokenizer(table), [original])
    checker.add_submission(other)
    checker.add_submission(tiny)
    checker.close()
    assert checker.flagged == ()


def test_submission_flagged_only_once():
    original = sub(1, "Tom", "h/orig.cpp")
    copy = sub(2, "Harry", "h/copy.cpp")
    table = {"h/orig.cpp": list(range(400)), "h/copy.cpp": list(range(400))}
    checker = PlagiarismChecker(make_tokenizer(table), [original])
    checker.add_submission(copy)
    checker.close()
    assert checker.flagged.count(copy) == 1


def test_none_submission_ignored():
    checker = PlagiarismChecker(make_tokenizer({}), [None])
    checker.add_submission(None)
    checker.close()
    assert checker.flagged == ()


def test_tokenizer_error_reported_on_close():
    checker = PlagiarismChecker(make_tokenizer({}))
    checker.add_submission(sub(1, "Harry", "h/missing.cpp"))
    with pytest.raises(KeyError):
        checker.close()


def test_add_after_close_raises():
    checker = PlagiarismChecker(make_tokenizer({}))
    checker.close()
    with pytest.raises(RuntimeError):
        checker.add_submission(sub(1, "Harry", "h/a.cpp"))
# plagcheck

`plagcheck` compares source code submissions as sequences of integer tokens
and reports likely plagiarism. The tokens could be, for example, the kinds of
syntax nodes a parser produces. The package has two main parts:

* **Pairwise matching** (`plagcheck.matching`). It compares two token
  sequences and gives a verdict, the total length of exact matches, and the
  longest approximate match.
* **A streaming checker** (`plagcheck.checker`). It takes submissions as they
  arrive and tokenizes them in a background thread. It checks each new
  submission against everything that came before it and flags the students
  and professors involved.

The package has no runtime dependencies.

## Installation

```
pip install .
```

To install with the test dependencies:

```
pip install ".[test]"
```

## Comparing two submissions

`match_submissions(submission1, submission2)` takes two sequences of integer
tokens and returns a tuple of five numbers:

1. `1` if exact matches cover at least 30% of the shorter submission,
   otherwise `0`.
2. The total length of non-overlapping, order-preserving exact matches. Only
   blocks of 10 to 20 tokens count. The blocks are found with a rolling hash
   and combined with a 2-D segment tree.
3. The length of the longest approximate match. This is an aligned stretch of
   at least 30 tokens in which at least 80% of the tokens agree.
4. The start of that match in the first sequence, or `-1` if there is none.
5. The start of that match in the second sequence, or `-1` if there is none.

```python
from plagcheck.matching import match_submissions

verdict, exact, approx_len, start1, start2 = match_submissions(tokens_a, tokens_b)
```

The building blocks can also be used on their own:

* `rolling_hash(tokens, length)` maps each window hash to the start positions
  of the windows that have it.
* `sum_of_exact_matches(s1, s2)`.
* `find_max_approx_match(s1, s2, x=0.8)` returns `(length, start1, start2)`.
* `SegmentTree` and `SegmentTree2D` are point-update, range-maximum trees
  over half-open ranges.
* `Match` records one common block.

### Checking a test directory

`plagcheck.phase_one.run_testcase(test_dir, tokenize)` compares `one.cpp`
with `two.cpp` in `test_dir`. It returns the computed results together with
the expected ones read from `expected.txt`. `tokenize` is a callable you
supply that turns a file path into a list of tokens. To get a side-by-side
text listing, pass both tuples to `format_report(output, expected)`.
`read_expected(path)` reads the five expected values on its own.

## Streaming checker

```python
from plagcheck.checker import PlagiarismChecker
from plagcheck.structures import Professor, Student, Submission

with PlagiarismChecker(tokenize, originals) as checker:
    checker.add_submission(Submission(1, Student("alice"), Professor("bob"), "dir/a.cpp"))
print(checker.flagged)
```

`PlagiarismChecker(tokenize, submissions=(), *, clock=time.monotonic)` takes
a callable that turns a code file path into tokens. It also takes an optional
collection of reference submissions, which are compared against but never
flagged. `add_submission` queues a new submission. `close()`, or leaving the
`with` block, waits until everything queued has been checked and then stops
the worker threads. `close()` re-raises the first error raised while
tokenizing or checking. The `flagged` property lists the flagged
submissions in the order they were flagged.

A submission is flagged when any of these holds:

* it shares at least 20 non-overlapping 15-token runs with earlier
  submissions taken together;
* it shares at least 10 such runs with a single earlier submission;
* it shares any 75-token run with an earlier submission.

In the last two cases, the earlier submission is flagged as well if it
arrived no more than one second before.

`plagcheck.structures` defines `Submission` (`id`, `student`, `professor`,
`codefile`), `Student` and `Professor`. When a submission is flagged,
`Student.flag` and `Professor.flag` print a notice to standard output and
return its text.

## Companion modules

* `plagcheck.treecodec`: `encode_tree(root)` and `decode_tree(encoded)`.
  They handle n-ary trees (`NaryNode`, written as `[1[2][3]]`) and
  fixed-arity trees of arity 1 to 10 (`FixedNode`, written as
  `2(1(NULL)(NULL))`). Malformed input raises `ValueError`.
* `plagcheck.algorithms`:
  * `NNMaker(rows).get_nearest(query)` gives the dot product of the query
    with each row.
  * `num_ways_reach(x, y, z)` counts monotone lattice paths modulo
    1 000 000 007.
  * `transform`, `compress` and `matmul` work on lists of lists.
  * `shortest_path_wt(graph)` relaxes distances from node 0 but always
    returns `-1`.
* `plagcheck.concurrency`:
  * `run_ring(n, rounds=100, action=None)` runs threads that take turns in
    order.
  * `babble(limit=10, out=None)` has two threads write numbered lines.
  * `DataQueue`, `Sender` and `Receiver` form a pipeline that ends on an
    all-zero array of ten values.
  * `send_random_data(queue, count, rng=None)` sends random arrays through a
    sender.
* `plagcheck.arda`: world-model records (`Ea`, `Arda`, `Star`, `Lamp`,
  `Wind`, `Volcano`, `BlackHole` and others) and two classes:
  * `WindsManager` manages winds.
  * `Destructor` adds black holes and bases and kills stars.

  The module also has the helpers `add_star`, `add_lamp`, `remove_lamp`,
  `remove_star`, `show_off` and `create_plus_constellation`.
* `plagcheck.references`: `build_cycle()` builds a three-node cycle of
  strong and weak links and returns a handle whose `lock()` gives the root.
  `reset(handle)` clears the handle.

## What the package does not do

* It contains no parser. Every entry point that reads code files needs a
  `tokenize` callable from you.
* It has no command-line program. There is also no ready-made loader that
  replays a directory of students, professors and timed submissions through
  the streaming checker. Build `Submission` objects yourself and pass them to
  `PlagiarismChecker`.

## Running the tests

```
pytest
```
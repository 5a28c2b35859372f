import pytest

from plagcheck.phase_one import format_report, read_expected, run_testcase


def _make_case(tmp_path, expected_text):
    (tmp_path / "one.cpp").write_text("int main() {}\n")
    (tmp_path / "two.cpp").write_text("int main() {}\n")
    (tmp_path / "expected.txt").write_text(expected_text)
    return tmp_path


def test_read_expected(tmp_path):
    path = tmp_path / "expected.txt"
    path.write_text("1 40\n40 0 0\n")
    assert read_expected(path) == (1, 40, 40, 0, 0)


def test_read_expected_too_few_values(tmp_path):
    path = tmp_path / "expected.txt"
    path.write_text("1 2 3")
    with pytest.raises(ValueError):
        read_expected(path)


def test_read_expected_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_expected(tmp_path / "absent.txt")


def test_run_testcase_identical_files(tmp_path):
    case = _make_case(tmp_path, "1 40 40 0 0\n")
    seen = []

    def tokenize(path):
        seen.append(path.name)
        return list(range(40))

    output, expected = run_testcase(case, tokenize)
    assert seen == ["one.cpp", "two.cpp"]
    assert output == expected == (1, 40, 40, 0, 0)


def test_run_testcase_different_files(tmp_path):
    case = _make_case(tmp_path, "0 0 0 -1 -1\n")
    tokens = {"one.cpp": [1] * 40, "two.cpp": [2] * 40}
    output, expected = run_testcase(case, lambda path: tokens[path.name])
    assert output == expected


def test_format_report_layout():
    report = format_report((1, 40, 40, 0, 0), (1, 40, 40, 0, 0))
    lines = report.split("\n")
    assert lines[0] == "Result 0:\tYour output: 1         \tSample output: 1"
    assert lines[4].startswith("Result 4:\tYour output: 0")
    assert report.endswith("\n\n")
    assert len(report.strip("\n").split("\n")) == 5


def test_format_report_length_mismatch():
    with pytest.raises(ValueError):
        format_report((1, 2, 3), (1, 2))
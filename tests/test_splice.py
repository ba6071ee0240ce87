"""
Tests for the return-line search and snippet splicing.
Run: pytest tests/test_splice.py -v
"""
from env_detector.files import split_lines
from env_detector.splice import find_marker_index, insert_before_marker, mentions, remove_snippet

SNIPPET = ["    # hook\n", "    hook(app)\n"]


class TestFindMarker:

    def test_last_return_in_window(self):
        lines = ["def f():\n", "    if x:\n", "        return 1\n", "    return 2\n", "\n"]
        assert find_marker_index(lines) == 3

    def test_case_insensitive(self):
        lines = ["x = 1\n", "RETURN x\n"]
        assert find_marker_index(lines) == 1

    def test_outside_window_not_found(self):
        lines = ["return app\n"] + ["# pad\n"] * 6
        assert find_marker_index(lines) is None
        assert find_marker_index(lines, window=7) == 0

    def test_exactly_at_window_edge(self):
        lines = ["return app\n"] + ["# pad\n"] * 5
        assert find_marker_index(lines, window=6) == 0

    def test_short_file(self):
        assert find_marker_index(["return app\n"]) == 0
        assert find_marker_index([]) is None

    def test_zero_window(self):
        assert find_marker_index(["return app\n"], window=0) is None


class TestInsert:

    def test_inserts_before_marker(self):
        lines = ["def f():\n", "    app = 1\n", "    return app\n"]
        out, idx = insert_before_marker(lines, SNIPPET)
        assert idx == 2
        assert out == ["def f():\n", "    app = 1\n"] + SNIPPET + ["    return app\n"]

    def test_no_marker_leaves_lines(self):
        lines = ["a\n", "b\n"]
        out, idx = insert_before_marker(lines, SNIPPET)
        assert idx is None
        assert out == lines


class TestRemove:

    def test_removes_every_occurrence(self):
        block = "".join(SNIPPET)
        text = "a\n" + block + "b\n" + block
        out, count = remove_snippet(text, block)
        assert out == "a\nb\n"
        assert count == 2

    def test_empty_snippet(self):
        assert remove_snippet("abc", "") == ("abc", 0)

    def test_mentions_ignores_case(self):
        assert mentions("load Environment_Detector here", "environment_detector")
        assert not mentions("nothing", "environment_detector")


def test_split_lines_keeps_endings():
    assert split_lines("a\r\nb\nc") == ["a\r\n", "b\n", "c"]
    assert split_lines("a\n") == ["a\n"]
    assert split_lines("") == []

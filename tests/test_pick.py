from __future__ import annotations

from collections.abc import Iterator

import pytest

from getitem import ParseError, SliceSpec, pick


DIRSTRING = """\
.rw-r--r-- 0 root      2024-11-14 20:59 .localized
drwxr-x--- - alexis    2024-11-25 16:29 alexis
drwxr-xr-x - oldalexis 2023-09-17 14:13 alexis_1
drwxrwxrwt - root      2024-11-21 12:25 Shared
"""

GIT_STATUS = """\
On branch dev-longcontexteval
Your branch is up to date with 'origin/dev-longcontexteval'.

Untracked files:
  (use "git add <file>..." to include in what will be committed)
    bert24-base-v2.yaml
    r_first50000.json
    src/evals/items2000.json
    src/evals/rewritten10.json

nothing added to commit but untracked files present (use "git add" to track)
"""

SCRIPT = """\
#!/bin/bash
if [ "$#" -ne 2 ]; then
    echo "usage: make-linkfile.bash HTTP-URL TITLE"
    echo
    echo "To find links to nightlies, go to https://github.com/tensorflow/swift/blob/master/Installation.md "
    echo
    echo "A valid URL will look something like: https://storage.googleapis.com/swift-tensorflow-artifacts/releases/v0.3/rc1/swift-tensorflow-RELEASE-0.3-cuda10.0-cudnn7-ubuntu18.04.tar.gz"
    exit 1
else
    url="$1"
    title="$2"
fi
"""


def _lines(text: str) -> list[str]:
    return text.splitlines(keepends=True)


def _both(lines: list[str], row_spec: str, col_spec: str) -> list[str]:
    """Run with and without a known line count; both must agree."""
    known = list(pick(lines, row_spec, col_spec, len(lines)))
    unknown = list(pick(iter(lines), row_spec, col_spec))
    assert known == unknown
    return known


def test_last_two_rows_first_two_fields() -> None:
    lines = ["A 1 x", "B 2 y", "C 3 z", "D 4 w"]
    assert _both(lines, "-2:", "0:2") == ["C 3", "D 4"]


def test_start_beyond_length_is_empty() -> None:
    assert _both(["a", "b", "c"], "5:10", ":") == []


def test_minus_one_is_last_row() -> None:
    lines = ["r0\n", "r1\n", "r2\n", "r3\n"]
    assert _both(lines, "-1", ":") == ["r3\n"]


def test_other_negative_single_index_is_one_row() -> None:
    lines = ["r0\n", "r1\n", "r2\n", "r3\n"]
    assert _both(lines, "-2", ":") == ["r2\n"]
    assert _both(lines, "-4", ":") == ["r0\n"]
    assert _both(lines, "-5", ":") == []


def test_slice_between_header_and_footer() -> None:
    assert _both(_lines(GIT_STATUS), "5:-2", ":") == [
        "    bert24-base-v2.yaml\n",
        "    r_first50000.json\n",
        "    src/evals/items2000.json\n",
        "    src/evals/rewritten10.json\n",
    ]


def test_single_row_keeps_indent() -> None:
    assert _both(["AAA\n", " BBB\n", "CCC\n"], "1", ":") == [" BBB\n"]


def test_whole_listing_is_unchanged() -> None:
    assert _both(_lines(DIRSTRING), ":", ":") == _lines(DIRSTRING)


def test_first_two_rows() -> None:
    assert _both(_lines(DIRSTRING), "0:2", ":") == _lines(DIRSTRING)[:2]


def test_last_two_rows() -> None:
    assert _both(_lines(DIRSTRING), "-2:", ":") == _lines(DIRSTRING)[2:]


def test_date_and_time_of_third_row() -> None:
    assert _both(_lines(DIRSTRING), "-2", "-3:-1") == [" " * 23 + "2023-09-17 14:13\n"]


def test_script_body() -> None:
    lines = _lines(SCRIPT)
    expected = [line.rstrip() + "\n" for line in lines[1:10]]
    assert _both(lines, "1:10", ":") == expected


def test_blank_rows_are_dropped() -> None:
    assert _both(_lines(GIT_STATUS), "1:4", "0") == ["Your\n", "Untracked\n"]


def test_bad_spec_fails_before_reading() -> None:
    def lines() -> Iterator[str]:
        raise AssertionError("input was read")
        yield ""

    with pytest.raises(ParseError):
        pick(lines(), "1:x", ":")
    with pytest.raises(ParseError):
        pick(lines(), ":", "a")


def test_pick_is_lazy() -> None:
    pulled: list[str] = []

    def lines() -> Iterator[str]:
        for s in ["a\n", "b\n", "c\n"]:
            pulled.append(s)
            yield s

    out = pick(lines(), ":", ":")
    assert pulled == []
    assert next(out) == "a\n"
    assert pulled == ["a\n"]


def test_accepts_parsed_specs() -> None:
    assert list(pick(["a b", "c d"], SliceSpec(1, None), SliceSpec(None, 1))) == ["c"]

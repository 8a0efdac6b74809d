# SPDX-License-Identifier: MPL-2.0
from licensure.utils import fill, remove_column_wrapping


def test_remove_column_wrapping():
    content = (
        "some wrapped\n"
        "text to unwrap.\n"
        "\n"
        "The line above\n"
        "is an intentional\n"
        "line break.\n"
        "\n"
        "So is this."
    )
    expected = (
        "some wrapped text to unwrap.\n\n"
        "The line above is an intentional line break.\n\n"
        "So is this."
    )
    assert remove_column_wrapping(content) == expected


def test_remove_column_wrapping_leaves_single_lines_alone():
    assert remove_column_wrapping("no newline here") == "no newline here"


def test_fill_wraps_each_line_separately():
    assert fill("aa bb\n\ncc dd", 2) == "aa\nbb\n\ncc\ndd"

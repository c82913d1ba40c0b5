import pytest

from pushswap.parsing import (
    ParseError,
    atol,
    build_stack,
    is_valid_number,
    parse_arguments,
    rank_values,
    skip_spaces,
    split_words,
)


def test_skip_spaces_removes_only_leading_spaces():
    assert skip_spaces("   12 ") == "12 "


def test_skip_spaces_keeps_other_whitespace():
    assert skip_spaces("\t1") == "\t1"


def test_skip_spaces_of_only_spaces_is_empty():
    assert skip_spaces("    ") == ""


@pytest.mark.parametrize(
    "text, expected",
    [
        ("  -42", -42),
        ("+7abc", 7),
        ("2147483648", 2147483648),
        ("-2147483648", -2147483648),
        ("0000019", 19),
    ],
)
def test_atol_reads_leading_integer(text, expected):
    assert atol(text) == expected


def test_atol_without_digits_is_zero():
    assert atol("abc") == 0


@pytest.mark.parametrize(
    "text",
    ["0", "-0", "+5", "  42", "42 ", "00000000000042", "1234567890", "-2147483648"],
)
def test_valid_numbers(text):
    assert is_valid_number(text) is True


@pytest.mark.parametrize(
    "text",
    ["", "   ", "+", "-", "abc", "1a", "+ 5", "12345678901", "\t1", "--1"],
)
def test_invalid_numbers(text):
    assert is_valid_number(text) is False


def test_split_words_drops_empty_pieces():
    assert split_words("  a  b c ", " ") == ["a", "b", "c"]


def test_split_words_with_other_separator():
    assert split_words(",1,,2,", ",") == ["1", "2"]


def test_split_words_of_separators_only_is_empty():
    assert split_words("   ", " ") == []


def test_parse_arguments_keeps_order_and_splits_words():
    assert parse_arguments(["3", "1 2", " 9 "]) == [3, 1, 2, 9]


def test_parse_arguments_accepts_int_limits():
    assert parse_arguments(["2147483647", "-2147483648"]) == [2147483647, -2147483648]


def test_parse_arguments_of_nothing_is_empty():
    assert parse_arguments([]) == []


@pytest.mark.parametrize(
    "args",
    [
        ["1", "1"],
        ["1 1"],
        ["5", "2 5"],
        ["1", ""],
        ["2147483648"],
        ["-2147483649"],
        ["1", "x"],
        ["12345678901"],
        ["1\t2"],
    ],
)
def test_parse_arguments_rejects_bad_input(args):
    with pytest.raises(ParseError):
        parse_arguments(args)


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        parse_arguments(["nope"])


def test_rank_values_worked_example():
    assert rank_values([30, -5, 7]) == [3, 1, 2]


def test_rank_values_is_a_permutation_preserving_order():
    values = [2147483647, -2147483648, 0, 15, -3, 99]
    ranks = rank_values(values)
    assert sorted(ranks) == list(range(1, len(values) + 1))
    for i, left in enumerate(values):
        for j, right in enumerate(values):
            assert (left < right) == (ranks[i] < ranks[j])


def test_rank_values_of_sorted_input_counts_up():
    values = [-2147483648, -2147483647, -2147483646, 5]
    assert rank_values(values) == list(range(1, len(values) + 1))


def test_rank_values_of_nothing_is_empty():
    assert rank_values([]) == []


def test_build_stack_holds_ranks_top_first():
    stack = build_stack(["5 -1", "3"])
    assert stack.values() == rank_values([5, -1, 3])
    assert len(stack) == 3


def test_build_stack_nodes_start_with_default_flag():
    stack = build_stack(["4", "8", "1"])
    assert [node.flag for node in stack] == [10, 10, 10]


def test_build_stack_rejects_duplicates():
    with pytest.raises(ParseError):
        build_stack(["4", "8 4"])


def test_build_stack_rejects_garbage():
    with pytest.raises(ParseError):
        build_stack(["4", "eight"])
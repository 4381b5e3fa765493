import pytest

from algonotes.brackets import Status, generalized_validate, validate_brackets


@pytest.mark.parametrize("text", ["", "()", "([]{})", "{[()()]}", "[]{}()"])
def test_balanced_strings_pass(text):
    assert validate_brackets(text) is True


@pytest.mark.parametrize("text", ["(", ")", "([)]", "(()", "{]", "(a)", "( )"])
def test_unbalanced_or_foreign_strings_fail(text):
    assert validate_brackets(text) is False


def test_default_pairs_match():
    assert generalized_validate("L<[]>R") is Status.MATCHED


def test_default_pairs_mismatch():
    assert generalized_validate("L]") is Status.NOT_MATCHED
    assert generalized_validate("L<") is Status.NOT_MATCHED


def test_illegal_character():
    assert generalized_validate("L(R") is Status.ILLEGAL


def test_first_problem_decides():
    assert generalized_validate("]x") is Status.NOT_MATCHED
    assert generalized_validate("x]") is Status.ILLEGAL


def test_empty_text_matches():
    assert generalized_validate("") is Status.MATCHED


@pytest.mark.parametrize("text", ["()", "(]", "{[()]}", "((", "}{", "[({})]"])
def test_generalized_agrees_with_standard_validator(text):
    pairs = {"(": ")", "[": "]", "{": "}"}
    status = generalized_validate(text, pairs)
    assert (status is Status.MATCHED) == validate_brackets(text)


def test_ambiguous_pairs_rejected():
    with pytest.raises(ValueError):
        generalized_validate("||", {"|": "|"})
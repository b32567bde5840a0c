import pytest

from querytree.expression import SearchWord
from querytree.parser import Parser, QuerySyntaxError, parse


def test_driver_example():
    expr = parse('(dogs AND cats birds) NOT "good pets"')
    assert expr.eval() == (
        "NotISR(AndISR(WordISR(dogs), WordISR(cats), WordISR(birds)), "
        "PhraseISR(WordISR(good), WordISR(pets)))"
    )


@pytest.mark.parametrize(
    "query, expected",
    [
        ("dogs", "WordISR(dogs)"),
        ("a b", "AndISR(WordISR(a), WordISR(b))"),
        ("a AND b", "AndISR(WordISR(a), WordISR(b))"),
        ("a OR b c", "OrISR(WordISR(a), AndISR(WordISR(b), WordISR(c)))"),
        ("x && y || z", "OrISR(AndISR(WordISR(x), WordISR(y)), WordISR(z))"),
        ("a -b", "NotISR(WordISR(a), WordISR(b))"),
        ('"solo"', "WordISR(solo)"),
        ('""', "PhraseISR()"),
        ("((a))", "WordISR(a)"),
        ("(a OR b) c", "AndISR(OrISR(WordISR(a), WordISR(b)), WordISR(c))"),
    ],
)
def test_valid_queries(query, expected):
    assert parse(query).eval() == expected


@pytest.mark.parametrize(
    "query",
    ["", "   ", "a OR", "a AND", "a NOT", '"a b', "(a b", ")", "a NOT b c", "a )", '"a AND b"', "OR a"],
)
def test_syntax_errors(query):
    with pytest.raises(QuerySyntaxError):
        parse(query)


def test_unclosed_group_after_word_is_dropped():
    # A failed nested constraint consumes its tokens, leaving only the first word.
    assert parse("a (b").eval() == "WordISR(a)"


def test_parser_class_matches_function():
    query = "red OR blue"
    assert Parser(query).parse() == parse(query)


def test_tree_structure_for_single_word():
    expr = parse("cat")
    assert expr.children[0].children[0].inner == SearchWord("cat")


def test_syntax_error_is_value_error():
    with pytest.raises(ValueError):
        parse("(")
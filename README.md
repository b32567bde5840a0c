# querytree

`querytree` turns a search-engine query into a tree of constraints. Calling
`eval()` on the tree gives a string that describes, as nested index stream
readers (ISRs), how the query would be answered.

## Query language

```
<Constraint>       ::= <BaseConstraint> { <OrOp> <BaseConstraint> }
<BaseConstraint>   ::= <SimpleConstraint> { [ <AndOp> ] <SimpleConstraint> }
                     | <SimpleConstraint> <NotOp> <SimpleConstraint>
<SimpleConstraint> ::= <Phrase> | <NestedConstraint> | <SearchWord>
<Phrase>           ::= '"' { <SearchWord> } '"'
<NestedConstraint> ::= '(' <Constraint> ')'
```

Operators:

| Meaning | Spellings          |
|---------|--------------------|
| and     | `AND`, `&`, `&&`   |
| or      | `OR`, `\|`, `\|\|` |
| not     | `NOT`, `-`         |

The keywords `AND`, `OR` and `NOT` are recognised only in upper case. Words
placed next to each other with no operator between them are ANDed together.
`NOT` joins exactly two simple constraints. A node with a single child
collapses into that child when evaluated.

## Installation

```
pip install .
```

## Command line

The `querytree` command reads one query line from standard input and prints
the evaluated tree, or `Syntax error` if the query does not parse:

```
echo '(dogs AND cats birds) NOT "good pets"' | querytree
```

prints

```
NotISR(AndISR(WordISR(dogs), WordISR(cats), WordISR(birds)), PhraseISR(WordISR(good), WordISR(pets)))
```

The command takes no options beyond `--help`.

## Library use

```python
from querytree.parser import parse, Parser, QuerySyntaxError

tree = parse('cats OR "big dogs"')
print(tree.eval())
# OrISR(WordISR(cats), PhraseISR(WordISR(big), WordISR(dogs)))

try:
    Parser("(unclosed").parse()
except QuerySyntaxError as error:
    print("bad query:", error)
```

`QuerySyntaxError` is a subclass of `ValueError`.

The tokenizer is available on its own:

```python
from querytree.tokenizer import tokenize, TokenStream, TokenType

for token in tokenize("a && b"):
    print(token)            # WORD 'a', ANDOP, WORD 'b', then END

stream = TokenStream("cats | dogs")
print(stream.tokens)        # ['cats', 'OR', 'dogs']
print(stream.describe())    # ' cats OR dogs'
print(stream.head)          # Token(type=<TokenType.WORD: 1>, value='cats')
stream.match(TokenType.WORD)  # consumes and returns the head token
```

`tokens` lists the query for ranking: words, and the labels `AND`, `OR`,
`NOT` and `QUOTE`; parentheses are left out. `describe()` renders the tokens
not yet consumed, up to the end marker.

The tree classes live in `querytree.expression`: `Constraint`,
`BaseConstraint` (with `BaseKind` telling AND from NOT), `SimpleConstraint`,
`Phrase`, `NestedConstraint` and `SearchWord`. All of them are frozen
dataclasses deriving from `Expression`, and each has an `eval()` method.

## What it does not do

`querytree` only parses queries and describes them. It holds no index, does
not search documents and does not rank results: the `eval()` output is a
description of the readers a search engine would build.

## Running the tests

```
pip install ".[test]"
pytest
```
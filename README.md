# mathpotato

MathPotato is a small programming language about mathematics. This package
holds its lexer, its syntax tree types and an early parser.

At present the language knows integer variable statements whose value is a
single integer literal:

```
Integer asd = 6;
```

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Lexing

`mathpotato.lexer.lex` splits source text into tokens. A single space ends the
current word; a `;` ends it too and becomes a token of its own. Text after the
last space or semicolon is not tokenized, and two spaces in a row give a token
for the empty word between them.

```python
from mathpotato.lexer import lex
from mathpotato.tokens import Token, TokenType

tokens = lex("Integer asd = 6;")
assert tokens[0] == Token(TokenType.KEYWORD_INTEGER, "Integer")
assert tokens[-1].token_type is TokenType.SIGN_SEMICOLON
```

`mathpotato.lexer.tokenize` classifies one word:

| Word            | Token type                           |
|-----------------|--------------------------------------|
| `(`             | `SIGN_OPEN_PARENTHESES`              |
| `)`             | `SIGN_CLOSE_PARENTHESES`             |
| `;`             | `SIGN_SEMICOLON`                     |
| `=`             | `SIGN_ASSIGNMENT`                    |
| `+`             | `OPERATION_ADDITION`                 |
| `/`             | `OPERATION_DIVISION`                 |
| `Integer`       | `KEYWORD_INTEGER`                    |
| ASCII digits only | `LITERAL_INTEGER_VALUE`            |
| anything else   | `LITERAL_VALUE_VARIABLE_IDENTIFIER`  |

`Token` is a frozen dataclass with `token_type` and `literal_value`.

## Syntax tree

`mathpotato.nodes` holds the node types: `IntegerStatementNode` (a named
integer variable), `IntegerValueExpressionNode` (an integer value, given a
fresh random `guid` unless one is passed) and `InfixExpressionNode` (an
operator linking a `left` and a `right` node). `VariableState` has the members
`DEFAULT`, `PROCESSING` and `FINAL`.

`mathpotato.ast_tree.AstTree` stores nodes keyed by UUID:

- `add_node(node)` stores a node under its own `guid`; `None` is ignored.
- `add_node_as_last_modified(guid, node)` stores a node and marks it as the
  last modified one; `last_modified()` returns it and
  `clean_last_modified()` forgets it.
- `merge(nodes)` inserts every entry of a mapping.
- `get(key)` returns one node, `nodes()` a copy of the whole mapping, and
  `len(tree)` the node count.

A missing key or an unset last-modified node raises `AstTreeError`.

## Parsing

`mathpotato.parser` provides:

- `parse(tokens)` parses every `Integer` statement in the token list into one
  `AstTree`.
- `parse_integer_statement(index, tokens)` parses `Integer name = value;`
  starting at `index` and returns the position after the `;` together with a
  tree holding the `IntegerStatementNode` and its value node.
- `parse_integer_statement_expression(index, tokens, tree)` parses the
  expression between `=` and `;` into `tree`.

```python
from mathpotato.lexer import lex
from mathpotato.nodes import IntegerStatementNode
from mathpotato.parser import parse

tree = parse(lex("Integer asd = 6;"))
statements = [n for n in tree.nodes().values() if isinstance(n, IntegerStatementNode)]
assert statements[0].variable_name == "asd"
assert statements[0].variable_value == 6
```

Malformed input raises `ParserError`, whose `details` holds the message: a
missing or misplaced token, two values in a row, a literal outside the 32-bit
signed range, or any token in an expression other than an integer literal or
`;`.

## Command line

```
mathpotato -c "Integer asd = 6;"
mathpotato program.mp
mathpotato < program.mp
```

The program text comes from `-c/--code`, from a file, or from standard input.
Line breaks and tabs are treated as spaces. Each declared variable is printed
as `name = value`. On a parser error the message is written to standard error
and the exit status is 1.

## What it does not do

The package does not evaluate anything. Expressions may only be a single
integer literal: operators such as `+` and `/` and parentheses are recognised
by the lexer but rejected by the parser, and variables cannot be referred to.
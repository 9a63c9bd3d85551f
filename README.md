# minishell

A small interactive shell. Each line you type is split into tokens
(words, pipes and redirections), built into a syntax tree and then
walked. The only command that does anything is the built-in `pwd`.

## Installation

```
pip install .
```

## Usage

Start the shell:

```
minishell
```

With `--debug` the shell also draws the syntax tree of every line and
echoes the line back after running it:

```
minishell --debug
```

The shell first prints a banner saying whether debug mode is on, then a
`minishell$>` prompt, and reads one line at a time. For each line:

- a line with no tokens (for example an empty line) prints `Syntax error`;
- the tree is walked in post-order (left, right, then the node itself);
- a command whose first word is `pwd` prints the current directory;
- a pipe node prints `Executing pipe` and a redirection node prints
  `Executing redir`;
- any other command is accepted and does nothing.

At end of input it prints `Exiting shell...` and exits with status 1.

## What it does not do

- It does not start external programs; only `pwd` is run.
- Pipes and redirections are parsed into the tree but no data flows
  through them and no files are opened.
- There is no handling of environment variables: no `export`, no
  `unset` and no `$NAME` expansion.
- Quotes are kept as part of the words; they are not removed.

## Using it as a library

```python
from minishell.lexer import tokenize
from minishell.parser import parse_tokens
from minishell.printer import format_ast

tokens = tokenize("ls -l | grep py > out.txt")
tree = parse_tokens(tokens)
print(format_ast(tree, 0))
```

Modules for the shell itself:

- `minishell.tokens`: `TokenType`, `Token`, `char_type(c)` and
  `operator_type(text)`.
- `minishell.lexer`: `tokenize(text)` turns a line into `Token` objects.
  Blanks and operators inside quotes stay in one word.
- `minishell.parser`: `parse_tokens(tokens)` builds a tree of `Node`
  objects (`NodeType.COMMAND`, `PIPE` or `REDIRECTION`); also
  `is_redirect` and `count_args`.
- `minishell.printer`: `format_node`, `format_ast` and `display_ast`
  draw the tree as indented text.
- `minishell.executor`: `builtin_pwd`, `execute_node` and
  `execute_ast(node, stream)`.
- `minishell.validate`: `validate_input(text)` raises
  `ValidationError` for missing input, unbalanced quotes, semicolons,
  redirections and pipes; `check_unclosed_quotes` and
  `check_invalid_special_characters` are the separate checks.
- `minishell.shell`: `run(stdin, stdout, debug)` runs the loop over any
  pair of text streams and returns the exit status; `debug_info(debug)`
  gives the banner; `main(argv)` is the command entry point.

General helpers:

- `minishell.chars`: ASCII classification (`is_alpha`, `is_digit`,
  `is_alnum`, `is_ascii`, `is_print`, `is_space`) and `to_upper`,
  `to_lower`.
- `minishell.numbers`: `atoi(text)` and `itoa(n)`.
- `minishell.strings`: C-style string functions on Python strings
  (`strchr`, `strrchr`, `strcmp`, `strncmp`, `strnstr`, `strndup`,
  `strlcpy`, `strlcat`, `substr`, `strjoin`, `strtrim`, `strmapi`,
  `striteri`); positions are indices and `None` means "not found".
- `minishell.memory`: byte-buffer functions (`memset`, `bzero`,
  `calloc`, `memcpy`, `memmove`, `memchr`, `memcmp`).
- `minishell.split`: `split(text, sep)` and `split_mult(text, charset)`,
  which drop empty words.
- `minishell.linkedlist`: `LinkedList` of `ListNode` links.
- `minishell.hashmap`: `HashMap`, a fixed-size string map, and
  `hash_key(key, size)`.
- `minishell.linereader`: `LineReader(stream)` reads a stream line by
  line through a fixed-size buffer.
- `minishell.output`: `put_char`, `put_str`, `put_endl` and `put_nbr`
  write to a text stream.

## Running the tests

```
pip install .[test]
pytest
```
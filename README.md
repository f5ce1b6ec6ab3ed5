# minishell

A library that reads one line of shell input and turns it into the commands of
a pipeline. It handles single and double quotes, pipes, the `<`, `>`, `>>` and
`<<` redirections, and `$NAME` and `$?` expansion.

## Installation

```
pip install .
```

## Checking a line

`minishell.syntax.check_line` trims the line and returns it. It returns `None`
when the line is empty or blank. It raises `ShellSyntaxError` when the line has
unbalanced quotes, a doubled, empty or dangling pipe, or a redirection with no
word after it:

```python
from minishell.syntax import check_line, ShellSyntaxError

try:
    check_line("ls | | wc")
except ShellSyntaxError as error:
    print(error)         # minishell: syntax error near unexpected token `|'
    print(error.status)  # 2
```

You can also run each check on its own with `quotes_balanced`, `pipes_valid`
and `redirections_valid`. `count_pipes` counts the pipes that are outside
quotes. `QuoteState` tracks quoting while you scan a line one character at a
time.

## Parsing

```python
from minishell.environment import Environment
from minishell.parser import parse

env = Environment(["HOME=/home/user", "USER=user"], [])
for command in parse('echo "$USER" > out.txt | cat -e', env, 0):
    print(command.name, command.words, command.redirections)
# echo ['echo', 'user'] [('>', 'out.txt')]
# cat ['cat', '-e'] []
```

`parse` returns one `Command` for each pipeline segment. It returns an empty
list when there is nothing to run. Each `Command` has these fields:

- `tokens`: the classified words of the segment.
- `words`: the argument vector.
- `redirections`: each operator paired with the word that follows it, which is
  the file name or the heredoc delimiter.
- `name`: the first word, or `None` when there are no words.

Variables are expanded everywhere except inside single quotes and in the word
after `<<`. Quotes are removed after expansion. The third argument of `parse`
is the last exit status, and `$?` expands to it.

## Lower-level pieces

- `minishell.tokens`
  - `split_line` cuts a line into pipeline segments of words.
  - `classify` gives each word a `TokenType`: `CMD`, `OPT`, `ARG`, `LIM`, or
    one of the redirection types `INREDIR`, `INREDIRAPP`, `OUTREDIR` and
    `HEREDOC`.
  - `is_redirection`, `has_heredoc` and `has_command` inspect tokens and
    segments.
- `minishell.expand`
  - `expand_word` expands the variables in one word.
  - `expand_segments` expands the words of every segment into `Token` objects.
  - `strip_quotes` removes the quotes that delimit the quoted parts of a word.
- `minishell.parser`
  - `command_words` and `redirections` build the parts of a `Command` from a
    classified segment.
- `minishell.environment`
  - `Environment` holds the environment entries and the exported-only entries,
    both written as `NAME=value`. `lookup` finds a value and `entries` lists
    every entry.
  - `variable_value` and `word_len` resolve a `$` reference.
  - `valid_export_name` checks a name given to `export`.
- `minishell.strutils`
  - Numeric checks: `is_numeric`, `fits_in_long` and `atoi_long`, which reads
    the number and wraps it to 64 bits.
  - String helpers: `count_words`, `name_length`, `contains_slash`,
    `remove_quotes`, `first_quoted`, `is_alpha_name`, `error_message` and
    `join_path`.

## What it does not do

The package only checks and parses lines. It does not:

- show a prompt or keep a history;
- run programs or set up pipes;
- open redirection files or read heredoc input;
- carry out builtins such as `cd`, `echo`, `export`, `unset` or `exit`;
- handle signals.

It has no command of its own.

## Tests

```
pip install .[test]
pytest
```
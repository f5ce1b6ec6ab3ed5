import pytest

from minishell.environment import Environment
from minishell.parser import Command, command_words, parse, redirections
from minishell.syntax import ShellSyntaxError, count_pipes
from minishell.tokens import Token, TokenType, classify


@pytest.fixture
def env():
    return Environment(["HOME=/home/user", "USER=user"], [])


def test_simple_command(env):
    commands = parse("echo hello", env, 0)
    assert [c.words for c in commands] == [["echo", "hello"]]
    assert commands[0].name == "echo"
    assert commands[0].redirections == []


def test_pipeline_splits_commands(env):
    commands = parse("ls -l | wc", env, 0)
    assert [c.words for c in commands] == [["ls", "-l"], ["wc"]]
    assert commands[0].tokens[1].type is TokenType.OPT


@pytest.mark.parametrize("line", ["a | b", "a | b | c", "echo x|cat|wc -l"])
def test_command_count_matches_pipes(env, line):
    assert len(parse(line, env, 0)) == count_pipes(line) + 1


def test_empty_line_gives_nothing(env):
    assert parse("   \t ", env, 0) == []


def test_unclosed_quote_raises(env):
    with pytest.raises(ShellSyntaxError) as info:
        parse('echo "abc', env, 0)
    assert info.value.message == "minishell: syntax error"


def test_dangling_pipe_raises(env):
    with pytest.raises(ShellSyntaxError) as info:
        parse("ls |", env, 0)
    assert info.value.message == "minishell: syntax error near unexpected token `|'"


def test_dangling_redirection_raises(env):
    with pytest.raises(ShellSyntaxError) as info:
        parse("cat >", env, 0)
    assert info.value.message == (
        "minishell: syntax error near unexpected token `newline'"
    )


def test_variable_expansion(env):
    commands = parse("echo $HOME", env, 0)
    assert commands[0].words == ["echo", "/home/user"]


def test_unset_variable_vanishes(env):
    commands = parse("echo $NOPE", env, 0)
    assert commands[0].words == ["echo"]


def test_status_expansion(env):
    commands = parse("echo $?", env, 42)
    assert commands[0].words == ["echo", "42"]


def test_single_quotes_block_expansion(env):
    commands = parse("echo '$HOME'", env, 0)
    assert commands[0].words == ["echo", "$HOME"]


def test_quoted_words_keep_blanks_and_pipes(env):
    commands = parse('echo "a b|c"', env, 0)
    assert len(commands) == 1
    assert commands[0].words == ["echo", "a b|c"]


def test_output_redirection(env):
    commands = parse("cat file > out", env, 0)
    assert commands[0].words == ["cat", "file"]
    assert commands[0].redirections == [(">", "out")]


def test_heredoc_limiter_not_expanded(env):
    commands = parse("cat << $HOME", env, 0)
    assert commands[0].words == ["cat"]
    assert commands[0].redirections == [("<<", "$HOME")]


def test_leading_redirection_keeps_only_command(env):
    commands = parse("< in cat -e", env, 0)
    assert commands[0].words == ["cat"]
    assert commands[0].redirections == [("<", "in")]


def test_command_words_on_classified_tokens():
    segment = classify(["grep", "-n", "x", ">>", "log"])
    assert command_words(segment) == ["grep", "-n", "x"]
    assert redirections(segment) == [(">>", "log")]


def test_command_words_empty_segment():
    assert command_words([]) == []
    assert redirections([]) == []


def test_redirections_keep_order():
    segment = classify(["cat", "<", "a", ">", "b", ">>", "c"])
    assert [op for op, _ in redirections(segment)] == ["<", ">", ">>"]
    assert [target for _, target in redirections(segment)] == ["a", "b", "c"]


def test_command_name_none_without_words():
    assert Command(tokens=[Token("x", TokenType.ARG)]).name is None
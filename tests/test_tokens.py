import pytest

from minishell.syntax import count_pipes
from minishell.tokens import (
    Token,
    TokenType,
    classify,
    has_command,
    has_heredoc,
    is_redirection,
    split_line,
)


def _types(tokens):
    return [token.type for token in tokens]


def test_split_on_blanks_and_pipes():
    assert split_line("ls -l | wc -c") == [["ls", "-l"], ["wc", "-c"]]


def test_split_keeps_quoted_pipe_and_blanks():
    assert split_line('echo "a | b"') == [["echo", '"a | b"']]


def test_split_separates_glued_redirections():
    assert split_line("cat<in>out") == [["cat", "<", "in", ">", "out"]]


def test_split_keeps_double_operators_whole():
    assert split_line("cat << EOF") == [["cat", "<<", "EOF"]]
    assert split_line("a>>b") == [["a", ">>", "b"]]


def test_split_keeps_quoted_redirection_inside_word():
    assert split_line('echo ">"') == [["echo", '">"']]


@pytest.mark.parametrize(
    "line",
    ["ls", "a | b | c", "echo 'x|y' | cat", "cat<f|grep x>o", '"|" | x'],
)
def test_segment_count_follows_unquoted_pipes(line):
    assert len(split_line(line)) == count_pipes(line) + 1


def test_classify_command_option_argument():
    tokens = classify(["ls", "-l", "file"])
    assert _types(tokens) == [TokenType.CMD, TokenType.OPT, TokenType.ARG]
    assert [token.content for token in tokens] == ["ls", "-l", "file"]


def test_classify_input_redirection_then_command():
    tokens = classify(["<", "in", "cat", "-e"])
    assert _types(tokens) == [
        TokenType.OUTREDIR,
        TokenType.ARG,
        TokenType.CMD,
        TokenType.OPT,
    ]


def test_classify_heredoc():
    tokens = classify(["<<", "EOF", "cat"])
    assert _types(tokens) == [TokenType.HEREDOC, TokenType.LIM, TokenType.CMD]


def test_classify_output_redirections():
    assert _types(classify([">", "out"])) == [TokenType.INREDIR, TokenType.ARG]
    assert _types(classify(["echo", ">>", "log"])) == [
        TokenType.CMD,
        TokenType.INREDIRAPP,
        TokenType.ARG,
    ]


def test_option_needs_a_letter_after_dash():
    assert _types(classify(["ls", "-"])) == [TokenType.CMD, TokenType.ARG]
    assert _types(classify(["ls", "-1"])) == [TokenType.CMD, TokenType.ARG]


def test_option_only_right_after_command():
    assert _types(classify(["ls", "x", "-l"])) == [
        TokenType.CMD,
        TokenType.ARG,
        TokenType.ARG,
    ]


def test_preset_type_is_kept_and_input_untouched():
    given = Token(">", TokenType.ARG)
    tokens = classify([given, "x"])
    assert _types(tokens) == [TokenType.ARG, TokenType.ARG]
    given_plain = Token("ls")
    classify([given_plain])
    assert given_plain.type is None


def test_is_redirection():
    assert is_redirection(Token("<<")) is True
    assert is_redirection(Token(">")) is True
    assert is_redirection(Token("<<", TokenType.ARG)) is False
    assert is_redirection(Token("x", TokenType.HEREDOC)) is True
    assert is_redirection(Token("x")) is False


def test_has_heredoc_and_command():
    heredoc = classify(["<<", "EOF"])
    assert has_heredoc(heredoc) is True
    assert has_command(heredoc) is False
    plain = classify(["ls", "-l"])
    assert has_heredoc(plain) is False
    assert has_command(plain) is True
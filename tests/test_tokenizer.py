from __future__ import annotations

from myshell.parsing.tokenizer import tokenize


def test_tokenize_groups_single_quoted_text() -> None:
    assert tokenize("echo 'a b' c") == ["echo", "a b", "c"]


def test_tokenize_collapses_runs_of_spaces() -> None:
    for line in ["echo   hello    world", "  echo hello world  ", "echo hello world"]:
        assert tokenize(line) == ["echo", "hello", "world"]


def test_tokenize_never_emits_empty_tokens() -> None:
    assert tokenize("") == []
    assert tokenize("     ") == []
    assert tokenize("''") == []
    assert tokenize("a '' b") == ["a", "b"]


def test_tokenize_preserves_spaces_inside_quotes() -> None:
    assert tokenize("echo '  spaced   out  '") == ["echo", "  spaced   out  "]


def test_tokenize_joins_adjacent_quoted_and_plain_text() -> None:
    assert tokenize("echo 'hello'world 'a''b'") == ["echo", "helloworld", "ab"]


def test_tokenize_closes_unterminated_quote_at_end_of_line() -> None:
    assert tokenize("echo 'unterminated text") == ["echo", "unterminated text"]


def test_tokenize_does_not_treat_double_quotes_or_tabs_specially() -> None:
    assert tokenize('echo "a b"') == ["echo", '"a', 'b"']
    assert tokenize("a\tb") == ["a\tb"]

"""Command line parsing: tokenization and redirection extraction."""

from myshell.parsing.redirection import RedirectionSpec, extract_redirections
from myshell.parsing.tokenizer import tokenize

__all__ = ["RedirectionSpec", "extract_redirections", "tokenize"]

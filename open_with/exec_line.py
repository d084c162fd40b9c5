#!/usr/bin/env python3
"""
Exec key tokenizing, field code expansion and shell quoting.

The launch template of a desktop entry goes through three stages:
tokenize (quotes and backslashes are recorded, not interpreted),
unescape each token, then expand the % field codes against the target
path. The resulting arguments are rendered as one double-quoted string
per argument, ready for a shell-style executor.
"""

from __future__ import annotations

# Standard Library
from dataclasses import dataclass
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
	from .desktop_entry import CandidateInfo

logger = logging.getLogger(__name__)

#============================================


EXEC_WHITESPACE = frozenset(" \t\n\r\f\v")
UNESCAPABLE_CHARS = frozenset("\"'`$\\")
SHELL_ESCAPED_CHARS = frozenset("\\\"$`")
PATH_FIELD_CODES = frozenset("fFuU")
IGNORED_FIELD_CODES = frozenset("ndDtTvmki")

#============================================


class FieldCodeError(ValueError):
	"""
	Raised when a template holds an unknown or truncated field code.
	"""


@dataclass(frozen=True, slots=True)
class Token:
	text: str
	was_double_quoted: bool = False
	was_single_quoted: bool = False


#============================================


def tokenize_exec(template: str) -> list[Token]:
	"""
	Split an Exec template into tokens.

	Backslash escapes are kept verbatim in the token text. An unterminated
	quote fails the whole template.

	Args:
		template: Raw Exec value.

	Returns:
		List of tokens, empty on failure.
	"""
	tokens: list[Token] = []
	current: list[str] = []
	in_double_quotes = False
	in_single_quotes = False
	quoted = False
	single_quoted = False
	prev_backslash = False

	for char in template:
		if prev_backslash:
			current.append("\\")
			current.append(char)
			prev_backslash = False
			continue
		if char == "\\":
			prev_backslash = True
			continue
		if char == '"' and not in_single_quotes:
			in_double_quotes = not in_double_quotes
			quoted = True
			continue
		if char == "'" and not in_double_quotes:
			in_single_quotes = not in_single_quotes
			single_quoted = True
			continue
		if char in EXEC_WHITESPACE and not in_double_quotes and not in_single_quotes:
			if current or quoted or single_quoted:
				tokens.append(Token("".join(current), quoted, single_quoted))
				current = []
				quoted = False
				single_quoted = False
			continue
		current.append(char)

	if prev_backslash:
		current.append("\\")

	if current or quoted or single_quoted:
		if (quoted and in_double_quotes) or (single_quoted and in_single_quotes):
			logger.debug("Unterminated quote in Exec template: %r", template)
			return []
		tokens.append(Token("".join(current), quoted, single_quoted))
	return tokens


#============================================


def undo_escapes(token: Token) -> str:
	"""
	Resolve backslash escapes in a token.

	Only \\" \\' \\` \\$ and \\\\ are escapes; any other pair is kept as is.
	"""
	text = token.text
	out: list[str] = []
	i = 0
	while i < len(text):
		char = text[i]
		if char == "\\" and i + 1 < len(text):
			following = text[i + 1]
			if following in UNESCAPABLE_CHARS:
				out.append(following)
			else:
				out.append(char)
				out.append(following)
			i += 2
			continue
		out.append(char)
		i += 1
	return "".join(out)


#============================================


def expand_field_codes(text: str, path: str, name: str) -> str:
	"""
	Substitute % field codes in one unescaped token.

	Args:
		text: Unescaped token text.
		path: Target file path for %f %F %u %U.
		name: Display name for %c.

	Returns:
		Expanded argument text, possibly empty.

	Raises:
		FieldCodeError: On an unknown code or a trailing %.
	"""
	out: list[str] = []
	i = 0
	while i < len(text):
		char = text[i]
		if char != "%":
			out.append(char)
			i += 1
			continue
		if i + 1 >= len(text):
			raise FieldCodeError(f"Trailing % in {text!r}")
		code = text[i + 1]
		i += 2
		if code in PATH_FIELD_CODES:
			out.append(path)
		elif code == "c":
			out.append(name)
		elif code == "%":
			out.append("%")
		elif code in IGNORED_FIELD_CODES:
			continue
		else:
			raise FieldCodeError(f"Unknown field code %{code} in {text!r}")
	return "".join(out)


#============================================


def build_arguments(template: str, path: str, name: str) -> list[str]:
	"""
	Turn an Exec template into the argument list for a target path.

	When no token holds a field code, the path is appended as the last
	argument.

	Args:
		template: Raw Exec value.
		path: Target file path.
		name: Candidate display name.

	Returns:
		Argument list, empty when the template cannot be used.
	"""
	tokens = tokenize_exec(template)
	if not tokens:
		return []
	unescaped = [undo_escapes(token) for token in tokens]
	has_field_code = any("%" in text for text in unescaped)
	args: list[str] = []
	for text in unescaped:
		try:
			expanded = expand_field_codes(text, path, name)
		except FieldCodeError as exc:
			logger.debug("Cannot expand Exec template %r: %s", template, exc)
			return []
		if expanded:
			args.append(expanded)
	if args and not has_field_code:
		args.append(path)
	return args


#============================================


def escape_arg(arg: str) -> str:
	"""
	Wrap an argument in double quotes for a shell.
	"""
	escaped = "".join(f"\\{char}" if char in SHELL_ESCAPED_CHARS else char for char in arg)
	return f'"{escaped}"'


#============================================


def render_command(args: list[str]) -> str:
	return " ".join(escape_arg(arg) for arg in args)


#============================================


def construct_command_line(candidate: CandidateInfo, path: str) -> str:
	"""
	Build the shell-safe command line that opens a path with a candidate.

	Args:
		candidate: Selected application.
		path: Target file path.

	Returns:
		Command string, or an empty string when no command can be built.
	"""
	if not candidate.command_template:
		return ""
	args = build_arguments(candidate.command_template, path, candidate.name)
	if not args:
		return ""
	return render_command(args)

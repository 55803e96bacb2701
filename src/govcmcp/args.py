"""
Command-line argument building for govc.

govc flags are single-dash Go flags. Booleans must be written as
`-flag=true` / `-flag=false` because a bare `-flag value` would leave the
value as a stray positional argument.
"""

from collections.abc import Iterable, Mapping

from govcmcp.types import OptionValue

JSON_FLAG = "-json"


def build_args(
    options: Mapping[str, OptionValue],
    positional: Iterable[str] = (),
    json: bool = True,
) -> list[str]:
    """
    Build govc CLI tokens from named options and positional arguments.

    - boolean true  -> `-flag=true`
    - boolean false -> `-flag=false`
    - string/number -> `-flag value`
    - None or ""    -> omitted
    """
    args: list[str] = []

    if json:
        args.append(JSON_FLAG)

    for key, value in options.items():
        if value is None or value == "":
            continue
        # bool first: bool is a subclass of int
        if isinstance(value, bool):
            args.append(f"-{key}={'true' if value else 'false'}")
        else:
            args.extend([f"-{key}", str(value)])

    args.extend(positional)
    return args


def split_args(text: str) -> list[str]:
    """
    Split a shell-like string into arguments, respecting simple quoting.

    A single or double quote opens a quoted span that ends at the next
    occurrence of the same character; spaces inside it are kept. There
    are no escapes, and an unterminated quote runs to the end of input.
    """
    args: list[str] = []
    current = ""
    in_quote: str | None = None

    for ch in text:
        if in_quote:
            if ch == in_quote:
                in_quote = None
            else:
                current += ch
        elif ch in ('"', "'"):
            in_quote = ch
        elif ch == " ":
            if current:
                args.append(current)
                current = ""
        else:
            current += ch

    if current:
        args.append(current)
    return args

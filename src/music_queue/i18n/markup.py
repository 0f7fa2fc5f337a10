"""Placeholder substitution and inline color tags.

Templates look like `"<b>Downloaded:</b> <green>{}</green>"`. Placeholders are
filled first, then tags are converted to ANSI escape codes (or stripped when
coloring is disabled).
"""

from collections.abc import Sequence

PLACEHOLDER = "{}"

RESET = "\x1b[0m"
COLOR_TAGS: dict[str, str] = {
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "blue": "\x1b[34m",
    "magenta": "\x1b[35m",
    "cyan": "\x1b[36m",
    "bright_red": "\x1b[91m",
    "bright_green": "\x1b[92m",
    "bright_yellow": "\x1b[93m",
    "bright_blue": "\x1b[94m",
    "bright_magenta": "\x1b[95m",
    "bright_cyan": "\x1b[96m",
    "b": "\x1b[1m",
}


def substitute(template: str, args: Sequence[str] = ()) -> str:
    """Fill each `{}` with the next argument.

    Placeholders without an argument are kept, extra arguments are ignored.
    """

    parts = template.split(PLACEHOLDER)
    values = iter(args)
    result = [parts[0]]

    for part in parts[1:]:
        result.append(next(values, PLACEHOLDER))
        result.append(part)

    return "".join(result)


def expand_tags(text: str, coloring: bool = True) -> str:
    """Convert `<tag>...</tag>` pairs into ANSI escape codes.

    Closing a tag removes its most recent entry from the stack, wherever it is,
    then resets and re-applies the styles still open. Unknown tags are kept
    literally. Without coloring, known tags are only stripped.
    """

    result = [RESET] if coloring else []
    stack: list[str] = []
    index = 0

    while index < len(text):
        char = text[index]
        end = text.find(">", index + 1) if char == "<" else -1

        if end == -1:
            result.append(char)
            index += 1
            continue

        token = text[index + 1 : end]
        closing = token.startswith("/")
        name = token[1:] if closing else token
        code = COLOR_TAGS.get(name)

        if code is None:
            result.append(text[index : end + 1])
        elif closing:
            for position in range(len(stack) - 1, -1, -1):
                if stack[position] == code:
                    del stack[position]
                    break
            if coloring:
                result.append(RESET)
                result.extend(stack)
        else:
            stack.append(code)
            if coloring:
                result.append(code)

        index = end + 1

    return "".join(result)


def format(template: str, args: Sequence[str] = (), coloring: bool = True) -> str:
    return expand_tags(substitute(template, args), coloring)

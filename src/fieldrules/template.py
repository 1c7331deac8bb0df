"""Literal placeholder substitution for default error messages."""

import re
from typing import Mapping

#: Token replaced by the field key in default validator messages.
NAME_TOKEN = "$name"


def substitute(template: str, data: Mapping[str, str]) -> str:
    """Replace every literal occurrence of each token with its value.

    Tokens are matched literally and the template is scanned once, left to
    right, so replacement text is never re-scanned. When two tokens could
    match at the same position the one listed first in ``data`` wins.

    Args:
        template: Message possibly containing tokens such as ``$name``
        data: Mapping of token to replacement text

    Returns:
        The template with all tokens replaced

    Example:
        ```python
        substitute("$name 不能小于 10", {"$name": "age"})
        # 'age 不能小于 10'
        ```
    """
    tokens = [token for token in data if token]
    if not tokens or not template:
        return template

    pattern = re.compile("|".join(re.escape(token) for token in tokens))
    return pattern.sub(lambda match: data[match.group(0)], template)

"""Shell-style environment variable substitution.

References take the form ``$NAME`` or ``${NAME}``, where NAME is a
letter or underscore followed by letters, digits or underscores. A
reference to an unset variable expands to the empty string. Anything
else, including a ``$`` that does not start a valid reference, is copied
through unchanged.
"""

import os
import re
from typing import Mapping, Optional

_NAME = r"[A-Za-z_][A-Za-z0-9_]*"
_REFERENCE = re.compile(rf"\$(?:\{{({_NAME})\}}|({_NAME}))")
_REFERENCE_BYTES = re.compile(_REFERENCE.pattern.encode("ascii"))


def expand_env(text: str, environ: Optional[Mapping[str, str]] = None) -> str:
    """Expand variable references in text.

    Args:
        text: Text that may contain ``$NAME`` / ``${NAME}`` references
        environ: Variables to substitute from (defaults to os.environ,
            read at call time)

    Returns:
        The text with every reference replaced by its value
    """
    env = os.environ if environ is None else environ

    def _replace(match: re.Match) -> str:
        name = match.group(1) or match.group(2)
        return env.get(name, "")

    return _REFERENCE.sub(_replace, text)


def substitute_env(data: bytes, environ: Optional[Mapping[str, str]] = None) -> bytes:
    """Expand variable references in raw bytes.

    Same rules as expand_env, but only the references themselves are
    touched, so input that is not valid UTF-8 passes through intact.
    """
    env = os.environ if environ is None else environ

    def _replace(match: re.Match) -> bytes:
        name = (match.group(1) or match.group(2)).decode("ascii")
        return env.get(name, "").encode("utf-8", "surrogateescape")

    return _REFERENCE_BYTES.sub(_replace, data)

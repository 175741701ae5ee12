import re

MAX_LENGTH = 10_000

ANGLE_BRACKETS = re.compile(r"[<>]")
JAVASCRIPT_SCHEME = re.compile(r"javascript:", re.IGNORECASE)
EVENT_HANDLER = re.compile(r"on\w+=", re.IGNORECASE | re.ASCII)
SCRIPT_WORD = re.compile(r"script", re.IGNORECASE)


def sanitize_input(value: str | None) -> str:
    """
    Strip markup and script-like fragments from free text.

    The steps run in a fixed order, each one on the output of the previous:
    trim, drop ``<``/``>``, drop ``javascript:``, drop ``on<word>=`` handlers, drop the word ``script``,
    then cut to ``MAX_LENGTH`` characters.

    This is best-effort defanging and not an HTML sanitizer. It also mangles innocent words,
    e.g. "manuscript" comes out as "manu".
    """
    if not value:
        return ""

    cleaned: str = value.strip()
    cleaned = ANGLE_BRACKETS.sub("", cleaned)
    cleaned = JAVASCRIPT_SCHEME.sub("", cleaned)
    cleaned = EVENT_HANDLER.sub("", cleaned)
    cleaned = SCRIPT_WORD.sub("", cleaned)
    return cleaned[:MAX_LENGTH]

"""Outcome Formatting - single-line text rendering of a ValidationOutcome.

Invariants:
    - Pure: no IO, returns a str
    - Output is always one line: Ok -> `success(())`, Err -> `failure([...])`
    - Messages keep registration order, double-quoted; quotes, backslashes and
      every str.splitlines() line break are escaped
"""

from passguard.core.validation_outcome import Err, Ok, ValidationOutcome


# Every character str.splitlines() breaks on
_LINE_BREAKS = "\n\r\x0b\x0c\x1c\x1d\x1e\x85\u2028\u2029"


def _escape_code(ch: str) -> str:
    code = ord(ch)
    if code < 0x100:
        return f"\\x{code:02x}"
    return f"\\u{code:04x}"


_ESCAPES = {ord(ch): _escape_code(ch) for ch in _LINE_BREAKS}
_ESCAPES.update({
    ord("\\"): "\\\\",
    ord('"'): '\\"',
    ord("\n"): "\\n",
    ord("\r"): "\\r",
})


def _quote(message: str) -> str:
    return f'"{message.translate(_ESCAPES)}"'


def format_outcome(outcome: ValidationOutcome) -> str:
    """Render an outcome for display."""
    match outcome:
        case Ok():
            return "success(())"
        case Err(messages):
            return f"failure([{', '.join(_quote(m) for m in messages)}])"
    raise TypeError(f"not a ValidationOutcome: {outcome!r}")

"""passguard example - validates a fixed password and prints the outcome.

Invariants:
    - No CLI arguments consumed; the example input is a hardcoded literal
    - Exactly one line on stdout: success(()) or failure([...])
    - Returns 0 regardless of outcome (a weak password is not a program error)
    - Logging configured from settings on startup, logs go to stderr

Design Decisions:
    - Imperative shell around the pure core: settings + logging + print live here only
"""

import logging
import sys

from passguard.config import get_settings
from passguard.core.format_outcome import format_outcome
from passguard.core.password_rules import build_example_validator
from passguard.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)

EXAMPLE_PASSWORD = "hogehogeho"


def main() -> int:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)

    validator = build_example_validator()
    outcome = validator.validate(EXAMPLE_PASSWORD)

    failures = outcome.err() or ()
    logger.info(
        "Validated example password",
        extra={
            "rule_count": len(validator),
            "failure_count": len(failures),
            "candidate_length": len(EXAMPLE_PASSWORD),
        },
    )

    print(format_outcome(outcome))
    return 0


if __name__ == "__main__":
    sys.exit(main())

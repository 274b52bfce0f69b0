"""Send one signed request to the configured Youtu host and report the result."""

from __future__ import annotations

import sys

from youtu.integrations import IntegrationCheckResult, run_all_checks
from youtu.monitoring.logging import configure_logging


def describe(result: IntegrationCheckResult) -> str:
    return f"{'✅' if result.success else '❌'} {result.name}: {result.message}"


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    configure_logging("DEBUG" if "--verbose" in args else None)
    results = run_all_checks()
    print("\n".join(describe(result) for result in results))
    return 0 if all(result.success for result in results) else 1


if __name__ == "__main__":
    raise SystemExit(main())

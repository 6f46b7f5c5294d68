"""
Runtime Environment Validation Module

Validates configuration at application startup. If validation fails, the
application refuses to start (hard fail) instead of serving screens with a
broken CORS policy or an invalid submission delay.
"""

import sys

from pydantic import ValidationError

from propdesk.core.config import Settings


def validate_environment() -> Settings:
    """
    Validate configuration at startup.

    Must be called before the FastAPI app is created.

    Returns:
        Settings: Validated settings object

    Raises:
        SystemExit: If validation fails (exit code 1)
    """
    try:
        settings = Settings()
    except ValidationError as e:
        print("❌ FATAL: Environment validation failed", file=sys.stderr)
        print("\nMissing or invalid environment variables:", file=sys.stderr)
        for error in e.errors():
            field = " -> ".join(str(loc) for loc in error["loc"])
            print(f"   • {field}: {error['msg']}", file=sys.stderr)
        print("\nPlease check your .env file or environment variables.", file=sys.stderr)
        sys.exit(1)

    # Wildcard CORS is only tolerated in debug mode
    if not settings.debug and "*" in settings.origins:
        print(
            "❌ FATAL: Wildcard CORS origin (*) detected in production mode.",
            file=sys.stderr,
        )
        print(
            "   Set ALLOWED_ORIGINS to specific domains (comma-separated).",
            file=sys.stderr,
        )
        sys.exit(1)

    if not settings.origins:
        print("❌ FATAL: ALLOWED_ORIGINS is empty.", file=sys.stderr)
        sys.exit(1)

    return settings


if __name__ == "__main__":
    validate_environment()
    print("\n✅ All environment variables are valid!")

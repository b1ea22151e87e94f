"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    from opencmd.cli._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv or "-v" in argv:
        from opencmd.api.config.get_package_version import get_package_version

        print(f"opencmd {get_package_version()}")
        return 0

    app = _create_app()
    try:
        app(argv, prog_name="opencmd")
    except SystemExit as e:
        # Usage errors exit with 2; every failure is reported as 1
        return 0 if e.code in (None, 0) else 1
    return 0

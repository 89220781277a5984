"""CLI entry point: python -m clickerengine.mcp [game_module]"""

from __future__ import annotations

import sys


def main() -> None:
    module_path = sys.argv[1] if len(sys.argv) > 1 else None

    # Redirect stdout to stderr during module loading in case define_game() prints
    real_stdout = sys.stdout
    sys.stdout = sys.stderr
    try:
        from clickerengine.cli import load_game

        config = load_game(module_path)
    finally:
        sys.stdout = real_stdout

    from clickerengine.mcp.server import create_server

    server = create_server(config)
    server.run(transport="stdio")


if __name__ == "__main__":
    main()

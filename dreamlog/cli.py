# MIT License
# Copyright (c) 2025 Matt / Grain Ecosystem

"""Dreamlog CLI - Entry point for dream journal commands."""

import sys


def main() -> int:
    """Main entry point for Dreamlog CLI."""
    if len(sys.argv) < 2:
        print("Dreamlog - Dream journal analyzer")
        print("Usage: dreamlog <command> [args]")
        print("")
        print("Commands:")
        print("  analyze <journal> [-o PATH]   Score and rank a dream journal")
        return 0

    command = sys.argv[1]
    args = sys.argv[2:]

    match command:
        case "analyze":
            from dreamlog.commands.analyze import run
            return run(args)
        case _:
            print(f"Unknown command: {command}")
            return 1


if __name__ == "__main__":
    sys.exit(main())

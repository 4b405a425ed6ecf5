"""Main entry point for the httpbench package.

Usage:
    python -m httpbench load-test -c 10 -n 1000 -u http://localhost:8080/
    python -m httpbench load-test -c 10 -a 30 -m post -u http://localhost:8080/api -d "a=1" -f params.txt
    python -m httpbench sweep -n 200 -u http://localhost:8080/ --levels 1,4,16
"""

import sys


def main():
    """Main entry point that dispatches to subcommands."""
    if len(sys.argv) < 2:
        print_help()
        sys.exit(1)

    command = sys.argv[1]

    if command in ["-h", "--help", "help"]:
        print_help()
        sys.exit(0)

    # Remove the command from argv so subcommand parsers see correct args
    sys.argv = [sys.argv[0]] + sys.argv[2:]

    if command == "load-test":
        from .cli.load_test import main as load_test_main

        load_test_main()
    elif command == "sweep":
        from .cli.sweep import main as sweep_main

        sweep_main()
    else:
        print(f"Unknown command: {command}")
        print_help()
        sys.exit(1)


def print_help():
    """Print help message."""
    print(
        """httpbench - HTTP load generator

Usage: python -m httpbench <command> [options]

Commands:
    load-test     Run a single count- or duration-bounded load test
    sweep         Run the same load test across several concurrency levels

Options (load-test):
    -c  concurrency
    -n  total number of requests
    -a  duration in seconds (-n takes precedence)
    -m  HTTP method, get or post (default: get)
    -u  request URL
    -d  POST data
    -f  read variable parameters from a file
          get: each line is appended to the URL
          post: each line is the POST data
    -t  timeout in seconds (default: 1)

Examples:
    # 10 workers, each sending the 1000 planned requests
    python -m httpbench load-test -c 10 -n 1000 -u http://localhost:8080/

    # POST for 30 seconds with per-line parameters
    python -m httpbench load-test -c 10 -a 30 -m post -u http://localhost:8080/api -f params.txt

    # Concurrency sweep with CSV export and charts
    python -m httpbench sweep -n 200 -u http://localhost:8080/ --levels 1,4,16 --csv sweep.csv --chart sweep.png

For command-specific help:
    python -m httpbench <command> --help
"""
    )


if __name__ == "__main__":
    main()

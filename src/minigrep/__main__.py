"""Entry point for running minigrep as a module: python -m minigrep."""

from .cli import main

if __name__ == "__main__":
    main(prog_name="minigrep")

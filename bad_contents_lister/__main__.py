"""Entry point for ``python -m bad_contents_lister``."""

from bad_contents_lister.cli import main

if __name__ == "__main__":
    main(prog_name="bad-contents-lister")

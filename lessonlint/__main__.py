"""Allow ``python -m lessonlint``."""
from lessonlint.validators.cli import cli

if __name__ == "__main__":
    cli()

"""
refpin - pin repository references in vendored import URLs.

Usage:
    refpin deps.ts
    refpin --spec owner/repo deps.ts
    refpin --spec owner/repo:main --freeze-command "deno-freeze --freeze" deps.ts
"""

import typer

from refpin.cli.commands import pin

__version__ = "0.1.0"

app = typer.Typer(
    name="refpin",
    help="Resolve branches and tags to immutable refs and pin them inside files",
    add_completion=False,
)

app.command()(pin)


def main():
    app()


if __name__ == "__main__":
    main()

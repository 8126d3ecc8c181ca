import os

os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "1"

import typer

from tickring.cli.commands.run import run_command
from tickring.cli.commands.snapshot import snapshot_command

app = typer.Typer()

app.command(name="run")(run_command)
app.command(name="snapshot")(snapshot_command)


def main() -> None:
    app()


if __name__ == "__main__":
    main()

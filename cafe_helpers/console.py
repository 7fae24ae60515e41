import click

from .constants import CHOICE_PROMPT, INVALID_INPUT


class Console:
    """Line-oriented keyboard input shared by the menu loop and its handlers."""

    def __init__(self, stdin=None):
        self.stdin = stdin if stdin is not None else click.get_text_stream("stdin")

    def read_line(self) -> str:
        line = self.stdin.readline()
        if line == "":
            raise EOFError("No more input.")
        return line.rstrip("\r\n")

    def prompt(self, text: str) -> str:
        click.echo(text, nl=False)
        return self.read_line()

    def read_menu_choice(self) -> int:
        # returns only once a valid integer is given
        while True:
            click.echo(CHOICE_PROMPT, nl=False)
            try:
                return int(self.read_line())
            except ValueError:
                click.echo(INVALID_INPUT)

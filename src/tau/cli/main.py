# src/tau/cli/main.py
import logging

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from .. import __version__
from ..config import config
from ..error_reporter import ErrorReporter, set_error_reporter
from ..lexer import Lexer
from ..parser import Parser
from ..runner import Runner, EXIT_STATIC_ERROR

console = Console()


def _configure_logging(debug):
    level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(name)s: %(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
    config.enable_debug_logs = debug


def _read_source(file):
    with open(file, 'r', encoding=config.encoding) as f:
        return f.read()


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="Tau")
@click.option('--debug', is_flag=True, help="Log every interpreter phase at DEBUG level.")
@click.pass_context
def cli(ctx, debug):
    """Tau Programming Language"""
    _configure_logging(debug)
    if ctx.invoked_subcommand is None:
        ctx.invoke(repl)


@cli.command(context_settings={"ignore_unknown_options": True})
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
@click.argument('args', nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def run(ctx, file, args):
    """Run a Tau program"""
    reporter = set_error_reporter(ErrorReporter())
    runner = Runner(reporter=reporter, argv=[file, *args])
    runner.run_file(file)
    ctx.exit(runner.exit_code())


@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def check(ctx, file):
    """Check a Tau file for syntax and scope errors"""
    reporter = set_error_reporter(ErrorReporter())
    runner = Runner(reporter=reporter)
    if runner.check(_read_source(file), filename=file):
        console.print("[bold green]No problems found.[/bold green]")
        return
    console.print(f"[bold red]{len(reporter.errors)} problem(s) found.[/bold red]")
    ctx.exit(EXIT_STATIC_ERROR)


@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def tokens(ctx, file):
    """Show tokens of a Tau file"""
    reporter = set_error_reporter(ErrorReporter())
    lexer = Lexer(_read_source(file), file, reporter=reporter)

    table = Table(title="Tokens")
    table.add_column("Type", style="cyan")
    table.add_column("Literal", style="green")
    table.add_column("Line", style="yellow")
    table.add_column("Column", style="yellow")

    for token in lexer.tokenize():
        table.add_row(token.type, token.literal, str(token.line), str(token.column))

    console.print(table)
    if lexer.errors:
        ctx.exit(EXIT_STATIC_ERROR)


@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def ast(ctx, file):
    """Show AST of a Tau file"""
    reporter = set_error_reporter(ErrorReporter())
    parser = Parser.from_source(_read_source(file), file, reporter=reporter)
    program = parser.parse_program()

    body = "\n".join(repr(stmt) for stmt in program.statements) or "(empty)"
    console.print(Panel.fit(
        body,
        title="[bold blue]Abstract Syntax Tree[/bold blue]",
        border_style="blue"
    ))
    if parser.errors or parser.lexer.errors:
        ctx.exit(EXIT_STATIC_ERROR)


@cli.command()
def repl():
    """Start the Tau REPL"""
    reporter = set_error_reporter(ErrorReporter())
    runner = Runner(reporter=reporter)

    while True:
        try:
            line = console.input(config.prompt, markup=False)
        except (EOFError, KeyboardInterrupt):
            console.print()
            break

        if line.strip() == "exit":
            break
        if not line.strip():
            continue

        # A bad line is reported and forgotten; the session goes on
        runner.run(line, filename="<stdin>")
        reporter.reset()


if __name__ == "__main__":
    cli()

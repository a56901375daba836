## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# nameless — Small interpreters for lambda calculi, with terms kept in de Bruijn form.
#

import sys
import time
import traceback
from pathlib import Path
from dataclasses import dataclass

import click

from .errors import (LambdaError, LambdaParseError, LambdaIncompleteParse, LambdaNameError,
                     LambdaTypeError, LambdaInternalError)
from .parser import format_parse_error_context, format_source_lines
from .formatting import write_without_ansi
from .dialects import DIALECTS
from .runtime import Runtime


@dataclass(frozen=True)
class RuntimeConfig:
    dialect: str
    verbose: int
    ignore: bool
    stats: bool
    plain: bool


@dataclass
class ExecutionItem:
    source: str
    filename: str


class LambdaRunner:
    def __init__(self, config: RuntimeConfig):
        self.verbose = config.verbose
        self.ignore = config.ignore
        self.stats_enabled = config.stats
        self.plain = config.plain

        if self.plain:
            writer = write_without_ansi(sys.stdout.write)
            sys.stdout.write, sys.stderr.write = writer, writer

        self.runtime = Runtime(config.dialect)
        self.total_stats = {'steps': 0, 'start': time.time()} if self.stats_enabled else None
        self.failure = False
        self.executed_items = 0

    def _maybe_fatal_error(self, message: str, detail: str, exc_type: str = None, context: str = '', is_repl: bool = False) -> None:
        header = detail if not exc_type else f"{detail} (Exception: \033[33m{exc_type}\033[0m)"
        print(f'\033[30;43m {message} \033[0m {header}\n{context}', file=sys.stderr)
        self.failure = True
        if not is_repl and not self.ignore: sys.exit(1)

    def _handle_exception(self, exc, filename: str, source: str, is_repl: bool = False) -> bool:
        if isinstance(exc, LambdaParseError):
            if is_repl and isinstance(exc, LambdaIncompleteParse): return True
            context = format_parse_error_context(filename, exc.line, exc.column, exc.token, source=source)
            context += f"\n\033[90m{str(exc).replace(chr(10), ' ').replace(chr(9), ' ')}\033[0m\n"
            self._maybe_fatal_error("SYNTAX ERROR.", f"Parsing `\033[97m{filename}\033[0m` caused a problem!", type(exc).__name__, context, is_repl)
        elif isinstance(exc, LambdaNameError):
            detail = f"Identifier `\033[1;97m{exc.name}\033[0m` from `\033[97m{filename}\033[0m` is not bound in context!"
            context = '\n' + format_source_lines(exc.info, exc.name, source=source)
            self._maybe_fatal_error("NAMING ERROR.", detail, type(exc).__name__, context, is_repl)
        elif isinstance(exc, LambdaTypeError):
            detail = f"Term from `\033[97m{filename}\033[0m` is ill-typed: \033[1;97m{exc}\033[0m"
            context = '\n' + format_source_lines(exc.info, 'term', source=source)
            self._maybe_fatal_error("TYPE ERROR.", detail, type(exc).__name__, context, is_repl)
        elif isinstance(exc, LambdaInternalError):
            tb_lines = traceback.format_exception(exc, chain=False)
            self._maybe_fatal_error("INTERNAL ERROR.", str(exc), type(exc).__name__, ''.join(tb_lines), is_repl)
        elif isinstance(exc, RecursionError):
            detail = "Normal form might exist, but the maximum recursion depth was exceeded."
            self._maybe_fatal_error("RECURSION LIMIT.", detail, type(exc).__name__, '', is_repl)
        elif isinstance(exc, Exception):
            print(f'\033[30;43m RUNTIME ERROR. \033[0m Processing `\033[97m{filename}\033[0m` caused an error! (Exception: \033[33m{type(exc).__name__}\033[0m)', file=sys.stderr)
            traceback.print_exc()
            self.failure = True
            if not is_repl and not self.ignore: sys.exit(1)
        return False

    def execute_items(self, items: list[ExecutionItem]) -> None:
        for item in items:
            self._execute_script(item.source, item.filename)

    def _execute_script(self, source: str, filename: str, is_repl: bool = False) -> None:
        try:
            output = self.runtime.run(source, filename=filename, verbosity=self.verbose, stats=self.total_stats)
            print(output, end='')
        except (LambdaError, Exception) as exc:
            self._handle_exception(exc, filename, source, is_repl=is_repl)
        else:
            self.executed_items += 1

    def repl(self) -> None:
        if sys.platform != "win32": import readline

        print(f'nameless - {self.runtime.dialect.description} REPL; type Ctrl+C to exit.')
        source = ""

        while True:
            try:
                prompt = "\033[36m<<< \033[0m" if not source.strip() else "\033[36m... \033[0m"
                line = input(prompt)
                if len(line.strip()) == 0: continue
                if line.strip() in ('quit', 'exit'): break
                source += line + "\n"

                try:
                    output = self.runtime.run(source, filename='<REPL>', verbosity=self.verbose)
                    if output: print("\033[90m>>>\033[0m", output, end='')
                    source = ""
                except (LambdaError, Exception) as exc:
                    if not self._handle_exception(exc, '<REPL>', source, is_repl=True):
                        source = ""

            except (KeyboardInterrupt, EOFError):
                print(""); break

    def finalize(self) -> int:
        if self.total_stats and self.executed_items > 0:
            elapsed_time = time.time() - self.total_stats['start']
            print(f"\n\033[97m\033[48;5;30m STATISTICS. \033[0m")
            print(f"step\t\033[97m{self.total_stats['steps']:,}\033[0m")
            print(f"time\t\033[97m{elapsed_time:.3f}s\033[0m")
        return 1 if self.failure else 0


def _inline_command_source(index: int, command: str) -> ExecutionItem:
    source = command.rstrip()
    if not source.endswith(';'):
        source += ';'
    return ExecutionItem(source + '\n', f'<INPUT_{index}>')


def _parse_dev_tokens(tokens: list[str]) -> list[tuple[str, Path | str | None]]:
    actions: list[tuple[str, Path | str | None]] = []
    index = 0
    while index < len(tokens):
        token = tokens[index]
        if token == '--':
            index += 1
            continue
        if token in ('-c', '--command'):
            index += 1
            if index >= len(tokens):
                raise click.BadParameter("Missing inline code after -c/--command option.")
            actions.append(('command', tokens[index]))
            index += 1
            continue
        if token.startswith('-c=') or token.startswith('--command='):
            _, value = token.split('=', 1)
            if value == '':
                raise click.BadParameter("Empty code supplied to command option.")
            actions.append(('command', value))
            index += 1
            continue
        if token in ('-r', '--repl'):
            actions.append(('repl', None))
            index += 1
            continue
        if token.startswith('-'):
            raise click.BadParameter(f"Unknown option `{token}`.")
        path = Path(token)
        if not path.exists():
            raise click.BadParameter(f"File `{token}` not found.")
        actions.append(('file', path))
        index += 1
    return actions


@click.group(invoke_without_command=True, context_settings={'ignore_unknown_options': True, 'allow_extra_args': True})
@click.option('--dialect', '-d', default='simplebool', envvar='NAMELESS_DIALECT', show_default=True,
              type=click.Choice(list(DIALECTS)), help='Calculus used to parse and evaluate the input.')
@click.option('--verbose', '-v', default=0, count=True, help='Print every reduction step.')
@click.option('--ignore', '-i', is_flag=True, help='Ignore errors and continue executing.')
@click.option('--stats', is_flag=True, help='Display execution statistics (e.g., number of steps).')
@click.option('--plain', '-p', is_flag=True, help='Strip ANSI color codes and redirect stderr to stdout.')
@click.pass_context
def cli(ctx: click.Context, dialect: str, verbose: int, ignore: bool, stats: bool, plain: bool) -> None:
    ctx.ensure_object(dict)
    ctx.obj['config'] = RuntimeConfig(dialect=dialect, verbose=verbose, ignore=ignore, stats=stats, plain=plain)


@cli.command('run-file')
@click.argument('script', type=click.File('r', encoding='utf-8'))
@click.pass_context
def run_file(ctx: click.Context, script) -> None:
    runner = LambdaRunner(ctx.obj['config'])
    runner.execute_items((ExecutionItem(script.read(), script.name or '<STDIN>'),))
    ctx.exit(runner.finalize())


@cli.command('run-dev', context_settings={'ignore_unknown_options': True, 'allow_extra_args': True})
@click.argument('tokens', nargs=-1)
@click.pass_context
def run_dev(ctx: click.Context, tokens: tuple[str, ...]) -> None:
    runner = LambdaRunner(ctx.obj['config'])
    actions = _parse_dev_tokens(list(tokens))

    command_index = 1
    for action, payload in actions:
        if action == 'file':
            runner.execute_items((ExecutionItem(payload.read_text(encoding='utf-8'), str(payload)),))
        elif action == 'command':
            item = _inline_command_source(command_index, payload)
            runner._execute_script(item.source, item.filename, is_repl=False)
            command_index += 1
        elif action == 'repl':
            runner.repl()
        else:
            raise NotImplementedError

    if not actions:
        runner.repl()
    ctx.exit(runner.finalize())


@cli.command('run-repl')
@click.pass_context
def run_repl(ctx: click.Context) -> None:
    runner = LambdaRunner(ctx.obj['config'])
    runner.repl()
    ctx.exit(runner.finalize())


def main(argv: list[str] | None = None) -> None:
    a = list(sys.argv[1:] if argv is None else argv)
    # Global options, with the value that follows `--dialect`/`-d` kept alongside it.
    g, r, i = [], [], 0
    while i < len(a):
        t = a[i]
        if t in ('--dialect', '-d') and i + 1 < len(a):
            g += [t, a[i+1]]; i += 2; continue
        if t in ('--ignore', '--stats', '--plain', '-i', '-p') or t.startswith('--dialect=') or t.startswith('-v') or t == '--verbose':
            g.append(t)
        else:
            r.append(t)
        i += 1
    pos = [t for t in r if not t.startswith('-')]
    has_dev_opt = any(t in ('-c', '-r', '--repl') or t.startswith('--command') or t.startswith('-c=') for t in r)

    if len(r) == 0:
        # No args: if stdin has data, treat as file '-', else REPL
        cmd, tail = ('run-file', ['-']) if not sys.stdin.isatty() else ('run-repl', [])
    elif r == ['-']:
        cmd, tail = 'run-file', ['-']
    elif r == ['--repl']:
        cmd, tail = 'run-repl', []
    elif len(pos) == 1 and not has_dev_opt and Path(pos[0]).is_file():
        cmd, tail = 'run-file', [pos[0]]
    else:
        cmd, tail = 'run-dev', r

    cli.main(args=[*g, cmd, *tail], prog_name='nameless')


if __name__ == "__main__":
    main()

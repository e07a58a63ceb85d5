# loxscan

A lexical scanner for the Lox scripting language. It turns Lox source text
into a list of tokens and comes with a small command-line tool that scans a
script file or reads lines interactively.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

Scan a script and print one token per line:

```
loxscan script.lox
```

The file's contents are echoed first between a `------buffer content:`
header and a ` ----content End` footer, then every token is printed as its
type, its lexeme and its literal value, ending with an `EOF` token. Numbers
print their value with six decimal places (`NUMBER 12 12.000000`), strings
print their text without quotes, and tokens without a value print `null`.
Scan errors such as `[line 1] Error : Unexpected Character!` are written to
standard output among the tokens; the command still exits with status 0. A
file that cannot be opened is reported on standard error, and only the `EOF`
token is printed.

Run with no arguments to start the interactive prompt:

```
loxscan
```

It prints `runPrompt`, then shows a `> ` prompt and echoes back each
non-empty line you type; end the session with end-of-file (Ctrl-D on
Unix-like systems). Lines typed at the prompt are not scanned. Given more
than two arguments, the command prints `Usage: clox [script]`.

## Library use

```python
from loxscan.scanner import scan_tokens
from loxscan.errors import ErrorReporter

reporter = ErrorReporter()
for token in scan_tokens('var greeting = "hi"; // comment', reporter):
    print(token)

if reporter.had_error:
    print("scanning failed")
```

`loxscan.tokens` defines the `TokenType` enum, the frozen `Token` dataclass
(`type`, `lexeme`, `literal`, `line`) and `literal_to_string`.
`Scanner` in `loxscan.scanner` does the same work as `scan_tokens`:
construct it with the source text and an optional `ErrorReporter`, then call
`scan_tokens()`. The scanner recognises single- and two-character operators,
`//` comments, string literals (which may span lines), numbers with an
optional fractional part, identifiers and the Lox keywords. Unexpected
characters and unterminated strings are passed to the reporter, which writes
the message and sets `had_error`; `reset()` clears it.

`loxscan.cli` exposes `run_file`, `run_prompt`, `run_prompt_line` and
`main`, each taking optional streams so they can be driven from code.

`loxscan.utils` provides `read_file`, `dump_buffer` (which raises
`ValueError` for an empty buffer), `TerminalColor` escape codes and small
coloured console logging helpers (`log`, `log_info`, `log_warn`,
`log_error`, `log_debug`).

## What it does not do

The package only scans: there is no parser and no evaluator, so Lox
programs are tokenised but never run.
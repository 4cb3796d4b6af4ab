# dailydrills

A collection of small, self-contained exercises written as a regular Python
package. Each module covers one theme and can be imported and used on its own.
There are no runtime dependencies beyond the standard library.

| Module | What it holds |
| --- | --- |
| `dailydrills.device` | `Device`, the events `Update`, `Remove`, `Tick`, and `GatewayState.apply_event` |
| `dailydrills.gateway` | `SharedState`, `list_devices`, `upsert_device`, `seed_state`, `run_ticker`, `make_server` and the gateway command |
| `dailydrills.fundamentals` | `read_file`, `parse_positive_number`, `process_number_file`, `first_char_as_digit`, `parse_and_validate`, `parse_and_double`, `parse_number`, `double`, `add`, `user_message`, `ConstSource`, `EnvSource`, `User`, `System` |
| `dailydrills.borrowing` | `longer`, `first_char`, `sum_lengths`, `describe_sensor`, `consume`, `Book`, `Library`, `add_pages`, `emphasize`, `maybe_uppercase`, `sum_values`, `increment_all`, `first_word`, `split_process`, `Stats` |
| `dailydrills.wordcount` | `analyze_text`, `analyze_file`, `Mode`, `Config` and two commands |
| `dailydrills.commands` | `parse_args`, `execute`, `get_file_size`, `format_help`, `CommandConfig` and a command |
| `dailydrills.results` | `read_number`, `safe_division`, `load_and_double` and their errors |
| `dailydrills.events` | `process_event`, `only_click`, `filter_clicks`, `dispatch`, `handle_message`, `rectangle_area`, `extract_click` |
| `dailydrills.state_machines` | `Light`, `count_words`, `Reader` with states `Closed`, `Open`, `Error` |
| `dailydrills.patterns` | `classify`, `describe_event`, `shape_area` |
| `dailydrills.sensors` | `describe_sensor`, `is_enabled`, `handle_event`, `classify_metrics`, `describe_connection`, `handle_message` |
| `dailydrills.fleet` | `status_msg`, `reset_if_error`, `interpret`, `summarize`, `find_device`, `update_device`, `apply_event` |

Integer helpers mirror fixed-width arithmetic where it matters: for example
`parse_positive_number` accepts only values that fit in 32 unsigned bits, and
`safe_division`, `shape_area` and `rectangle_area` raise `OverflowError` when a
result would not fit.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command-line tools

### Device gateway

```
dailydrills-gateway [--host HOST] [--port PORT] [--ticks N] [--interval SECONDS]
```

Starts an HTTP service (by default on `127.0.0.1:3000`) holding a list of
devices, each with an `id` and a `value`. Devices 1 and 2 are created at
start-up with random readings between -99 and 99. A background thread adds 1
to every device's value every `--interval` seconds (default 0.5), `--ticks`
times (default 10), printing the list after each tick. The server runs until
interrupted.

- `GET /devices` returns the device list as JSON.
- `POST /devices` with `Content-Type: application/json` and a body such as
  `{"id": 3, "value": 42}` creates the device, or updates its value if the id
  already exists, and returns it. A body that is not JSON gets 400, another
  content type 415, and a missing or out-of-range `id` or `value` 422.
- Other methods on `/devices` get 405; other paths get 404.

### Word count

```
wc-light notes.txt
```

First prints the contents of `input.txt` from the current directory and writes
`output.txt` there, then prints `Lines: N`, `Words: N` and `Chars: N` for the
named file. A wrong number of arguments prints a usage line; a missing or
unreadable file prints an error. Both end with exit status 1.

```
dailydrills-analyze notes.txt words
```

Prints a single statistic for the file, such as `Words 12`. The mode is one of
`lines`, `words`, `chars` or `all` (case-insensitive); `all` prints every count.
A missing argument, an unknown mode or an unreadable file prints
`Error: <kind>: <message>` and ends with exit status 1.

### File commands

```
dailydrills-cli count notes.txt
dailydrills-cli size notes.txt
dailydrills-cli statsjson notes.txt
dailydrills-cli statsyaml notes.txt
dailydrills-cli echo "some text"
dailydrills-cli --help
```

- `count` prints `lines: N, words: N, chars: N`.
- `size` prints `Size of file is: N Byte`.
- `statsjson` prints the counts as a JSON object.
- `statsyaml` prints the counts as a YAML mapping under `items`.
- `echo` prints `Echo: ` followed by the text.
- `--help` lists the commands.

Command names are case-insensitive. Each command takes exactly one argument;
anything else is reported as an error with exit status 1.

## Using the library

```python
from dailydrills.commands import execute, parse_args

command = parse_args(["mycli", "echo", "hello"])
print(execute(command))  # Echo: hello
```

```python
from dailydrills.wordcount import analyze_file

analysis = analyze_file("notes.txt")
print(analysis.lines, analysis.words, analysis.chars)
```

```python
from dailydrills.device import GatewayState, Tick, Update

state = GatewayState()
state.apply_event(Update(id=1, value=10))
state.apply_event(Tick(5))
print(state.devices)  # [Device(id=1, value=15)]
```

Errors are raised as exceptions. The word-count and command modules raise
subclasses of `CliError` (`MissingArgumentError`, `InvalidModeError`,
`InvalidCommandError`, `CliIOError`). `dailydrills.results` raises `ReadError`
and `NoTokenError` when reading, `DivisionByZeroError` for a zero divisor, and
`LoadError` and `NegativeNumberError` when loading. Parsing helpers in
`dailydrills.fundamentals` raise `ValueError` with short messages such as
`"Not a number"` or `"Parse error"`.

## What it does not do

The gateway keeps its devices in memory only: nothing is stored between runs,
and devices cannot be removed over HTTP. It has no authentication.
# evenodd

`evenodd` is a small command-line tool that runs several worker threads. Each
worker gets its own batch of unique random numbers in the range
0 to 2,147,483,647 and adds every number to one of two shared lists, each
guarded by its own lock: one for even numbers and one for odd numbers. When all
workers have finished, the tool prints both lists.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Configuration file

The run is set by a plain text file whose name must end in `.txt`. Every line
is a `key = value` pair. Two keys are recognised:

```
numbers_per_thread = 10
thread_num = 4
```

- `numbers_per_thread`: how many unique random numbers each thread gets
  (at most 1,000,000).
- `thread_num`: how many threads to start (at most 1,000).

The key may be followed by at most one space before the `=`; spaces around
the value are ignored. Values must be non-negative integers written with
digits only. A key that is not given stays at 0, and a key given twice takes
its last value.

The following are errors: an unknown key, a line without a key and a value
(blank lines included), a value that is not a whole number, a value over its
limit, and an empty file.

## Usage

```
evenodd -f path/to/config.txt
evenodd --file path/to/config.txt
evenodd -h
evenodd --help
```

The same can be started with `python -m evenodd.cli`.

The help option prints `Usage: evenodd path/to/file.txt`. With a file, the
tool prints the settings it read, then the odd numbers, then the even numbers,
one per line with its position, for example:

```
NUM_PER_THREAD: 2
THREAD_NUM: 1
ODD NUMBERS:
Position: 0, --> Value: 1804289383
EVEN NUMBERS:
Position: 0, --> Value: 846930886
```

The numbers are random and differ from run to run. Within each list, every
thread's numbers keep their own order; how the threads' numbers interleave
depends on scheduling.

Errors (wrong number of arguments, an unknown option, a file without a `.txt`
extension, a file that cannot be opened, or a bad configuration) are printed
to standard error as `Error: ...` and the exit status is 1.

## Library use

The same steps can be called from Python:

```python
import random

from evenodd.config import parse_file
from evenodd.runner import format_list, run_program

config = parse_file("settings.txt")
result = run_program(config, random.Random(42))
print(format_list(result.odd), end="")
print(format_list(result.even), end="")
```

- `evenodd.args.check_args(argv)` checks the arguments (without the program
  name) and returns `Mode.HELP` or `Mode.RUN`, or raises `ArgumentError`.
- `evenodd.config.parse_file(path)` returns a `Config` with
  `numbers_per_thread` and `thread_num`, or raises `ConfigError`.
  `evenodd.config.parse_line(line, config)` applies a single line.
- `evenodd.runner.generate_unique_numbers(count, rng)` draws distinct random
  numbers; `evenodd.runner.split_even_odd(batches)` sorts each batch in its
  own thread and returns a `SortResult` with `even` and `odd` lists;
  `evenodd.runner.format_list(numbers)` renders the `Position: ..., --> Value: ...`
  lines; `evenodd.runner.run_program(config, rng=None)` does generation and
  sorting together.
# unstdkit

A small collection of self-contained utilities with no third-party
dependencies:

- **`unstdkit.printf`**: a compact C-style formatter (`sprintf`, `snprintf`,
  `fctprintf`, `printf`).
- **`unstdkit.numfmt`**: the number-rendering functions behind the formatter
  (`format_integer`, `format_fixed`, `format_exponential`) and the
  `FormatFlag` flags they take.
- **`unstdkit.queue`**: `BoundedQueue`, a thread-safe FIFO queue with an
  optional capacity limit.
- **`unstdkit.netutil`**: IPv4 address validation and opening a TCP
  connection over IPv4.

## Installation

From a checkout of the project:

```
pip install .
```

## Formatting

```python
from unstdkit.printf import sprintf, snprintf, fctprintf, printf

sprintf("%05d|%-6s|%x", 42, "ab", 255)   # '00042|ab    |ff'
sprintf("%.3f", 3.14159)                 # '3.142'
sprintf("%e", 12345.678)                 # '1.234568e+04'

# snprintf takes the buffer size (terminator included) first and returns
# the stored text, cut to count - 1 characters, together with the length
# the full output would have had.
snprintf(6, "%s", "hello world")         # ('hello', 11)

# fctprintf passes each character to a callable and returns the length.
chars = []
fctprintf(chars.append, "%d-%d", 1, 2)   # 3; chars == ['1', '-', '2']

# printf writes to standard output and returns the length.
printf("%s\n", "done")
```

Specifications have the form `%[flags][width][.precision][length]type`:

- flags `-`, `+`, space, `#` and `0`;
- width and precision as digits or `*`, taken from the arguments (a negative
  `*` width left-aligns, a negative `*` precision counts as 0);
- length modifiers `hh`, `h`, `l`, `ll`, `t`, `j`, `z`;
- types `d i u x X o b f F e E g G c s p %`.

Integer arguments are cut to the size the length modifier selects: 8 bits
for `hh`, 16 for `h`, 32 with no modifier, 64 for `l`, `ll`, `t`, `j` and `z`.
`%b` writes binary, and `#` adds `0x`, `0X` or `0b` for hexadecimal and
binary. `%p` writes an integer (or `None` as 0) as 16 uppercase hex digits.
`%c` takes a one-character string or an integer; `%s` takes any object,
formats it with `str()` and stops at the first null character. An unknown
type character is copied to the output as it is.

`%f` values larger in magnitude than 1e9 are written in exponential
notation. Fixed-point precision beyond 9 digits is filled with zeros, and
values exactly half-way between two results round to the even one.

Missing arguments raise `TypeError`, as does an argument of the wrong kind
(for example a string for `%d`). `snprintf` raises `ValueError` for a
negative count.

## Number rendering

The functions in `unstdkit.numfmt` take a precision, a width and a
combination of `FormatFlag` values, and return the text:

```python
from unstdkit.numfmt import FormatFlag, format_integer, format_fixed, format_exponential

format_integer(255, False, 16, 0, 0, FormatFlag.HASH)        # '0xff'
format_integer(7, True, 10, 0, 4, FormatFlag.ZEROPAD)        # '-007'
format_fixed(2.5, 0, 0, FormatFlag.PRECISION)                # '2'
format_exponential(12345.678, 0, 0, FormatFlag.NONE)         # '1.234568e+04'
```

`format_integer` takes the magnitude and a separate `negative` flag; the
base may be from 2 to 36. `format_exponential` with `FormatFlag.ADAPT_EXP`
behaves like `%g`. Negative widths, precisions or magnitudes raise
`ValueError`.

## Queue

```python
from unstdkit.queue import BoundedQueue, QueueFullError, QueueEmptyError

q = BoundedQueue(preallocate=0, max_capacity=2)
q.enqueue("a")
q.enqueue("b")
q.is_full()      # True
q.peek()         # 'a'
q.dequeue()      # 'a'
len(q)           # 1
q.is_empty()     # False
```

A `max_capacity` of 0 means no limit. `preallocate` is recorded as a size
hint and is capped at `max_capacity` when a limit is set. `enqueue` on a
full queue raises `QueueFullError`; `dequeue` or `peek` on an empty queue
raises `QueueEmptyError`. Negative sizes raise `ValueError`. Any object,
`None` included, can be queued, and every operation takes an internal lock,
so a queue can be shared between threads.

## Networking

```python
from unstdkit.netutil import is_valid_ipv4, open_tcp4

is_valid_ipv4("192.168.0.1")   # True
is_valid_ipv4("999.1.1.1")     # False

with open_tcp4("localhost", 8080) as sock:
    sock.sendall(b"ping")
```

`is_valid_ipv4` raises `ValueError` for an empty string and `TypeError`
for a non-string. `open_tcp4` accepts a dotted IPv4 address or `localhost`
(connected to as 127.0.0.1) and a port from 1 to 65535. It raises
`ValueError` for bad input and `OSError` when the connection fails, and
returns a connected `socket.socket` that the caller closes.

## What it does not do

This is a library only: it installs no command-line programs. `printf`
writes to standard output and has no other output device. The networking
helpers cover IPv4 TCP client connections only; there is no IPv6, UDP or
listening-socket support.

## Running the tests

```
pip install -e ".[test]"
pytest
```
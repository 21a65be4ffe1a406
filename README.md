# drills

A collection of small, self-contained exercises, each solved as an ordinary
Python module. They range from one-line number puzzles to a threaded link
checker and a websocket chat room.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | What it does |
| --- | --- |
| `drills.numbers` | `fib`, `collatz_length` and the `luhn` checksum (whitespace ignored, at least two digits required) |
| `drills.sequences` | `smaller` of two values, `transpose` of a rectangular matrix, `offset_differences` with wrap-around |
| `drills.vectors` | `magnitude` of a vector and `normalize`, which returns a new unit-length list |
| `drills.counter` | `Counter` with `count(value)` and `times_seen(value)` |
| `drills.rot` | `RotDecoder`, a raw binary stream that rotates ASCII letters by `rot` places |
| `drills.elevator` | Elevator events (`ButtonPressed`, `CarArrived`, `CarDoorOpened`, `CarDoorClosed`), buttons (`LobbyCall`, `CarFloor`), `Direction` and constructor functions |
| `drills.tree_eval` | `evaluate` for `BinaryOp`/`Value` trees; division by zero raises `EvaluationError` |
| `drills.parser` | `tokenize` and `parse` for a tiny `+`/`-` language, with `TokenizerError`, `UnexpectedEOF`, `UnexpectedToken` and `InvalidNumber` |
| `drills.bintree` | `BinaryTree`, a set backed by an unbalanced binary search tree (`insert`, `in`, `len`) |
| `drills.package_builder` | `PackageBuilder` producing `Package` records, and `Package.as_dependency` |
| `drills.logger` | `Logger`, `StdoutLogger` and `VerbosityFilter` |
| `drills.protobuf` | A minimal protobuf wire-format decoder: `parse_varint`, `unpack_tag`, `parse_field`, `parse_message`, `Person`, `PhoneNumber`; bad input raises `DecodeError` |
| `drills.widgets` | Text-mode `Label`, `Button` and `Window` widgets |
| `drills.listdir` | `DirectoryIterator` over a directory's entries, `.` and `..` first; usable as a context manager |
| `drills.compass` | `scale`, `cap` and display `Mode` switching |
| `drills.philosophers` | Dining philosophers with threads; `dine` yields their thoughts |
| `drills.async_philosophers` | Dining philosophers with asyncio; `dine` is an async iterator of thoughts |
| `drills.linkcheck` | Concurrent link checker: `check_links`, `visit_page`, `CrawlState` |
| `drills.chat_server` | Websocket chat server: `serve`, `handle_connection` and the `Broadcast` hub |
| `drills.chat_client` | Websocket chat client: `run_client` |

## A few examples

```python
from drills.numbers import collatz_length, fib, luhn
from drills.sequences import offset_differences, transpose
from drills.counter import Counter
from drills.bintree import BinaryTree

collatz_length(11)                        # 15
fib(20)                                   # 6765
luhn(" 0 0 ")                             # True
luhn("foo")                               # False

offset_differences(1, [1, 3, 5, 7])       # [2, 2, 2, -6]
transpose([[101, 102, 103],
           [201, 202, 203],
           [301, 302, 303]])              # [[101, 201, 301], [102, 202, 302], [103, 203, 303]]

counter = Counter()
for value in (13, 14, 16, 14, 14, 11):
    counter.count(value)
counter.times_seen(14)                    # 3

tree = BinaryTree()
tree.insert(2)
tree.insert(1)
tree.insert(2)
len(tree), 1 in tree                      # (2, True)
```

Parsing an expression (operators group to the right):

```python
from drills.parser import parse

parse("10+foo+20-30")
# Operation(left=Number(value=10), op=<Op.ADD: '+'>,
#           right=Operation(left=Var(name='foo'), op=<Op.ADD: '+'>, ...))
```

Reading through a ROT-13 decoder:

```python
import io
from drills.rot import RotDecoder

reader = io.BufferedReader(RotDecoder(io.BytesIO(b"Gb trg gb gur bgure fvqr!"), 13))
reader.read()                             # b'To get to the other side!'
```

Decoding a protobuf message:

```python
from drills.protobuf import Person, parse_message

parse_message(bytes([0x0A, 0x04, 0x45, 0x76, 0x61, 0x6E, 0x10, 0x16]), Person)
# Person(name='Evan', id=22, phone=[])
```

## Command-line programs

Each of these is installed as a command:

```
drills-numbers [NUMBER ...]          # prints fib(20), the Collatz length of 11, and Luhn verdicts
drills-widgets [--title TITLE]       # draws a small text window with a label and a button
drills-listdir [PATH]                # lists the entries of a directory (default ".")
drills-philosophers [--rounds N]     # dining philosophers, threaded
drills-async-philosophers [--rounds N]  # dining philosophers, asyncio
drills-linkcheck [URL] [--threads N] # crawls a site and prints the URLs that failed
drills-chat-server [--host H] [--port P]  # websocket chat server, default 127.0.0.1:2000
drills-chat-client [URI]             # connects to the chat server; type lines to send
```

Start `drills-chat-server` in one terminal and `drills-chat-client` in two or
more others; every line typed in a client is broadcast to all connected
clients.

## What it does not do

- `drills.compass` holds only the mode switching and value scaling; it reads
  no sensor and drives no display.
- The chat server keeps no history and has no user names or authentication;
  a client that falls more than 16 messages behind is disconnected.
- The link checker follows links only within the start URL's domain and does
  not consult `robots.txt`.
# sctoolkit

A small collection of everyday building blocks, using only the standard
library:

- `sctoolkit.schead` – `is_big_endian()`, `current_times()` (local time as
  `YYYY-MM-DD HH:MM:SS`), `is_space(char)` and `pause(message)`, which prints
  a prompt and reads one line from standard input.
- `sctoolkit.tstring` – `TextBuffer`, a growable text buffer with `append`
  (one character), `extend` (a non-empty string) and a `capacity` property,
  plus `str_hash`, `str_icmp` (ASCII case-insensitive comparison returning a
  negative, zero or positive number) and the file helpers `read_file`,
  `write_file` and `append_file`.
- `sctoolkit.tree` – `BinarySearchTree`, an unbalanced binary search tree
  keyed by an optional `key` function, with an optional `on_delete` callback.
  It offers `add`, `get`, `find_with_parent`, `remove`, `clear`, in-order
  iteration, `len()` and `in`. Duplicate keys are not inserted.
- `sctoolkit.linkedlist` – `LinkedList`, a singly linked list with `add`
  (at the head), `add_last`, `insert`, `find`/`find_pop` by predicate,
  `get`, `pop`, `front` and `clear`.
- `sctoolkit.sclog` – `SCLogger`, a file logger that writes every record to
  `sc.log` and `FATAL` and `WARNING` records to `sc.log.wf` as well. It keeps
  a log id, request address, module name and timer for each thread, and saves
  the last log id to `__lid__` in the log directory when it closes. `TRACE`
  and `DEBUG` records are written only when the logger was created with
  `debug=True`.
- `sctoolkit.cjson` – a lenient JSON parser and compact printer built on
  `JsonNode` and `JsonType`, with `parse`, `parse_file`, `minify` (which also
  strips `//` and `/* */` comments) and the `new_*` constructors. Object keys
  are looked up ignoring ASCII case. Parse failures raise `JsonParseError`.
- `sctoolkit.scconf` – `parse_config` and `Config`, for `$key = "value"`
  configuration files. The first entry for a key wins.
- `sctoolkit.sccsv` – `parse_csv` and `read_csv`, which produce a
  `CsvTable`. Every row must end with a newline, and all rows must have the
  same number of fields. Malformed input raises `CsvError`.

## Installation

```
pip install sctoolkit
```

To run the test suite:

```
pip install "sctoolkit[test]"
pytest
```

## Examples

Parse JSON and print it again:

```python
from sctoolkit.cjson import parse

root = parse('{"name": "Jack", "format": {"type": [1, 3, 4, 5.66], "interlace": false}}')
print(root.get("name").text)        # Jack
print(len(root.get("format")))      # 2
print(root.dumps())
# {"name":"Jack","format":{"type":[1,3,4,5.660000],"interlace":false}}
```

Read a configuration file:

```python
from sctoolkit.scconf import Config

config = Config("config.ini").start()
print(config.get("heoo"))           # None if the key is missing
```

Read CSV data:

```python
from sctoolkit.sccsv import parse_csv

table = parse_csv('a,"b ""quoted""",c\n1,2,3\n')
print(table.get(0, 1))              # b "quoted"
for row in table:
    print(row)
```

Write log records:

```python
from sctoolkit.sclog import SCLogger

with SCLogger("log") as log:
    log.init_thread("worker", "127.0.0.1")
    log.warning("something looks odd")
```

## What it does not do

The package is a library only. It installs no command-line programs. The
logger does not rotate or clean up its log files, and the JSON parser keeps
going past some malformed input instead of rejecting it: for example, it
ignores anything after the first value.
# devdesk

A library of everyday helpers and small in-memory data services. It covers containers, hashing and encryption, compression and archives, numbers, strings, paths, files, dates, translations, and simple stores for parameters, bug tracking and dictionaries.

## Installation

```
pip install devdesk
```

To run the tests, install the test extra and run pytest:

```
pip install "devdesk[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `devdesk.collections` | `PriorityQueue`, `MinPriorityQueue`, `PriorityItem`, `Queue`, `Stack`, `OrderedMap`, `EmptyCollectionError` |
| `devdesk.concurrency` | `TaskGroup` runs callables on threads. `crash_handler` is a context manager that passes exceptions to handlers. |
| `devdesk.cryptoutil` | Hex digests (MD5, SHA-1, SHA-256, SHA-512), HMAC, Base64, random bytes and hex, AES-CBC and AES-GCM, `CryptoError` |
| `devdesk.compress` | gzip and zlib for bytes and files, zip and tar.gz archives of directories, `UnsafeArchivePathError` |
| `devdesk.mathutil` | Rounding with halves away from zero, clamping, gcd/lcm, factorial, Fibonacci, interpolation, 2-D vector helpers, random values, averages |
| `devdesk.strutil` | Blank, numeric and alphabetic checks, padding, truncation, case conversion, Base64, lenient int and float parsing, e-mail check, HTML escaping |
| `devdesk.pathutil` | Lexical cleaning, extensions, trailing separators, sub-path and safety checks, shell-style `match` |
| `devdesk.fileutil` | Existence checks, reading, writing and appending text or bytes, JSON files, copy, move, delete, size and modification time |
| `devdesk.timeutil` | Start and end of days, weeks, months, quarters and years, date arithmetic, differences, date formatting, weekday names |
| `devdesk.localization` | `Localization`, which loads translations from JSON or YAML files and falls back to a default language. Also `LocalizationError`. |
| `devdesk.parameter` | `ParameterStore`, a store of typed parameter sets that validates each field. Also `ParameterError` and `ParameterNotFoundError`. |
| `devdesk.bugtracker` | `BugTracker` holds `Project`, `Iteration`, `Issue` and `Comment` records. Also `BugTrackerError` and `RecordNotFoundError`. |
| `devdesk.dictionary` | `DictStore` holds `DictType` and `DictData` entries. The module also defines the `DictError` exceptions. |

## Examples

### Collections

`PriorityQueue` returns the highest priority first and `MinPriorityQueue` returns the lowest first. `dequeue` and `peek` return a `(value, priority)` pair. On an empty queue they raise `EmptyCollectionError`.

```python
from devdesk.collections import PriorityQueue, MinPriorityQueue

pq = PriorityQueue()
pq.enqueue("task1", 1)
item = pq.enqueue("task2", 2)
pq.enqueue("task3", 3)
pq.update_priority(item, 10)
pq.dequeue()          # ("task2", 10)

mpq = MinPriorityQueue()
mpq.from_items(["c", "a", "b"], [3, 1, 2])
mpq.to_list()         # ["a", "b", "c"]
list(mpq)             # [("a", 1), ("b", 2), ("c", 3)], queue left intact
```

`OrderedMap` keeps its keys in the order they were first set. It serialises to a JSON array of `{"Key": ..., "Value": ...}` objects:

```python
from devdesk.collections import OrderedMap

om = OrderedMap()
om.set("a", 1)
om.set("b", 2)
om.first()            # ("a", 1)
om.to_json()          # '[{"Key":"a","Value":1},{"Key":"b","Value":2}]'

restored = OrderedMap()
restored.from_json(om.to_json())
restored.keys()       # ["a", "b"]
```

`Queue` and `Stack` also round-trip through JSON arrays with `to_json` and `from_json`.

### Concurrency

`TaskGroup.wait` blocks until every task has finished. If a task raised an exception, `wait` raises the first one. The group also works as a context manager:

```python
from devdesk.concurrency import TaskGroup, crash_handler

results = []
with TaskGroup() as group:
    for n in range(3):
        group.run(lambda n=n: results.append(n * n))

with crash_handler(print, reraise=False):
    raise RuntimeError("handled and swallowed")
```

### Encryption

The AES helpers accept 16-, 24- or 32-byte keys. `aes_encrypt` puts a random IV in front of the ciphertext. `aes_gcm_encrypt` puts a 12-byte nonce in front. If decryption fails, they raise `CryptoError`.

```python
from devdesk.cryptoutil import aes_decrypt, aes_encrypt, random_bytes, sha256_hex

key = random_bytes(32)
aes_decrypt(aes_encrypt(b"hello", key), key)   # b"hello"
sha256_hex("abc")
```

### Archives

`unzip_file` and `extract_tar_gz` refuse entries that would land outside the target directory. In that case they raise `UnsafeArchivePathError`.

```python
from devdesk.compress import create_tar_gz, extract_tar_gz, gzip_compress, gzip_decompress

gzip_decompress(gzip_compress(b"data"))   # b"data"
create_tar_gz("build/output", "output.tar.gz")
extract_tar_gz("output.tar.gz", "restore")
```

### Localization

`get_text` looks for the key in the requested language first, then in the default language, and finally returns the key itself. `resolve_language` picks the language in this order: the query value, then the first tag of an Accept-Language header, then the default.

```python
from devdesk.localization import Localization

loc = Localization("en")
loc.load_language_file("en", "lang/en.json")
loc.load_language_file("zh", "lang/zh.yaml")
loc.get_text("fr", "greeting")                # English text, or "greeting"
loc.resolve_language("", "zh-CN,zh;q=0.9")    # "zh"
```

### Parameter store

Each field must be declared as `string`, `number` or `boolean`, and its value must match the declared type. A value of `None` is always accepted. Field names must be unique and not empty.

```python
from devdesk.parameter import ParameterField, ParameterRequest, ParameterStore

store = ParameterStore()
record = store.create(
    ParameterRequest(
        type="game",
        name="limits",
        parameters=[ParameterField(name="max_players", type="number", value=8)],
    ),
    user_id=1,
)
store.get(record.id).parameters[0].value   # 8
records, total = store.list(limit=10, page=1, search="lim")
```

### Bug tracker and dictionaries

```python
from devdesk.bugtracker import BugTracker, Issue, Project
from devdesk.dictionary import DictData, DictStore, DictType

tracker = BugTracker()
project = tracker.create_project(Project(name="Client"))
tracker.create_issue(Issue(project_id=project.id, title="Crash on start"))
tracker.list_project_issues(project.id)

dicts = DictStore()
dicts.add_type(DictType(name="Platform", type="platform"))
dicts.add_data(DictData(type="platform", label="Android", value="android", sort=1))
dicts.all_data("platform")
```

`ParameterStore`, `BugTracker` and `DictStore` take an optional `clock` callable, which supplies their timestamps.

## What this package does not do

- It is a library only. It has no command-line program, no HTTP server, no web pages and no request routing.
- It has no user accounts, sessions, logins or permission checks.
- `ParameterStore`, `BugTracker` and `DictStore` keep their records in memory. Nothing is written to a database or to disk, so the records are lost when the process ends.
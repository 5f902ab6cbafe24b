# cprlite

Small, dependency-free building blocks for writing an HTTP client in Python.

## What is inside

- `cprlite.util`
  - `split(text, delimiter)` splits on one character and drops a trailing
    empty field; an empty string gives an empty list.
  - `is_true(s)` is `True` when `s` reads `"true"` in any case.
  - `parse_header(block)` returns a `ParsedHeader` with `header` (a
    `CaseInsensitiveDict`), `status_line` and `reason`. Every `HTTP/` status
    line starts a fresh header map, so after redirects only the last
    response's fields remain.
  - `parse_cookies(lines)` turns tab-separated cookie-jar lines (domain,
    include-subdomains, path, https-only, expires, name, value) into frozen
    `Cookie` objects whose `expires` is a UTC `datetime`. An expiry that does
    not start with digits raises `ValueError`.
  - `secure_clear(buffer)` overwrites a `bytearray` with zeros and empties it;
    anything else raises `TypeError`.
- `cprlite.options`
  - `Timeout(ms)` takes an `int` of milliseconds or a `timedelta`;
    `milliseconds()` raises `OverflowError` outside the signed 64-bit range.
  - `UnixSocket(path)` with `socket_path()`.
  - `HttpVersion(code)` with the `HttpVersionCode` enum (default
    `VERSION_NONE`).
  - `UserAgent`, a `str` subclass.
- `cprlite.containers`
  - `Parameter` and `Pair`, key/value dataclasses.
  - `CurlContainer`, an ordered list of them; `add(*items)` accepts single
    items or iterables, and `content()` renders `key=value&...`,
    percent-encoding keys and values unless `encode=False`.
  - `Cookies`, a mutable mapping iterated in key order; `encoded()` renders
    `name=value; ...`, percent-encoding the values unless `encode=False`.
- `cprlite.multipart`: `File`, `Buffer` (bytes plus a file name), `Part`
  (a plain string or integer value, a `File`, or a `Buffer`, with an optional
  content type) and `Multipart`, an ordered collection of parts.
- `cprlite.threadpool`: `ThreadPool(min_threads, max_threads, max_idle_ms)`
  and the `PoolStatus` enum. Threads beyond the minimum leave after
  `max_idle_ms` without work.

## Examples

Parsing a raw response header block:

```python
from cprlite.util import parse_header

parsed = parse_header("HTTP/1.1 200 OK\r\nContent-Type: text/html\r\n\r\n")
parsed.status_line             # "HTTP/1.1 200 OK"
parsed.reason                  # "OK"
parsed.header["content-type"]  # "text/html"
```

Building a query string and a Cookie header value:

```python
from cprlite.containers import Cookies, CurlContainer, Parameter

CurlContainer([Parameter("q", "a b"), Parameter("page", "2")]).content()
# "q=a%20b&page=2"

Cookies({"lang": "en-US", "id": "placeholder"}).encoded()
# "id=placeholder; lang=en-US"
```

Checking a timeout before it is passed on:

```python
from datetime import timedelta
from cprlite.options import Timeout

Timeout(timedelta(seconds=2)).milliseconds()  # 2000
```

Running work on the thread pool:

```python
from cprlite.threadpool import ThreadPool

pool = ThreadPool(1, 4)
pool.start(2)
future = pool.submit(sum, [1, 2, 3])
pool.wait()
future.result()  # 6
pool.stop()
```

`submit` returns a `concurrent.futures.Future` and starts a stopped pool.
`start` on a running pool and `stop` on a stopped one raise `RuntimeError`.
The pool can also be used as a context manager, which starts it on entry and
stops it on exit. `pause()` keeps threads from taking new tasks until
`resume()`.

## What it does not do

The package does not send requests. There is no session, no network
transport, no TLS handling and no command-line tool: it provides the parsing
helpers and the option and body types that such a client would use.

## Tests

```
pip install -e ".[test]"
pytest
```
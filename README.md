# besiege

The core pieces of an HTTP load tester as a plain Python library, using only
the standard library.

## What is inside

- `besiege.array.CycleArray` – an ordered collection that hands out its items
  in a round robin with `next()` and `prev()`. `None` is never stored;
  `get`, `remove` and `pop` return `None` when there is nothing there.
- `besiege.creds` – `parse_credentials(scheme, text)` turns
  `user:password[:realm]` into a `Credentials` dataclass; the realm defaults
  to `any`.
- `besiege.data.Statistics` – counts transactions, bytes, successes and
  failures and records the shortest and longest transaction. It works out
  `availability()`, `response_time()`, `transaction_rate()`, `throughput()`
  (megabytes per second) and `concurrency()`; the rates use the time last
  computed by `elapsed()` between `set_start()` and `set_stop()`.
- `besiege.variables` – `evaluate(variables, text)` expands the first
  `$NAME`, `${NAME}` or `$(NAME)` from a mapping, then from the environment
  (an unknown name expands to nothing); `escape(text)` drops the first
  backslash.
- `besiege.date` – `parse_http_date(text)` reads RFC 1123, RFC 850, asctime
  and `YYYYMMDD` dates with named or numeric zones into epoch seconds
  (0 for empty input, -1 when unparsable). `HttpDate` holds either such a
  date or an entity tag (`HttpDate.from_etag`), and offers `rfc850()`,
  `expired()` and `stamp()`. `adjust(timestamp, seconds)` shifts a timestamp.
- `besiege.cookie` – `parse_cookie(text, host)` reads a `Set-Cookie` value
  into a `Cookie`; `parse_cookie_time` reads its `expires` value. Without a
  `domain` attribute the domain is taken from the host from its first dot.
- `besiege.cache.Cache` – a logical cache of validators per request
  (`CacheType.ETAG`, `LAST`, `EXPIRES`). `header(ctype, request)` builds the
  `If-None-Match` or `If-Modified-Since` line while an unexpired expiry date
  is held. No response bodies are stored.
- `besiege.cookies.CookieJar` – a cookie jar that files cookies by the
  thread that received them, builds `Cookie:` request headers, drops expired
  persistent cookies, and saves unexpired persistent cookies to a file
  (`save()`, also on leaving a `with` block). `load()` reads such a file
  back as lists of cookie strings grouped by owner. The default file is
  `~/.besiege/cookies.txt` (`default_cookie_file()`); its directory is not
  created for you.
- `besiege.crew.Crew` – a fixed pool of worker threads fed from a bounded
  queue. `add()` raises `CrewFullError` on a full non-blocking crew and
  `CrewClosedError` once the crew is joined or cancelled.
- `besiege.cfg` – `read_cfg_file(path)` reads a URL file, skipping blank lines
  and comments, taking `NAME=value` lines as variables and expanding them in
  later lines; it raises `ConfigError` when the file cannot be opened.
  `read_cmd_line(url)` turns a single URL into a list of four copies.

## Installation

```
pip install .
```

## Examples

```python
from besiege.cookies import CookieJar

with CookieJar("cookies.txt") as jar:
    jar.add("session=token; path=/", "www.example.com")
    print(jar.header("www.example.com"))   # 'Cookie: session=token\r\n'
```

```python
from besiege.crew import Crew

crew = Crew(size=4, maxsize=16, block=True)
for n in range(10):
    crew.add(print, n)
crew.join(finish=True)
```

```python
from besiege.cfg import read_cfg_file

urls = read_cfg_file("urls.txt")
```

In a URL file a line such as `HOST=www.example.com` sets a variable, and
later lines may say `http://$(HOST)/index.html`. A line that starts with `#`
is a comment.

## What it does not do

The package sends no requests. There is no HTTP or FTP client, no socket or
TLS handling, no simulated browser that walks the URL list, and no command to
run a load test or print a report. It provides the parts such a tool is
built from.

## Tests

```
pip install .[test]
pytest
```
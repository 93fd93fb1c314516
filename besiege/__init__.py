"""Building blocks for an HTTP load tester: cookies, validator cache, HTTP dates, statistics, worker crews and URL files."""

__version__ = "0.1.0"
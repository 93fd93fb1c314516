import threading

import pytest

from besiege.cookies import CookieJar, default_cookie_file

FUTURE = "4102444800"


@pytest.fixture
def jar(tmp_path):
    return CookieJar(tmp_path / "cookies.txt")


def test_default_cookie_file_uses_home(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    assert default_cookie_file() == tmp_path / ".besiege" / "cookies.txt"


def test_add_and_header(jar):
    assert jar.add("name=value; path=/", "www.example.com") is True
    assert len(jar) == 1
    assert jar.header("www.example.com") == "Cookie: name=value\r\n"


def test_header_joins_cookies_with_semicolon(jar):
    jar.add("a=1", "www.example.com")
    jar.add("b=2", "www.example.com")
    assert jar.header("www.example.com") == "Cookie: a=1;b=2\r\n"


def test_header_for_other_host_is_empty(jar):
    jar.add("name=value", "www.example.com")
    assert jar.header("other.org") == ""


def test_same_name_replaces_value(jar):
    jar.add("name=value", "www.example.com")
    jar.add("NAME=other", "www.example.com")
    assert len(jar) == 1
    assert jar.header("www.example.com") == "Cookie: name=other\r\n"


def test_add_rejects_missing_or_unnamed(jar):
    assert jar.add(None, "www.example.com") is False
    assert jar.add("secure", "www.example.com") is False
    assert len(jar) == 0


def test_delete(jar):
    jar.add("a=1", "www.example.com")
    jar.add("b=2", "www.example.com")
    assert jar.delete("A") is True
    assert jar.delete("missing") is False
    assert jar.header("www.example.com") == "Cookie: b=2\r\n"


def test_delete_all(jar):
    jar.add("a=1", "www.example.com")
    jar.add("b=2", "www.example.com")
    assert jar.delete_all() is True
    assert len(jar) == 0


def test_expired_cookie_is_dropped_from_header(jar):
    jar.add("old=1; expires=5000", "www.example.com")
    assert len(jar) == 1
    assert jar.header("www.example.com") == ""
    assert len(jar) == 0


def _add_in_thread(jar, text, host):
    worker = threading.Thread(target=jar.add, args=(text, host))
    worker.start()
    worker.join()


def test_cookies_of_other_threads_are_private(jar):
    _add_in_thread(jar, "name=value", "www.example.com")
    assert len(jar) == 1
    assert jar.header("www.example.com") == ""


def test_shared_jar_sends_every_thread_cookie(tmp_path):
    jar = CookieJar(tmp_path / "cookies.txt", shared=True)
    _add_in_thread(jar, "name=value", "www.example.com")
    assert jar.header("www.example.com") == "Cookie: name=value\r\n"


def test_save_and_load_round_trip(jar):
    jar.add(f"name=value; path=/; expires={FUTURE}", "www.example.com")
    assert jar.save() is True
    assert jar.load() == [[f"name=value; domain=.example.com; path=/; expires={FUTURE}"]]


def test_session_cookies_are_not_saved(jar):
    jar.add("name=value", "www.example.com")
    jar.save()
    assert jar.load() == []
    assert jar.path.read_text().startswith("#\n")


def test_load_groups_and_dedupes(jar):
    jar.path.write_text(
        "# comment\n"
        "\n"
        "7 | a=1; domain=.example.com\n"
        "8 | b=2  # trailing comment\n"
        "7 | a=1; domain=.example.com\n"
        "7 | c=3\n"
        "no separator here\n"
    )
    assert jar.load() == [["a=1; domain=.example.com", "c=3"], ["b=2"]]


def test_load_missing_file(tmp_path):
    assert CookieJar(tmp_path / "absent.txt").load() == []


def test_save_to_missing_directory_fails(tmp_path):
    jar = CookieJar(tmp_path / "no" / "such" / "cookies.txt")
    assert jar.save() is False


def test_context_manager_saves(tmp_path):
    path = tmp_path / "cookies.txt"
    with CookieJar(path) as jar:
        jar.add(f"name=value; expires={FUTURE}", "www.example.com")
    assert f"name=value; domain=.example.com; path=/; expires={FUTURE}" in path.read_text()


def test_describe_lists_cookies(jar):
    jar.add("name=value", "www.example.com")
    text = jar.describe()
    assert "NAME: name\n" in text
    assert "   VALUE: value\n" in text
    assert text.count("Expires:") == 1
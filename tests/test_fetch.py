import pytest

from syr_schedule_export import fetch


class _Resp:
    def __init__(self, text, status=200):
        self.text = text
        self.status_code = status

    def raise_for_status(self):
        if self.status_code >= 400:
            raise fetch.requests.HTTPError(f"{self.status_code} Error")


def test_fetch_sends_session_cookies(monkeypatch, schedule_html):
    seen = {}

    def fake_get(url, cookies=None, timeout=None):
        seen["url"] = url
        seen["cookies"] = cookies
        return _Resp(schedule_html)

    monkeypatch.setattr(fetch.requests, "get", fake_get)
    html = fetch.fetch_schedule_html(env={"SESSION_ID": "abc", "TOKEN": "tok"})

    assert html == schedule_html
    assert seen["url"] == fetch.SCHEDULE_URL
    assert seen["cookies"] == {
        "ITS-CSPRD101-80-PORTAL-PSJSESSIONID": "abc",
        "PS_TOKEN": "tok",
    }


def test_fetch_missing_credentials():
    with pytest.raises(ValueError, match="TOKEN"):
        fetch.fetch_schedule_html(env={"SESSION_ID": "abc"})


def test_fetch_expired_session(monkeypatch):
    monkeypatch.setattr(fetch.requests, "get", lambda *a, **kw: _Resp("<html>Sign in</html>"))
    with pytest.raises(ValueError, match="not the class schedule"):
        fetch.fetch_schedule_html(env={"SESSION_ID": "abc", "TOKEN": "tok"})


def test_fetch_http_error(monkeypatch):
    monkeypatch.setattr(fetch.requests, "get", lambda *a, **kw: _Resp("", status=500))
    with pytest.raises(fetch.requests.HTTPError):
        fetch.fetch_schedule_html(env={"SESSION_ID": "abc", "TOKEN": "tok"})

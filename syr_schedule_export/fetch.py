"""
Fetch the "My Class Schedule" page from Syracuse MySlice (PeopleSoft).

Two ways:
- Cookie mode: reuse an existing browser session. Copy the
  PSJSESSIONID and PS_TOKEN cookies into SESSION_ID / TOKEN env vars.
- Browser mode: open Chrome, user logs in (with Duo) and navigates to
  the page, then presses Enter in the terminal; the page source is read.
"""
from __future__ import annotations

import os
from typing import Mapping

import requests
from selenium import webdriver
from selenium.webdriver.chrome.options import Options
from selenium.webdriver.chrome.service import Service
from webdriver_manager.chrome import ChromeDriverManager

from .config import SESSION_ID_ENV, TOKEN_ENV

SCHEDULE_URL = (
    "https://cs92prod.ps.syr.edu/psc/CS92PROD/EMPLOYEE/SA/c/"
    "SA_LEARNER_SERVICES.SSR_SSENRL_LIST"
)
SESSION_COOKIE = "ITS-CSPRD101-80-PORTAL-PSJSESSIONID"
TOKEN_COOKIE = "PS_TOKEN"

# Marker present on the list view when at least one class is listed.
PAGE_MARKER = "DERIVED_REGFRM1_DESCR20"


def _credentials(env: Mapping[str, str]) -> tuple[str, str]:
    missing = [k for k in (SESSION_ID_ENV, TOKEN_ENV) if not env.get(k)]
    if missing:
        raise ValueError(f"Not found {', '.join(missing)} in env")
    return env[SESSION_ID_ENV], env[TOKEN_ENV]


def _check_page(html: str) -> str:
    if PAGE_MARKER not in html:
        raise ValueError(
            "The page is not the class schedule list (no course found). "
            "The session may have expired, or the schedule is empty."
        )
    return html


def fetch_schedule_html(
    url: str = SCHEDULE_URL,
    env: Mapping[str, str] | None = None,
    timeout: float = 30,
) -> str:
    """GET the schedule page with the session cookies from ``env`` (default: os.environ)."""
    session_id, token = _credentials(os.environ if env is None else env)
    cookies = {SESSION_COOKIE: session_id, TOKEN_COOKIE: token}
    resp = requests.get(url, cookies=cookies, timeout=timeout)
    resp.raise_for_status()
    return _check_page(resp.text)


def fetch_schedule_html_interactive(url: str = SCHEDULE_URL) -> str:
    """
    Open Chrome at ``url``; the user logs in and opens the list view, then
    presses Enter in the terminal. Returns the page HTML.
    """
    options = Options()
    options.add_argument("--no-sandbox")
    options.add_argument("--disable-dev-shm-usage")
    try:
        service = Service(ChromeDriverManager().install())
        driver = webdriver.Chrome(service=service, options=options)
    except Exception as e:
        raise RuntimeError(
            f"Could not start Chrome. Install Chrome and run again. Error: {e}"
        ) from e

    try:
        driver.get(url)
        driver.implicitly_wait(5)

        print()
        print("In the browser:")
        print("  1. Log in to MySlice (NetID, password, Duo)")
        print("  2. Open Student Services -> My Class Schedule (List View)")
        print("  3. Wait until the class list is shown")
        print("  4. Come back to this terminal and press Enter")
        print()
        input("Press Enter when done → ")

        return _check_page(driver.page_source)
    finally:
        driver.quit()

"""Fetching and caching of daily puzzle inputs."""

from __future__ import annotations

import json
from pathlib import Path

import requests

INPUT_URL = "https://adventofcode.com/2022/day/{day}/input"
USER_AGENT = "aocdays input fetcher"
REQUEST_TIMEOUT = 30


class NotLoggedInError(RuntimeError):
    """The server refused the request because the session cookie is not valid."""


class InputUnavailableError(RuntimeError):
    """The input for the requested day has not been published yet."""


def input_path(day: int, inputs_dir: str | Path = "inputs") -> Path:
    """Return the path where the input for ``day`` is cached."""
    return Path(inputs_dir) / f"input{day:02d}"


def load_cookies(path: str | Path = "cookies.json") -> dict[str, str]:
    """Read a JSON object of cookie names to values."""
    with open(path, encoding="utf-8") as handle:
        cookies = json.load(handle)
    if not isinstance(cookies, dict) or not all(
        isinstance(name, str) and isinstance(value, str) for name, value in cookies.items()
    ):
        raise ValueError("Failed to parse cookies file: expected an object of strings")
    return cookies


def get_day_input(
    day: int,
    inputs_dir: str | Path = "inputs",
    cookies_path: str | Path = "cookies.json",
) -> Path:
    """Download the input for ``day`` unless it is already cached; return its path."""
    path = input_path(day, inputs_dir)
    if path.exists():
        return path

    cookies = load_cookies(cookies_path)
    headers = {"User-Agent": USER_AGENT}
    if cookies:
        headers["Cookie"] = "; ".join(f"{name}={value}" for name, value in cookies.items())

    response = requests.get(INPUT_URL.format(day=day), headers=headers, timeout=REQUEST_TIMEOUT)
    if response.status_code == 400:
        raise NotLoggedInError(
            "Not logged into Advent of Code - try updating your session cookie"
        )
    body = response.text
    if body.startswith("Please don't"):
        raise InputUnavailableError(f"Input for day {day} is not available yet")

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(body, encoding="utf-8")
    return path
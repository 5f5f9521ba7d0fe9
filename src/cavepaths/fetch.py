"""
fetch.py - Download puzzle input with a logged-in session cookie
"""

import logging
import os
from pathlib import Path
from typing import Optional

import requests

logger = logging.getLogger(__name__)

SESSION_ENV = "AOC_SESSION"


class PuzzleInputClient:
    """
    Client for the puzzle site's per-user input endpoint
    """

    def __init__(self, session: Optional[str] = None,
                 base_url: str = "https://adventofcode.com",
                 timeout: float = 10):
        """
        Args:
            session: value of the site's ``session`` cookie (falls back to $AOC_SESSION)
            base_url: site root
            timeout: seconds to wait for the download
        """
        self.session = session or os.environ.get(SESSION_ENV)
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.headers = {"User-Agent": "cavepaths (puzzle input downloader)"}

    def input_url(self, year: int, day: int) -> str:
        return f"{self.base_url}/{year}/day/{day}/input"

    def fetch(self, year: int = 2021, day: int = 12) -> str:
        """Download the raw input text for one puzzle day."""
        if not self.session:
            raise ValueError(f"no session cookie: pass --session or set ${SESSION_ENV}")
        url = self.input_url(year, day)
        logger.debug("fetching %s", url)
        response = requests.get(
            url,
            headers=self.headers,
            cookies={"session": self.session},
            timeout=self.timeout
        )
        response.raise_for_status()
        return response.text

    def fetch_to(self, path: str, year: int = 2021, day: int = 12,
                 overwrite: bool = False) -> Path:
        """Download into ``path`` unless it already exists (or ``overwrite``)."""
        p = Path(path)
        if p.exists() and not overwrite:
            logger.debug("using cached input %s", p)
            return p
        text = self.fetch(year, day)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(text)
        return p

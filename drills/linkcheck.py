"""A multi-threaded link checker that crawls pages of one domain."""

from __future__ import annotations

import argparse
import ipaddress
import pprint
import queue
import threading
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urljoin, urlsplit, urlunsplit

import requests
from bs4 import BeautifulSoup

DEFAULT_START_URL = "https://www.google.org"
DEFAULT_THREADS = 16
_TIMEOUT = 30


class BadResponse(Exception):
    """The server answered with a status other than success."""

    def __init__(self, status: str) -> None:
        super().__init__(f"bad http response: {status}")
        self.status = status


@dataclass(frozen=True)
class CrawlCommand:
    """A page to visit, and whether to collect the links on it."""

    url: str
    extract_links: bool


def _normalize(url: str) -> str:
    parts = urlsplit(url)
    if parts.netloc and not parts.path:
        parts = parts._replace(path="/")
    return urlunsplit(parts)


def _domain(url: str) -> Optional[str]:
    host = urlsplit(url).hostname
    if not host:
        return None
    try:
        ipaddress.ip_address(host)
    except ValueError:
        return host
    return None


def visit_page(session: requests.Session, command: CrawlCommand) -> list[str]:
    """Fetch a page and return the absolute URLs it links to.

    Raises BadResponse for a non-success status and requests errors on failure.
    """
    print(f"Checking {command.url}")
    response = session.get(command.url, timeout=_TIMEOUT)
    if not 200 <= response.status_code < 300:
        raise BadResponse(f"{response.status_code} {response.reason or ''}".strip())
    if not command.extract_links:
        return []

    base_url = response.url
    document = BeautifulSoup(response.text, "html.parser")
    links = []
    for anchor in document.find_all("a", href=True):
        href = anchor["href"]
        try:
            links.append(_normalize(urljoin(base_url, href)))
        except ValueError as err:
            print(f"On {base_url}: ignored unparsable {href!r}: {err}")
    return links


class CrawlState:
    """The domain being crawled and the pages already seen."""

    def __init__(self, start_url: str) -> None:
        start_url = _normalize(start_url)
        domain = _domain(start_url)
        if domain is None:
            raise ValueError(f"start URL has no domain: {start_url}")
        self.domain = domain
        self.visited_pages = {start_url}

    def should_extract_links(self, url: str) -> bool:
        """Whether links within the given page should be extracted."""
        return _domain(url) == self.domain

    def mark_visited(self, url: str) -> bool:
        """Mark the page as visited; False if it had been visited already."""
        if url in self.visited_pages:
            return False
        self.visited_pages.add(url)
        return True


def _crawl_worker(commands: queue.Queue, results: queue.Queue) -> None:
    with requests.Session() as session:
        while (command := commands.get()) is not None:
            try:
                results.put((command.url, visit_page(session, command), None))
            except Exception as error:  # any failure marks the URL as bad
                results.put((command.url, None, error))


def _control_crawl(start_url: str, commands: queue.Queue, results: queue.Queue) -> list[str]:
    state = CrawlState(start_url)
    commands.put(CrawlCommand(start_url, True))
    pending = 1
    bad_urls = []
    while pending > 0:
        url, links, error = results.get()
        pending -= 1
        if error is not None:
            bad_urls.append(url)
            print(f"Got crawling error: {error}")
            continue
        for link in links:
            if state.mark_visited(link):
                commands.put(CrawlCommand(link, state.should_extract_links(link)))
                pending += 1
    return bad_urls


def check_links(start_url: str, thread_count: int = DEFAULT_THREADS) -> list[str]:
    """Crawl from the start URL and return the URLs that could not be fetched."""
    if thread_count < 1:
        raise ValueError("thread_count must be at least 1")
    start_url = _normalize(start_url)
    CrawlState(start_url)
    commands: queue.Queue = queue.Queue()
    results: queue.Queue = queue.Queue()
    workers = [
        threading.Thread(target=_crawl_worker, args=(commands, results), daemon=True)
        for _ in range(thread_count)
    ]
    for worker in workers:
        worker.start()
    try:
        return _control_crawl(start_url, commands, results)
    finally:
        for _ in workers:
            commands.put(None)


def main(argv: Sequence[str] | None = None) -> int:
    """Check the links of a site and print the bad ones."""
    parser = argparse.ArgumentParser(description="Check the links of a web site.")
    parser.add_argument("url", nargs="?", default=DEFAULT_START_URL)
    parser.add_argument("--threads", type=int, default=DEFAULT_THREADS)
    args = parser.parse_args(argv)
    bad_urls = check_links(args.url, args.threads)
    print(f"Bad URLs: {pprint.pformat(bad_urls)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
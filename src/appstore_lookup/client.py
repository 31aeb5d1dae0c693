"""
App Store Lookup Client

Queries the iTunes lookup endpoint for the latest published version of an
application and classifies it against the installed version.

Usage:
    from appstore_lookup import AppStoreLookup, LookupConfig

    client = AppStoreLookup(LookupConfig(identifier='com.example.app',
                                         current_version='1.4.0'))

    # Callback style, delivered on a worker thread
    client.lookup_latest(lambda outcome: print(outcome))

    # Future style
    result = client.lookup_latest().result(timeout=30)
    if result.update_available:
        print(f"Update {result.version} available")
"""

import logging
import threading
from concurrent.futures import Future
from typing import Any, Callable, Optional
from urllib.parse import urlencode, urlparse

import requests

from .__version__ import __version__
from .exceptions import (
    InvalidRequestConfiguration,
    InvalidResponseData,
    NetworkFailure,
    StoreLookupError,
)
from .models import LookupConfig, LookupFailure, LookupOutcome, LookupResult, LookupSuccess
from .version_compare import classify

logger = logging.getLogger(__name__)

HEADERS = {
    'User-Agent': f'appstore-lookup/{__version__}',
    'Accept': 'application/json',
}

CompletionHandler = Callable[[LookupOutcome], None]


def create_session() -> requests.Session:
    """Create an HTTP session with the default lookup headers"""
    session = requests.Session()
    session.headers.update(HEADERS)
    return session


class AppStoreLookup:
    """Single-shot lookup of the latest catalog version for one application.

    Each call to lookup_latest() performs exactly one request and delivers
    exactly one outcome. There are no retries, no caching and no cancellation.
    """

    def __init__(self, config: LookupConfig, session: Optional[requests.Session] = None):
        self.config = config
        self._session = session if session is not None else create_session()

    # ── Request ──────────────────────────────────────────────────────

    def build_url(self) -> str:
        """Build the lookup URL from the configuration.

        Raises:
            InvalidRequestConfiguration: identifier or current version is
                missing, the endpoint is not an absolute http(s) URL, or the
                timeout is not positive.
        """
        identifier = (self.config.identifier or '').strip()
        if not identifier:
            raise InvalidRequestConfiguration("application identifier is not set")

        if not (self.config.current_version or '').strip():
            raise InvalidRequestConfiguration("current version is not set")

        base_url = (self.config.lookup_url or '').strip()
        parsed = urlparse(base_url)
        if parsed.scheme not in ('http', 'https') or not parsed.netloc:
            raise InvalidRequestConfiguration(f"malformed lookup URL: {base_url!r}")

        if self.config.timeout is not None and self.config.timeout <= 0:
            raise InvalidRequestConfiguration(f"timeout must be positive, got {self.config.timeout}")

        params = {'bundleId': identifier}
        if self.config.country:
            params['country'] = self.config.country

        separator = '&' if parsed.query else '?'
        return f"{base_url}{separator}{urlencode(params)}"

    def fetch(self) -> LookupResult:
        """Perform the lookup on the calling thread.

        Returns:
            LookupResult for the latest catalog version

        Raises:
            InvalidRequestConfiguration, NetworkFailure, InvalidResponseData
        """
        return self._request(self.build_url())

    def _request(self, url: str) -> LookupResult:
        logger.debug(f"Looking up {url}")
        try:
            response = self._session.get(url, timeout=self.config.timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            logger.warning(f"App Store lookup failed: {e}")
            raise NetworkFailure(e) from e

        try:
            payload = response.json()
        except ValueError as e:
            raise InvalidResponseData(f"body is not valid JSON ({e})") from e

        return self.parse_response(
            payload,
            self.config.current_version,
            patch_optional=self.config.patch_optional,
            verbose=self.config.verbose,
        )

    # ── Response ─────────────────────────────────────────────────────

    @staticmethod
    def parse_response(payload: Any, current_version: str,
                       patch_optional: bool = False, verbose: bool = False) -> LookupResult:
        """Turn a decoded lookup response into a LookupResult.

        Expects ``{"results": [{"version": str, "releaseNotes": str,
        "artistId": int}, ...]}``; only the first result is used.

        Raises:
            InvalidResponseData: payload shape or field types don't match
        """
        if not isinstance(payload, dict):
            raise InvalidResponseData("response is not a JSON object")

        results = payload.get('results')
        if not isinstance(results, list) or not results:
            raise InvalidResponseData("no results in response")

        entry = results[0]
        if not isinstance(entry, dict):
            raise InvalidResponseData("first result is not an object")

        version = entry.get('version')
        if not isinstance(version, str) or not version:
            raise InvalidResponseData("missing 'version'")

        release_notes = entry.get('releaseNotes')
        if not isinstance(release_notes, str):
            raise InvalidResponseData("missing 'releaseNotes'")

        artist_id = entry.get('artistId')
        # bool is an int subclass
        if isinstance(artist_id, bool) or not isinstance(artist_id, int):
            raise InvalidResponseData("missing 'artistId'")

        if verbose:
            logger.debug(f"App Store response: {payload}")

        update_type = classify(current_version, version, patch_optional=patch_optional)
        logger.info(f"Catalog version {version}, installed {current_version}: {update_type.value}")

        return LookupResult(
            version=version,
            release_notes=release_notes,
            artist_id=str(artist_id),
            update_type=update_type,
        )

    # ── Async delivery ───────────────────────────────────────────────

    def lookup_latest(self, completion: Optional[CompletionHandler] = None) -> 'Future[LookupResult]':
        """Look up the latest version in the background.

        ``completion`` receives a LookupSuccess or LookupFailure exactly once.
        Configuration errors are delivered synchronously, before this method
        returns, and no request is made. Otherwise the request runs on a
        daemon thread and ``completion`` is called from that thread.

        Returns:
            Future resolving to the LookupResult, or raising the
            StoreLookupError the completion handler also received.
        """
        future: 'Future[LookupResult]' = Future()
        future.set_running_or_notify_cancel()

        try:
            url = self.build_url()
        except InvalidRequestConfiguration as e:
            logger.debug(f"Lookup not started: {e}")
            self._deliver(LookupFailure(e), future, completion)
            return future

        thread = threading.Thread(
            target=self._run,
            args=(url, future, completion),
            name=f"appstore-lookup-{self.config.identifier}",
            daemon=True,
        )
        thread.start()
        return future

    def _run(self, url: str, future: Future, completion: Optional[CompletionHandler]) -> None:
        try:
            outcome: LookupOutcome = LookupSuccess(self._request(url))
        except StoreLookupError as e:
            outcome = LookupFailure(e)
        except Exception as e:
            logger.exception("Unexpected error during App Store lookup")
            outcome = LookupFailure(NetworkFailure(e))

        self._deliver(outcome, future, completion)

    @staticmethod
    def _deliver(outcome: LookupOutcome, future: Future,
                 completion: Optional[CompletionHandler]) -> None:
        if completion is not None:
            try:
                completion(outcome)
            except Exception:
                logger.exception("Lookup completion handler raised")

        if isinstance(outcome, LookupSuccess):
            future.set_result(outcome.result)
        else:
            future.set_exception(outcome.error)


def lookup_latest(config: LookupConfig,
                  completion: Optional[CompletionHandler] = None,
                  session: Optional[requests.Session] = None) -> 'Future[LookupResult]':
    """Convenience wrapper: one lookup with a throwaway client"""
    return AppStoreLookup(config, session=session).lookup_latest(completion)

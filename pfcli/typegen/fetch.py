"""Fetch a sample JSON payload over HTTP."""

import http.client
import json
import socket
import urllib.error
import urllib.request

from pfcli import __version__
from pfcli.errors import NetworkError

DEFAULT_TIMEOUT = 30


def fetch_json(url: str, timeout: int = DEFAULT_TIMEOUT):
    """GET url and decode the body as JSON."""
    req = urllib.request.Request(url, headers={
        "Accept": "application/json",
        "User-Agent": f"pf-cli/{__version__}",
    })

    try:
        with urllib.request.urlopen(req, timeout=timeout) as response:
            body = response.read()
            charset = response.headers.get_content_charset() or 'utf-8'
    except urllib.error.HTTPError as e:
        raise NetworkError(f"API request failed: {e.code} {e.reason}")
    except urllib.error.URLError as e:
        if isinstance(e.reason, socket.timeout):
            raise NetworkError(f"API request timed out after {timeout}s")
        raise NetworkError(f"API request failed: {e.reason}")
    except socket.timeout:
        raise NetworkError(f"API request timed out after {timeout}s")
    except http.client.HTTPException as e:
        raise NetworkError(f"Incomplete response from API: {e!r}")
    except OSError as e:
        raise NetworkError(f"Connection to API lost: {e}")
    except ValueError as e:
        raise NetworkError(f"API request failed: {e}")

    try:
        return json.loads(body.decode(charset, errors='replace'))
    except (json.JSONDecodeError, LookupError):
        raise NetworkError("API response is not valid JSON")

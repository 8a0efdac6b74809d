# SPDX-License-Identifier: MPL-2.0
"""Fetch license header templates from the SPDX license list."""
from __future__ import annotations

import logging

import requests

from .errors import SPDXError

logger = logging.getLogger(__name__)

SPDX_URL = "https://spdx.org/licenses/{ident}.json"
REQUEST_TIMEOUT = 30


def fetch_template(ident: str, session: requests.Session | None = None) -> str:
    """Return the header template SPDX publishes for ``ident``.

    The ``standardLicenseHeader`` is preferred. Licenses without one (MIT,
    BSD variants) fall back to the full ``licenseText``.

    Args:
        ident: SPDX license identifier, e.g. ``Apache-2.0``.
        session: Optional ``requests.Session`` to issue the request with.

    Returns:
        The template text with SPDX placeholders such as ``<year>``.

    Raises:
        SPDXError: the request failed, the identifier is unknown or the
            response holds no usable text.
    """
    url = SPDX_URL.format(ident=ident)
    getter = session.get if session is not None else requests.get
    logger.info("Fetching license template for %s from %s", ident, url)
    try:
        response = getter(url, timeout=REQUEST_TIMEOUT)
    except requests.RequestException as exc:
        raise SPDXError(f"Failed to fetch license template from SPDX: {exc}") from exc

    if response.status_code in (400, 404):
        raise SPDXError(
            f"{ident} does not appear to be a valid SPDX identifier, go to "
            "https://spdx.org/licenses/ to view a list of valid identifiers"
        )
    if response.status_code != 200:
        raise SPDXError(
            f"Failed to fetch license template from SPDX for {ident}: HTTP {response.status_code}"
        )

    try:
        info = response.json()
    except ValueError as exc:
        raise SPDXError(f"Failed to deserialize SPDX JSON: {exc}") from exc

    header = info.get("standardLicenseHeader")
    if header:
        return header
    text = info.get("licenseText")
    if not text:
        raise SPDXError(f"SPDX returned no license text for {ident}")
    return text

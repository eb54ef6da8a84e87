"""Submit encoded notes to AnkiWeb."""

from autoanki.common.config import AnkiConfig
from autoanki.common.errors import RemoteRejection
from autoanki.common.http import Response, Transport, request_headers
from autoanki.output.payload import build_note_fields


def submit_note(transport: Transport, config: AnkiConfig, payload: str, verbose: bool = False) -> Response:
    """Save one note. Makes exactly one request, no retries.

    Raises NetworkError on transport failure and RemoteRejection when
    AnkiWeb answers with a non-success status.
    """
    headers = request_headers(config.cookies, config.user_agent)
    form = build_note_fields(payload, config)

    if verbose:
        print(f"[ankiweb] [submit] {config.save_url} ({len(payload)} chars)")

    resp = transport.submit(config.save_url, headers, form)
    if not resp.ok:
        if verbose:
            print(f"[ankiweb] [error] status {resp.status}")
        raise RemoteRejection(resp.status, resp.body)

    if verbose:
        print(f"[ankiweb] [ok] status {resp.status}")
    return resp

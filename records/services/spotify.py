"""
Track search against the Spotify Web API.

Uses the client-credentials flow: one call for an app token, one call
for the search itself.  No retry, caching or token refresh.
"""
import logging
from dataclasses import asdict, dataclass
from typing import Optional

import requests
from django.conf import settings

logger = logging.getLogger(__name__)

TOKEN_URL = 'https://accounts.spotify.com/api/token'
SEARCH_URL = 'https://api.spotify.com/v1/search'


@dataclass
class Track:
    name: str
    artist: Optional[str]
    url: Optional[str]
    preview: Optional[str]


def get_access_token() -> str:
    if not settings.SPOTIFY_CLIENT_ID or not settings.SPOTIFY_CLIENT_SECRET:
        raise RuntimeError('Spotify client credentials are not configured')
    r = requests.post(
        TOKEN_URL,
        data={'grant_type': 'client_credentials'},
        auth=(settings.SPOTIFY_CLIENT_ID, settings.SPOTIFY_CLIENT_SECRET),
        timeout=settings.SPOTIFY_TIMEOUT,
    )
    r.raise_for_status()
    token = r.json().get('access_token')
    if not token:
        raise RuntimeError('Invalid response from Spotify: missing access_token')
    return token


def _to_track(item: dict) -> Track:
    artists = item.get('artists') or []
    return Track(
        name=item.get('name', ''),
        artist=artists[0].get('name') if artists else None,
        url=(item.get('external_urls') or {}).get('spotify'),
        preview=item.get('preview_url'),
    )


def search_tracks(token: str, query: str, limit: int = 10) -> list[dict]:
    logger.info('Spotify track search: %r (limit %s)', query, limit)
    r = requests.get(
        SEARCH_URL,
        headers={'Authorization': f'Bearer {token}'},
        params={'q': query, 'type': 'track', 'limit': limit},
        timeout=settings.SPOTIFY_TIMEOUT,
    )
    r.raise_for_status()
    items = (r.json().get('tracks') or {}).get('items') or []
    return [asdict(_to_track(item)) for item in items]

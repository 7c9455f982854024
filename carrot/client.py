"""
Carrot client library.

This module provides the Carrot client: user creation and validation, and
HMAC-SHA256 signed posts of achievements, high scores, Open Graph actions
and likes.
"""

import json
import logging
import time
from enum import Enum
from typing import Any, Callable, Dict, Mapping, Optional, Union

import requests

from .constants import (
    ACHIEVEMENTS_ENDPOINT,
    ACTIONS_ENDPOINT,
    DEFAULT_CONFIG,
    DEFAULT_HOSTNAME,
    LIKE_ENDPOINT,
    PLAIN_HTTP_HOSTS,
    SCORES_ENDPOINT,
    USERS_ENDPOINT
)
from .exceptions import ConfigurationError, TransportError
from .outcomes import CreationOutcome, PostOutcome, ValidationOutcome
from .signing import render_value, signed_params

logger = logging.getLogger("carrot")


class Carrot:
    """
    Client for the Carrot service.

    ``create_user`` and ``validate_user`` are plain requests that establish
    the user's identity; every other call is a signed POST. Remote results
    are returned as outcome enums, while transport failures raise
    :class:`TransportError`.
    """

    def __init__(
        self,
        app_id: str,
        app_secret: str,
        user_id: Optional[str] = None,
        hostname: str = DEFAULT_HOSTNAME,
        *,
        clock: Callable[[], float] = time.time,
        **config
    ):
        """
        Initialize Carrot client.

        Args:
            app_id: Facebook application id of the game
            app_secret: Carrot application secret (HMAC key)
            user_id: Default per-user identifier, e.g. an email address or
                the Facebook 'third_party_id'; each call may override it
            hostname: Host serving the Carrot API
            clock: Source of Unix time for request dates and ids
            **config: Configuration options (timeout: seconds or a
                (connect, read) tuple)
        """
        self.app_id = app_id
        self.app_secret = app_secret
        self.user_id = user_id
        self.hostname = hostname
        self.clock = clock

        # Merge default config with user overrides
        self.config = {**DEFAULT_CONFIG, **config}

        self._validate_config()

        self.session = requests.Session()

    def _validate_config(self):
        """Validate client configuration."""
        if not self.app_id:
            raise ConfigurationError("app_id cannot be empty")

        if not self.app_secret:
            raise ConfigurationError("app_secret cannot be empty")

        if not self.hostname:
            raise ConfigurationError("hostname cannot be empty")

        timeout = self.config['timeout']
        parts = timeout if isinstance(timeout, tuple) else (timeout,)
        if isinstance(timeout, tuple) and len(timeout) != 2:
            raise ConfigurationError("timeout tuple must be (connect, read)")
        for part in parts:
            if part is None:
                continue
            if isinstance(part, bool) or not isinstance(part, (int, float)):
                raise ConfigurationError(f"timeout must be a number, got {part!r}")
            if part <= 0:
                raise ConfigurationError("timeout must be positive")

    @property
    def host(self) -> str:
        """Hostname without port, as used in the string to sign."""
        return self.hostname.partition(':')[0]

    @property
    def base_url(self) -> str:
        """Scheme and host every endpoint is rooted at."""
        scheme = 'http' if self.host in PLAIN_HTTP_HOSTS else 'https'
        return f"{scheme}://{self.hostname}"

    def _resolve_user(self, user_id: Optional[str]) -> Optional[str]:
        return self.user_id if user_id is None else user_id

    def _make_request(self, method: str, endpoint: str, **kwargs) -> requests.Response:
        """
        Send one HTTP request to the service.

        Args:
            method: HTTP method
            endpoint: Endpoint path (relative to base_url)
            **kwargs: Additional requests arguments

        Returns:
            requests.Response object

        Raises:
            TransportError: If no response could be obtained
        """
        url = self.base_url + endpoint
        kwargs.setdefault('timeout', self.config['timeout'])

        logger.debug("%s %s", method, url)
        try:
            return self.session.request(method, url, **kwargs)
        except requests.RequestException as e:
            raise TransportError(f"HTTP request to {url} failed: {e}") from e

    def _classify(self, response: requests.Response, outcome_type, description: str):
        outcome = outcome_type.from_status(response.status_code)
        if outcome is outcome_type.UNKNOWN:
            logger.warning(
                "Error %s (%s): %s",
                description, response.status_code, response.text
            )
        return outcome

    def post_signed_request(
        self,
        endpoint: str,
        payload: Mapping[str, Any],
        user_id: Optional[str] = None
    ) -> PostOutcome:
        """
        Sign a payload and POST it to an endpoint.

        ``api_key``, ``game_id``, ``request_date`` and ``request_id`` are
        added to a copy of the payload, then ``sig`` is computed over all of
        them and added last.

        Args:
            endpoint: Endpoint path, e.g. '/me/achievements.json'
            payload: Endpoint specific form fields
            user_id: Acting user, or None for the client's user

        Returns:
            PostOutcome for the response status

        Raises:
            TransportError: If the request could not be completed
        """
        params = signed_params(
            payload,
            app_id=self.app_id,
            app_secret=self.app_secret,
            hostname=self.host,
            endpoint=endpoint,
            user_id=self._resolve_user(user_id),
            timestamp=self.clock()
        )
        response = self._make_request('POST', endpoint, data=params)
        return self._classify(response, PostOutcome, "posting signed request to Carrot")

    def create_user(self, access_token: str, user_id: Optional[str] = None) -> CreationOutcome:
        """
        Create a Carrot user from a Facebook access token.

        This request is not signed.

        Args:
            access_token: Facebook user access token
            user_id: Per-user identifier, or None for the client's user

        Returns:
            CreationOutcome for the response status
        """
        endpoint = USERS_ENDPOINT.format(app_id=self.app_id)
        data = {
            'access_token': render_value(access_token),
            'api_key': render_value(self._resolve_user(user_id))
        }
        response = self._make_request('POST', endpoint, data=data)
        return self._classify(response, CreationOutcome, "creating Carrot user")

    def validate_user(self, user_id: Optional[str] = None) -> ValidationOutcome:
        """
        Check whether a user exists and has authorized the application.

        This request is not signed. When the user is found (AUTHORIZED or
        READ_ONLY) the id becomes the client's default user.

        Args:
            user_id: Per-user identifier, or None for the client's user

        Returns:
            ValidationOutcome for the response status
        """
        user_id = self._resolve_user(user_id)
        endpoint = USERS_ENDPOINT.format(app_id=self.app_id)
        response = self._make_request('GET', endpoint, params={'id': render_value(user_id)})
        outcome = self._classify(response, ValidationOutcome, "validating Carrot user")

        if outcome in (ValidationOutcome.AUTHORIZED, ValidationOutcome.READ_ONLY):
            self.user_id = user_id
        return outcome

    def post_achievement(self, achievement_id: str, user_id: Optional[str] = None) -> PostOutcome:
        """Post an earned achievement."""
        return self.post_signed_request(
            ACHIEVEMENTS_ENDPOINT,
            {'achievement_id': achievement_id},
            user_id
        )

    def post_highscore(
        self,
        score: Union[int, str],
        leaderboard_id: str = "",
        user_id: Optional[str] = None
    ) -> PostOutcome:
        """Post a high score, optionally to a specific leaderboard."""
        return self.post_signed_request(
            SCORES_ENDPOINT,
            {'value': score, 'leaderboard_id': leaderboard_id},
            user_id
        )

    def post_action(
        self,
        action_id: str,
        object_instance_id: Optional[str] = None,
        action_properties: Optional[Dict[str, Any]] = None,
        object_properties: Optional[Dict[str, Any]] = None,
        user_id: Optional[str] = None
    ) -> PostOutcome:
        """
        Post an Open Graph action.

        When creating an object, ``object_properties`` must include 'title',
        'description', 'image_url' and 'object_type'.

        Args:
            action_id: Carrot action id
            object_instance_id: Instance id of the object to post, or None
                for a throw-away object
            action_properties: Properties sent with the action
            object_properties: Properties of the new object, if creating one
            user_id: Acting user, or None for the client's user

        Returns:
            PostOutcome for the response status
        """
        payload = {
            'action_id': action_id,
            'action_properties': json.dumps(action_properties or {}, separators=(',', ':')),
            'object_properties': json.dumps(object_properties or {}, separators=(',', ':'))
        }
        if object_instance_id is not None:
            payload['object_instance_id'] = object_instance_id
        return self.post_signed_request(ACTIONS_ENDPOINT, payload, user_id)

    def post_like(
        self,
        object_type: Union[str, Enum],
        object_id: Optional[str] = None,
        user_id: Optional[str] = None
    ) -> PostOutcome:
        """
        Post a 'Like'.

        Args:
            object_type: One of 'game', 'publisher', 'achievement' or
                'object' (or the matching LikeObjectType)
            object_id: Achievement or object identifier, for those types
            user_id: Acting user, or None for the client's user

        Returns:
            PostOutcome for the response status
        """
        if isinstance(object_type, Enum):
            object_type = object_type.value

        like_object = str(object_type)
        if object_id is not None:
            like_object += f":{object_id}"
        return self.post_signed_request(LIKE_ENDPOINT, {'object': like_object}, user_id)

    def close(self):
        """Close HTTP session."""
        if self.session:
            self.session.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()

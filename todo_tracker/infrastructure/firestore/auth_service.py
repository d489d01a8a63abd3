from __future__ import annotations

import json
import logging
import os
import threading

import google_auth_httplib2
import httplib2
from google.auth.transport.requests import Request
from google.oauth2 import service_account
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow
from googleapiclient.discovery import build

from todo_tracker.domain.errors import AuthRequiredError
from todo_tracker.utils import get_base_path


logger = logging.getLogger(__name__)


class FirestoreAuthService:
    SCOPES = ["https://www.googleapis.com/auth/datastore"]

    def __init__(self, credentials_path: str | None = None, token_path: str | None = None):
        base = get_base_path()
        self.credentials_path = credentials_path or os.path.join(base, "credentials.json")
        self.token_path = token_path or os.path.join(base, "token.json")
        self._credentials = None
        self._service = None
        # get_service is called from worker threads
        self._lock = threading.Lock()

    def is_available(self) -> bool:
        return os.path.exists(self.credentials_path)

    def _credentials_type(self) -> str:
        try:
            with open(self.credentials_path, "r", encoding="utf-8") as file:
                return json.load(file).get("type", "")
        except (OSError, json.JSONDecodeError, AttributeError):
            return ""

    def authenticate(self) -> bool:
        """Authenticate using a service account or stored/refreshable user credentials.

        Raises:
            AuthRequiredError: When user credentials are missing or cannot be
                refreshed and interactive sign-in is required.
        """
        if not self.is_available():
            logger.error("Firestore credentials file is missing: %s", self.credentials_path)
            return False

        try:
            if self._credentials_type() == "service_account":
                creds = service_account.Credentials.from_service_account_file(
                    self.credentials_path, scopes=self.SCOPES
                )
            else:
                creds = None
                if os.path.exists(self.token_path):
                    creds = Credentials.from_authorized_user_file(self.token_path, self.SCOPES)

                if not creds or not creds.valid:
                    if creds and creds.expired and creds.refresh_token:
                        creds.refresh(Request())
                    else:
                        # Never open a browser from a worker thread.
                        raise AuthRequiredError()

                    with open(self.token_path, "w", encoding="utf-8") as file:
                        file.write(creds.to_json())

            self._credentials = creds
            self._service = build("firestore", "v1", credentials=creds, cache_discovery=False)
            logger.info("Firestore client initialized.")
            return True
        except AuthRequiredError:
            raise
        except Exception:
            logger.exception("Firestore authentication failed.")
            return False

    def run_interactive_auth(self) -> bool:
        """Run the full OAuth browser flow.  Call ONLY from the UI thread."""
        if not self.is_available():
            return False

        try:
            flow = InstalledAppFlow.from_client_secrets_file(self.credentials_path, self.SCOPES)
            creds = flow.run_local_server(port=0)

            with open(self.token_path, "w", encoding="utf-8") as file:
                file.write(creds.to_json())

            with self._lock:
                self._credentials = creds
                self._service = build("firestore", "v1", credentials=creds, cache_discovery=False)
            return True
        except Exception:
            logger.exception("Interactive OAuth authentication failed.")
            return False

    def get_service(self):
        with self._lock:
            if self._service is not None:
                return self._service

            if not self.authenticate():
                return None
            return self._service

    def authorized_http(self):
        """Return a fresh authorized transport; httplib2.Http must not be shared across threads."""
        if self.get_service() is None or self._credentials is None:
            return None
        return google_auth_httplib2.AuthorizedHttp(self._credentials, http=httplib2.Http())

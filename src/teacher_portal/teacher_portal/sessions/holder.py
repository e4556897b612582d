from __future__ import annotations

import logging
from typing import List, Optional

from ..core.constants import MSG_INVALID_CREDENTIALS, MSG_NO_SCHOOL, MSG_NO_SHEET_LINKS, MSG_STORE_UNAVAILABLE
from ..core.enums import SessionState
from ..core.exceptions import AuthenticationError, DatabaseError, NetworkError, NoSheetLinks
from ..sheets.model import SheetLinkDescriptor
from ..sheets.service import SheetLinkService
from ..teachers.service import AuthService
from .model import AuthSession

logger = logging.getLogger(__name__)


class SessionHolder:
    """One teacher login, from the login form to logout.

    LOGGED_OUT -> LOGGING_IN -> LOGGED_IN, or back to LOGGED_OUT on failure.
    The UI only learns success/failure plus a message; which credential check
    failed is never exposed.
    """

    def __init__(self, auth: AuthService, sheets: SheetLinkService):
        self._auth = auth
        self._sheets = sheets
        self._state = SessionState.LOGGED_OUT
        self._session: Optional[AuthSession] = None
        self._last_error: Optional[str] = None
        self._store_unavailable = False

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_authenticated(self) -> bool:
        return self._state is SessionState.LOGGED_IN and self._session is not None

    @property
    def current(self) -> Optional[AuthSession]:
        return self._session if self.is_authenticated else None

    @property
    def last_error(self) -> Optional[str]:
        return self._last_error

    @property
    def store_unavailable(self) -> bool:
        """True when the last login failed because the data store could not be reached."""
        return self._store_unavailable

    @property
    def warning(self) -> Optional[str]:
        return self._session.warning if self.is_authenticated else None

    @property
    def sheet_links(self) -> List[SheetLinkDescriptor]:
        return list(self._session.sheet_links) if self.is_authenticated else []

    def _fail(self, message: str, *, store_unavailable: bool = False) -> bool:
        self._session = None
        self._last_error = message
        self._store_unavailable = store_unavailable
        self._state = SessionState.LOGGED_OUT
        return False

    def login(self, login_id: str, password: str) -> bool:
        if self._state is SessionState.LOGGING_IN:
            logger.info("login ignored: another attempt is still running")
            return False

        self._session = None
        self._last_error = None
        self._store_unavailable = False
        self._state = SessionState.LOGGING_IN

        try:
            result = self._auth.authenticate(login_id, password)
        except AuthenticationError as e:
            logger.info("login failed: %s", type(e).__name__)
            return self._fail(MSG_INVALID_CREDENTIALS)
        except (DatabaseError, NetworkError) as e:
            logger.warning("login failed, data store error: %s", e)
            return self._fail(MSG_STORE_UNAVAILABLE, store_unavailable=True)
        except Exception:
            self._fail(MSG_STORE_UNAVAILABLE)
            raise

        sheet_links: List[SheetLinkDescriptor] = []
        warning: Optional[str] = None

        if result.school is None:
            warning = MSG_NO_SCHOOL
        else:
            try:
                sheet_links = self._sheets.list_sheet_links(result.school.id, teacher_id=result.teacher.id)
            except NoSheetLinks:
                logger.warning("no sheet links for teacher %s", result.teacher.id)
                warning = MSG_NO_SHEET_LINKS
            except (DatabaseError, NetworkError) as e:
                logger.warning("sheet links unavailable for teacher %s: %s", result.teacher.id, e)
                warning = MSG_NO_SHEET_LINKS
            except Exception:
                self._fail(MSG_STORE_UNAVAILABLE)
                raise

        self._session = AuthSession(
            teacher=result.teacher,
            school=result.school,
            sheet_links=sheet_links,
            warning=warning,
        )
        self._state = SessionState.LOGGED_IN
        logger.info("teacher %s logged in (%d sheet links)", result.teacher.id, len(sheet_links))
        return True

    def logout(self) -> None:
        if self._session is not None:
            logger.info("teacher %s logged out", self._session.teacher.id)
        self._session = None
        self._last_error = None
        self._store_unavailable = False
        self._state = SessionState.LOGGED_OUT

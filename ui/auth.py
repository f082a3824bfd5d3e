from dataclasses import dataclass
from typing import MutableMapping, Optional

import streamlit as st

from ui.notifications import Severity, notify

USER_KEY = "user"


@dataclass(frozen=True)
class User:
    id: str
    email: str


class AuthContext:
    def __init__(self, session_state: Optional[MutableMapping] = None, notifier=notify):
        self.session_state = st.session_state if session_state is None else session_state
        self.notifier = notifier

    @property
    def user(self) -> Optional[User]:
        return self.session_state.get(USER_KEY)

    def sign_in(self, email: str) -> User:
        email = email.strip().lower()
        if not email:
            raise ValueError("Email is required to sign in")
        user = User(id=email, email=email)
        self.session_state[USER_KEY] = user
        return user

    def sign_out(self) -> None:
        self.session_state.pop(USER_KEY, None)
        self.notifier("Signed out", "You have been successfully signed out.", Severity.DEFAULT)

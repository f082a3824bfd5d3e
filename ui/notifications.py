from enum import Enum

import streamlit as st


class Severity(str, Enum):
    DEFAULT = "default"
    DESTRUCTIVE = "destructive"


def notify(title: str, description: str, severity: Severity = Severity.DEFAULT) -> None:
    icon = "🚨" if severity == Severity.DESTRUCTIVE else "ℹ️"
    st.toast(f"**{title}**\n\n{description}", icon=icon)

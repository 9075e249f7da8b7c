"""
Status messages that survive a Streamlit rerun.

Anything drawn right before ``st.rerun()`` is discarded, so callbacks queue
their messages in session state and the next run renders them once.
"""

from typing import List, MutableMapping, Tuple

MESSAGES_KEY = "queued_messages"
LEVELS = ("success", "info", "warning", "error")


def queue_message(state: MutableMapping, level: str, text: str) -> None:
    """Queue ``text`` to be shown with the Streamlit element named ``level``."""
    if level not in LEVELS:
        raise ValueError(f"Unknown message level: {level}")
    messages = list(state.get(MESSAGES_KEY) or [])
    messages.append((level, text))
    state[MESSAGES_KEY] = messages


def pop_messages(state: MutableMapping) -> List[Tuple[str, str]]:
    """Return the queued messages in order and clear the queue."""
    messages = list(state.get(MESSAGES_KEY) or [])
    state[MESSAGES_KEY] = []
    return messages

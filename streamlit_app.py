"""Streamlit Web UI for the writing assistant.

Paste text, pick a tone or a target language, then rewrite, summarize or
translate it through the chat-completion endpoint.
"""

from __future__ import annotations

import asyncio
import logging
import os
from dataclasses import replace

logger = logging.getLogger(__name__)

import nest_asyncio
import streamlit as st
from dotenv import load_dotenv

load_dotenv()
nest_asyncio.apply()

from writing_assistant.config import API_KEY_ENV_VARS, load_config, resolve_api_key

# Streamlit Cloud: sync st.secrets → os.environ so the client can read them
for key in API_KEY_ENV_VARS:
    if key not in os.environ:
        try:
            os.environ[key] = st.secrets[key]
        except Exception:
            pass

from writing_assistant.clients.chat_client import ChatClient
from writing_assistant.logging.cost_calculator import build_usage_report
from writing_assistant.models.options import TONE_LABELS, TRANSLATE_LANGUAGES, Action, Tone
from writing_assistant.models.state import Failure, RequestState
from writing_assistant.pipeline.orchestrator import (
    FALLBACK_ERROR_MESSAGE,
    RequestOrchestrator,
    begin,
    complete,
)

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------

st.set_page_config(
    page_title="ChatGPT Writing Assistant",
    page_icon=":memo:",
    layout="centered",
)

config = load_config()

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _get_orchestrator() -> RequestOrchestrator:
    """One orchestrator per browser session; it owns the chat client."""
    if "orchestrator" not in st.session_state:
        api_key = resolve_api_key()
        if not api_key:
            raise RuntimeError(f"No API key configured. Set {' or '.join(API_KEY_ENV_VARS)}.")
        client = ChatClient(
            api_key,
            api_url=config.chat.api_url,
            model=config.chat.model,
            max_tokens=config.chat.max_tokens,
            system_prompt=config.chat.system_prompt,
            timeout=config.chat.timeout,
            max_retries=config.chat.max_retries,
        )
        st.session_state.orchestrator = RequestOrchestrator(client)
    return st.session_state.orchestrator


def _record_usage(orchestrator: RequestOrchestrator) -> None:
    summary = orchestrator.client.get_token_summary()
    usage = st.session_state.setdefault("usage_calls", [])
    usage.extend(summary["calls"])


try:
    orchestrator = _get_orchestrator()
except RuntimeError as e:
    logger.error("Chat client initialisation failed: %s", e)
    st.error(str(e))
    st.stop()

if "request_state" not in st.session_state:
    st.session_state.request_state = RequestState()

# ---------------------------------------------------------------------------
# Main form
# ---------------------------------------------------------------------------

st.header("ChatGPT Writing Assistant")

input_text = st.text_area(
    "Enter your text here...",
    height=220,
    placeholder="Type or paste your content",
    max_chars=config.ui.max_input_chars,
    key="input_text",
)

state: RequestState = st.session_state.request_state
if state.input_text != input_text:
    state = replace(state, input_text=input_text)
    st.session_state.request_state = state

tone_values = [t.value for t in Tone]
lang_codes = list(TRANSLATE_LANGUAGES)

col_tone, col_rewrite, col_summarize = st.columns([2, 1, 1])
with col_tone:
    tone = st.selectbox(
        "Tone",
        tone_values,
        index=tone_values.index(config.ui.default_tone),
        format_func=lambda v: TONE_LABELS[Tone(v)],
    )
with col_rewrite:
    rewrite_clicked = st.button("Rewrite", type="primary", disabled=not state.can_submit)
with col_summarize:
    summarize_clicked = st.button("Summarize", disabled=not state.can_submit)

col_lang, col_translate, _ = st.columns([2, 1, 1])
with col_lang:
    target_language = st.selectbox(
        "Language",
        lang_codes,
        index=lang_codes.index(config.ui.default_language),
        format_func=lambda code: TRANSLATE_LANGUAGES[code],
    )
with col_translate:
    translate_clicked = st.button("Translate", disabled=not state.can_submit)

action: Action | None = None
if rewrite_clicked:
    action = Action.REWRITE
elif summarize_clicked:
    action = Action.SUMMARIZE
elif translate_clicked:
    action = Action.TRANSLATE

if action is not None:
    with st.spinner("Working..."):
        try:
            state = asyncio.run(
                orchestrator.run(
                    state,
                    action,
                    tone=tone,
                    target_language=target_language,
                )
            )
        except Exception:
            logger.exception("Writing action %s failed", action.value)
            state = complete(begin(state), Failure(FALLBACK_ERROR_MESSAGE))
    st.session_state.request_state = state
    _record_usage(orchestrator)

# ---------------------------------------------------------------------------
# Results (persist in session_state across reruns)
# ---------------------------------------------------------------------------

if state.error:
    st.error(state.error)

if state.output_text:
    with st.container(border=True):
        st.subheader("Output")
        st.text(state.output_text)

# ---------------------------------------------------------------------------
# Sidebar (rendered last so usage includes this run)
# ---------------------------------------------------------------------------

with st.sidebar:
    st.title("Writing Assistant")
    st.caption(f"Model: {config.chat.model}")
    calls = st.session_state.get("usage_calls", [])
    if calls:
        report = build_usage_report(calls)
        st.caption(
            f"This session: {len(report.calls)} calls, "
            f"{report.input_tokens} in / {report.output_tokens} out tokens, "
            f"~${report.cost_usd:.4f}"
        )

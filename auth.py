# Supabase sign up / sign in / sign out, session helpers, auth form UI.
import logging

import streamlit as st

import db
import state

logger = logging.getLogger("ClearMind.Auth")

MIN_PASSWORD_LENGTH = 6


class AuthError(Exception):
    pass


# Supabase messages mapped to the copy shown on the auth card.
def friendly_auth_error(message: str, is_sign_up: bool) -> str:
    message = message or ""
    if "Invalid login credentials" in message:
        if is_sign_up:
            return "Unable to create account. Please check your email format and password."
        return "Invalid email or password. Please check your credentials."
    if "User already registered" in message:
        return "An account with this email already exists. Try signing in instead."
    if "timeout" in message.lower():
        return "Connection timeout. Please check your internet connection and try again."
    if "Email not confirmed" in message:
        return "Please check your email and click the confirmation link before signing in."
    return message or "Authentication failed. Please try again."


def _check_password(password: str) -> None:
    if len(password or "") < MIN_PASSWORD_LENGTH:
        raise ValueError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")


def sign_up(client, email: str, password: str, confirm: str, name: str) -> str:
    if password != confirm:
        raise ValueError("Passwords do not match")
    _check_password(password)
    if not (name or "").strip():
        raise ValueError("Please enter your name")
    try:
        res = client.auth.sign_up({"email": email.strip(), "password": password})
    except Exception as e:
        logger.warning(f"Sign up failed: {e}")
        raise AuthError(friendly_auth_error(str(e), is_sign_up=True)) from e
    user = getattr(res, "user", None)
    if user is None:
        raise AuthError("Unable to create account. Please check your email format and password.")
    # Nickname is cosmetic; the account exists even if this write is rejected.
    try:
        store = db.UserStore(client, user.id)
        profile = store.ensure_profile(nickname=name.strip())
        if profile.get("nickname") != name.strip():
            store.update_profile({"nickname": name.strip()})
    except Exception as e:
        logger.warning(f"Could not store nickname for new user: {e}")
    logger.info("New account created")
    return user.id


def sign_in(client, email: str, password: str) -> tuple[str, str]:
    _check_password(password)
    try:
        res = client.auth.sign_in_with_password({"email": email.strip(), "password": password})
    except Exception as e:
        logger.warning(f"Sign in failed: {e}")
        raise AuthError(friendly_auth_error(str(e), is_sign_up=False)) from e
    user = getattr(res, "user", None)
    if user is None:
        raise AuthError("Invalid email or password. Please check your credentials.")
    return user.id, getattr(user, "email", None) or email.strip()


def sign_out(client) -> None:
    try:
        client.auth.sign_out()
    except Exception as e:
        # the local session is dropped either way
        logger.warning(f"Sign out failed remotely: {e}")


# --- Session helpers (one Supabase client per browser session) ---

def get_client():
    if "supabase" not in st.session_state:
        st.session_state.supabase = db.create_client_from_settings()
    return st.session_state.supabase


def current_store() -> db.UserStore:
    return db.UserStore(get_client(), st.session_state.get("user_id"))


def is_signed_in() -> bool:
    return bool(st.session_state.get("user_id"))


def end_session() -> None:
    if "supabase" in st.session_state:
        sign_out(st.session_state.supabase)
    for key in list(st.session_state.keys()):
        del st.session_state[key]


def _dispatch(event: str, value=None) -> None:
    st.session_state.auth_form = state.reduce_auth_form(st.session_state.auth_form, event, value)


def render() -> None:
    if "auth_form" not in st.session_state:
        st.session_state.auth_form = state.AuthForm()
    form = st.session_state.auth_form

    col_in, col_up = st.columns(2)
    with col_in:
        if st.button("Sign In", key="auth_tab_in", type="primary" if form.mode == state.SIGN_IN else "secondary"):
            _dispatch("switch", state.SIGN_IN)
            st.rerun()
    with col_up:
        if st.button("Sign Up", key="auth_tab_up", type="primary" if form.mode == state.SIGN_UP else "secondary"):
            _dispatch("switch", state.SIGN_UP)
            st.rerun()

    if form.notice:
        st.success(form.notice)
    if form.error:
        st.error(form.error)

    is_sign_up = form.mode == state.SIGN_UP
    with st.form("auth"):
        name = st.text_input("Your Name", placeholder="Enter your name", key="auth_name") if is_sign_up else ""
        email = st.text_input("Email", placeholder="your@email.com", key="auth_email")
        password = st.text_input("Password", type="password", placeholder="At least 6 characters", key="auth_password")
        confirm = ""
        if is_sign_up:
            confirm = st.text_input("Confirm Password", type="password", key="auth_confirm")
        submitted = st.form_submit_button("Create Account" if is_sign_up else "Sign In")

    if not submitted:
        return
    try:
        client = get_client()
        if is_sign_up:
            sign_up(client, email, password, confirm, name)
            _dispatch("signed_up")
        else:
            user_id, user_email = sign_in(client, email, password)
            st.session_state.user_id = user_id
            st.session_state.user_email = user_email
            try:
                st.session_state.profile = current_store().ensure_profile()
            except Exception as e:
                logger.warning(f"Could not load profile: {e}")
                st.session_state.profile = None
            _dispatch("signed_in")
    except AuthError as e:
        if "already exists" in str(e):
            _dispatch("already_registered", str(e))
        else:
            _dispatch("failed", str(e))
    except Exception as e:
        _dispatch("failed", str(e))
    st.rerun()

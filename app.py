# app.py
import streamlit as st
from contextlib import contextmanager
from datetime import datetime
from typing import Optional

from schoolcup.config import COMPETITION_LABELS, COMPETITIONS, configure_collation, configure_logging
from schoolcup.controller import TeamListError, TournamentController
from schoolcup.markup import match_label_html, section_header_html, styled_table_html
from schoolcup.models import Match
from schoolcup.standings import standings_frame
from schoolcup.storage import StateStore

# =========================
# App & Global State
# =========================
st.set_page_config(page_title="School Football Cup", page_icon="⚽", layout="wide")
configure_logging()
configure_collation()

if "controller" not in st.session_state:
    st.session_state.controller = TournamentController(StateStore())
if "flash" not in st.session_state:
    st.session_state.flash = None  # (kind, message) shown once on the next run
if "confirm_reset" not in st.session_state:
    st.session_state.confirm_reset = False

ctl: TournamentController = st.session_state.controller
if "schools_text" not in st.session_state:
    st.session_state.schools_text = "\n".join(ctl.state.schools)

# =========================
# UI Helpers
# =========================
@contextmanager
def section(title: str, subtitle: Optional[str] = None):
    st.markdown(section_header_html(title, subtitle), unsafe_allow_html=True)
    try:
        yield
    finally:
        st.markdown("</div>", unsafe_allow_html=True)

def _flash(kind: str, message: str):
    st.session_state.flash = (kind, message)

def _confirmed() -> bool:
    return bool(st.session_state.confirm_reset)

def _score_keys(match: Match):
    return f"home_{match.id}", f"away_{match.id}"

def _sync_score_widgets(match: Match):
    """Put the stored score (or blanks) back into the match's inputs."""
    score = ctl.score_for(match.id)
    hk, ak = _score_keys(match)
    st.session_state[hk] = str(score.home_goals) if score else ""
    st.session_state[ak] = str(score.away_goals) if score else ""

def _drop_score_widgets():
    for k in [k for k in st.session_state if str(k).startswith(("home_", "away_"))]:
        del st.session_state[k]

def save_status_text() -> str:
    if not ctl.state.last_saved:
        return "Not saved yet"
    try:
        stamp = datetime.fromisoformat(ctl.state.last_saved)
    except ValueError:
        return "Saved"
    return f"Saved • Last saved {stamp.astimezone().strftime('%Y-%m-%d %H:%M:%S')}"

CUSTOM_CSS = """
<style>
.section h3{ margin-bottom:4px; }
.sub-strip{ color:#64748b; font-size:14px; margin-bottom:8px; }
.round-title{ font-weight:800; color:#1e3a8a; margin:14px 0 6px 0; }
.teams{ font-weight:700; padding-top:8px; }
.empty-state{ border:2px dashed #cbd5e1; border-radius:12px; padding:18px; color:#475569; text-align:center; }
.table-wrap table{ width:100% !important; border-collapse:collapse; }
</style>
"""
st.markdown(CUSTOM_CSS, unsafe_allow_html=True)

# =========================
# Callbacks
# =========================
def on_apply_schools():
    try:
        applied = ctl.apply_new_team_list(st.session_state.schools_text, _confirmed)
    except TeamListError as e:
        _flash("warning", str(e))
        return
    if not applied:
        _flash("info", "Tick the confirmation box to apply school changes and regenerate schedules.")
        return
    st.session_state.schools_text = "\n".join(ctl.state.schools)
    st.session_state.confirm_reset = False
    _drop_score_widgets()
    _flash("success", "Schools updated. Schedules regenerated and scores reset.")

def on_regenerate():
    if not ctl.regenerate(_confirmed):
        _flash("info", "Tick the confirmation box to regenerate the schedule.")
        return
    st.session_state.confirm_reset = False
    _drop_score_widgets()
    _flash("success", "Schedules regenerated and scores reset.")

def on_competition_change():
    ctl.set_active_competition(st.session_state.competition_pick)

def on_score_change(match: Match):
    hk, ak = _score_keys(match)
    parsed = ctl.record_or_clear_score(match.id, st.session_state[hk], st.session_state[ak])
    if not parsed.valid:
        _flash("warning", parsed.message)
        _sync_score_widgets(match)

def on_clear_score(match: Match):
    ctl.clear_score(match.id)
    _sync_score_widgets(match)

# =========================
# Pages
# =========================
def render_sidebar():
    with st.sidebar:
        st.markdown("### 🏫 Schools")
        st.text_area("One school per line", key="schools_text", height=260)
        st.checkbox("I understand this resets all scores for boys and girls", key="confirm_reset")
        st.button("✅ Apply school changes", on_click=on_apply_schools, use_container_width=True)
        st.button("🔁 Regenerate schedule", on_click=on_regenerate, use_container_width=True)
        st.caption(save_status_text())

def render_schedule(label: str):
    cs = ctl.state.competition()
    with section(f"📅 {label} Schedule"):
        if len(ctl.state.schools) < 2:
            st.markdown("<div class='empty-state'>Add at least two schools to generate a schedule.</div>",
                        unsafe_allow_html=True)
            return
        played, total = ctl.progress()
        st.progress(played / total if total else 0.0, text=f"Played: {played}/{total} matches")

        for rd in cs.schedule:
            st.markdown(f"<div class='round-title'>Round {rd.round}</div>", unsafe_allow_html=True)
            for m in rd.matches:
                hk, ak = _score_keys(m)
                if hk not in st.session_state or ak not in st.session_state:
                    _sync_score_widgets(m)
                c1, c2, c3, c4 = st.columns([5, 1, 1, 1])
                with c1: st.markdown(match_label_html(m), unsafe_allow_html=True)
                with c2: st.text_input("Home goals", key=hk, label_visibility="collapsed",
                                       placeholder="H", on_change=on_score_change, args=(m,))
                with c3: st.text_input("Away goals", key=ak, label_visibility="collapsed",
                                       placeholder="A", on_change=on_score_change, args=(m,))
                with c4: st.button("Clear", key=f"clear_{m.id}", on_click=on_clear_score, args=(m,))

def render_standings(label: str):
    with section(f"🏆 {label} Standings", subtitle="Points › goal difference › goals for › name"):
        if len(ctl.state.schools) < 2:
            st.markdown("<div class='empty-state'>No standings yet. Add at least two schools.</div>",
                        unsafe_allow_html=True)
            return
        df = standings_frame(ctl.compute_standings())
        st.markdown(f"<div class='table-wrap'>{styled_table_html(df)}</div>", unsafe_allow_html=True)

        csv_utf8 = df.to_csv(index=False).encode("utf-8-sig")
        st.download_button("⬇️ Standings CSV", data=csv_utf8,
                           file_name=f"standings_{ctl.state.active_competition}.csv", mime="text/csv")

# =========================
# Router
# =========================
st.title("⚽ School Football Cup")

flash = st.session_state.flash
if flash:
    kind, message = flash
    getattr(st, kind)(message)
    st.session_state.flash = None

render_sidebar()

st.session_state.competition_pick = ctl.state.active_competition
st.radio("Competition", options=list(COMPETITIONS), key="competition_pick", horizontal=True,
         format_func=lambda c: COMPETITION_LABELS[c], on_change=on_competition_change,
         label_visibility="collapsed")

label = COMPETITION_LABELS[ctl.state.active_competition]
left, right = st.columns([3, 2])
with left:
    render_schedule(label)
with right:
    render_standings(label)

"""
MedSim — Web UI (Streamlit)

Інтерфейс симуляції клінічного випадку.

Запуск:
    streamlit run med_sim/web_ui/app.py

    або:

    python scripts/run_web.py

Стан сторінки (st.session_state):
    controller   — SessionController (busy + остання помилка)
    case_session — поточна Session або None
"""

import logging

import streamlit as st

from med_sim.client import Action, SessionController
from med_sim.config import ClientConfig
from med_sim.errors import MedSimError, RequestFailed, ValidationError
from med_sim.presentation import (
    TEST_TYPES,
    build_summary,
    format_cost,
    render_transcript,
    scoring_rules_lines,
)
from med_sim.web_ui.components import draw_entry, draw_summary, tier_label

logger = logging.getLogger(__name__)


# =============================================================================
# Стан
# =============================================================================

def get_controller() -> SessionController:
    if "controller" not in st.session_state:
        st.session_state.controller = SessionController(config=ClientConfig.from_env())
    return st.session_state.controller


@st.cache_data(ttl=300, show_spinner=False)
def fetch_scoring_rules():
    """Кешуються лише успішні відповіді: виняток st.cache_data не зберігає"""
    return get_controller().load_scoring_rules()


def load_scoring_rules():
    """Правила балів (помилка не блокує сторінку)"""
    try:
        return fetch_scoring_rules()
    except RequestFailed as e:
        logger.warning(f"Error loading scoring rules: {e}")
        return None


def run_action(action, *args) -> bool:
    """
    Виконати операцію контролера.

    При успіху нова сесія замінює стару; при помилці стара лишається,
    а користувач бачить повідомлення.
    """
    try:
        st.session_state.case_session = action(*args)
        return True
    except ValidationError as e:
        st.warning(str(e))
    except MedSimError as e:
        st.error(f"{e}. Please try again.")
    return False


# =============================================================================
# Сторінки
# =============================================================================

def landing_page(controller: SessionController) -> None:
    """Старт нового випадку"""
    st.title("🧠 Medical Simulation Platform")
    st.markdown(
        "Enhance your diagnostic skills through AI-powered patient scenarios. "
        "Practice clinical reasoning, order tests, and receive real-time "
        "feedback with point scoring."
    )

    with st.container(border=True):
        st.subheader("🩺 Start New Case")
        specialty = st.text_area(
            "Medical Specialty",
            placeholder="e.g., Hello, I want to improve myself in orthopedics...",
            key="specialty_input",
        )
        if st.button("➕ Generate Case", type="primary", use_container_width=True,
                     disabled=controller.busy):
            with st.spinner("Creating Case..."):
                if run_action(controller.create_session, specialty):
                    st.rerun()

    cols = st.columns(4)
    features = [
        ("📄", "AI-Generated Cases", "Realistic patient scenarios across all medical specialties"),
        ("❤️", "Interactive Diagnosis", "Chat with virtual attending physicians for guidance"),
        ("💲", "Cost-Aware Practice", "Learn healthcare economics while making clinical decisions"),
        ("🏆", "Point Scoring System", "Earn points for correct decisions and learn from mistakes"),
    ]
    for col, (icon, title, text) in zip(cols, features):
        with col:
            st.markdown(f"### {icon}\n**{title}**")
            st.caption(text)

    rules = load_scoring_rules()
    if rules:
        st.subheader("🎯 Scoring System")
        earn, lose = scoring_rules_lines(rules)
        col_earn, col_lose = st.columns(2)
        with col_earn:
            st.markdown(":green[**Earn Points For:**]")
            st.markdown("\n".join(f"- {line}" for line in earn))
        with col_lose:
            st.markdown(":red[**Lose Points For:**]")
            st.markdown("\n".join(f"- {line}" for line in lose))


def case_page(controller: SessionController) -> None:
    """Активна або завершена сесія"""
    session = st.session_state.case_session
    permitted = controller.permitted_actions(session)

    # ========== ЗАГОЛОВОК ==========
    col_title, col_points, col_cost, col_new = st.columns([4, 2, 2, 1])
    with col_title:
        st.title("🧠 Medical Simulation")
        st.caption(session.specialty)
    with col_points:
        st.markdown(f"**Points:** {tier_label(session.total_points)}")
    with col_cost:
        st.markdown(f"**Total Cost:** {format_cost(session.total_cost)}".replace("$", "\\$"))
    with col_new:
        if st.button("New Case"):
            # Сесія відкидається лише на клієнті
            st.session_state.case_session = None
            controller.clear_error()
            st.rerun()

    col_main, col_side = st.columns([2, 1])

    # ========== ВИПАДОК + ДІАЛОГ ==========
    with col_main:
        with st.container(border=True):
            st.subheader("📄 Patient Case")
            st.markdown(session.scenario)

        st.subheader("Clinical Discussion")
        st.caption("Chat with your attending physician • Points are awarded for helpful questions")

        with st.container(height=480):
            for entry in render_transcript(session):
                draw_entry(entry)

        if Action.CHAT in permitted:
            message = st.chat_input("Ask questions, request tests, or discuss your findings...")
            if message:
                if run_action(controller.send_chat_message, session, message):
                    st.rerun()

    # ========== ДІЇ ==========
    with col_side:
        if Action.ORDER_TEST in permitted:
            with st.container(border=True):
                st.subheader("Order Tests")
                st.caption("Choose appropriate tests • Earn points for correct choices")
                with st.form("order_test", clear_on_submit=True):
                    test_type = st.selectbox(
                        "Test Type",
                        options=[value for value, _ in TEST_TYPES],
                        format_func=dict(TEST_TYPES).get,
                        index=None,
                        placeholder="Select test type",
                    )
                    body_part = st.text_input("Body Part/Area", placeholder="e.g., chest, knee, abdomen")
                    if st.form_submit_button("Order Test", use_container_width=True):
                        if run_action(controller.request_test, session, test_type or "", body_part):
                            st.rerun()

        if Action.SUBMIT_DIAGNOSIS in permitted:
            with st.container(border=True):
                st.subheader("Submit Diagnosis")
                st.caption("Provide your final diagnosis • Earn big points for accuracy")
                with st.form("diagnosis", clear_on_submit=True):
                    diagnosis = st.text_area(
                        "Diagnosis",
                        placeholder="Enter your final diagnosis and reasoning...",
                        label_visibility="collapsed",
                    )
                    if st.form_submit_button("Submit Diagnosis", type="primary",
                                             use_container_width=True):
                        if run_action(controller.submit_diagnosis, session, diagnosis):
                            st.rerun()

        with st.container(border=True):
            draw_summary(build_summary(session))

        if session.is_completed:
            st.success("✅ Case completed")


def main():
    st.set_page_config(
        page_title="MedSim — Medical Simulation",
        page_icon="🧠",
        layout="wide",
    )

    if "case_session" not in st.session_state:
        st.session_state.case_session = None

    controller = get_controller()

    if st.session_state.case_session is None:
        landing_page(controller)
    else:
        case_page(controller)

    st.divider()
    st.caption("⚠️ Educational simulation. Not a substitute for clinical judgement.")


if __name__ == "__main__":
    main()

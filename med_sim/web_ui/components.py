"""
MedSim — Компоненти Streamlit

Малювання RenderedEntry та підсумків сесії.
"""

import streamlit as st

from med_sim.presentation import (
    CaseSummary,
    PointsBadge,
    PointsTier,
    RenderedEntry,
)
from med_sim.schemas import EntryKind


def badge(text: str, color: str) -> str:
    """Markdown бейдж Streamlit ($ екранується, інакше це LaTeX)"""
    text = text.replace("$", "\\$")
    return f":{color}-background[{text}]"


def points_badge(value: PointsBadge) -> str:
    return badge(value.label, value.style.color)


def tier_label(points: int) -> str:
    tier = PointsTier.from_points(points)
    return f":{tier.color}[{tier.icon} {points}]"


def draw_entry(entry: RenderedEntry) -> None:
    """Намалювати один запис транскрипту"""
    if entry.kind == EntryKind.USER_MESSAGE:
        with st.chat_message("user"):
            st.text(entry.body)
            footer = entry.timestamp_label
            if entry.points_badge:
                footer += "  " + points_badge(entry.points_badge)
            st.caption(footer)

    elif entry.kind == EntryKind.DOCTOR_REPLY:
        with st.chat_message("assistant", avatar="🩺"):
            st.markdown(f"**{entry.heading}**")
            st.markdown(entry.body)
            st.caption(entry.timestamp_label)

    elif entry.kind == EntryKind.TEST_RESULT:
        with st.container(border=True):
            header = [f"#### 🧪 {entry.heading}", badge(entry.cost_label, "green")]
            if entry.points_badge:
                header.append(points_badge(entry.points_badge))
            st.markdown("  ".join(header))

            if entry.indicator:
                st.markdown(badge(entry.indicator.label, entry.indicator.style.color))
                if entry.note:
                    st.caption(entry.note)

            st.markdown(entry.body)
            if entry.image_url:
                st.image(entry.image_url, caption=entry.heading)
            st.caption(entry.timestamp_label)

    elif entry.kind == EntryKind.DIAGNOSIS_SUBMISSION:
        with st.container(border=True):
            header = [f"#### 📋 {entry.heading}"]
            if entry.indicator:
                header.append(badge(entry.indicator.label, entry.indicator.style.color))
            if entry.points_badge:
                header.append(points_badge(entry.points_badge))
            st.markdown("  ".join(header))

            st.markdown("**Your Diagnosis:**")
            st.text(entry.submitted_text)
            st.markdown("**Evaluation:**")
            st.markdown(entry.body)
            st.caption(entry.timestamp_label)


def draw_summary(summary: CaseSummary) -> None:
    """Бокова панель "Case Summary" """
    st.subheader("Case Summary")
    st.markdown(f"**Total Points:** {tier_label(summary.total_points)}")
    st.markdown(f"**Diagnosis Attempts:** {summary.diagnosis_attempts}")
    st.markdown(f"**Total Cost:** {badge(summary.cost_label, 'green')}")

    color = "green" if summary.status_label == "Completed" else "blue"
    st.markdown(f"**Status:** {badge(summary.status_label, color)}")

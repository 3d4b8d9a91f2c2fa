# Help tab: crisis lines, support links, self-care ideas.
import streamlit as st

import content


def render():
    st.markdown("### Support & Resources")
    st.caption("You're not alone. Help is always available.")

    st.markdown("#### 🚨 Crisis Support (Available 24/7)")
    st.error("If you're having thoughts of self-harm or suicide, please reach out immediately:")
    for r in content.CRISIS_RESOURCES:
        with st.container(border=True):
            st.markdown(f"{r['icon']} **{r['name']}**")
            st.markdown(f"**{r['contact']}**")
            st.caption(r["description"])

    st.markdown("#### Mental Health Support")
    for r in content.SUPPORT_RESOURCES:
        st.markdown(f"- [{r['name']}]({r['url']}): {r['description']}")

    st.markdown("#### 💚 Self-Care Ideas")
    st.caption("When you're feeling overwhelmed, try one of these activities:")
    cols = st.columns(2)
    for i, activity in enumerate(content.SELF_CARE_ACTIVITIES):
        cols[i % 2].markdown(f"- {activity}")

    st.markdown("#### 🌟 Remember")
    for line in content.REMINDERS:
        st.markdown(f"- {line}")

    st.caption(content.PRIVACY_NOTICE)

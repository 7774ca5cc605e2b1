# landing_view.py
import streamlit as st

from ui.components import card, section

SERVICES = [
    ("💻 Web Applications", "Custom web applications tailored to your business needs. Full-stack solutions with modern frameworks."),
    ("🌐 Websites", "Beautiful, responsive websites that drive results. SEO-optimized and mobile-first approach."),
    ("📱 Mobile Apps", "Native and cross-platform mobile applications. iOS and Android development expertise."),
    ("⚡ Fast Delivery", "Quick turnaround without compromising quality. Agile development methodology."),
]


def render_page(open_invoice_tool) -> None:
    """Marketing landing page. `open_invoice_tool` switches the router to the invoice tool."""
    st.markdown(
        """
        <div class="hero">
          <h1>Transform Your Ideas Into Digital Reality</h1>
          <p>We craft exceptional software solutions that help businesses and
          individuals thrive in the digital age.</p>
        </div>
        """,
        unsafe_allow_html=True,
    )

    _, mid, _ = st.columns([1, 1, 1])
    mid.button("🧾 Try the Invoice Generator", type="primary", on_click=open_invoice_tool, use_container_width=True)

    st.write("")
    section("Our Services")
    cols = st.columns(len(SERVICES), gap="small")
    for col, (title, body) in zip(cols, SERVICES):
        with col:
            card(title, body)

    st.write("")
    st.caption("© 2024 CodeDreamers. All rights reserved.")

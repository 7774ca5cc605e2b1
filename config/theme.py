# config/theme.py

TOKENS = {
    "text": "#1f2937",
    "muted": "#6b7280",
    "border": "#e5e7eb",
    "soft": "#f3f4f6",
    "danger": "#ef4444",
    "primary": "#3b82f6",
    "accent": "#4f46e5",
}

# Colours of the invoice preview. Shared by the HTML preview and the rasteriser
# so the exported PDF looks like what the user saw.
PREVIEW_COLORS = {
    "background": "#eef2ff",
    "title": "#2563eb",
    "heading": "#374151",
    "text": "#1f2937",
    "muted": "#4b5563",
    "rule_strong": "#d1d5db",
    "rule": "#e5e7eb",
    "total_bg": "#3b82f6",
    "total_text": "#ffffff",
    "footer": "#6b7280",
}

CSS = f"""
<style>
  :root {{
    --text: {TOKENS["text"]};
    --muted: {TOKENS["muted"]};
    --border: {TOKENS["border"]};
    --soft: {TOKENS["soft"]};
    --danger: {TOKENS["danger"]};
    --primary: {TOKENS["primary"]};
    --accent: {TOKENS["accent"]};
  }}

  /* --- GLOBAL LAYOUT --- */
  .block-container {{
    max-width: 1100px !important;
    padding-top: 2rem !important;
    padding-bottom: 3rem !important;
  }}

  .page-title {{
    font-size: 1.75rem;
    font-weight: 800;
    color: var(--text);
    letter-spacing: -0.02em;
    margin: 0;
    line-height: 1.15;
  }}

  .page-subtitle {{
    color: var(--muted);
    margin-top: .35rem;
    margin-bottom: 1.25rem;
    font-size: .95rem;
  }}

  .section-title {{
    font-size: 1.05rem;
    font-weight: 800;
    color: var(--text);
    letter-spacing: -0.02em;
    margin: 0 0 .75rem 0;
  }}

  /* --- INPUT FIELDS --- */
  div[data-baseweb="input"] {{
    background-color: #ffffff !important;
    border: 1px solid var(--border) !important;
    border-radius: 8px !important;
  }}

  div[data-baseweb="input"]:focus-within {{
    border-color: var(--accent) !important;
    box-shadow: 0 0 0 1px rgba(79,70,229,0.18) !important;
  }}

  /* --- LANDING --- */
  .hero {{
    padding: 3rem 2rem;
    border-radius: 16px;
    background: linear-gradient(135deg, #eef2ff 0%, #e0e7ff 100%);
    text-align: center;
    margin-bottom: 1.5rem;
  }}
  .hero h1 {{ font-size: 2.6rem; font-weight: 800; color: var(--text); margin: 0; }}
  .hero p {{ color: var(--muted); font-size: 1.05rem; margin-top: .75rem; }}
  .service-card {{
    border: 1px solid var(--border);
    border-radius: 14px;
    padding: 16px;
    background: #fff;
    height: 100%;
  }}
  .service-title {{ font-weight: 800; color: var(--text); margin-bottom: 6px; }}
  .service-body {{ color: var(--muted); font-size: .9rem; line-height: 1.45; }}

  /* --- INVOICE PREVIEW --- */
  .inv-preview {{
    background: linear-gradient(135deg, #eff6ff 0%, #e0e7ff 100%);
    padding: 2rem;
    border-radius: 12px;
    box-shadow: 0 10px 20px rgba(0,0,0,.06);
  }}
  .inv-top {{ display:flex; justify-content:space-between; align-items:flex-start; margin-bottom:2rem; }}
  .inv-title {{ font-size:2.25rem; font-weight:800; color:#2563eb; margin:0 0 .5rem 0; }}
  .inv-right {{ text-align:right; }}
  .inv-company {{ font-size:1.2rem; font-weight:700; color:var(--text); }}
  .inv-muted {{ color:#4b5563; white-space:pre-line; }}
  .inv-grid {{ display:grid; grid-template-columns:1fr 1fr; gap:2rem; margin-bottom:2rem; }}
  .inv-h2 {{ font-size:1.05rem; font-weight:700; color:#374151; margin-bottom:.5rem; }}
  .inv-client {{ font-weight:600; color:var(--text); }}
  .inv-table {{ width:100%; border-collapse:collapse; margin-bottom:2rem; }}
  .inv-table th {{ color:#4b5563; padding:.5rem 0; border-bottom:2px solid #d1d5db; text-align:right; }}
  .inv-table th:first-child, .inv-table td:first-child {{ text-align:left; }}
  .inv-table td {{ color:var(--text); padding:.5rem 0; border-bottom:1px solid #e5e7eb; text-align:right; }}
  .inv-total-wrap {{ display:flex; justify-content:flex-end; margin-bottom:2rem; }}
  .inv-total {{ background:#3b82f6; color:#fff; padding:1rem 1.25rem; border-radius:10px; min-width:220px; }}
  .inv-total-row {{ display:flex; justify-content:space-between; align-items:center; gap:1rem; }}
  .inv-total-val {{ font-size:1.5rem; font-weight:800; }}
  .inv-currency {{ font-size:.8rem; margin-top:.35rem; }}
  .inv-footer {{ text-align:center; color:#6b7280; font-size:.85rem; }}

  /* --- HIDE STREAMLIT BRANDING --- */
  #MainMenu {{visibility: hidden;}}
  footer {{visibility: hidden;}}
  [data-testid="stDecoration"] {{visibility: hidden !important;}}
</style>
"""

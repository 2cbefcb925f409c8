import streamlit as st

# Page config
st.set_page_config(
    page_title="Sanskrit Word-by-Word Translator",
    page_icon="🕉️",
    layout="wide",
    initial_sidebar_state="expanded"
)

st.title("🕉️ Sanskrit Word-by-Word Translator")
st.markdown("### Contextual analysis from an LLM, lexical data from the dictionary")

st.markdown("---")

st.markdown("""
Paste a short Sanskrit passage in **Devanagari** or **IAST** and get a word-by-word breakdown.

#### 🚀 Modules

**1. Translate**
* Script detection and normalization to IAST (mixed-script input is rejected).
* Word / compound-member analysis by the local model (Qwen-2.5 GGUF): grammatical form, meanings, contextual notes, alternative translations.
* Dictionary definitions for every word the model identified (Monier-Williams, exact match).
* If the dictionary is unavailable the result is still shown, with a warning (LLM-only mode).

**2. Dictionary**
* Browse the ingested lexicon.
""")

st.markdown("---")
st.caption("Select a module from the sidebar to begin.")

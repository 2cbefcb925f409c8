import json
import sys
from pathlib import Path

import streamlit as st

# Path setup
PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.append(str(PROJECT_ROOT))

from sanskrit_agent.agent.orchestrator import TranslationOrchestrator
from sanskrit_agent.config import setup_logging
from sanskrit_agent.errors import InputError, ModelServiceError
from sanskrit_agent.llm.qwen_local import QwenLocalLLM
from sanskrit_agent.tools.transliterate import iast_to_devanagari

setup_logging()


@st.cache_resource
def load_engine():
    llm = QwenLocalLLM()
    return TranslationOrchestrator.from_llm(llm)


agent = None
try:
    agent = load_engine()
    st.sidebar.success("✅ Engine Ready")
except ModelServiceError as e:
    st.sidebar.error(f"❌ Engine Error: {e}")

st.title("🕉️ Word-by-Word Translator")

with st.sidebar:
    st.header("⚙️ Settings")
    use_dict = st.toggle("📖 Dictionary definitions", value=True, help="Look up every analysed word in the lexicon.")
    show_devanagari = st.toggle("Show Devanagari", value=False)

src_text = st.text_area("Enter Sanskrit Text (Devanagari or IAST):", height=150,
                        placeholder="e.g. yogaś citta-vṛtti-nirodhaḥ")

if st.button("🚀 Translate", type="primary"):
    if not src_text.strip():
        st.warning("Please enter text.")
    elif agent is None:
        st.error("The translation engine is not available.")
    else:
        result = None
        with st.status("Analysing...", expanded=False) as status:
            try:
                result = agent.translate(src_text, use_dict=use_dict)
                status.update(label="Translation Complete!", state="complete")
            except InputError as e:
                status.update(label="Input rejected", state="error")
                st.error(str(e))
            except ModelServiceError as e:
                status.update(label="Model error", state="error")
                st.error(str(e))

        if result is not None:
            for warning in result.warnings or []:
                st.warning(warning)

            st.subheader("Text")
            for line in result.iast_text:
                st.markdown(f"**{line}**")
                if show_devanagari:
                    st.caption(iast_to_devanagari(line))

            st.subheader("Words")
            for entry in result.words:
                header = entry.word
                if entry.grammatical_form:
                    header += f" · {entry.grammatical_form}"
                with st.expander(header, expanded=True):
                    st.markdown("**Meanings:** " + ", ".join(entry.meanings))
                    if entry.contextual_note:
                        st.info(entry.contextual_note)
                    if entry.dictionary_definitions is not None:
                        if entry.dictionary_definitions:
                            for d in entry.dictionary_definitions:
                                st.markdown(f"*{d.source}*: {d.definition}")
                        else:
                            st.caption("No dictionary entry found.")

            if result.alternative_translations:
                st.subheader("Translations")
                for t in result.alternative_translations:
                    st.success(t)

            with st.expander("🧐 JSON"):
                st.code(json.dumps(result.to_dict(), ensure_ascii=False, indent=2), language="json")

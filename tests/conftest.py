"""Shared fixtures for the translation pipeline tests."""
import pytest

from sanskrit_agent.agent.state import DictionaryDefinition, WordAnalysis, WordEntry


@pytest.fixture
def yoga_analysis():
    return WordAnalysis(
        words=[
            WordEntry(word="yogaḥ", grammatical_form="noun, masculine, singular",
                      meanings=["yoga", "union"], contextual_note="The subject: what yoga is."),
            WordEntry(word="citta", grammatical_form="noun, neuter, compound member",
                      meanings=["mind", "consciousness"], contextual_note="Combines with vṛtti."),
            WordEntry(word="vṛtti", grammatical_form="noun, feminine, compound member",
                      meanings=["fluctuation", "activity"], contextual_note="Together with citta."),
            WordEntry(word="nirodhaḥ", grammatical_form="noun, masculine, singular",
                      meanings=["restraint", "cessation"], contextual_note="What yoga is defined as."),
        ],
        alternative_translations=["Yoga is the stilling of the fluctuations of the mind."],
    )


@pytest.fixture
def yoga_definitions():
    return {
        "yogaḥ": [DictionaryDefinition("Monier-Williams", "union, joining, meditation")],
        "citta": [DictionaryDefinition("Monier-Williams", "thought, mind, heart")],
        "vṛtti": [DictionaryDefinition("Monier-Williams", "turning, activity, function")],
        "nirodhaḥ": [DictionaryDefinition("Monier-Williams", "restraint, suppression")],
    }

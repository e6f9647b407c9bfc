"""
Shared fixtures for Clausewitz script parser tests.

Provides sample script/localisation texts in canonical layout and parsed
documents built from them.
"""
import sys
import os
import pytest

# Ensure the project root is on the path when running without installing
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

SAMPLES_DIR = os.path.join(os.path.dirname(__file__), 'samples')


# ── Sample script texts (canonical tab layout) ─────────────────────────

SAMPLE_IDEAS = """\
ideas = {
\tcountry = {
\t\t# Economy
\t\tTST_idea = {
\t\t\tpicture = generic_industry
\t\t\tallowed = {
\t\t\t\talways = no
\t\t\t}
\t\t\tmodifier = {
\t\t\t\tconsumer_goods_factor = -0.1
\t\t\t\tproduction_speed_buildings_factor >= 0.25
\t\t\t}
\t\t\tcancel_if_invalid = yes
\t\t\tname = "Test \\"Idea\\""
\t\t\tstart = 1936.1.1
\t\t\tremoval_date = "1936.1.1.12"
\t\t}
\t}
}
"""

SAMPLE_CHARACTERS = """\
characters = {
\tTST_general = {
\t\tname = "Test General"
\t\tportraits = {
\t\t\tarmy = {
\t\t\t\tlarge = "gfx/leaders/TST/general.dds"
\t\t\t}
\t\t}
\t\tfield_marshal = {
\t\t\ttraits = {
\t\t\t\toffensive_doctrine logistics_wizard
\t\t\t}
\t\t\tskill = 4
\t\t\tattack_skill = 3
\t\t}
\t}
}
"""

SAMPLE_HISTORY = """\
capital = 64
# Starting setup
1936.1.1 = {
\tset_politics = {
\t\truling_party = neutrality
\t\tlast_election = 1933.3.5
\t}
\thas_war = no
}
1939.9.1 = {
\tadd_manpower = 1000
}
provinces = {
\t1 2 3
\t# coastal
\t4 5
}
"""

SAMPLE_LOCALISATION = """\
\ufeffl_english:
 TST_idea:0 "Test Idea"
 # Tooltips
 TST_idea_desc:1 "Line one\\nLine two"
 TST_name: "Testland"
"""


@pytest.fixture
def ideas_text():
    """Canonical national idea definition"""
    return SAMPLE_IDEAS


@pytest.fixture
def characters_text():
    """Canonical character definition with an inline trait list"""
    return SAMPLE_CHARACTERS


@pytest.fixture
def history_text():
    """Canonical country history with date keys and a commented array"""
    return SAMPLE_HISTORY


@pytest.fixture
def localisation_text():
    """Canonical localisation file, BOM included"""
    return SAMPLE_LOCALISATION


@pytest.fixture
def parsed_ideas(ideas_text):
    from clausewitz_script import parse
    return parse(ideas_text)


@pytest.fixture
def parsed_history(history_text):
    from clausewitz_script import parse
    return parse(history_text)


@pytest.fixture
def samples_dir():
    return SAMPLES_DIR

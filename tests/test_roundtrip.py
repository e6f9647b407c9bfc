"""
Round-trip tests for the parser/serializer pair.

Canonical text must come back byte for byte; any other valid text must reach
a fixed point after one pass:

    serialize(parse(serialize(parse(text)))) == serialize(parse(text))

Sample files live in tests/samples/. A ``<name>.expected`` file next to a
sample holds its canonical form; samples without one are already canonical.
The same work run on a thread pool must give the serial results.
"""
import glob
import os
from concurrent.futures import ThreadPoolExecutor

import pytest

from clausewitz_script import (
    SPACE_CONVENTION,
    parse,
    parse_file,
    parse_localisation,
    serialize,
    serialize_localisation,
)

from conftest import SAMPLES_DIR


# ══════════════════════════════════════════════════════════════════════════
# Helpers
# ══════════════════════════════════════════════════════════════════════════

def _get_sample_files(pattern):
    """Discover sample files and return (path, basename) tuples."""
    files = sorted(glob.glob(os.path.join(SAMPLES_DIR, pattern)))
    return [(f, os.path.basename(f)) for f in files]


def _expected_text(path):
    """Canonical form of a sample: its .expected file, or the sample itself."""
    expected_path = os.path.splitext(path)[0] + '.expected'
    if not os.path.exists(expected_path):
        expected_path = path
    with open(expected_path, 'r', encoding='utf-8-sig') as f:
        return f.read()


def _reformat(text, convention=None):
    if convention is None:
        return serialize(parse(text))
    return serialize(parse(text, convention.parser), convention.formatter)


_SCRIPT_SAMPLES = _get_sample_files('*.txt')
_LOCALISATION_SAMPLES = _get_sample_files('*.yml')


# ══════════════════════════════════════════════════════════════════════════
# Inline canonical texts
# ══════════════════════════════════════════════════════════════════════════

class TestCanonicalTexts:

    def test_ideas(self, ideas_text):
        assert _reformat(ideas_text) == ideas_text

    def test_characters(self, characters_text):
        assert _reformat(characters_text) == characters_text

    def test_history(self, history_text):
        assert _reformat(history_text) == history_text

    def test_document_survives_reparse(self, parsed_ideas):
        assert parse(serialize(parsed_ideas)) == parsed_ideas

    def test_localisation(self, localisation_text):
        assert serialize_localisation(parse_localisation(localisation_text)) == localisation_text


class TestIdempotence:

    @pytest.mark.parametrize("text", [
        "a={b=c d=e}",
        "a = { 1 2 3 } b = { c d }",
        "x = { 1 # one\n 2 }",
        'n = 1.50 s = "q\\"uote" d = "1936.01.01"',
        "1939.9.1.12 = { war = yes }",
        "{ { a = b } { 1 } }",
        "v = { " + " ".join(str(n) for n in range(200)) + " }",
        "a = b\r\nc = { d = e }\r\n",
    ])
    def test_fixed_point(self, text):
        once = _reformat(text)
        assert _reformat(once) == once

    def test_space_convention_fixed_point(self, history_text):
        once = _reformat(history_text, SPACE_CONVENTION)
        assert _reformat(once, SPACE_CONVENTION) == once
        assert "\n    # coastal\n" in once


# ══════════════════════════════════════════════════════════════════════════
# Sample files
# ══════════════════════════════════════════════════════════════════════════

class TestSampleFiles:

    def test_samples_present(self):
        assert _SCRIPT_SAMPLES, f"No script samples found in {SAMPLES_DIR}"
        assert _LOCALISATION_SAMPLES, f"No localisation samples found in {SAMPLES_DIR}"

    @pytest.mark.parametrize("path, name", _SCRIPT_SAMPLES, ids=[n for _, n in _SCRIPT_SAMPLES])
    def test_script_sample_reaches_canonical_form(self, path, name):
        assert serialize(parse_file(path)) == _expected_text(path), name

    @pytest.mark.parametrize("path, name", _SCRIPT_SAMPLES, ids=[n for _, n in _SCRIPT_SAMPLES])
    def test_script_sample_is_stable(self, path, name):
        first_export = serialize(parse_file(path))
        second_export = serialize(parse(first_export))
        assert first_export == second_export, name

    @pytest.mark.parametrize("path, name", _LOCALISATION_SAMPLES,
                             ids=[n for _, n in _LOCALISATION_SAMPLES])
    def test_localisation_sample(self, path, name):
        with open(path, 'r', encoding='utf-8') as f:
            original = f.read()
        assert serialize_localisation(parse_localisation(original)) == original, name


# ══════════════════════════════════════════════════════════════════════════
# Concurrent use
# ══════════════════════════════════════════════════════════════════════════

def _script_texts(ideas_text, characters_text, history_text):
    texts = [ideas_text, characters_text, history_text]
    for path, _ in _SCRIPT_SAMPLES:
        with open(path, 'r', encoding='utf-8-sig') as f:
            texts.append(f.read())
    return texts


class TestConcurrency:

    def test_threads_match_serial_runs(self, ideas_text, characters_text, history_text):
        texts = _script_texts(ideas_text, characters_text, history_text) * 8
        serial = [_reformat(text) for text in texts]

        with ThreadPoolExecutor(max_workers=8) as pool:
            threaded = list(pool.map(_reformat, texts))

        assert threaded == serial

    def test_mixed_conventions_in_parallel(self, ideas_text, characters_text, history_text):
        jobs = [(text, convention)
                for text in _script_texts(ideas_text, characters_text, history_text)
                for convention in (None, SPACE_CONVENTION)] * 4
        serial = [_reformat(text, convention) for text, convention in jobs]

        with ThreadPoolExecutor(max_workers=8) as pool:
            futures = [pool.submit(_reformat, text, convention) for text, convention in jobs]
            threaded = [future.result() for future in futures]

        assert threaded == serial

    def test_documents_match_serial_parse(self, ideas_text, characters_text, history_text):
        texts = _script_texts(ideas_text, characters_text, history_text) * 4
        serial = [parse(text) for text in texts]

        with ThreadPoolExecutor(max_workers=8) as pool:
            threaded = list(pool.map(parse, texts))

        assert threaded == serial

    def test_localisation_in_parallel(self, localisation_text):
        texts = [localisation_text]
        for path, _ in _LOCALISATION_SAMPLES:
            with open(path, 'r', encoding='utf-8') as f:
                texts.append(f.read())
        texts *= 8

        def reformat(text):
            return serialize_localisation(parse_localisation(text))

        serial = [reformat(text) for text in texts]
        with ThreadPoolExecutor(max_workers=8) as pool:
            threaded = list(pool.map(reformat, texts))

        assert threaded == serial

import math

from services.text_metrics import TextMetrics, extract_metrics, split_sentences

from samples import CASUAL_TEXT, FORMAL_TEXT


def test_casual_text_metrics():
    m = extract_metrics(CASUAL_TEXT)
    assert m.sentence_count == 3
    assert m.word_count == 31
    assert math.isclose(m.lexical_diversity, 27 / 31)
    assert math.isclose(m.sentence_length_variation, math.sqrt(14 / 3))
    assert math.isclose(m.contraction_rate, 4 / 3)
    assert math.isclose(m.filler_rate, 2.0)
    assert m.passive_rate == 0
    assert m.starter_diversity == 1.0


def test_formal_text_is_repetitive():
    m = extract_metrics(FORMAL_TEXT)
    assert m.sentence_count == 24
    assert m.word_count == 120
    assert math.isclose(m.lexical_diversity, 6 / 120)
    assert m.sentence_length_variation == 0
    assert m.contraction_rate == 0
    assert math.isclose(m.starter_diversity, 1 / 24)


def test_empty_text_degenerates_to_zero():
    m = extract_metrics("")
    assert m == TextMetrics(0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0, 0)


def test_punctuation_only_text_has_no_sentences():
    m = extract_metrics("...!!! ???")
    assert m.sentence_count == 0
    assert m.word_count == 0
    assert m.contraction_rate == 0
    assert m.starter_diversity == 0


def test_single_word_without_terminator():
    m = extract_metrics("hello")
    assert m.sentence_count == 1
    assert m.word_count == 1
    assert m.lexical_diversity == 1.0
    assert m.sentence_length_variation == 0
    assert m.starter_diversity == 1.0


def test_split_sentences_drops_blank_fragments():
    assert split_sentences("One. Two!!  ?? Three?") == ["One", " Two", " Three"]


def test_passive_proxy_counts_regular_participles_only():
    m = extract_metrics("The report was completed. The data were processed quickly.")
    assert m.passive_rate == 1.0

    irregular = extract_metrics("The letter was written. The song was sung.")
    assert irregular.passive_rate == 0


def test_contractions_are_case_insensitive_and_whole_word():
    m = extract_metrics("DON'T stop. I dont care.")
    assert m.contraction_rate == 0.5


def test_fillers_match_whole_words_and_phrases():
    assert extract_metrics("I like it. She is likely here.").filler_rate == 0.5
    assert extract_metrics("It was kind of odd. You know it.").filler_rate == 1.0


def test_starters_are_case_folded():
    m = extract_metrics("The cat sat. the dog ran. A bird flew. THE end.")
    assert m.starter_diversity == 0.5


def test_extraction_is_deterministic():
    assert extract_metrics(CASUAL_TEXT) == extract_metrics(CASUAL_TEXT)


def test_to_dict_uses_camel_case():
    data = extract_metrics("hello").to_dict()
    assert set(data) == {
        "lexicalDiversity",
        "sentenceLengthVariation",
        "contractionRate",
        "fillerRate",
        "passiveRate",
        "starterDiversity",
        "wordCount",
        "sentenceCount",
    }

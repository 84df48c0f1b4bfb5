# src/e2e/test_tokenizer.py

import pytest

from speller.tokenizer import tokenize, iter_tokens, split_request


def test_lowercases_and_splits_words():
    assert tokenize("Le Chat DORT") == ["le", "chat", "dort"]


def test_elisions_and_compounds_stay_whole():
    assert tokenize("L'école, peut-être.") == ["l'école", ",", "peut-être", "."]


def test_typographic_apostrophe_is_unified():
    assert tokenize("l’arbre") == ["l'arbre"]


def test_accented_letters_and_ligatures():
    assert tokenize("Œuvre façade ÉTÉ") == ["œuvre", "façade", "été"]


def test_punctuation_is_one_token_per_char():
    assert tokenize("Quoi?!...") == ["quoi", "?", "!", ".", ".", "."]


def test_url_wins_over_word_and_punct():
    toks = tokenize("voir https://exemple.fr/page?id=3 et www.site.com maintenant")
    assert "https://exemple.fr/page?id=3" in toks
    assert "www.site.com" in toks
    assert toks[0] == "voir" and toks[-1] == "maintenant"


def test_email_is_one_token():
    assert tokenize("Écrire à Jean.Dupont@Mail.fr svp") == ["écrire", "à", "jean.dupont@mail.fr", "svp"]


def test_digits_and_whitespace_are_skipped():
    assert tokenize("  en 2024\tet\n") == ["en", "et"]


def test_empty_input():
    assert tokenize("") == []
    assert tokenize("   ") == []


def test_restartable_and_deterministic():
    text = "Le chat, le chien."
    assert list(iter_tokens(text)) == list(iter_tokens(text)) == tokenize(text)


def test_split_request_whitespace_keeps_glued_punctuation():
    assert split_request("Le Chatt, dort", "whitespace") == ["le", "chatt,", "dort"]


def test_split_request_tokens_mode():
    assert split_request("Le Chatt, dort", "tokens") == ["le", "chatt", ",", "dort"]


def test_split_request_rejects_unknown_mode():
    with pytest.raises(ValueError):
        split_request("x", "bogus")

from aidetect.utils.sentence_tokenizer import count_words, tokenize


class TestTokenize:

    def test_splits_on_terminal_punctuation(self):
        assert tokenize("Hello world. How are you? Fine!") == [
            "Hello world.",
            "How are you?",
            "Fine!",
        ]

    def test_empty_input(self):
        assert tokenize("") == []

    def test_whitespace_only_input(self):
        assert tokenize("   \n\t  ") == []

    def test_unterminated_text_is_one_sentence(self):
        assert tokenize("  no punctuation here at all  ") == ["no punctuation here at all"]

    def test_trailing_remainder_becomes_last_sentence(self):
        assert tokenize("First one. and then some more") == ["First one.", "and then some more"]

    def test_short_fragments_are_dropped(self):
        """Fragments of 3 characters or fewer are discarded."""
        assert tokenize("Ok. This is fine.") == ["This is fine."]
        assert tokenize("Yes! Sure.") == ["Yes!", "Sure."]

    def test_closing_quote_stays_with_sentence(self):
        assert tokenize('He said "stop." Then he left') == ['He said "stop."', "Then he left"]

    def test_punctuation_runs_close_one_sentence(self):
        assert tokenize("Wait... what?! No way.") == ["Wait...", "what?!", "No way."]

    def test_trailing_newline_is_not_a_sentence(self):
        assert tokenize("Hello there.\n") == ["Hello there."]

    def test_punctuation_only_input(self):
        assert tokenize("!!!!!!!!!!!!!!!!!!!!!!!!") == []


class TestCountWords:

    def test_counts_whitespace_separated_words(self):
        assert count_words("one  two\tthree\nfour") == 4

    def test_empty(self):
        assert count_words("") == 0
